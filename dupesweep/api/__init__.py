"""
API package for dupesweep.

Provides Flask routes and scan orchestration for the web interface.
"""

from __future__ import annotations

from .routes import api

__all__ = ['api']
