"""
Utilities package for dupesweep.

Provides:
- formatters: Human-readable formatting for numbers, times and summaries
- validators: Input validation for scan parameters
- platform: Platform-specific helpers (opening folders)
"""

from __future__ import annotations

from . import formatters
from . import validators
from . import platform

from .formatters import format_number, format_elapsed, format_summary
from .validators import (
    validate_directory,
    validate_max_distance,
    validate_workers,
    validate_extensions,
    validate_scan_params,
)
from .platform import open_folder

__all__ = [
    # Submodules
    'formatters',
    'validators',
    'platform',
    # Formatters
    'format_number',
    'format_elapsed',
    'format_summary',
    # Validators
    'validate_directory',
    'validate_max_distance',
    'validate_workers',
    'validate_extensions',
    'validate_scan_params',
    # Platform
    'open_folder',
]
