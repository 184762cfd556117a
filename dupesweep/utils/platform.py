"""
Platform-specific helpers for dupesweep.

Opening a folder in the desktop file browser differs per operating system.
"""

from __future__ import annotations

import logging
import os
import platform as platform_module
import subprocess
from pathlib import Path

_logger = logging.getLogger(__name__)


def open_folder(folder: str | Path) -> bool:
    """
    Open a folder in the platform's file browser.

    Args:
        folder: Folder to open

    Returns:
        True if a file browser was launched, False if the folder does not
        exist or no launcher is available

    Notes:
        - Windows uses os.startfile
        - macOS uses 'open', everything else 'xdg-open'
    """
    folder = str(folder)
    if not os.path.isdir(folder):
        return False

    system = platform_module.system()
    try:
        if system == 'Windows':
            os.startfile(folder)  # type: ignore[attr-defined]
        elif system == 'Darwin':
            subprocess.Popen(['open', folder])
        else:
            subprocess.Popen(['xdg-open', folder])
    except OSError as e:
        _logger.warning(f"Could not open folder {folder}: {e}")
        return False
    return True


__all__ = ['open_folder']
