"""
Input validation for dupesweep.

Provides validators for scan roots and scan parameters.
Every validator returns an ``(is_valid, error_message)`` tuple.
"""

from __future__ import annotations

import os
from typing import Iterable, Optional

from ..config import MAX_HASH_DISTANCE


def validate_directory(directory: str) -> tuple[bool, str]:
    """
    Validate that a directory exists and is accessible.

    Args:
        directory: Directory path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    directory = str(directory)

    if not os.path.exists(directory):
        return False, f"Directory not found: {directory}"

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


def validate_max_distance(max_distance) -> tuple[bool, str]:
    """
    Validate the Hamming distance tolerance.

    Examples:
        >>> validate_max_distance(3)
        (True, '')
        >>> validate_max_distance(-1)
        (False, 'Max distance must be between 0 and 64')
    """
    if isinstance(max_distance, bool):
        return False, "Max distance must be an integer"
    try:
        max_distance = int(max_distance)
    except (ValueError, TypeError):
        return False, "Max distance must be an integer"
    if not 0 <= max_distance <= MAX_HASH_DISTANCE:
        return False, f"Max distance must be between 0 and {MAX_HASH_DISTANCE}"
    return True, ""


def validate_workers(workers) -> tuple[bool, str]:
    """
    Validate the number of fingerprinting workers.

    Examples:
        >>> validate_workers(0)
        (False, 'Workers must be at least 1')
    """
    if isinstance(workers, bool):
        return False, "Workers must be an integer"
    try:
        workers = int(workers)
    except (ValueError, TypeError):
        return False, "Workers must be an integer"
    if workers < 1:
        return False, "Workers must be at least 1"
    return True, ""


def validate_extensions(extensions: Optional[Iterable[str]]) -> tuple[bool, str]:
    """
    Validate that at least one file extension is selected.

    Examples:
        >>> validate_extensions([])
        (False, 'Please select at least one file extension')
    """
    if not extensions or not any(str(ext).strip() for ext in extensions):
        return False, "Please select at least one file extension"
    return True, ""


def validate_scan_params(
    directory: str,
    max_distance=None,
    workers=None,
    extensions: Optional[Iterable[str]] = None,
) -> tuple[bool, str]:
    """
    Validate all scan parameters.

    Parameters left as None are not checked.

    Examples:
        >>> validate_scan_params('/nonexistent', max_distance=3)
        (False, 'Directory not found: /nonexistent')
    """
    is_valid, error = validate_directory(directory)
    if not is_valid:
        return False, error

    if max_distance is not None:
        is_valid, error = validate_max_distance(max_distance)
        if not is_valid:
            return False, error

    if workers is not None:
        is_valid, error = validate_workers(workers)
        if not is_valid:
            return False, error

    if extensions is not None:
        is_valid, error = validate_extensions(extensions)
        if not is_valid:
            return False, error

    return True, ""


__all__ = [
    'validate_directory',
    'validate_max_distance',
    'validate_workers',
    'validate_extensions',
    'validate_scan_params',
]
