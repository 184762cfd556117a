"""
Formatting utilities for dupesweep.

Provides human-readable formatting for counts and elapsed times.
"""

from __future__ import annotations


def format_number(n: int) -> str:
    """
    Format large numbers with commas for readability.

    Examples:
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{n:,}"


def format_elapsed(seconds: float) -> str:
    """
    Format an elapsed time with one decimal, as shown in scan summaries.

    Examples:
        >>> format_elapsed(12.345)
        '12.3s'
    """
    return f"{seconds:.1f}s"


def format_summary(unique_count: int, duplicate_count: int, elapsed: float) -> str:
    """
    One-line scan summary.

    Examples:
        >>> format_summary(10, 2, 1.25)
        'Scan complete (1.2s). 10 unique images, 2 duplicates found.'
    """
    return (
        f"Scan complete ({format_elapsed(elapsed)}). "
        f"{format_number(unique_count)} unique images, "
        f"{format_number(duplicate_count)} duplicates found."
    )


__all__ = ['format_number', 'format_elapsed', 'format_summary']
