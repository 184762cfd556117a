"""
Report formatting and display for the CLI interface.

Provides functions to print scan and relocation results, and a plain-text
progress printer for consoles without tqdm.
"""

from __future__ import annotations

import sys
from typing import Callable

from ..models import ProgressEvent, RelocationReport, ScanOutcome
from ..utils.formatters import format_number, format_summary


def _print_section_header(title: str) -> None:
    """Print a section header with divider lines."""
    print("\n" + "-" * 70)
    print(title)
    print("-" * 70)


def make_progress_printer(every: int = 10) -> Callable:
    """
    Build an event subscriber that prints fingerprinting progress.

    Prints every ``every`` files and on the last one, overwriting the line.
    """
    def handle(event) -> None:
        if not isinstance(event, ProgressEvent):
            return
        if event.completed % every == 0 or event.completed == event.total:
            sys.stdout.write(
                f"\rProgress: {format_number(event.completed)}/{format_number(event.total)} images processed..."
            )
            if event.completed == event.total:
                sys.stdout.write("\n")
            sys.stdout.flush()

    return handle


def print_scan_report(outcome: ScanOutcome) -> None:
    """
    Print a report of a finished scan.

    Notes:
        - Counts are always printed, including files that failed to decode
        - Each duplicate is listed with the unique image it matched
    """
    print("\n" + "=" * 70)
    print("DUPLICATE IMAGE REPORT")
    print("=" * 70)

    print(f"\nDirectory: {outcome.root}")
    print(f"Image files found: {format_number(len(outcome.files))}")
    print(f"Fingerprinted: {format_number(len(outcome.fingerprints))}")
    if outcome.failed_count:
        print(f"Could not read: {format_number(outcome.failed_count)}")

    if outcome.cancelled or outcome.result is None:
        print("\nScan cancelled.")
        print("=" * 70)
        return

    result = outcome.result
    if result.duplicates:
        _print_section_header("DUPLICATES (visually similar)")
        for path in result.duplicates:
            print(f"  [DUPE] {path}")
            print(f"         ≈ {result.matches.get(path, '?')}")

    print("\n" + "=" * 70)
    print(format_summary(result.unique_count, result.duplicate_count, outcome.elapsed_seconds))
    print("=" * 70)


def print_relocation_report(report: RelocationReport, target: str) -> None:
    """Print the outcome of moving duplicates."""
    print(f"\n{format_number(report.moved_count)} duplicates moved to '{target}'.")
    if report.skipped:
        print(f"Skipped (no longer present): {format_number(len(report.skipped))}")
    if report.errors:
        print(f"Errors: {format_number(report.error_count)}")
        for path, error in report.errors.items():
            print(f"  {path}: {error}")


__all__ = ['make_progress_printer', 'print_scan_report', 'print_relocation_report']
