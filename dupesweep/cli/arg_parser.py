"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
dupesweep command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..config import DEFAULT_EXTENSIONS, DUPLICATES_FOLDER_NAME


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance

    Notes:
        - Options left unset fall back to the user configuration
          (~/.dupesweep/config.json or DUPESWEEP_* environment variables)
        - Without a directory the interactive menu is started
    """
    parser = argparse.ArgumentParser(
        prog='dupesweep-cli',
        description='Find near-duplicate images and move them into a quarantine folder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s
      Interactive mode: ask for a folder, scan, move, repeat

  %(prog)s /path/to/photos
      Scan for duplicates (report only, no changes)

  %(prog)s /path/to/photos --action move --yes
      Move duplicates to /path/to/photos/{DUPLICATES_FOLDER_NAME} without asking

  %(prog)s /path/to/photos --max-distance 0
      Only bit-identical fingerprints count as duplicates

  %(prog)s /path/to/photos -e .jpg .png --workers 2
      Scan JPEG and PNG files only, with two worker threads
        """
    )

    parser.add_argument(
        'directory',
        type=Path,
        nargs='?',
        default=None,
        help='Directory to scan (omit for interactive mode)'
    )

    parser.add_argument(
        '-t', '--max-distance',
        type=int,
        default=None,
        help='Maximum Hamming distance between fingerprints (0-64, lower=stricter)'
    )

    parser.add_argument(
        '-e', '--extensions',
        nargs='+',
        default=None,
        metavar='EXT',
        help=f'File extensions to scan. Default: {" ".join(sorted(DEFAULT_EXTENSIONS))}'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='Number of parallel fingerprinting workers. Default: CPU count'
    )

    parser.add_argument(
        '-a', '--action',
        choices=['report', 'move'],
        default='report',
        help='What to do with duplicates. Default: report'
    )

    parser.add_argument(
        '--target',
        type=Path,
        default=None,
        help=f'Quarantine folder for --action move. Default: <directory>/{DUPLICATES_FOLDER_NAME}'
    )

    parser.add_argument(
        '-y', '--yes',
        action='store_true',
        help='Do not ask for confirmation before moving files'
    )

    parser.add_argument(
        '--open',
        action='store_true',
        help='Open the quarantine folder after moving'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress output (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Examples:
        >>> args = parse_arguments(['/path/to/photos', '--max-distance', '5'])
        >>> args.max_distance
        5
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
