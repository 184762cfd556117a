"""
Interactive prompts for the CLI interface.

Provides the prompts of the interactive menu: folder selection, move
confirmation, opening the quarantine folder and the "new scan / quit" choice.
"""

from __future__ import annotations

from pathlib import Path


def prompt_for_directory() -> Path:
    """
    Interactively prompt user for a directory to scan.

    Returns:
        Path object for the validated directory

    Notes:
        - Loops until a valid directory is provided
        - Handles quoted paths (strips quotes)
    """
    print("\n" + "=" * 50)
    print("  DUPESWEEP - IMAGE DUPLICATE FINDER")
    print("=" * 50)

    while True:
        dir_input = input("\nEnter the directory path to scan: ").strip()
        if not dir_input:
            print("Please enter a valid path.")
            continue

        # Handle quotes around path (common when copy-pasting)
        dir_input = dir_input.strip('"\'')
        directory = Path(dir_input)

        if directory.exists() and directory.is_dir():
            return directory
        else:
            print(f"Directory not found: {directory}")
            print("Please try again.")


def confirm_action(action: str, count: int) -> bool:
    """
    Prompt user to confirm a file action.

    Returns:
        True if user confirms (types 'y'), False otherwise

    Examples:
        >>> confirm_action('move', 10)
        This will move 10 files. Continue? [y/N]: y
        True
    """
    confirm = input(f"\nThis will {action} {count:,} files. Continue? [y/N]: ")
    return confirm.strip().lower() == 'y'


def ask_open_folder() -> bool:
    """Ask whether the quarantine folder should be opened."""
    response = input("Open the duplicates folder? [y/N]: ")
    return response.strip().lower() == 'y'


def prompt_next_step() -> bool:
    """
    Show the menu after a scan.

    Returns:
        True for a new scan, False to quit. Anything other than '1' quits.
    """
    print("\nWhat next?")
    print("1. New scan")
    print("2. Quit")
    choice = input("Choice: ").strip()
    return choice == '1'


__all__ = [
    'prompt_for_directory',
    'confirm_action',
    'ask_open_folder',
    'prompt_next_step',
]
