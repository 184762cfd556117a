"""
CLI package for dupesweep.

Provides the command-line interface for scanning a folder for near-duplicate
images and moving them into a quarantine folder, either scripted through
arguments or through the interactive menu.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- print_scan_report: Function to display results report
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .reporting import make_progress_printer, print_scan_report, print_relocation_report
from .interactive import prompt_for_directory, confirm_action, ask_open_folder, prompt_next_step


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'make_progress_printer',
    'print_scan_report',
    'print_relocation_report',
    'prompt_for_directory',
    'confirm_action',
    'ask_open_folder',
    'prompt_next_step',
]
