"""
CLI workflow orchestration for dupesweep.

Provides the CLIOrchestrator class that coordinates the CLI workflow from
argument parsing through scanning, reporting and moving duplicates, plus the
interactive menu loop used when no directory is given.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from ..events import EventChannel, forward_to_logger
from ..models import ConfigurationError, ScanConfig, ScanOutcome
from ..scanner import run_scan, quarantine_duplicates
from ..scanner.dependencies import HAS_TQDM
from ..utils.platform import open_folder
from .arg_parser import parse_arguments
from .interactive import (
    ask_open_folder,
    confirm_action,
    prompt_for_directory,
    prompt_next_step,
)
from .reporting import make_progress_printer, print_relocation_report, print_scan_report


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI scanning workflow.

    With a directory argument, runs one scan and exits. Without one, loops
    through the interactive menu until the user quits.
    """

    def __init__(self, argv: Optional[list] = None):
        """Initialize the orchestrator."""
        self.argv = argv
        self.logger = logging.getLogger(__name__)
        self.args = None
        self.config: Optional[ScanConfig] = None
        self.outcome: Optional[ScanOutcome] = None
        self.show_progress = True

    def run(self) -> int:
        """
        Execute the CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)
        """
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)
        self.show_progress = not self.args.no_progress

        if self.args.directory is None:
            return self._interactive_loop()

        return self._scan_directory(
            self.args.directory,
            action=self.args.action,
            confirm=not self.args.yes,
            target=self.args.target,
        )

    def _interactive_loop(self) -> int:
        """Prompt for folders and scan them until the user quits."""
        while True:
            directory = prompt_for_directory()
            self._scan_directory(directory, action='move', confirm=True, target=None, interactive=True)
            if not prompt_next_step():
                return 0

    def _scan_directory(
        self,
        directory: Path,
        action: str,
        confirm: bool,
        target: Optional[Path],
        interactive: bool = False,
    ) -> int:
        """
        Scan one directory, report, and apply the action.

        Returns:
            0 for success, 1 for configuration errors, 130 if cancelled
        """
        exit_code = self._configure_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._scan_phase(directory, target)
        if exit_code != 0:
            return exit_code

        print_scan_report(self.outcome)

        if action == 'move' and self.outcome.result and self.outcome.result.duplicates:
            self._move_phase(confirm, interactive)
        elif self.outcome.result is not None and not self.outcome.result.duplicates:
            self.logger.info("No duplicates found.")

        return 0

    def _configure_phase(self) -> int:
        """Build the scan configuration from arguments and user settings."""
        try:
            self.config = ScanConfig.from_user_config(
                extensions=self.args.extensions,
                max_distance=self.args.max_distance,
                workers=self.args.workers,
            )
            self.config.validate()
        except ConfigurationError as e:
            self.logger.error(str(e))
            return 1
        return 0

    def _scan_phase(self, directory: Path, target: Optional[Path]) -> int:
        """
        Run the scan, forwarding log events to the logger.

        Ctrl+C cancels fingerprinting; files already being processed finish.
        """
        events = EventChannel()
        events.subscribe(forward_to_logger(self.logger))

        use_tqdm = self.show_progress and HAS_TQDM
        if self.show_progress and not HAS_TQDM:
            events.subscribe(make_progress_printer())

        cancel_event = threading.Event()
        self.logger.info(f"Scanning {directory} (max distance {self.config.max_distance}, "
                         f"{self.config.workers} workers)...")
        try:
            self.outcome = run_scan(
                directory,
                config=self.config,
                cancel_event=cancel_event,
                events=events,
                duplicate_folder=target,
                show_progress=use_tqdm,
            )
        except ConfigurationError as e:
            self.logger.error(str(e))
            return 1
        except KeyboardInterrupt:
            self.logger.warning("Scan cancelled.")
            return 130

        if not self.outcome.files:
            self.logger.info("No images found.")
        return 0

    def _move_phase(self, confirm: bool, interactive: bool) -> None:
        """Move duplicates into the quarantine folder and report."""
        duplicates = self.outcome.result.duplicates
        if confirm and not confirm_action('move', len(duplicates)):
            self.logger.info("Aborted.")
            return

        events = EventChannel()
        events.subscribe(forward_to_logger(self.logger))
        try:
            report = quarantine_duplicates(self.outcome, events)
        except OSError as e:
            self.logger.error(f"Cannot create duplicates folder {self.outcome.duplicate_folder}: {e}")
            return

        print_relocation_report(report, self.outcome.duplicate_folder)

        if not report.moved_count:
            return
        if self.args.open or (interactive and ask_open_folder()):
            open_folder(self.outcome.duplicate_folder)


__all__ = ['CLIOrchestrator', 'setup_logging']
