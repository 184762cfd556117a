"""
Scan orchestration for the dupesweep GUI.

Provides the ScanOrchestrator class that runs a scan on a background thread
and feeds its progress and log events into the shared ScanState.
"""

from __future__ import annotations

import logging

from ..events import EventChannel
from ..models import ConfigurationError, RelocationReport, ScanConfig
from ..scanner import run_scan, quarantine_duplicates
from ..state import ScanState

# Module logger
_logger = logging.getLogger(__name__)


class ScanOrchestrator:
    """
    Runs one scan for the GUI.

    The caller must have claimed the state with ``scan_state.begin()``
    before starting ``run`` on a thread.
    """

    def __init__(self, scan_state: ScanState, directory: str, config: ScanConfig):
        self.scan_state = scan_state
        self.directory = directory
        self.config = config

    def run(self) -> None:
        """Execute the scan. Never raises; failures end up in the state."""
        events = EventChannel()
        events.subscribe(self.scan_state.handle_event)

        try:
            outcome = run_scan(
                self.directory,
                config=self.config,
                cancel_event=self.scan_state.cancel_event,
                events=events,
            )
        except ConfigurationError as e:
            self.scan_state.fail(str(e))
            return
        except Exception as e:
            _logger.exception(f"Scan of {self.directory} failed")
            self.scan_state.fail(f"Error during scan: {e}")
            return

        self.scan_state.finish(outcome)
        _logger.info(f"{self.directory}: {self.scan_state.message}")


def move_duplicates(scan_state: ScanState) -> RelocationReport:
    """
    Move the duplicates of the last completed scan into its quarantine folder.

    Raises:
        OSError: If the quarantine folder cannot be created
    """
    events = EventChannel()
    events.subscribe(scan_state.handle_event)

    report = quarantine_duplicates(scan_state.outcome, events)
    scan_state.record_relocation(report)
    return report


__all__ = ['ScanOrchestrator', 'move_duplicates']
