"""
State management for the dupesweep GUI.

Holds the in-memory state of the current scan: status, progress, the log
list shown in the browser, and the outcome needed for moving duplicates.
Nothing is persisted; every scan starts from scratch.
"""

import threading
import time
from typing import Optional

from .config import GUI_LOG_LIMIT
from .models import LogEvent, ProgressEvent, RelocationReport, ScanOutcome
from .utils.formatters import format_number, format_summary

RUNNING_STATUSES = ('searching', 'fingerprinting', 'comparing')


class ScanState:
    """
    Shared state between the Flask request threads and the scan thread.

    Scan progress arrives through ``handle_event``, which is subscribed to the
    scan's EventChannel and therefore runs on worker threads.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._cancel_event = threading.Event()
        self.reset()

    def reset(self):
        """Reset state to initial values."""
        with self._lock:
            self._cancel_event = threading.Event()
            self.status = 'idle'  # idle, searching, fingerprinting, comparing, complete, cancelled, error, moved
            self.message = 'Ready'
            self.directory = ''
            self.completed = 0
            self.total = 0
            self.started_at: Optional[float] = None
            self.elapsed_seconds = 0.0
            self.outcome: Optional[ScanOutcome] = None
            self.relocation: Optional[RelocationReport] = None
            self._log: list[str] = []
            self._log_start = 0

    @property
    def cancel_event(self) -> threading.Event:
        return self._cancel_event

    @property
    def cancel_requested(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self.status in RUNNING_STATUSES

    def request_cancel(self):
        """Request cancellation of the current scan."""
        self._cancel_event.set()

    def begin(self, directory: str) -> bool:
        """
        Start tracking a new scan.

        Returns:
            False if a scan is already running, True otherwise
        """
        with self._lock:
            if self.status in RUNNING_STATUSES:
                return False
            self.reset()
            self.status = 'searching'
            self.message = 'Searching for images...'
            self.directory = directory
            self.started_at = time.time()
            return True

    def handle_event(self, event):
        """EventChannel subscriber: record progress and log lines."""
        if isinstance(event, ProgressEvent):
            with self._lock:
                self.completed = event.completed
                self.total = event.total
                if event.completed >= event.total:
                    self.status = 'comparing'
                    self.message = 'Comparing images...'
                else:
                    self.status = 'fingerprinting'
                    self.message = (
                        f'Processing {format_number(event.completed)} of '
                        f'{format_number(event.total)} images...'
                    )
        elif isinstance(event, LogEvent):
            self.add_log(event.message)

    def add_log(self, message: str):
        with self._lock:
            self._log.append(message)
            overflow = len(self._log) - GUI_LOG_LIMIT
            if overflow > 0:
                del self._log[:overflow]
                self._log_start += overflow

    def log_since(self, index: int) -> tuple[list[str], int]:
        """
        Return log lines from a running index onwards.

        Returns:
            Tuple of (lines, next index to ask for)
        """
        with self._lock:
            offset = max(index - self._log_start, 0)
            return list(self._log[offset:]), self._log_start + len(self._log)

    def _stop_clock(self):
        if self.started_at is not None:
            self.elapsed_seconds = time.time() - self.started_at

    def finish(self, outcome: ScanOutcome):
        """Record the outcome of a scan that ran to the end or was cancelled."""
        with self._lock:
            self.outcome = outcome
            self._stop_clock()
            if outcome.cancelled:
                self.status = 'cancelled'
                self.message = 'Scan canceled.'
            elif not outcome.files:
                self.status = 'complete'
                self.message = 'No images found.'
            else:
                self.status = 'complete'
                self.message = format_summary(
                    outcome.result.unique_count,
                    outcome.result.duplicate_count,
                    self.elapsed_seconds,
                )

    def fail(self, message: str):
        """Record a scan that stopped with an error."""
        with self._lock:
            self._stop_clock()
            self.status = 'error'
            self.message = message

    def record_relocation(self, report: RelocationReport):
        with self._lock:
            self.relocation = report
            self.status = 'moved'
            folder = self.outcome.duplicate_folder if self.outcome else ''
            self.message = f"{format_number(report.moved_count)} duplicates moved to '{folder}'."

    @property
    def duplicates(self) -> list:
        with self._lock:
            if self.outcome is None or self.outcome.result is None:
                return []
            return list(self.outcome.result.duplicates)

    @property
    def duplicate_folder(self) -> str:
        with self._lock:
            return self.outcome.duplicate_folder if self.outcome else ''

    def to_status_dict(self) -> dict:
        """Return current status for API response."""
        with self._lock:
            elapsed = self.elapsed_seconds
            if self.status in RUNNING_STATUSES and self.started_at is not None:
                elapsed = time.time() - self.started_at
            result = self.outcome.result if self.outcome else None
            return {
                'status': self.status,
                'message': self.message,
                'directory': self.directory,
                'completed': self.completed,
                'total': self.total,
                'percent': int(self.completed / self.total * 100) if self.total else 0,
                'elapsed_seconds': round(elapsed, 1),
                'cancel_requested': self.cancel_requested,
                'files_found': len(self.outcome.files) if self.outcome else 0,
                'failed_count': self.outcome.failed_count if self.outcome else 0,
                'unique_count': result.unique_count if result else 0,
                'duplicate_count': result.duplicate_count if result else 0,
                'duplicate_folder': self.outcome.duplicate_folder if self.outcome else '',
                'can_move': bool(result and result.duplicates) and self.status == 'complete',
                'relocation': self.relocation.to_dict() if self.relocation else None,
                'log_size': self._log_start + len(self._log),
            }


# Global state instance for the application
scan_state = ScanState()
