"""
Parallel fingerprinting for the scanner package.

Turns a list of file paths into FileFingerprint objects using a fixed-size
thread pool. Files that fail to decode are logged and left out; they never
stop the batch. Progress is reported after every attempted file.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterable, Optional

from ..config import DEFAULT_WORKERS
from ..events import EventChannel, emit_log
from ..models import FileFingerprint
from .dependencies import HAS_TQDM, _tqdm_class
from .fingerprint import compute_fingerprint

_logger = logging.getLogger(__name__)

_MAX_FINGERPRINT = 2 ** 64


class _ProgressCounter:
    """Completed-file counter shared by all workers."""

    def __init__(self, total: int, events: Optional[EventChannel], pbar: Optional[Any]):
        self.total = total
        self._events = events
        self._pbar = pbar
        self._completed = 0
        self._lock = threading.Lock()

    @property
    def completed(self) -> int:
        with self._lock:
            return self._completed

    def increment(self) -> int:
        # Emitting under the lock keeps observed counts non-decreasing
        with self._lock:
            self._completed += 1
            current = self._completed
            if self._pbar is not None:
                self._pbar.update(1)
            if self._events is not None:
                self._events.progress(current, self.total)
        return current


def fingerprint_batch(
    files: Iterable[str],
    workers: int = DEFAULT_WORKERS,
    cancel_event: Optional[threading.Event] = None,
    events: Optional[EventChannel] = None,
    fingerprint_func: Callable[[str], int] = compute_fingerprint,
    show_progress: bool = False,
) -> tuple[list[FileFingerprint], int]:
    """
    Fingerprint files in parallel and count the attempts.

    Args:
        files: Paths to fingerprint. Repeated paths are processed once.
        workers: Number of worker threads
        cancel_event: Checked before each file; once set, remaining files are
            skipped and the results gathered so far are returned
        events: Channel receiving ProgressEvent and LogEvent notifications
        fingerprint_func: Fingerprint source, path -> 64-bit int
        show_progress: Whether to show a tqdm progress bar

    Returns:
        Tuple of (fingerprints, attempted). Fingerprints cover every
        successfully processed file, in input order, and are partial if the
        scan was cancelled. attempted counts files that were tried, whether
        they succeeded or failed.

    Raises:
        ValueError: If workers is less than 1
        KeyboardInterrupt: Re-raised after setting cancel_event and letting
            in-flight files finish
    """
    paths = list(dict.fromkeys(str(f) for f in files))
    if not paths:
        return [], 0

    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    if cancel_event is None:
        cancel_event = threading.Event()

    total = len(paths)
    results: list[tuple[int, FileFingerprint]] = []
    results_lock = threading.Lock()

    pbar: Optional[Any] = None
    if HAS_TQDM and show_progress and _tqdm_class is not None:
        pbar = _tqdm_class(total=total, desc="Fingerprinting", unit="img", ncols=80)

    counter = _ProgressCounter(total, events, pbar)

    def work(index: int, path: str) -> None:
        if cancel_event.is_set():
            return
        try:
            value = int(fingerprint_func(path))
            if not 0 <= value < _MAX_FINGERPRINT:
                raise ValueError(f"fingerprint {value} is not a 64-bit unsigned value")
            fingerprint = FileFingerprint(path=path, hash=value)
            with results_lock:
                results.append((index, fingerprint))
        except Exception as e:
            _logger.debug(f"Fingerprint failed for {path}: {e}")
            emit_log(events, f"Error at {os.path.basename(path)}: {e}", logging.WARNING)
        finally:
            counter.increment()

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fingerprint")
    try:
        futures = [executor.submit(work, index, path) for index, path in enumerate(paths)]
        for future in as_completed(futures):
            future.result()
            if cancel_event.is_set():
                break
    except KeyboardInterrupt:
        cancel_event.set()
        raise
    finally:
        # Pending files are dropped; files already being decoded finish
        executor.shutdown(wait=True, cancel_futures=True)
        if pbar is not None:
            pbar.close()

    if cancel_event.is_set():
        emit_log(
            events,
            f"Fingerprinting cancelled after {counter.completed:,} of {total:,} files",
            logging.WARNING,
        )

    with results_lock:
        ordered = sorted(results, key=lambda item: item[0])
    return [fingerprint for _, fingerprint in ordered], counter.completed


def compute_fingerprints(
    files: Iterable[str],
    workers: int = DEFAULT_WORKERS,
    cancel_event: Optional[threading.Event] = None,
    events: Optional[EventChannel] = None,
    fingerprint_func: Callable[[str], int] = compute_fingerprint,
    show_progress: bool = False,
) -> list[FileFingerprint]:
    """
    Fingerprint files in parallel.

    Same as ``fingerprint_batch`` without the attempt count.

    Returns:
        Fingerprints of every successfully processed file, in input order.
        Partial if the scan was cancelled.
    """
    fingerprints, _ = fingerprint_batch(
        files,
        workers=workers,
        cancel_event=cancel_event,
        events=events,
        fingerprint_func=fingerprint_func,
        show_progress=show_progress,
    )
    return fingerprints


__all__ = ['compute_fingerprints', 'fingerprint_batch']
