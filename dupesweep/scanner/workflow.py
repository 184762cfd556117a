"""
Scan workflow for the scanner package.

Wires file discovery, fingerprinting, classification and relocation together.
Both the CLI and the web GUI drive scans through these two functions.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from ..events import EventChannel, emit_log
from ..models import (
    RelocationReport,
    ScanConfig,
    ScanOutcome,
    ScanResult,
    validate_root,
)
from .classifier import classify
from .file_discovery import find_image_files
from .fingerprint import compute_fingerprint
from .pipeline import fingerprint_batch
from .relocation import relocate

_logger = logging.getLogger(__name__)


def default_duplicate_folder(root: str | Path) -> str:
    """Quarantine folder for a scan root, e.g. '/photos/duplicates'."""
    from ..user_config import get_user_config

    return os.path.join(str(root), get_user_config().duplicates_folder_name)


def run_scan(
    root: str | Path,
    config: Optional[ScanConfig] = None,
    cancel_event: Optional[threading.Event] = None,
    events: Optional[EventChannel] = None,
    duplicate_folder: Optional[str | Path] = None,
    show_progress: bool = False,
    fingerprint_func: Callable[[str], int] = compute_fingerprint,
) -> ScanOutcome:
    """
    Find near-duplicate images under a directory.

    Args:
        root: Directory to scan
        config: Scan settings (default: user configuration)
        cancel_event: Set from another thread to stop fingerprinting early
        events: Channel receiving progress and log events
        duplicate_folder: Quarantine folder (default: <root>/duplicates).
            It is excluded from the scan unless config.exclude says otherwise.
        show_progress: Whether to show a tqdm progress bar
        fingerprint_func: Fingerprint source, path -> 64-bit int

    Returns:
        ScanOutcome. When cancelled, ``cancelled`` is True, ``fingerprints``
        holds the partial results and ``result`` is None.

    Raises:
        ConfigurationError: If the root or the settings are invalid. Raised
            before any file is touched.
    """
    if config is None:
        config = ScanConfig.from_user_config()
    validate_root(str(root))
    config.validate()

    if cancel_event is None:
        cancel_event = threading.Event()

    root_path = str(Path(root).resolve())
    if duplicate_folder is None:
        duplicate_folder = default_duplicate_folder(root_path)
    duplicate_folder = str(Path(duplicate_folder).resolve())
    exclude = config.exclude or duplicate_folder

    start_time = time.time()
    outcome = ScanOutcome(root=root_path, duplicate_folder=duplicate_folder)

    _logger.info(f"Scanning {root_path} for images...")
    outcome.files = find_image_files(root_path, config.extensions, exclude)
    emit_log(events, f"Found {len(outcome.files):,} image files")

    if not outcome.files:
        outcome.result = ScanResult()
        outcome.elapsed_seconds = time.time() - start_time
        return outcome

    outcome.fingerprints, outcome.attempted = fingerprint_batch(
        outcome.files,
        workers=config.workers,
        cancel_event=cancel_event,
        events=events,
        fingerprint_func=fingerprint_func,
        show_progress=show_progress,
    )

    if cancel_event.is_set():
        outcome.cancelled = True
        outcome.elapsed_seconds = time.time() - start_time
        return outcome

    outcome.result = classify(outcome.fingerprints, config.max_distance, events)
    outcome.elapsed_seconds = time.time() - start_time
    return outcome


def quarantine_duplicates(
    outcome: ScanOutcome,
    events: Optional[EventChannel] = None,
) -> RelocationReport:
    """
    Move the duplicates found by a scan into its quarantine folder.

    Cancelled scans have no classification, so nothing is moved.
    """
    if outcome.result is None:
        return RelocationReport()

    report = relocate(outcome.result.duplicates, outcome.duplicate_folder, events)
    if report.moved_count:
        emit_log(events, f"{report.moved_count:,} duplicates moved to '{outcome.duplicate_folder}'")
    return report


__all__ = ['default_duplicate_folder', 'run_scan', 'quarantine_duplicates']
