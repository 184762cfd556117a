"""
dupesweep
=========
Finds visually near-identical images in a folder tree and moves the
duplicates into a quarantine folder.

Features:
- 64-bit perceptual fingerprints (pHash) computed in parallel
- Configurable Hamming-distance tolerance
- Deterministic greedy clustering (first matching unique wins)
- Collision-safe moves into <root>/duplicates
- Cancellable scans with progress and log events
- Web GUI and CLI (scripted or interactive)
"""

__version__ = "1.0.0"

from .models import (
    ConfigurationError,
    FileFingerprint,
    LogEvent,
    ProgressEvent,
    RelocationReport,
    ScanConfig,
    ScanOutcome,
    ScanResult,
)
from .config import DEFAULT_EXTENSIONS, DEFAULT_MAX_DISTANCE, DUPLICATES_FOLDER_NAME
from .events import EventChannel, forward_to_logger
from .scanner import (
    classify,
    compute_fingerprint,
    compute_fingerprints,
    find_image_files,
    quarantine_duplicates,
    relocate,
    run_scan,
)

__all__ = [
    "ConfigurationError",
    "FileFingerprint",
    "LogEvent",
    "ProgressEvent",
    "RelocationReport",
    "ScanConfig",
    "ScanOutcome",
    "ScanResult",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MAX_DISTANCE",
    "DUPLICATES_FOLDER_NAME",
    "EventChannel",
    "forward_to_logger",
    "classify",
    "compute_fingerprint",
    "compute_fingerprints",
    "find_image_files",
    "quarantine_duplicates",
    "relocate",
    "run_scan",
]
