"""
Scanner package for dupesweep.

Provides the near-duplicate detection engine: file discovery, parallel
perceptual fingerprinting, greedy Hamming-distance classification and
collision-safe relocation into a quarantine folder.

Public API:
- find_image_files: Discover image files in directories
- compute_fingerprint: 64-bit pHash of one image
- compute_fingerprints: Fingerprint many files in parallel
- classify: Partition fingerprints into uniques and duplicates
- relocate: Move duplicates into a quarantine folder
- run_scan / quarantine_duplicates: The whole workflow
- has_heif_support: Check if HEIC/HEIF support is available
"""

from __future__ import annotations

from .file_discovery import find_image_files
from .fingerprint import FingerprintError, compute_fingerprint
from .pipeline import compute_fingerprints, fingerprint_batch
from .classifier import classify
from .relocation import relocate
from .workflow import default_duplicate_folder, run_scan, quarantine_duplicates

from .dependencies import HAS_HEIF_SUPPORT


def has_heif_support() -> bool:
    """Check if HEIC/HEIF support is available."""
    return HAS_HEIF_SUPPORT


__all__ = [
    # File discovery
    'find_image_files',
    # Fingerprinting
    'FingerprintError',
    'compute_fingerprint',
    'compute_fingerprints',
    'fingerprint_batch',
    # Classification and relocation
    'classify',
    'relocate',
    # Workflow
    'default_duplicate_folder',
    'run_scan',
    'quarantine_duplicates',
    # Feature detection
    'has_heif_support',
]
