"""
Data models for dupesweep.

Contains dataclasses for fingerprints, scan configuration, scan results and
the progress/log events emitted by the scanner.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_MAX_DISTANCE,
    DEFAULT_WORKERS,
)
from .utils.validators import (
    validate_directory,
    validate_extensions,
    validate_max_distance,
    validate_workers,
)


class ConfigurationError(ValueError):
    """Raised when a scan is requested with settings it cannot run with."""


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """
    Normalize extensions to lower case with a leading dot.

    Examples:
        >>> sorted(normalize_extensions(['JPG', '.Png', ' webp ']))
        ['.jpg', '.png', '.webp']
    """
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith('.'):
            ext = '.' + ext
        normalized.add(ext)
    return frozenset(normalized)


def hamming_distance(a: int, b: int) -> int:
    """Number of differing bits between two fingerprints."""
    return bin(a ^ b).count('1')


@dataclass(frozen=True)
class FileFingerprint:
    """
    Perceptual fingerprint of one image file.

    Attributes:
        path: Full path to the image file
        hash: 64-bit perceptual hash as an unsigned integer
    """
    path: str
    hash: int

    @property
    def filename(self) -> str:
        """Return just the filename portion of the path."""
        return os.path.basename(self.path)

    @property
    def hex(self) -> str:
        """Return the hash as 16 hex digits."""
        return f"{self.hash:016x}"

    def distance(self, other: 'FileFingerprint') -> int:
        """Hamming distance to another fingerprint."""
        return hamming_distance(self.hash, other.hash)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'path': self.path,
            'filename': self.filename,
            'hash': self.hex,
        }


@dataclass(frozen=True)
class ScanConfig:
    """
    Settings for a single scan. Immutable once the scan starts.

    Attributes:
        extensions: Allowed file extensions (lower case, leading dot)
        exclude: Paths containing this substring are skipped (case-insensitive)
        max_distance: Maximum Hamming distance that still counts as duplicate
        workers: Number of parallel fingerprinting workers
    """
    extensions: frozenset = DEFAULT_EXTENSIONS
    exclude: str = ""
    max_distance: int = DEFAULT_MAX_DISTANCE
    workers: int = DEFAULT_WORKERS

    def __post_init__(self):
        object.__setattr__(self, 'extensions', normalize_extensions(self.extensions))

    def validate(self) -> None:
        """
        Check that the configuration can be used for a scan.

        Raises:
            ConfigurationError: If any setting is out of range
        """
        for is_valid, error in (
            validate_extensions(self.extensions),
            validate_max_distance(self.max_distance),
            validate_workers(self.workers),
        ):
            if not is_valid:
                raise ConfigurationError(error)

    @classmethod
    def from_user_config(
        cls,
        exclude: str = "",
        extensions: Optional[Iterable[str]] = None,
        max_distance: Optional[int] = None,
        workers: Optional[int] = None,
    ) -> 'ScanConfig':
        """
        Build a config from runtime arguments, falling back to user settings.

        Arguments that are None are taken from the user configuration
        (environment variables, config file, then built-in defaults).

        Raises:
            ConfigurationError: If a user setting cannot be converted
        """
        from .user_config import get_user_config

        user_config = get_user_config()
        try:
            return cls(
                extensions=frozenset(extensions if extensions is not None else user_config.default_extensions),
                exclude=exclude,
                max_distance=max_distance if max_distance is not None else user_config.default_max_distance,
                workers=workers if workers is not None else user_config.default_workers,
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid user configuration: {e}") from e


def validate_root(directory: str) -> None:
    """
    Check that a scan root exists and is readable.

    Raises:
        ConfigurationError: If the directory cannot be scanned
    """
    is_valid, error = validate_directory(directory)
    if not is_valid:
        raise ConfigurationError(error)


@dataclass
class ScanResult:
    """
    Partition of fingerprints into unique images and duplicates.

    Attributes:
        uniques: Fingerprints kept as unique, in classification order
        duplicates: Paths classified as duplicates, in classification order
        matches: Maps each duplicate path to the unique path it matched
    """
    uniques: list = field(default_factory=list)
    duplicates: list = field(default_factory=list)
    matches: dict = field(default_factory=dict)

    @property
    def unique_count(self) -> int:
        return len(self.uniques)

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicates)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'uniques': [fp.to_dict() for fp in self.uniques],
            'duplicates': list(self.duplicates),
            'matches': dict(self.matches),
        }


@dataclass(frozen=True)
class ProgressEvent:
    """Emitted after every fingerprinting attempt."""
    completed: int
    total: int

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 100
        return int(self.completed / self.total * 100)


@dataclass(frozen=True)
class LogEvent:
    """Free-text diagnostic. Never affects control flow."""
    message: str
    level: int = logging.INFO


@dataclass
class RelocationReport:
    """
    Outcome of moving duplicates into the quarantine folder.

    Attributes:
        moved: Maps each moved source path to its new location
        skipped: Sources that no longer existed
        errors: Maps each source that failed to move to the error message
    """
    moved: dict = field(default_factory=dict)
    skipped: list = field(default_factory=list)
    errors: dict = field(default_factory=dict)

    @property
    def moved_count(self) -> int:
        return len(self.moved)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'moved': dict(self.moved),
            'skipped': list(self.skipped),
            'errors': dict(self.errors),
            'moved_count': self.moved_count,
            'error_count': self.error_count,
        }


@dataclass
class ScanOutcome:
    """
    Everything one scan produced.

    ``result`` is None when the scan was cancelled before classification.
    ``attempted`` counts the files the pipeline tried, which is fewer than
    ``files`` after a cancel.
    """
    root: str
    duplicate_folder: str
    files: list = field(default_factory=list)
    fingerprints: list = field(default_factory=list)
    attempted: int = 0
    result: Optional[ScanResult] = None
    cancelled: bool = False
    elapsed_seconds: float = 0.0

    @property
    def failed_count(self) -> int:
        """Files that were attempted but could not be fingerprinted."""
        return max(self.attempted - len(self.fingerprints), 0)
