"""
Duplicate classification for the scanner package.

Greedy clustering of fingerprints by Hamming distance. Fingerprints are
visited in ascending hash order; each one is compared against the uniques
kept so far and becomes a duplicate of the first unique within tolerance.
Duplicates are never compared with each other, and because matching is not
transitive the result depends on visiting order, which is fixed by a stable
sort on the hash.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..events import EventChannel, emit_log
from ..models import FileFingerprint, ScanResult, hamming_distance

_logger = logging.getLogger(__name__)


def classify(
    fingerprints: Iterable[FileFingerprint],
    max_distance: int,
    events: Optional[EventChannel] = None,
) -> ScanResult:
    """
    Partition fingerprints into uniques and duplicates.

    Args:
        fingerprints: Fingerprints to classify. Ties between equal hashes
            keep the order of this sequence.
        max_distance: Maximum Hamming distance (inclusive) for a match
        events: Channel receiving a LogEvent per duplicate found

    Returns:
        ScanResult whose uniques and duplicates together contain every input
        path exactly once

    Raises:
        ValueError: If max_distance is negative

    Examples:
        >>> result = classify([FileFingerprint('a.jpg', 0xF), FileFingerprint('b.jpg', 0xF)], 0)
        >>> [fp.path for fp in result.uniques], result.duplicates
        (['a.jpg'], ['b.jpg'])
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")

    result = ScanResult()

    for candidate in sorted(fingerprints, key=lambda fp: fp.hash):
        match = None
        for entry in result.uniques:
            if hamming_distance(candidate.hash, entry.hash) <= max_distance:
                match = entry
                break

        if match is None:
            result.uniques.append(candidate)
            continue

        result.duplicates.append(candidate.path)
        result.matches[candidate.path] = match.path
        emit_log(events, f"Duplicate: {candidate.filename} ≈ {match.filename}")

    _logger.debug(
        f"Classified {result.unique_count + result.duplicate_count:,} fingerprints: "
        f"{result.unique_count:,} unique, {result.duplicate_count:,} duplicates"
    )
    return result


__all__ = ['classify']
