"""
Relocation of duplicates for the scanner package.

Moves duplicate files into a quarantine folder without ever overwriting a
file that is already there.
"""

from __future__ import annotations

import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import Iterable, Optional

from ..config import COLLISION_SUFFIX_LENGTH
from ..events import EventChannel, emit_log
from ..models import RelocationReport

_logger = logging.getLogger(__name__)


def _random_token() -> str:
    return uuid.uuid4().hex[:COLLISION_SUFFIX_LENGTH]


def _destination_for(source: Path, target_dir: Path) -> Path:
    """
    Pick a free destination path for a source file.

    Keeps the source's file name unless it is taken, in which case a random
    token is inserted before the extension.

    Examples:
        >>> _destination_for(Path('/a/x.jpg'), Path('/trash'))
        PosixPath('/trash/x.jpg')  # or /trash/x_1a2b3c4d.jpg if x.jpg exists
    """
    dest = target_dir / source.name
    while dest.exists():
        dest = target_dir / f"{source.stem}_{_random_token()}{source.suffix}"
    return dest


def relocate(
    duplicate_paths: Iterable[str],
    target_folder: str | Path,
    events: Optional[EventChannel] = None,
) -> RelocationReport:
    """
    Move duplicate files into the target folder.

    Args:
        duplicate_paths: Files to move, processed in order
        target_folder: Quarantine folder, created if missing
        events: Channel receiving a LogEvent per failed move

    Returns:
        RelocationReport with the source -> destination mapping, the
        sources that had already disappeared, and per-file errors

    Raises:
        OSError: If the target folder cannot be created

    Notes:
        - Nothing is created when there is nothing to move
        - A failed move is logged and the remaining files are still moved
        - No undo log is written; the returned mapping is the only record
    """
    paths = [str(p) for p in duplicate_paths]
    report = RelocationReport()
    if not paths:
        return report

    target_dir = Path(target_folder)
    target_dir.mkdir(parents=True, exist_ok=True)

    for path in paths:
        try:
            if not os.path.isfile(path):
                report.skipped.append(path)
                continue

            dest = _destination_for(Path(path), target_dir)
            shutil.move(path, str(dest))
            report.moved[path] = str(dest)
            _logger.debug(f"Moved: {path} -> {dest}")
        except Exception as e:
            report.errors[path] = str(e)
            emit_log(events, f"ERROR: Could not move {path}: {e}", logging.ERROR)

    return report


__all__ = ['relocate']
