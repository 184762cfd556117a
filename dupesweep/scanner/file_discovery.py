"""
File discovery module for the scanner package.

Enumerates candidate image files under a root directory, filtered by an
extension allow-list and an exclusion substring.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from ..config import DEFAULT_EXTENSIONS
from ..models import normalize_extensions


def find_image_files(
    root_path: str | Path,
    extensions: Optional[Iterable[str]] = None,
    exclude: str = "",
    recursive: bool = True,
) -> list[str]:
    """
    Find all image files in the given directory.

    Args:
        root_path: Directory path to search for images
        extensions: Allowed extensions, compared case-insensitively
            (default: DEFAULT_EXTENSIONS)
        exclude: Skip files whose full path contains this substring
            (case-insensitive). Empty string excludes nothing.
        recursive: If True, search subdirectories recursively

    Returns:
        Sorted list of absolute file paths as strings

    Notes:
        - Resolves symlinks to canonical paths
        - Deduplicates files reachable via multiple paths
        - The exclusion is a plain substring match, so excluding
          '/photos/duplicates' also skips '/photos/duplicates_old/...'
    """
    root = Path(root_path)
    allowed = normalize_extensions(extensions if extensions is not None else DEFAULT_EXTENSIONS)
    exclude_lower = exclude.lower()

    images = []
    seen = set()

    iterator = root.rglob('*') if recursive else root.glob('*')

    for filepath in iterator:
        if not filepath.is_file():
            continue
        if filepath.suffix.lower() not in allowed:
            continue

        resolved = str(filepath.resolve())
        if exclude_lower and exclude_lower in resolved.lower():
            continue
        if resolved not in seen:
            seen.add(resolved)
            images.append(resolved)

    images.sort()
    return images


__all__ = ['find_image_files']
