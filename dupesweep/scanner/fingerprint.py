"""
Fingerprint source for the scanner package.

Decodes an image with Pillow and reduces it to a 64-bit perceptual hash.
"""

from __future__ import annotations

from pathlib import Path

from ..config import HASH_SIZE
from .dependencies import Image, imagehash


class FingerprintError(Exception):
    """Raised when a file cannot be decoded as an image."""


def hash_to_int(image_hash) -> int:
    """
    Convert an imagehash.ImageHash to an unsigned integer.

    Examples:
        >>> hash_to_int(imagehash.hex_to_hash('000000000000000f'))
        15
    """
    return int(str(image_hash), 16)


def compute_fingerprint(filepath: str | Path) -> int:
    """
    Calculate the perceptual fingerprint of an image.

    Uses the pHash algorithm with an 8x8 hash, giving 64 bits.

    Args:
        filepath: Path to the image

    Returns:
        Fingerprint as an int in [0, 2**64)

    Raises:
        FingerprintError: If the file is not a decodable image
        OSError: If the file cannot be read at all
    """
    try:
        with Image.open(filepath) as img:
            # Force load to detect truncated/corrupt images early
            try:
                img.load()
            except OSError as load_err:
                raise FingerprintError(f"Corrupt or truncated image: {load_err}") from load_err

            if img.mode not in ('RGB', 'L'):
                img = img.convert('RGB')

            return hash_to_int(imagehash.phash(img, hash_size=HASH_SIZE))
    except Image.UnidentifiedImageError as e:
        raise FingerprintError(f"Not a valid image file: {e}") from e


__all__ = ['FingerprintError', 'compute_fingerprint', 'hash_to_int']
