"""
Configuration constants for dupesweep.

This module contains the built-in defaults:
- Image extensions scanned when the caller does not choose any
- Similarity tolerance and worker count
- Quarantine folder naming
"""

import os

# Extensions scanned by default (compared case-insensitively)
DEFAULT_EXTENSIONS = frozenset({
    '.jpg', '.jpeg', '.png', '.bmp', '.webp', '.tiff',
})

# Extensions the GUI offers as check boxes in addition to the defaults
OPTIONAL_EXTENSIONS = frozenset({
    '.tif', '.gif', '.heic', '.heif',
})

# Maximum Hamming distance between two fingerprints that still counts as a
# duplicate. 0 = bit-identical only, 64 = everything matches.
DEFAULT_MAX_DISTANCE = 3
MAX_HASH_DISTANCE = 64

# pHash size; 8 gives an 8x8 = 64-bit fingerprint
HASH_SIZE = 8

# Default number of parallel fingerprinting workers
DEFAULT_WORKERS = os.cpu_count() or 1

# Name of the quarantine folder created under the scanned root
DUPLICATES_FOLDER_NAME = 'duplicates'

# Length of the random token inserted into colliding file names
COLLISION_SUFFIX_LENGTH = 8

# Number of log lines the GUI keeps for display
GUI_LOG_LIMIT = 5000

# User configuration location
CONFIG_DIR = os.path.join(os.path.expanduser('~'), '.dupesweep')
