"""
Pytest configuration and shared fixtures for test suite.
"""

import random

import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image


def make_noise_image(path, seed, size=(64, 64), mode='L'):
    """Save a reproducible random-noise image and return its path as str."""
    rng = random.Random(seed)
    channels = len(mode)
    data = bytes(rng.randrange(256) for _ in range(size[0] * size[1] * channels))
    img = Image.frombytes(mode, size, data)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
    return str(path)


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.dupesweep/config.json."""
    from dupesweep.user_config import get_user_config

    monkeypatch.setenv('DUPESWEEP_CONFIG_DIR', str(tmp_path / 'dupesweep-config'))
    for name in (
        'DUPESWEEP_MAX_DISTANCE',
        'DUPESWEEP_WORKERS',
        'DUPESWEEP_EXTENSIONS',
        'DUPESWEEP_DUPLICATES_FOLDER',
    ):
        monkeypatch.delenv(name, raising=False)
    get_user_config().reload()
    yield
    get_user_config().reload()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a small photo folder.

    Returns:
        dict with paths to:
        - original: noise image A
        - copy: byte-identical copy of A in a subfolder
        - other: noise image B (unrelated to A)
        - corrupted: a .jpg that is not an image
        - quarantined: an image already inside duplicates/ (must be excluded)
        - text: a .txt file (wrong extension)
    """
    images = {}
    images['original'] = make_noise_image(temp_dir / "noise_a.png", seed=1)
    copy_path = temp_dir / "sub" / "noise_a_copy.png"
    copy_path.parent.mkdir()
    shutil.copyfile(images['original'], copy_path)
    images['copy'] = str(copy_path)
    images['other'] = make_noise_image(temp_dir / "noise_b.png", seed=2)

    corrupted = temp_dir / "broken.jpg"
    corrupted.write_text("not an image")
    images['corrupted'] = str(corrupted)

    images['quarantined'] = make_noise_image(temp_dir / "duplicates" / "old.png", seed=1)

    text = temp_dir / "notes.txt"
    text.write_text("hello")
    images['text'] = str(text)

    return images


@pytest.fixture
def recorded_events():
    """EventChannel plus the list every event is appended to."""
    from dupesweep.events import EventChannel

    channel = EventChannel()
    received = []
    channel.subscribe(received.append)
    return channel, received
