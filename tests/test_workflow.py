"""
Integration tests for the scan workflow on real image files.
"""

import os
import threading

import pytest
from dupesweep.models import ConfigurationError, LogEvent, ScanConfig
from dupesweep.scanner import default_duplicate_folder, quarantine_duplicates, run_scan


@pytest.fixture
def config():
    return ScanConfig(workers=2)


class TestRunScan:
    """Test run_scan."""

    def test_finds_copy(self, temp_dir, sample_images, config):
        outcome = run_scan(temp_dir, config=config)

        assert outcome.root == str(temp_dir)
        assert outcome.duplicate_folder == str(temp_dir / "duplicates")
        assert outcome.files == sorted([
            sample_images['corrupted'],
            sample_images['original'],
            sample_images['other'],
            sample_images['copy'],
        ])
        assert len(outcome.fingerprints) == 3
        assert outcome.failed_count == 1
        assert not outcome.cancelled

        result = outcome.result
        assert [u.path for u in result.uniques].count(sample_images['original']) == 1
        assert result.unique_count == 2
        assert result.duplicates == [sample_images['copy']]
        assert result.matches == {sample_images['copy']: sample_images['original']}

    def test_quarantine_folder_is_excluded(self, temp_dir, sample_images, config):
        outcome = run_scan(temp_dir, config=config)
        assert sample_images['quarantined'] not in outcome.files

    def test_custom_duplicate_folder_stops_exclusion(self, temp_dir, sample_images, config):
        outcome = run_scan(temp_dir, config=config, duplicate_folder=temp_dir / "elsewhere")
        assert sample_images['quarantined'] in outcome.files
        # old.png sorts first among the identical images, so it is kept
        assert outcome.result.duplicates == [sample_images['original'], sample_images['copy']]

    def test_duplicate_folder_name_from_user_config(self, temp_dir, monkeypatch):
        monkeypatch.setenv('DUPESWEEP_DUPLICATES_FOLDER', 'trash')
        assert default_duplicate_folder(temp_dir) == os.path.join(str(temp_dir), 'trash')

    def test_exclude_overrides_duplicate_folder(self, temp_dir, sample_images):
        outcome = run_scan(temp_dir, config=ScanConfig(workers=2, exclude="sub"))
        assert sample_images['copy'] not in outcome.files
        assert outcome.result.duplicates == [sample_images['original']]

    def test_events(self, temp_dir, sample_images, config, recorded_events):
        channel, received = recorded_events
        run_scan(temp_dir, config=config, events=channel)

        messages = [e.message for e in received if isinstance(e, LogEvent)]
        assert messages[0] == "Found 4 image files"
        assert any(m.startswith("Error at broken.jpg") for m in messages)
        assert "Duplicate: noise_a_copy.png ≈ noise_a.png" in messages

    def test_empty_directory(self, temp_dir, config):
        outcome = run_scan(temp_dir, config=config)
        assert outcome.files == []
        assert outcome.result.uniques == []
        assert outcome.result.duplicates == []

    def test_cancelled_scan_is_not_classified(self, temp_dir, sample_images, config):
        cancel_event = threading.Event()
        cancel_event.set()
        outcome = run_scan(temp_dir, config=config, cancel_event=cancel_event)
        assert outcome.cancelled
        assert outcome.result is None
        assert outcome.fingerprints == []
        assert outcome.failed_count == 0

    def test_cancelled_scan_counts_failures_so_far(self, temp_dir, sample_images):
        cancel_event = threading.Event()

        def fingerprint(path):
            if path == sample_images['corrupted']:
                raise OSError("unreadable")
            cancel_event.set()
            return 1

        outcome = run_scan(
            temp_dir, config=ScanConfig(workers=1),
            cancel_event=cancel_event, fingerprint_func=fingerprint,
        )
        assert outcome.cancelled
        assert outcome.attempted == 2
        assert len(outcome.fingerprints) == 1
        assert outcome.failed_count == 1

    def test_missing_root(self, temp_dir, config):
        with pytest.raises(ConfigurationError, match="not found"):
            run_scan(temp_dir / "missing", config=config)

    def test_invalid_config_touches_nothing(self, temp_dir, sample_images):
        calls = []
        with pytest.raises(ConfigurationError):
            run_scan(
                temp_dir,
                config=ScanConfig(max_distance=65),
                fingerprint_func=lambda path: calls.append(path) or 0,
            )
        assert calls == []

    def test_uses_user_config_by_default(self, temp_dir, sample_images, monkeypatch):
        monkeypatch.setenv('DUPESWEEP_EXTENSIONS', '.jpg')
        outcome = run_scan(temp_dir)
        assert outcome.files == [sample_images['corrupted']]


class TestQuarantineDuplicates:
    """Test quarantine_duplicates."""

    def test_moves_duplicates(self, temp_dir, sample_images, config, recorded_events):
        channel, received = recorded_events
        outcome = run_scan(temp_dir, config=config)

        report = quarantine_duplicates(outcome, channel)

        moved_to = temp_dir / "duplicates" / "noise_a_copy.png"
        assert report.moved == {sample_images['copy']: str(moved_to)}
        assert moved_to.exists()
        assert not os.path.exists(sample_images['copy'])
        assert os.path.exists(sample_images['original'])
        assert os.path.exists(sample_images['quarantined'])
        assert received[-1].message == f"1 duplicates moved to '{temp_dir / 'duplicates'}'"

    def test_rescan_after_move_finds_nothing(self, temp_dir, sample_images, config):
        quarantine_duplicates(run_scan(temp_dir, config=config))
        outcome = run_scan(temp_dir, config=config)
        assert outcome.result.duplicates == []

    def test_cancelled_outcome_moves_nothing(self, temp_dir, sample_images, config):
        cancel_event = threading.Event()
        cancel_event.set()
        outcome = run_scan(temp_dir, config=config, cancel_event=cancel_event)
        report = quarantine_duplicates(outcome)
        assert report.moved_count == 0
        assert os.path.exists(sample_images['copy'])
