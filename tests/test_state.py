"""
Unit tests for the GUI scan state.
"""

import pytest
from dupesweep.config import GUI_LOG_LIMIT
from dupesweep.models import (
    FileFingerprint,
    LogEvent,
    ProgressEvent,
    RelocationReport,
    ScanOutcome,
    ScanResult,
)
from dupesweep.state import ScanState


@pytest.fixture
def state():
    return ScanState()


def make_outcome(**kwargs):
    defaults = dict(
        root="/photos",
        duplicate_folder="/photos/duplicates",
        files=["/photos/a.jpg", "/photos/b.jpg"],
        fingerprints=[FileFingerprint("/photos/a.jpg", 1), FileFingerprint("/photos/b.jpg", 1)],
        result=ScanResult(
            uniques=[FileFingerprint("/photos/a.jpg", 1)],
            duplicates=["/photos/b.jpg"],
            matches={"/photos/b.jpg": "/photos/a.jpg"},
        ),
        elapsed_seconds=0.5,
    )
    defaults.update(kwargs)
    return ScanOutcome(**defaults)


class TestScanState:
    """Test ScanState transitions."""

    def test_initial(self, state):
        status = state.to_status_dict()
        assert status['status'] == 'idle'
        assert status['can_move'] is False
        assert state.duplicates == []

    def test_begin_once(self, state):
        assert state.begin("/photos")
        assert state.is_running
        assert not state.begin("/other")
        assert state.directory == "/photos"

    def test_begin_gets_fresh_cancel_event(self, state):
        state.begin("/photos")
        state.request_cancel()
        state.finish(make_outcome(cancelled=True, result=None))
        assert state.begin("/photos")
        assert not state.cancel_requested

    def test_progress_events(self, state):
        state.begin("/photos")
        state.handle_event(ProgressEvent(completed=1, total=4))
        status = state.to_status_dict()
        assert status['status'] == 'fingerprinting'
        assert status['percent'] == 25
        assert status['message'] == "Processing 1 of 4 images..."

        state.handle_event(ProgressEvent(completed=4, total=4))
        assert state.status == 'comparing'

    def test_finish_complete(self, state):
        state.begin("/photos")
        state.finish(make_outcome())
        status = state.to_status_dict()
        assert status['status'] == 'complete'
        assert status['message'].startswith("Scan complete (")
        assert status['message'].endswith("1 unique images, 1 duplicates found.")
        assert status['can_move'] is True
        assert status['files_found'] == 2
        assert state.duplicates == ["/photos/b.jpg"]
        assert state.duplicate_folder == "/photos/duplicates"

    def test_finish_cancelled(self, state):
        state.begin("/photos")
        state.finish(make_outcome(cancelled=True, result=None))
        assert state.status == 'cancelled'
        assert state.message == "Scan canceled."
        assert state.duplicates == []
        assert state.to_status_dict()['can_move'] is False

    def test_finish_no_images(self, state):
        state.begin("/photos")
        state.finish(make_outcome(files=[], fingerprints=[], result=ScanResult()))
        assert state.message == "No images found."

    def test_fail(self, state):
        state.begin("/photos")
        state.fail("Directory not found: /photos")
        assert state.status == 'error'
        assert not state.is_running

    def test_record_relocation(self, state):
        state.begin("/photos")
        state.finish(make_outcome())
        state.record_relocation(RelocationReport(moved={"/photos/b.jpg": "/photos/duplicates/b.jpg"}))
        status = state.to_status_dict()
        assert status['status'] == 'moved'
        assert status['message'] == "1 duplicates moved to '/photos/duplicates'."
        assert status['relocation']['moved_count'] == 1
        assert status['can_move'] is False


class TestScanStateLog:
    """Test the bounded log buffer."""

    def test_log_since(self, state):
        state.handle_event(LogEvent("one"))
        state.handle_event(LogEvent("two"))
        assert state.log_since(0) == (["one", "two"], 2)
        assert state.log_since(1) == (["two"], 2)
        assert state.log_since(2) == ([], 2)

    def test_log_is_bounded(self, state):
        for i in range(GUI_LOG_LIMIT + 10):
            state.add_log(f"line {i}")
        lines, next_index = state.log_since(0)
        assert len(lines) == GUI_LOG_LIMIT
        assert lines[0] == "line 10"
        assert next_index == GUI_LOG_LIMIT + 10

    def test_begin_clears_log(self, state):
        state.add_log("old")
        state.begin("/photos")
        assert state.log_since(0) == ([], 0)
