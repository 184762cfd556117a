"""
Unit tests for moving duplicates into the quarantine folder.
"""

import logging
import os
import re
import shutil

from dupesweep.events import EventChannel
from dupesweep.models import LogEvent
from dupesweep.scanner import relocate


def make_file(path, content="data"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return str(path)


class TestRelocate:
    """Test relocate."""

    def test_moves_files(self, temp_dir):
        a = make_file(temp_dir / "a.jpg", "A")
        b = make_file(temp_dir / "sub" / "b.jpg", "B")
        target = temp_dir / "duplicates"

        report = relocate([a, b], target)

        assert report.moved_count == 2
        assert not os.path.exists(a)
        assert (target / "a.jpg").read_text() == "A"
        assert (target / "b.jpg").read_text() == "B"
        assert report.moved[a] == str(target / "a.jpg")

    def test_name_collision_gets_suffix(self, temp_dir):
        first = make_file(temp_dir / "one" / "x.jpg", "first")
        second = make_file(temp_dir / "two" / "x.jpg", "second")
        target = temp_dir / "duplicates"

        report = relocate([first, second], target)

        assert report.moved_count == 2
        assert (target / "x.jpg").read_text() == "first"
        renamed = os.path.basename(report.moved[second])
        assert re.fullmatch(r"x_[0-9a-f]{8}\.jpg", renamed)
        assert (target / renamed).read_text() == "second"

    def test_existing_file_is_not_overwritten(self, temp_dir):
        target = temp_dir / "duplicates"
        make_file(target / "x.jpg", "already here")
        source = make_file(temp_dir / "x.jpg", "new")

        report = relocate([source], target)

        assert (target / "x.jpg").read_text() == "already here"
        assert len(os.listdir(target)) == 2
        assert report.moved[source] != str(target / "x.jpg")

    def test_missing_source_is_skipped(self, temp_dir, recorded_events):
        channel, received = recorded_events
        present = make_file(temp_dir / "a.jpg")
        missing = str(temp_dir / "gone.jpg")

        report = relocate([missing, present], temp_dir / "duplicates", events=channel)

        assert report.skipped == [missing]
        assert report.moved_count == 1
        assert report.error_count == 0
        assert received == []

    def test_empty_list_creates_nothing(self, temp_dir):
        target = temp_dir / "duplicates"
        report = relocate([], target)
        assert report.moved_count == 0
        assert not target.exists()

    def test_creates_nested_target(self, temp_dir):
        source = make_file(temp_dir / "a.jpg")
        target = temp_dir / "deep" / "er" / "duplicates"
        relocate([source], target)
        assert (target / "a.jpg").exists()

    def test_move_failure_is_logged_and_rest_continue(self, temp_dir, recorded_events, monkeypatch):
        channel, received = recorded_events
        bad = make_file(temp_dir / "bad.jpg")
        good = make_file(temp_dir / "good.jpg")
        real_move = shutil.move

        def flaky_move(src, dst):
            if src == bad:
                raise PermissionError("access denied")
            return real_move(src, dst)

        monkeypatch.setattr(shutil, "move", flaky_move)

        report = relocate([bad, good], temp_dir / "duplicates", events=channel)

        assert report.errors == {bad: "access denied"}
        assert good in report.moved
        assert os.path.exists(bad)
        logs = [e for e in received if isinstance(e, LogEvent)]
        assert len(logs) == 1
        assert logs[0].level == logging.ERROR
        assert logs[0].message == f"ERROR: Could not move {bad}: access denied"

    def test_raising_subscriber_does_not_stop_moves(self, temp_dir, monkeypatch):
        channel = EventChannel()

        def broken(event):
            raise RuntimeError("subscriber broke")

        channel.subscribe(broken)
        bad = make_file(temp_dir / "bad.jpg")
        good = make_file(temp_dir / "good.jpg")
        real_move = shutil.move

        def flaky_move(src, dst):
            if src == bad:
                raise PermissionError("access denied")
            return real_move(src, dst)

        monkeypatch.setattr(shutil, "move", flaky_move)

        report = relocate([bad, good], temp_dir / "duplicates", events=channel)

        assert bad in report.errors
        assert good in report.moved
        assert (temp_dir / "duplicates" / "good.jpg").exists()
