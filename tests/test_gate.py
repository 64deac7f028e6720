from datetime import datetime, timedelta, timezone

import pytest

from release_notifier.notify import gate
from release_notifier.notify.gate import NEVER_CHECKED, read_last_check_time, should_check
from release_notifier.notify.persist import format_check_time
from release_notifier.state import NotifySettings

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def write_check(path, when):
    path.write_text(format_check_time(when), encoding="utf-8")


def test_disabled_never_touches_the_file(tmp_path, monkeypatch):
    def boom(_path):
        raise AssertionError("state file must not be read")

    monkeypatch.setattr(gate, "read_last_check_time", boom)
    settings = NotifySettings(want_update_notification=False, reminder_wait_period_in_hours=0)
    assert should_check(tmp_path / "last_update_check", settings, now=NOW) is False


@pytest.mark.parametrize(
    "age, due",
    [
        (timedelta(hours=24), True),
        (timedelta(hours=24, seconds=1), True),
        (timedelta(hours=23, minutes=59, seconds=59), False),
        (timedelta(0), False),
        (timedelta(hours=-5), False),
    ],
)
def test_wait_period_boundary(tmp_path, age, due):
    path = tmp_path / "last_update_check"
    write_check(path, NOW - age)
    settings = NotifySettings(reminder_wait_period_in_hours=24)
    assert should_check(path, settings, now=NOW) is due


def test_fractional_wait_period(tmp_path):
    path = tmp_path / "last_update_check"
    write_check(path, NOW - timedelta(minutes=30))
    assert should_check(path, NotifySettings(reminder_wait_period_in_hours=0.5), now=NOW)
    assert not should_check(path, NotifySettings(reminder_wait_period_in_hours=0.6), now=NOW)


@pytest.mark.parametrize("content", [None, "", "not a timestamp", "Mon, 02 Jan", "\x00\x01"])
@pytest.mark.parametrize("hours", [0, 24, 10**9])
def test_missing_or_corrupt_state_behaves_like_epoch(tmp_path, content, hours):
    path = tmp_path / "last_update_check"
    if content is not None:
        path.write_text(content, encoding="utf-8")
    epoch_path = tmp_path / "epoch"
    write_check(epoch_path, NEVER_CHECKED)
    settings = NotifySettings(reminder_wait_period_in_hours=hours)
    assert should_check(path, settings, now=NOW) == should_check(
        epoch_path, settings, now=NOW
    )


def test_read_falls_back_to_never_checked(tmp_path):
    assert read_last_check_time(tmp_path / "absent") == NEVER_CHECKED
    garbled = tmp_path / "garbled"
    garbled.write_bytes(b"\xff\xfe\xfa")
    assert read_last_check_time(garbled) == NEVER_CHECKED
    assert read_last_check_time(tmp_path) == NEVER_CHECKED  # a directory


def test_read_returns_recorded_time(tmp_path):
    path = tmp_path / "last_update_check"
    write_check(path, NOW)
    assert read_last_check_time(path) == NOW


def test_naive_now_is_taken_as_utc(tmp_path):
    path = tmp_path / "last_update_check"
    write_check(path, NOW - timedelta(hours=25))
    naive_now = NOW.replace(tzinfo=None)
    assert should_check(path, NotifySettings(), now=naive_now)


def test_timestamp_without_seconds_opens_the_gate(tmp_path):
    path = tmp_path / "last_update_check"
    path.write_text(format_check_time(NOW).rsplit(":", 1)[0], encoding="utf-8")
    assert read_last_check_time(path) == NEVER_CHECKED
    assert should_check(path, NotifySettings(), now=NOW) is True
