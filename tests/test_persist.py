import os
import stat
from datetime import datetime, timedelta, timezone

import pytest

from release_notifier.errors import CheckTimeParseError, PersistError
from release_notifier.notify.gate import read_last_check_time
from release_notifier.notify.persist import (
    format_check_time,
    parse_check_time,
    record_check_time,
)


def test_format_is_rfc1123():
    when = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
    assert format_check_time(when) == "Mon, 02 Jan 2006 15:04:05 GMT"


def test_format_normalizes_to_utc():
    cest = timezone(timedelta(hours=2))
    when = datetime(2006, 1, 2, 17, 4, 5, tzinfo=cest)
    assert format_check_time(when) == "Mon, 02 Jan 2006 15:04:05 GMT"


def test_round_trip_at_whole_seconds(tmp_path):
    when = datetime(2026, 3, 9, 8, 7, 6, 543210, tzinfo=timezone.utc)
    path = tmp_path / "last_update_check"
    record_check_time(path, when)
    assert read_last_check_time(path) == when.replace(microsecond=0)
    assert parse_check_time(format_check_time(when)) == when.replace(microsecond=0)


def test_parse_accepts_utc_zone_name():
    parsed = parse_check_time("Mon, 02 Jan 2006 15:04:05 UTC\n")
    assert parsed == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "yesterday",
        "2006-01-02T15:04:05Z",
        "Mon, 02 Jan 2006 15:04",
        "02 Jan 06 15:04:05",
        "Mon, 02 Jan 06 15:04:05 GMT",
    ],
)
def test_parse_rejects_other_formats(text):
    with pytest.raises(CheckTimeParseError):
        parse_check_time(text)


def test_record_replaces_content_and_creates_parent(tmp_path):
    path = tmp_path / "nested" / "last_update_check"
    record_check_time(path, datetime(2020, 1, 1, tzinfo=timezone.utc))
    record_check_time(path, datetime(2021, 6, 1, tzinfo=timezone.utc))
    assert path.read_text(encoding="utf-8") == "Tue, 01 Jun 2021 00:00:00 GMT"
    assert [p.name for p in path.parent.iterdir()] == ["last_update_check"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_record_uses_restrictive_mode(tmp_path):
    path = tmp_path / "last_update_check"
    record_check_time(path)
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_record_failure_raises_persist_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    with pytest.raises(PersistError) as exc_info:
        record_check_time(blocker / "last_update_check")
    assert exc_info.value.path == blocker / "last_update_check"
