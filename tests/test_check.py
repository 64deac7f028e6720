import logging
from datetime import datetime, timedelta, timezone

import pytest

from release_notifier.errors import FetchError, NoReleasesError, VersionParseError
from release_notifier.notify.check import check_for_update, maybe_print_update_text
from release_notifier.notify.persist import format_check_time, parse_check_time
from release_notifier.notify.types import CheckStatus, ToolInfo
from release_notifier.state import NotifySettings

URL = "https://releases.example/feed.json"
BASE = "https://releases.example/tag/v"
NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def tool(version):
    return ToolInfo("mytool", version, URL, BASE)


class Advisories:
    def __init__(self):
        self.calls = []

    def __call__(self, tool, outcome):
        self.calls.append((tool, outcome))


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "last_update_check"


@pytest.fixture
def advisories():
    return Advisories()


def warning_events(caplog):
    return [
        getattr(r, "event", None) for r in caplog.records if r.levelno == logging.WARNING
    ]


def test_newer_release_emits_advisory_and_records_time(feed, state_path, advisories):
    feed.serve([{"Name": "v1.3.0"}])
    responded = maybe_print_update_text(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, emit=advisories
    )
    assert responded is True
    (_, outcome), = advisories.calls
    assert outcome.status is CheckStatus.UPDATE_AVAILABLE
    assert outcome.latest == "1.3.0"
    assert outcome.release_url == "https://releases.example/tag/v1.3.0"
    assert parse_check_time(state_path.read_text(encoding="utf-8")) == NOW


def test_same_version_is_quiet(feed, state_path, advisories):
    feed.serve([{"Name": "v1.3.0"}])
    responded = maybe_print_update_text(
        tool("1.3.0"), state_path, NotifySettings(), now=NOW, emit=advisories
    )
    assert responded is False
    assert advisories.calls == []
    assert not state_path.exists()


def test_local_newer_than_feed_is_quiet(feed, state_path):
    feed.serve([{"Name": "v1.3.0"}])
    outcome = check_for_update(tool("2.0.0-rc.1"), state_path, NotifySettings(), now=NOW)
    assert outcome.status is CheckStatus.UP_TO_DATE
    assert outcome.latest == "1.3.0"
    assert not outcome.responded


def test_empty_feed_warns_without_advisory(feed, state_path, advisories, caplog):
    feed.serve([])
    responded = maybe_print_update_text(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, emit=advisories
    )
    assert responded is True
    assert advisories.calls == []
    assert "update_check_failed" in warning_events(caplog)
    outcome = check_for_update(tool("1.2.0"), state_path, NotifySettings(), now=NOW)
    assert isinstance(outcome.error, NoReleasesError)


def test_server_error_leaves_state_untouched(feed, state_path, advisories, caplog):
    previous = format_check_time(NOW - timedelta(days=3))
    state_path.write_text(previous, encoding="utf-8")
    feed.fail(500)
    responded = maybe_print_update_text(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, emit=advisories
    )
    assert responded is True
    assert advisories.calls == []
    assert state_path.read_text(encoding="utf-8") == previous
    record = next(r for r in caplog.records if getattr(r, "event", None) == "update_check_failed")
    assert record.error_type == "FetchError"
    assert "HTTP 500" in record.error


def test_gate_closed_skips_network(feed, state_path, advisories):
    state_path.write_text(format_check_time(NOW - timedelta(hours=1)), encoding="utf-8")
    feed.serve([{"Name": "v9.0.0"}])
    responded = maybe_print_update_text(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, emit=advisories
    )
    assert responded is False
    assert feed.requests == []
    assert advisories.calls == []


def test_disabled_notifications_skip_everything(feed, state_path, advisories):
    feed.serve([{"Name": "v9.0.0"}])
    settings = NotifySettings(want_update_notification=False)
    assert not maybe_print_update_text(
        tool("1.2.0"), state_path, settings, now=NOW, emit=advisories
    )
    assert feed.requests == []
    assert not state_path.exists()


def test_force_bypasses_gate(feed, state_path):
    state_path.write_text(format_check_time(NOW), encoding="utf-8")
    feed.serve([{"Name": "v1.3.0"}])
    outcome = check_for_update(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, force=True
    )
    assert outcome.has_newer


def test_persist_failure_still_advises(feed, tmp_path, advisories, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    feed.serve([{"Name": "v1.3.0"}])
    responded = maybe_print_update_text(
        tool("1.2.0"), blocker / "last_update_check", NotifySettings(), now=NOW, emit=advisories
    )
    assert responded is True
    assert len(advisories.calls) == 1
    assert "update_check_persist_failed" in warning_events(caplog)


def test_invalid_local_version_is_distinct_failure(feed, state_path):
    feed.serve([{"Name": "v1.3.0"}])
    outcome = check_for_update(tool("dev-build"), state_path, NotifySettings(), now=NOW)
    assert outcome.status is CheckStatus.FAILED
    assert isinstance(outcome.error, VersionParseError)
    assert feed.requests == []


def test_malformed_remote_version_warns(feed, state_path, advisories, caplog):
    feed.serve([{"Name": "nightly"}])
    assert maybe_print_update_text(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, emit=advisories
    )
    assert advisories.calls == []
    record = next(r for r in caplog.records if getattr(r, "event", None) == "update_check_failed")
    assert record.error_type == "VersionParseError"
    assert not state_path.exists()


def test_trusting_feed_order_uses_first_entry(feed, state_path):
    feed.serve([{"Name": "v1.2.0"}, {"Name": "v1.3.0"}])
    trusted = check_for_update(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, trust_feed_order=True
    )
    assert trusted.status is CheckStatus.UP_TO_DATE
    resolved = check_for_update(tool("1.2.0"), state_path, NotifySettings(), now=NOW)
    assert resolved.latest == "1.3.0"


def test_unexpected_errors_never_escape(feed, state_path, caplog):
    feed.serve([{"Name": "v1.3.0"}])

    def broken(tool, outcome):
        raise RuntimeError("terminal went away")

    assert maybe_print_update_text(
        tool("1.2.0"), state_path, NotifySettings(), now=NOW, emit=broken
    ) is False
    assert "update_check_failed" in warning_events(caplog)


def test_default_advisory_goes_to_stderr(feed, state_path, capsys):
    feed.serve([{"Name": "v1.3.0"}])
    assert maybe_print_update_text(tool("1.2.0"), state_path, NotifySettings(), now=NOW)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "mytool 1.3.0 is available! Download it: https://releases.example/tag/v1.3.0" in captured.err
    assert "'mytool config set WantUpdateNotification false'" in captured.err


def test_defaults_come_from_notifier_home(feed, isolated_home, advisories):
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.json").write_text(
        '{"WantUpdateNotification": false}', encoding="utf-8"
    )
    feed.serve([{"Name": "v1.3.0"}])
    assert not maybe_print_update_text(tool("1.2.0"), emit=advisories)
    assert feed.requests == []


def test_fetch_error_type_is_exported():
    assert issubclass(NoReleasesError, FetchError)
