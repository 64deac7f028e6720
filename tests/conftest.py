import json
import logging
import urllib.error
import urllib.request

import pytest


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200):
        self._body = body
        self.status = status
        self.reason = "OK"

    def __enter__(self):
        return self

    def __exit__(self, *a):
        return False

    def read(self):
        return self._body


class FakeFeed:
    """Stands in for ``urllib.request.urlopen`` and records each request."""

    def __init__(self):
        self.requests = []
        self.body = b"[]"
        self.status = 200
        self.error = None

    def serve(self, payload):
        self.body = json.dumps(payload).encode("utf-8")
        return self

    def serve_raw(self, body: bytes):
        self.body = body
        return self

    def fail(self, code: int, reason: str = "Internal Server Error"):
        self.error = urllib.error.HTTPError("http://feed", code, reason, {}, None)
        return self

    def __call__(self, req, timeout=None):
        self.requests.append((req, timeout))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body, self.status)


@pytest.fixture
def feed(monkeypatch):
    fake = FakeFeed()
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "notifier-home"
    monkeypatch.setenv("RELEASE_NOTIFIER_HOME", str(home))
    monkeypatch.delenv("RELEASE_NOTIFIER_WANTUPDATENOTIFICATION", raising=False)
    monkeypatch.delenv("RELEASE_NOTIFIER_REMINDERWAITPERIODINHOURS", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield home
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            root.removeHandler(h)
            h.close()
