import io
import json
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from appfresh.core import catalog


class FakeResponse(io.BytesIO):
    """Stands in for the object returned by ``urlopen``."""


class FakeTransport:
    """Records requests and replays a canned body or error."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.requests = []

    def __call__(self, req, timeout=None):
        self.requests.append((req, timeout))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body)


def lookup_body(*results, count=None) -> bytes:
    payload = {
        "resultCount": len(results) if count is None else count,
        "results": list(results),
    }
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def transport(monkeypatch):
    fake = FakeTransport(body=lookup_body())
    monkeypatch.setattr(catalog, "urlopen", fake)
    return fake


class FakeOpener:
    def __init__(self, error=None):
        self.error = error
        self.opened = []

    def open_url(self, url):
        if self.error is not None:
            raise self.error
        self.opened.append(url)
