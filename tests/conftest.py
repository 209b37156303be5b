"""Pytest configuration and shared fixtures."""
import os
import sys
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fakerest.output import OutputManager, set_output
from fakerest.transport import Response, TransportError

BASE_URL = "https://jsonplaceholder.typicode.com"


class FakeTransport:
    """Transport double that answers from canned responses and records requests."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, status, body=""):
        self.routes[(method, BASE_URL + path)] = Response(status, body)

    def fail(self, method, path, message="connection refused"):
        self.routes[(method, BASE_URL + path)] = TransportError(message)

    def request(self, method, url, body=None):
        self.calls.append((method, url, body))
        answer = self.routes.get((method, url), Response(404, "{}"))
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture(autouse=True)
def output():
    """Fresh global output manager per test so capsys sees its writes."""
    manager = OutputManager()
    set_output(manager)
    yield manager
    set_output(None)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("FAKEREST_BASE_URL", "FAKEREST_TIMEOUT", "FAKEREST_DECODER", "FAKEREST_OUTPUT_DIR"):
        monkeypatch.delenv(key, raising=False)
