import pytest
import requests


class FakeResponse:
    """Минимальная замена requests.Response для тестов без сети."""

    def __init__(self, status_code=200, json_data=None, headers=None, content=b"", text=None):
        self.status_code = status_code
        self._json = json_data
        self.headers = headers or {}
        self.content = content
        self.text = text if text is not None else ""

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def token(monkeypatch):
    monkeypatch.setenv("TG_TOKEN", "123:test-token")
    return "123:test-token"
