import pytest

from core.urls import is_valid_url


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com/path?q=1",
        "http://localhost:8080",
        "https://user:pw@example.com/a b",
        "ftp://files.example.org/x.txt",
    ],
)
def test_valid(value):
    assert is_valid_url(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "   ",
        "http://bad url",
        "httpfoo",
        "http://",
        "http:/example.com",
        "example.com",
        "http://example.com:99999999",
        "http://[::1",
    ],
)
def test_invalid(value):
    assert not is_valid_url(value)
