import logging

import pytest
import requests
from fastapi.testclient import TestClient

import app as app_module
from core import texts
from core.actions import OutPhoto, OutText
from core.errors import UpstreamDeliveryError
from core.markdown import escape_markdown


@pytest.fixture
def sent(monkeypatch):
    calls = []

    def fake_send(chat_id, actions, token):
        calls.append((chat_id, list(actions), token))

    monkeypatch.setattr(app_module, "send_actions_tg", fake_send)
    return calls


@pytest.fixture
def client():
    return TestClient(app_module.app)


def _update(**fields):
    return {"update_id": 10, "message": {"message_id": 1, "chat": {"id": 99}, **fields}}


def test_options_preflight(client):
    r = client.options("/")
    assert r.status_code == 200
    assert r.content == b""
    assert r.headers["access-control-allow-origin"] == "*"
    assert r.headers["access-control-allow-methods"] == "POST, GET, OPTIONS"
    assert r.headers["access-control-allow-headers"] == "Content-Type"


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
def test_other_methods_not_allowed(client, method):
    r = client.request(method, "/")
    assert r.status_code == 405
    assert r.headers["access-control-allow-origin"] == "*"


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_start(client, sent, token):
    r = client.post("/", json=_update(text="/start"))
    assert r.status_code == 200
    assert r.text == "OK"
    assert sent == [(99, [OutText(text=escape_markdown(texts.WELCOME))], token)]


def test_text_becomes_photo(client, sent, token):
    r = client.post("/", json=_update(text="buy milk"))
    assert r.status_code == 200
    (chat_id, actions, _), = sent
    assert chat_id == 99
    assert len(actions) == 1 and isinstance(actions[0], OutPhoto)
    assert "buy%20milk" in actions[0].url


def test_update_without_message(client, sent, token):
    r = client.post("/", json={"update_id": 11, "edited_message": {"chat": {"id": 1}, "text": "x"}})
    assert r.status_code == 200
    assert sent == []


def test_missing_token_is_500(client, sent, monkeypatch):
    monkeypatch.delenv("TG_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_TOKEN", raising=False)
    r = client.post("/", json=_update(text="hi"))
    assert r.status_code == 500
    body = r.json()
    assert "TG_TOKEN" in body["error"]
    assert "ConfigurationError" in body["stack"]
    assert sent == []


def test_missing_chat_id_is_500(client, sent, token):
    r = client.post("/", json={"message": {"text": "hi"}})
    assert r.status_code == 500
    assert "Chat ID" in r.json()["error"]


def test_bad_json_is_500(client, token):
    r = client.post("/", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 500


def test_delivery_error_is_500(client, token, monkeypatch):
    def rejecting_send(chat_id, actions, token):
        raise UpstreamDeliveryError("sendMessage", {"ok": False, "description": "Forbidden"})

    monkeypatch.setattr(app_module, "send_actions_tg", rejecting_send)
    r = client.post("/", json=_update(text="/start"))
    assert r.status_code == 500
    assert "Forbidden" in r.json()["error"]
    assert r.headers["access-control-allow-origin"] == "*"


class TestSecretPath:
    def test_wrong_secret(self, client, sent, token, monkeypatch):
        monkeypatch.setattr(app_module, "TG_WEBHOOK_SECRET", "s3cret")
        r = client.post("/tg/wrong", json=_update(text="/start"))
        assert r.status_code == 403
        assert sent == []

    def test_right_secret(self, client, sent, token, monkeypatch):
        monkeypatch.setattr(app_module, "TG_WEBHOOK_SECRET", "s3cret")
        r = client.post("/tg/s3cret", json=_update(text="/start"))
        assert r.status_code == 200
        assert len(sent) == 1


def test_transport_error_hides_token_in_500(client, token, monkeypatch, caplog):
    def broken_send(chat_id, actions, token):
        raise requests.ConnectionError(f"Max retries exceeded with url: /bot{token}/sendMessage")

    monkeypatch.setattr(app_module, "send_actions_tg", broken_send)
    with caplog.at_level(logging.INFO):
        r = client.post("/", json=_update(text="/start"))

    assert r.status_code == 500
    body = r.json()
    assert "/bot***/sendMessage" in body["error"]
    assert token not in body["error"]
    assert token not in body["stack"]
    assert token not in caplog.text


def test_main_runs_uvicorn(monkeypatch):
    seen = {}

    def fake_run(application, host=None, port=None):
        seen.update(app=application, host=host, port=port)

    monkeypatch.setattr(app_module.uvicorn, "run", fake_run)
    app_module.main()
    assert seen == {"app": app_module.app, "host": app_module.HOST, "port": app_module.PORT}
