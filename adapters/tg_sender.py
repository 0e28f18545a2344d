from __future__ import annotations

import logging

import requests

from core.actions import Action, OutText, OutPhoto
from core.errors import UpstreamDeliveryError
from settings import TG_API_BASE, TG_TIMEOUT

logger = logging.getLogger(__name__)

_API = TG_API_BASE + "/bot{token}/{method}"
PARSE_MODE = "MarkdownV2"


def _url(token: str, method: str) -> str:
    return _API.format(token=token, method=method)


def _payload(chat_id: int, action: Action) -> tuple[str, dict]:
    if isinstance(action, OutPhoto):
        return "sendPhoto", {
            "chat_id": chat_id,
            "photo": action.url,
            "caption": action.caption,
            "parse_mode": PARSE_MODE,
        }
    if isinstance(action, OutText):
        return "sendMessage", {
            "chat_id": chat_id,
            "text": action.text,
            "parse_mode": PARSE_MODE,
        }
    raise TypeError(f"Unsupported action: {action!r}")


def send_actions_tg(chat_id: int, actions: list[Action], token: str) -> None:
    """
    Отправляет ответы строго по очереди.

    Ошибку Telegram не глушим: сообщить о ней пользователю уже некуда,
    поэтому она уходит наверх и превращается в 500.
    """
    for a in actions:
        method, payload = _payload(chat_id, a)
        logger.info("Sending to Telegram: method=%s chat_id=%s", method, chat_id)

        r = requests.post(_url(token, method), json=payload, timeout=TG_TIMEOUT)
        try:
            data = r.json()
        except ValueError:
            data = {"ok": False, "status_code": r.status_code, "body": r.text[:200]}

        logger.info("Telegram API response: status=%s ok=%s", r.status_code, data.get("ok") if isinstance(data, dict) else None)
        if not r.ok or not isinstance(data, dict) or not data.get("ok"):
            raise UpstreamDeliveryError(method, data)
