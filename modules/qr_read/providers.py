from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

import requests

from core.errors import DecodeFailure
from settings import DECODE_TIMEOUT, QR_READ_GOQR_URL, QR_READ_QRSERVER_URL, QR_READ_ZXING_URL

logger = logging.getLogger(__name__)

UPLOAD_NAME = "qr.png"


class NoData(Exception):
    """Провайдер ответил, но текста в ответе нет."""


def parse_symbol_payload(data: Any) -> str:
    """
    Ответ qrserver/goqr: [{"symbol": [{"data": "...", "error": null}]}].

    Всё, что не похоже на этот формат, считаем "ничего не нашли".
    """
    try:
        symbol = data[0]["symbol"][0]
    except (KeyError, IndexError, TypeError):
        raise NoData("unexpected response shape")

    if not isinstance(symbol, dict):
        raise NoData("unexpected response shape")

    value = symbol.get("data")
    if isinstance(value, str) and value:
        return value

    error = symbol.get("error")
    raise NoData(str(error) if error else "empty result")


def parse_text_payload(data: Any) -> str:
    """Ответ zxing: {"text": "..."}."""
    value = data.get("text") if isinstance(data, dict) else None
    if isinstance(value, str) and value:
        return value
    raise NoData("empty result")


@dataclass(frozen=True)
class Provider:
    name: str
    url: str
    parse: Callable[[Any], str]

    def read(self, content: bytes, timeout: float = DECODE_TIMEOUT) -> str:
        r = requests.post(
            self.url,
            files={"file": (UPLOAD_NAME, content)},
            timeout=timeout,
        )
        try:
            data = r.json()
        except ValueError:
            raise NoData(f"non-JSON response (HTTP {r.status_code})")
        logger.info("%s scan response: %s", self.name, data)
        return self.parse(data)


PROVIDERS: List[Provider] = [
    Provider("qrserver.com", QR_READ_QRSERVER_URL, parse_symbol_payload),
    Provider("goqr.me", QR_READ_GOQR_URL, parse_symbol_payload),
    Provider("zxing", QR_READ_ZXING_URL, parse_text_payload),
]


def decode_qr(
    content: bytes,
    providers: Optional[Sequence[Provider]] = None,
    timeout: float = DECODE_TIMEOUT,
) -> str:
    """
    Пробуем провайдеров по очереди и возвращаем первый непустой результат.

    Ошибка одного провайдера не обрывает цепочку. Повторов внутри провайдера нет.
    Если никто не справился, бросаем DecodeFailure с причинами по каждому.
    """
    if providers is None:
        providers = PROVIDERS

    reasons: List[str] = []
    for provider in providers:
        try:
            text = provider.read(content, timeout=timeout)
        except NoData as e:
            logger.info("Failed to read QR code with %s: %s", provider.name, e)
            reasons.append(f"{provider.name}: {e}")
            continue
        except requests.RequestException as e:
            logger.warning("Error with %s: %s", provider.name, e)
            reasons.append(f"{provider.name}: {e.__class__.__name__}")
            continue
        except Exception as e:
            logger.exception("Error with %s", provider.name)
            reasons.append(f"{provider.name}: {e}")
            continue

        logger.info("QR code read by %s", provider.name)
        return text

    raise DecodeFailure(reasons)
