from __future__ import annotations

import logging
from urllib.parse import quote

from core import texts
from core.actions import Action, OutPhoto, OutText
from core.markdown import escape_markdown
from core.urls import is_valid_url
from settings import (
    MAX_TEXT_LENGTH,
    QR_BG_COLOR,
    QR_COLOR,
    QR_CREATE_URL,
    QR_FORMAT,
    QR_MARGIN,
    QR_QZONE,
    QR_SIZE,
)

logger = logging.getLogger(__name__)

# как encodeURIComponent: пробел -> %20, а не "+"
_SAFE = "!~*'()"


def build_qr_link(
    text: str,
    size: int = QR_SIZE,
    margin: int = QR_MARGIN,
    color: str = QR_COLOR,
    bgcolor: str = QR_BG_COLOR,
    fmt: str = QR_FORMAT,
    qzone: int = QR_QZONE,
) -> str:
    """
    Ссылка на картинку QR-кода в api.qrserver.com.

    Сами ничего не рисуем: ссылку отдаём Telegram, он скачивает PNG сам.
    Цвета принимаются и с решёткой ("#262626"), и без неё.
    """
    if not isinstance(text, str):
        raise TypeError("QR text must be a string")

    query = "&".join(
        [
            f"size={int(size)}x{int(size)}",
            f"data={quote(text, safe=_SAFE)}",
            f"color={color.lstrip('#')}",
            f"bgcolor={bgcolor.lstrip('#')}",
            f"margin={int(margin)}",
            f"format={fmt}",
            f"qzone={int(qzone)}",
        ]
    )
    return f"{QR_CREATE_URL}?{query}"


def generate_qr_reply(text: str) -> list[Action]:
    if not text or not text.strip():
        return [OutText(text=escape_markdown(texts.EMPTY_TEXT))]

    if len(text) > MAX_TEXT_LENGTH:
        return [OutText(text=escape_markdown(texts.TEXT_TOO_LONG.format(limit=MAX_TEXT_LENGTH)))]

    if text.startswith("http") and not is_valid_url(text):
        return [OutText(text=escape_markdown(texts.INVALID_URL))]

    try:
        link = build_qr_link(text)
    except Exception:
        logger.exception("Error generating QR code")
        return [OutText(text=escape_markdown(texts.GENERATE_APOLOGY))]

    logger.info("Generated QR URL: %s", link)
    return [OutPhoto(url=link, caption=escape_markdown(texts.QR_READY_CAPTION))]
