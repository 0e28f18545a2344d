from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from core import texts
from core.errors import FileResolutionError, ValidationError
from settings import TG_API_BASE, TG_TIMEOUT, IMAGE_TIMEOUT, MAX_IMAGE_BYTES

logger = logging.getLogger(__name__)

_CHUNK = 64 * 1024


@dataclass(frozen=True)
class ImageDownload:
    url: str
    content: bytes
    content_type: str = ""      # пусто, если сервер не прислал заголовок
    content_length: int = 0     # 0 = размер неизвестен


def mask_token(text: str, token: str) -> str:
    """Прячем токен бота, прежде чем писать URL в лог."""
    if not token:
        return text
    return text.replace(token, "***")


def resolve_file_url(file_id: str, token: str) -> str:
    """
    getFile -> file_path -> прямая ссылка на скачивание.
    Бросает FileResolutionError, если Telegram ответил не ok.
    """
    logger.info("Resolving file_id=%s", file_id)
    r = requests.get(
        f"{TG_API_BASE}/bot{token}/getFile",
        params={"file_id": file_id},
        timeout=TG_TIMEOUT,
    )
    try:
        data = r.json()
    except ValueError:
        data = {"ok": False, "status_code": r.status_code, "body": r.text[:200]}

    if not r.ok or not isinstance(data, dict) or not data.get("ok"):
        raise FileResolutionError(f"Telegram getFile error: {data}")

    file_path = (data.get("result") or {}).get("file_path")
    if not file_path:
        raise FileResolutionError(f"Telegram getFile returned no file_path: {data}")

    url = f"{TG_API_BASE}/file/bot{token}/{file_path}"
    logger.info("Resolved file URL: %s", mask_token(url, token))
    return url


def _declared_length(raw: str | None) -> int:
    try:
        return max(int(raw or 0), 0)
    except ValueError:
        return 0


def fetch_image(url: str, max_bytes: int = MAX_IMAGE_BYTES, timeout: float = IMAGE_TIMEOUT) -> ImageDownload:
    """
    Скачивает картинку потоком.

    Если Content-Length больше лимита, тело не читаем вообще. Если заголовка нет,
    читаем, пока не упрёмся в тот же лимит.
    """
    with requests.get(url, stream=True, timeout=timeout) as r:
        r.raise_for_status()

        content_type = (r.headers.get("Content-Type") or "").split(";", 1)[0].strip().lower()
        content_length = _declared_length(r.headers.get("Content-Length"))
        logger.info(
            "Image headers: content_type=%s content_length=%s",
            content_type or "unknown",
            content_length or "unknown",
        )

        if content_length and content_length > max_bytes:
            raise ValidationError(texts.ERR_IMAGE_TOO_LARGE)

        buf = bytearray()
        for chunk in r.iter_content(chunk_size=_CHUNK):
            buf.extend(chunk)
            if len(buf) > max_bytes:
                raise ValidationError(texts.ERR_IMAGE_TOO_LARGE)

    logger.info("Image downloaded: %s bytes", len(buf))
    return ImageDownload(url=url, content=bytes(buf), content_type=content_type, content_length=content_length)
