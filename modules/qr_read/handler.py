from __future__ import annotations

import asyncio
import logging
import re

from adapters.tg_files import ImageDownload, fetch_image, mask_token, resolve_file_url
from core import texts
from core.actions import Action, OutText
from core.errors import ValidationError
from core.events import PhotoMessage
from core.markdown import code_span, escape_markdown
from modules.qr_read.providers import decode_qr
from settings import ALLOWED_IMAGE_EXTENSIONS, ALLOWED_IMAGE_TYPES

logger = logging.getLogger(__name__)

_EXT_RE = re.compile(r"\.(%s)$" % "|".join(ALLOWED_IMAGE_EXTENSIONS), re.IGNORECASE)


def check_image_format(image: ImageDownload) -> None:
    if image.content_type in ALLOWED_IMAGE_TYPES:
        return
    # content-type бывает пустым или application/octet-stream, тогда смотрим на расширение
    if _EXT_RE.search(image.url.split("?", 1)[0]):
        return
    raise ValidationError(texts.ERR_IMAGE_FORMAT.format(content_type=image.content_type or "unknown"))


def _apology(reason: str) -> list[Action]:
    return [OutText(text=escape_markdown(texts.DECODE_APOLOGY.format(error=reason)))]


async def read_qr_reply(event: PhotoMessage, token: str) -> list[Action]:
    """Photo branch: resolve -> download -> validate -> decode.

    One download and one decode chain per photo, each step awaited in order.
    """
    try:
        file_id = event.largest.file_id
        logger.info("File ID: %s", file_id)

        file_url = await asyncio.to_thread(resolve_file_url, file_id, token)
        image = await asyncio.to_thread(fetch_image, file_url)
        check_image_format(image)

        content = await asyncio.to_thread(decode_qr, image.content)
        if not content:
            raise ValidationError(texts.ERR_EMPTY_QR)
    except Exception as e:
        # любая ошибка здесь превращается в ответ пользователю, а не в 500.
        # URL файла и путь getFile содержат токен, поэтому текст ошибки маскируем
        reason = mask_token(str(e), token)
        logger.warning("Error processing photo: %s: %s", e.__class__.__name__, reason)
        return _apology(reason)

    return [
        OutText(text=escape_markdown(texts.DECODE_FOUND)),
        OutText(text=code_span(content)),
    ]
