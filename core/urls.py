from __future__ import annotations

import re
from urllib.parse import urlsplit

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_BAD_HOST_CHARS = set(" \t\r\n<>^|\\\"{}`")


def is_valid_url(value: str) -> bool:
    """True, если строка разбирается как абсолютный URL (схема + хост).

    Сеть не трогаем: доступность адреса не проверяется.
    """
    value = (value or "").strip()
    if not value:
        return False

    try:
        parts = urlsplit(value)
        # ValueError на кривом порту вылетает только при обращении к .port
        parts.port
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME.match(parts.scheme):
        return False

    host = parts.hostname
    if not parts.netloc or not host:
        return False

    return not any(ch in _BAD_HOST_CHARS for ch in host)
