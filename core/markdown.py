from __future__ import annotations

import re

# Символы, которые MarkdownV2 в Telegram считает разметкой
_SPECIAL = re.compile(r"([_*\[\]()~`>#+=|{}.!\-])")


def escape_markdown(text: str) -> str:
    """Ставит обратный слэш перед каждым спецсимволом MarkdownV2.

    Не идемпотентна: экранировать одну и ту же строку можно только один раз.
    """
    return _SPECIAL.sub(r"\\\1", text or "")


def code_span(text: str) -> str:
    """Inline code: the payload is escaped, the backticks around it are not."""
    return f"`{escape_markdown(text)}`"
