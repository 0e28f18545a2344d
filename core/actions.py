from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class OutText:
    """Text reply. `text` must already be escaped for MarkdownV2."""

    text: str


@dataclass(frozen=True)
class OutPhoto:
    """Photo reply by URL; Telegram downloads the image itself.

    `caption` must already be escaped for MarkdownV2.
    """

    url: str
    caption: str = ""


Action = Union[OutText, OutPhoto]
