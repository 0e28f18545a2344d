from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

START_COMMAND = "/start"


@dataclass(frozen=True)
class PhotoSize:
    file_id: str
    width: int = 0
    height: int = 0
    file_size: int = 0


@dataclass(frozen=True)
class Command:
    """Only the greeting command exists; any other slash text is plain text."""

    chat_id: int
    name: str = START_COMMAND


@dataclass(frozen=True)
class PhotoMessage:
    chat_id: int
    photos: List[PhotoSize] = field(default_factory=list)

    @property
    def largest(self) -> PhotoSize:
        # Telegram присылает размеры по возрастанию, последний самый большой
        return self.photos[-1]


@dataclass(frozen=True)
class TextMessage:
    chat_id: int
    text: str


InboundEvent = Union[Command, PhotoMessage, TextMessage]


def _photo_sizes(raw: Any) -> List[PhotoSize]:
    sizes = []
    for item in raw or []:
        if not isinstance(item, dict) or not item.get("file_id"):
            continue
        sizes.append(
            PhotoSize(
                file_id=str(item["file_id"]),
                width=int(item.get("width") or 0),
                height=int(item.get("height") or 0),
                file_size=int(item.get("file_size") or 0),
            )
        )
    return sizes


def parse_update(data: dict) -> Optional[InboundEvent]:
    """
    Turns a Telegram update into one inbound event.

    Returns None for updates without a `message` (edits, callbacks, ...) and for
    messages that carry neither text nor a photo. Raises ValueError when the
    message has no chat id: there is nobody to answer to.
    """
    message = (data or {}).get("message")
    if not isinstance(message, dict):
        return None

    chat_id = (message.get("chat") or {}).get("id")
    if not chat_id:
        raise ValueError("Chat ID not found in request")
    chat_id = int(chat_id)

    text = message.get("text")
    # строгое совпадение: "/start payload" уходит в QR, как обычный текст
    if text == START_COMMAND:
        return Command(chat_id=chat_id)

    photos = _photo_sizes(message.get("photo"))
    if photos:
        return PhotoMessage(chat_id=chat_id, photos=photos)

    if isinstance(text, str):
        return TextMessage(chat_id=chat_id, text=text)

    return None
