from __future__ import annotations

import logging
from typing import List, Optional

from core.actions import Action
from core.events import Command, InboundEvent, PhotoMessage, TextMessage
from modules.qr_generate.handler import generate_qr_reply
from modules.qr_read.handler import read_qr_reply
from modules.start.handler import get_start_reply

logger = logging.getLogger(__name__)


async def build_reply_actions(event: Optional[InboundEvent], token: str) -> List[Action]:
    """
    Platform-neutral entrypoint.
    Decides what to say; delivery is the sender's job.
    Returns the replies in the order they must be sent.
    """
    if isinstance(event, Command):
        logger.info("Processing %s command", event.name)
        return get_start_reply()

    if isinstance(event, PhotoMessage):
        logger.info("Processing photo message")
        return await read_qr_reply(event, token)

    if isinstance(event, TextMessage):
        logger.info("Processing text message")
        return generate_qr_reply(event.text)

    return []
