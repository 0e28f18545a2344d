from __future__ import annotations

from typing import Any, List


class QrBotError(Exception):
    """Base class for everything this bot raises on purpose."""


class ConfigurationError(QrBotError):
    pass


class ValidationError(QrBotError):
    """User input broke a rule; the message is shown to the user as is."""


class FileResolutionError(QrBotError):
    pass


class DecodeFailure(QrBotError):
    """No provider could read the QR code."""

    def __init__(self, reasons: List[str]):
        self.reasons = list(reasons)
        detail = "; ".join(self.reasons) if self.reasons else "no providers configured"
        super().__init__(f"QR code could not be read ({detail})")


class UpstreamDeliveryError(QrBotError):
    def __init__(self, method: str, payload: Any):
        self.method = method
        self.payload = payload
        super().__init__(f"Telegram API error in {method}: {payload}")
