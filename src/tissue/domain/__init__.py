"""Modelos de domínio do check-in."""

from .checkin import (
    MAX_LINK_LENGTH,
    MAX_NOTE_LENGTH,
    Checkin,
    CheckinBuilder,
    format_checked_in_at,
)
from .responses import (
    CheckinResponse,
    OtherErrorResponse,
    ReceivedCheckin,
    SuccessResponse,
    ValidationErrorResponse,
)

__all__ = [
    "MAX_LINK_LENGTH",
    "MAX_NOTE_LENGTH",
    "Checkin",
    "CheckinBuilder",
    "CheckinResponse",
    "OtherErrorResponse",
    "ReceivedCheckin",
    "SuccessResponse",
    "ValidationErrorResponse",
    "format_checked_in_at",
]
