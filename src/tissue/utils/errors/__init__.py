"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BuilderConsumedError,
    CheckinError,
    HasWhitespacesError,
    ResponseDecodeError,
    ResponseProtocolError,
    TissueError,
    TooLongError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "BuilderConsumedError",
    "CheckinError",
    "HasWhitespacesError",
    "ResponseDecodeError",
    "ResponseProtocolError",
    "TissueError",
    "TooLongError",
    "TransportError",
    "UnexpectedStatusError",
]
