"""Protocolos e contratos do cliente."""

from .http_client import RequestSenderProtocol

__all__ = ["RequestSenderProtocol"]
