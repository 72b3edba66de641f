"""Serviços puros do cliente (sem IO)."""

from .response_classifier import classify_response

__all__ = ["classify_response"]
