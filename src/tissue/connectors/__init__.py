"""Conectores HTTP para o Tissue."""

from .http_base import HttpClient, HttpClientConfig
from .incoming_endpoint import IncomingEndpoint

__all__ = ["HttpClient", "HttpClientConfig", "IncomingEndpoint"]
