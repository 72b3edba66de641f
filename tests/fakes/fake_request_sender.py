"""Fake de transporte para testes deterministas do IncomingEndpoint."""

from __future__ import annotations

from typing import Any


class FakeRequestSender:
    """Implementa RequestSenderProtocol sem IO.

    Registra as chamadas e devolve a resposta configurada, ou levanta
    a exceção configurada.
    """

    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> Any:
        self.calls.append({"method": "GET", "url": url, "headers": headers})
        return self._reply()

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> Any:
        self.calls.append({"method": "POST", "url": url, "json": json, "headers": headers})
        return self._reply()

    def _reply(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.response
