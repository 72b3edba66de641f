"""Protocolo HTTP usado pelo endpoint de check-in.

Qualquer transporte concreto (httpx, aiohttp, fake de teste) implementa
este contrato; o endpoint não depende de uma biblioteca específica.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RequestSenderProtocol(Protocol):
    """Contrato mínimo para envio de requisições JSON.

    Implementações retornam o corpo JSON já decodificado e levantam
    TransportError em falhas de rede ou corpo não-JSON.
    """

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Executa GET e retorna o corpo JSON decodificado."""
        ...

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Executa POST com corpo JSON e retorna o corpo JSON decodificado."""
        ...
