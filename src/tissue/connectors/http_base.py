"""Transporte HTTP padrão (httpx) para o webhook de check-in.

Implementa RequestSenderProtocol. O serviço informa o status semântico no
próprio corpo JSON e responde 404/422 com corpo útil, então qualquer
status HTTP com corpo JSON é devolvido ao chamador.

429 e 5xx são retentados com backoff exponencial enquanto houver
tentativas; na última tentativa o corpo JSON é devolvido como está.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from tissue.utils.errors import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


def _is_retryable_status(status_code: int) -> bool:
    return status_code == 429 or status_code >= 500


class HttpClient:
    """Cliente HTTP JSON para chamadas ao Tissue."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Executa GET e retorna o corpo JSON decodificado."""
        return await self._request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Executa POST com corpo JSON e retorna o corpo JSON decodificado."""
        return await self._request("POST", url, headers=headers, body=json)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        merged_headers = {**JSON_HEADERS, **self._config.default_headers, **(headers or {})}
        max_retries = max(self._config.max_retries, 0)
        for attempt in range(max_retries + 1):
            is_last = attempt >= max_retries
            try:
                response = await self._send(method, url, merged_headers, body)
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if is_last:
                    logger.error(
                        "http_connection_error",
                        extra={"method": method, "error_type": type(exc).__name__},
                    )
                    raise TransportError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(attempt, self._config)
                continue
            except httpx.HTTPError as exc:
                logger.error(
                    "http_request_error",
                    extra={"method": method, "error_type": type(exc).__name__},
                )
                raise TransportError("http_request_error") from exc

            if _is_retryable_status(response.status_code) and not is_last:
                logger.warning(
                    "http_retryable_status",
                    extra={"method": method, "status_code": response.status_code},
                )
                await _backoff_sleep(attempt, self._config)
                continue

            return _decode_json(response)

        raise TransportError("http_retry_exhausted", is_retryable=True)

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: dict[str, Any] | None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            transport=self._transport,
        ) as client:
            return await client.request(
                method,
                url,
                json=body,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )


def _decode_json(response: httpx.Response) -> Any:
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error(
            "http_invalid_json",
            extra={"status_code": response.status_code},
        )
        raise TransportError(
            "Response JSON inválido",
            status_code=response.status_code,
        ) from exc

    logger.debug("http_response_received", extra={"status_code": response.status_code})
    return data


async def _backoff_sleep(attempt: int, config: HttpClientConfig) -> None:
    backoff = min((2**attempt) * config.backoff_base_seconds, config.backoff_max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
