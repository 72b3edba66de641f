"""Endpoint de Incoming Webhook do Tissue.

Envia check-ins e classifica a resposta. O transporte é injetado via
RequestSenderProtocol; sem injeção, usa HttpClient (httpx).

Uma chamada bem-sucedida não significa check-in aceito: o chamador deve
inspecionar a variante retornada (SuccessResponse, ValidationErrorResponse
ou OtherErrorResponse).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tissue.config.logging.context import bind_request_id
from tissue.config.settings.tissue import DEFAULT_DOMAIN, build_checkin_url, get_tissue_settings
from tissue.connectors.http_base import JSON_HEADERS, HttpClient
from tissue.services.response_classifier import classify_response
from tissue.utils.errors import ResponseProtocolError, TransportError

if TYPE_CHECKING:
    from tissue.config.settings.tissue import TissueSettings
    from tissue.domain.checkin import Checkin
    from tissue.domain.responses import CheckinResponse
    from tissue.protocols.http_client import RequestSenderProtocol

logger: logging.Logger = logging.getLogger(__name__)


class IncomingEndpoint:
    """Webhook de entrada identificado por domínio e ID."""

    __slots__ = ("_domain", "_sender", "_url", "_webhook_id")

    def __init__(
        self,
        webhook_id: str,
        *,
        domain: str = DEFAULT_DOMAIN,
        sender: RequestSenderProtocol | None = None,
    ) -> None:
        """Inicializa endpoint.

        Args:
            webhook_id: ID do webhook gerado no Tissue
            domain: Host do serviço (padrão: shikorism.net)
            sender: Transporte HTTP. Se None, usa HttpClient padrão.

        Raises:
            ValueError: Se webhook_id ou domain estiverem vazios
        """
        self._url = build_checkin_url(domain, webhook_id)
        self._domain = domain
        self._webhook_id = webhook_id
        self._sender: RequestSenderProtocol = sender or HttpClient()

    @classmethod
    def from_settings(
        cls,
        settings: TissueSettings | None = None,
        sender: RequestSenderProtocol | None = None,
    ) -> IncomingEndpoint:
        """Factory a partir de TissueSettings (ou do ambiente).

        O HttpClient padrão herda timeout e retries das settings.
        """
        cfg = settings or get_tissue_settings()
        return cls(
            cfg.webhook_id,
            domain=cfg.domain,
            sender=sender or HttpClient(cfg.http_client_config()),
        )

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def webhook_id(self) -> str:
        return self._webhook_id

    @property
    def url(self) -> str:
        """URL completa: https://{domain}/api/webhooks/checkin/{id}."""
        return self._url

    async def send_checkin(self, checkin: Checkin) -> CheckinResponse:
        """Envia check-in e classifica a resposta.

        Args:
            checkin: Check-in construído por CheckinBuilder

        Returns:
            Variante de CheckinResponse (rejeições não levantam exceção)

        Raises:
            TransportError: Falha de rede ou corpo não-JSON
            ResponseProtocolError: Resposta fora do contrato do serviço
        """
        with bind_request_id():
            logger.info("checkin_sending", extra={"domain": self._domain})
            try:
                payload = await self._sender.post(
                    self._url,
                    json=checkin.to_payload(),
                    headers=dict(JSON_HEADERS),
                )
            except TransportError as exc:
                logger.warning(
                    "checkin_transport_failed",
                    extra={"status_code": exc.status_code, "is_retryable": exc.is_retryable},
                )
                raise

            try:
                response = classify_response(payload)
            except ResponseProtocolError:
                logger.warning("checkin_protocol_violation", extra={"domain": self._domain})
                raise

            logger.info(
                "checkin_sent",
                extra={"outcome": type(response).__name__, "accepted": response.is_success},
            )
            return response

    async def fetch(self) -> Any:
        """Executa GET no webhook e retorna o corpo JSON bruto.

        Útil para diagnóstico; o corpo não é classificado.

        Raises:
            TransportError: Falha de rede ou corpo não-JSON
        """
        with bind_request_id():
            logger.debug("webhook_fetch", extra={"domain": self._domain})
            return await self._sender.get(self._url, headers={"Accept": "application/json"})
