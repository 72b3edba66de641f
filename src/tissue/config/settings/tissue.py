"""Settings do webhook de check-in do Tissue."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tissue.connectors.http_base import HttpClientConfig

DEFAULT_DOMAIN: str = "shikorism.net"
CHECKIN_PATH_TEMPLATE: str = "/api/webhooks/checkin/{webhook_id}"


def build_checkin_url(domain: str, webhook_id: str) -> str:
    """Monta URL do webhook de check-in.

    Returns:
        URL no formato: https://{domain}/api/webhooks/checkin/{id}

    Raises:
        ValueError: Se domain ou webhook_id estiverem vazios.
    """
    if not domain or not domain.strip():
        raise ValueError("domain é obrigatório")
    if not webhook_id or not webhook_id.strip():
        raise ValueError("webhook_id é obrigatório")
    return f"https://{domain}" + CHECKIN_PATH_TEMPLATE.format(webhook_id=webhook_id)


@dataclass(frozen=True)
class TissueSettings:
    """Configurações do webhook do Tissue.

    Attributes:
        domain: Host do serviço (padrão: shikorism.net)
        webhook_id: ID do webhook de entrada
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Tentativas extras em 429/5xx/erro de conexão
    """

    domain: str = DEFAULT_DOMAIN
    webhook_id: str = ""
    request_timeout_seconds: float = 30.0
    max_retries: int = 0

    @property
    def checkin_url(self) -> str:
        """URL completa do webhook configurado."""
        return build_checkin_url(self.domain, self.webhook_id)

    def http_client_config(self) -> HttpClientConfig:
        """Cria HttpClientConfig a partir destas settings."""
        from tissue.connectors.http_base import HttpClientConfig

        return HttpClientConfig(
            timeout_seconds=self.request_timeout_seconds,
            max_retries=self.max_retries,
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.domain:
            errors.append("TISSUE_DOMAIN não pode ser vazio")

        if not self.webhook_id:
            errors.append("TISSUE_WEBHOOK_ID não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("TISSUE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("TISSUE_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> TissueSettings:
    """Carrega TissueSettings a partir de variáveis de ambiente."""
    return TissueSettings(
        domain=os.getenv("TISSUE_DOMAIN", DEFAULT_DOMAIN),
        webhook_id=os.getenv("TISSUE_WEBHOOK_ID", ""),
        request_timeout_seconds=float(os.getenv("TISSUE_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("TISSUE_MAX_RETRIES", "0")),
    )


@lru_cache(maxsize=1)
def get_tissue_settings() -> TissueSettings:
    """Retorna instância cacheada de TissueSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
