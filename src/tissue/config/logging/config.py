"""Configuração centralizada de logging.

A biblioteca nunca configura logging sozinha: a aplicação chama
configure_logging() (ou configure_logging_from_settings()) na inicialização.

Uso:
    from tissue.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu-app")
    logger = get_logger(__name__)
    logger.info("checkin_sent", extra={"status": 200})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tissue.config.logging.filters import RequestContextFilter
from tissue.config.logging.formatters import create_json_formatter
from tissue.config.settings.base import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

    from tissue.config.settings.base import BaseSettings

DEFAULT_SERVICE_NAME = "tissue-checkin"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    request_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        request_id_getter: Função opcional que retorna o request_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RequestContextFilter(service_name, request_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(settings: BaseSettings | None = None) -> None:
    """Configura logging a partir de BaseSettings (ou do ambiente)."""
    from tissue.config.settings.base import get_base_settings

    cfg = settings or get_base_settings()
    level = "DEBUG" if cfg.debug else cfg.log_level
    configure_logging(level=level, service_name=cfg.service_name)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
