"""Configuração de logging estruturado JSON.

Uso:
    from tissue.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu-app")
    logger = get_logger(__name__)
"""

from tissue.config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from tissue.config.logging.context import bind_request_id, get_request_id
from tissue.config.logging.filters import RequestContextFilter
from tissue.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestContextFilter",
    "bind_request_id",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
    "get_request_id",
]
