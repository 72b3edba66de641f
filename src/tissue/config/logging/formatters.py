"""Formatter de logs JSON estruturados.

Campos obrigatórios:
- asctime
- level (levelname)
- logger (name)
- message
- request_id
- service
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "request_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "tissue.connectors.incoming_endpoint",
            "message": "checkin_sent",
            "request_id": "3f0c...",
            "service": "tissue-checkin",
            "outcome": "SuccessResponse"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
