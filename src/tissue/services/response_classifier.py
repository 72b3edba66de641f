"""Classificação da resposta do webhook de check-in.

O serviço informa o status dentro do próprio corpo JSON e usa 404/422
tanto para erro de validação quanto para erro genérico; o formato do
objeto `error` é o que desambigua.

Tabela de decisão:
- 200: `checkin` decodificado → SuccessResponse
- 404/422 com `error.violations` lista → ValidationErrorResponse
- 404/422 sem violations → OtherErrorResponse(`error.message` ou "")
- qualquer outro status → UnexpectedStatusError
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from tissue.domain.responses import (
    CheckinResponse,
    OtherErrorResponse,
    ReceivedCheckin,
    SuccessResponse,
    ValidationErrorResponse,
)
from tissue.utils.errors import ResponseDecodeError, UnexpectedStatusError

logger = logging.getLogger(__name__)

STATUS_OK: int = 200
REJECTION_STATUSES: frozenset[int] = frozenset({404, 422})


def classify_response(payload: Any) -> CheckinResponse:
    """Converte o corpo JSON do webhook em uma CheckinResponse.

    Args:
        payload: Corpo JSON já decodificado

    Returns:
        SuccessResponse, ValidationErrorResponse ou OtherErrorResponse

    Raises:
        ResponseDecodeError: Se o corpo não tiver `status` inteiro ou se o
            `checkin` de um 200 não casar com ReceivedCheckin
        UnexpectedStatusError: Se o status não for 200, 404 ou 422
    """
    status = _extract_status(payload)

    if status == STATUS_OK:
        response: CheckinResponse = SuccessResponse(_decode_checkin(payload.get("checkin")))
    elif status in REJECTION_STATUSES:
        response = _classify_rejection(payload.get("error"))
    else:
        logger.warning("checkin_response_unexpected_status", extra={"status": status})
        raise UnexpectedStatusError(status, payload)

    logger.debug(
        "checkin_response_classified",
        extra={"status": status, "outcome": type(response).__name__},
    )
    return response


def _extract_status(payload: Any) -> int:
    if not isinstance(payload, dict):
        logger.warning(
            "checkin_response_not_object",
            extra={"payload_type": type(payload).__name__},
        )
        raise ResponseDecodeError("Resposta deve ser um objeto JSON")

    status = payload.get("status")
    # bool é subclasse de int e não é status válido
    if isinstance(status, bool) or not isinstance(status, int) or status < 0:
        logger.warning("checkin_response_status_missing")
        raise ResponseDecodeError("Campo 'status' ausente ou inválido na resposta")
    return status


def _decode_checkin(raw: Any) -> ReceivedCheckin:
    try:
        return ReceivedCheckin.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            "checkin_response_schema_invalid",
            extra={"error_count": exc.error_count()},
        )
        raise ResponseDecodeError("Campo 'checkin' não corresponde ao formato esperado") from exc


def _classify_rejection(error_obj: Any) -> CheckinResponse:
    if not isinstance(error_obj, dict):
        return OtherErrorResponse("")

    violations = error_obj.get("violations")
    if isinstance(violations, list):
        return ValidationErrorResponse(tuple(_stringify(item) for item in violations))

    message = error_obj.get("message")
    return OtherErrorResponse(message if isinstance(message, str) else "")


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else str(value)
