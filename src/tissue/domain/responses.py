"""Contratos de resposta do webhook de check-in.

ReceivedCheckin é validado com Pydantic sem coerção de tipos: o serviço
sempre preenche todos os campos em caso de sucesso.

CheckinResponse é a união das três respostas possíveis do protocolo.
Rejeições (violations ou erro genérico) são respostas válidas, não exceções.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)


class ReceivedCheckin(BaseModel):
    """Check-in registrado pelo serviço."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: StrictInt = Field(..., ge=0, description="Identificador atribuído pelo serviço.")
    checked_in_at: AwareDatetime = Field(..., description="Timestamp ecoado, com fuso.")
    note: StrictStr = Field(..., description="Nota registrada.")
    link: StrictStr = Field(..., description="Link registrado.")
    tags: tuple[StrictStr, ...] = Field(..., description="Tags registradas.")
    source: StrictStr = Field(..., description="Origem do check-in (ex: webhook).")
    is_private: StrictBool = Field(..., description="Check-in privado.")
    is_too_sensitive: StrictBool = Field(..., description="Conteúdo sensível.")

    @field_validator("checked_in_at", mode="before")
    @classmethod
    def _checked_in_at_must_be_text(cls, value: Any) -> Any:
        # Epoch (número ou string numérica) seria convertido para UTC pelo modo lax
        if not isinstance(value, str):
            raise ValueError("checked_in_at deve ser string RFC 3339")
        try:
            float(value)
        except ValueError:
            return value
        raise ValueError("checked_in_at deve ser string RFC 3339, não epoch")


@dataclass(frozen=True, slots=True)
class SuccessResponse:
    """Check-in aceito pelo serviço."""

    checkin: ReceivedCheckin

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ValidationErrorResponse:
    """Check-in rejeitado por validação (ex: timestamp duplicado)."""

    violations: tuple[str, ...]

    @property
    def is_success(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class OtherErrorResponse:
    """Check-in rejeitado por motivo não especificado."""

    message: str

    @property
    def is_success(self) -> bool:
        return False


CheckinResponse = Union[SuccessResponse, ValidationErrorResponse, OtherErrorResponse]

__all__ = [
    "CheckinResponse",
    "OtherErrorResponse",
    "ReceivedCheckin",
    "SuccessResponse",
    "ValidationErrorResponse",
]
