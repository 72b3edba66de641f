"""Hierarquia de exceções do cliente Tissue.

Três famílias independentes:
- CheckinError: entrada inválida no builder (recuperável pelo chamador)
- TransportError: falha de rede/HTTP antes de haver resposta interpretável
- ResponseProtocolError: resposta recebida, mas fora do contrato do serviço

Rejeições do serviço (violations, erro genérico) NÃO são exceções;
são variantes de CheckinResponse.
"""

from __future__ import annotations

from typing import Any


class TissueError(Exception):
    """Base para todas as falhas do cliente."""


class CheckinError(TissueError, ValueError):
    """Valor inválido informado ao CheckinBuilder."""


class TooLongError(CheckinError):
    """Texto excede o limite de caracteres do campo."""

    def __init__(self, field: str, limit: int, length: int) -> None:
        super().__init__(
            f"{field} excede o limite de {limit} caracteres (recebido: {length})"
        )
        self.field = field
        self.limit = limit
        self.length = length


class HasWhitespacesError(CheckinError):
    """Tag contém espaços internos."""

    def __init__(self, tag: str) -> None:
        super().__init__("tag não pode conter espaços internos")
        self.tag = tag


class BuilderConsumedError(TissueError, RuntimeError):
    """Builder já foi consumido por build()."""


class TransportError(TissueError):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class ResponseProtocolError(TissueError):
    """Resposta do serviço viola o contrato esperado."""


class ResponseDecodeError(ResponseProtocolError):
    """Corpo da resposta não tem o formato estrutural esperado."""


class UnexpectedStatusError(ResponseProtocolError):
    """Status informado no corpo não pertence à tabela de decisão."""

    def __init__(self, status: int, payload: Any) -> None:
        super().__init__(f"Status inesperado: {status}, resposta: {payload!r}")
        self.status = status
        self.payload = payload
