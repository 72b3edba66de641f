"""Testes para tissue.utils.errors."""

from __future__ import annotations

import pytest

import tissue
from tissue.utils.errors import (
    BuilderConsumedError,
    CheckinError,
    HasWhitespacesError,
    ResponseDecodeError,
    ResponseProtocolError,
    TissueError,
    TooLongError,
    TransportError,
    UnexpectedStatusError,
)


class TestHierarchy:
    """Famílias de erro são distintas entre si."""

    @pytest.mark.parametrize(
        "error",
        [
            TooLongError("note", 500, 501),
            HasWhitespacesError("a b"),
            BuilderConsumedError("x"),
            TransportError("x"),
            ResponseDecodeError("x"),
            UnexpectedStatusError(500, {}),
        ],
    )
    def test_all_are_tissue_errors(self, error: Exception) -> None:
        """Toda falha do cliente deriva de TissueError."""
        assert isinstance(error, TissueError)

    def test_transport_is_not_protocol_error(self) -> None:
        """Falha de transporte e violação de protocolo não se confundem."""
        assert not isinstance(TransportError("x"), ResponseProtocolError)
        assert not isinstance(ResponseDecodeError("x"), TransportError)

    def test_builder_errors_are_value_errors(self) -> None:
        """Erros de validação do builder são ValueError."""
        assert isinstance(HasWhitespacesError("a b"), CheckinError)
        assert isinstance(TooLongError("link", 2000, 2001), ValueError)


class TestAttributes:
    """Atributos de diagnóstico."""

    def test_transport_error_defaults(self) -> None:
        """TransportError sem status é não-retentável por padrão."""
        error = TransportError("http_request_error")
        assert error.status_code is None
        assert error.is_retryable is False

    def test_unexpected_status_keeps_payload(self) -> None:
        """UnexpectedStatusError guarda status e corpo bruto."""
        payload = {"status": 503}
        error = UnexpectedStatusError(503, payload)
        assert error.status == 503
        assert error.payload is payload


def test_public_api_exports() -> None:
    """Pacote raiz expõe builder, endpoint e respostas."""
    for name in ("CheckinBuilder", "IncomingEndpoint", "SuccessResponse", "classify_response"):
        assert hasattr(tissue, name)
