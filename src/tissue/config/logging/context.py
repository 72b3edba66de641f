"""request_id por envio de check-in.

Cada chamada a IncomingEndpoint.send_checkin roda sob um request_id,
injetado nos logs pelo RequestContextFilter. Usa ContextVar para ser
seguro entre tasks asyncio concorrentes.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_request_id: ContextVar[str] = ContextVar("tissue_request_id", default="")


def get_request_id() -> str:
    """Retorna o request_id do contexto atual ou string vazia."""
    return _request_id.get()


@contextmanager
def bind_request_id(request_id: str | None = None) -> Iterator[str]:
    """Define request_id durante o bloco e restaura o anterior ao sair.

    Se já houver request_id no contexto e nenhum for informado, reutiliza
    o existente (chamadas aninhadas compartilham o mesmo ID).
    """
    value = request_id or _request_id.get() or str(uuid.uuid4())
    token = _request_id.set(value)
    try:
        yield value
    finally:
        _request_id.reset(token)
