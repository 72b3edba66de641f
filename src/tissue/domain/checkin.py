"""Check-in validado e seu builder.

O builder valida cada campo no momento em que é definido (fail-fast),
de modo que build() nunca falha por dado inválido: um Checkin construído
sempre respeita os limites abaixo.

Limites medidos em caracteres lógicos (len de str), nunca em bytes UTF-8.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from tissue.utils.errors import BuilderConsumedError, HasWhitespacesError, TooLongError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

MAX_NOTE_LENGTH: int = 500
MAX_LINK_LENGTH: int = 2000


@dataclass(frozen=True, slots=True)
class Checkin:
    """Check-in pronto para envio ao webhook.

    Atributos:
        checked_in_at: Timestamp RFC 3339 com precisão de segundos
        note: Nota opcional (até 500 caracteres)
        link: Link opcional (até 2000 caracteres)
        tags: Tags sem espaços, na ordem informada
        is_private: None = padrão do serviço
        is_too_sensitive: None = padrão do serviço
    """

    checked_in_at: str
    note: str | None = None
    link: str | None = None
    tags: tuple[str, ...] = ()
    is_private: bool | None = None
    is_too_sensitive: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o corpo JSON do webhook.

        Campos opcionais não definidos são omitidos; tags sempre presente.
        """
        payload: dict[str, Any] = {
            "checked_in_at": self.checked_in_at,
            "tags": list(self.tags),
        }
        if self.note is not None:
            payload["note"] = self.note
        if self.link is not None:
            payload["link"] = self.link
        if self.is_private is not None:
            payload["is_private"] = self.is_private
        if self.is_too_sensitive is not None:
            payload["is_too_sensitive"] = self.is_too_sensitive
        return payload


def format_checked_in_at(moment: datetime) -> str:
    """Formata datetime como RFC 3339 com precisão de segundos.

    Datetime naive é interpretado como horário local. Offset zero vira "Z".

    Exemplo:
        2021-01-01T00:00:00+09:00
    """
    aware = moment if moment.utcoffset() is not None else moment.astimezone()
    local = aware.replace(tzinfo=None).isoformat(timespec="seconds")
    return local + _format_offset(aware.utcoffset() or timedelta(0))


def _format_offset(offset: timedelta) -> str:
    # RFC 3339 só aceita ±HH:MM; segundos do offset (LMT) são truncados
    total_minutes = abs(int(offset.total_seconds())) // 60
    if total_minutes == 0:
        return "Z"
    sign = "-" if offset < timedelta(0) else "+"
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _validate_length(field: str, text: str, limit: int) -> str:
    length = len(text)
    if length > limit:
        raise TooLongError(field, limit, length)
    return text


def _validate_tags(tags: Iterable[str]) -> list[str]:
    if isinstance(tags, str):
        raise TypeError("tags deve ser uma coleção de strings, não uma string")
    validated: list[str] = []
    for tag in tags:
        if not isinstance(tag, str):
            raise TypeError(f"tag deve ser string, recebido: {type(tag).__name__}")
        stripped = tag.strip()
        if not stripped:
            continue
        if any(char.isspace() for char in stripped):
            raise HasWhitespacesError(stripped)
        validated.append(stripped)
    return validated


class CheckinBuilder:
    """Acumula e valida campos de um check-in.

    Cada setter valida imediatamente e, em caso de erro, preserva o
    valor anterior. build() consome o builder.

    Uso:
        builder = CheckinBuilder.now_local()
        builder.set_note("cyan.png").set_tags(["a", "b"])
        checkin = builder.build()
    """

    __slots__ = (
        "_checked_in_at",
        "_consumed",
        "_is_private",
        "_is_too_sensitive",
        "_link",
        "_note",
        "_tags",
    )

    def __init__(self, checked_in_at: datetime) -> None:
        self._checked_in_at = checked_in_at
        self._note: str | None = None
        self._link: str | None = None
        self._tags: list[str] = []
        self._is_private: bool | None = None
        self._is_too_sensitive: bool | None = None
        self._consumed = False

    @classmethod
    def with_datetime(cls, checked_in_at: datetime) -> CheckinBuilder:
        """Cria builder com timestamp explícito."""
        return cls(checked_in_at)

    @classmethod
    def now(cls, clock: Callable[[], datetime]) -> CheckinBuilder:
        """Cria builder com o instante retornado por `clock`."""
        return cls(clock())

    @classmethod
    def now_local(cls) -> CheckinBuilder:
        """Cria builder com o instante atual no fuso local."""
        return cls.now(lambda: datetime.now().astimezone())

    @classmethod
    def now_utc(cls) -> CheckinBuilder:
        """Cria builder com o instante atual em UTC."""
        return cls.now(lambda: datetime.now(timezone.utc))

    @property
    def checked_in_at(self) -> datetime:
        return self._checked_in_at

    @property
    def note(self) -> str | None:
        return self._note

    @property
    def link(self) -> str | None:
        return self._link

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._tags)

    @property
    def is_private(self) -> bool | None:
        return self._is_private

    @property
    def is_too_sensitive(self) -> bool | None:
        return self._is_too_sensitive

    def set_note(self, text: str) -> CheckinBuilder:
        """Define a nota.

        Raises:
            TooLongError: Se text tiver mais de 500 caracteres
        """
        self._ensure_usable()
        self._note = _validate_length("note", text, MAX_NOTE_LENGTH)
        return self

    def set_link(self, text: str) -> CheckinBuilder:
        """Define o link.

        Raises:
            TooLongError: Se text tiver mais de 2000 caracteres
        """
        self._ensure_usable()
        self._link = _validate_length("link", text, MAX_LINK_LENGTH)
        return self

    def set_tags(self, tags: Iterable[str]) -> CheckinBuilder:
        """Substitui as tags.

        Espaços nas pontas são removidos e entradas vazias descartadas.
        Tudo ou nada: se uma tag falhar, as tags anteriores permanecem.

        Raises:
            HasWhitespacesError: Se alguma tag tiver espaço interno
        """
        self._ensure_usable()
        self._tags = _validate_tags(tags)
        return self

    def set_private(self, is_private: bool) -> CheckinBuilder:
        self._ensure_usable()
        self._is_private = is_private
        return self

    def set_too_sensitive(self, is_too_sensitive: bool) -> CheckinBuilder:
        self._ensure_usable()
        self._is_too_sensitive = is_too_sensitive
        return self

    def build(self) -> Checkin:
        """Consome o builder e retorna o Checkin imutável.

        Raises:
            BuilderConsumedError: Se build() já foi chamado
        """
        self._ensure_usable()
        self._consumed = True
        return Checkin(
            checked_in_at=format_checked_in_at(self._checked_in_at),
            note=self._note,
            link=self._link,
            tags=tuple(self._tags),
            is_private=self._is_private,
            is_too_sensitive=self._is_too_sensitive,
        )

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("CheckinBuilder já foi consumido por build()")
