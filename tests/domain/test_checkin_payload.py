"""Testes para Checkin.to_payload e format_checked_in_at."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

from tissue.domain.checkin import Checkin, CheckinBuilder, format_checked_in_at


class TestFormatCheckedInAt:
    """Testes de formatação do timestamp."""

    def test_fixed_offset(self) -> None:
        """Offset não-zero é mantido como ±HH:MM."""
        moment = datetime(2021, 1, 1, 12, 30, 45, tzinfo=timezone(timedelta(hours=9)))
        assert format_checked_in_at(moment) == "2021-01-01T12:30:45+09:00"

    def test_negative_offset(self) -> None:
        """Offset negativo."""
        moment = datetime(2021, 6, 1, 8, 0, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert format_checked_in_at(moment) == "2021-06-01T08:00:00-03:00"

    def test_sub_minute_offset_is_truncated(self) -> None:
        """Segundos do offset são descartados: sufixo sempre ±HH:MM."""
        moment = datetime(
            2021, 1, 1, tzinfo=timezone(timedelta(hours=5, minutes=30, seconds=15))
        )
        assert format_checked_in_at(moment) == "2021-01-01T00:00:00+05:30"

    def test_negative_sub_minute_offset_is_truncated(self) -> None:
        """Offset negativo com segundos é truncado em direção a zero."""
        moment = datetime(2021, 1, 1, tzinfo=timezone(-timedelta(hours=3, seconds=20)))
        assert format_checked_in_at(moment) == "2021-01-01T00:00:00-03:00"

    def test_offset_under_one_minute_uses_z(self) -> None:
        """Offset menor que um minuto vira Z."""
        moment = datetime(2021, 1, 1, tzinfo=timezone(timedelta(seconds=30)))
        assert format_checked_in_at(moment) == "2021-01-01T00:00:00Z"

    def test_utc_uses_z(self) -> None:
        """Offset zero é renderizado como Z."""
        moment = datetime(2021, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert format_checked_in_at(moment) == "2021-01-01T00:00:00Z"

    def test_microseconds_are_truncated(self) -> None:
        """Precisão de segundos: frações são descartadas."""
        moment = datetime(2021, 1, 1, 0, 0, 0, 999_999, tzinfo=timezone.utc)
        assert format_checked_in_at(moment) == "2021-01-01T00:00:00Z"

    def test_naive_is_treated_as_local(self) -> None:
        """Datetime naive recebe o fuso local."""
        moment = datetime(2021, 1, 1, 0, 0, 0)
        expected_offset = moment.astimezone().utcoffset()
        text = format_checked_in_at(moment)
        assert text.startswith("2021-01-01T00:00:00")
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        assert parsed.utcoffset() == expected_offset


class TestToPayload:
    """Testes de serialização para o corpo JSON."""

    def test_minimal_payload_omits_unset_fields(self) -> None:
        """Campos opcionais não definidos são omitidos; tags sempre presente."""
        checkin = Checkin(checked_in_at="2021-01-01T00:00:00Z")
        assert checkin.to_payload() == {
            "checked_in_at": "2021-01-01T00:00:00Z",
            "tags": [],
        }

    def test_full_payload(self) -> None:
        """Todos os campos definidos aparecem com as chaves do webhook."""
        checkin = (
            CheckinBuilder.with_datetime(
                datetime(2021, 1, 1, tzinfo=timezone(timedelta(hours=9)))
            )
            .set_note("n")
            .set_link("l")
            .set_tags(["t1", "t2"])
            .set_private(False)
            .set_too_sensitive(True)
            .build()
        )
        assert checkin.to_payload() == {
            "checked_in_at": "2021-01-01T00:00:00+09:00",
            "note": "n",
            "link": "l",
            "tags": ["t1", "t2"],
            "is_private": False,
            "is_too_sensitive": True,
        }

    def test_payload_survives_json_round_trip(self) -> None:
        """Serializar e decodificar preserva os valores."""
        checkin = (
            CheckinBuilder.with_datetime(datetime(2021, 1, 1, tzinfo=timezone.utc))
            .set_note("ノート")
            .set_tags(["タグ"])
            .set_private(True)
            .build()
        )
        decoded = json.loads(json.dumps(checkin.to_payload()))
        assert decoded["note"] == checkin.note
        assert tuple(decoded["tags"]) == checkin.tags
        assert decoded["is_private"] is True
        assert decoded["checked_in_at"] == checkin.checked_in_at
