"""Unit tests for models.constants module."""

from enum import IntEnum, StrEnum

import pytest

from nostrtags.models.constants import (
    EVENT_KIND_MAX,
    EventKind,
    TagName,
    is_addressable,
    is_ephemeral,
    is_normal_replaceable,
    is_regular,
)


class TestTagName:
    """Tests for TagName StrEnum."""

    def test_is_str_enum(self) -> None:
        assert issubclass(TagName, StrEnum)

    def test_reserved_letters(self) -> None:
        assert TagName.EVENT == "e"
        assert TagName.PUBKEY == "p"
        assert TagName.EVENT_COORDINATES == "a"
        assert TagName.IDENTIFIER == "d"


class TestEventKind:
    """Tests for EventKind IntEnum."""

    def test_is_int_enum(self) -> None:
        assert issubclass(EventKind, IntEnum)

    def test_values(self) -> None:
        assert EventKind.SET_METADATA == 0
        assert EventKind.CONTACTS == 3
        assert EventKind.RELAY_LIST == 10_002
        assert EventKind.LONGFORM_CONTENT == 30_023

    def test_from_int_known(self) -> None:
        assert EventKind.from_int(30023) is EventKind.LONGFORM_CONTENT

    @pytest.mark.parametrize("value", [30_078, 99_999, -1])
    def test_from_int_unknown(self, value: int) -> None:
        assert EventKind.from_int(value) is None

    def test_all_values_within_max(self) -> None:
        assert all(0 <= kind <= EVENT_KIND_MAX for kind in EventKind)

    def test_member_predicates(self) -> None:
        assert EventKind.LONGFORM_CONTENT.is_addressable
        assert not EventKind.LONGFORM_CONTENT.is_normal_replaceable
        assert EventKind.RELAY_LIST.is_normal_replaceable
        assert EventKind.SET_METADATA.is_normal_replaceable
        assert EventKind.CONTACTS.is_normal_replaceable
        assert EventKind.AUTHENTICATION.is_ephemeral
        assert EventKind.TEXT_NOTE.is_regular
        assert not EventKind.TEXT_NOTE.is_addressable


class TestKindRanges:
    """Module-level predicates on raw kind integers."""

    @pytest.mark.parametrize("kind", [30_000, 30_023, 30_078, 39_999])
    def test_addressable(self, kind: int) -> None:
        assert is_addressable(kind)
        assert not is_normal_replaceable(kind)

    @pytest.mark.parametrize("kind", [0, 3, 10_000, 10_002, 19_999])
    def test_normal_replaceable(self, kind: int) -> None:
        assert is_normal_replaceable(kind)
        assert not is_addressable(kind)

    @pytest.mark.parametrize("kind", [1, 2, 4, 44, 1_000, 9_999])
    def test_regular(self, kind: int) -> None:
        assert is_regular(kind)
        assert not is_normal_replaceable(kind)
        assert not is_addressable(kind)

    @pytest.mark.parametrize("kind", [20_000, 22_242, 29_999])
    def test_ephemeral(self, kind: int) -> None:
        assert is_ephemeral(kind)
        assert not is_regular(kind)

    @pytest.mark.parametrize("kind", [40_000, 65_535])
    def test_unclassified(self, kind: int) -> None:
        assert not any(
            predicate(kind)
            for predicate in (is_regular, is_normal_replaceable, is_ephemeral, is_addressable)
        )
