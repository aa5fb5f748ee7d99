"""Tests for nostrtags.models._validation shared helpers."""

from __future__ import annotations

import pytest

from nostrtags.models._validation import is_lower_hex, validate_instance, validate_str_no_null


class TestValidateInstance:
    def test_correct_type_passes(self) -> None:
        validate_instance("hello", str, "field")

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(TypeError, match="field must be a str, got int"):
            validate_instance(42, str, "field")

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError, match="field must be an int, got NoneType"):
            validate_instance(None, int, "field")

    def test_subclass_accepted(self) -> None:
        validate_instance(True, int, "field")


class TestValidateStrNoNull:
    def test_normal_string_passes(self) -> None:
        validate_str_no_null("hello", "field")

    def test_empty_string_passes(self) -> None:
        validate_str_no_null("", "field")

    def test_null_byte_rejected(self) -> None:
        with pytest.raises(ValueError, match="field contains null bytes"):
            validate_str_no_null("hello\x00world", "field")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="field must be a str, got bytes"):
            validate_str_no_null(b"hello", "field")


class TestIsLowerHex:
    def test_valid(self) -> None:
        assert is_lower_hex("0123456789abcdef", 16)

    def test_wrong_length(self) -> None:
        assert not is_lower_hex("abcd", 3)

    def test_uppercase_rejected(self) -> None:
        assert not is_lower_hex("ABCD", 4)

    def test_non_hex_rejected(self) -> None:
        assert not is_lower_hex("wxyz", 4)

    def test_empty(self) -> None:
        assert is_lower_hex("", 0)
