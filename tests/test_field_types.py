"""
Tests for the field type registry and the built-in predicates.
"""
import math

import pytest

from starling.core.errors import DuplicateFieldTypeError, UnknownFieldTypeError
from starling.core.validation.field_types import (
    FieldTypeRegistry,
    build_default_registry,
    registry,
    split_optional,
)


def _accepts(name: str, value) -> bool:
    return registry.resolve(name)(value)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_builtins_are_registered(self):
        for name in ("string", "number", "boolean", "uuid", "date", "timestamp", "yearMonth"):
            assert name in registry

    def test_register_and_resolve(self):
        reg = FieldTypeRegistry()
        reg.register("even", lambda v: isinstance(v, int) and v % 2 == 0, "an even integer")
        even = reg.resolve("even")
        assert even.description == "an even integer"
        assert even(4) is True
        assert even(3) is False

    def test_register_refuses_overwrite(self):
        reg = build_default_registry()
        with pytest.raises(DuplicateFieldTypeError):
            reg.register("uuid", lambda v: True, "anything")
        # The original rule is untouched.
        assert reg.resolve("uuid")("not-a-uuid") is False

    def test_resolve_unknown(self):
        with pytest.raises(UnknownFieldTypeError) as exc_info:
            registry.resolve("iban")
        assert "unknown field type" in str(exc_info.value)
        assert exc_info.value.code == "UNKNOWN_FIELD_TYPE"

    def test_name_cannot_carry_optional_marker(self):
        with pytest.raises(ValueError):
            FieldTypeRegistry().register("date?", lambda v: True, "x")

    def test_split_optional(self):
        assert split_optional("date?") == ("date", True)
        assert split_optional("date") == ("date", False)


# ---------------------------------------------------------------------------
# Built-in predicates
# ---------------------------------------------------------------------------

class TestString:
    def test_accepts_text(self):
        assert _accepts("string", "abc")

    @pytest.mark.parametrize("value", ["", "   ", None, 1, b"abc"])
    def test_rejects(self, value):
        assert not _accepts("string", value)


class TestNumber:
    @pytest.mark.parametrize("value", [0, 12, -3, 1.5, 10**400, -(10**400)])
    def test_accepts(self, value):
        assert _accepts("number", value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, True, "12", None])
    def test_rejects(self, value):
        assert not _accepts("number", value)


class TestBoolean:
    def test_accepts_bools_only(self):
        assert _accepts("boolean", True)
        assert _accepts("boolean", False)
        assert not _accepts("boolean", 1)
        assert not _accepts("boolean", "true")


class TestUuid:
    def test_accepts_canonical(self):
        assert _accepts("uuid", "550e8400-e29b-41d4-a716-446655440000")

    def test_case_insensitive(self):
        assert _accepts("uuid", "550E8400-E29B-41D4-A716-446655440000")

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "550e8400e29b41d4a716446655440000",
            "{550e8400-e29b-41d4-a716-446655440000}",
            "",
            "550e8400-e29b-41d4-a716-446655440000\n",
        ],
    )
    def test_rejects(self, value):
        assert not _accepts("uuid", value)


class TestDate:
    def test_accepts_calendar_date(self):
        assert _accepts("date", "2024-01-31")
        assert _accepts("date", "2024-02-29")

    @pytest.mark.parametrize(
        "value",
        [
            "2024-13-01",
            "2023-02-29",
            "2024-01-31T00:00:00Z",
            "2024-1-31",
            "31/01/2024",
            "2024-01-31\n",
            "\u0662\u0660\u0662\u0664-\u0660\u0661-\u0663\u0661",
        ],
    )
    def test_rejects(self, value):
        assert not _accepts("date", value)


class TestTimestamp:
    @pytest.mark.parametrize(
        "value",
        [
            "2019-10-25T12:34:56.789Z",
            "2019-10-25T12:34:56Z",
            "2019-10-25T12:34:56+01:00",
            "2019-10-25T12:34",
        ],
    )
    def test_accepts(self, value):
        assert _accepts("timestamp", value)

    @pytest.mark.parametrize(
        "value",
        [
            "2019-10-25",
            "2019-10-25T25:00:00Z",
            "2019-02-30T10:00:00Z",
            "2019-10-25 12:34:56",
            "2019-10-25T12:34:56Z\n",
            "2019-10-25T\uff11\uff12:34:56Z",
        ],
    )
    def test_rejects(self, value):
        assert not _accepts("timestamp", value)


class TestYearMonth:
    def test_accepts(self):
        assert _accepts("yearMonth", "2024-01")
        assert _accepts("yearMonth", "2024-12")

    @pytest.mark.parametrize(
        "value",
        ["2024-13", "2024-00", "2024-01-01", "202401", "2024-01\n", "\u0662\u0660\u0662\u0664-\u0660\u0661"],
    )
    def test_rejects(self, value):
        assert not _accepts("yearMonth", value)
