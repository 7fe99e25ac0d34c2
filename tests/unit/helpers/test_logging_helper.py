"""Unit tests for writeable_tuple.helpers.logging_helper."""

from __future__ import annotations

import pytest

from writeable_tuple.helpers.logging_helper import describe_value

pytestmark = pytest.mark.unit


class _BrokenRepr:
    def __repr__(self) -> str:
        raise RuntimeError("boom")


class TestDescribeValue:
    """Tests for describe_value()."""

    def test_short_value(self) -> None:
        assert describe_value(42) == "int 42"

    def test_string_uses_repr(self) -> None:
        assert describe_value("a") == "str 'a'"

    def test_long_value_truncated(self) -> None:
        result = describe_value("x" * 100, limit=5)

        assert result == "str 'xxx..."

    def test_zero_limit_disables_truncation(self) -> None:
        value = "y" * 100

        assert describe_value(value, limit=0) == f"str {value!r}"

    def test_broken_repr_does_not_raise(self) -> None:
        assert describe_value(_BrokenRepr()) == "_BrokenRepr <unrepresentable>"
