"""Unit tests for writeable_tuple.helpers.exceptions module.

Tests custom exception classes.
"""

import pytest

from writeable_tuple.helpers.exceptions import InvalidArgumentError


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError exception."""

    @pytest.mark.unit
    def test_invalid_argument_error_is_value_error(self) -> None:
        """InvalidArgumentError should be catchable as ValueError."""
        assert issubclass(InvalidArgumentError, ValueError)

    @pytest.mark.unit
    def test_invalid_argument_error_can_be_raised(self) -> None:
        """InvalidArgumentError should be raisable with a message."""
        with pytest.raises(InvalidArgumentError, match="bad rest"):
            raise InvalidArgumentError("bad rest")

    @pytest.mark.unit
    def test_invalid_argument_error_stores_message(self) -> None:
        """InvalidArgumentError should store the error message."""
        error = InvalidArgumentError("test message")
        assert str(error) == "test message"
