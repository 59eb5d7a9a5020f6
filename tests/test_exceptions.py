"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from stripe_query import (
    InvalidConnectionTypeError,
    InvalidOperatorError,
    StripeQueryError,
    parse_operator,
)


class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(InvalidOperatorError, StripeQueryError)
        assert issubclass(InvalidConnectionTypeError, StripeQueryError)

    def test_value_error_compatible(self) -> None:
        with pytest.raises(ValueError):
            parse_operator("nope")

    def test_message(self) -> None:
        err = InvalidOperatorError("nope")
        assert str(err) == "INVALID_OPERATOR: 'nope'"

    def test_connection_type_message(self) -> None:
        err = InvalidConnectionTypeError("xor")
        assert str(err) == "INVALID_CONNECTION_TYPE: 'xor'"
        assert err.token == "xor"

    def test_catch_base(self) -> None:
        with pytest.raises(StripeQueryError):
            raise InvalidConnectionTypeError("x")
