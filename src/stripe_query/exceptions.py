"""Custom exceptions for the query builder."""

from __future__ import annotations


class StripeQueryError(Exception):
    """Base exception for all query builder errors."""


class _InvalidTokenError(StripeQueryError, ValueError):
    code: str = "INVALID_TOKEN"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{self.code}: {token!r}")


class InvalidOperatorError(_InvalidTokenError):
    """Raised when a string cannot be parsed into an Operator."""

    code = "INVALID_OPERATOR"


class InvalidConnectionTypeError(_InvalidTokenError):
    """Raised when a string cannot be parsed into a Connective."""

    code = "INVALID_CONNECTION_TYPE"
