"""Connective and operator vocabulary of the search grammar."""

from __future__ import annotations

from enum import Enum

from stripe_query.exceptions import InvalidConnectionTypeError, InvalidOperatorError


class Connective(str, Enum):
    """Boolean connective used to join clauses."""

    UNKNOWN = "UNKNOWN"
    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value

    @property
    def joiner(self) -> str:
        """The connective surrounded by single spaces, e.g. ``" AND "``."""
        return f" {self.value} "

    @classmethod
    def parse(cls, token: str) -> Connective:
        """Parse ``and``/``or``/``unknown`` in any case.

        Raises:
            InvalidConnectionTypeError: If the token is not recognized.
        """
        try:
            return cls(token.upper())
        except ValueError:
            raise InvalidConnectionTypeError(token) from None


class Operator(str, Enum):
    """Comparison operator of an entry clause."""

    UNKNOWN = "unknown"
    EQUALS = "equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_EQUAL_THAN = "greater_equal_than"
    LESS_EQUAL_THAN = "less_equal_than"
    NOT_EQUAL = "not_equal"
    LIKE = "like"
    NOT_LIKE = "not_like"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Symbol written between key and value (a prefix for the negations)."""
        return _SYMBOLS[self]

    @property
    def is_negation(self) -> bool:
        """True for operators rendered as a ``-`` prefix on the key."""
        return self in (Operator.NOT_EQUAL, Operator.NOT_LIKE)

    @classmethod
    def parse(cls, token: str) -> Operator:
        """Parse an operator name such as ``"greater_than"`` in any case.

        Raises:
            InvalidOperatorError: If the token is not recognized.
        """
        try:
            return cls(token.lower())
        except ValueError:
            raise InvalidOperatorError(token) from None


_SYMBOLS: dict[Operator, str] = {
    Operator.UNKNOWN: "unknown",
    Operator.EQUALS: ":",
    Operator.GREATER_THAN: ">",
    Operator.LESS_THAN: "<",
    Operator.GREATER_EQUAL_THAN: ">=",
    Operator.LESS_EQUAL_THAN: "<=",
    Operator.NOT_EQUAL: "-",
    Operator.LIKE: "~",
    Operator.NOT_LIKE: "-",
}


def parse_operator(token: str) -> Operator:
    """Module-level alias for :meth:`Operator.parse`."""
    return Operator.parse(token)


def parse_connection_type(token: str) -> Connective:
    """Module-level alias for :meth:`Connective.parse`."""
    return Connective.parse(token)
