"""Comparison clause model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from stripe_query._format import ScalarValue, format_value
from stripe_query.enums import Operator


class QueryEntry(BaseModel):
    """A single ``key <operator> 'value'`` clause.

    Negated operators are written as a ``-`` prefix on the key, followed by
    the positive operator's symbol:

        QueryEntry(key="status", operator=Operator.NOT_EQUAL, value="closed")
        # produces: -status:'closed'
    """

    model_config = ConfigDict(frozen=True)

    key: str
    operator: Operator = Operator.EQUALS
    value: ScalarValue

    def __str__(self) -> str:
        value = format_value(self.value)
        if self.operator.is_negation:
            positive = Operator.EQUALS if self.operator is Operator.NOT_EQUAL else Operator.LIKE
            return f"{self.operator.symbol}{self.key}{positive.symbol}'{value}'"
        return f"{self.key}{self.operator.symbol}'{value}'"
