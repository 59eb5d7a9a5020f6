"""Query data models."""

from stripe_query.models.compound import CompoundQuery
from stripe_query.models.entry import QueryEntry
from stripe_query.models.query import PRICE_ID_FIELD, SCALAR_FIELDS, Query

__all__ = [
    "CompoundQuery",
    "PRICE_ID_FIELD",
    "Query",
    "QueryEntry",
    "SCALAR_FIELDS",
]
