"""Query model: one collection of filter clauses."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from stripe_query._format import CustomValue, format_value
from stripe_query._params import build_search_params
from stripe_query.enums import Connective
from stripe_query.models.entry import QueryEntry

PRICE_ID_FIELD = "default_price.id"

# Rendering order of the dedicated scalar filters: (attribute, search field).
SCALAR_FIELDS: tuple[tuple[str, str], ...] = (
    ("id", "id"),
    ("active", "active"),
    ("deleted", "deleted"),
    ("shippable", "shippable"),
    ("created", "created"),
    ("description", "description"),
    ("type", "type"),
    ("currency", "currency"),
    ("price_id", PRICE_ID_FIELD),
)


class Query(BaseModel):
    """Accumulated filter state for a single search query.

    Instances are immutable; options produce updated copies, so a partially
    built query can be reused as a template.

    Usage:
        query = build_query(with_active(True), with_metadata("tier", "gold"))
        str(query)  # active:'true' AND metadata['tier']:'gold'
    """

    model_config = ConfigDict(frozen=True)

    connective: Connective = Connective.AND

    id: str | None = None
    active: bool | None = None
    deleted: bool | None = None
    shippable: bool | None = None
    created: int | None = None
    description: str | None = None
    type: str | None = None
    currency: str | None = None
    price_id: str | None = None

    metadata: dict[str, str] = Field(default_factory=dict)
    custom: dict[str, CustomValue] = Field(default_factory=dict)
    raw_strings: tuple[str, ...] = ()
    entries: tuple[QueryEntry, ...] = ()

    def clauses(self) -> list[str]:
        """Render every clause, in serialization order, without joining them."""
        clauses: list[str] = []
        for attr, field in SCALAR_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                clauses.append(f"{field}:'{format_value(value)}'")

        for key, value in self.metadata.items():
            clauses.append(f"metadata['{key}']:'{value}'")

        for key, value in self.custom.items():
            items = value if isinstance(value, list) else [value]
            clauses.extend(f"{key}:'{format_value(item)}'" for item in items)

        clauses.extend(self.raw_strings)
        clauses.extend(str(entry) for entry in self.entries)
        return clauses

    def to_string(self) -> str:
        return self.connective.joiner.join(self.clauses())

    def to_params(self, **params: Any) -> httpx.QueryParams:
        """Search request parameters with this query as ``query``."""
        return build_search_params(self.to_string(), **params)

    def __str__(self) -> str:
        return self.to_string()
