"""Compound query model: parenthesised collections joined by a connective."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from stripe_query._params import build_search_params
from stripe_query.enums import Connective
from stripe_query.models.query import Query


class CompoundQuery(BaseModel):
    """Several collections, each wrapped in parentheses.

    Each collection joins its own clauses with its own connective; the
    compound joins the groups with ``connective``:

        (active:'true' AND currency:'usd') OR (type:'service')
    """

    model_config = ConfigDict(frozen=True)

    connective: Connective = Connective.AND
    collections: tuple[Query, ...] = ()

    def to_string(self) -> str:
        return self.connective.joiner.join(f"({collection})" for collection in self.collections)

    def to_params(self, **params: Any) -> httpx.QueryParams:
        """Search request parameters with this query as ``query``."""
        return build_search_params(self.to_string(), **params)

    def __str__(self) -> str:
        return self.to_string()
