"""Construction entry points.

Every builder starts from an empty :class:`Query`, applies the default
options and then the caller's options, in order.
"""

from __future__ import annotations

from stripe_query._logging import log_build_call
from stripe_query.defaults import DEFAULT_CONNECTIVE, DefaultOptions, default_options
from stripe_query.enums import Connective
from stripe_query.models import CompoundQuery, Query
from stripe_query.options import Option


def _connective(connective: Connective | str) -> Connective:
    if isinstance(connective, Connective):
        return connective
    return Connective.parse(connective)


def _apply(query: Query, opts: tuple[Option, ...]) -> Query:
    for option in opts:
        query = option(query)
    return query


@log_build_call
def build_query(
    *options: Option,
    connective: Connective | str = DEFAULT_CONNECTIVE,
    defaults: DefaultOptions | None = None,
) -> Query:
    """Build a query from the default options followed by ``options``.

    Args:
        *options: Caller options, applied after the defaults.
        connective: Connective joining the clauses, or a token such as ``"or"``
            (an option may override it).
        defaults: Provider of default options; the process-wide one if omitted.
    """
    provider = defaults if defaults is not None else default_options
    query = Query(connective=_connective(connective))
    query = _apply(query, provider.get())
    return _apply(query, options)


def build_query_string(
    *options: Option,
    connective: Connective | str = DEFAULT_CONNECTIVE,
    defaults: DefaultOptions | None = None,
) -> str:
    """Like :func:`build_query`, but return the rendered string."""
    return build_query(*options, connective=connective, defaults=defaults).to_string()


def and_(*options: Option, defaults: DefaultOptions | None = None) -> Query:
    """A collection whose clauses are joined with AND."""
    return build_query(*options, connective=Connective.AND, defaults=defaults)


def or_(*options: Option, defaults: DefaultOptions | None = None) -> Query:
    """A collection whose clauses are joined with OR."""
    return build_query(*options, connective=Connective.OR, defaults=defaults)


# ── Compound queries ───────────────────────────────────────


@log_build_call
def compound(connective: Connective | str, *collections: Query) -> CompoundQuery:
    """Join parenthesised collections with ``connective``.

    Usage:
        compound(Connective.OR, and_(with_active(True)), and_(with_type("good")))
        # (active:'true') OR (type:'good')
    """
    return CompoundQuery(connective=_connective(connective), collections=collections)


def compound_string(connective: Connective | str, *collections: Query) -> str:
    return compound(connective, *collections).to_string()


def new_and_query(*options: Option, defaults: DefaultOptions | None = None) -> CompoundQuery:
    """A compound query holding a single AND collection."""
    return compound(DEFAULT_CONNECTIVE, and_(*options, defaults=defaults))


def new_or_query(*options: Option, defaults: DefaultOptions | None = None) -> CompoundQuery:
    """A compound query holding a single OR collection."""
    return compound(DEFAULT_CONNECTIVE, or_(*options, defaults=defaults))


def new_and_query_string(*options: Option, defaults: DefaultOptions | None = None) -> str:
    return new_and_query(*options, defaults=defaults).to_string()


def new_or_query_string(*options: Option, defaults: DefaultOptions | None = None) -> str:
    return new_or_query(*options, defaults=defaults).to_string()
