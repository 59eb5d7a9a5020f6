"""Option constructors.

An option is a plain callable taking a :class:`Query` and returning an
updated copy. Options never mutate the query they receive.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime

from stripe_query._format import CustomValue, ScalarValue, to_timestamp
from stripe_query.enums import Connective, Operator
from stripe_query.models.entry import QueryEntry
from stripe_query.models.query import Query

Option = Callable[[Query], Query]


def options(*opts: Option) -> tuple[Option, ...]:
    """Group options so they can be stored and passed around together."""
    return opts


def _copy_custom(custom: Mapping[str, CustomValue]) -> dict[str, CustomValue]:
    return {key: list(value) if isinstance(value, list) else value for key, value in custom.items()}


def _evolve(query: Query, **update: object) -> Query:
    # Every derived query owns its containers; none are shared with the parent.
    update.setdefault("metadata", dict(query.metadata))
    update.setdefault("custom", _copy_custom(query.custom))
    return query.model_copy(update=update)


def _set(**update: object) -> Option:
    def apply(query: Query) -> Query:
        return _evolve(query, **update)

    return apply


# ── Scalar filters ─────────────────────────────────────────


def with_id(id: str) -> Option:
    return _set(id=id)


def with_active(active: bool) -> Option:
    return _set(active=active)


def with_deleted(deleted: bool) -> Option:
    return _set(deleted=deleted)


def with_shippable(shippable: bool) -> Option:
    return _set(shippable=shippable)


def with_created(created: int | datetime) -> Option:
    """Filter on the creation timestamp; datetimes are converted to unix seconds."""
    return _set(created=to_timestamp(created))


def with_description(description: str) -> Option:
    return _set(description=description)


def with_type(type: str) -> Option:
    return _set(type=type)


def with_currency(currency: str) -> Option:
    return _set(currency=currency)


def with_price_id(price_id: str) -> Option:
    """Filter on ``default_price.id``."""
    return _set(price_id=price_id)


def with_connective(connective: Connective | str) -> Option:
    """Set the connective joining this query's clauses.

    Raises:
        InvalidConnectionTypeError: If ``connective`` is an unrecognized token.
    """
    if not isinstance(connective, Connective):
        connective = Connective.parse(connective)
    return _set(connective=connective)


# ── Metadata and custom fields ─────────────────────────────


def with_metadata(key: str, value: str) -> Option:
    def apply(query: Query) -> Query:
        return _evolve(query, metadata={**query.metadata, key: value})

    return apply


def with_metadata_map(metadata: Mapping[str, str]) -> Option:
    """Merge ``metadata`` into the existing metadata, overwriting per key."""
    snapshot = dict(metadata)

    def apply(query: Query) -> Query:
        return _evolve(query, metadata={**query.metadata, **snapshot})

    return apply


def with_custom(key: str, value: CustomValue) -> Option:
    """Set an arbitrary ``key:'value'`` clause for fields without a helper.

    A list value renders one clause per item.
    """
    if isinstance(value, list):
        value = list(value)

    def apply(query: Query) -> Query:
        custom = _copy_custom(query.custom)
        custom[key] = list(value) if isinstance(value, list) else value
        return _evolve(query, custom=custom)

    return apply


# ── Raw clauses ────────────────────────────────────────────


def with_raw_string(raw: str) -> Option:
    """Append a pre-formatted clause, inserted verbatim."""

    def apply(query: Query) -> Query:
        return _evolve(query, raw_strings=(*query.raw_strings, raw))

    return apply


def with_entry(key: str, operator: Operator | str, value: ScalarValue) -> Option:
    """Append a comparison clause.

    Raises:
        InvalidOperatorError: If ``operator`` is an unrecognized token.
    """
    if not isinstance(operator, Operator):
        operator = Operator.parse(operator)
    entry = QueryEntry(key=key, operator=operator, value=value)

    def apply(query: Query) -> Query:
        return _evolve(query, entries=(*query.entries, entry))

    return apply


with_raw_entry = with_entry


def with_is_null(key: str) -> Option:
    """Shorthand for an equality entry against the literal ``null``."""
    return with_entry(key, Operator.EQUALS, "null")
