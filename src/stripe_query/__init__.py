"""stripe-query: typed builder for Stripe search query strings."""

from stripe_query._params import build_search_params
from stripe_query.builder import (
    and_,
    build_query,
    build_query_string,
    compound,
    compound_string,
    new_and_query,
    new_and_query_string,
    new_or_query,
    new_or_query_string,
    or_,
)
from stripe_query.defaults import (
    DefaultOptions,
    get_default_options,
    reset_default_options,
    set_default_options,
)
from stripe_query.enums import Connective, Operator, parse_connection_type, parse_operator
from stripe_query.exceptions import (
    InvalidConnectionTypeError,
    InvalidOperatorError,
    StripeQueryError,
)
from stripe_query.models import CompoundQuery, Query, QueryEntry
from stripe_query.options import (
    Option,
    options,
    with_active,
    with_connective,
    with_created,
    with_currency,
    with_custom,
    with_deleted,
    with_description,
    with_entry,
    with_id,
    with_is_null,
    with_metadata,
    with_metadata_map,
    with_price_id,
    with_raw_entry,
    with_raw_string,
    with_shippable,
    with_type,
)

__all__ = [
    "CompoundQuery",
    "Connective",
    "DefaultOptions",
    "InvalidConnectionTypeError",
    "InvalidOperatorError",
    "Operator",
    "Option",
    "Query",
    "QueryEntry",
    "StripeQueryError",
    "and_",
    "build_query",
    "build_query_string",
    "build_search_params",
    "compound",
    "compound_string",
    "get_default_options",
    "new_and_query",
    "new_and_query_string",
    "new_or_query",
    "new_or_query_string",
    "options",
    "or_",
    "parse_connection_type",
    "parse_operator",
    "reset_default_options",
    "set_default_options",
    "with_active",
    "with_connective",
    "with_created",
    "with_currency",
    "with_custom",
    "with_deleted",
    "with_description",
    "with_entry",
    "with_id",
    "with_is_null",
    "with_metadata",
    "with_metadata_map",
    "with_price_id",
    "with_raw_entry",
    "with_raw_string",
    "with_shippable",
    "with_type",
]

__version__ = "0.1.0"
