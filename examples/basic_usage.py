"""Basic usage examples for the query builder."""

from datetime import datetime, timezone

from stripe_query import (
    Connective,
    DefaultOptions,
    Operator,
    and_,
    build_query,
    compound,
    with_active,
    with_created,
    with_currency,
    with_entry,
    with_is_null,
    with_metadata,
    with_metadata_map,
    with_type,
)


def main() -> None:
    # Active products tagged for a campaign
    print("=== Active campaign products ===")
    query = build_query(with_active(True), with_metadata("campaign", "spring"))
    print(f"  {query}")

    # Comparison clauses and null checks
    print("\n=== Recent charges without a description ===")
    query = build_query(
        with_entry("amount", Operator.GREATER_EQUAL_THAN, 1000),
        with_created(datetime(2024, 1, 1, tzinfo=timezone.utc)),
        with_is_null("description"),
    )
    print(f"  {query}")

    # Shared defaults injected per call
    print("\n=== With injected defaults ===")
    defaults = DefaultOptions(with_currency("usd"))
    query = build_query(with_type("service"), defaults=defaults)
    print(f"  {query}")

    # Parenthesised groups
    print("\n=== Compound query ===")
    query = compound(
        Connective.OR,
        and_(with_active(True), with_metadata_map({"tier": "gold", "region": "eu"})),
        and_(with_entry("name", Operator.LIKE, "pro")),
    )
    print(f"  {query}")

    # Parameters for a /search request
    print("\n=== Search parameters ===")
    params = build_query(with_active(False)).to_params(limit=10)
    print(f"  {params}")


if __name__ == "__main__":
    main()
