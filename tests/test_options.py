"""Tests for option constructors."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from stripe_query import (
    Connective,
    DefaultOptions,
    InvalidConnectionTypeError,
    InvalidOperatorError,
    Operator,
    Query,
    QueryEntry,
    build_query,
    build_query_string,
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


class TestBooleanOptions:
    @pytest.mark.parametrize(
        ("option", "field"),
        [(with_active, "active"), (with_deleted, "deleted"), (with_shippable, "shippable")],
    )
    @pytest.mark.parametrize("value", [True, False])
    def test_single_clause(self, option, field: str, value: bool) -> None:
        rendered = build_query_string(option(value))
        assert rendered == f"{field}:'{str(value).lower()}'"

    @pytest.mark.parametrize("option", [with_active, with_deleted, with_shippable])
    def test_last_write_wins(self, option) -> None:
        rendered = build_query_string(option(True), option(False))
        assert rendered.count(":'") == 1
        assert rendered.endswith(":'false'")


class TestScalarOptions:
    @pytest.mark.parametrize(
        ("option", "expected_first", "expected_last"),
        [
            (with_id, "id:'a'", "id:'b'"),
            (with_description, "description:'a'", "description:'b'"),
            (with_type, "type:'a'", "type:'b'"),
            (with_currency, "currency:'a'", "currency:'b'"),
            (with_price_id, "default_price.id:'a'", "default_price.id:'b'"),
        ],
    )
    def test_last_write_wins(self, option, expected_first: str, expected_last: str) -> None:
        rendered = build_query_string(option("a"), option("b"))
        assert rendered == expected_last
        assert expected_first not in rendered

    def test_created_int(self) -> None:
        assert build_query_string(with_created(1700000000)) == "created:'1700000000'"

    def test_created_datetime(self) -> None:
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert build_query_string(with_created(created)) == "created:'1704067200'"

    def test_created_naive_datetime_is_utc(self) -> None:
        assert build_query_string(with_created(datetime(2024, 1, 1))) == "created:'1704067200'"

    def test_created_last_write_wins(self) -> None:
        assert build_query_string(with_created(1), with_created(2)) == "created:'2'"


class TestMetadataOptions:
    def test_single(self) -> None:
        assert build_query_string(with_metadata("k", "v")) == "metadata['k']:'v'"

    def test_last_write_wins(self) -> None:
        rendered = build_query_string(with_metadata("k", "1"), with_metadata("k", "2"))
        assert rendered == "metadata['k']:'2'"

    def test_map_contains_both(self) -> None:
        rendered = build_query_string(with_metadata_map({"a": "1", "b": "2"}))
        clauses = rendered.split(" AND ")
        assert "metadata['a']:'1'" in clauses
        assert "metadata['b']:'2'" in clauses
        assert len(clauses) == 2

    def test_map_merges_per_key(self) -> None:
        rendered = build_query_string(
            with_metadata("a", "0"),
            with_metadata("c", "3"),
            with_metadata_map({"a": "1", "b": "2"}),
        )
        clauses = rendered.split(" AND ")
        assert set(clauses) == {"metadata['a']:'1'", "metadata['b']:'2'", "metadata['c']:'3'"}

    def test_map_snapshot(self) -> None:
        source = {"a": "1"}
        option = with_metadata_map(source)
        source["a"] = "changed"
        assert option(Query()).metadata == {"a": "1"}


class TestCustomOptions:
    def test_scalar(self) -> None:
        assert build_query_string(with_custom("name", "shirt")) == "name:'shirt'"

    def test_bool_and_int(self) -> None:
        rendered = build_query_string(with_custom("livemode", False), with_custom("amount", 5))
        assert rendered == "livemode:'false' AND amount:'5'"

    def test_last_write_wins(self) -> None:
        rendered = build_query_string(with_custom("name", "a"), with_custom("name", "b"))
        assert rendered == "name:'b'"

    def test_list(self) -> None:
        rendered = build_query_string(
            with_custom("currency", ["usd", "eur"]), connective=Connective.OR
        )
        assert rendered == "currency:'usd' OR currency:'eur'"


class TestRawOptions:
    def test_raw_strings_keep_order(self) -> None:
        rendered = build_query_string(
            with_raw_string("z:'1'"),
            with_raw_string("a:'2'"),
            with_raw_string("-m:'3'"),
        )
        assert rendered == "z:'1' AND a:'2' AND -m:'3'"

    def test_entry_not_equal(self) -> None:
        assert build_query_string(with_entry("status", Operator.NOT_EQUAL, "closed")) == (
            "-status:'closed'"
        )

    def test_entry_like(self) -> None:
        assert build_query_string(with_entry("name", Operator.LIKE, "foo")) == "name~'foo'"

    def test_entry_operator_token(self) -> None:
        assert build_query_string(with_entry("amount", "GREATER_THAN", 10)) == "amount>'10'"

    def test_entry_invalid_token(self) -> None:
        with pytest.raises(InvalidOperatorError):
            with_entry("amount", "bigger", 10)

    def test_entries_keep_order(self) -> None:
        rendered = build_query_string(
            with_entry("b", Operator.LESS_THAN, 2),
            with_raw_entry("a", Operator.GREATER_EQUAL_THAN, 1),
        )
        assert rendered == "b<'2' AND a>='1'"

    def test_raw_entry_alias(self) -> None:
        assert with_raw_entry is with_entry

    def test_is_null_matches_equals_entry(self) -> None:
        assert build_query_string(with_is_null("description")) == build_query_string(
            with_entry("description", Operator.EQUALS, "null")
        )
        assert build_query_string(with_is_null("description")) == "description:'null'"


class TestConnectiveOption:
    def test_enum(self) -> None:
        rendered = build_query_string(with_connective(Connective.OR), with_active(True), with_currency("usd"))
        assert rendered == "active:'true' OR currency:'usd'"

    def test_token(self) -> None:
        assert with_connective("or")(Query()).connective is Connective.OR

    def test_invalid_token(self) -> None:
        with pytest.raises(InvalidConnectionTypeError):
            with_connective("xor")


class TestImmutability:
    def test_options_return_new_query(self) -> None:
        base = Query()
        updated = with_active(True)(base)
        assert base.active is None
        assert updated.active is True

    def test_template_reuse(self) -> None:
        template = with_metadata("tier", "gold")(Query())
        first = with_metadata("region", "eu")(template)
        second = with_raw_string("x:'1'")(template)
        assert template.metadata == {"tier": "gold"}
        assert template.raw_strings == ()
        assert first.metadata == {"tier": "gold", "region": "eu"}
        assert second.metadata == {"tier": "gold"}

    def test_entries_appended_to_copy(self) -> None:
        base = with_is_null("a")(Query())
        extended = with_is_null("b")(base)
        assert base.entries == (QueryEntry(key="a", value="null"),)
        assert len(extended.entries) == 2

    def test_options_helper(self) -> None:
        opts = options(with_active(True), with_currency("usd"))
        assert isinstance(opts, tuple)
        assert build_query_string(*opts) == "active:'true' AND currency:'usd'"

    def test_mutating_built_custom_list_leaves_option_intact(self) -> None:
        option = with_custom("currency", ["usd"])
        first = build_query(option)
        first.custom["currency"].append("eur")
        assert build_query_string(option) == "currency:'usd'"

    def test_mutating_derived_metadata_leaves_template_intact(self) -> None:
        template = with_metadata("tier", "gold")(Query())
        derived = with_active(True)(template)
        assert derived.metadata is not template.metadata
        derived.metadata["region"] = "eu"
        assert template.metadata == {"tier": "gold"}
        assert str(with_currency("usd")(template)) == "currency:'usd' AND metadata['tier']:'gold'"

    def test_mutating_built_query_leaves_defaults_intact(self) -> None:
        provider = DefaultOptions(with_custom("tags", ["a"]), with_metadata("env", "test"))
        first = build_query(defaults=provider)
        first.custom["tags"].append("b")
        first.metadata["env"] = "prod"
        assert build_query_string(defaults=provider) == "metadata['env']:'test' AND tags:'a'"
