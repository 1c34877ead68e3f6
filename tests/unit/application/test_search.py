"""Unit tests for search-column resolution across dialects."""

from __future__ import annotations

import pytest

from basesql.application.search import (
    FilterCondition,
    MsSqlSearchColumnResolver,
    MySqlSearchColumnResolver,
    PostgresSearchColumnResolver,
    SearchColumnFactory,
    SearchColumnSpec,
    as_filter_conditions,
    parameter_name,
)
from basesql.kernel.errors import ArgumentError, ResolutionError, UnsupportedDialectError
from basesql.kernel.types import Dialect, SearchColumnType, SearchOperator

S = SearchColumnType.STRING


def _resolve(operator: str, value: object = "v", column: str = "col", kind=S, dialect=Dialect.POSTGRESQL):
    return SearchColumnFactory(dialect).resolve(column, kind, operator, value)


# ---------------------------------------------------------------------------
# Parameter names
# ---------------------------------------------------------------------------


class TestParameterName:
    def test_plain_column(self) -> None:
        assert parameter_name("status", SearchOperator.EQ) == "status_eq"

    def test_dots_and_parentheses_replaced(self) -> None:
        assert parameter_name("c.name", SearchOperator.CONT) == "c_name_cont"
        assert parameter_name("LOWER(c.name)", SearchOperator.I_CONT) == "LOWER_c_name__i_cont"


# ---------------------------------------------------------------------------
# Fragments shared by every dialect
# ---------------------------------------------------------------------------


class TestFragments:
    @pytest.mark.parametrize(
        ("operator", "fragment"),
        [
            ("eq", "col = :col_eq"),
            ("not_eq", "col <> :col_not_eq"),
            ("true", "col = :col_true"),
            ("false", "col = :col_false"),
            ("lt", "col < :col_lt"),
            ("lteq", "col <= :col_lteq"),
            ("gt", "col > :col_gt"),
            ("gteq", "col >= :col_gteq"),
            ("like", "col LIKE :col_like"),
            ("matches", "col LIKE :col_matches"),
            ("cont", "col LIKE :col_cont"),
            ("start", "col LIKE :col_start"),
            ("end", "col LIKE :col_end"),
            ("not_cont", "NOT (col LIKE :col_not_cont)"),
            ("not_start", "NOT (col LIKE :col_not_start)"),
            ("not_end", "NOT (col LIKE :col_not_end)"),
            ("in", "col IN (:col_in)"),
            ("not_in", "NOT (col IN (:col_not_in))"),
            ("null", "col IS NULL"),
            ("not_null", "col IS NOT NULL"),
            ("blank", "(col IS NULL OR col = ' ')"),
            ("empty", "(col IS NULL OR col = ' ')"),
            ("not_empty", "(col IS NOT NULL OR col <> ' ')"),
            ("present", "(col IS NOT NULL OR col <> ' ')"),
        ],
    )
    def test_fragment(self, any_dialect: Dialect, operator: str, fragment: str) -> None:
        assert _resolve(operator, dialect=any_dialect).fragment == fragment

    def test_every_operator_resolves(self, any_dialect: Dialect) -> None:
        factory = SearchColumnFactory(any_dialect)
        for operator in SearchOperator:
            assert factory.resolve("col", S, operator, "x").fragment

    def test_unknown_operator_fails_loudly(self) -> None:
        with pytest.raises(ResolutionError):
            _resolve("between")


class TestCaseInsensitiveFragments:
    def test_postgres_uses_ilike(self) -> None:
        assert _resolve("i_cont").fragment == "col ILIKE :col_i_cont"
        assert _resolve("not_i_cont").fragment == "NOT (col ILIKE :col_not_i_cont)"
        assert _resolve("i_like").fragment == "col ILIKE :col_i_like"

    def test_mysql_lowers_both_sides(self) -> None:
        predicate = _resolve("i_cont", dialect=Dialect.MYSQL)
        assert predicate.fragment == "LOWER(col) LIKE LOWER(:col_i_cont)"

    def test_mssql_uses_ci_collation(self) -> None:
        predicate = _resolve("i_like", dialect=Dialect.MSSQL)
        assert predicate.fragment == "col COLLATE SQL_Latin1_General_CP1_CI_AS LIKE :col_i_like"


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


class TestValueFormatting:
    @pytest.mark.parametrize(
        ("operator", "expected"),
        [
            ("cont", "%foo%"),
            ("i_cont", "%foo%"),
            ("not_cont", "%foo%"),
            ("not_i_cont", "%foo%"),
            ("start", "foo%"),
            ("not_start", "foo%"),
            ("end", "%foo"),
            ("not_end", "%foo"),
            ("like", "foo"),
            ("matches", "foo"),
        ],
    )
    def test_wildcards(self, operator: str, expected: str) -> None:
        assert _resolve(operator, "foo").value == expected

    def test_boolean_shorthands(self) -> None:
        assert _resolve("true", "anything").value is True
        assert _resolve("false", "anything").value is False

    def test_in_splits_strings(self) -> None:
        assert _resolve("in", "a,b,c").value == ["a", "b", "c"]

    def test_in_keeps_sequences(self) -> None:
        assert _resolve("not_in", (1, 2)).value == [1, 2]

    def test_in_wraps_scalars(self) -> None:
        assert _resolve("in", 7).value == [7]

    def test_number_coercion(self) -> None:
        assert _resolve("eq", "42", kind=SearchColumnType.NUMBER).value == 42
        assert _resolve("gt", "12.9", kind=SearchColumnType.NUMBER).value == 12

    def test_float_coercion(self) -> None:
        assert _resolve("lt", "3.5", kind=SearchColumnType.FLOAT).value == 3.5

    def test_lenient_coercion_defaults_to_zero(self) -> None:
        number = _resolve("eq", "abc", kind=SearchColumnType.NUMBER).value
        real = _resolve("eq", "abc", kind=SearchColumnType.FLOAT).value
        assert number == 0 and isinstance(number, int)
        assert real == 0.0 and isinstance(real, float)

    def test_string_and_date_pass_through(self) -> None:
        assert _resolve("eq", "007").value == "007"
        assert _resolve("gteq", "2024-01-01", kind=SearchColumnType.DATE).value == "2024-01-01"

    @pytest.mark.parametrize("operator", ["null", "not_null", "blank", "empty", "not_empty", "present"])
    def test_no_bound_value(self, operator: str) -> None:
        predicate = _resolve(operator, "ignored")
        assert not predicate.binds_value
        assert predicate.value is None
        assert ":" not in predicate.fragment


# ---------------------------------------------------------------------------
# Factory + value objects
# ---------------------------------------------------------------------------


class TestSearchColumnFactory:
    @pytest.mark.parametrize(
        ("dialect", "resolver"),
        [
            (Dialect.MYSQL, MySqlSearchColumnResolver),
            (Dialect.POSTGRESQL, PostgresSearchColumnResolver),
            (Dialect.MSSQL, MsSqlSearchColumnResolver),
        ],
    )
    def test_selects_dialect_resolver(self, dialect: Dialect, resolver: type) -> None:
        assert isinstance(SearchColumnFactory(dialect).resolver, resolver)

    def test_unsupported_dialect_fails_at_construction(self) -> None:
        with pytest.raises(UnsupportedDialectError):
            SearchColumnFactory("db2")


class TestValueObjects:
    def test_filter_condition_from_mapping(self) -> None:
        cond = FilterCondition.of({"op": "gt", "value": "5", "type": "number"})
        assert cond == FilterCondition(SearchOperator.GT, "5", SearchColumnType.NUMBER)

    def test_filter_condition_defaults_to_string(self) -> None:
        assert FilterCondition.of({"op": "eq", "value": "A"}).type is SearchColumnType.STRING

    def test_filter_condition_requires_op(self) -> None:
        with pytest.raises(ArgumentError):
            FilterCondition.of({"value": 1})

    def test_as_filter_conditions_keeps_order(self) -> None:
        conditions = as_filter_conditions([{"op": "gteq", "value": 1}, {"op": "lt", "value": 9}])
        assert [c.op for c in conditions] == [SearchOperator.GTEQ, SearchOperator.LT]

    def test_as_filter_conditions_rejects_scalars(self) -> None:
        with pytest.raises(ArgumentError):
            as_filter_conditions("eq")

    def test_search_column_spec_from_mapping(self) -> None:
        assert SearchColumnSpec.of({"op": "cont"}) == SearchColumnSpec(SearchOperator.CONT)


class TestEmptyMembership:
    @pytest.mark.parametrize("value", [[], (), "", None])
    def test_in_nothing_matches_no_row(self, any_dialect: Dialect, value: object) -> None:
        predicate = _resolve("in", value, dialect=any_dialect)
        assert predicate.fragment == "1 = 0"
        assert not predicate.binds_value
        assert predicate.value is None

    @pytest.mark.parametrize("value", [[], (), "", None])
    def test_not_in_nothing_matches_every_row(self, any_dialect: Dialect, value: object) -> None:
        predicate = _resolve("not_in", value, dialect=any_dialect)
        assert predicate.fragment == "1 = 1"
        assert not predicate.binds_value


class TestLeadingNumberCoercion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("12abc", 12), (" -7 apples", -7), ("1e3", 1), (12.9, 12), (float("nan"), 0), (True, 0)],
    )
    def test_number_reads_integer_prefix(self, raw: object, expected: int) -> None:
        assert _resolve("eq", raw, kind=SearchColumnType.NUMBER).value == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("3.25kg", 3.25), ("1.5e2x", 150.0), (".5", 0.5), ("nan", 0.0), ("inf", 0.0), ("1e999", 0.0), (4, 4.0)],
    )
    def test_float_reads_decimal_prefix(self, raw: object, expected: float) -> None:
        value = _resolve("gt", raw, kind=SearchColumnType.FLOAT).value
        assert value == expected
        assert isinstance(value, float)
