"""Unit tests for SqlQueryService with the in-memory executor."""

from __future__ import annotations

import asyncio

import pytest

from basesql.application.assembly import ClauseAssembler, QueryDefinition, QueryRequest
from basesql.application.execution import QueryExecutor, SqlQueryService, total_rows
from basesql.kernel.errors import ArgumentError, DialectMismatchError
from basesql.kernel.types import Dialect
from basesql.testing.fakes import InMemoryQueryExecutor


class ProductQuery(QueryDefinition):
    def raw_sql(self) -> str:
        return "SELECT id, sku FROM products"

    def search_columns(self):
        return {"sku": {"op": "start"}}

    def per_page(self) -> int:
        return 2


ROWS = [{"id": 1, "sku": "A-1"}, {"id": 2, "sku": "A-2"}]


class TestTotalRows:
    def test_reads_upper_case_column(self) -> None:
        assert total_rows({"TOTALROWS": 12}) == 12

    def test_reads_folded_column(self) -> None:
        assert total_rows({"totalrows": "7"}) == 7

    def test_missing_row_is_zero(self) -> None:
        assert total_rows(None) == 0

    def test_missing_column(self) -> None:
        with pytest.raises(ArgumentError):
            total_rows({"count": 3})


class TestSqlQueryService:
    def test_fake_satisfies_port(self, fake_executor: InMemoryQueryExecutor) -> None:
        assert isinstance(fake_executor, QueryExecutor)

    def test_run_returns_page_and_metadata(self) -> None:
        executor = InMemoryQueryExecutor(Dialect.POSTGRESQL, rows=ROWS, total_rows=5)
        service = SqlQueryService(executor)

        page = asyncio.run(service.run(QueryRequest(page=2, search_term="A"), ProductQuery()))

        assert page.records == ROWS
        assert page.meta.to_dict() == {"page": 2, "perPage": 2, "totalPages": 3, "totalRows": 5}

    def test_run_issues_data_and_count_statements(self) -> None:
        executor = InMemoryQueryExecutor(Dialect.POSTGRESQL, rows=ROWS)
        service = SqlQueryService(executor)

        asyncio.run(service.run(QueryRequest(search_term="A"), ProductQuery()))

        assert set(executor.statements()) == {
            "SELECT id, sku FROM products WHERE (sku LIKE :sku_start) LIMIT 2 OFFSET 0",
            "SELECT COUNT(*) TOTALROWS FROM (SELECT id, sku FROM products WHERE (sku LIKE :sku_start)) TABCOUNT",
        }
        assert all(params == {"sku_start": "A%"} for _, params in executor.calls)

    def test_run_without_pagination(self) -> None:
        executor = InMemoryQueryExecutor(Dialect.MYSQL, rows=ROWS, total_rows=40)
        page = asyncio.run(SqlQueryService(executor).run(QueryRequest(page=0), ProductQuery()))
        assert page.meta.to_dict() == {"page": 0, "perPage": 0, "totalPages": 1, "totalRows": 40}
        assert not any("LIMIT" in s for s in executor.statements())

    def test_fetch_one(self) -> None:
        executor = InMemoryQueryExecutor(Dialect.POSTGRESQL, rows=ROWS)
        row = asyncio.run(SqlQueryService(executor).fetch_one(1, ProductQuery()))
        assert row == ROWS[0]
        statement, params = executor.calls[-1]
        assert statement == "SELECT id, sku FROM products WHERE id = :id_eq"
        assert params == {"id_eq": 1}

    def test_fetch_one_without_rows(self, fake_executor: InMemoryQueryExecutor) -> None:
        assert asyncio.run(SqlQueryService(fake_executor).fetch_one(9, ProductQuery())) is None

    def test_default_assembler_follows_executor(self) -> None:
        service = SqlQueryService(InMemoryQueryExecutor(Dialect.MSSQL))
        assert service.assembler.dialect is Dialect.MSSQL

    def test_dialect_mismatch(self, fake_executor: InMemoryQueryExecutor) -> None:
        with pytest.raises(DialectMismatchError):
            SqlQueryService(fake_executor, ClauseAssembler(Dialect.MYSQL))
