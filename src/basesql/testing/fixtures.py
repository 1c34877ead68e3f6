"""Testing fixtures – pytest fixtures for the executor fake and assemblers.

Enable in your ``conftest.py``::

    pytest_plugins = ["basesql.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from basesql.application.assembly import ClauseAssembler
from basesql.kernel.types import Dialect
from basesql.testing.fakes import InMemoryQueryExecutor


@pytest.fixture
def fake_executor() -> InMemoryQueryExecutor:
    """PostgreSQL-flavoured executor with no rows."""
    return InMemoryQueryExecutor(Dialect.POSTGRESQL)


@pytest.fixture(params=list(Dialect), ids=lambda d: d.value)
def any_dialect(request: pytest.FixtureRequest) -> Dialect:
    """Parametrises a test over every supported dialect."""
    return request.param


@pytest.fixture
def postgres_assembler() -> ClauseAssembler:
    return ClauseAssembler(Dialect.POSTGRESQL)


__all__ = ["any_dialect", "fake_executor", "postgres_assembler"]
