"""Testing fakes – in-memory doubles for the executor port."""
from basesql.testing.fakes.executor import InMemoryQueryExecutor

__all__ = ["InMemoryQueryExecutor"]
