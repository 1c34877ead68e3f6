"""DB-API adapter – QueryExecutor over a PEP 249 connection."""
from basesql.adapters.dbapi.executor import DbApiQueryExecutor

__all__ = ["DbApiQueryExecutor"]
