"""SQLAlchemy adapter – QueryExecutor over an async engine."""
from basesql.adapters.sqlalchemy.executor import SqlAlchemyQueryExecutor, dialect_from_engine, is_transient

__all__ = ["SqlAlchemyQueryExecutor", "dialect_from_engine", "is_transient"]
