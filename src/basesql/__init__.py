"""
basesql – dialect-aware SQL query assembly.

Import path convention::

    from basesql.kernel.types import Dialect, SearchOperator
    from basesql.application.assembly import ClauseAssembler, QueryRequest
    from basesql.application.execution import SqlQueryService
    from basesql.adapters.sqlalchemy import SqlAlchemyQueryExecutor
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
