"""Kernel value types — public re-export surface.

Modules:
  dialect.py   — Dialect
  operators.py — SearchOperator, SearchColumnType
  ordering.py  — SortDirection
"""

from basesql.kernel.types.dialect import Dialect
from basesql.kernel.types.operators import SearchColumnType, SearchOperator
from basesql.kernel.types.ordering import SortDirection

__all__ = ["Dialect", "SearchColumnType", "SearchOperator", "SortDirection"]
