"""Kernel – dialect/operator catalogs and the error hierarchy."""

from basesql.kernel.errors import (
    ArgumentError,
    BaseError,
    ConfigurationError,
    InfrastructureError,
    ResolutionError,
)
from basesql.kernel.types import Dialect, SearchColumnType, SearchOperator, SortDirection

__all__ = [
    "ArgumentError",
    "BaseError",
    "ConfigurationError",
    "Dialect",
    "InfrastructureError",
    "ResolutionError",
    "SearchColumnType",
    "SearchOperator",
    "SortDirection",
]
