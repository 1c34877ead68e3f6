"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigurationError         (configuration.py)
    │   ├── UnsupportedDialectError
    │   └── DialectMismatchError
    ├── ArgumentError              (arguments.py)
    │   ├── PrimaryKeyMismatchError
    │   └── ParameterCollisionError
    ├── ResolutionError            (arguments.py)
    └── InfrastructureError        (infrastructure.py)
        └── QueryExecutionError
"""

from basesql.kernel.errors.arguments import (
    ArgumentError,
    ParameterCollisionError,
    PrimaryKeyMismatchError,
    ResolutionError,
)
from basesql.kernel.errors.base import BaseError
from basesql.kernel.errors.configuration import (
    ConfigurationError,
    DialectMismatchError,
    UnsupportedDialectError,
)
from basesql.kernel.errors.infrastructure import InfrastructureError, QueryExecutionError

__all__ = [
    "ArgumentError",
    "BaseError",
    "ConfigurationError",
    "DialectMismatchError",
    "InfrastructureError",
    "ParameterCollisionError",
    "PrimaryKeyMismatchError",
    "QueryExecutionError",
    "ResolutionError",
    "UnsupportedDialectError",
]
