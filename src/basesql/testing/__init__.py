"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["basesql.testing.fixtures"]
"""

from basesql.testing.fakes import InMemoryQueryExecutor

__all__ = ["InMemoryQueryExecutor"]
