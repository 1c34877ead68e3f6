"""Shared pytest configuration."""

pytest_plugins = ["basesql.testing.fixtures"]
