"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from basesql.kernel.errors import (
    ArgumentError,
    BaseError,
    ConfigurationError,
    DialectMismatchError,
    InfrastructureError,
    ParameterCollisionError,
    PrimaryKeyMismatchError,
    QueryExecutionError,
    ResolutionError,
    UnsupportedDialectError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}


class TestConfigurationErrors:
    def test_unsupported_dialect(self) -> None:
        err = UnsupportedDialectError("oracle")
        assert isinstance(err, ConfigurationError)
        assert err.code == "unsupported_dialect"
        assert err.dialect == "oracle"
        assert "oracle" in err.message

    def test_dialect_mismatch(self) -> None:
        err = DialectMismatchError("postgresql", "mysql")
        assert isinstance(err, ConfigurationError)
        assert err.expected == "postgresql"
        assert err.actual == "mysql"


class TestArgumentErrors:
    def test_primary_key_mismatch_detail(self) -> None:
        err = PrimaryKeyMismatchError(("a", "b"), ["a"])
        assert isinstance(err, ArgumentError)
        assert err.primary_key == ("a", "b")
        assert err.detail == {"primary_key": ["a", "b"], "supplied": ["a"]}

    def test_parameter_collision(self) -> None:
        err = ParameterCollisionError("name_cont")
        assert isinstance(err, ArgumentError)
        assert err.name == "name_cont"

    def test_resolution_error_is_not_argument_error(self) -> None:
        assert not issubclass(ResolutionError, ArgumentError)
        assert issubclass(ResolutionError, BaseError)


class TestInfrastructureErrors:
    def test_query_execution_error(self) -> None:
        cause = RuntimeError("db down")
        err = QueryExecutionError("SELECT 1", attempts=3, cause=cause)
        assert isinstance(err, InfrastructureError)
        assert err.statement == "SELECT 1"
        assert err.attempts == 3
        assert err.__cause__ is cause

    def test_raise_and_catch_as_base(self) -> None:
        with pytest.raises(BaseError):
            raise QueryExecutionError("SELECT 1")


class TestErrorContext:
    def test_execution_error_carries_statement(self) -> None:
        payload = QueryExecutionError("SELECT 1", attempts=2).to_dict()
        assert payload["statement"] == "SELECT 1"
        assert "parameter" not in payload

    def test_collision_carries_parameter_name(self) -> None:
        err = ParameterCollisionError("status_eq")
        assert err.parameter == "status_eq"
        assert json.loads(str(err))["parameter"] == "status_eq"
        assert repr(err) == "ParameterCollisionError(code='parameter_collision', parameter='status_eq')"

    def test_cause_rendered_with_type(self) -> None:
        payload = BaseError("wrap", cause=RuntimeError("root")).to_dict()
        assert payload["cause"] == "RuntimeError: root"
