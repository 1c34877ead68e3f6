"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from dotenv import load_dotenv

from basesql.config.settings.base import Settings
from basesql.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


_PARSERS: dict[Any, Callable[[str], Any]] = {
    bool: _to_bool,
    int: int,
    float: float,
    str: str,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``BASESQL_<FIELD>`` variables; absent ones keep the field default."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = self._environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            values[field.name] = self._parse(env_key, raw, hints.get(field.name, str))

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _parse(env_key: str, raw: str, type_hint: Any) -> Any:
        parser = _PARSERS.get(type_hint, str)
        try:
            return parser(raw)
        except ValueError as exc:
            raise ConfigError(
                f"{env_key} is not a valid {getattr(type_hint, '__name__', type_hint)}: {raw!r}",
                detail={"env_key": env_key},
                cause=exc,
            ) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Merge a ``.env`` file into the process environment, then read it.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
