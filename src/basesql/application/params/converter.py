"""Application params – rewrite ``:name`` placeholders for other binding styles.

Named statements are what the assembler produces.  Drivers that bind by
position need them rewritten:

* ``POSITIONAL`` (``$1``) numbers each *distinct* name once, in order of first
  appearance, and repeats the number wherever the name repeats.  One argument
  per distinct name.
* ``QUESTION`` (``?``) replaces every occurrence; one argument per occurrence,
  so repeated names produce repeated arguments.
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from basesql.kernel.types import Dialect

# ``::type`` casts are not placeholders.
PLACEHOLDER = re.compile(r"(?<!:):([A-Za-z_]\w*)")

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


class ParameterStyle(str, Enum):
    NAMED = "named"
    POSITIONAL = "positional"
    QUESTION = "question"


@dataclasses.dataclass(frozen=True)
class ConvertedStatement:
    """Statement rewritten for a binding style plus the matching arguments.

    ``parameters`` is the original mapping for ``NAMED`` and an ordered list
    otherwise.
    """

    statement: str
    parameters: Mapping[str, Any] | list[Any]


def placeholders(statement: str) -> list[str]:
    """Every placeholder name in textual order, repeats included."""
    return PLACEHOLDER.findall(statement)


def convert_parameter_style(
    statement: str,
    parameters: Mapping[str, Any],
    style: ParameterStyle,
) -> ConvertedStatement:
    if style is ParameterStyle.POSITIONAL:
        return _to_positional(statement, parameters)
    if style is ParameterStyle.QUESTION:
        return _to_question(statement, parameters)
    return ConvertedStatement(statement, parameters)


def _to_positional(statement: str, parameters: Mapping[str, Any]) -> ConvertedStatement:
    numbers: dict[str, int] = {}
    for name in placeholders(statement):
        numbers.setdefault(name, len(numbers) + 1)

    converted = PLACEHOLDER.sub(lambda m: f"${numbers[m.group(1)]}", statement)
    return ConvertedStatement(converted, [parameters.get(name) for name in numbers])


def _to_question(statement: str, parameters: Mapping[str, Any]) -> ConvertedStatement:
    arguments = [parameters.get(name) for name in placeholders(statement)]
    return ConvertedStatement(PLACEHOLDER.sub("?", statement), arguments)


def expand_sequence_parameters(
    statement: str,
    parameters: Mapping[str, Any],
) -> tuple[str, dict[str, Any]]:
    """Spread list-valued bindings over one placeholder per element.

    ``IN (:ids)`` with ``ids=[1, 2]`` becomes ``IN (:ids_0, :ids_1)`` with
    ``ids_0=1, ids_1=2``.  An empty sequence binds a single ``NULL`` so the
    predicate stays valid and matches nothing.
    """
    expanded: dict[str, Any] = {}
    spread: dict[str, str] = {}
    for name, value in parameters.items():
        if isinstance(value, _SEQUENCE_TYPES):
            items = list(value) or [None]
            names = [f"{name}_{i}" for i in range(len(items))]
            expanded.update(zip(names, items))
            spread[name] = ", ".join(f":{n}" for n in names)
        else:
            expanded[name] = value

    if not spread:
        return statement, expanded
    rewritten = PLACEHOLDER.sub(lambda m: spread.get(m.group(1), m.group(0)), statement)
    return rewritten, expanded


def default_parameter_style(dialect: Dialect) -> ParameterStyle:
    """Binding style drivers commonly expect for *dialect*."""
    if dialect is Dialect.MYSQL:
        return ParameterStyle.QUESTION
    return ParameterStyle.POSITIONAL


__all__ = [
    "ConvertedStatement",
    "PLACEHOLDER",
    "ParameterStyle",
    "convert_parameter_style",
    "default_parameter_style",
    "expand_sequence_parameters",
    "placeholders",
]
