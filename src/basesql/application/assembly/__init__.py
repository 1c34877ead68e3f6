"""Application assembly – request merging and clause composition."""
from basesql.application.assembly.assembler import ClauseAssembler
from basesql.application.assembly.definition import QueryDefinition, strip_control_characters
from basesql.application.assembly.identifier import apply_identifier, has_identifier, identifier_filter
from basesql.application.assembly.request import (
    DEFAULT_PER_PAGE,
    AssembledQuery,
    QueryRequest,
    ResolvedQuery,
    merge_request,
)

__all__ = [
    "AssembledQuery",
    "ClauseAssembler",
    "DEFAULT_PER_PAGE",
    "QueryDefinition",
    "QueryRequest",
    "ResolvedQuery",
    "apply_identifier",
    "has_identifier",
    "identifier_filter",
    "merge_request",
    "strip_control_characters",
]
