"""Application params – placeholder-style conversion."""
from basesql.application.params.converter import (
    PLACEHOLDER,
    ConvertedStatement,
    ParameterStyle,
    convert_parameter_style,
    default_parameter_style,
    expand_sequence_parameters,
    placeholders,
)

__all__ = [
    "ConvertedStatement",
    "PLACEHOLDER",
    "ParameterStyle",
    "convert_parameter_style",
    "default_parameter_style",
    "expand_sequence_parameters",
    "placeholders",
]
