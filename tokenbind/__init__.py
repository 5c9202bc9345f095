"""
tokenbind: parameter resolution engine for command-dispatch frameworks.

Converts an ordered stream of raw tokens into typed values bound to the
parameters of a command handler.
"""

__version__ = "0.1.0"

from tokenbind.lib.context import ResolutionContext
from tokenbind.lib.dispatcher import Dispatcher, parameters_bind
from tokenbind.lib.errors import (
    BindingFailure,
    ExhaustedInputError,
    InvalidNumberError,
    InvalidValueError,
    MissingResolverError,
    ResolverSemanticError,
    TokenBindError,
    TooManyArgumentsError,
)
from tokenbind.lib.primitives import Byte, Float32, Long, Short
from tokenbind.lib.registry import ResolverRegistry, registry_default
from tokenbind.lib.resolvers import ResolverFactory, ValueResolver
from tokenbind.lib.stack import ArgumentStack
from tokenbind.models.dataModel import (
    BindingError,
    BindResult,
    CommandParameter,
    ErrorKind,
    NumberKind,
)

__all__ = [
    "ArgumentStack",
    "ResolutionContext",
    "Dispatcher",
    "parameters_bind",
    "ResolverRegistry",
    "registry_default",
    "ValueResolver",
    "ResolverFactory",
    "CommandParameter",
    "BindResult",
    "BindingError",
    "ErrorKind",
    "NumberKind",
    "Byte",
    "Short",
    "Long",
    "Float32",
    "TokenBindError",
    "ExhaustedInputError",
    "InvalidNumberError",
    "ResolverSemanticError",
    "InvalidValueError",
    "TooManyArgumentsError",
    "MissingResolverError",
    "BindingFailure",
]
