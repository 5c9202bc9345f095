"""
Resolver package for tokenbind.

Provides the value resolver protocol and the built-in resolution strategies
registered by default.
"""

from .base import FunctionResolver, ResolverFactory, ValueResolver, resolver_coerce
from .builtin import (
    BooleanResolver,
    EnumResolver,
    EnumResolverFactory,
    NumberResolver,
    StringResolver,
    UUIDResolver,
)

__all__ = [
    "ValueResolver",
    "ResolverFactory",
    "FunctionResolver",
    "resolver_coerce",
    "StringResolver",
    "NumberResolver",
    "BooleanResolver",
    "UUIDResolver",
    "EnumResolver",
    "EnumResolverFactory",
]
