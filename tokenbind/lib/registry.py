"""
Resolver registry for tokenbind.

Maps a parameter's declared type to the value resolver that binds it:
- Exact-type registration, user resolvers taking precedence over built-ins
- Factories for families of types (every enum, for instance)
- Type names, so front ends can refer to types as text

Lookup order:
    1. user resolver registered for the exact type
    2. built-in resolver for the exact type
    3. user factories, in registration order
    4. built-in factories
"""

import uuid
from typing import Any, Callable, Optional, Self
from tokenbind.lib.context import ResolutionContext
from tokenbind.lib.errors import MissingResolverError
from tokenbind.lib.log import LOG
from tokenbind.lib.primitives import KIND_OF_TYPE
from tokenbind.lib.resolvers import (
    BooleanResolver,
    EnumResolverFactory,
    NumberResolver,
    ResolverFactory,
    StringResolver,
    UUIDResolver,
    ValueResolver,
    resolver_coerce,
)
from tokenbind.models.dataModel import CommandParameter


def type_name(declared: Any) -> str:
    """Return the lower-cased display name of a declared type."""
    return str(getattr(declared, "__name__", declared)).lower()


class ResolverRegistry:
    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._builtin: dict[Any, ValueResolver] = {}
        self._user: dict[Any, ValueResolver] = {}
        self._builtin_factories: list[ResolverFactory] = []
        self._user_factories: list[ResolverFactory] = []
        self._names: dict[str, Any] = {}

    def register(
        self: Self,
        declared: Any,
        resolver: ValueResolver | Callable[[ResolutionContext], Any],
        name: Optional[str] = None,
        replace: bool = False,
    ) -> None:
        """Register a user resolver for an exact type.

        Args:
            declared: The declared parameter type
            resolver: A ValueResolver, or a callable taking a context
            name: Display name, defaults to the type's lower-cased name
            replace: Allow overwriting an existing user registration

        Raises:
            ValueError: If a user resolver is already registered for the type
        """
        if declared in self._user and not replace:
            raise ValueError(f"Resolver already registered for {type_name(declared)}")
        self._user[declared] = resolver_coerce(resolver)
        self._names[(name or type_name(declared)).lower()] = declared
        LOG(f"Registered resolver for {type_name(declared)}")

    def register_builtin(self: Self, declared: Any, resolver: ValueResolver) -> None:
        self._builtin[declared] = resolver
        self._names.setdefault(type_name(declared), declared)

    def register_factory(self: Self, factory: ResolverFactory) -> None:
        """Register a user factory, consulted after exact-type lookups."""
        if not isinstance(factory, ResolverFactory):
            raise TypeError(f"Not a resolver factory: {factory!r}")
        self._user_factories.append(factory)

    def register_builtin_factory(self: Self, factory: ResolverFactory) -> None:
        self._builtin_factories.append(factory)

    def lookup(self: Self, parameter: CommandParameter) -> ValueResolver:
        """Find the resolver for a parameter's declared type.

        Raises:
            MissingResolverError: If no resolver or factory handles the type
        """
        declared = parameter.type
        if declared in self._user:
            return self._user[declared]
        if declared in self._builtin:
            return self._builtin[declared]
        for factory in [*self._user_factories, *self._builtin_factories]:
            resolver: Optional[ValueResolver] = factory.create(parameter)
            if resolver is not None:
                return resolver
        raise MissingResolverError(
            f"No resolver for type {type_name(declared)} of parameter '{parameter.name}'"
        )

    def type_named(self: Self, name: str) -> Any:
        """Return the type registered under a display name, case-insensitive.

        Raises:
            KeyError: If no type carries that name
        """
        key: str = name.lower()
        if key not in self._names:
            raise KeyError(f"Unknown type name: {name}")
        return self._names[key]

    @property
    def type_names(self: Self) -> list[str]:
        """List every registered type name."""
        return sorted(self._names)


def registry_default() -> ResolverRegistry:
    """Return a registry loaded with every built-in resolver."""
    registry: ResolverRegistry = ResolverRegistry()
    registry.register_builtin(str, StringResolver())
    for declared, kind in KIND_OF_TYPE.items():
        registry.register_builtin(declared, NumberResolver(kind))
    registry.register_builtin(bool, BooleanResolver())
    registry.register_builtin(uuid.UUID, UUIDResolver())
    registry.register_builtin_factory(EnumResolverFactory())
    return registry
