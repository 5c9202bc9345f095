"""
Built-in value resolvers.

Implements resolution strategies for the types every command framework
supports out of the box:
- Strings: the only greedy-aware resolver, via pop_for_parameter
- Numbers: one token through the matching primitive parser
- Booleans: true/yes/on/1 and false/no/off/0
- UUIDs: canonical UUID text
- Enums: member lookup by name, produced by a factory per enum type
"""

import enum
import uuid
from typing import Final, Optional, Self
from tokenbind.config.settings import appsettings
from tokenbind.lib.context import ResolutionContext
from tokenbind.lib.errors import InvalidValueError
from tokenbind.lib.log import LOG
from tokenbind.models.dataModel import CommandParameter, NumberKind

TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "yes", "on", "1"})
FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "no", "off", "0"})


class StringResolver:
    """Resolver for str parameters. Greedy parameters take the rest of the input."""

    arity: int = 1

    def resolve(self: Self, context: ResolutionContext) -> str:
        return context.pop_for_parameter()


class NumberResolver:
    """Resolver for one numeric kind."""

    arity: int = 1

    def __init__(self: Self, kind: NumberKind) -> None:
        self.kind: NumberKind = kind

    def resolve(self: Self, context: ResolutionContext) -> int | float:
        return context.pop_number(self.kind)

    def __repr__(self: Self) -> str:
        return f"NumberResolver({self.kind.value})"


class BooleanResolver:
    """Resolver for bool parameters, case-insensitive."""

    arity: int = 1

    def resolve(self: Self, context: ResolutionContext) -> bool:
        token: str = context.pop()
        word: str = token.lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise InvalidValueError("boolean", token)


class UUIDResolver:
    """Resolver for uuid.UUID parameters."""

    arity: int = 1

    def resolve(self: Self, context: ResolutionContext) -> uuid.UUID:
        token: str = context.pop()
        try:
            return uuid.UUID(token)
        except ValueError:
            raise InvalidValueError("uuid", token) from None


class EnumResolver:
    """Resolver for one enum.Enum subclass, matching member names.

    Attributes:
        enum_type: The enum class members are looked up in
        case_sensitive: Exact-case matching; None defers to appsettings
    """

    arity: int = 1

    def __init__(
        self: Self, enum_type: type[enum.Enum], case_sensitive: Optional[bool] = None
    ) -> None:
        self.enum_type: type[enum.Enum] = enum_type
        self.case_sensitive: Optional[bool] = case_sensitive

    def resolve(self: Self, context: ResolutionContext) -> enum.Enum:
        token: str = context.pop()
        case_sensitive: bool = (
            appsettings.enumCaseSensitive
            if self.case_sensitive is None
            else self.case_sensitive
        )
        members = self.enum_type.__members__
        if token in members:
            return members[token]
        if not case_sensitive:
            for name, member in members.items():
                if name.lower() == token.lower():
                    return member
        raise InvalidValueError(self.enum_type.__name__, token)

    def __repr__(self: Self) -> str:
        return f"EnumResolver({self.enum_type.__name__})"


class EnumResolverFactory:
    """Factory creating an EnumResolver for any enum.Enum parameter type."""

    def __init__(self: Self) -> None:
        self._cache: dict[type[enum.Enum], EnumResolver] = {}

    def create(self: Self, parameter: CommandParameter) -> Optional[EnumResolver]:
        declared = parameter.type
        if not (isinstance(declared, type) and issubclass(declared, enum.Enum)):
            return None
        if declared not in self._cache:
            LOG(f"Creating enum resolver for {declared.__name__}")
            self._cache[declared] = EnumResolver(declared)
        return self._cache[declared]
