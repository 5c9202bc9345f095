"""
Resolver protocols for parameter binding.

A value resolver turns the tokens reachable through a ResolutionContext into
one typed value. Resolvers decide how many tokens their type consumes: the
engine does not pre-count tokens per type.

Contract for resolver authors:
- Consume exactly the tokens that belong to the value. Under- or
  over-consumption shifts every later parameter.
- Fail by letting context errors propagate, or by raising
  ResolverSemanticError for domain failures.
- No side effects beyond consuming tokens.
- Optionally declare an integer `arity` attribute: the number of tokens one
  value consumes. It is reported back in BindingError.arity when the
  parameter fails, so callers can say how many tokens were expected.

Example:
    class PointResolver:
        def resolve(self, context: ResolutionContext) -> Point:
            return Point(context.pop_double(), context.pop_double())
"""

from typing import Any, Callable, Optional, Protocol, Self, runtime_checkable
from tokenbind.lib.context import ResolutionContext
from tokenbind.models.dataModel import CommandParameter


@runtime_checkable
class ValueResolver(Protocol):
    """Protocol defining the resolver interface for one target type."""

    def resolve(self: Self, context: ResolutionContext) -> Any:
        """Resolve a value from the context.

        Args:
            context: Resolution context of the parameter being bound

        Returns:
            The resolved value, None allowed

        Raises:
            ExhaustedInputError: If the stack ran out of tokens
            InvalidNumberError: If a numeric token is malformed
            ResolverSemanticError: For resolver-specific failures
        """
        ...


@runtime_checkable
class ResolverFactory(Protocol):
    """Protocol for factories creating resolvers for families of types."""

    def create(self: Self, parameter: CommandParameter) -> Optional[ValueResolver]:
        """Return a resolver for the parameter, or None if the type is not handled."""
        ...


class FunctionResolver:
    """Adapts a plain callable `fn(context) -> value` to the ValueResolver protocol."""

    def __init__(self: Self, fn: Callable[[ResolutionContext], Any]) -> None:
        self.fn: Callable[[ResolutionContext], Any] = fn

    def resolve(self: Self, context: ResolutionContext) -> Any:
        return self.fn(context)

    def __repr__(self: Self) -> str:
        return f"FunctionResolver({getattr(self.fn, '__name__', self.fn)!r})"


def resolver_coerce(resolver: ValueResolver | Callable[[ResolutionContext], Any]) -> ValueResolver:
    """Return `resolver` as a ValueResolver, wrapping plain callables.

    Raises:
        TypeError: If `resolver` is neither a ValueResolver nor callable
    """
    if isinstance(resolver, ValueResolver):
        return resolver
    if callable(resolver):
        return FunctionResolver(resolver)
    raise TypeError(f"Not a value resolver: {resolver!r}")
