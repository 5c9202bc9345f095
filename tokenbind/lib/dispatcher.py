r"""
Binding pass dispatcher.

Binds the parameters of an already-selected command to values resolved from
the actor's tokens. One pass walks the parameters in declared order:

    Pending -> Resolving -> Pending ... -> Bound
                         \-> Failed

- Each parameter gets its own ResolutionContext over the one shared stack.
- The first engine error aborts the pass: no partial values are returned,
  later parameters are never attempted, and consumed tokens are not restored.
- Nothing is retried here; retry policy belongs to the caller.

Example:
    dispatcher = Dispatcher()
    result = dispatcher.bind(
        [CommandParameter(name="count", type=int),
         CommandParameter(name="text", type=str, consumesAllString=True, position=1)],
        ["3", "hello", "world"],
    )
    result.values  # [3, "hello world"]
"""

from typing import Any, Iterable, Optional, Self, Sequence
from tokenbind.config.settings import appsettings
from tokenbind.lib.context import ResolutionContext
from tokenbind.lib.errors import TokenBindError, TooManyArgumentsError, error_toBinding
from tokenbind.lib.log import LOG
from tokenbind.lib.registry import ResolverRegistry, registry_default
from tokenbind.lib.resolvers import ValueResolver
from tokenbind.lib.stack import ArgumentStack
from tokenbind.models.dataModel import BindResult, CommandParameter


class Dispatcher:
    """Runs binding passes against a resolver registry.

    Attributes:
        registry: Resolver lookup for declared parameter types
        reject_leftover: Fail passes that leave tokens unconsumed
    """

    def __init__(
        self: Self,
        registry: Optional[ResolverRegistry] = None,
        reject_leftover: Optional[bool] = None,
    ) -> None:
        self.registry: ResolverRegistry = registry or registry_default()
        self.reject_leftover: bool = (
            appsettings.rejectLeftover if reject_leftover is None else reject_leftover
        )

    def bind(
        self: Self,
        parameters: Sequence[CommandParameter],
        tokens: Iterable[str],
        actor: Any = None,
        command: Any = None,
    ) -> BindResult:
        """Bind parameters from raw tokens in one pass.

        Args:
            parameters: Parameters in declared order
            tokens: Raw tokens, already split by the caller
            actor: Opaque issuer object, visible to resolvers
            command: Opaque command object, visible to resolvers

        Returns:
            BindResult with the values in parameter order, or the first error

        Raises:
            MissingResolverError: If a parameter's type has no resolver
        """
        raw: tuple[str, ...] = tuple(tokens)
        stack: ArgumentStack = ArgumentStack.from_tokens(raw)
        return self.stack_bind(parameters, stack, actor=actor, command=command, input=raw)

    def stack_bind(
        self: Self,
        parameters: Sequence[CommandParameter],
        stack: ArgumentStack,
        actor: Any = None,
        command: Any = None,
        input: Optional[tuple[str, ...]] = None,
    ) -> BindResult:
        """Bind parameters from a caller-owned stack, leaving it as consumed.

        The stack is mutated in place; inspect it afterwards to see what the
        pass consumed, including on failure.
        """
        original: tuple[str, ...] = stack.as_tuple() if input is None else input
        resolved: list[tuple[CommandParameter, Any]] = []
        LOG(f"Binding {len(parameters)} parameter(s) from {len(stack)} token(s)")

        for parameter in parameters:
            resolver: ValueResolver = self.registry.lookup(parameter)
            try:
                value: Any = self._parameter_resolve(
                    resolver, parameter, stack, actor, command, original, resolved
                )
            except TokenBindError as e:
                LOG(f"Binding failed at '{parameter.name}' ({parameter.position}): {e}")
                return BindResult(
                    error=error_toBinding(
                        e,
                        parameter.position,
                        parameter.name,
                        resolver_arity(resolver, parameter),
                    ),
                    success=False,
                )
            resolved.append((parameter, value))

        if self.reject_leftover and not stack.is_empty():
            e = TooManyArgumentsError(stack.as_tuple())
            LOG(f"Binding failed: {e}")
            return BindResult(error=error_toBinding(e, None, None), success=False)

        return BindResult(
            values=[value for _, value in resolved],
            named={parameter.name: value for parameter, value in resolved},
            success=True,
        )

    def _parameter_resolve(
        self: Self,
        resolver: ValueResolver,
        parameter: CommandParameter,
        stack: ArgumentStack,
        actor: Any,
        command: Any,
        original: tuple[str, ...],
        resolved: list[tuple[CommandParameter, Any]],
    ) -> Any:
        """Resolve one parameter, applying its default or optional policy."""
        if stack.is_empty():
            if parameter.default is not None:
                LOG(f"Using default {list(parameter.default)} for '{parameter.name}'")
                stack.push_front(parameter.default)
            elif parameter.optional:
                return None

        context: ResolutionContext = ResolutionContext(
            stack,
            parameter,
            actor=actor,
            command=command,
            input=original,
            resolved=tuple(resolved),
        )
        value: Any = resolver.resolve(context)
        LOG(f"Bound '{parameter.name}' = {value!r}")
        return value


def resolver_arity(resolver: ValueResolver, parameter: CommandParameter) -> Optional[int]:
    """Tokens `resolver` declares it consumes for `parameter`; None if greedy or undeclared."""
    if parameter.consumesAllString:
        return None
    return getattr(resolver, "arity", None)


_default_dispatcher: Optional[Dispatcher] = None


def parameters_bind(
    parameters: Sequence[CommandParameter],
    tokens: Iterable[str],
    actor: Any = None,
    command: Any = None,
) -> BindResult:
    """Bind parameters with a dispatcher over the default registry.

    The dispatcher is created on first use and reused; it holds no per-pass
    state.
    """
    global _default_dispatcher

    if _default_dispatcher is None:
        _default_dispatcher = Dispatcher()
    return _default_dispatcher.bind(parameters, tokens, actor=actor, command=command)
