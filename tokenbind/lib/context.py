"""
Resolution context handed to value resolvers.

One context is built per parameter. It combines the shared argument stack of
the pass with the parameter being resolved and offers typed pop helpers, so a
resolver can compose multi-token values while reusing the shared numeric
parsers and error taxonomy.

Every pop helper mutates the shared stack. Typed pops remove the token before
parsing it: a token that fails to parse stays consumed.
"""

from typing import Any, Self, Sequence
from tokenbind.lib import primitives
from tokenbind.lib.stack import ArgumentStack
from tokenbind.models.dataModel import CommandParameter, NumberKind


class ResolutionContext:
    """Per-parameter facade over the argument stack.

    Attributes:
        _stack: The pass's shared argument stack (borrowed, not owned)
        _parameter: The parameter currently being resolved
        _actor: Opaque object describing who issued the command
        _command: Opaque object describing the selected command
        _input: The original, unmodified tokens of the pass
        _resolved: (parameter, value) pairs bound earlier in the pass
    """

    def __init__(
        self: Self,
        stack: ArgumentStack,
        parameter: CommandParameter,
        actor: Any = None,
        command: Any = None,
        input: tuple[str, ...] = (),
        resolved: Sequence[tuple[CommandParameter, Any]] = (),
    ) -> None:
        self._stack: ArgumentStack = stack
        self._parameter: CommandParameter = parameter
        self._actor: Any = actor
        self._command: Any = command
        self._input: tuple[str, ...] = input
        self._resolved: Sequence[tuple[CommandParameter, Any]] = resolved

    def arguments(self: Self) -> ArgumentStack:
        """Return the live argument stack, as left by previous resolvers."""
        return self._stack

    def parameter(self: Self) -> CommandParameter:
        return self._parameter

    def actor(self: Self) -> Any:
        return self._actor

    def command(self: Self) -> Any:
        return self._command

    def input(self: Self) -> tuple[str, ...]:
        """Return the actor's original input, untouched by resolvers."""
        return self._input

    def pop(self: Self) -> str:
        return self._stack.pop()

    def pop_for_parameter(self: Self) -> str:
        """Pop the input of the current parameter, all remaining tokens if greedy."""
        return self._stack.pop_for_parameter(self._parameter)

    def pop_number(self: Self, kind: NumberKind) -> int | float:
        """Pop one token and parse it as `kind`.

        Raises:
            ExhaustedInputError: If the stack is empty
            InvalidNumberError: If the popped token is not a valid `kind`
        """
        return primitives.number_parse(kind, self._stack.pop())

    def pop_byte(self: Self) -> int:
        return primitives.byte_parse(self._stack.pop())

    def pop_short(self: Self) -> int:
        return primitives.short_parse(self._stack.pop())

    def pop_int(self: Self) -> int:
        return primitives.int_parse(self._stack.pop())

    def pop_long(self: Self) -> int:
        return primitives.long_parse(self._stack.pop())

    def pop_float(self: Self) -> float:
        return primitives.float_parse(self._stack.pop())

    def pop_double(self: Self) -> float:
        return primitives.double_parse(self._stack.pop())

    def resolved_argument(self: Self, type_: Any) -> Any:
        """Return the value bound earlier in this pass for a parameter of `type_`.

        Raises:
            LookupError: If no earlier parameter of that type was bound
        """
        for parameter, value in self._resolved:
            if parameter.type is type_:
                return value
        raise LookupError(f"No parameter of type {type_!r} resolved yet")

    def resolved_parameter(self: Self, name: str) -> Any:
        """Return the value bound earlier in this pass for the parameter `name`.

        Raises:
            LookupError: If that parameter has not been bound
        """
        for parameter, value in self._resolved:
            if parameter.name == name:
                return value
        raise LookupError(f"Parameter '{name}' not resolved yet")
