"""
Argument stack for one binding pass.

The stack owns the raw tokens of a single command invocation and hands them
out front to back. Every resolver in the pass consumes from the same stack, so
a token popped by one resolver is never seen by the next.

Example:
    stack = ArgumentStack.from_tokens(["10", "hello", "world"])
    stack.pop()                      # "10"
    stack.pop_for_parameter(greedy)  # "hello world"
    stack.is_empty()                 # True
"""

from collections import deque
from typing import Iterable, Iterator, Self
from tokenbind.lib.errors import ExhaustedInputError
from tokenbind.models.dataModel import CommandParameter


class ArgumentStack:
    """Ordered, mutable sequence of tokens consumed from the front.

    Attributes:
        _tokens: Remaining tokens, front of the deque is the next token
    """

    def __init__(self: Self, tokens: Iterable[str] = ()) -> None:
        self._tokens: deque[str] = deque(tokens)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "ArgumentStack":
        """Build a fresh stack from already-split input. The input is copied."""
        return cls(list(tokens))

    def pop(self: Self) -> str:
        """Remove and return the front token.

        Raises:
            ExhaustedInputError: If the stack is empty
        """
        if not self._tokens:
            raise ExhaustedInputError()
        return self._tokens.popleft()

    def peek(self: Self) -> str:
        """Return the front token without removing it.

        Raises:
            ExhaustedInputError: If the stack is empty
        """
        if not self._tokens:
            raise ExhaustedInputError()
        return self._tokens[0]

    def pop_for_parameter(self: Self, parameter: CommandParameter) -> str:
        """Pop the input belonging to a parameter.

        A greedy parameter (`consumesAllString`) takes every remaining token,
        joined by a single space, and leaves the stack empty. Any other
        parameter takes exactly one token, as `pop()` does.

        Raises:
            ExhaustedInputError: If the stack is empty
        """
        if not parameter.consumesAllString:
            return self.pop()
        if not self._tokens:
            raise ExhaustedInputError()
        value: str = " ".join(self._tokens)
        self._tokens.clear()
        return value

    def push_front(self: Self, tokens: Iterable[str]) -> None:
        """Place tokens back at the front, preserving their order."""
        self._tokens.extendleft(reversed(list(tokens)))

    def size(self: Self) -> int:
        return len(self._tokens)

    def is_empty(self: Self) -> bool:
        return not self._tokens

    def join(self: Self, delimiter: str = " ", start: int = 0) -> str:
        """Join the remaining tokens from index `start` without consuming them."""
        return delimiter.join(list(self._tokens)[start:])

    def as_tuple(self: Self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def copy(self: Self) -> "ArgumentStack":
        return ArgumentStack(self._tokens)

    def __len__(self: Self) -> int:
        return len(self._tokens)

    def __iter__(self: Self) -> Iterator[str]:
        return iter(tuple(self._tokens))

    def __repr__(self: Self) -> str:
        return f"ArgumentStack({list(self._tokens)!r})"
