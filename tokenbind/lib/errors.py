"""
Error taxonomy for the tokenbind engine.

Errors are raised inside a binding pass and converted to structured
`BindingError` values by the dispatcher. The engine renders no user-facing
text; messages here are technical and meant for logs.

Kinds:
- ExhaustedInputError: a resolver asked for a token but none remained
- InvalidNumberError: a token is not a valid literal of the requested kind
- ResolverSemanticError: a resolver-specific domain failure
- TooManyArgumentsError: tokens left over once every parameter is bound
- MissingResolverError: no resolver registered for a declared type
"""

from typing import Optional
from tokenbind.models.dataModel import BindingError, ErrorKind, NumberKind


class TokenBindError(Exception):
    """Base class of every error raised by the engine."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message: str = message

    @property
    def token(self) -> Optional[str]:
        return None

    @property
    def number_kind(self) -> Optional[NumberKind]:
        return None


class ExhaustedInputError(TokenBindError, IndexError):
    """No token remained on the argument stack."""

    kind = ErrorKind.EXHAUSTED_INPUT

    def __init__(self, message: str = "argument stack is empty") -> None:
        super().__init__(message)


class InvalidNumberError(TokenBindError, ValueError):
    """A token did not parse as the requested numeric kind, or is out of range."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, number_kind: NumberKind, token: str) -> None:
        super().__init__(f"invalid {number_kind.value}: {token!r}")
        self._number_kind: NumberKind = number_kind
        self._token: str = token

    @property
    def token(self) -> str:
        return self._token

    @property
    def number_kind(self) -> NumberKind:
        return self._number_kind


class ResolverSemanticError(TokenBindError):
    """A resolver-specific domain failure, such as a failed lookup."""

    kind = ErrorKind.RESOLVER_SEMANTIC


class InvalidValueError(ResolverSemanticError):
    """A token is not a valid value of a non-numeric type (boolean, enum, uuid)."""

    def __init__(self, label: str, token: str) -> None:
        super().__init__(f"invalid {label}: {token!r}")
        self.label: str = label
        self._token: str = token

    @property
    def token(self) -> str:
        return self._token


class TooManyArgumentsError(TokenBindError):
    """Tokens remained after every parameter was bound."""

    kind = ErrorKind.TOO_MANY_ARGUMENTS

    def __init__(self, leftover: tuple[str, ...]) -> None:
        super().__init__(f"{len(leftover)} unconsumed token(s): {' '.join(leftover)}")
        self.leftover: tuple[str, ...] = leftover

    @property
    def token(self) -> Optional[str]:
        return self.leftover[0] if self.leftover else None


class MissingResolverError(TokenBindError, LookupError):
    """No resolver is registered for a parameter's declared type."""


class BindingFailure(TokenBindError):
    """Raised by `BindResult.unwrap()` when the pass failed."""

    def __init__(self, error: BindingError) -> None:
        super().__init__(error.message)
        self.error: BindingError = error


def error_toBinding(
    error: TokenBindError,
    position: Optional[int],
    parameter: Optional[str],
    arity: Optional[int] = None,
) -> BindingError:
    """Convert a raised engine error into its structured form.

    Args:
        error: The error raised during the pass
        position: Position of the parameter being resolved
        parameter: Name of the parameter being resolved
        arity: Tokens the failing resolver declares it consumes, if known

    Returns:
        BindingError carrying the kind, numeric kind and offending token
    """
    return BindingError(
        position=position,
        parameter=parameter,
        kind=error.kind or ErrorKind.RESOLVER_SEMANTIC,
        number_kind=error.number_kind,
        token=error.token,
        arity=arity,
        message=error.message,
    )
