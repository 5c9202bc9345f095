"""
dataModel.py

This module defines the data models and enumerations used throughout the
tokenbind engine. The models leverage Pydantic for validation and type safety.

Features:
- Enum classes for numeric kinds and binding error kinds.
- The command parameter metadata consumed by resolvers.
- Structured binding errors and binding pass results.

Usage:
Import these models to describe parameters and inspect binding results.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Optional
from enum import Enum


class NumberKind(Enum):
    """
    Enum for the numeric kinds understood by the primitive parsers.
    """

    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"


class ErrorKind(Enum):
    """
    Enum for the kinds of failure a binding pass can report.
    """

    EXHAUSTED_INPUT = "exhausted_input"
    INVALID_NUMBER = "invalid_number"
    RESOLVER_SEMANTIC = "resolver_semantic"
    TOO_MANY_ARGUMENTS = "too_many_arguments"


class CommandParameter(BaseModel):
    """
    Metadata of one command handler parameter.

    Produced by the external registration component; the engine only reads it.

    Attributes:
        name: Parameter identifier, used in errors and named results
        type: Declared type, the key used to look up a value resolver
        position: Position index in the handler signature
        consumesAllString: Greedy flag, consume every remaining token
        single: Single-token flag
        default: Tokens resolved in place of missing input
        optional: Bind None when input is missing and no default exists
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    type: Any
    position: int = Field(default=0, ge=0)
    consumesAllString: bool = False
    single: bool = False
    default: Optional[tuple[str, ...]] = None
    optional: bool = False

    @field_validator("default", mode="before")
    @classmethod
    def default_normalize(cls, value: Any) -> Any:
        """Accept a bare string as a single default token."""
        if isinstance(value, str):
            return (value,)
        return value

    @model_validator(mode="after")
    def flags_check(self) -> "CommandParameter":
        if self.single and self.consumesAllString:
            raise ValueError(
                f"Parameter '{self.name}' cannot be both single and greedy"
            )
        return self


class BindingError(BaseModel):
    """Structured description of a failed binding pass.

    Attributes:
        position: Position of the failing parameter, None for pass-level errors
        parameter: Name of the failing parameter, None for pass-level errors
        kind: The error kind
        number_kind: Numeric kind requested, for INVALID_NUMBER
        token: Offending raw token, when one exists
        arity: Tokens the failing resolver consumes per value, None when the
            resolver does not declare one or the parameter is greedy
        message: Technical description (not user-facing copy)
    """

    position: Optional[int] = None
    parameter: Optional[str] = None
    kind: ErrorKind
    number_kind: Optional[NumberKind] = None
    token: Optional[str] = None
    arity: Optional[int] = None
    message: str = ""


class BindResult(BaseModel):
    """Result of a binding pass.

    Attributes:
        values: Bound values in parameter order (empty on failure)
        named: Bound values keyed by parameter name (empty on failure)
        error: Error details if the pass failed
        success: Whether every parameter was bound
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    values: list[Any] = Field(default_factory=list)
    named: dict[str, Any] = Field(default_factory=dict)
    error: Optional[BindingError] = None
    success: bool = True

    @model_validator(mode="after")
    def outcome_check(self) -> "BindResult":
        if not self.success and self.error is None:
            raise ValueError("A failed BindResult must carry an error")
        return self

    def unwrap(self) -> list[Any]:
        """Return the bound values, raising BindingFailure if the pass failed."""
        if not self.success:
            from tokenbind.lib.errors import (
                BindingFailure,
            )  # Import here to avoid circular import

            raise BindingFailure(self.error)
        return self.values
