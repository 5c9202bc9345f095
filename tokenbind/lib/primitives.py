"""
Primitive numeric parsers.

Each parser converts a single token into a number of one NumberKind, using
Python's own `int()` / `float()` literal grammar. A token that is not a valid
literal, or whose value does not fit the kind, raises InvalidNumberError. There
is no truncation and no wraparound.

Type markers `Byte`, `Short`, `Long` and `Float32` let a parameter declare one
of the sized kinds; the built-in `int` maps to INT (32-bit) and `float` to
DOUBLE.
"""

import math
import re
import struct
from typing import Callable, Final, NewType
from tokenbind.lib.errors import InvalidNumberError
from tokenbind.models.dataModel import NumberKind

Byte = NewType("Byte", int)
Short = NewType("Short", int)
Long = NewType("Long", int)
Float32 = NewType("Float32", float)

INTEGRAL_BOUNDS: Final[dict[NumberKind, tuple[int, int]]] = {
    NumberKind.BYTE: (-(2**7), 2**7 - 1),
    NumberKind.SHORT: (-(2**15), 2**15 - 1),
    NumberKind.INT: (-(2**31), 2**31 - 1),
    NumberKind.LONG: (-(2**63), 2**63 - 1),
}

# Literals that legitimately spell an infinity
_INFINITY: Final[re.Pattern[str]] = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)


def _integral_parse(kind: NumberKind, token: str) -> int:
    try:
        value: int = int(token)
    except ValueError:
        raise InvalidNumberError(kind, token) from None
    low, high = INTEGRAL_BOUNDS[kind]
    if not low <= value <= high:
        raise InvalidNumberError(kind, token)
    return value


def _floating_parse(kind: NumberKind, token: str) -> float:
    try:
        value: float = float(token)
    except ValueError:
        raise InvalidNumberError(kind, token) from None
    if math.isinf(value):
        if not _INFINITY.fullmatch(token.strip()):
            raise InvalidNumberError(kind, token)
        return value
    if kind is NumberKind.FLOAT:
        return _single_round(token, value)
    return value


def _single_round(token: str, value: float) -> float:
    """Round a double to single precision; values that round to infinity overflow."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise InvalidNumberError(NumberKind.FLOAT, token) from None


def byte_parse(token: str) -> int:
    return _integral_parse(NumberKind.BYTE, token)


def short_parse(token: str) -> int:
    return _integral_parse(NumberKind.SHORT, token)


def int_parse(token: str) -> int:
    return _integral_parse(NumberKind.INT, token)


def long_parse(token: str) -> int:
    return _integral_parse(NumberKind.LONG, token)


def float_parse(token: str) -> float:
    return _floating_parse(NumberKind.FLOAT, token)


def double_parse(token: str) -> float:
    return _floating_parse(NumberKind.DOUBLE, token)


PARSERS: Final[dict[NumberKind, Callable[[str], int | float]]] = {
    NumberKind.BYTE: byte_parse,
    NumberKind.SHORT: short_parse,
    NumberKind.INT: int_parse,
    NumberKind.LONG: long_parse,
    NumberKind.FLOAT: float_parse,
    NumberKind.DOUBLE: double_parse,
}

# Declared parameter type -> numeric kind
KIND_OF_TYPE: Final[dict[object, NumberKind]] = {
    Byte: NumberKind.BYTE,
    Short: NumberKind.SHORT,
    int: NumberKind.INT,
    Long: NumberKind.LONG,
    Float32: NumberKind.FLOAT,
    float: NumberKind.DOUBLE,
}


def number_parse(kind: NumberKind, token: str) -> int | float:
    """Parse a token as a number of the given kind.

    Args:
        kind: The numeric kind requested
        token: Raw token text

    Returns:
        The parsed value

    Raises:
        InvalidNumberError: If the token is malformed or out of range
    """
    return PARSERS[kind](token)
