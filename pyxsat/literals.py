# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Literal codec.

Host literals are non-zero signed integers in DIMACS convention: the
magnitude minus one is the 0-based variable index and a negative sign
marks a negated literal. Internally a literal is a ``Lit(var, sign)``
pair, with ``sign`` True for the negated polarity.

Decoding never raises: it returns a ``DecodeResult`` carrying either the
literal or an ``InvalidLiteral`` error for the caller to check.
"""
import operator

from typing import NamedTuple, Optional

from pyxsat.exceptions import InvalidLiteral, NonIntegerLiteral

# Half of the native 32-bit int range, leaving room for the engine's 2*var+sign encoding
INT_MAX = 2 ** 31 - 1
INT_MIN = -2 ** 31
MAX_LITERAL = INT_MAX // 2
MIN_LITERAL = -(-INT_MIN // 2)


class Lit(NamedTuple):
    var: int
    sign: bool

    def to_int(self) -> int:
        return encode(self.var, self.sign)

    def __neg__(self) -> 'Lit':
        return Lit(self.var, not self.sign)


class DecodeResult(NamedTuple):
    lit: Optional[Lit]
    error: Optional[InvalidLiteral]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Lit:
        if self.error is not None:
            raise self.error
        return self.lit


def decode_int(value: int) -> DecodeResult:
    """Decode a value already known to be a Python int."""
    if value == 0:
        return DecodeResult(None, InvalidLiteral("non-zero integer expected", value))
    if value > MAX_LITERAL or value < MIN_LITERAL:
        return DecodeResult(None, InvalidLiteral(f"integer '{value}' is too small or too large", value))
    if value < 0:
        return DecodeResult(Lit(-value - 1, True), None)
    return DecodeResult(Lit(value - 1, False), None)


def decode(value) -> DecodeResult:
    """
    Decode a host literal into a (variable, polarity) pair.

    Anything implementing ``__index__`` is accepted (Python ints, numpy
    integer scalars); floats and strings are rejected.

    Args:
        value: The host literal.

    Returns:
        DecodeResult: ``lit`` on success, otherwise ``error`` holds an InvalidLiteral.
    """
    try:
        ivalue = operator.index(value)
    except TypeError:
        return DecodeResult(None, NonIntegerLiteral(value))
    return decode_int(ivalue)


def encode(var_index: int, negated: bool) -> int:
    """Inverse of ``decode``: variable index 0 maps to magnitude 1."""
    return -(var_index + 1) if negated else var_index + 1
