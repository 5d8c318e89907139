# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Integer helpers used by the rational number implementation.

Python's :class:`int` already is an arbitrary-precision integer. The helpers
in this module only cover the places where its built-in semantics differ from
what the rational arithmetic needs: division truncating towards zero, the
sign of a number, strict parsing of decimal integer literals and conversion
between ints and decimal strings of any length (`int` and `str` refuse to
convert more than `sys.get_int_max_str_digits()` digits).
"""

from __future__ import annotations

import re
from math import gcd
from typing import Tuple


__all__ = ['bit_length', 'gcd', 'int_to_str', 'parse_int', 'sign',
           'str_to_int', 'tdivmod']


# optional sign, decimal digits (any script), nothing else
_INT_PATTERN = re.compile(r'^[+-]?\d+$')

# max number of digits converted by int() or str() in one step, below the
# smallest limit accepted by sys.set_int_max_str_digits
_MAX_CHUNK_DIGITS = 600
_LOG10_2 = 0.3010299956639812


def sign(n: int) -> int:
    """Return -1, 0 or 1 according to the sign of `n`."""
    return (n > 0) - (n < 0)


def bit_length(n: int) -> int:
    """Return number of bits needed to represent abs(`n`)."""
    return n.bit_length()


def tdivmod(n: int, d: int) -> Tuple[int, int]:
    """Return quotient and remainder of `n` / `d`, truncated towards zero.

    The remainder has the sign of the dividend `n`, so that
    `n == q * d + r` and `abs(r) < abs(d)`.

    Raises:
        ZeroDivisionError: `d` is zero
    """
    q, r = divmod(abs(n), abs(d))
    if (n < 0) != (d < 0):
        q = -q
    if n < 0:
        r = -r
    return q, r


def int_to_str(n: int) -> str:
    """Return the decimal representation of `n`, regardless of its size."""
    if n < 0:
        return '-' + int_to_str(-n)
    # upper bound of the number of digits
    n_digits = int(n.bit_length() * _LOG10_2) + 1
    if n_digits <= _MAX_CHUNK_DIGITS:
        return str(n)
    shift = n_digits // 2
    high, low = divmod(n, 10 ** shift)
    return int_to_str(high) + int_to_str(low).zfill(shift)


def str_to_int(digits: str) -> int:
    """Return the non-negative int denoted by the decimal digits `digits`.

    `digits` must consist of decimal digits only, without sign or
    whitespace.
    """
    if len(digits) <= _MAX_CHUNK_DIGITS:
        return int(digits)
    shift = len(digits) // 2
    return (str_to_int(digits[:-shift]) * 10 ** shift +
            str_to_int(digits[-shift:]))


def parse_int(text: str) -> int:
    """Return the integer denoted by the decimal literal `text`.

    Leading and trailing whitespace is ignored.

    Raises:
        TypeError: `text` is not a string
        ValueError: `text` is not a valid decimal integer literal
    """
    if not isinstance(text, str):
        raise TypeError(f"Can't parse {type(text).__name__} as integer.")
    lit = text.strip()
    if _INT_PATTERN.match(lit) is None:
        raise ValueError("Invalid integer literal.")
    if lit[0] == '-':
        return -str_to_int(lit[1:])
    if lit[0] == '+':
        return str_to_int(lit[1:])
    return str_to_int(lit)
