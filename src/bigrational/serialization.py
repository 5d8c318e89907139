# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Serialization of rational numbers.

Numerator and denominator are encoded as decimal strings, so that they
survive serialization formats with limited-precision numbers (like JSON
consumers using IEEE doubles) without loss.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from .bigint import int_to_str, parse_int
from .rational import Rational


__all__ = ['dumps', 'from_dict', 'loads', 'to_dict']


def to_dict(value: Rational) -> Dict[str, str]:
    """Return dict with numerator and denominator of `value` as strings.

    Raises:
        TypeError: `value` is not a Rational
    """
    if not isinstance(value, Rational):
        raise TypeError(f"Can't serialize {value!r}: not a Rational.")
    return {
        'numerator': int_to_str(value.numerator),
        'denominator': int_to_str(value.denominator),
    }


def from_dict(data: Mapping[str, Any]) -> Rational:
    """Return Rational from a mapping created by :func:`to_dict`.

    Raises:
        KeyError: 'numerator' or 'denominator' missing
        TypeError: a field is not a string
        ValueError: a field is not a decimal integer or denominator is zero
    """
    num = data['numerator']
    den = data['denominator']
    if not isinstance(num, str) or not isinstance(den, str):
        raise TypeError("Numerator and denominator must be encoded as "
                        "strings.")
    return Rational(parse_int(num), parse_int(den))


def dumps(value: Rational, **kwds: Any) -> str:
    """Return JSON representation of `value`.

    Keyword arguments are passed to :func:`json.dumps`.
    """
    return json.dumps(to_dict(value), **kwds)


def loads(text: str) -> Rational:
    """Return Rational from its JSON representation."""
    return from_dict(json.loads(text))
