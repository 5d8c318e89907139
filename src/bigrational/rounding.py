# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes for rational number arithmetic."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique


__all__ = ['RoundMode', 'get_dflt_round_mode', 'set_dflt_round_mode']


@unique
class RoundMode(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> RoundMode:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    FLOOR = (1, 'Round towards -Infinity.')
    CEILING = (2, 'Round towards Infinity.')
    TRUNC = (3, 'Round towards zero.')
    HALF_UP = (4, 'Round to nearest with ties going away from zero.')
    HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                    'integer.')


_dflt_round_mode: ContextVar[RoundMode] = \
    ContextVar("dflt_round_mode", default=RoundMode.HALF_EVEN)


def get_dflt_round_mode() -> RoundMode:
    """Return default rounding mode."""
    return _dflt_round_mode.get()


def set_dflt_round_mode(mode: RoundMode) -> Token:
    """Set default rounding mode.

    Args:
        mode (RoundMode): rounding mode to be set as default

    Returns:
        Token which can be used to reset the previous default

    Raises:
        TypeError: given `mode` is not a valid rounding mode
    """
    if not isinstance(mode, RoundMode):
        raise TypeError(f"Illegal rounding mode: {mode!r}")
    return _dflt_round_mode.set(mode)
