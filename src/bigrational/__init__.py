# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic with arbitrary precision."""

from .rational import HALF, MINUS_ONE, ONE, Rational, ZERO
from .rounding import RoundMode, get_dflt_round_mode, set_dflt_round_mode
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'HALF',
    'MINUS_ONE',
    'ONE',
    'Rational',
    'RoundMode',
    'ZERO',
    'get_dflt_round_mode',
    'set_dflt_round_mode',
]
