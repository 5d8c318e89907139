# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'bigrational' (rounding and modulo)."""

from decimal import Decimal, getcontext, localcontext
from fractions import Fraction
import math

import pytest
from hypothesis import assume, given, strategies

from bigrational import (
    Rational, RoundMode, ZERO, get_dflt_round_mode, set_dflt_round_mode)


ctx = getcontext()
ctx.prec = 3350

# names of equivalent rounding modes in module 'decimal'
DECIMAL_ROUNDING = {
    RoundMode.FLOOR: "ROUND_FLOOR",
    RoundMode.CEILING: "ROUND_CEILING",
    RoundMode.TRUNC: "ROUND_DOWN",
    RoundMode.HALF_UP: "ROUND_HALF_UP",
    RoundMode.HALF_DOWN: "ROUND_HALF_DOWN",
    RoundMode.HALF_EVEN: "ROUND_HALF_EVEN",
}


def dec_round(value, mode):
    """Return Fraction `value` rounded to an int using module 'decimal'."""
    with localcontext() as lctx:
        lctx.prec = 3350
        quot = Decimal(value.numerator) / Decimal(value.denominator)
        return int(quot.to_integral_value(DECIMAL_ROUNDING[mode]))


@pytest.mark.parametrize(("value", "results"),
                         (("7/3", (2, 3, 2, 2, 2, 2)),
                          ("-7/3", (-3, -2, -2, -2, -2, -2)),
                          ("8/3", (2, 3, 2, 3, 3, 3)),
                          ("-8/3", (-3, -2, -2, -3, -3, -3)),
                          ("25/10", (2, 3, 2, 3, 2, 2)),
                          ("-25/10", (-3, -2, -2, -3, -2, -2)),
                          ("35/10", (3, 4, 3, 4, 3, 4)),
                          ("-35/10", (-4, -3, -3, -4, -3, -4)),
                          ("1/2", (0, 1, 0, 1, 0, 0)),
                          ("-1/2", (-1, 0, 0, -1, 0, 0)),
                          ("1/3", (0, 1, 0, 0, 0, 0)),
                          ("-1/3", (-1, 0, 0, 0, 0, 0)),
                          ("17", (17, 17, 17, 17, 17, 17)),
                          ("-17", (-17, -17, -17, -17, -17, -17)),
                          ("0", (0, 0, 0, 0, 0, 0))),
                         ids=("7/3", "-7/3", "8/3", "-8/3", "2.5", "-2.5",
                              "3.5", "-3.5", "0.5", "-0.5", "1/3", "-1/3",
                              "int", "neg-int", "zero"))
def test_round_modes(value, results):
    rn = Rational(value)
    for mode, res in zip((RoundMode.FLOOR, RoundMode.CEILING,
                          RoundMode.TRUNC, RoundMode.HALF_UP,
                          RoundMode.HALF_DOWN, RoundMode.HALF_EVEN),
                         results):
        adj = rn.round(mode)
        assert isinstance(adj, Rational)
        assert adj.is_integer()
        assert adj == res, mode.name


@given(value=strategies.fractions())
def test_round_hypo(rnd, value):
    rn = Rational(value)
    adj = rn.round(rnd)
    assert adj.denominator == 1
    assert adj.numerator == dec_round(value, rnd)


@pytest.mark.parametrize("value",
                         ("7/3",
                          "-" + "1" * 1297 + "/" + "4" * 733,
                          "-25/10",
                          "35/10"),
                         ids=("compact", "large", "neg-tie", "tie"))
def test_round_wrappers(value):
    rn = Rational(value)
    assert rn.trunc_rational() == rn.round(RoundMode.TRUNC)
    assert rn.floor_rational() == rn.round(RoundMode.FLOOR)
    assert rn.ceil_rational() == rn.round(RoundMode.CEILING)
    assert rn.round_half_up() == rn.round(RoundMode.HALF_UP)
    assert rn.round_half_down() == rn.round(RoundMode.HALF_DOWN)
    assert rn.round_half_even() == rn.round(RoundMode.HALF_EVEN)


def test_floor_ceil():
    assert str(Rational(7, 3).floor_rational()) == "2"
    assert str(Rational(7, 3).ceil_rational()) == "3"
    assert str(Rational(-7, 3).floor_rational()) == "-3"
    assert str(Rational(-7, 3).ceil_rational()) == "-2"


@pytest.mark.parametrize(("value", "result"),
                         (("24/10", "2"),
                          ("25/10", "3"),
                          ("26/10", "3"),
                          ("-25/10", "-3")),
                         ids=("2.4", "2.5", "2.6", "-2.5"))
def test_round_half_up(value, result):
    assert str(Rational(value).round_half_up()) == result


@pytest.mark.parametrize(("value", "result"),
                         (("25/10", "2"),
                          ("35/10", "4"),
                          ("-25/10", "-2"),
                          ("-35/10", "-4")),
                         ids=("2.5", "3.5", "-2.5", "-3.5"))
def test_round_half_even(value, result):
    assert str(Rational(value).round_half_even()) == result


@pytest.mark.parametrize("mode", ("FLOOR", 4, None.__class__),
                         ids=("str", "int", "type"))
def test_round_wrong_mode(mode):
    rn = Rational(7, 3)
    with pytest.raises(TypeError):
        rn.round(mode)


@pytest.mark.parametrize("value",
                         ("0",
                          "-1703/100",
                          Fraction(9 ** 394, 10 ** 247),
                          Fraction(-19, 4000),
                          Fraction(7, 2)),
                         ids=("zero", "compact", "large", "fraction", "tie"))
def test_int_protocol(value):
    f = Fraction(value)
    rn = Rational(value)
    assert int(rn) == int(f)
    assert math.trunc(rn) == math.trunc(f)
    assert math.floor(rn) == math.floor(f)
    assert math.ceil(rn) == math.ceil(f)
    assert isinstance(math.floor(rn), int)


@given(value=strategies.fractions())
def test_round_builtin_dflt(value):
    # default rounding mode is HALF_EVEN, like the builtin
    rn = Rational(value)
    assert get_dflt_round_mode() is RoundMode.HALF_EVEN
    assert round(rn) == round(value)
    assert isinstance(round(rn), int)


@given(value=strategies.fractions(),
       ndigits=strategies.integers(min_value=-30, max_value=30))
def test_round_builtin_ndigits(value, ndigits):
    rn = Rational(value)
    adj = round(rn, ndigits)
    assert isinstance(adj, Rational)
    assert adj.as_fraction() == round(value, ndigits)


def test_round_builtin_wrong_ndigits():
    with pytest.raises(TypeError):
        round(Rational(7, 3), 2.0)


def test_round_dflt_half_up(with_round_half_up):
    assert get_dflt_round_mode() is RoundMode.HALF_UP
    assert round(Rational(5, 2)) == 3
    assert round(Rational(-5, 2)) == -3
    assert Rational(5, 2).round() == 3
    assert round(Rational(1, 4), 1) == Rational(3, 10)


def test_round_dflt_floor(with_round_floor):
    assert round(Rational(-1, 3)) == -1
    assert Rational(5, 3).round() == 1


def test_set_dflt_round_mode():
    prev = get_dflt_round_mode()
    token = set_dflt_round_mode(RoundMode.CEILING)
    try:
        assert get_dflt_round_mode() is RoundMode.CEILING
        assert Rational(1, 3).round() == 1
    finally:
        set_dflt_round_mode(prev)
    assert get_dflt_round_mode() is prev
    assert token.old_value in (prev, token.MISSING)


def test_set_dflt_round_mode_wrong_type():
    with pytest.raises(TypeError):
        set_dflt_round_mode("HALF_UP")


@pytest.mark.parametrize(("value", "quant", "mode", "result"),
                         (("17849/1000", "1/10", RoundMode.HALF_UP, "89/5"),
                          ("17845/1000", "1/100", RoundMode.HALF_EVEN,
                           "446/25"),
                          ("17845/1000", "1/100", RoundMode.HALF_UP,
                           "1785/100"),
                          ("5/7", Fraction(1, 3), RoundMode.CEILING, "1"),
                          ("-5/7", 0.5, RoundMode.FLOOR, "-1"),
                          ("1234", 100, RoundMode.TRUNC, "1200"),
                          ("1234", Decimal("-0.3"), RoundMode.HALF_DOWN,
                           "12339/10")),
                         ids=("half-up", "half-even", "half-up-tie",
                              "ceiling", "floor-float", "trunc-int",
                              "decimal"))
def test_quantize(value, quant, mode, result):
    rn = Rational(value)
    adj = rn.quantize(quant, mode)
    assert adj == Rational(result)
    assert (adj / Rational(quant)).is_integer()


def test_quantize_dflt_round():
    rn = Rational(25, 10)
    assert rn.quantize(1) == 2


def test_quantize_by_zero():
    with pytest.raises(ZeroDivisionError):
        Rational(7, 3).quantize(0)


@pytest.mark.parametrize(("x", "y", "result"),
                         (("7/3", "2", "1/3"),
                          ("-7/3", "2", "5/3"),
                          ("7/3", "-2", "-5/3"),
                          ("-7/3", "-2", "-1/3"),
                          ("6", "3", "0"),
                          ("-6", "4", "2"),
                          ("17/8", "3/4", "5/8")),
                         ids=("pos/pos", "neg/pos", "pos/neg", "neg/neg",
                              "exact", "neg-int", "fractions"))
def test_mod(x, y, result):
    a = Rational(x)
    b = Rational(y)
    res = Rational(result)
    assert a.mod(b) == res
    assert a.rem(b) == res
    assert a % b == res
    if b.is_integer():
        assert a % b.numerator == res


@given(a=strategies.fractions(), b=strategies.fractions())
def test_mod_hypo(a, b):
    assume(b != 0)
    x = Rational(a)
    y = Rational(b)
    rem = x % y
    assert rem.as_fraction() == a % b
    assert rem == 0 or rem.signum() == y.signum()
    assert x // y == a // b
    assert divmod(x, y) == divmod(a, b)
    assert (x // y) * y + x % y == x


@pytest.mark.parametrize(("x", "y"),
                         ((7, Rational(2, 3)),
                          (-7, Rational(2, 3)),
                          (Fraction(7, 5), Rational(-1, 3))),
                         ids=("int", "neg-int", "Fraction"))
def test_rmod(x, y):
    assert x % y == Fraction(x) % Fraction(y)
    assert isinstance(x % y, Rational)
    assert x // y == Fraction(x) // Fraction(y)
    assert divmod(x, y) == divmod(Fraction(x), Fraction(y))


@pytest.mark.parametrize("divisor", (ZERO, 0, Fraction(0)),
                         ids=("Rational", "int", "Fraction"))
def test_mod_by_zero(divisor):
    rn = Rational(7, 3)
    with pytest.raises(ZeroDivisionError):
        rn.mod(divisor)
    with pytest.raises(ZeroDivisionError):
        rn % divisor
    with pytest.raises(ZeroDivisionError):
        rn // divisor
    with pytest.raises(ZeroDivisionError):
        divmod(rn, divisor)


def test_mod_wrong_type():
    with pytest.raises(TypeError):
        Rational(7, 3).mod(0.5)
    with pytest.raises(TypeError):
        Rational(7, 3) % 0.5
