# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational numbers with arbitrary precision.

A :class:`Rational` represents the exact quotient of two integers. Instances
are immutable and always kept in lowest terms with a positive denominator, so
that two equal values have equal numerators and denominators.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import math
import numbers
import operator
import sys
from typing import Any, Callable, Optional, Tuple, Union

from .bigint import bit_length, gcd, int_to_str, parse_int, sign, tdivmod
from .rounding import RoundMode, get_dflt_round_mode


__all__ = ['Rational', 'ZERO', 'ONE', 'MINUS_ONE', 'HALF']


_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf

RationalT = Union['Rational', numbers.Rational, int]


def _as_ratio(value: Any) -> Optional[Tuple[int, int]]:
    """Return (numerator, denominator) of an integral or rational `value`.

    Returns None if `value` is neither.
    """
    if isinstance(value, Rational):
        return value._numerator, value._denominator
    if isinstance(value, numbers.Integral):
        return int(value), 1
    if isinstance(value, numbers.Rational):
        return int(value.numerator), int(value.denominator)
    return None


def _real_ratio(value: Union[float, Decimal]) -> Optional[Tuple[int, int]]:
    """Return integer ratio of a finite float or Decimal, None otherwise."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
    elif math.isnan(value) or math.isinf(value):
        return None
    return value.as_integer_ratio()


class Rational:

    """Rational number with arbitrary precision.

    Args:
        numerator: value of the numerator, or the value of the rational
            number itself if no denominator is given (default: 0)
        denominator: value of the denominator (default: None)

    If only `numerator` is given, it may be an integer, a rational number
    (like :class:`fractions.Fraction`), a float, a :class:`decimal.Decimal`
    or a string of the form 'N' or 'N/D'. The conversion is always exact.

    If `denominator` is given, both arguments must be integers or rational
    numbers and the result is `numerator` / `denominator`.

    Returns:
        :class:`Rational` instance in lowest terms with positive denominator

    Raises:
        TypeError: an argument has an unsupported type
        ValueError: `denominator` is zero, `numerator` is an infinite or NaN
            float or Decimal, or a string not denoting a rational number
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator: Any = 0,
                denominator: Optional[RationalT] = None) -> Rational:
        """Create and return new instance of :class:`Rational`."""
        if denominator is None:
            if type(numerator) is int:
                return cls._new(numerator, 1)
            if type(numerator) is cls:
                return numerator
            if isinstance(numerator, str):
                return cls.parse(numerator)
            if isinstance(numerator, (float, Decimal)):
                ratio = _real_ratio(numerator)
                if ratio is None:
                    raise ValueError(f"Can't convert {numerator!r} to "
                                     f"{cls.__name__}.")
                return cls._normalized(*ratio)
            ratio = _as_ratio(numerator)
            if ratio is None:
                raise TypeError(f"Can't convert {numerator!r} to "
                                f"{cls.__name__}.")
            return cls._normalized(*ratio)
        num = _as_ratio(numerator)
        den = _as_ratio(denominator)
        if num is None or den is None:
            raise TypeError("Numerator and denominator must be integers or "
                            "rational numbers.")
        return cls._normalized(num[0] * den[1], num[1] * den[0])

    @classmethod
    def _new(cls, numerator: int, denominator: int) -> Rational:
        # numerator and denominator must already be coprime, denominator > 0
        rn = object.__new__(cls)
        rn._numerator = numerator
        rn._denominator = denominator
        return rn

    @classmethod
    def _normalized(cls, numerator: int, denominator: int) -> Rational:
        """Return `numerator` / `denominator` in lowest terms."""
        if denominator == 0:
            raise ValueError("Denominator must not be zero.")
        divisor = gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
        if denominator < 0:
            return cls._new(-numerator, -denominator)
        return cls._new(numerator, denominator)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Convert a string of the form 'N' or 'N/D' to a Rational.

        Whitespace around N and D is ignored.

        Raises:
            TypeError: `text` is not a string
            ValueError: `text` does not denote a rational number or D is zero
        """
        if not isinstance(text, str):
            raise TypeError(f"Can't parse {type(text).__name__} as "
                            f"{cls.__name__}.")
        parts = text.split('/')
        if len(parts) > 2:
            raise ValueError(f"Invalid rational: {text!r}")
        try:
            ints = [parse_int(part) for part in parts]
        except ValueError:
            raise ValueError(f"Invalid rational: {text!r}") from None
        if len(ints) == 1:
            return cls._new(ints[0], 1)
        return cls._normalized(*ints)

    @classmethod
    def from_float(cls, f: Union[float, numbers.Integral]) -> Rational:
        """Convert a finite float (or int) to a Rational, exactly.

        Raises:
            TypeError: `f` is neither a float nor an int
            ValueError: `f` is infinite or NaN
        """
        if isinstance(f, numbers.Integral):
            return cls._new(int(f), 1)
        if not isinstance(f, float):
            raise TypeError(f"{f!r} is not a float.")
        return cls(f)

    @classmethod
    def from_decimal(cls, d: Union[Decimal, numbers.Integral]) -> Rational:
        """Convert a finite Decimal (or int) to a Rational, exactly.

        Raises:
            TypeError: `d` is neither a Decimal nor an int
            ValueError: `d` is infinite or NaN
        """
        if isinstance(d, numbers.Integral):
            return cls._new(int(d), 1)
        if not isinstance(d, Decimal):
            raise TypeError(f"{d!r} is not a Decimal.")
        return cls(d)

    @property
    def numerator(self) -> int:
        """Numerator of `self` in lowest terms."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` in lowest terms (always positive)."""
        return self._denominator

    @property
    def real(self) -> Rational:
        """The real part of `self`.

        Returns `self` (Real numbers are their real component).
        """
        return self

    @property
    def imag(self) -> int:
        """The imaginary part of `self`.

        Returns 0 (Real numbers have no imaginary component).
        """
        return 0

    def conjugate(self) -> Rational:
        """Return `self`."""
        return self

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_minus_one(self) -> bool:
        return self._numerator == -1 and self._denominator == 1

    def is_positive(self) -> bool:
        return self._numerator > 0

    def is_negative(self) -> bool:
        return self._numerator < 0

    def is_integer(self) -> bool:
        """Return True if `self` is an integral number."""
        return self._denominator == 1

    def is_proper(self) -> bool:
        """Return True if abs(`self`) < 1."""
        return abs(self._numerator) < self._denominator

    def is_improper(self) -> bool:
        """Return True if abs(`self`) >= 1."""
        return abs(self._numerator) >= self._denominator

    def is_unit(self) -> bool:
        """Return True if the numerator of `self` is 1 or -1."""
        return abs(self._numerator) == 1

    def signum(self) -> int:
        """Return -1, 0 or 1 according to the sign of `self`."""
        return sign(self._numerator)

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator of `self`."""
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return an instance of `Fraction` equal to `self`."""
        return Fraction(self._numerator, self._denominator)

    def __str__(self) -> str:
        """str(self)"""
        if self._denominator == 1:
            return int_to_str(self._numerator)
        return "/".join((int_to_str(self._numerator),
                         int_to_str(self._denominator)))

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{type(self).__name__}({str(self)!r})"

    def __reduce__(self) -> Tuple[type, Tuple[str]]:
        return type(self), (str(self),)

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        return self

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __float__(self) -> float:
        """float(self)

        Raises:
            OverflowError: `self` is outside the range of float
        """
        return self._numerator / self._denominator

    def __hash__(self) -> int:
        """hash(self)

        Equal to the hash of an equal int, Fraction or float.
        """
        try:
            dinv = pow(self._denominator, -1, _HASH_MODULUS)
        except ValueError:
            # denominator divisible by the modulus
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # comparison

    def _cmp(self, numerator: int, denominator: int) -> int:
        """Return <0, 0 or >0 as `self` is <, == or > num / den."""
        sign_self = sign(self._numerator)
        sign_other = sign(numerator)
        if sign_self != sign_other:
            return sign_self - sign_other
        if sign_self == 0:
            return 0
        # 2 ** (exp - 1) < abs(value) < 2 ** (exp + 1)
        exp_self = bit_length(self._numerator) - bit_length(self._denominator)
        exp_other = bit_length(numerator) - bit_length(denominator)
        if exp_self > exp_other + 1:
            return sign_self
        if exp_self < exp_other - 1:
            return -sign_self
        return sign(self._numerator * denominator -
                    numerator * self._denominator)

    def _richcmp(self, other: Any, op: Callable[[Any, Any], bool]) -> Any:
        ratio = _as_ratio(other)
        if ratio is None:
            if not isinstance(other, (float, Decimal)):
                return NotImplemented
            ratio = _real_ratio(other)
            if ratio is None:
                if other != other:
                    # NaN
                    return False
                # self is finite, so only the sign of infinity counts
                return op(0, other)
        return op(self._cmp(*ratio), 0)

    def __eq__(self, other: Any) -> Any:
        """self == other"""
        if isinstance(other, Rational):
            return (self._numerator == other._numerator and
                    self._denominator == other._denominator)
        ratio = _as_ratio(other)
        if ratio is None:
            if not isinstance(other, (float, Decimal)):
                return NotImplemented
            ratio = _real_ratio(other)
            if ratio is None:
                return False
        return self._numerator == ratio[0] and self._denominator == ratio[1]

    def __lt__(self, other: Any) -> Any:
        """self < other"""
        return self._richcmp(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        """self <= other"""
        return self._richcmp(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        """self > other"""
        return self._richcmp(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        """self >= other"""
        return self._richcmp(other, operator.ge)

    # arithmetic

    def __pos__(self) -> Rational:
        """+self"""
        return self

    def __neg__(self) -> Rational:
        """-self"""
        return self._new(-self._numerator, self._denominator)

    def __abs__(self) -> Rational:
        """abs(self)"""
        if self._numerator < 0:
            return self._new(-self._numerator, self._denominator)
        return self

    def __add__(self, other: Any) -> Rational:
        """self + other"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        num, den = ratio
        return self._normalized(self._numerator * den +
                                num * self._denominator,
                                self._denominator * den)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        """self - other"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        num, den = ratio
        return self._normalized(self._numerator * den -
                                num * self._denominator,
                                self._denominator * den)

    def __rsub__(self, other: Any) -> Rational:
        """other - self"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        num, den = ratio
        return self._normalized(num * self._denominator -
                                self._numerator * den,
                                den * self._denominator)

    def __mul__(self, other: Any) -> Rational:
        """self * other"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        num, den = ratio
        return self._normalized(self._numerator * num,
                                self._denominator * den)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Rational:
        """self / other"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        num, den = ratio
        if num == 0:
            raise ZeroDivisionError("Division by zero.")
        return self._normalized(self._numerator * den,
                                self._denominator * num)

    def __rtruediv__(self, other: Any) -> Rational:
        """other / self"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        if self._numerator == 0:
            raise ZeroDivisionError("Division by zero.")
        num, den = ratio
        return self._normalized(num * self._denominator,
                                den * self._numerator)

    def reciprocal(self) -> Rational:
        """Return 1 / `self`.

        Raises:
            ZeroDivisionError: `self` is zero
        """
        if self._numerator == 0:
            raise ZeroDivisionError("Reciprocal of zero.")
        return self._normalized(self._denominator, self._numerator)

    def pow(self, exp: RationalT) -> Rational:
        """Return `self` raised to the integral power `exp`.

        `exp` may be an int or an integral rational number.

        Raises:
            TypeError: `exp` is not an integer or rational number
            ValueError: `exp` is not integral
            ZeroDivisionError: `self` is zero and `exp` is negative
        """
        ratio = _as_ratio(exp)
        if ratio is None:
            raise TypeError(f"Unsupported exponent: {exp!r}")
        exp, den = ratio
        if den != 1:
            raise ValueError("Exponent must be integral.")
        if exp > 0:
            return self._normalized(self._numerator ** exp,
                                    self._denominator ** exp)
        if exp == 0:
            return ONE
        if self._numerator == 0:
            raise ZeroDivisionError("Zero raised to a negative power.")
        return self._normalized(self._denominator ** -exp,
                                self._numerator ** -exp)

    def __pow__(self, other: Any, mod: Any = None) -> Rational:
        """self ** other"""
        if mod is not None:
            return NotImplemented
        if _as_ratio(other) is None:
            return NotImplemented
        return self.pow(other)

    def __rpow__(self, other: Any) -> Rational:
        """other ** self"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        if self._denominator != 1:
            raise ValueError("Exponent must be integral.")
        return self._normalized(*ratio).pow(self._numerator)

    # rounding

    def _round_int(self, mode: RoundMode) -> int:
        """Return `self` rounded to an integer according to `mode`."""
        if not isinstance(mode, RoundMode):
            raise TypeError(f"Illegal rounding mode: {mode!r}")
        num, den = self._numerator, self._denominator
        quot, rem = tdivmod(num, den)
        if rem == 0:
            return quot
        if mode is RoundMode.FLOOR:
            return quot - 1 if num < 0 else quot
        if mode is RoundMode.CEILING:
            return quot + 1 if num > 0 else quot
        if mode is RoundMode.TRUNC:
            return quot
        # remaining modes round to nearest
        cmp = sign(2 * abs(rem) - den)
        if cmp < 0:
            return quot
        if cmp > 0 or mode is RoundMode.HALF_UP:
            return quot + sign(rem)
        if mode is RoundMode.HALF_DOWN:
            return quot
        # HALF_EVEN
        return quot if quot % 2 == 0 else quot + sign(rem)

    def round(self, mode: Optional[RoundMode] = None) -> Rational:
        """Return `self` rounded to an integral Rational.

        Args:
            mode (RoundMode): rounding mode to be used (if not given, the
                current default mode is used)

        Raises:
            TypeError: `mode` is not a valid rounding mode
        """
        if mode is None:
            mode = get_dflt_round_mode()
        return self._new(self._round_int(mode), 1)

    def trunc_rational(self) -> Rational:
        """Return `self` rounded towards zero."""
        return self.round(RoundMode.TRUNC)

    def floor_rational(self) -> Rational:
        """Return `self` rounded towards -Infinity."""
        return self.round(RoundMode.FLOOR)

    def ceil_rational(self) -> Rational:
        """Return `self` rounded towards Infinity."""
        return self.round(RoundMode.CEILING)

    def round_half_up(self) -> Rational:
        """Return `self` rounded to nearest, ties away from zero."""
        return self.round(RoundMode.HALF_UP)

    def round_half_down(self) -> Rational:
        """Return `self` rounded to nearest, ties towards zero."""
        return self.round(RoundMode.HALF_DOWN)

    def round_half_even(self) -> Rational:
        """Return `self` rounded to nearest, ties to the even neighbour."""
        return self.round(RoundMode.HALF_EVEN)

    def quantize(self, quant: Any,
                 mode: Optional[RoundMode] = None) -> Rational:
        """Return integral multiple of `quant` sufficiently close to `self`.

        Args:
            quant: quantum to get a multiple from (anything convertible to
                a Rational)
            mode (RoundMode): rounding mode to be used (if not given, the
                current default mode is used)

        Raises:
            ZeroDivisionError: `quant` is zero
            TypeError: `quant` can't be converted to a Rational
        """
        quant = Rational(quant)
        if mode is None:
            mode = get_dflt_round_mode()
        return quant * (self / quant)._round_int(mode)

    def __round__(self, ndigits: Optional[int] = None) -> Any:
        """round(self [, ndigits])

        Round `self` to a given precision in decimal digits, using the
        current default rounding mode.

        Without `ndigits` an int is returned, otherwise a Rational, rounded
        to a multiple of 10 ** -ndigits.
        """
        if ndigits is None:
            return self._round_int(get_dflt_round_mode())
        if not isinstance(ndigits, int):
            raise TypeError(f"Precision must be of type 'int', not "
                            f"{type(ndigits).__name__}.")
        if ndigits >= 0:
            return self.quantize(self._new(1, 10 ** ndigits))
        return self.quantize(self._new(10 ** -ndigits, 1))

    def __trunc__(self) -> int:
        """math.trunc(self)"""
        return self._round_int(RoundMode.TRUNC)

    __int__ = __trunc__

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._round_int(RoundMode.FLOOR)

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return self._round_int(RoundMode.CEILING)

    # modulo

    def _divmod(self, numerator: int,
                denominator: int) -> Tuple[int, Rational]:
        if numerator == 0:
            raise ZeroDivisionError("Modulo by zero.")
        divisor = self._normalized(numerator, denominator)
        quot = (self / divisor)._round_int(RoundMode.FLOOR)
        return quot, self - divisor * quot

    def mod(self, other: RationalT) -> Rational:
        """Return `self` - floor(`self` / `other`) * `other`.

        The result has the same sign as `other`.

        Raises:
            ZeroDivisionError: `other` is zero
            TypeError: `other` is not an integer or rational number
        """
        ratio = _as_ratio(other)
        if ratio is None:
            raise TypeError(f"Unsupported operand: {other!r}")
        return self._divmod(*ratio)[1]

    rem = mod

    def __mod__(self, other: Any) -> Rational:
        """self % other"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        return self._divmod(*ratio)[1]

    def __rmod__(self, other: Any) -> Rational:
        """other % self"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        return self._normalized(*ratio) % self

    def __floordiv__(self, other: Any) -> int:
        """self // other"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        return self._divmod(*ratio)[0]

    def __rfloordiv__(self, other: Any) -> int:
        """other // self"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        return self._normalized(*ratio) // self

    def __divmod__(self, other: Any) -> Tuple[int, Rational]:
        """divmod(self, other)"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        return self._divmod(*ratio)

    def __rdivmod__(self, other: Any) -> Tuple[int, Rational]:
        """divmod(other, self)"""
        ratio = _as_ratio(other)
        if ratio is None:
            return NotImplemented
        return divmod(self._normalized(*ratio), self)


numbers.Rational.register(Rational)

ZERO = Rational._new(0, 1)
ONE = Rational._new(1, 1)
MINUS_ONE = Rational._new(-1, 1)
HALF = Rational._new(1, 2)
