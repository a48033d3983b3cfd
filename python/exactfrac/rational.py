# ExactFrac - Numeric Conversions
# Copyright (c) 2024 ExactFrac Contributors. All rights reserved.

"""
Conversions between ExactFrac fractions and Python's numeric types.

The standard library's ``fractions.Fraction`` is the interop format:

    >>> import fractions
    >>> from exactfrac.rational import to_fraction, to_stdlib
    >>> to_fraction(fractions.Fraction(2, 6))
    Fraction(1, 3)
    >>> to_stdlib(to_fraction(3))
    Fraction(3, 1)

Floats are accepted, but go through ``limit_denominator`` so that binary
rounding noise does not leak into the denominator:

    >>> to_fraction(0.1)
    Fraction(1, 10)
"""

from __future__ import annotations
import fractions
import math
from typing import Union

from .exceptions import FractionTypeError
from .fraction import Fraction


# Type for things that can be converted to Fraction
Numeric = Union[int, float, fractions.Fraction, Fraction]


def to_fraction(x: Numeric, max_denom: int = 10**12) -> Fraction:
    """
    Convert a numeric value to an ExactFrac Fraction.

    Args:
        x: An int, float, ``fractions.Fraction`` or Fraction.
        max_denom: Largest denominator a float may convert to.

    Returns:
        A new Fraction equal to ``x`` (or the closest one with a bounded
        denominator, for floats). A Fraction argument is copied.

    Raises:
        FractionTypeError: If ``x`` has an unsupported type or is a
                           non-finite float.

    Examples:
        >>> to_fraction(5)
        Fraction(5, 1)
        >>> to_fraction(-0.25)
        Fraction(-1, 4)
    """
    if isinstance(x, Fraction):
        return x.copy()
    elif isinstance(x, int):
        return Fraction(x)
    elif isinstance(x, fractions.Fraction):
        return Fraction(x.numerator, x.denominator)
    elif isinstance(x, float):
        return _float_to_fraction(x, max_denom)
    else:
        raise FractionTypeError(x)


def _float_to_fraction(x: float, max_denom: int) -> Fraction:
    if not math.isfinite(x):
        raise FractionTypeError(x)
    if x == int(x):
        return Fraction(int(x))
    approx = fractions.Fraction(x).limit_denominator(max_denom)
    return Fraction(approx.numerator, approx.denominator)


def to_stdlib(f: Fraction) -> fractions.Fraction:
    """Convert a Fraction to the standard library's ``fractions.Fraction``."""
    if not isinstance(f, Fraction):
        raise FractionTypeError(f)
    return fractions.Fraction(f.numerator, f.denominator)
