# ExactFrac - Fraction Type
# Copyright (c) 2024 ExactFrac Contributors. All rights reserved.

"""
Exact rational numbers held in reduced form.

A Fraction is a numerator/denominator pair of Python integers. Arithmetic
never rounds: every result is another Fraction, reduced by the greatest
common divisor of its fields.

The binary operators are thin wrappers over the in-place ones, and the
relational operators are all derived from ``==`` and ``<``.

Example:
    >>> from exactfrac import Fraction
    >>> athird = Fraction(1, 3)
    >>> print(athird * 2)
    2/3
    >>> print(athird + Fraction(2, 6))
    2/3
    >>> Fraction(1, 4) < athird
    True
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Any, Optional, Union

from .config import Config
from .exceptions import FractionTypeError, ZeroDenominatorError


# Right-hand operands accepted by the arithmetic operators
Operand = Union['Fraction', int]


def _check_int(value: Any, context: str) -> int:
    if not isinstance(value, int):
        raise FractionTypeError(value, context)
    # bool is an int subclass; store the plain integer
    return int(value)


@dataclass(init=False, repr=False, eq=False)
class Fraction:
    """
    A rational number numerator/denominator.

    Fractions behave as values: binary operators return new instances.
    The in-place operators ``*=`` and ``+=`` mutate the left operand and
    return it, so instances are not hashable.
    """
    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: Optional[int] = None):
        """
        Create a fraction.

        Args:
            numerator: Integer numerator, or the whole value when
                       ``denominator`` is omitted.
            denominator: Non-zero integer denominator. When given, the pair
                         is reduced immediately.

        Raises:
            FractionTypeError: If either argument is not an integer.
            ZeroDenominatorError: If ``denominator`` is 0.
        """
        self.numerator = _check_int(numerator, "numerator")
        if denominator is None:
            self.denominator = 1
            return
        self.denominator = _check_int(denominator, "denominator")
        self._normalize()

    def _normalize(self) -> None:
        if self.denominator == 0:
            raise ZeroDenominatorError(self.numerator)
        divisor = math.gcd(self.numerator, self.denominator)
        if self.denominator < 0:
            divisor = -divisor
        self.numerator //= divisor
        self.denominator //= divisor

    def copy(self) -> Fraction:
        """Return an independent fraction with the same fields."""
        result = Fraction.__new__(Fraction)
        result.numerator = self.numerator
        result.denominator = self.denominator
        return result

    __copy__ = copy

    # Multiplication
    def __imul__(self, other: Operand) -> Fraction:
        if isinstance(other, Fraction):
            # Read both fields first: other may be self
            numerator, denominator = other.numerator, other.denominator
            self.numerator *= numerator
            self.denominator *= denominator
        elif isinstance(other, int):
            self.numerator *= other
        else:
            return NotImplemented
        self._normalize()
        return self

    def __mul__(self, other: Operand) -> Fraction:
        if not isinstance(other, (Fraction, int)):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: int) -> Fraction:
        return self.__mul__(other)

    # Addition
    def iadd(self, other: Operand, config: Optional[Config] = None) -> Fraction:
        """
        Add ``other`` to this fraction in place.

        Args:
            other: An integer or Fraction.
            config: Normalization policy. Defaults to ``Config()``, under
                    which adding an integer does not reduce.

        Returns:
            This fraction.

        Raises:
            FractionTypeError: If ``other`` is not an integer or Fraction.
        """
        if config is None:
            config = Config()
        if isinstance(other, Fraction):
            numerator, denominator = other.numerator, other.denominator
            self.numerator = self.numerator * denominator + numerator * self.denominator
            self.denominator *= denominator
            self._normalize()
        elif isinstance(other, int):
            self.numerator += other * self.denominator
            if config.normalize_integer_add:
                self._normalize()
        else:
            raise FractionTypeError(other, "addend")
        return self

    def __iadd__(self, other: Operand) -> Fraction:
        if not isinstance(other, (Fraction, int)):
            return NotImplemented
        return self.iadd(other)

    def __add__(self, other: Operand) -> Fraction:
        if not isinstance(other, (Fraction, int)):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: int) -> Fraction:
        return self.__add__(other)

    # Comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __lt__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.numerator * other.denominator < other.numerator * self.denominator

    def __gt__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return other < self

    def __le__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self > other

    def __ge__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self < other

    __hash__ = None  # type: ignore[assignment]

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"
