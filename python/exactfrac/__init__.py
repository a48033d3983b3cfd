# ExactFrac
# Copyright (c) 2024 ExactFrac Contributors. All rights reserved.

"""
ExactFrac - Exact Rational Arithmetic.

A small fraction type with exact multiplication, addition and ordering.
Values are kept reduced by their greatest common divisor, so equal
rationals compare equal field by field.

Example:
    >>> from exactfrac import Fraction
    >>> athird = Fraction(1, 3)
    >>> print(athird * Fraction(3))
    1/1
    >>> f = Fraction(1, 3)
    >>> f *= f
    >>> print(f)
    1/9
"""

__version__ = "0.1.0"

# Core type
from .fraction import Fraction

# Conversions
from .rational import to_fraction, to_stdlib

# Configuration
from .config import Config

# Exceptions
from .exceptions import (
    ExactFracError,
    ZeroDenominatorError,
    FractionTypeError,
)

__all__ = [
    # Version
    "__version__",
    # Core type
    "Fraction",
    # Conversions
    "to_fraction",
    "to_stdlib",
    # Configuration
    "Config",
    # Exceptions
    "ExactFracError",
    "ZeroDenominatorError",
    "FractionTypeError",
]
