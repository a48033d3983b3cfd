# ExactFrac - Exceptions
# Copyright (c) 2024 ExactFrac Contributors. All rights reserved.

"""Exception hierarchy for ExactFrac."""

from __future__ import annotations
from typing import Any


class ExactFracError(Exception):
    """Base class for all ExactFrac exceptions."""
    pass


class ZeroDenominatorError(ExactFracError, ZeroDivisionError):
    """Raised when a fraction is normalized with a zero denominator."""

    def __init__(self, numerator: int):
        super().__init__(f"Fraction {numerator}/0 has a zero denominator")
        self.numerator = numerator


class FractionTypeError(ExactFracError, TypeError):
    """Raised when a value cannot be used as a fraction component."""

    def __init__(self, value: Any, context: str = "fraction"):
        message = f"Cannot use {type(value).__name__} value {value!r} as {context}"
        super().__init__(message)
        self.value = value
