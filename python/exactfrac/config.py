# ExactFrac - Configuration
# Copyright (c) 2024 ExactFrac Contributors. All rights reserved.

"""Normalization policy for ExactFrac."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """
    Normalization policy for in-place addition.

    Passed per call to ``Fraction.iadd``; the ``+=`` operator always uses
    the default policy.

    Attributes:
        normalize_integer_add: Reduce after adding an integer. Off by
                               default, where adding an integer only
                               shifts the numerator.
    """
    normalize_integer_add: bool = False

    @classmethod
    def reference(cls) -> Config:
        """Default policy: integer addition skips normalization."""
        return cls()

    @classmethod
    def strict(cls) -> Config:
        """Every in-place addition leaves the fraction reduced."""
        return cls(normalize_integer_add=True)

    def __repr__(self) -> str:
        return f"Config(normalize_integer_add={self.normalize_integer_add})"
