"""Complex numbers in a polar-style representation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from .errors import DivisionByZeroError
from .structures import Field


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return format(Decimal(repr(x)).normalize(), "f")


@dataclass
class Complex(Field):
    """Complex number with real part ``re`` and imaginary part ``im``."""

    re: float
    im: float = 0.0

    def arg(self) -> float:
        """Angle used by the polar operations; 0 when the imaginary part is 0."""
        if self.im == 0.0:
            return 0.0
        return math.atan(self.re / self.im)

    def abs(self) -> float:
        """Euclidean modulus."""
        return math.sqrt(self.re * self.re + self.im * self.im)

    @classmethod
    def from_polar(cls, modulus: float, argument: float) -> Complex:
        """Build a number from its modulus and angle, inverse to ``abs``/``arg``."""
        return cls(math.sin(argument) * modulus, math.cos(argument) * modulus)

    @classmethod
    def zero(cls) -> Complex:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1.0, 0.0)

    def inverse(self) -> Complex:
        modulus = self.abs()
        if modulus == 0.0:
            raise DivisionByZeroError()
        return Complex.from_polar(1.0 / modulus, -self.arg())

    def __add__(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __mul__(self, other: Complex) -> Complex:
        return Complex.from_polar(self.abs() * other.abs(), self.arg() + other.arg())

    def __truediv__(self, other: Complex) -> Complex:
        divisor = other.abs()
        if divisor == 0.0:
            raise DivisionByZeroError()
        return Complex.from_polar(self.abs() / divisor, self.arg() - other.arg())

    def __str__(self) -> str:
        if self.im == 0.0:
            return _format_float(self.re)
        return f"{_format_float(self.re)}+i{_format_float(self.im)}"