"""Monomials, polynomials and homogeneous polynomials in N variables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from functools import reduce
from operator import add
from typing import Any, Optional

from .errors import DimensionMismatchError, WrongDegreeError
from .structures import AbelianGroup, GradedRing, Ring


def _power(x: Any, n: int) -> Any:
    if isinstance(x, Ring):
        return x.pow(n)
    return x**n


def _zero_like(x: Sequence[Any]) -> Any:
    first = next(iter(x), None)
    if isinstance(first, AbelianGroup):
        return type(first).zero()
    return 0


def _sum_evals(monomials: Iterable[Monomial], x: Sequence[Any]) -> Any:
    values = [mono.eval(x) for mono in monomials]
    if not values:
        return _zero_like(x)
    return reduce(add, values)


def _multiply(left: Iterable[Monomial], right: Sequence[Monomial]) -> list[Monomial]:
    result: list[Monomial] = []
    for a in left:
        for b in right:
            product = a * b
            match = next((m for m in result if m.powers == product.powers), None)
            if match is not None:
                product = replace(product, coefficient=product.coefficient + match.coefficient)
            result.append(product)
    return result


@dataclass(frozen=True)
class Monomial:
    """A coefficient together with one exponent per variable."""

    coefficient: Any
    powers: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "powers", tuple(self.powers))

    def eval(self, x: Sequence[Any]) -> Any:
        """Evaluate at the point ``x``: the coefficient plus each x_i to its power."""
        if len(x) != len(self.powers):
            raise DimensionMismatchError(found=len(x), expected=len(self.powers))
        result = self.coefficient
        for power, value in zip(self.powers, x):
            result = result + _power(value, power)
        return result

    def deg(self) -> int:
        """Total degree."""
        return sum(self.powers)

    def __str__(self) -> str:
        variables = "".join(f"X_{i}^{p}" for i, p in enumerate(self.powers))
        return f"{self.coefficient}{variables}"

    def __neg__(self) -> Monomial:
        return Monomial(-self.coefficient, self.powers)

    def __add__(self, other: Monomial) -> Polynomial:
        if self.powers == other.powers:
            return Polynomial([Monomial(self.coefficient + other.coefficient, self.powers)])
        return Polynomial([self, other])

    def __mul__(self, other: Monomial) -> Monomial:
        if len(other.powers) != len(self.powers):
            raise DimensionMismatchError(found=len(other.powers), expected=len(self.powers))
        powers = tuple(p + q for p, q in zip(self.powers, other.powers))
        return Monomial(self.coefficient * other.coefficient, powers)


@dataclass
class Polynomial(GradedRing):
    """Sum of monomials."""

    monomials: list[Monomial] = field(default_factory=list)

    def eval(self, x: Sequence[Any]) -> Any:
        """Evaluate as the sum of the monomial evaluations."""
        return _sum_evals(self.monomials, x)

    @classmethod
    def zero(cls, ring, n: int) -> Polynomial:
        """The zero polynomial in ``n`` variables over ``ring``."""
        return cls([Monomial(ring.zero(), (0,) * n)])

    @classmethod
    def one(cls, ring, n: int) -> Polynomial:
        """The unit polynomial in ``n`` variables over ``ring``."""
        return cls([Monomial(ring.one(), (0,) * n)])

    def _identity(self) -> Polynomial:
        if not self.monomials:
            raise ValueError("cannot determine the coefficient ring of an empty polynomial")
        first = self.monomials[0]
        return Polynomial.one(type(first.coefficient), len(first.powers))

    def is_homogeneous(self) -> bool:
        try:
            HomogeneousPolynomial.from_polynomial(self)
        except WrongDegreeError:
            return False
        return True

    def degree(self) -> Optional[int]:
        try:
            return HomogeneousPolynomial.from_polynomial(self).deg
        except WrongDegreeError:
            return None

    def __str__(self) -> str:
        return " + ".join(str(mono) for mono in self.monomials)

    def __neg__(self) -> Polynomial:
        return Polynomial([-mono for mono in self.monomials])

    def __add__(self, other: Polynomial) -> Polynomial:
        result = list(self.monomials)
        for other_mono in other.monomials:
            index = next(
                (i for i, mono in enumerate(result) if mono.powers == other_mono.powers),
                None,
            )
            if index is None:
                result.append(other_mono)
            else:
                old = result.pop(index)
                result.extend((old + other_mono).monomials)
        return Polynomial(result)

    def __mul__(self, other: Polynomial) -> Polynomial:
        return Polynomial(_multiply(self.monomials, other.monomials))


@dataclass
class HomogeneousPolynomial:
    """Polynomial whose monomials all share the degree ``deg``."""

    deg: int
    monomials: list[Monomial] = field(default_factory=list)

    @classmethod
    def from_polynomial(cls, poly: Polynomial) -> HomogeneousPolynomial:
        """Check that all monomials have one degree; raise WrongDegreeError otherwise."""
        if not poly.monomials:
            return cls(0, [])
        expected = poly.monomials[0].deg()
        for mono in poly.monomials:
            if mono.deg() != expected:
                raise WrongDegreeError(found=mono.deg(), expected=expected)
        return cls(expected, list(poly.monomials))

    def to_polynomial(self) -> Polynomial:
        """Forget homogeneity."""
        return Polynomial(list(self.monomials))

    def eval(self, x: Sequence[Any]) -> Any:
        """Evaluate as the sum of the monomial evaluations."""
        return _sum_evals(self.monomials, x)

    def __mul__(self, other: HomogeneousPolynomial) -> HomogeneousPolynomial:
        return HomogeneousPolynomial(
            self.deg + other.deg, _multiply(self.monomials, other.monomials)
        )

    def __str__(self) -> str:
        return " + ".join(str(mono) for mono in self.monomials)