"""Points of projective space and projective schemes cut out by homogeneous polynomials."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .errors import DimensionMismatchError, ProjectiveAllZeroError
from .polynomial import HomogeneousPolynomial
from .structures import AbelianGroup


def _is_zero(value: Any) -> bool:
    if isinstance(value, AbelianGroup):
        return value == type(value).zero()
    return value == 0


@dataclass(frozen=True, eq=False)
class ProjectivePoint:
    """Point of projective space given by homogeneous coordinates, not all zero."""

    coordinates: tuple[Any, ...]

    def __post_init__(self) -> None:
        coordinates = tuple(self.coordinates)
        if all(_is_zero(c) for c in coordinates):
            raise ProjectiveAllZeroError()
        object.__setattr__(self, "coordinates", coordinates)

    def dim(self) -> int:
        """Dimension of the projective space the point lives in."""
        return len(self.coordinates) - 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectivePoint):
            return NotImplemented
        if self.dim() != other.dim():
            return False
        ratios = [a / b for a, b in zip(self.coordinates, other.coordinates)]
        return all(x == y for x, y in zip(ratios, ratios[1:]))


@dataclass
class ProjectiveScheme:
    """Subscheme of projective space with ``n`` coordinates, given by ideal generators."""

    n: int
    ideal_generators: list[HomogeneousPolynomial] = field(default_factory=list)

    @classmethod
    def projective_space(cls, n: int) -> ProjectiveScheme:
        """The whole projective space with ``n`` coordinates."""
        return cls(n, [])

    def disjoint_union(self, other: ProjectiveScheme) -> ProjectiveScheme:
        """Union of two schemes, generated by all pairwise products of generators."""
        if other.n != self.n:
            raise DimensionMismatchError(found=other.n, expected=self.n)
        generators = [f * g for f in self.ideal_generators for g in other.ideal_generators]
        return ProjectiveScheme(self.n, generators)

    def contains(self, point: ProjectivePoint) -> bool:
        """Whether every generator vanishes at the point."""
        coordinates = point.coordinates
        if len(coordinates) != self.n:
            raise DimensionMismatchError(found=len(coordinates), expected=self.n)
        return all(_is_zero(poly.eval(coordinates)) for poly in self.ideal_generators)

    def __contains__(self, point: ProjectivePoint) -> bool:
        return self.contains(point)

    def __str__(self) -> str:
        generators: Iterable[str] = (str(poly) for poly in self.ideal_generators)
        return f"P^{self.n}/<{', '.join(generators)}>"