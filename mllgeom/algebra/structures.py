"""Abstract algebraic structures: groups, rings, fields and their substructures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class AbelianGroup(ABC):
    """Commutative group written additively, with negation as inverse."""

    @classmethod
    @abstractmethod
    def zero(cls):
        """Neutral element of addition."""

    @abstractmethod
    def __add__(self, other):
        ...

    @abstractmethod
    def __neg__(self):
        ...


class Group(ABC):
    """Group written multiplicatively, not necessarily commutative."""

    @classmethod
    @abstractmethod
    def one(cls):
        """Neutral element of multiplication."""

    @abstractmethod
    def inverse(self):
        """Inverse of the element."""

    @abstractmethod
    def __mul__(self, other):
        ...


class Ring(AbelianGroup):
    """Abelian group with an associative multiplication and a unit."""

    @classmethod
    @abstractmethod
    def one(cls):
        """Neutral element of multiplication."""

    @abstractmethod
    def __mul__(self, other):
        ...

    def _identity(self):
        return type(self).one()

    def pow(self, n: int):
        """Return the n-th power of the element."""
        if n < 0:
            raise ValueError(f"exponent must be non-negative, got {n}")
        result = self._identity()
        for _ in range(n):
            result = self * result
        return result


class Field(Ring):
    """Ring in which every non-zero element has a multiplicative inverse."""

    @abstractmethod
    def inverse(self):
        """Multiplicative inverse of the element."""

    @abstractmethod
    def __truediv__(self, other):
        ...


class GradedRing(Ring):
    """Ring decomposed into homogeneous parts of each degree."""

    @abstractmethod
    def is_homogeneous(self) -> bool:
        """Whether the element lies in a single graded part."""

    @abstractmethod
    def degree(self) -> Optional[int]:
        """Degree of a homogeneous element, None otherwise."""


@dataclass
class SubGroup(Generic[T]):
    """Subgroup of a group, given by a membership test."""

    elem: Callable[[T], bool]

    def __contains__(self, item: T) -> bool:
        return bool(self.elem(item))


@dataclass
class AbelianSubGroup(Generic[T]):
    """Subgroup of an abelian group, given by a membership test."""

    elem: Callable[[T], bool]

    def __contains__(self, item: T) -> bool:
        return bool(self.elem(item))


@dataclass
class SubRing(Generic[T]):
    """Subring of a ring, given by a membership test."""

    elem: Callable[[T], bool]

    def __contains__(self, item: T) -> bool:
        return bool(self.elem(item))

    def as_subgroup(self) -> AbelianSubGroup[T]:
        """View the subring as an abelian subgroup."""
        return AbelianSubGroup(self.elem)


@dataclass
class SubField(Generic[T]):
    """Subfield of a field, given by a membership test."""

    elem: Callable[[T], bool]

    def __contains__(self, item: T) -> bool:
        return bool(self.elem(item))

    def as_subring(self) -> SubRing[T]:
        """View the subfield as a subring."""
        return SubRing(self.elem)


@dataclass
class Ideal(Generic[T]):
    """Ideal of a ring, represented by its underlying additive subgroup."""

    subgroup: AbelianSubGroup[T]

    def __contains__(self, item: T) -> bool:
        return item in self.subgroup


@dataclass
class AsMultGroup(Group):
    """An abelian group viewed as a multiplicative group."""

    elem: Any

    def __mul__(self, other: AsMultGroup) -> AsMultGroup:
        return AsMultGroup(self.elem + other.elem)

    @classmethod
    def one(cls, group_type):
        """The zero of ``group_type``, viewed multiplicatively."""
        return cls(group_type.zero())

    def inverse(self) -> AsMultGroup:
        return AsMultGroup(-self.elem)