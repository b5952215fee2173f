"""Inference rules of multiplicative linear logic."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from .formula import Formula, Par, Sequent, Tensor


def _freeze(obj: object, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


class Deduction(ABC):
    """An inference rule instance with its premises, conclusion and active formulas."""

    @abstractmethod
    def premises(self) -> list[Sequent]:
        """Sequents the rule needs above the line."""

    @abstractmethod
    def conclusion(self) -> Sequent:
        """Sequent the rule derives."""

    @abstractmethod
    def active(self) -> list[Formula]:
        """Formulas the rule acts on."""


@dataclass(frozen=True)
class Ax(Deduction):
    """Axiom: derives the negation of a formula next to the formula."""

    formula: Formula

    def premises(self) -> list[Sequent]:
        return []

    def conclusion(self) -> Sequent:
        return [-self.formula, self.formula]

    def active(self) -> list[Formula]:
        return [-self.formula, self.formula]


@dataclass(frozen=True)
class Cut(Deduction):
    """Cut on a formula against its negation."""

    formula: Formula
    left_left: Sequence[Formula] = ()
    left_right: Sequence[Formula] = ()
    right_left: Sequence[Formula] = ()
    right_right: Sequence[Formula] = ()

    def __post_init__(self) -> None:
        _freeze(self, "left_left", "left_right", "right_left", "right_right")

    def premises(self) -> list[Sequent]:
        return [
            [*self.left_left, self.formula, *self.left_right],
            [*self.right_left, -self.formula, *self.right_right],
        ]

    def conclusion(self) -> Sequent:
        return [*self.left_left, *self.left_right, *self.right_left, *self.right_right]

    def active(self) -> list[Formula]:
        return [self.formula, -self.formula]


@dataclass(frozen=True)
class Ex(Deduction):
    """Exchange of two neighbouring formulas."""

    active_left: Formula
    active_right: Formula
    prem_left: Sequence[Formula] = ()
    prem_right: Sequence[Formula] = ()

    def __post_init__(self) -> None:
        _freeze(self, "prem_left", "prem_right")

    def premises(self) -> list[Sequent]:
        return [[*self.prem_left, self.active_left, self.active_right, *self.prem_right]]

    def conclusion(self) -> Sequent:
        return [*self.prem_left, self.active_right, self.active_left, *self.prem_right]

    def active(self) -> list[Formula]:
        return [self.active_left, self.active_right]


@dataclass(frozen=True)
class ParRule(Deduction):
    """Par introduction on two neighbouring formulas."""

    active_left: Formula
    active_right: Formula
    prem_left: Sequence[Formula] = ()
    prem_right: Sequence[Formula] = ()

    def __post_init__(self) -> None:
        _freeze(self, "prem_left", "prem_right")

    def premises(self) -> list[Sequent]:
        return [[*self.prem_left, self.active_left, self.active_right, *self.prem_right]]

    def conclusion(self) -> Sequent:
        return [*self.prem_left, Par(self.active_left, self.active_right), *self.prem_right]

    def active(self) -> list[Formula]:
        return [self.active_left, self.active_right]


@dataclass(frozen=True)
class TensorRule(Deduction):
    """Tensor introduction joining two sequents."""

    active_left: Formula
    active_right: Formula
    left_left: Sequence[Formula] = ()
    left_right: Sequence[Formula] = ()
    right_left: Sequence[Formula] = ()
    right_right: Sequence[Formula] = ()

    def __post_init__(self) -> None:
        _freeze(self, "left_left", "left_right", "right_left", "right_right")

    def premises(self) -> list[Sequent]:
        return [
            [*self.left_left, self.active_left, *self.left_right],
            [*self.right_left, self.active_right, *self.right_right],
        ]

    def conclusion(self) -> Sequent:
        return [
            *self.left_left,
            *self.left_right,
            Tensor(self.active_left, self.active_right),
            *self.right_left,
            *self.right_right,
        ]

    def active(self) -> list[Formula]:
        return [self.active_left, self.active_right]