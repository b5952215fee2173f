"""Formulas of linear logic in negation normal form, and preformulas with explicit negation."""

from __future__ import annotations

from dataclasses import dataclass

from ..atoms import OrientedAtom


class Formula:
    """Formula in negation normal form."""

    def depth(self) -> int:
        """Nesting depth of exponentials."""
        match self:
            case Atomic():
                return 0
            case Tensor(left, right) | Par(left, right):
                return max(left.depth(), right.depth())
            case Bang(body) | Quest(body):
                return body.depth() + 1
        raise TypeError(f"not a formula: {self!r}")

    def is_linear(self) -> bool:
        """True when no exponential occurs."""
        return self.depth() == 0

    def is_shallow(self) -> bool:
        """True when exponentials are nested at most once."""
        return self.depth() <= 1

    def __neg__(self) -> Formula:
        return from_preformula(PreNeg(to_preformula(self)))


@dataclass(frozen=True)
class Atomic(Formula):
    atom: OrientedAtom

    def __str__(self) -> str:
        return str(self.atom)


@dataclass(frozen=True)
class Tensor(Formula):
    left: Formula
    right: Formula

    def __str__(self) -> str:
        return f"{self.left}⊗{self.right}"


@dataclass(frozen=True)
class Par(Formula):
    left: Formula
    right: Formula

    def __str__(self) -> str:
        return f"{self.left}⅋ {self.right}"


@dataclass(frozen=True)
class Bang(Formula):
    body: Formula

    def __str__(self) -> str:
        return f"!{self.body}"


@dataclass(frozen=True)
class Quest(Formula):
    body: Formula

    def __str__(self) -> str:
        return f"?{self.body}"


Sequent = list[Formula]


class Preformula:
    """Formula that may contain negation anywhere."""


@dataclass(frozen=True)
class PreAtomic(Preformula):
    atom: OrientedAtom

    def __str__(self) -> str:
        return str(self.atom)


@dataclass(frozen=True)
class PreTensor(Preformula):
    left: Preformula
    right: Preformula

    def __str__(self) -> str:
        return f"{self.left}⊗{self.right}"


@dataclass(frozen=True)
class PrePar(Preformula):
    left: Preformula
    right: Preformula

    def __str__(self) -> str:
        return f"{self.left}⅋ {self.right}"


@dataclass(frozen=True)
class PreNeg(Preformula):
    body: Preformula

    def __str__(self) -> str:
        return f"¬{self.body}"


@dataclass(frozen=True)
class PreBang(Preformula):
    body: Preformula

    def __str__(self) -> str:
        return f"!{self.body}"


@dataclass(frozen=True)
class PreQuest(Preformula):
    body: Preformula

    def __str__(self) -> str:
        return f"?{self.body}"


def to_preformula(formula: Formula) -> Preformula:
    """View a formula as a preformula."""
    match formula:
        case Atomic(atom):
            return PreAtomic(atom)
        case Tensor(left, right):
            return PreTensor(to_preformula(left), to_preformula(right))
        case Par(left, right):
            return PrePar(to_preformula(left), to_preformula(right))
        case Bang(body):
            return PreBang(to_preformula(body))
        case Quest(body):
            return PreQuest(to_preformula(body))
    raise TypeError(f"not a formula: {formula!r}")


def from_preformula(preformula: Preformula) -> Formula:
    """Push negations down to the atoms, giving a formula in negation normal form."""
    match preformula:
        case PreAtomic(atom):
            return Atomic(atom)
        case PreTensor(left, right):
            return Tensor(from_preformula(left), from_preformula(right))
        case PrePar(left, right):
            return Par(from_preformula(left), from_preformula(right))
        case PreBang(body):
            return Bang(from_preformula(body))
        case PreQuest(body):
            return Quest(from_preformula(body))
        case PreNeg(inner):
            return _negate(inner)
    raise TypeError(f"not a preformula: {preformula!r}")


def _negate(inner: Preformula) -> Formula:
    match inner:
        case PreAtomic(atom):
            return Atomic(atom.flip())
        case PreTensor(left, right):
            return Par(from_preformula(PreNeg(left)), from_preformula(PreNeg(right)))
        case PrePar(left, right):
            return Tensor(from_preformula(PreNeg(left)), from_preformula(PreNeg(right)))
        case PreBang(body):
            return Quest(from_preformula(PreNeg(body)))
        case PreQuest(body):
            return Bang(from_preformula(PreNeg(body)))
        case PreNeg(body):
            negated = from_preformula(PreNeg(body))
            return from_preformula(PreNeg(to_preformula(negated)))
    raise TypeError(f"not a preformula: {inner!r}")