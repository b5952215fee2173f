"""Atoms and their polarities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Atom = str


class Polarity(Enum):
    """Sign of an atom."""

    POS = "+"
    NEG = "-"

    def flip(self) -> Polarity:
        """The opposite polarity."""
        return Polarity.NEG if self is Polarity.POS else Polarity.POS

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrientedAtom:
    """An atom together with a polarity."""

    atom: Atom
    pol: Polarity = Polarity.POS

    def flip(self) -> OrientedAtom:
        """The same atom with the opposite polarity."""
        return OrientedAtom(self.atom, self.pol.flip())

    def __str__(self) -> str:
        return f"{self.pol}{self.atom}"