"""Errors raised while building proofs."""

from __future__ import annotations

from collections.abc import Iterable

from .formula import Formula


def _join(sequent: Iterable[Formula]) -> str:
    return ", ".join(str(f) for f in sequent)


class MllError(Exception):
    """Base class for proof construction errors."""


class SequentMismatchError(MllError):
    """Two sequents that should agree differ."""

    def __init__(self, first: Iterable[Formula], second: Iterable[Formula]) -> None:
        self.first = list(first)
        self.second = list(second)
        super().__init__(
            f"Sequents {_join(self.first)} and {_join(self.second)} should be equal"
        )


class MissingPremiseError(MllError):
    """A required premise is absent."""

    def __init__(self, sequent: Iterable[Formula]) -> None:
        self.sequent = list(sequent)
        super().__init__(f"Missing premise {_join(self.sequent)}")


class WrongNumberOfPremisesError(MllError):
    """A rule was given the wrong number of premises."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Wrong number of premises, expected {expected}, found {found}"
        )