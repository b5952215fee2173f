"""Proof trees built from inference rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Sequence

from .deduction import Ax, Deduction
from .errors import SequentMismatchError, WrongNumberOfPremisesError


@dataclass(frozen=True)
class Proof:
    """A rule applied to sub-proofs of its premises; build with ``axiom`` and ``combine``."""

    conclusion: Deduction
    premises: Sequence[Proof] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "premises", tuple(self.premises))

    @classmethod
    def axiom(cls, ax: Ax) -> Proof:
        """A proof consisting of one axiom."""
        return cls(ax, ())

    @classmethod
    def combine(cls, rule: Deduction, premises: Iterable[Proof]) -> Proof:
        """Apply ``rule`` to proofs whose conclusions must match its premises."""
        proofs = list(premises)
        rule_premises = rule.premises()
        if len(proofs) != len(rule_premises):
            raise WrongNumberOfPremisesError(expected=len(rule_premises), found=len(proofs))
        for needed, proof in zip(rule_premises, proofs):
            proved = proof.conclusion.conclusion()
            if proved != needed:
                raise SequentMismatchError(proved, needed)
        return cls(rule, proofs)