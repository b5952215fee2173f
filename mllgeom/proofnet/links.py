"""Links that attach the pieces of a proof to a proof structure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..mll.formula import Formula, Par, Tensor
from .errors import MissingConclusionError, MissingPremiseError
from .structure import ProofStructure, RuleLabel, Vertex


@dataclass(frozen=True)
class AttachContext:
    """Vertices a link connects to; any of them may be absent."""

    prev_left: Optional[Vertex] = None
    prev_right: Optional[Vertex] = None
    next_left: Optional[Vertex] = None
    next_right: Optional[Vertex] = None


def _required(vertex: Optional[Vertex], error: type[Exception]) -> Vertex:
    if vertex is None:
        raise error()
    return vertex


class ProofLink(ABC):
    """A link that can be attached to a proof structure."""

    @abstractmethod
    def attach(self, net: ProofStructure, context: Optional[AttachContext] = None) -> None:
        """Add the link's vertex and edges to ``net``."""


@dataclass(frozen=True)
class AxLink(ProofLink):
    """Axiom link with conclusions ``active`` and its negation."""

    active: Formula

    def attach(self, net: ProofStructure, context: Optional[AttachContext] = None) -> None:
        ctx = context or AttachContext()
        next_left = ctx.next_left or net.add_vertex(net.fresh_label(RuleLabel.C))
        next_right = ctx.next_right or net.add_vertex(net.fresh_label(RuleLabel.C))
        vertex = net.add_vertex(net.fresh_label(RuleLabel.AX))
        net.add_edge(vertex.label, next_left.label, self.active)
        net.add_edge(vertex.label, next_right.label, -self.active)


@dataclass(frozen=True)
class ConclusionLink(ProofLink):
    """Link marking ``conclusion`` as a conclusion of the net."""

    conclusion: Formula

    def attach(self, net: ProofStructure, context: Optional[AttachContext] = None) -> None:
        ctx = context or AttachContext()
        vertex = net.add_vertex(net.fresh_label(RuleLabel.C))
        prev = _required(ctx.prev_left, MissingPremiseError)
        net.add_edge(prev.label, vertex.label, self.conclusion)


@dataclass(frozen=True)
class CutLink(ProofLink):
    """Cut link between the negation of ``premise`` and ``premise``."""

    premise: Formula

    def attach(self, net: ProofStructure, context: Optional[AttachContext] = None) -> None:
        ctx = context or AttachContext()
        left = _required(ctx.prev_left, MissingPremiseError)
        right = _required(ctx.prev_right, MissingPremiseError)
        vertex = net.add_vertex(net.fresh_label(RuleLabel.CUT))
        net.add_edge(left.label, vertex.label, -self.premise)
        net.add_edge(right.label, vertex.label, self.premise)


@dataclass(frozen=True)
class ParLink(ProofLink):
    """Par link joining two premises into their par."""

    premise_left: Formula
    premise_right: Formula

    def attach(self, net: ProofStructure, context: Optional[AttachContext] = None) -> None:
        ctx = context or AttachContext()
        left = _required(ctx.prev_left, MissingPremiseError)
        right = _required(ctx.prev_right, MissingPremiseError)
        target = _required(ctx.next_left, MissingConclusionError)
        vertex = net.add_vertex(net.fresh_label(RuleLabel.PAR))
        net.add_edge(left.label, vertex.label, self.premise_left)
        net.add_edge(right.label, vertex.label, self.premise_right)
        net.add_edge(vertex.label, target.label, Par(self.premise_left, self.premise_right))


@dataclass(frozen=True)
class TensorLink(ProofLink):
    """Tensor link joining two premises into their tensor."""

    premise_left: Formula
    premise_right: Formula

    def attach(self, net: ProofStructure, context: Optional[AttachContext] = None) -> None:
        ctx = context or AttachContext()
        left = _required(ctx.prev_left, MissingPremiseError)
        right = _required(ctx.prev_right, MissingPremiseError)
        target = _required(ctx.next_left, MissingConclusionError)
        vertex = net.add_vertex(net.fresh_label(RuleLabel.TENSOR))
        net.add_edge(left.label, vertex.label, self.premise_left)
        net.add_edge(right.label, vertex.label, self.premise_right)
        net.add_edge(vertex.label, target.label, Tensor(self.premise_left, self.premise_right))