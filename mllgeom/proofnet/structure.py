"""Proof structures: directed multigraphs of rule vertices joined by formula edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..mll.formula import Formula
from .errors import EdgeNotFoundError, VertexAlreadyExistsError, VertexNotFoundError
from .graph import DirectedMultiGraph


class RuleLabel(Enum):
    """Kind of link a vertex stands for."""

    AX = "Ax"
    CUT = "Cut"
    TENSOR = "Tensor"
    PAR = "Par"
    BANG = "!"
    QUEST = "?"
    C = "c"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VertexLabel:
    """Rule kind together with a number that keeps labels distinct."""

    rule: RuleLabel
    num: int

    def __str__(self) -> str:
        return str(self.rule)


@dataclass(frozen=True)
class Vertex:
    """A vertex of a proof structure."""

    label: VertexLabel

    def __str__(self) -> str:
        return str(self.label)


@dataclass(frozen=True)
class Edge:
    """A formula travelling from one vertex to another."""

    source: Vertex
    target: Vertex
    label: Formula


class ProofStructure(DirectedMultiGraph):
    """Graph of links of a proof; conclusions end in vertices labelled ``c``."""

    def __init__(self) -> None:
        self._vertices: dict[VertexLabel, Vertex] = {}
        self._edges: list[Edge] = []

    def _require(self, label: VertexLabel) -> Vertex:
        vertex = self.find_vertex(label)
        if vertex is None:
            raise VertexNotFoundError(label)
        return vertex

    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    def add_vertex(self, label: VertexLabel) -> Vertex:
        if label in self._vertices:
            raise VertexAlreadyExistsError(label)
        vertex = Vertex(label)
        self._vertices[label] = vertex
        return vertex

    def find_vertex(self, label: VertexLabel) -> Optional[Vertex]:
        return self._vertices.get(label)

    def remove_vertex(self, label: VertexLabel) -> None:
        self._require(label)
        for edge in self.incoming(label):
            self.remove_edge(edge.label)
        for edge in self.outgoing(label):
            self.remove_edge(edge.label)
        del self._vertices[label]

    def outgoing(self, label: VertexLabel) -> list[Edge]:
        vertex = self._require(label)
        return [e for e in self._edges if e.source == vertex]

    def incoming(self, label: VertexLabel) -> list[Edge]:
        vertex = self._require(label)
        return [e for e in self._edges if e.target == vertex]

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def add_edge(self, source: VertexLabel, target: VertexLabel, label: Formula) -> Edge:
        edge = Edge(self._require(source), self._require(target), label)
        self._edges.append(edge)
        return edge

    def find_edge(self, label: Formula) -> Optional[Edge]:
        return next((e for e in self._edges if e.label == label), None)

    def remove_edge(self, label: Formula) -> None:
        edge = self.find_edge(label)
        if edge is None:
            raise EdgeNotFoundError(label)
        self._edges.remove(edge)

    def fresh_label(self, rule: RuleLabel) -> VertexLabel:
        """A label for ``rule`` whose number exceeds every number in use."""
        highest = max((label.num for label in self._vertices), default=0)
        return VertexLabel(rule, highest + 1)

    def find_conclusion(self, conclusion: Formula) -> Optional[Vertex]:
        """The first conclusion vertex reached by an edge carrying ``conclusion``."""
        return next(
            (
                e.target
                for e in self._edges
                if e.label == conclusion and e.target.label.rule is RuleLabel.C
            ),
            None,
        )

    def cuts(self) -> list[Vertex]:
        """All cut vertices."""
        return [v for v in self._vertices.values() if v.label.rule is RuleLabel.CUT]