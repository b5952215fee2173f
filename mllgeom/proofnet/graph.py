"""Abstract directed multigraph with labelled vertices and edges."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class DirectedMultiGraph(ABC):
    """Directed multigraph addressed by labels.

    Vertices expose a ``label``; edges expose ``source`` and ``target``
    vertices and a ``label``.
    """

    @abstractmethod
    def vertices(self) -> list[Any]:
        """All vertices."""

    @abstractmethod
    def add_vertex(self, label: Any) -> Any:
        """Add a vertex with the given label and return it."""

    @abstractmethod
    def find_vertex(self, label: Any) -> Optional[Any]:
        """The vertex with the given label, or None."""

    @abstractmethod
    def remove_vertex(self, label: Any) -> None:
        """Remove a vertex and its incident edges."""

    @abstractmethod
    def outgoing(self, label: Any) -> list[Any]:
        """Edges leaving the vertex with the given label."""

    @abstractmethod
    def incoming(self, label: Any) -> list[Any]:
        """Edges entering the vertex with the given label."""

    @abstractmethod
    def edges(self) -> list[Any]:
        """All edges."""

    @abstractmethod
    def add_edge(self, source: Any, target: Any, label: Any) -> Any:
        """Add an edge between the vertices with the given labels and return it."""

    @abstractmethod
    def find_edge(self, label: Any) -> Optional[Any]:
        """The first edge with the given label, or None."""

    @abstractmethod
    def remove_edge(self, label: Any) -> None:
        """Remove the first edge with the given label."""

    def disjoint_union(self, other: DirectedMultiGraph) -> None:
        """Copy every vertex and edge of ``other`` into this graph."""
        for vertex in other.vertices():
            self.add_vertex(vertex.label)
        for edge in other.edges():
            self.add_edge(edge.source.label, edge.target.label, edge.label)