import pytest

from mllgeom.atoms import OrientedAtom
from mllgeom.mll.formula import Atomic
from mllgeom.proofnet.errors import VertexAlreadyExistsError
from mllgeom.proofnet.graph import DirectedMultiGraph
from mllgeom.proofnet.structure import ProofStructure, RuleLabel, VertexLabel


def _atom(name):
    return Atomic(OrientedAtom(name))


def test_abstract_graph_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DirectedMultiGraph()


def test_disjoint_union_copies_vertices_and_edges():
    left = ProofStructure()
    a = left.add_vertex(VertexLabel(RuleLabel.AX, 1))
    b = left.add_vertex(VertexLabel(RuleLabel.C, 2))
    left.add_edge(a.label, b.label, _atom("p"))

    right = ProofStructure()
    c = right.add_vertex(VertexLabel(RuleLabel.AX, 3))
    d = right.add_vertex(VertexLabel(RuleLabel.C, 4))
    right.add_edge(c.label, d.label, _atom("q"))

    left.disjoint_union(right)

    assert set(left.vertices()) == {a, b, c, d}
    assert [e.label for e in left.edges()] == [_atom("p"), _atom("q")]
    copied = left.find_edge(_atom("q"))
    assert copied.source == c
    assert copied.target == d


def test_disjoint_union_leaves_other_untouched():
    left = ProofStructure()
    right = ProofStructure()
    v = right.add_vertex(VertexLabel(RuleLabel.C, 7))
    left.disjoint_union(right)
    assert right.vertices() == [v]
    assert left.vertices() == [v]


def test_disjoint_union_with_clashing_labels_raises():
    left = ProofStructure()
    left.add_vertex(VertexLabel(RuleLabel.C, 1))
    right = ProofStructure()
    right.add_vertex(VertexLabel(RuleLabel.C, 1))
    with pytest.raises(VertexAlreadyExistsError):
        left.disjoint_union(right)