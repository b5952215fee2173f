"""Cut elimination on proof structures."""

from __future__ import annotations

from .errors import BadProofError, MissingConclusionError, WrongLabelError
from .structure import Edge, ProofStructure, RuleLabel, Vertex


def reduce(net: ProofStructure) -> None:
    """Eliminate every cut of ``net`` in place.

    Raises BadProofError when a cut can be reduced by no rule.
    """
    while cuts := net.cuts():
        cut = cuts[0]
        _reduce_cut(net, cut)
        if net.find_vertex(cut.label) is not None:
            raise BadProofError()


def _reduce_cut(net: ProofStructure, vertex: Vertex) -> None:
    label = vertex.label
    if label.rule is not RuleLabel.CUT:
        raise WrongLabelError(found=label.rule, expected=RuleLabel.CUT)
    premises = net.incoming(label)
    if len(premises) != 2:
        raise BadProofError()
    left, right = premises
    match (left.source.label.rule, right.source.label.rule):
        case (RuleLabel.AX, _):
            _remove_ax(net, left, right, vertex)
        case (_, RuleLabel.AX):
            _remove_ax(net, right, left, vertex)
        case (RuleLabel.TENSOR, RuleLabel.PAR):
            _remove_par_tensor(net, vertex, left, right)
        case (RuleLabel.PAR, RuleLabel.TENSOR):
            _remove_par_tensor(net, vertex, right, left)


def _remove_ax(net: ProofStructure, ax_edge: Edge, other_edge: Edge, vertex: Vertex) -> None:
    other_previous = other_edge.source
    ax_vertex = ax_edge.source
    onward = next(
        (e for e in net.outgoing(ax_vertex.label) if e.target != vertex), None
    )
    if onward is None:
        raise MissingConclusionError()
    net.remove_vertex(vertex.label)
    net.remove_vertex(ax_vertex.label)
    net.add_edge(other_previous.label, onward.target.label, onward.label)


def _two_incoming(net: ProofStructure, vertex: Vertex) -> tuple[Edge, Edge]:
    edges = net.incoming(vertex.label)
    if len(edges) != 2:
        raise BadProofError()
    return edges[0], edges[1]


def _remove_par_tensor(
    net: ProofStructure, vertex: Vertex, tensor_edge: Edge, par_edge: Edge
) -> None:
    tensor_vertex = tensor_edge.source
    par_vertex = par_edge.source
    tensor_left, tensor_right = _two_incoming(net, tensor_vertex)
    par_left, par_right = _two_incoming(net, par_vertex)

    if -tensor_left.label == par_left.label and -tensor_right.label == par_right.label:
        cut1_left, cut1_right, left_label = tensor_left.source, par_left.source, tensor_right.label
        cut2_left, cut2_right, right_label = tensor_right.source, par_right.source, tensor_left.label
    elif -tensor_left.label == par_right.label and -tensor_right.label == par_left.label:
        cut1_left, cut1_right, left_label = tensor_left.source, par_right.source, tensor_left.label
        cut2_left, cut2_right, right_label = tensor_right.source, par_left.source, tensor_right.label
    else:
        raise BadProofError()

    net.remove_vertex(tensor_vertex.label)
    net.remove_vertex(par_vertex.label)
    net.remove_vertex(vertex.label)
    cut1 = net.add_vertex(net.fresh_label(RuleLabel.CUT))
    net.add_edge(cut1_left.label, cut1.label, left_label)
    net.add_edge(cut1_right.label, cut1.label, right_label)
    cut2 = net.add_vertex(net.fresh_label(RuleLabel.CUT))
    net.add_edge(cut2_left.label, cut2.label, -left_label)
    net.add_edge(cut2_right.label, cut2.label, -right_label)