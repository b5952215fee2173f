"""Translation of sequent-calculus proofs into proof structures."""

from __future__ import annotations

from collections.abc import Sequence

from ..mll.deduction import Ax, Cut, Deduction, Ex, ParRule, TensorRule
from ..mll.formula import Formula
from ..mll.proof import Proof
from .errors import BadProofError, MissingPremiseError
from .links import AttachContext, AxLink, CutLink, ParLink, TensorLink
from .structure import ProofStructure, RuleLabel


def _union_of_two(premises: Sequence[Proof]) -> ProofStructure:
    if len(premises) != 2:
        raise BadProofError()
    left, right = premises
    net = proof_to_net(left)
    net.disjoint_union(proof_to_net(right))
    return net


def _two_active(rule: Deduction) -> tuple[Formula, Formula]:
    active = rule.active()
    if len(active) < 2:
        raise MissingPremiseError()
    return active[0], active[1]


def proof_to_net(proof: Proof) -> ProofStructure:
    """Build the proof structure of ``proof``.

    Raises BadProofError when a rule has the wrong number of sub-proofs.
    """
    rule = proof.conclusion
    premises = list(proof.premises)
    match rule:
        case Ax():
            net = ProofStructure()
            AxLink(rule.active()[0]).attach(net, AttachContext())
            return net
        case Cut():
            net = _union_of_two(premises)
            left, right = _two_active(rule)
            context = AttachContext(
                prev_left=net.find_conclusion(left),
                prev_right=net.find_conclusion(right),
            )
            CutLink(left).attach(net, context)
            return net
        case TensorRule() | ParRule():
            net = _union_of_two(premises)
            left, right = _two_active(rule)
            left_vertex = net.find_conclusion(left)
            right_vertex = net.find_conclusion(right)
            conclusion_vertex = net.add_vertex(net.fresh_label(RuleLabel.C))
            context = AttachContext(
                prev_left=left_vertex,
                prev_right=right_vertex,
                next_left=conclusion_vertex,
            )
            link_type = TensorLink if isinstance(rule, TensorRule) else ParLink
            link_type(left, right).attach(net, context)
            return net
        case Ex():
            if len(premises) != 1:
                raise BadProofError()
            return proof_to_net(premises[0])
    raise TypeError(f"unsupported rule: {rule!r}")