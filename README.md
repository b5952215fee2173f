# mllgeom

Multiplicative linear logic (MLL) in Python: formulas, sequent-calculus
proofs, proof structures and cut reduction, together with a small set of
algebraic structures (gcd, complex numbers, polynomials, projective points
and schemes).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `mllgeom.atoms`: `Polarity` (`POS` shown as `+`, `NEG` shown as `-`)
  and `OrientedAtom`, an atom name with a polarity; both have `flip()`.
- `mllgeom.mll.formula`: formulas in negation normal form (`Formula` with
  the variants `Atomic`, `Tensor`, `Par`, `Bang`, `Quest`), with `depth()`,
  `is_linear()`, `is_shallow()` and negation through unary minus.
  Preformulas with explicit negation (`PreAtomic`, `PreTensor`, `PrePar`,
  `PreNeg`, `PreBang`, `PreQuest`) are converted with `to_preformula` and
  `from_preformula`; the latter pushes negations down to the atoms.
- `mllgeom.mll.deduction`: the rules `Ax`, `Cut`, `Ex`, `ParRule` and
  `TensorRule`, each with `premises()`, `conclusion()` and `active()`.
- `mllgeom.mll.proof`: `Proof`, built with `Proof.axiom(ax)` and
  `Proof.combine(rule, premises)`; `combine` raises
  `WrongNumberOfPremisesError` or `SequentMismatchError` when the given
  proofs do not fit the rule.
- `mllgeom.proofnet.structure`: `ProofStructure`, a directed multigraph of
  `Vertex` objects (labelled by `RuleLabel` and a number) joined by `Edge`
  objects carrying formulas; `fresh_label`, `find_conclusion` and `cuts`
  help build and inspect it. `mllgeom.proofnet.graph` holds the abstract
  `DirectedMultiGraph` with `disjoint_union`.
- `mllgeom.proofnet.links`: `AxLink`, `CutLink`, `TensorLink`, `ParLink`
  and `ConclusionLink`, attached to a net with an `AttachContext`.
- `mllgeom.proofnet.proof2net`: `proof_to_net(proof)` builds the proof
  structure of a proof.
- `mllgeom.proofnet.cut_reduction`: `reduce(net)` removes cuts in place,
  handling axiom cuts and tensor/par cuts; a cut that neither case
  applies to raises `BadProofError`.
- `mllgeom.algebra.arithmetic`: `gcd`, `gcd_all` and
  `euclidean_algorithm`.
- `mllgeom.algebra.structures`: abstract `AbelianGroup`, `Group`, `Ring`
  (with `pow`), `Field`, `GradedRing`, membership-test substructures
  (`SubGroup`, `AbelianSubGroup`, `SubRing`, `SubField`, `Ideal`) and
  `AsMultGroup`.
- `mllgeom.algebra.complex`: `Complex`, whose products and quotients go
  through `abs()`, `arg()` and `from_polar()`.
- `mllgeom.algebra.polynomial`: `Monomial`, `Polynomial` and
  `HomogeneousPolynomial`.
- `mllgeom.algebra.projective`: `ProjectivePoint` (coordinates not all
  zero) and `ProjectiveScheme` with `contains`, `disjoint_union` and
  `projective_space`.

Errors are exceptions: `AlgebraError` and its subclasses in
`mllgeom.algebra.errors`, `MllError` and its subclasses in
`mllgeom.mll.errors`, and `ProofNetError` and its subclasses in
`mllgeom.proofnet.errors`.

## Examples

```python
from mllgeom.algebra.arithmetic import gcd, gcd_all

gcd(26, 10)          # 2
gcd(-5, 5)           # 5
gcd_all([2, 4, 6])   # 2
gcd_all([])          # 0
```

```python
from mllgeom.atoms import OrientedAtom
from mllgeom.mll.formula import Atomic, Tensor
from mllgeom.mll.deduction import Ax
from mllgeom.mll.proof import Proof
from mllgeom.proofnet.proof2net import proof_to_net

a = Atomic(OrientedAtom("A"))
b = Atomic(OrientedAtom("B"))
str(-Tensor(a, b))                        # '-A⅋ -B'

ax = Ax(a)
[str(f) for f in ax.conclusion()]         # ['-A', '+A']

net = proof_to_net(Proof.axiom(ax))
len(net.vertices()), len(net.edges())     # (3, 2)
```

## Command line

Installing the package provides a `mllgeom` command:

```
mllgeom
```

It prints `Hello, world!` and exits; it does not read or check proofs.

## Limitations

- There is no parser: formulas and proofs are built in Python code.
- The exponential connectives `Bang` and `Quest` exist as formulas, but
  there are no deduction rules or links for them.
- Nothing yet connects the logic side to the algebra side: there is no
  translation of formulas or proofs into projective schemes.