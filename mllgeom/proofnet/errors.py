"""Errors raised while building and transforming proof structures."""

from __future__ import annotations

from typing import Any


class ProofNetError(Exception):
    """Base class for proof structure errors."""


class VertexNotFoundError(ProofNetError):
    """No vertex carries the requested label."""

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"Could not find vertex {label}")


class EdgeNotFoundError(ProofNetError):
    """No edge carries the requested formula."""

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"Could not find edge {label}")


class BadProofError(ProofNetError):
    """The proof or proof structure is malformed."""

    def __init__(self) -> None:
        super().__init__("Proof is malformed")


class MissingPremiseError(ProofNetError):
    """A premise was expected but none was given."""

    def __init__(self) -> None:
        super().__init__("Expected premise, but found none")


class MissingConclusionError(ProofNetError):
    """A conclusion was expected but none was given."""

    def __init__(self) -> None:
        super().__init__("Expected conclusion, but found none")


class WrongLabelError(ProofNetError):
    """A vertex carries a different rule label than expected."""

    def __init__(self, found: Any, expected: Any) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Unexpected label {found}, expected {expected}")


class VertexAlreadyExistsError(ProofNetError):
    """A vertex with the given label is already in the graph."""

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"Vertex with label {label} already exists")