"""Proof structures, links, conversion from proofs and cut reduction."""