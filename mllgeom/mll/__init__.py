"""Formulas, deduction rules and proofs of multiplicative linear logic."""