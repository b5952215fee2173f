"""Multiplicative linear logic, proof structures and cut reduction, with supporting algebra."""

__version__ = "0.1.0"