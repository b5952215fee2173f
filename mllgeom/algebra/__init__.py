"""Arithmetic, algebraic structures, complex numbers, polynomials and projective geometry."""