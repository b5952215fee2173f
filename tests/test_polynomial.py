from __future__ import annotations

from dataclasses import dataclass

import pytest

from mllgeom.algebra.errors import DimensionMismatchError, WrongDegreeError
from mllgeom.algebra.polynomial import HomogeneousPolynomial, Monomial, Polynomial
from mllgeom.algebra.structures import Ring


@dataclass
class IntRing(Ring):
    value: int

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def __add__(self, other):
        return IntRing(self.value + other.value)

    def __neg__(self):
        return IntRing(-self.value)

    def __mul__(self, other):
        return IntRing(self.value * other.value)

    def __str__(self):
        return str(self.value)


def mono(c, *powers):
    return Monomial(IntRing(c), powers)


def test_monomial_powers_become_tuple():
    assert Monomial(IntRing(1), [1, 2]).powers == (1, 2)


def test_monomial_degree_of_product_is_sum():
    a, b = mono(2, 1, 2), mono(3, 0, 4)
    assert (a * b).deg() == a.deg() + b.deg()


def test_monomial_mul_coefficient():
    a, b = mono(2, 1, 0), mono(5, 0, 1)
    assert (a * b).coefficient == IntRing(2) * IntRing(5)


def test_monomial_mul_dimension_mismatch():
    with pytest.raises(DimensionMismatchError) as info:
        mono(1, 1, 0) * mono(1, 1)
    assert (info.value.found, info.value.expected) == (1, 2)


def test_monomial_add_same_powers_merges():
    a, b = mono(2, 1, 1), mono(3, 1, 1)
    assert a + b == Polynomial([Monomial(IntRing(2) + IntRing(3), (1, 1))])


def test_monomial_add_different_powers_keeps_both():
    a, b = mono(2, 1, 0), mono(3, 0, 1)
    assert (a + b).monomials == [a, b]


def test_monomial_neg_is_involution():
    a = mono(4, 2, 1)
    assert -(-a) == a


def test_monomial_str():
    assert str(mono(2, 1, 0)) == "2X_0^1X_1^0"


def test_monomial_eval_agrees_for_plain_numbers():
    ring_value = mono(2, 1, 2).eval((IntRing(3), IntRing(4)))
    assert ring_value.value == Monomial(2, (1, 2)).eval((3, 4))


def test_monomial_eval_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        mono(1, 1, 1).eval((IntRing(1),))


def test_polynomial_eval_is_sum_of_monomials():
    a, b = mono(2, 1, 0), mono(3, 0, 2)
    x = (IntRing(5), IntRing(7))
    assert Polynomial([a, b]).eval(x) == a.eval(x) + b.eval(x)


def test_empty_polynomial_evaluates_to_zero():
    assert Polynomial([]).eval((IntRing(5), IntRing(7))) == IntRing.zero()


def test_zero_and_one_polynomials():
    assert Polynomial.zero(IntRing, 2) == Polynomial([Monomial(IntRing(0), (0, 0))])
    assert Polynomial.one(IntRing, 2) == Polynomial([Monomial(IntRing(1), (0, 0))])


def test_polynomial_add_merges_matching_powers():
    p = Polynomial([mono(1, 1, 0), mono(2, 0, 1)])
    q = Polynomial([mono(4, 1, 0)])
    result = p + q
    assert result.monomials == [mono(2, 0, 1), Monomial(IntRing(1) + IntRing(4), (1, 0))]


def test_polynomial_add_appends_new_powers():
    p = Polynomial([mono(1, 1, 0)])
    q = Polynomial([mono(2, 0, 1)])
    assert (p + q).monomials == p.monomials + q.monomials


def test_polynomial_neg_is_involution():
    p = Polynomial([mono(1, 1, 0), mono(-2, 0, 3)])
    assert -(-p) == p


def test_polynomial_str_joins_monomials():
    p = Polynomial([mono(1, 1, 0), mono(2, 0, 1)])
    assert str(p) == f"{mono(1, 1, 0)} + {mono(2, 0, 1)}"


def test_polynomial_mul_by_one_keeps_monomials():
    p = Polynomial([mono(3, 1, 2)])
    assert p * Polynomial.one(IntRing, 2) == p


def test_polynomial_pow_zero_is_one():
    p = Polynomial([mono(3, 1, 2)])
    assert p.pow(0) == Polynomial.one(IntRing, 2)


def test_empty_polynomial_pow_raises():
    with pytest.raises(ValueError):
        Polynomial([]).pow(2)


def test_homogeneous_detection():
    homo = Polynomial([mono(1, 2, 0), mono(1, 1, 1)])
    mixed = Polynomial([mono(1, 2, 0), mono(1, 0, 1)])
    assert homo.is_homogeneous() is True
    assert homo.degree() == homo.monomials[0].deg()
    assert mixed.is_homogeneous() is False
    assert mixed.degree() is None


def test_from_polynomial_wrong_degree():
    mixed = Polynomial([mono(1, 2, 0), mono(1, 0, 1)])
    with pytest.raises(WrongDegreeError) as info:
        HomogeneousPolynomial.from_polynomial(mixed)
    assert info.value.found == mixed.monomials[1].deg()
    assert info.value.expected == mixed.monomials[0].deg()


def test_from_empty_polynomial_has_degree_zero():
    assert HomogeneousPolynomial.from_polynomial(Polynomial([])) == HomogeneousPolynomial(0, [])


def test_homogeneous_round_trip():
    p = Polynomial([mono(1, 2, 0), mono(5, 1, 1)])
    assert HomogeneousPolynomial.from_polynomial(p).to_polynomial() == p


def test_homogeneous_eval_matches_polynomial():
    p = Polynomial([mono(1, 2, 0), mono(5, 1, 1)])
    x = (IntRing(2), IntRing(3))
    assert HomogeneousPolynomial.from_polynomial(p).eval(x) == p.eval(x)


def test_homogeneous_mul_adds_degrees():
    f = HomogeneousPolynomial.from_polynomial(Polynomial([mono(1, 1, 0), mono(1, 0, 1)]))
    g = HomogeneousPolynomial.from_polynomial(Polynomial([mono(2, 2, 1)]))
    product = f * g
    assert product.deg == f.deg + g.deg
    assert all(m.deg() == product.deg for m in product.monomials)


def test_product_of_homogeneous_polynomials_is_homogeneous():
    p = Polynomial([mono(1, 1, 0), mono(1, 0, 1)])
    q = Polynomial([mono(3, 0, 2)])
    product = p * q
    assert product.is_homogeneous() is True
    assert product.degree() == p.degree() + q.degree()