import math

import pytest

from mllgeom.algebra.complex import Complex
from mllgeom.algebra.errors import DivisionByZeroError


def test_real_constructor_has_zero_imaginary_part():
    assert Complex(3.0) == Complex(3.0, 0.0)


def test_zero_and_one():
    assert Complex.zero() == Complex(0.0, 0.0)
    assert Complex.one() == Complex(1.0, 0.0)


def test_arg_of_real_is_zero():
    assert Complex(-4.0).arg() == 0.0


@pytest.mark.parametrize("modulus,angle", [(2.0, 0.3), (1.5, -1.0), (0.5, 1.2)])
def test_from_polar_round_trip(modulus, angle):
    z = Complex.from_polar(modulus, angle)
    assert z.abs() == pytest.approx(modulus)
    assert z.arg() == pytest.approx(angle)


def test_add_and_neg_cancel():
    z = Complex(1.25, -3.5)
    assert z + (-z) == Complex.zero()


def test_neg_is_involution():
    z = Complex(0.75, 2.0)
    assert -(-z) == z


def test_mul_is_multiplicative_in_modulus():
    a, b = Complex(1.0, 2.0), Complex(-3.0, 0.5)
    assert (a * b).abs() == pytest.approx(a.abs() * b.abs())


def test_div_undoes_modulus_of_mul():
    a, b = Complex(1.0, 2.0), Complex(2.0, 1.0)
    assert ((a * b) / b).abs() == pytest.approx(a.abs())


def test_inverse_modulus():
    z = Complex(3.0, 4.0)
    assert z.inverse().abs() == pytest.approx(1.0 / z.abs())
    assert z.inverse().arg() == pytest.approx(-z.arg())


def test_division_by_zero_raises():
    with pytest.raises(DivisionByZeroError):
        Complex(1.0, 1.0) / Complex.zero()


def test_inverse_of_zero_raises():
    with pytest.raises(DivisionByZeroError):
        Complex.zero().inverse()


def test_str_of_real():
    assert str(Complex(1.5)) == "1.5"


def test_str_of_integral_real_drops_fraction():
    assert str(Complex(2.0)) == "2"


def test_str_with_imaginary_part():
    assert str(Complex(1.0, 2.0)) == "1+i2"


def test_pow_zero_is_one():
    assert Complex(2.0, 3.0).pow(0) == Complex.one()


def test_pow_keeps_modulus_power():
    z = Complex(1.0, 1.0)
    assert z.pow(3).abs() == pytest.approx(math.sqrt(2.0) ** 3)