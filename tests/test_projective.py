import pytest

from mllgeom.algebra.complex import Complex
from mllgeom.algebra.errors import DimensionMismatchError, ProjectiveAllZeroError
from mllgeom.algebra.polynomial import HomogeneousPolynomial, Monomial, Polynomial
from mllgeom.algebra.projective import ProjectivePoint, ProjectiveScheme


def _hp(*monomials):
    return HomogeneousPolynomial.from_polynomial(Polynomial(list(monomials)))


def test_all_zero_point_rejected():
    with pytest.raises(ProjectiveAllZeroError):
        ProjectivePoint((0.0, 0.0, 0.0))


def test_all_zero_complex_point_rejected():
    with pytest.raises(ProjectiveAllZeroError):
        ProjectivePoint((Complex.zero(), Complex.zero()))


def test_empty_point_rejected():
    with pytest.raises(ProjectiveAllZeroError):
        ProjectivePoint(())


def test_dim_is_one_less_than_coordinates():
    coords = (1.0, 2.0, 3.0)
    assert ProjectivePoint(coords).dim() == len(coords) - 1


def test_coordinates_kept():
    assert ProjectivePoint([1.0, 0.0]).coordinates == (1.0, 0.0)


def test_scaled_points_equal():
    assert ProjectivePoint((1.0, 2.0)) == ProjectivePoint((2.0, 4.0))


def test_different_points_not_equal():
    assert not (ProjectivePoint((1.0, 2.0)) == ProjectivePoint((2.0, 1.0)))


def test_different_dimensions_not_equal():
    assert not (ProjectivePoint((1.0, 2.0)) == ProjectivePoint((1.0, 2.0, 3.0)))


def test_projective_space_contains_everything():
    space = ProjectiveScheme.projective_space(2)
    assert space.contains(ProjectivePoint((3.0, 5.0)))
    assert ProjectivePoint((1.0, 0.0)) in space


def test_projective_space_str():
    assert str(ProjectiveScheme.projective_space(3)) == "P^3/<>"


def test_contains_checks_vanishing():
    scheme = ProjectiveScheme(2, [_hp(Monomial(-2, (1, 1)))])
    assert scheme.contains(ProjectivePoint((1, 1)))
    assert not scheme.contains(ProjectivePoint((2, 1)))


def test_contains_wrong_dimension():
    scheme = ProjectiveScheme(2, [_hp(Monomial(-2, (1, 1)))])
    with pytest.raises(DimensionMismatchError):
        scheme.contains(ProjectivePoint((1, 1, 1)))


def test_str_lists_generators():
    poly = _hp(Monomial(1, (1, 0)))
    scheme = ProjectiveScheme(2, [poly, poly])
    assert str(scheme) == f"P^2/<{poly}, {poly}>"


def test_disjoint_union_products():
    f = _hp(Monomial(1, (1, 0)))
    g = _hp(Monomial(1, (0, 2)))
    h = _hp(Monomial(1, (1, 1)))
    left = ProjectiveScheme(2, [f, g])
    right = ProjectiveScheme(2, [h])
    union = left.disjoint_union(right)
    assert len(union.ideal_generators) == 2
    assert [p.deg for p in union.ideal_generators] == [f.deg + h.deg, g.deg + h.deg]
    assert union.n == 2


def test_disjoint_union_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        ProjectiveScheme.projective_space(2).disjoint_union(ProjectiveScheme.projective_space(3))