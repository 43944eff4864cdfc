"""
Tests for characteristic polynomials and closed-form roots.
"""

import math

import numpy as np
import pytest

from pylinalg.core.exceptions import ComplexEigenvalueError, DimensionError
from pylinalg.eigen._polynomial import (
    characteristic_coefficients,
    cubic_roots,
    quadratic_roots,
)

EPS = 1e-11


class TestCharacteristicCoefficients:

    def test_2x2(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        assert characteristic_coefficients(A) == pytest.approx((-5.0, -2.0))

    def test_3x3(self):
        A = np.array([[2.0, 0.0, 1.0], [2.0, 1.0, 2.0], [3.0, 0.0, 4.0]])
        # (λ - 5)(λ - 1)² = λ³ - 7λ² + 11λ - 5
        assert characteristic_coefficients(A) == pytest.approx((-7.0, 11.0, -5.0))

    def test_matches_numpy_poly(self, rng):
        A = rng.standard_normal((3, 3))
        expected = np.poly(A)[1:]
        np.testing.assert_allclose(characteristic_coefficients(A), expected, atol=1e-12)

    @pytest.mark.parametrize("n", [1, 4])
    def test_other_sizes_rejected(self, n):
        with pytest.raises(DimensionError):
            characteristic_coefficients(np.eye(n))


class TestQuadraticRoots:

    def test_order_minus_then_plus(self):
        # λ² - 9λ + 20 = (λ - 4)(λ - 5)
        assert quadratic_roots(-9.0, 20.0, EPS) == pytest.approx([4.0, 5.0])

    def test_double_root(self):
        assert quadratic_roots(-4.0, 4.0, EPS) == pytest.approx([2.0, 2.0])

    def test_tiny_negative_discriminant_is_double_root(self):
        roots = quadratic_roots(-2.0, 1.0 + 1e-14, EPS)
        assert roots[0] == roots[1]

    def test_complex_raises(self):
        with pytest.raises(ComplexEigenvalueError) as exc_info:
            quadratic_roots(0.0, 1.0, EPS)
        assert exc_info.value.degree == 2
        assert exc_info.value.discriminant == pytest.approx(-4.0)

    def test_small_complex_pair_raises(self):
        # λ² + 1e-12 has roots ±1e-6·i
        with pytest.raises(ComplexEigenvalueError):
            quadratic_roots(0.0, 1e-12, EPS)

    def test_small_tiny_negative_discriminant_is_double_root(self):
        roots = quadratic_roots(-2e-6, 1e-12 * (1.0 + 1e-14), EPS)
        assert roots[0] == roots[1]
        assert roots[0] == pytest.approx(1e-6)


class TestCubicRoots:

    def test_distinct_roots_viete_order(self):
        # (λ - 6)(λ + 5)(λ - 3) = λ³ - 4λ² - 27λ + 90
        roots = cubic_roots(-4.0, -27.0, 90.0, EPS)
        np.testing.assert_allclose(roots, [6.0, -5.0, 3.0], atol=1e-12)

    def test_double_root_with_r_positive(self):
        # (λ - 5)(λ - 1)²
        roots = cubic_roots(-7.0, 11.0, -5.0, EPS)
        np.testing.assert_allclose(roots, [5.0, 1.0, 1.0], atol=1e-12)

    def test_double_root_with_r_negative(self):
        # (λ - 1)²(λ + 3)
        roots = cubic_roots(1.0, -5.0, 3.0, EPS)
        np.testing.assert_allclose(roots, [1.0, -3.0, 1.0], atol=1e-12)

    def test_triple_root(self):
        # (λ - 2)³
        assert cubic_roots(-6.0, 12.0, -8.0, EPS) == [2.0, 2.0, 2.0]

    def test_complex_raises(self):
        # (λ - 1)(λ² + 1)
        with pytest.raises(ComplexEigenvalueError) as exc_info:
            cubic_roots(-1.0, 1.0, -1.0, EPS)
        assert exc_info.value.degree == 3
        assert exc_info.value.discriminant > 0

    def test_roots_satisfy_polynomial(self, rng):
        for _ in range(10):
            r = np.sort(rng.uniform(-10, 10, 3))
            a2, a1, a0 = np.poly(r)[1:]
            roots = cubic_roots(a2, a1, a0, EPS)
            for z in roots:
                assert abs(z ** 3 + a2 * z ** 2 + a1 * z + a0) < 1e-8
            assert roots[0] == pytest.approx(r[2], abs=1e-6)
            assert roots[1] == pytest.approx(r[0], abs=1e-6)
            assert roots[2] == pytest.approx(r[1], abs=1e-6)

    def test_uses_trig_form(self):
        roots = cubic_roots(0.0, -3.0, 0.0, EPS)     # λ³ - 3λ: 0, ±√3
        np.testing.assert_allclose(roots, [math.sqrt(3), -math.sqrt(3), 0.0], atol=1e-12)

    @pytest.mark.parametrize("c", [1e-6, 1e-2, 1.0, 1e4])
    def test_branches_independent_of_scale(self, c):
        # Distinct, double and triple roots of the same shape at scale c
        distinct = cubic_roots(-4.0 * c, -27.0 * c ** 2, 90.0 * c ** 3, EPS)
        np.testing.assert_allclose(distinct, c * np.array([6.0, -5.0, 3.0]), rtol=1e-9)

        double = cubic_roots(-7.0 * c, 11.0 * c ** 2, -5.0 * c ** 3, EPS)
        np.testing.assert_allclose(double, c * np.array([5.0, 1.0, 1.0]), rtol=1e-9)
        assert double[1] == pytest.approx(double[2], rel=1e-12)

        triple = cubic_roots(-6.0 * c, 12.0 * c ** 2, -8.0 * c ** 3, EPS)
        assert triple == [pytest.approx(2.0 * c)] * 3

    def test_small_complex_raises(self):
        # 1e-3 times the roots of (λ - 1)(λ² + 1)
        with pytest.raises(ComplexEigenvalueError):
            cubic_roots(-1e-3, 1e-6, -1e-9, EPS)

    def test_zero_polynomial(self):
        assert cubic_roots(0.0, 0.0, 0.0, EPS) == [0.0, 0.0, 0.0]
