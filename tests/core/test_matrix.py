"""
Tests for the Matrix value type.

Validates:
    - Construction boundary: ragged, empty, non-numeric, non-finite input
    - Immutability of the stored data
    - identity / column / augment builders
    - Engine methods delegate with the matrix's tolerance
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    BadDataError,
    DimensionError,
    InvalidMethodError,
    ValidationError,
)
from pylinalg.core.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_basic(self):
        A = Matrix([[1, 2, 3], [4, 5, 6]])
        assert A.shape == (2, 3)
        assert A.n_rows == 2
        assert A.n_cols == 3
        assert not A.is_square
        assert A.data.dtype == np.float64

    def test_data_is_copied(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        A = Matrix(source)
        source[0, 0] = 99.0
        assert A.data[0, 0] == 1.0

    def test_data_is_read_only(self):
        A = Matrix([[1.0, 2.0], [3.0, 4.0]])
        with pytest.raises(ValueError):
            A.data[0, 0] = 5.0

    def test_ragged_rows_rejected(self):
        with pytest.raises(BadDataError):
            Matrix([[1, 2], [3]])

    def test_empty_rejected(self):
        with pytest.raises(BadDataError):
            Matrix([[]])

    def test_non_numeric_rejected(self):
        with pytest.raises(BadDataError):
            Matrix([["a", "b"], ["c", "d"]])

    def test_nan_rejected(self):
        with pytest.raises(BadDataError):
            Matrix([[1.0, np.nan], [0.0, 1.0]])

    def test_1d_rejected(self):
        with pytest.raises(DimensionError):
            Matrix([1.0, 2.0, 3.0])

    def test_invalid_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            Matrix([[1.0]], epsilon=-1.0)


class TestBuilders:

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).data, np.eye(3))

    def test_column(self):
        c = Matrix.column([1.0, 2.0, 3.0])
        assert c.shape == (3, 1)

    def test_column_rejects_2d(self):
        with pytest.raises(DimensionError):
            Matrix.column([[1.0, 2.0]])

    def test_augment_with_vector(self):
        A = Matrix([[1.0, 2.0], [3.0, 4.0]])
        Ab = A.augment([5.0, 6.0])
        np.testing.assert_array_equal(Ab.data, [[1, 2, 5], [3, 4, 6]])

    def test_augment_with_matrix(self):
        A = Matrix([[1.0, 2.0], [3.0, 4.0]])
        AI = A.augment(Matrix.identity(2))
        assert AI.shape == (2, 4)

    def test_augment_row_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix.identity(2).augment([1.0, 2.0, 3.0])

    def test_augment_keeps_override(self):
        A = Matrix.identity(2)
        A.set_error(1e-3)
        assert A.augment([1.0, 1.0]).epsilon == 1e-3


class TestProtocols:

    def test_equality(self):
        assert Matrix([[1, 2], [3, 4]]) == Matrix([[1.0, 2.0], [3.0, 4.0]])
        assert Matrix([[1, 2], [3, 4]]) != Matrix([[1, 2], [3, 5]])
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix.identity(2))

    def test_asarray(self):
        arr = np.asarray(Matrix([[1, 2], [3, 4]]))
        np.testing.assert_array_equal(arr, [[1, 2], [3, 4]])

    def test_repr(self):
        assert repr(Matrix.identity(2)) == "Matrix(2x2)"
        assert "epsilon=0.001" in repr(Matrix(np.eye(2), epsilon=1e-3))


# ═══════════════════════════════════════════════════════════════════════
# Engine methods
# ═══════════════════════════════════════════════════════════════════════


class TestEngineMethods:

    def test_det(self):
        assert Matrix([[1, 2], [3, 4]]).det() == pytest.approx(-2.0)

    def test_singularity(self, singular_matrix):
        A = Matrix(singular_matrix)
        assert A.is_singular()
        assert not A.is_nonsingular()
        assert Matrix.identity(3).is_nonsingular()

    def test_rref_returns_matrix(self, singular_matrix):
        R = Matrix(singular_matrix).rref()
        assert isinstance(R, Matrix)
        np.testing.assert_allclose(R.data, [[1, 0, -1], [0, 1, 2], [0, 0, 0]], atol=1e-12)

    def test_rank(self, singular_matrix):
        assert Matrix(singular_matrix).rank() == 2

    def test_solve(self):
        x = Matrix([[2, 1], [1, 3]]).solve([3, 5])
        np.testing.assert_allclose(x, [0.8, 1.4])

    def test_eigenvalues_default_method(self):
        np.testing.assert_allclose(Matrix([[6, -1], [2, 3]]).eigenvalues(), [4, 5])

    def test_eigenvalues_named_method(self):
        values = Matrix([[0, 1], [-2, -3]]).eigenvalues("closed_form_polynomial_root")
        np.testing.assert_allclose(values, [-2, -1])

    def test_eigenvalues_unknown_method(self):
        with pytest.raises(InvalidMethodError):
            Matrix([[0, 1], [-2, -3]]).eigenvalues("power_iteration")

    def test_eigenvectors_returns_matrix(self):
        V = Matrix.identity(3).eigenvectors()
        assert isinstance(V, Matrix)
        np.testing.assert_allclose(V.data, np.eye(3))

    def test_override_used_by_engine(self):
        A = Matrix(np.diag([1.0, 1e-9]))
        assert A.is_nonsingular()
        A.set_error(1e-8)
        assert A.is_singular()
