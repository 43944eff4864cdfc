"""
R validation for the 49x49 near-singular regression matrix.

The matrix is sparse and banded with det(A) ≈ 1.001788e-19. R reports it
singular at the default tolerance and nonsingular at tol=1e-19, and R's
solve() returns the reference x. A direct LU back-substitution once failed
on this matrix with a division by zero.

Regenerate the reference values:
    Rscript tests/fixtures/run_r_linalg_validation.R
    pytest tests/linsolve/test_r_validation.py -v
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

import numpy as np
import pytest

from pylinalg.core.matrix import Matrix
from pylinalg.core.tolerance import error_tolerance
from pylinalg.linsolve import det, is_nonsingular, is_singular, rref, solve, solve_system

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"

X_ATOL = 1e-8


@lru_cache(maxsize=None)
def _load():
    A = np.loadtxt(FIXTURES_DIR / "issue386_A.csv", delimiter=",")
    with open(FIXTURES_DIR / "issue386_r_results.json") as f:
        r = json.load(f)
    return A, r


@pytest.fixture
def issue386():
    A, r = _load()
    return A.copy(), r


class TestFixture:

    def test_shapes(self, issue386):
        A, r = issue386
        assert A.shape == (49, 49)
        assert len(r["b"]) == 49
        assert len(r["x"]) == 49


class TestDeterminant:

    def test_det_matches_r(self, issue386):
        A, r = issue386
        np.testing.assert_allclose(det(A), r["det"], rtol=1e-5)

    def test_singular_at_default_tolerance(self, issue386):
        A, r = issue386
        assert is_singular(A) is r["is_singular_default_tol"]
        assert not is_nonsingular(A)

    def test_nonsingular_at_tiny_tolerance(self, issue386):
        A, r = issue386
        assert is_singular(A, tol=1e-19) is r["is_singular_tol_1e-19"]
        assert is_nonsingular(A, tol=1e-19)

    def test_matrix_override(self, issue386):
        A, _ = issue386
        M = Matrix(A)
        assert M.is_singular()
        M.set_error(1e-19)
        assert M.is_nonsingular()

    def test_context_manager(self, issue386):
        A, _ = issue386
        with error_tolerance(1e-19):
            assert is_nonsingular(A)
        assert is_singular(A)


class TestSolve:

    def test_solve_matches_r(self, issue386):
        A, r = issue386
        x = solve(A, r["b"])
        np.testing.assert_allclose(x, r["x"], atol=X_ATOL)

    def test_solve_matrix_method(self, issue386):
        A, r = issue386
        x = Matrix(A).solve(r["b"])
        np.testing.assert_allclose(x, r["x"], atol=X_ATOL)

    def test_solution_has_small_residual(self, issue386):
        A, r = issue386
        sol = solve_system(A, r["b"])
        assert sol.residual_norm < 1e-6

    def test_augmented_rref_last_column_matches_r(self, issue386):
        A, r = issue386
        Ab = Matrix(A).augment(r["b"])
        x = Ab.rref().data[:, -1]
        np.testing.assert_allclose(x, r["x"], atol=X_ATOL)

    def test_rref_method_matches_r(self, issue386):
        A, r = issue386
        x = solve(A, r["b"], method='rref')
        np.testing.assert_allclose(x, r["x"], atol=X_ATOL)

    def test_solve_agrees_with_augmented_rref(self, issue386):
        A, r = issue386
        x = solve(A, r["b"])
        last_column = rref(np.column_stack([A, r["b"]]))[:, -1]
        np.testing.assert_allclose(x, last_column, atol=X_ATOL)
