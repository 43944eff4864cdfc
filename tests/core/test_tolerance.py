"""
Tests for the process-wide tolerance policy.

Validates:
    - Default value and get/set/reset
    - Rejection of negative, non-finite and non-numeric values
    - error_tolerance() restores the previous value, even on error
    - Engine calls read the tolerance at call time, not at construction
"""

import math

import numpy as np
import pytest

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.tolerance import (
    DEFAULT_EPSILON,
    error_tolerance,
    get_epsilon,
    is_zero,
    reset_epsilon,
    resolve_epsilon,
    set_epsilon,
)
from pylinalg.core.matrix import Matrix
from pylinalg.linsolve import is_singular


class TestGlobalTolerance:

    def test_default(self):
        assert DEFAULT_EPSILON == 1e-11
        assert get_epsilon() == DEFAULT_EPSILON

    def test_set_and_reset(self):
        set_epsilon(1e-6)
        assert get_epsilon() == 1e-6
        reset_epsilon()
        assert get_epsilon() == DEFAULT_EPSILON

    def test_zero_allowed(self):
        set_epsilon(0)
        assert get_epsilon() == 0.0

    @pytest.mark.parametrize("bad", [-1e-9, math.inf, math.nan, "small", None, True])
    def test_rejects_invalid(self, bad):
        with pytest.raises(ValidationError):
            set_epsilon(bad)
        assert get_epsilon() == DEFAULT_EPSILON


class TestErrorToleranceContext:

    def test_sets_and_restores(self):
        with error_tolerance(1e-19) as eps:
            assert eps == 1e-19
            assert get_epsilon() == 1e-19
        assert get_epsilon() == DEFAULT_EPSILON

    def test_restores_previous_not_default(self):
        set_epsilon(1e-8)
        with error_tolerance(1e-3):
            pass
        assert get_epsilon() == 1e-8

    def test_restores_on_exception(self):
        with pytest.raises(RuntimeError):
            with error_tolerance(1e-3):
                raise RuntimeError("boom")
        assert get_epsilon() == DEFAULT_EPSILON


class TestResolveEpsilon:

    def test_none_reads_current_value(self):
        set_epsilon(1e-4)
        assert resolve_epsilon(None) == 1e-4

    def test_explicit_value_wins(self):
        set_epsilon(1e-4)
        assert resolve_epsilon(1e-2) == 1e-2

    def test_explicit_value_validated(self):
        with pytest.raises(ValidationError):
            resolve_epsilon(-1.0)

    def test_is_zero(self):
        assert is_zero(1e-12, 1e-11)
        assert is_zero(-1e-11, 1e-11)
        assert not is_zero(2e-11, 1e-11)


class TestCallTimeResolution:
    """The latest tolerance applies to existing matrices."""

    def test_matrix_follows_global_change(self):
        A = Matrix([[1.0, 0.0], [0.0, 1e-9]])   # det = 1e-9
        assert not A.is_singular()
        set_epsilon(1e-8)
        assert A.is_singular()

    def test_matrix_override_beats_global(self):
        A = Matrix([[1.0, 0.0], [0.0, 1e-9]])
        A.set_error(1e-8)
        assert A.is_singular()
        assert A.epsilon == 1e-8
        A.set_error(None)
        assert not A.is_singular()

    def test_explicit_tol_beats_matrix_override(self):
        A = Matrix([[1.0, 0.0], [0.0, 1e-9]], epsilon=1e-8)
        assert not is_singular(A, tol=1e-10)

    def test_plain_array_uses_context(self):
        A = np.diag([1.0, 1e-9])
        with error_tolerance(1e-8):
            assert is_singular(A)
        assert not is_singular(A)
