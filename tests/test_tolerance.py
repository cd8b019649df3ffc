"""Tests for the shared float comparison rules."""

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from apsp.graph.tolerance import (
    DEFAULT_EPSILON,
    DEFAULT_TOLERANCE,
    NO_VERTEX,
    UNREACHABLE,
    Tolerance,
)


class TestMarkers:
    """Unreachable and no-vertex markers."""

    def test_unreachable_is_infinite(self) -> None:
        assert math.isinf(UNREACHABLE)
        assert UNREACHABLE > 0

    def test_no_vertex_is_not_an_index(self) -> None:
        assert NO_VERTEX < 0

    def test_default_epsilon(self) -> None:
        assert DEFAULT_EPSILON == 1e-9
        assert DEFAULT_TOLERANCE.epsilon == DEFAULT_EPSILON

    def test_large_weights_stay_reachable(self) -> None:
        """No finite weight can be confused with the unreachable marker."""
        assert Tolerance.is_reachable(1e300)
        assert Tolerance.is_reachable(-1e300)
        assert not Tolerance.is_reachable(UNREACHABLE)


class TestComparisons:
    """Epsilon-tolerant comparisons."""

    def test_is_zero(self) -> None:
        tol = Tolerance(1e-6)
        assert tol.is_zero(0.0)
        assert tol.is_zero(5e-7)
        assert tol.is_zero(-1e-6)
        assert not tol.is_zero(2e-6)

    def test_is_negative_needs_more_than_epsilon(self) -> None:
        tol = Tolerance(1e-6)
        assert not tol.is_negative(-1e-7)
        assert not tol.is_negative(-1e-6)
        assert tol.is_negative(-2e-6)

    def test_isclose(self) -> None:
        tol = Tolerance(0.01)
        assert tol.isclose(1.0, 1.005)
        assert not tol.isclose(1.0, 1.02)
        assert tol.isclose(UNREACHABLE, UNREACHABLE)
        assert not tol.isclose(UNREACHABLE, 1e300)
        assert not tol.isclose(UNREACHABLE, -UNREACHABLE)

    def test_comparisons_are_elementwise_on_arrays(self) -> None:
        tol = Tolerance(1e-6)
        values = np.array([0.0, 5e-7, -2e-6, UNREACHABLE])
        np.testing.assert_array_equal(tol.is_zero(values), [True, True, False, False])
        np.testing.assert_array_equal(tol.is_negative(values), [False, False, True, False])
        np.testing.assert_array_equal(
            tol.isclose(values, np.array([1e-7, 0.0, 0.0, UNREACHABLE])),
            [True, True, False, True],
        )

    def test_relaxation_margin(self) -> None:
        tol = Tolerance(1e-3)
        assert tol.relaxation_margin(early_termination=False) == 0.0
        assert tol.relaxation_margin(early_termination=True) == 1e-3


class TestValidation:
    """Tolerance rejects unusable epsilons."""

    @pytest.mark.parametrize("epsilon", [-1e-9, math.inf, math.nan])
    def test_invalid_epsilon(self, epsilon: float) -> None:
        with pytest.raises(ValueError, match="epsilon"):
            Tolerance(epsilon)

    def test_zero_epsilon_allowed(self) -> None:
        assert Tolerance(0.0).relaxation_margin(True) == 0.0

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_TOLERANCE.epsilon = 1.0  # type: ignore[misc]
