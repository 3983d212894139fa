"""Unit tests for gradient descent and its step-size schedule."""

from __future__ import annotations

import numpy as np
import pytest

from gd_logreg.features.normalization import normalize_with_bias
from gd_logreg.models.logreg.cost import evaluate
from gd_logreg.models.logreg.optimizer import (
    ALPHA_SCALING_ITERATIONS,
    DescentResult,
    DescentState,
    descent_step,
    gradient_descent,
    step_size,
)


@pytest.fixture
def clusters() -> tuple[np.ndarray, np.ndarray]:
    """Two linearly separable 2-D clusters, normalized with a bias column."""
    rng = np.random.default_rng(7)
    pos = rng.normal(loc=(1.0, 1.0), scale=0.3, size=(20, 2))
    neg = rng.normal(loc=(4.0, 4.0), scale=0.3, size=(20, 2))
    mX = np.vstack([pos, neg])
    vY = np.concatenate([np.ones(20), np.zeros(20)])
    norm_X, _, _ = normalize_with_bias(mX, mX)
    return norm_X, vY


class TestStepSize:
    def test_constant_before_first_period(self) -> None:
        assert step_size(1, 0.2) == 0.2
        assert step_size(49, 0.2) == 0.2

    def test_halved_from_iteration_fifty(self) -> None:
        assert step_size(50, 0.2) == 0.2 / 2.0
        assert step_size(51, 0.2) == 0.2 / 2.0

    def test_quartered_from_iteration_hundred(self) -> None:
        assert step_size(100, 0.2) == 0.2 / 4.0
        assert step_size(101, 0.2) == 0.2 / 4.0


class TestDescentStep:
    def test_returns_new_state(self) -> None:
        state = DescentState(theta=np.array([1.0, 1.0]), alpha=0.5)

        nxt = descent_step(state, 1, np.array([0.2, -0.4]))

        np.testing.assert_allclose(nxt.theta, [0.9, 1.2])
        assert nxt.alpha == 0.5
        np.testing.assert_array_equal(state.theta, [1.0, 1.0])

    def test_decays_before_update_on_period_boundary(self) -> None:
        state = DescentState(theta=np.array([0.0]), alpha=0.4)

        nxt = descent_step(state, ALPHA_SCALING_ITERATIONS, np.array([1.0]))

        assert nxt.alpha == 0.2
        np.testing.assert_allclose(nxt.theta, [-0.2])


class TestGradientDescent:
    def test_first_update_follows_gradient(self, clusters) -> None:
        mX, vY = clusters
        theta0 = np.full(mX.shape[1], 0.5)
        _, grad = evaluate(mX, vY, theta0, 0.1)

        result = gradient_descent(mX, vY, theta0, alpha=0.2, reg_lambda=0.1, num_iterations=1)

        assert isinstance(result, DescentResult)
        np.testing.assert_allclose(result.theta, theta0 - 0.2 * grad)

    def test_cost_is_non_increasing(self, clusters) -> None:
        mX, vY = clusters

        result = gradient_descent(
            mX, vY, np.full(mX.shape[1], 0.5), alpha=0.1, reg_lambda=0.1, num_iterations=200
        )

        assert len(result.costs) == 200
        assert np.all(np.diff(result.costs) <= 1e-12)

    def test_more_iterations_reach_lower_cost(self, clusters) -> None:
        mX, vY = clusters
        theta0 = np.full(mX.shape[1], 0.5)

        final_costs = [
            evaluate(
                mX,
                vY,
                gradient_descent(mX, vY, theta0, alpha=0.1, num_iterations=n).theta,
                0.1,
            ).cost
            for n in (10, 50, 150)
        ]

        assert final_costs[0] >= final_costs[1] >= final_costs[2]

    def test_step_sizes_follow_decay_schedule(self, clusters) -> None:
        mX, vY = clusters

        result = gradient_descent(mX, vY, np.zeros(mX.shape[1]), alpha=0.2, num_iterations=120)

        assert result.step_sizes[48] == 0.2  # iteration 49
        assert result.step_sizes[50] == 0.2 / 2.0  # iteration 51
        assert result.step_sizes[100] == 0.2 / 4.0  # iteration 101
        assert result.step_sizes == [step_size(t, 0.2) for t in range(1, 121)]

    def test_zero_iterations_returns_initial_theta(self, clusters) -> None:
        mX, vY = clusters
        theta0 = np.array([0.5, -1.0, 2.0])

        result = gradient_descent(mX, vY, theta0, num_iterations=0)

        np.testing.assert_array_equal(result.theta, theta0)
        assert result.costs == []
        assert result.final_cost is None

    def test_initial_theta_not_mutated(self, clusters) -> None:
        mX, vY = clusters
        theta0 = np.full(mX.shape[1], 0.5)

        gradient_descent(mX, vY, theta0, num_iterations=5)

        np.testing.assert_array_equal(theta0, np.full(mX.shape[1], 0.5))

    def test_negative_iterations_raise(self, clusters) -> None:
        mX, vY = clusters

        with pytest.raises(ValueError):
            gradient_descent(mX, vY, np.zeros(mX.shape[1]), num_iterations=-1)
