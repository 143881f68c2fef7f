"""Tests for the two-objective sweep."""

import numpy as np
import pytest

from exact_hv import compute, sweep_2d


class TestSweep2D:
    """Tests for sweep_2d."""

    def test_two_points(self) -> None:
        assert sweep_2d([[0.3, 0.5], [0.6, 0.2]], [1.0, 1.0]) == pytest.approx(0.47)

    def test_dominated_and_on_front_points(self) -> None:
        points = [[0.3, 0.5], [0.6, 0.2], [0.8, 0.7], [0.3, 0.8], [0.9, 0.2]]
        assert sweep_2d(points, [1.0, 1.0]) == pytest.approx(0.47)

    def test_empty_is_zero(self) -> None:
        assert sweep_2d([], [1.0, 1.0]) == 0.0

    def test_tied_first_objective(self) -> None:
        """The worse of two points sharing the first objective adds nothing."""
        assert sweep_2d([[0.3, 0.8], [0.3, 0.5]], [1.0, 1.0]) == pytest.approx(0.35)

    def test_wrong_dimension_raises(self) -> None:
        with pytest.raises(ValueError, match="requires 2 objectives"):
            sweep_2d([[0.5, 0.5, 0.5]], [1.0, 1.0, 1.0])

    def test_point_dimension_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="expected 2"):
            sweep_2d([[0.5, 0.5, 0.5]], [1.0, 1.0])

    def test_empty_reference_point_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one dimension"):
            sweep_2d([], [])


class TestSweepAgreesWithCompute:
    """The sweep and the recursive engine are independent; they must agree."""

    @pytest.mark.parametrize("n_points", [1, 2, 3, 5, 10, 25])
    def test_random_points(self, random_points, n_points: int) -> None:
        points, ref = random_points(n_points, 2)
        assert sweep_2d(points, ref) == pytest.approx(compute(points, ref))

    def test_points_on_a_curve(self) -> None:
        """A convex front where every point is non-dominated."""
        f1 = np.linspace(0.0, 1.0, 15)
        points = np.column_stack([f1, 1.0 - np.sqrt(f1)])
        ref = np.array([1.1, 1.1])
        assert sweep_2d(points, ref) == pytest.approx(compute(points, ref))
