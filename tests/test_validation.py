"""Tests for input validation.

Assert both exception type and message fragment for error tests.
"""

import numpy as np
import pytest

from exact_hv.validation import as_point_set, as_reference_point


class TestAsReferencePoint:
    """Tests for as_reference_point."""

    def test_converts_list_to_float64(self) -> None:
        ref = as_reference_point([1, 2, 3])
        assert ref.dtype == np.float64
        np.testing.assert_array_equal(ref, [1.0, 2.0, 3.0])

    def test_single_objective(self) -> None:
        assert as_reference_point([1.0]).shape == (1,)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one dimension"):
            as_reference_point([])

    def test_scalar_raises(self) -> None:
        with pytest.raises(ValueError, match="must be 1D"):
            as_reference_point(1.0)

    def test_2d_raises(self) -> None:
        with pytest.raises(ValueError, match="must be 1D"):
            as_reference_point(np.ones((2, 2)))

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN"):
            as_reference_point([1.0, np.nan])

    def test_infinite_raises(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            as_reference_point([np.inf, 1.0])


class TestAsPointSet:
    """Tests for as_point_set."""

    def test_converts_nested_lists(self) -> None:
        pts = as_point_set([[1, 2], [3, 4]], 2)
        assert pts.dtype == np.float64
        assert pts.shape == (2, 2)

    def test_empty_list_takes_reference_dimension(self) -> None:
        assert as_point_set([], 4).shape == (0, 4)

    def test_empty_array_takes_reference_dimension(self) -> None:
        assert as_point_set(np.empty((0, 2)), 2).shape == (0, 2)

    def test_dimension_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="expected 3"):
            as_point_set([[0.1, 0.2]], 3)

    def test_1d_raises(self) -> None:
        with pytest.raises(ValueError, match="points must be 2D"):
            as_point_set([0.1, 0.2], 2)

    def test_3d_raises(self) -> None:
        with pytest.raises(ValueError, match="points must be 2D"):
            as_point_set(np.ones((2, 2, 2)), 2)

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="NaN"):
            as_point_set([[0.1, np.nan]], 2)

    def test_ragged_raises(self) -> None:
        with pytest.raises(ValueError):
            as_point_set([[0.1, 0.2], [0.3]], 2)

    def test_infinite_coordinate_raises(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            as_point_set([[-np.inf, 0.5]], 2)

    def test_zero_width_points_raise(self) -> None:
        """Points without coordinates are a dimension mismatch, not an empty set."""
        with pytest.raises(ValueError, match="points have 0 objectives, expected 2"):
            as_point_set([[], [], []], 2)
