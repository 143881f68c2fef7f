"""Two-objective hypervolume by a single sweep.

With points sorted by the first objective, the dominated region splits into
disjoint rectangles: each point adds the slab between its second objective
and the lowest second objective seen so far, extending to the reference
point along the first axis.
"""

from exact_hv.primitives import sort_by_first_coordinate
from exact_hv.validation import as_point_set, as_reference_point


def sweep_2d(points, reference_point) -> float:
    """Compute the hypervolume of a two-objective point set (minimization).

    Dominated, duplicate and on-front points contribute nothing. Points must
    weakly dominate the reference point; others give undefined results.

    Args:
        points: Array-like of shape (n, 2). May be empty.
        reference_point: Array-like of shape (2,).

    Returns:
        Non-negative hypervolume; 0.0 if points is empty.

    Raises:
        ValueError: If the reference point is not two-dimensional, or points
            fail the same checks as in compute.

    Examples:
        >>> sweep_2d([[1.0, 3.0], [2.0, 2.0], [3.0, 1.0]], [4.0, 4.0])
        6.0
    """
    ref = as_reference_point(reference_point)
    if ref.shape[0] != 2:
        raise ValueError(f"sweep_2d requires 2 objectives, got {ref.shape[0]}")

    pts = sort_by_first_coordinate(as_point_set(points, 2))

    volume = 0.0
    lowest = ref[1]
    for x, y in pts:
        if y < lowest:
            volume += (ref[0] - x) * (lowest - y)
            lowest = y

    return float(volume)
