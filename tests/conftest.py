"""Shared test fixtures for exact-hv tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- regression_cases: Hand-computed hypervolumes loaded from tests/data
- random_points: Factory for random point sets inside the unit box
"""

import re
from pathlib import Path

import numpy as np
import pytest

DATA_DIR = Path(__file__).parent / "data"

_BRACKETED = re.compile(r"\[([^\[\]]*)\]")


def _parse_point(text: str) -> list[float]:
    return [float(coordinate) for coordinate in text.split(",")]


def load_cases(path: Path) -> list[tuple[np.ndarray, np.ndarray, float]]:
    """Load regression cases, one per line: points, reference point, hypervolume.

    Points and the reference point are bracketed comma-separated lists without
    spaces, e.g. ``[[0.3,0.5],[0.6,0.2]] [1.0,1.0] 0.47``. Blank lines and lines
    starting with '#' are skipped.
    """
    cases = []
    for line in path.read_text().splitlines():
        if not line.strip() or line.startswith("#"):
            continue

        points_text, ref_text, hv_text = line.split()
        ref = np.array(_parse_point(ref_text[1:-1]))
        points = [_parse_point(inner) for inner in _BRACKETED.findall(points_text) if inner]
        pts = np.array(points, dtype=np.float64).reshape(len(points), ref.shape[0])

        cases.append((pts, ref, float(hv_text)))
    return cases


REGRESSION_CASES = load_cases(DATA_DIR / "hypervolumes.txt")


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=REGRESSION_CASES, ids=lambda case: f"{case[0].shape[0]}pts-{case[1].shape[0]}d")
def regression_case(request) -> tuple[np.ndarray, np.ndarray, float]:
    """One hand-computed (points, reference_point, hypervolume) case."""
    return request.param


@pytest.fixture
def random_points(rng: np.random.Generator):
    """Factory for random point sets in [0, 1) with reference point 1.1 * ones.

    Returns a function (n_points, n_obj) -> (points, reference_point).
    """

    def make(n_points: int, n_obj: int) -> tuple[np.ndarray, np.ndarray]:
        points = rng.uniform(0, 1, size=(n_points, n_obj))
        return points, np.full(n_obj, 1.1)

    return make
