"""Weighting helpers for scoring grid cells against their data sources."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Generic, TypeVar

import numpy as np

T = TypeVar("T")

_TOLERANCE = 1e-6


@dataclass(frozen=True)
class MinmaxBounds(Generic[T]):
    """Inclusive lower and upper bound of a measured quantity."""

    min: T
    max: T


def _power_method(matrix: np.ndarray, start: np.ndarray) -> tuple[float, ...]:
    """Approximate the dominant eigenvector of ``matrix``, normalised to sum to one."""
    vector = start.astype(float)
    previous = vector.copy()
    while True:
        product = matrix @ vector
        vector = product / np.linalg.norm(product)
        if np.all(np.abs(vector - previous) <= _TOLERANCE):
            break
        previous = vector.copy()
    normalised = vector * (1.0 / vector.sum())
    return tuple(float(value) for value in normalised)


@lru_cache(maxsize=None)
def judweight_vessel() -> tuple[float, ...]:
    """Judgement weights for the six vessel criteria."""
    a12, a13, a14, a15, a16 = 2.0, 5.0, 1.0, 3.0, 2.0
    a23, a24, a25, a26 = 3.0, 1.0 / 2.0, 2.0, 2.0
    a34, a35, a36 = 1.0 / 3.0, 1.0, 1.0
    a45, a46 = 1.0 / 3.0, 1.0 / 3.0
    a56 = 2.0
    matrix = np.array(
        [
            [1.0, a12, a13, a14, a15, a16],
            [1.0 / a12, 1.0, a23, a24, a25, a26],
            [1.0 / a13, 1.0 / a23, 1.0, a34, a35, a36],
            [1.0 / a14, 1.0 / a24, 1.0 / a34, 1.0, a45, a46],
            [1.0 / a15, 1.0 / a25, 1.0 / a35, 1.0 / a45, 1.0, a56],
            [1.0 / a16, 1.0 / a26, 1.0 / a36, 1.0 / a46, 1.0 / a56, 1.0],
        ]
    )
    return _power_method(matrix, np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0]))


@lru_cache(maxsize=None)
def judweight_depth() -> tuple[float, ...]:
    """Judgement weights for depth source versus depth survey age."""
    a12 = 3.0
    matrix = np.array([[1.0, a12], [1.0 / a12, 1.0]])
    return _power_method(matrix, np.array([0.0, 1.0]))


def relative_to_bounds(bounds: MinmaxBounds, num):
    """Position of ``num`` within ``bounds``, where 0 is the minimum and 1 the maximum."""
    return (num - bounds.min) / (bounds.max - bounds.min)


def add(left: int, right: int) -> int:
    """Sum of two integers."""
    return left + right