"""Common ring validation utilities.

Ring checks shared by the repair pass and the tests that assert the
closure and non-degeneracy invariants of split results.
"""

import numpy as np


def is_ring_closed(coords: np.ndarray) -> bool:
    """Check if coordinate ring is closed (first == last).

    Comparison is exact: a repaired ring repeats its first point verbatim.

    Args:
        coords: Coordinate array (Nx2 or Nx3)

    Returns:
        True if ring is closed

    Examples:
        >>> coords = np.array([[0, 0], [1, 0], [1, 1], [0, 0]])
        >>> is_ring_closed(coords)
        True

        >>> coords = np.array([[0, 0], [1, 0], [1, 1]])
        >>> is_ring_closed(coords)
        False
    """
    if len(coords) < 2:
        return False

    return bool(np.array_equal(coords[0], coords[-1]))


def ensure_ring_closed(coords: np.ndarray) -> np.ndarray:
    """Ensure coordinate ring is closed by appending first point if needed.

    Always returns a new array.

    Examples:
        >>> closed = ensure_ring_closed(np.array([[0, 0], [1, 0], [1, 1]]))
        >>> len(closed)
        4
    """
    if len(coords) and not is_ring_closed(coords):
        return np.vstack([coords, coords[0:1]])

    return np.array(coords, copy=True)


def count_distinct_vertices(coords: np.ndarray) -> int:
    """Count the distinct vertices of a ring, ignoring the closing duplicate.

    Examples:
        >>> count_distinct_vertices(np.array([[0, 0], [1, 0], [0, 0]]))
        2
    """
    if len(coords) == 0:
        return 0
    return len(np.unique(coords, axis=0))


__all__ = [
    'is_ring_closed',
    'ensure_ring_closed',
    'count_distinct_vertices',
]
