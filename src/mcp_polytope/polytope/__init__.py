"""Vertex enumeration and optimistic bounds for piecewise-linear convex value functions."""

from .combinatorics import SubsetEnumerator
from .vertices import find_vertices_naive
from .optimistic import OptimisticBoundError, compute_optimistic_hyperplane, compute_optimistic_value

__all__ = [
    "SubsetEnumerator",
    "find_vertices_naive",
    "OptimisticBoundError",
    "compute_optimistic_hyperplane",
    "compute_optimistic_value",
]
