"""Geometry of piecewise-linear convex value functions, served over MCP."""

from .polytope import (
    OptimisticBoundError,
    SubsetEnumerator,
    compute_optimistic_hyperplane,
    compute_optimistic_value,
    find_vertices_naive,
)

__all__ = [
    "OptimisticBoundError",
    "SubsetEnumerator",
    "compute_optimistic_hyperplane",
    "compute_optimistic_value",
    "find_vertices_naive",
]
