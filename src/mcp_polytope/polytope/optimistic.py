import logging

import numpy as np
from typing import Iterable, Optional, Sequence, Tuple, Union

from ..lp.simplex import simplex_solve
from ..schemas import LPModel, PointValue, SolveOptions

logger = logging.getLogger(__name__)

KnownPair = Union[PointValue, Tuple[Sequence[float], float]]


class OptimisticBoundError(RuntimeError):
    """The optimistic LP did not reach an optimum; the caller's inputs break its assumptions."""


def _unpack(pair: KnownPair) -> Tuple[np.ndarray, float]:
    if isinstance(pair, PointValue):
        return np.asarray(pair.point, dtype=float), pair.value
    point, value = pair
    return np.asarray(point, dtype=float), float(value)


def compute_optimistic_hyperplane(
    point: Sequence[float],
    known: Iterable[KnownPair],
    opts: Optional[SolveOptions] = None,
) -> Tuple[np.ndarray, float]:
    """
    Find the hyperplane that maximises the value at ``point`` while staying
    at or below every known (point, value) pair.

    The LP is

        max   point . h
        s.t.  p_i . h <= v_i     for every known pair (p_i, v_i)
              h free

    The hyperplane may need negative coefficients to fit tightly, so every
    variable is unbounded. With no known pairs the result is the zero plane
    and a value of 0.

    Returns the hyperplane and its value at ``point``.
    """
    p = np.asarray(point, dtype=float)
    if p.ndim != 1:
        raise ValueError("Point must be a one-dimensional vector.")
    S = p.shape[0]
    pairs = [_unpack(pair) for pair in known]
    if not pairs:
        return np.zeros(S), 0.0

    lp = LPModel.with_variables(S, name="optimistic-bound")
    lp.set_objective(p, maximize=True)
    for s in range(S):
        lp.set_unbounded(s)
    for i, (q, value) in enumerate(pairs):
        if q.shape != (S,):
            raise ValueError(f"Known point {i} has shape {q.shape}, expected ({S},).")
        lp.add_constraint(q, "<=", value, name=f"vertex_{i}")

    solution = simplex_solve(lp, opts)
    if not solution.success:
        raise OptimisticBoundError(
            f"Optimistic bound LP ended with status '{solution.status}': {solution.message}"
        )

    logger.debug("Optimistic value %g from %d known pairs", solution.objective_value, len(pairs))
    return np.asarray(solution.x), float(solution.objective_value)


def compute_optimistic_value(
    point: Sequence[float],
    known: Iterable[KnownPair],
    opts: Optional[SolveOptions] = None,
) -> float:
    """Best value ``point`` can have given the known (point, value) pairs around it."""
    return compute_optimistic_hyperplane(point, known, opts)[1]
