import logging

import numpy as np
from typing import Iterable, List, Optional, Sequence, Tuple

from .combinatorics import SubsetEnumerator
from ..schemas import VertexOptions

logger = logging.getLogger(__name__)

VertexPair = Tuple[np.ndarray, float]


def _solve_square(A: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    try:
        return np.linalg.solve(A, rhs)
    except np.linalg.LinAlgError:
        return np.linalg.lstsq(A, rhs, rcond=None)[0]


def as_hyperplanes(planes: Iterable[Sequence[float]], S: Optional[int] = None) -> np.ndarray:
    """Stack hyperplanes into a (count, S) float array, checking their dimension."""
    arr = np.asarray(list(planes), dtype=float)
    if arr.size == 0:
        return arr.reshape(0, S or 0)
    if arr.ndim != 2:
        raise ValueError("Hyperplanes must be a sequence of equally sized vectors.")
    if S is not None and arr.shape[1] != S:
        raise ValueError(f"Hyperplanes have dimension {arr.shape[1]}, expected {S}.")
    return arr


def find_vertices_naive(
    new_hyperplanes: Iterable[Sequence[float]],
    hyperplanes: Iterable[Sequence[float]],
    opts: Optional[VertexOptions] = None,
) -> List[VertexPair]:
    """
    Naive vertex enumeration.

    Every plane in ``new_hyperplanes`` is joined with S-1 constraints picked
    from ``hyperplanes`` and from the simplex boundaries (coordinate i == 0),
    and the resulting square system is solved for the point and its value.
    At least one constraint always comes from ``hyperplanes``: subsets made
    only of boundaries would give the simplex corners, which are assumed to
    be known already.

    The result is not pruned, so the same vertex may show up several times
    when more than S planes meet there. Each value is the value of the new
    plane at the vertex, which may not be the true value once all planes are
    considered together.

    Returns a list of (point, value) pairs.
    """
    opts = opts or VertexOptions()
    vertices: List[VertexPair] = []

    alphas = as_hyperplanes(hyperplanes)
    n_alphas = alphas.shape[0]
    if n_alphas == 0:
        return vertices
    S = alphas.shape[1]
    news = as_hyperplanes(new_hyperplanes, S)

    # Indices below n_alphas pick a plane, the S above pick a boundary.
    enumerator = SubsetEnumerator(S - 1, 0, n_alphas + S)

    # Columns 0..S-1 are the point coordinates, column S the value.
    m = np.zeros((S + 1, S + 1))
    m[0, S] = -1.0
    b = np.zeros(S + 1)
    lo, hi = -opts.tol, 1.0 + opts.tol

    for plane in news:
        m[0, :S] = plane
        enumerator.reset()

        last = 0
        while enumerator.is_valid():
            free = np.ones(S + 1, dtype=bool)
            counter = 1
            # Plane indices always form a prefix of the sorted subset, so the
            # rows for positions before `last` are still in place.
            for pos, index in enumerate(enumerator.current):
                if index < n_alphas:
                    if pos >= last:
                        m[counter, :S] = alphas[index]
                        m[counter, S] = -1.0
                    counter += 1
                else:
                    free[index - n_alphas] = False

            # All boundaries merge into a single "free coordinates sum to 1" row.
            m[counter, :S] = free[:S]
            m[counter, S] = 0.0
            b.fill(0.0)
            b[counter] = 1.0
            counter += 1

            cols = np.flatnonzero(free)
            result = np.zeros(S + 1)
            result[cols] = _solve_square(m[:counter][:, cols], b[:counter])

            point = result[:S]
            if np.all((point >= lo) & (point <= hi)):
                if opts.tol > 0.0:
                    point = np.clip(point, 0.0, 1.0)
                vertices.append((point, float(result[S])))

            last = enumerator.advance()
            # Once the smallest index is a boundary, only boundaries are left.
            # Deliberately not enumerator[last] >= n_alphas: that test would also
            # cut the subsets mixing planes with boundaries.
            if enumerator.is_valid() and enumerator[0] >= n_alphas:
                break

    logger.debug(
        "Found %d vertices for %d new planes against %d planes (S=%d)",
        len(vertices), news.shape[0], n_alphas, S,
    )
    return vertices
