import logging

import numpy as np
from typing import Dict, Tuple, Any, List, Optional, Set

from .utils import build_standard_form
from ..schemas import LPModel, SolveOptions, LPSolution

logger = logging.getLogger(__name__)


def simplex_solve(model: LPModel, opts: Optional[SolveOptions] = None) -> LPSolution:
    """
    Revised primal simplex with Phase I/II and a Bland fallback against cycling.
    Meant for the small dense LPs built by the polytope routines.
    """

    opts = opts or SolveOptions()
    try:
        A, b, c, meta, basis = build_standard_form(model)
    except ValueError as exc:
        return _failure("infeasible", 0, str(exc))

    iterations = 0
    use_bland = opts.pivot_rule == "bland"

    artificial = set(meta["artificial_indices"])
    if artificial:
        c_phase1 = np.zeros_like(c)
        c_phase1[list(artificial)] = -1.0  # maximise => drives artificials to zero
        phase1 = _run_simplex(A, b, c_phase1, basis, opts, use_bland, opts.max_iters, None)
        iterations += phase1["iterations"]
        if phase1["status"] == "iteration_limit":
            logger.warning("LP '%s' hit the iteration limit in Phase I", model.name)
            return _failure("iteration_limit", iterations, "Hit iteration limit in Phase I.")
        if phase1["status"] != "optimal" or phase1["x"][list(artificial)].sum() > opts.tol:
            return _failure("infeasible", iterations, "Infeasible.")
        basis = phase1["basis"]

    remaining = max(opts.max_iters - iterations, 1)
    phase2 = _run_simplex(A, b, c, basis, opts, use_bland, remaining, artificial)
    iterations += phase2["iterations"]

    if phase2["status"] == "iteration_limit":
        logger.warning("LP '%s' hit the iteration limit in Phase II", model.name)
        return _failure("iteration_limit", iterations, "Hit iteration limit in Phase II.")
    if phase2["status"] == "unbounded":
        return _failure("unbounded", iterations, "Unbounded.")

    x = meta["expand"] @ phase2["x"][: meta["n_structural"]] + meta["offsets"]
    x[np.abs(x) < 1e-12] = 0.0

    objective = phase2["objective"] if model.sense == "max" else -phase2["objective"]
    objective += meta["objective_constant"]

    logger.debug("LP '%s' solved in %d iterations, objective %g", model.name, iterations, objective)
    return LPSolution(
        status="optimal",
        objective_value=float(objective),
        x=[float(v) for v in x],
        iterations=iterations,
        message="",
    )


def _failure(status: str, iterations: int, message: str) -> LPSolution:
    return LPSolution(
        status=status,
        objective_value=None,
        x=None,
        iterations=iterations,
        message=message,
    )


def _solve_basis(B: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    try:
        return np.linalg.solve(B, rhs)
    except np.linalg.LinAlgError:
        return np.linalg.lstsq(B, rhs, rcond=None)[0]


def _run_simplex(
    A: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    basis: List[int],
    opts: SolveOptions,
    use_bland: bool,
    max_iterations: int,
    forbidden: Optional[Set[int]],
) -> Dict[str, Any]:
    basis = list(basis)
    forbidden = set() if forbidden is None else set(forbidden)
    tol = opts.tol
    m, n = A.shape
    iterations = 0
    degenerate_streak = 0
    max_iterations = max(max_iterations, 1)

    if m == 0:
        # No rows: any improving column can grow forever.
        free_gain = [j for j in range(n) if j not in forbidden and c[j] > tol]
        return {
            "status": "unbounded" if free_gain else "optimal",
            "basis": basis,
            "iterations": 0,
            "x": np.zeros(n),
            "objective": 0.0,
        }

    while True:
        B = A[:, basis]
        xB = _solve_basis(B, b)
        xB[np.abs(xB) < tol] = 0.0
        xB = np.maximum(xB, 0.0)

        y = _solve_basis(B.T, c[basis])
        reduced = c - A.T @ y
        reduced[basis] = 0.0
        if forbidden:
            reduced[list(forbidden)] = 0.0

        candidates = np.flatnonzero(reduced > tol)
        if candidates.size == 0:
            x = np.zeros(n)
            x[basis] = xB
            return {
                "status": "optimal",
                "basis": basis,
                "iterations": iterations,
                "x": x,
                "objective": float(c[basis] @ xB),
            }

        if iterations >= max_iterations:
            return {
                "status": "iteration_limit",
                "basis": basis,
                "iterations": iterations,
                "x": np.zeros(n),
                "objective": float(c[basis] @ xB),
            }

        bland = use_bland or degenerate_streak >= opts.bland_after
        if bland:
            entering = int(candidates[0])
        else:
            entering = int(candidates[np.argmax(reduced[candidates])])

        d = _solve_basis(B, A[:, entering])
        d[np.abs(d) < tol] = 0.0
        rows = np.flatnonzero(d > tol)
        if rows.size == 0:
            return {
                "status": "unbounded",
                "basis": basis,
                "iterations": iterations,
                "x": np.zeros(n),
                "objective": np.inf,
            }

        ratios: List[Tuple[float, int, int]] = [(xB[r] / d[r], basis[r], int(r)) for r in rows]
        if bland:
            theta, _, pivot_row = min(ratios)
        else:
            theta, _, pivot_row = min(ratios, key=lambda item: item[0])

        degenerate_streak = degenerate_streak + 1 if theta <= tol else 0
        basis[pivot_row] = entering
        iterations += 1
