import numpy as np
from typing import Dict, Tuple, List, Any

from ..schemas import LPModel


def build_standard_form(model: LPModel) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any], List[int]]:
    """
    Convert a dense LP to standard form Ax = b, x >= 0 with slacks/artificial vars.
    Return A, b, c (always to be maximised), metadata and the initial basis indices.
    """

    n_vars = model.num_vars
    if len(model.objective) != n_vars:
        raise ValueError(
            f"Objective has {len(model.objective)} coefficients, expected {n_vars}."
        )

    col_types: List[str] = []
    # Each original variable maps to a list of (column, sign) plus a constant shift.
    components: List[List[Tuple[int, float]]] = []
    offsets = np.zeros(n_vars)
    rows: List[Tuple[str, np.ndarray, str, float]] = []

    def add_column(col_type: str) -> int:
        col_types.append(col_type)
        return len(col_types) - 1

    for i, var in enumerate(model.variables):
        lb, ub = var.lb, var.ub
        if lb is not None and np.isneginf(lb):
            lb = None
        if ub is not None and np.isposinf(ub):
            ub = None
        if lb is not None and ub is not None and lb > ub:
            raise ValueError(f"Variable {var.name} has inconsistent bounds (lb {lb} > ub {ub}).")

        if lb is None:
            # Free variable -> difference of two non-negative columns
            components.append([(add_column("structural"), 1.0), (add_column("structural"), -1.0)])
        else:
            components.append([(add_column("structural"), 1.0)])
            offsets[i] = lb

        if ub is not None:
            unit = np.zeros(n_vars)
            unit[i] = 1.0
            rows.append((f"bound_{var.name}_ub", unit, "<=", float(ub)))

    for cons in model.constraints:
        if len(cons.coefs) != n_vars:
            raise ValueError(
                f"Constraint '{cons.name}' has {len(cons.coefs)} coefficients, expected {n_vars}."
            )
        rows.append((cons.name, np.asarray(cons.coefs, dtype=float), cons.cmp, cons.rhs))

    n_struct = len(col_types)
    # Expansion matrix: original variable values = E @ x_struct + offsets
    expand = np.zeros((n_vars, n_struct))
    for i, comps in enumerate(components):
        for idx, sign in comps:
            expand[i, idx] = sign

    std_rows: List[np.ndarray] = []
    rhs_values: List[float] = []
    cmps: List[str] = []
    row_names: List[str] = []
    for name, coefs, cmp, rhs in rows:
        row = coefs @ expand
        rhs_value = rhs - float(coefs @ offsets)
        if rhs_value < 0:
            row = -row
            rhs_value = -rhs_value
            cmp = {"<=": ">=", ">=": "<="}.get(cmp, cmp)
        if abs(rhs_value) <= 1e-12:
            rhs_value = 0.0
        std_rows.append(row)
        rhs_values.append(rhs_value)
        cmps.append(cmp)
        row_names.append(name)

    basis: List[int] = []
    extra: List[Tuple[int, int, float]] = []  # (row, column, coefficient)
    slack_indices: List[int] = []
    artificial_indices: List[int] = []
    for r, cmp in enumerate(cmps):
        if cmp == "<=":
            idx = add_column("slack")
            extra.append((r, idx, 1.0))
            basis.append(idx)
            slack_indices.append(idx)
        else:
            if cmp == ">=":
                extra.append((r, add_column("surplus"), -1.0))
            idx = add_column("artificial")
            extra.append((r, idx, 1.0))
            basis.append(idx)
            artificial_indices.append(idx)

    n_cols = len(col_types)
    A = np.zeros((len(std_rows), n_cols))
    for r, row in enumerate(std_rows):
        A[r, :n_struct] = row
    for r, idx, coef in extra:
        A[r, idx] = coef
    b = np.array(rhs_values, dtype=float)

    objective = np.asarray(model.objective, dtype=float)
    c = np.zeros(n_cols)
    c[:n_struct] = objective @ expand
    if model.sense == "min":
        c = -c

    metadata: Dict[str, Any] = {
        "col_types": col_types,
        "expand": expand,
        "offsets": offsets,
        "objective_constant": float(objective @ offsets),
        "constraint_names": row_names,
        "slack_indices": slack_indices,
        "artificial_indices": artificial_indices,
        "n_structural": n_struct,
    }

    return A, b, c, metadata, basis
