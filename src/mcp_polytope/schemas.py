from pydantic import BaseModel, Field
from typing import Literal, List, Optional, Sequence

Sense = Literal["min", "max"]
Cmp = Literal["<=", ">=", "=="]


class Variable(BaseModel):
    name: str
    lb: float | None = 0.0
    ub: float | None = None


class Constraint(BaseModel):
    name: str
    coefs: List[float]
    cmp: Cmp
    rhs: float


class LPModel(BaseModel):
    """Dense LP: one coefficient per variable in the objective and in every row."""

    name: str = "problem"
    sense: Sense = "max"
    objective: List[float]
    variables: List[Variable]
    constraints: List[Constraint] = Field(default_factory=list)

    @classmethod
    def with_variables(cls, count: int, name: str = "problem", sense: Sense = "max") -> "LPModel":
        return cls(
            name=name,
            sense=sense,
            objective=[0.0] * count,
            variables=[Variable(name=f"x{i}") for i in range(count)],
        )

    @property
    def num_vars(self) -> int:
        return len(self.variables)

    def set_objective(self, coefs: Sequence[float], maximize: bool = True) -> None:
        self.objective = [float(v) for v in coefs]
        self.sense = "max" if maximize else "min"

    def set_unbounded(self, index: int) -> None:
        self.variables[index].lb = None
        self.variables[index].ub = None

    def set_bounds(self, index: int, lb: float | None, ub: float | None) -> None:
        self.variables[index].lb = lb
        self.variables[index].ub = ub

    def add_constraint(self, coefs: Sequence[float], cmp: Cmp, rhs: float, name: str | None = None) -> Constraint:
        cons = Constraint(
            name=name or f"c{len(self.constraints)}",
            coefs=[float(v) for v in coefs],
            cmp=cmp,
            rhs=float(rhs),
        )
        self.constraints.append(cons)
        return cons


class SolveOptions(BaseModel):
    max_iters: int = 10_000
    tol: float = 1e-9
    pivot_rule: Literal["dantzig", "bland"] = "dantzig"
    # Switch to Bland's rule after this many consecutive degenerate pivots.
    bland_after: int = 50


class LPSolution(BaseModel):
    status: Literal["optimal", "infeasible", "unbounded", "iteration_limit"]
    objective_value: Optional[float]
    x: List[float] | None
    iterations: int
    message: str = ""

    @property
    def success(self) -> bool:
        return self.status == "optimal"


class VertexOptions(BaseModel):
    # Slack allowed outside [0, 1] when filtering vertex coordinates; accepted
    # points are clipped back into the simplex. 0 means exact bounds.
    tol: float = Field(default=1e-9, ge=0.0)


class PointValue(BaseModel):
    point: List[float]
    value: float


class Vertex(BaseModel):
    point: List[float]
    value: float
