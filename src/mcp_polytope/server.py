from typing import List

from mcp.server.fastmcp import FastMCP
from .schemas import LPModel, PointValue, SolveOptions, Vertex, VertexOptions
from .lp.simplex import simplex_solve
from .polytope.vertices import find_vertices_naive
from .polytope.optimistic import compute_optimistic_hyperplane

mcp = FastMCP("MCP Polytope")


@mcp.tool()
def find_vertices(
    new_hyperplanes: List[List[float]],
    hyperplanes: List[List[float]],
    options: VertexOptions | None = None,
) -> dict:
    "Enumerate the vertices where each new hyperplane meets the known ones or the simplex boundary."
    vertices = [
        Vertex(point=point.tolist(), value=value)
        for point, value in find_vertices_naive(new_hyperplanes, hyperplanes, options)
    ]
    return {"vertices": [v.model_dump() for v in vertices], "count": len(vertices)}


@mcp.tool()
def optimistic_value(point: List[float], known: List[PointValue], options: SolveOptions | None = None) -> dict:
    "Upper bound on the value at a point given known (point, value) pairs, plus the bounding hyperplane."
    hyperplane, value = compute_optimistic_hyperplane(point, known, options)
    return {"value": value, "hyperplane": hyperplane.tolist()}


@mcp.tool()
def solve_lp(model: LPModel, options: SolveOptions | None = None) -> dict:
    "Solve a dense linear program via primal simplex and return solution dict."
    return simplex_solve(model, options or SolveOptions()).model_dump()


if __name__ == "__main__":
    # Allow: `python -m mcp_polytope.server` (stdio transport)
    mcp.run()
