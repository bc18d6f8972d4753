#!/usr/bin/env python3
import time

from mcp_polytope.polytope import compute_optimistic_value, find_vertices_naive
from mcp_polytope.schemas import PointValue
from scripts.generate_instances import generate_instance


def main() -> None:
    cases = [(f"S{S}-n{n}", generate_instance(2, n, S, seed)) for seed, (S, n) in enumerate([(2, 4), (3, 8), (4, 12)])]

    print("name,vertices,vertex_ms,bound_ms")
    for name, inst in cases:
        start = time.perf_counter()
        vertices = find_vertices_naive(inst["new_hyperplanes"], inst["hyperplanes"])
        vertex_ms = (time.perf_counter() - start) * 1000

        known = [PointValue.model_validate(pv) for pv in inst["known"]]
        known += [PointValue(point=p.tolist(), value=v) for p, v in vertices]
        start = time.perf_counter()
        for query in inst["queries"]:
            compute_optimistic_value(query, known)
        bound_ms = (time.perf_counter() - start) * 1000
        print(f"{name},{len(vertices)},{vertex_ms:.2f},{bound_ms:.2f}")


if __name__ == "__main__":
    main()
