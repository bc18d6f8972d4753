#!/usr/bin/env python3
import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np


def random_simplex_points(count: int, S: int, rng: np.random.Generator) -> np.ndarray:
    return rng.dirichlet(np.ones(S), size=count)


def generate_instance(num_new: int, num_planes: int, S: int, seed: Optional[int] = None) -> Dict[str, Any]:
    """Random hyperplanes with values in [0, 1) plus the simplex corners valued by the best plane."""
    rng = np.random.default_rng(seed)
    new_planes = rng.uniform(0.0, 1.0, size=(num_new, S))
    planes = rng.uniform(0.0, 1.0, size=(num_planes, S))
    corners = np.eye(S)
    corner_values = (planes @ corners.T).max(axis=0)
    return {
        "S": S,
        "new_hyperplanes": new_planes.tolist(),
        "hyperplanes": planes.tolist(),
        "known": [
            {"point": corner.tolist(), "value": float(value)}
            for corner, value in zip(corners, corner_values)
        ],
        "queries": random_simplex_points(4, S, rng).tolist(),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random value-function geometry instances.")
    parser.add_argument("--new", type=int, default=2, help="Number of new hyperplanes")
    parser.add_argument("--planes", type=int, default=4, help="Number of existing hyperplanes")
    parser.add_argument("--states", type=int, default=3, help="Simplex dimension S")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_instance(args.new, args.planes, args.states, (args.seed or 0) + idx)
        for idx in range(args.count)
    ]

    if args.out:
        Path(args.out).write_text(json.dumps(instances, indent=2))
    else:
        print(json.dumps(instances, indent=2))


if __name__ == "__main__":
    main()
