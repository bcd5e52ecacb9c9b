from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

import networkx as nx
import numpy as np

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from georoute.routing import PointOfInterest, ProximityGraphBuilder, ShortestPathSolver


def synthetic_pois(num_pois: int, seed: int = 42) -> list[PointOfInterest]:
    rng = random.Random(seed)
    # roughly a 30 x 30 km box around La Paz
    return [
        PointOfInterest(
            id=index,
            name=f"POI {index}",
            latitude=-16.50 + rng.uniform(-0.135, 0.135),
            longitude=-68.15 + rng.uniform(-0.14, 0.14),
        )
        for index in range(num_pois)
    ]


def run_benchmark(num_pois: int = 200, max_edge_distance_km: float = 5.0, queries: int = 20, seed: int = 42) -> dict:
    pois = synthetic_pois(num_pois, seed=seed)

    start_build = time.perf_counter()
    graph = ProximityGraphBuilder(max_edge_distance_km).build(pois)
    build_duration = time.perf_counter() - start_build

    reference = graph.to_networkx()
    solver = ShortestPathSolver()
    rng = random.Random(seed + 1)

    solve_times = []
    mismatches = 0
    unreachable = 0
    for _ in range(queries):
        start_id, end_id = rng.sample(range(num_pois), 2)
        start_solve = time.perf_counter()
        result = solver.solve(graph, start_id, end_id)
        solve_times.append(time.perf_counter() - start_solve)

        try:
            expected = nx.dijkstra_path_length(reference, start_id, end_id, weight="distance")
        except nx.NetworkXNoPath:
            expected = None

        if not result.reachable:
            unreachable += 1
            if expected is not None:
                mismatches += 1
        elif expected is None or abs(expected - result.total_distance_km) > 1e-9:
            mismatches += 1

    return {
        "num_pois": num_pois,
        "num_edges": graph.edge_count,
        "build_time_s": build_duration,
        "mean_solve_time_s": float(np.mean(solve_times)),
        "unreachable": unreachable,
        "mismatches": mismatches,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark proximity graph construction and Dijkstra routing.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[100, 250, 500], help="POI counts to benchmark.")
    parser.add_argument("--max-edge-km", type=float, default=5.0, help="Proximity threshold in km.")
    parser.add_argument("--queries", type=int, default=20, help="Random start/end pairs per size.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for synthetic data.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    for size in args.sizes:
        res = run_benchmark(size, args.max_edge_km, args.queries, args.seed)
        logging.info(
            "POIs: %d | edges: %d | build: %.4f s | solve (mean): %.6f s | unreachable: %d | mismatches vs networkx: %d",
            res["num_pois"],
            res["num_edges"],
            res["build_time_s"],
            res["mean_solve_time_s"],
            res["unreachable"],
            res["mismatches"],
        )
        if res["mismatches"]:
            logging.warning("Route distances disagree with networkx for %d queries.", res["mismatches"])


if __name__ == "__main__":
    main()
