from __future__ import annotations

import heapq
import logging
from typing import Dict, List, Set, Tuple

from ..exceptions import UnknownNodeError
from .graph import GeoGraph
from .types import UNREACHABLE, NodeId, PathResult

logger = logging.getLogger(__name__)


class ShortestPathSolver:
    """Dijkstra's algorithm over a :class:`GeoGraph`.

    The frontier is a binary heap keyed by ``(distance, node_id)`` so that,
    among nodes sharing the minimum tentative distance, the lowest id is
    settled first. Stale heap entries are skipped on pop.
    """

    def solve(self, graph: GeoGraph, start_id: NodeId, end_id: NodeId) -> PathResult:
        for node_id in (start_id, end_id):
            if node_id not in graph:
                raise UnknownNodeError(f"Node {node_id!r} is not in the graph.")

        if start_id == end_id:
            return PathResult(path=(graph.poi(start_id),), total_distance_km=0.0)

        distances: Dict[NodeId, float] = {start_id: 0.0}
        previous: Dict[NodeId, NodeId] = {}
        settled: Set[NodeId] = set()
        frontier: List[Tuple[float, NodeId]] = [(0.0, start_id)]

        while frontier:
            current_distance, current = heapq.heappop(frontier)
            if current in settled or current_distance > distances[current]:
                continue

            settled.add(current)
            if current == end_id:
                break

            for entry in graph.neighbors(current):
                neighbor = entry.neighbor_id
                if neighbor in settled:
                    continue
                candidate = current_distance + entry.weight
                if candidate < distances.get(neighbor, UNREACHABLE):
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(frontier, (candidate, neighbor))

        logger.debug("Dijkstra settled %d of %d nodes", len(settled), len(graph))

        if end_id not in settled:
            return PathResult.unreachable()

        return PathResult(
            path=tuple(graph.poi(node_id) for node_id in self._walk_back(previous, start_id, end_id)),
            total_distance_km=distances[end_id],
        )

    @staticmethod
    def _walk_back(previous: Dict[NodeId, NodeId], start_id: NodeId, end_id: NodeId) -> List[NodeId]:
        sequence = [end_id]
        while sequence[-1] != start_id:
            sequence.append(previous[sequence[-1]])
        sequence.reverse()
        return sequence


def find_shortest_path(graph: GeoGraph, start_id: NodeId, end_id: NodeId) -> PathResult:
    """Compute the least-distance path between two nodes."""
    return ShortestPathSolver().solve(graph, start_id, end_id)
