from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from ..exceptions import DuplicateIdError
from .geo import pairwise_distances_km
from .graph import GeoGraph
from .types import PointOfInterest

logger = logging.getLogger(__name__)

DEFAULT_MAX_EDGE_DISTANCE_KM = 5.0
PREFILTER_SLACK = 1e-9


class ProximityGraphBuilder:
    """Connect every pair of POIs lying within a distance threshold."""

    def __init__(self, max_edge_distance_km: float = DEFAULT_MAX_EDGE_DISTANCE_KM) -> None:
        self.max_edge_distance_km = float(max_edge_distance_km)

    def build(self, pois: Sequence[PointOfInterest], max_edge_distance_km: Optional[float] = None) -> GeoGraph:
        threshold = self.max_edge_distance_km if max_edge_distance_km is None else float(max_edge_distance_km)
        graph = GeoGraph()

        for poi in pois:
            if poi.id in graph:
                raise DuplicateIdError(f"Point of interest id {poi.id!r} appears more than once.")
            graph.add_node(poi.id, poi)

        if len(pois) > 1:
            distances = pairwise_distances_km(np.array([poi.coords for poi in pois], dtype=float))
            # matrix entries can differ from distance_km in the last ulp; edges take the scalar value
            candidates = distances <= threshold * (1.0 + PREFILTER_SLACK) + PREFILTER_SLACK
            rows, cols = np.nonzero(np.triu(candidates, k=1))
            for row, col in zip(rows.tolist(), cols.tolist()):
                weight = GeoGraph.distance_km(pois[row], pois[col])
                if weight <= threshold:
                    graph.add_edge(pois[row].id, pois[col].id, weight)

        logger.debug(
            "Built proximity graph with %d nodes and %d edges (threshold %.3f km)",
            len(graph),
            graph.edge_count,
            threshold,
        )
        return graph


def build_graph(
    pois: Sequence[PointOfInterest],
    *,
    max_edge_distance_km: float = DEFAULT_MAX_EDGE_DISTANCE_KM,
) -> GeoGraph:
    """Create a proximity graph from POIs."""
    return ProximityGraphBuilder(max_edge_distance_km).build(pois)
