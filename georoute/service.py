from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .config import RoutingConfig
from .routing.route import route_with_graph
from .routing.types import PathResult
from .routing.visualization import visualize_route
from .schemas import RouteRequest, RouteResponse

logger = logging.getLogger(__name__)


@dataclass
class RoutePlan:
    summary: Dict[str, object]
    result: PathResult
    visualization: Dict[str, object]

    def to_response(self) -> RouteResponse:
        return RouteResponse.from_result(self.result, summary=self.summary, visualization=self.visualization)


class RouteService:
    """Turns validated route requests into route plans ready for the map layer."""

    def __init__(self, config: Optional[RoutingConfig] = None) -> None:
        self.config = config or RoutingConfig()

    def plan(self, request: RouteRequest) -> RoutePlan:
        threshold = request.max_edge_distance_km or self.config.max_edge_distance_km
        pois = [model.to_poi() for model in request.pois]

        graph, result = route_with_graph(pois, request.start_id, request.end_id, threshold)
        visualization = visualize_route(graph, result, points_per_leg=self.config.points_per_leg)

        summary = {
            "start_id": request.start_id,
            "end_id": request.end_id,
            "num_pois": len(pois),
            "num_stops": len(result.path),
            "total_distance_km": float(result.total_distance_km) if result.reachable else None,
            "reachable": result.reachable,
            "max_edge_distance_km": threshold,
        }
        logger.info(
            "Planned route %r -> %r over %d POIs (reachable=%s)",
            request.start_id,
            request.end_id,
            len(pois),
            result.reachable,
        )
        return RoutePlan(summary=summary, result=result, visualization=visualization)
