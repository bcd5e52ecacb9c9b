from __future__ import annotations

from typing import Dict, List

from ..exceptions import UnknownNodeError
from .geo import interpolate_points
from .graph import GeoGraph
from .types import Coordinate, PathResult


def visualize_route(graph: GeoGraph, result: PathResult, *, points_per_leg: int = 10) -> Dict[str, object]:
    """Return a JSON-safe structure for drawing the route on a map."""
    nodes_payload: List[Dict[str, object]] = [
        {"id": poi.id, "name": poi.name, "coords": poi.coords} for poi in result.path
    ]

    edges_payload: List[Dict[str, object]] = []
    polyline: List[Coordinate] = [result.path[0].coords] if result.path else []
    for current, nxt in zip(result.path[:-1], result.path[1:]):
        weight = graph.edge_weight(current.id, nxt.id)
        if weight is None:
            raise UnknownNodeError(f"Route hop {current.id!r} -> {nxt.id!r} is not an edge of the graph.")
        edges_payload.append({"from": current.id, "to": nxt.id, "distance": float(weight)})
        # first waypoint of each leg repeats the previous leg's last one
        polyline.extend(interpolate_points(current.coords, nxt.coords, points_per_leg)[1:])

    total = float(result.total_distance_km) if result.reachable else None
    return {
        "nodes": nodes_payload,
        "edges": edges_payload,
        "polyline": polyline,
        "total_distance_km": total,
        "label": format_distance_label(result),
    }


def format_distance_label(result: PathResult) -> str:
    if not result.reachable:
        return "No route found"
    return f"Total distance: {result.total_distance_km:.2f} km"
