from __future__ import annotations

from .builder import DEFAULT_MAX_EDGE_DISTANCE_KM, ProximityGraphBuilder, build_graph
from .geo import EARTH_RADIUS_KM, haversine_km, interpolate_points
from .graph import GeoGraph
from .route import compute_route, route_with_graph
from .solver import ShortestPathSolver, find_shortest_path
from .types import UNREACHABLE, GraphNode, Neighbor, PathResult, PointOfInterest
from .visualization import format_distance_label, visualize_route

__all__ = [
    "DEFAULT_MAX_EDGE_DISTANCE_KM",
    "EARTH_RADIUS_KM",
    "GeoGraph",
    "GraphNode",
    "Neighbor",
    "PathResult",
    "PointOfInterest",
    "ProximityGraphBuilder",
    "ShortestPathSolver",
    "UNREACHABLE",
    "build_graph",
    "compute_route",
    "find_shortest_path",
    "format_distance_label",
    "haversine_km",
    "interpolate_points",
    "route_with_graph",
    "visualize_route",
]
