from __future__ import annotations

from .config import RoutingConfig
from .exceptions import (
    DuplicateIdError,
    GraphContractError,
    InvalidInputError,
    InvalidWeightError,
    RoutingError,
    SelfEdgeError,
    UnknownNodeError,
)
from .routing import (
    UNREACHABLE,
    GeoGraph,
    PathResult,
    PointOfInterest,
    ProximityGraphBuilder,
    ShortestPathSolver,
    compute_route,
    visualize_route,
)
from .service import RoutePlan, RouteService

__all__ = [
    "DuplicateIdError",
    "GeoGraph",
    "GraphContractError",
    "InvalidInputError",
    "InvalidWeightError",
    "PathResult",
    "PointOfInterest",
    "ProximityGraphBuilder",
    "RoutePlan",
    "RouteService",
    "RoutingConfig",
    "RoutingError",
    "SelfEdgeError",
    "ShortestPathSolver",
    "UNREACHABLE",
    "UnknownNodeError",
    "compute_route",
    "visualize_route",
]
