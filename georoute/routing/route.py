from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

from ..exceptions import InvalidInputError
from .builder import DEFAULT_MAX_EDGE_DISTANCE_KM, ProximityGraphBuilder
from .graph import GeoGraph
from .solver import ShortestPathSolver
from .types import NodeId, PathResult, PointOfInterest

logger = logging.getLogger(__name__)


def compute_route(
    pois: Sequence[PointOfInterest],
    start_id: NodeId,
    end_id: NodeId,
    max_edge_distance_km: float = DEFAULT_MAX_EDGE_DISTANCE_KM,
) -> PathResult:
    """Build a proximity graph over ``pois`` and return the shortest start-to-end path.

    An unreachable destination is a normal outcome: the result has an empty
    path and ``UNREACHABLE`` as its distance. Invalid input raises
    :class:`InvalidInputError`; duplicated ids raise :class:`DuplicateIdError`.
    """
    _, result = route_with_graph(pois, start_id, end_id, max_edge_distance_km)
    return result


def route_with_graph(
    pois: Sequence[PointOfInterest],
    start_id: NodeId,
    end_id: NodeId,
    max_edge_distance_km: float = DEFAULT_MAX_EDGE_DISTANCE_KM,
) -> Tuple[GeoGraph, PathResult]:
    """Same as :func:`compute_route` but also hands back the graph the route was found in."""
    _validate(pois, start_id, end_id, max_edge_distance_km)

    graph = ProximityGraphBuilder(max_edge_distance_km).build(pois)
    result = ShortestPathSolver().solve(graph, start_id, end_id)

    if result.reachable:
        logger.debug(
            "Route %r -> %r: %d stops, %.3f km",
            start_id,
            end_id,
            len(result.path),
            result.total_distance_km,
        )
    else:
        logger.debug("Route %r -> %r: unreachable within %.3f km hops", start_id, end_id, max_edge_distance_km)
    return graph, result


def _validate(
    pois: Sequence[PointOfInterest],
    start_id: NodeId,
    end_id: NodeId,
    max_edge_distance_km: float,
) -> None:
    if not pois:
        raise InvalidInputError("At least one point of interest is required.")

    if isinstance(max_edge_distance_km, bool) or not isinstance(max_edge_distance_km, (int, float)):
        raise InvalidInputError(f"max_edge_distance_km must be a number, got {max_edge_distance_km!r}.")
    if not math.isfinite(max_edge_distance_km) or max_edge_distance_km <= 0:
        raise InvalidInputError(f"max_edge_distance_km must be a positive finite number, got {max_edge_distance_km!r}.")

    known_ids = set()
    id_types = set()
    for poi in pois:
        if not (math.isfinite(poi.latitude) and -90.0 <= poi.latitude <= 90.0):
            raise InvalidInputError(f"Point of interest {poi.id!r} has invalid latitude {poi.latitude!r}.")
        if not (math.isfinite(poi.longitude) and -180.0 <= poi.longitude <= 180.0):
            raise InvalidInputError(f"Point of interest {poi.id!r} has invalid longitude {poi.longitude!r}.")
        known_ids.add(poi.id)
        id_types.add(type(poi.id))

    # the solver orders frontier ties by id
    if len(id_types) > 1:
        names = ", ".join(sorted(id_type.__name__ for id_type in id_types))
        raise InvalidInputError(f"Point of interest ids must all share one type, got {names}.")

    for label, node_id in (("start", start_id), ("end", end_id)):
        if node_id not in known_ids:
            raise InvalidInputError(f"The {label} id {node_id!r} is not among the points of interest.")
