from __future__ import annotations

import math
import os
from dataclasses import dataclass

from .routing.builder import DEFAULT_MAX_EDGE_DISTANCE_KM

DEFAULT_POINTS_PER_LEG = 10


@dataclass
class RoutingConfig:
    max_edge_distance_km: float = DEFAULT_MAX_EDGE_DISTANCE_KM
    points_per_leg: int = DEFAULT_POINTS_PER_LEG

    @classmethod
    def from_env(cls) -> "RoutingConfig":
        threshold_value = os.getenv("GEOROUTE_MAX_EDGE_DISTANCE_KM", str(DEFAULT_MAX_EDGE_DISTANCE_KM))
        try:
            max_edge_distance_km = float(threshold_value)
        except ValueError:
            max_edge_distance_km = DEFAULT_MAX_EDGE_DISTANCE_KM
        if not (math.isfinite(max_edge_distance_km) and max_edge_distance_km > 0):
            max_edge_distance_km = DEFAULT_MAX_EDGE_DISTANCE_KM

        points_value = os.getenv("GEOROUTE_POINTS_PER_LEG", str(DEFAULT_POINTS_PER_LEG))
        try:
            points_per_leg = int(points_value)
        except ValueError:
            points_per_leg = DEFAULT_POINTS_PER_LEG
        if points_per_leg < 1:
            points_per_leg = DEFAULT_POINTS_PER_LEG

        return cls(max_edge_distance_km=max_edge_distance_km, points_per_leg=points_per_leg)
