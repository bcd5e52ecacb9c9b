from __future__ import annotations

from typing import List

import numpy as np

from ..exceptions import InvalidInputError
from .types import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat_a, lon_a, lat_b, lon_b):
    """Great-circle distance in kilometres; accepts scalars or numpy arrays."""
    lat_a, lon_a, lat_b, lon_b = (np.radians(np.asarray(value, dtype=float)) for value in (lat_a, lon_a, lat_b, lon_b))

    delta_lat = lat_b - lat_a
    delta_lon = lon_b - lon_a

    a = np.sin(delta_lat / 2.0) ** 2 + np.cos(lat_a) * np.cos(lat_b) * np.sin(delta_lon / 2.0) ** 2
    # rounding can push a slightly past 1 near antipodal points
    a = np.clip(a, 0.0, 1.0)
    distance = 2.0 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    if np.ndim(distance) == 0:
        return float(distance)
    return distance


def pairwise_distances_km(coords: np.ndarray) -> np.ndarray:
    """Symmetric n x n matrix of haversine distances for an (n, 2) lat/lon array."""
    coords = np.asarray(coords, dtype=float).reshape(-1, 2)
    lat = coords[:, 0]
    lon = coords[:, 1]
    return haversine_km(lat[:, None], lon[:, None], lat[None, :], lon[None, :])


def interpolate_points(point_a: Coordinate, point_b: Coordinate, num_points: int = 10) -> List[Coordinate]:
    """Evenly spaced waypoints from ``point_a`` to ``point_b``, both ends included."""
    if num_points < 1:
        raise InvalidInputError(f"num_points must be at least 1, got {num_points}.")

    lat_a, lon_a = point_a
    lat_b, lon_b = point_b
    points: List[Coordinate] = []
    for step in range(num_points + 1):
        fraction = step / num_points
        points.append((lat_a + (lat_b - lat_a) * fraction, lon_a + (lon_b - lon_a) * fraction))
    return points
