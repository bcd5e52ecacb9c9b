from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, List, Sequence, Tuple

UNREACHABLE = math.inf

Coordinate = Tuple[float, float]
NodeId = Hashable


@dataclass(frozen=True)
class PointOfInterest:
    id: NodeId
    name: str
    latitude: float
    longitude: float

    @property
    def coords(self) -> Coordinate:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Neighbor:
    neighbor_id: NodeId
    weight: float


@dataclass
class GraphNode:
    poi: PointOfInterest
    neighbors: List[Neighbor] = field(default_factory=list)

    @property
    def id(self) -> NodeId:
        return self.poi.id


@dataclass(frozen=True)
class PathResult:
    path: Sequence[PointOfInterest]
    total_distance_km: float

    @property
    def reachable(self) -> bool:
        return bool(self.path) and self.total_distance_km != UNREACHABLE

    @property
    def ids(self) -> List[NodeId]:
        return [poi.id for poi in self.path]

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(path=(), total_distance_km=UNREACHABLE)
