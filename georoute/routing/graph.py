from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx

from ..exceptions import InvalidWeightError, SelfEdgeError, UnknownNodeError
from .geo import haversine_km
from .types import GraphNode, Neighbor, NodeId, PointOfInterest


class GeoGraph:
    """Weighted undirected graph of points of interest, keyed by POI id.

    Nodes live in an append-only list and are located through an id index, so
    lookups never depend on object identity or coordinate equality.
    Adjacency lists keep edge insertion order.
    """

    def __init__(self) -> None:
        self._nodes: List[GraphNode] = []
        self._index: Dict[NodeId, int] = {}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeId]:
        return (node.id for node in self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(node.neighbors) for node in self._nodes) // 2

    def add_node(self, node_id: NodeId, poi: PointOfInterest) -> None:
        if node_id in self._index:
            return
        self._index[node_id] = len(self._nodes)
        self._nodes.append(GraphNode(poi=poi))

    def add_edge(self, node_a: NodeId, node_b: NodeId, weight: float) -> None:
        first = self._node(node_a)
        second = self._node(node_b)
        if node_a == node_b:
            raise SelfEdgeError(f"Cannot connect node {node_a!r} to itself.")
        if math.isnan(weight) or weight < 0:
            raise InvalidWeightError(f"Edge {node_a!r}-{node_b!r} has invalid weight {weight!r}.")

        first.neighbors.append(Neighbor(neighbor_id=node_b, weight=weight))
        second.neighbors.append(Neighbor(neighbor_id=node_a, weight=weight))

    def node(self, node_id: NodeId) -> GraphNode:
        return self._node(node_id)

    def poi(self, node_id: NodeId) -> PointOfInterest:
        return self._node(node_id).poi

    def neighbors(self, node_id: NodeId) -> Tuple[Neighbor, ...]:
        return tuple(self._node(node_id).neighbors)

    def edge_weight(self, node_a: NodeId, node_b: NodeId) -> Optional[float]:
        for entry in self._node(node_a).neighbors:
            if entry.neighbor_id == node_b:
                return entry.weight
        return None

    def edges(self) -> Iterator[Tuple[NodeId, NodeId, float]]:
        """Every adjacency entry as ``(node, neighbor, weight)``; each undirected edge appears twice."""
        for node in self._nodes:
            for entry in node.neighbors:
                yield node.id, entry.neighbor_id, entry.weight

    @staticmethod
    def distance_km(point_a: PointOfInterest, point_b: PointOfInterest) -> float:
        return haversine_km(point_a.latitude, point_a.longitude, point_b.latitude, point_b.longitude)

    def to_networkx(self) -> nx.Graph:
        graph = nx.Graph()
        for node in self._nodes:
            graph.add_node(node.id, coords=node.poi.coords, label=node.poi.name)
        for node_a, node_b, weight in self.edges():
            graph.add_edge(node_a, node_b, distance=weight)
        return graph

    def _node(self, node_id: NodeId) -> GraphNode:
        position = self._index.get(node_id)
        if position is None:
            raise UnknownNodeError(f"Node {node_id!r} is not in the graph.")
        return self._nodes[position]
