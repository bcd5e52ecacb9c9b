class RoutingError(Exception):
    """Base exception for route computation errors."""


class InvalidInputError(RoutingError):
    """Raised when the POI list or route parameters are unusable."""


class DuplicateIdError(RoutingError):
    """Raised when two points of interest share an identifier."""


class GraphContractError(RoutingError):
    """Base for graph construction contract violations."""


class UnknownNodeError(GraphContractError):
    """Raised when a graph operation references an id not in the graph."""


class SelfEdgeError(GraphContractError):
    """Raised when an edge would connect a node to itself."""


class InvalidWeightError(GraphContractError):
    """Raised when an edge weight is negative or not a number."""
