from .routing import InvalidEdgeError, NoPathFound, RoutingError

__all__ = [
    "InvalidEdgeError",
    "NoPathFound",
    "RoutingError",
]
