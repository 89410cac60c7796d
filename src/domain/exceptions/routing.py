from __future__ import annotations


class RoutingError(Exception):
    """Base exception for route calculation failures."""


class NoPathFound(RoutingError):
    """Raised when no route connects the requested locations."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(f"No route from {origin} to {destination}")


class InvalidEdgeError(RoutingError, ValueError):
    """Raised when the edge source hands over a record the engine cannot use."""
