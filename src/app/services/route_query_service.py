from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from src.app.ports.output import IEdgeSource
from src.domain.algorithms.cheapest_path import find_best_route
from src.domain.exceptions import InvalidEdgeError, NoPathFound
from src.domain.models import Edge, LocationId, RoutePath

logger = logging.getLogger(__name__)


def validate_edges(edges: Iterable[Edge]) -> None:
    """Reject edges the cheapest-path search cannot handle.

    The search is only optimal over non-negative prices, so negative, NaN
    and infinite prices are refused here rather than inside the engine.
    """

    for i, edge in enumerate(edges):
        if not edge.origin or not edge.destination:
            raise InvalidEdgeError(f"Edge #{i} has a blank origin or destination")
        if isinstance(edge.price, bool) or not isinstance(edge.price, (int, float)):
            raise InvalidEdgeError(
                f"Edge #{i} ({edge.origin} -> {edge.destination}) "
                f"has a non-numeric price: {edge.price!r}"
            )
        if not math.isfinite(edge.price):
            raise InvalidEdgeError(
                f"Edge #{i} ({edge.origin} -> {edge.destination}) "
                f"has a non-finite price: {edge.price!r}"
            )
        if edge.price < 0:
            raise InvalidEdgeError(
                f"Edge #{i} ({edge.origin} -> {edge.destination}) "
                f"has a negative price: {edge.price!r}"
            )


@dataclass(slots=True)
class RouteQueryService:
    """Application service (use case) for the route catalog.

    Every call reads a fresh snapshot from the edge source; nothing is cached
    between calls.
    """

    edge_source: IEdgeSource

    def list_routes(self) -> tuple[Edge, ...]:
        edges = self.edge_source.list_edges()
        validate_edges(edges)
        return tuple(sorted(edges, key=lambda e: e.origin))

    def find_best_route(
        self, *, origin: LocationId, destination: LocationId
    ) -> RoutePath:
        edges = self.edge_source.list_edges()
        validate_edges(edges)

        logger.debug(
            "Searching cheapest route %s -> %s over %d edges",
            origin,
            destination,
            len(edges),
        )

        route = find_best_route(edges, origin, destination)
        if route is None:
            logger.info("No route found from %s to %s", origin, destination)
            raise NoPathFound(origin, destination)

        return route
