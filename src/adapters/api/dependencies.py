from __future__ import annotations

import os

from src.adapters.persistence.dynamodb_edge_repository import DynamoDbEdgeRepository
from src.adapters.persistence.local_edge_repository import LocalEdgeRepository
from src.app.ports.output import IEdgeSource
from src.app.services.route_query_service import RouteQueryService


def get_edge_source() -> IEdgeSource:
    default = "dynamodb" if os.getenv("ROUTES_TABLE") else "local"
    kind = (os.getenv("EDGE_SOURCE") or default).strip().lower()

    if kind == "local":
        return LocalEdgeRepository()
    if kind == "dynamodb":
        return DynamoDbEdgeRepository()
    raise RuntimeError("Edge source not configured")


def get_route_query_service() -> RouteQueryService:
    return RouteQueryService(edge_source=get_edge_source())
