from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.api.dependencies import get_route_query_service
from src.adapters.api.schemas.routes import (
    BestRouteRequestSchema,
    BestRouteSchema,
    EdgeSchema,
    RouteLegSchema,
)
from src.app.services.route_query_service import RouteQueryService
from src.domain.exceptions import NoPathFound
from src.domain.models import RoutePath

router = APIRouter(tags=["routes"])


def _route_to_schema(route: RoutePath) -> BestRouteSchema:
    return BestRouteSchema(
        origin=route.origin,
        destination=route.destination,
        path=list(route.path),
        cost=route.cost,
        legs=[
            RouteLegSchema(
                origin=leg.origin, destination=leg.destination, price=leg.price
            )
            for leg in route.legs
        ],
    )


@router.get("/routes", response_model=list[EdgeSchema])
def list_routes(
    service: RouteQueryService = Depends(get_route_query_service),
) -> list[EdgeSchema]:
    return [
        EdgeSchema(origin=e.origin, destination=e.destination, price=e.price)
        for e in service.list_routes()
    ]


@router.post("/routes/best", response_model=BestRouteSchema)
def find_best_route(
    req: BestRouteRequestSchema,
    service: RouteQueryService = Depends(get_route_query_service),
) -> BestRouteSchema:
    try:
        route = service.find_best_route(
            origin=req.origin, destination=req.destination
        )
    except NoPathFound as exc:
        raise HTTPException(
            status_code=404, detail="No route found between these locations"
        ) from exc
    return _route_to_schema(route)
