from .edge import Edge, LocationId
from .route import RouteLeg, RoutePath

__all__ = [
    "Edge",
    "LocationId",
    "RouteLeg",
    "RoutePath",
]
