from __future__ import annotations

from dataclasses import dataclass, field

from .edge import LocationId


@dataclass(frozen=True, slots=True)
class RouteLeg:
    origin: LocationId
    destination: LocationId
    price: float


@dataclass(frozen=True, slots=True)
class RoutePath:
    """Cheapest sequence of locations from start to end (both inclusive).

    `cost` is the sum of the prices of the traversed edges; `legs` holds one
    entry per hop, in travel order.
    """

    path: tuple[LocationId, ...]
    cost: float
    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)

    @property
    def origin(self) -> LocationId:
        return self.path[0]

    @property
    def destination(self) -> LocationId:
        return self.path[-1]

    @property
    def hops(self) -> int:
        return len(self.path) - 1
