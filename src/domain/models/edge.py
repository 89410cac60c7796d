from __future__ import annotations

from dataclasses import dataclass

# Opaque, case-sensitive location token (e.g. an airport code).
LocationId = str


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, priced connection from origin to destination.

    An edge A -> B says nothing about B -> A.
    """

    origin: LocationId
    destination: LocationId
    price: float
