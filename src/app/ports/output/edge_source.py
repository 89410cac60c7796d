from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Edge


class IEdgeSource(ABC):
    """Port for reading the route catalog as a flat list of priced edges."""

    @abstractmethod
    def list_edges(self) -> tuple[Edge, ...]:
        """Return a full, fresh snapshot of the catalog in source order."""
