from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import IEdgeSource
from src.domain.exceptions import InvalidEdgeError
from src.domain.models import Edge

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalEdgeRepository(IEdgeSource):
    """Reads the route catalog from a CSV file.

    The file needs `origin`, `destination` and `price` columns; any other
    column (e.g. `id`) is ignored. Row order is kept, so a later duplicate of
    the same origin/destination pair overrides an earlier one downstream.

    Env vars:
      - ROUTES_PATH: path to the CSV file (default: data/routes.csv)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("ROUTES_PATH") or "data/routes.csv"
        return Path(value)

    def list_edges(self) -> tuple[Edge, ...]:
        path = self._path()

        edges: list[Edge] = []
        with path.open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                origin = (row.get("origin") or "").strip()
                destination = (row.get("destination") or "").strip()
                if not origin or not destination:
                    continue

                raw_price = (row.get("price") or "").strip()
                try:
                    price = float(raw_price)
                except ValueError as exc:
                    raise InvalidEdgeError(
                        f"{path}:{reader.line_num}: invalid price {raw_price!r}"
                    ) from exc

                edges.append(Edge(origin=origin, destination=destination, price=price))

        logger.debug("Loaded %d edges from %s", len(edges), path)
        return tuple(edges)
