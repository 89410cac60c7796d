from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from src.adapters.aws import dynamodb_client
from src.app.ports.output import IEdgeSource
from src.domain.exceptions import InvalidEdgeError
from src.domain.models import Edge

logger = logging.getLogger(__name__)


def _edge_from_item(item: dict[str, Any]) -> Edge:
    try:
        return Edge(
            origin=item["origin"]["S"],
            destination=item["destination"]["S"],
            price=float(item["price"]["N"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidEdgeError(f"Malformed route item: {item!r}") from exc


@dataclass(slots=True)
class DynamoDbEdgeRepository(IEdgeSource):
    """Reads the route catalog from a DynamoDB table.

    Items carry `origin` (S), `destination` (S) and `price` (N). The whole
    table is scanned on every call.

    Env vars:
      - ROUTES_TABLE (default: route-catalog-routes)
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    table_name: str | None = None

    def _table(self) -> str:
        return self.table_name or os.getenv("ROUTES_TABLE") or "route-catalog-routes"

    def list_edges(self) -> tuple[Edge, ...]:
        ddb = dynamodb_client()
        table = self._table()

        edges: list[Edge] = []
        kwargs: dict[str, Any] = {
            "TableName": table,
            "ProjectionExpression": "#o, #d, #p",
            "ExpressionAttributeNames": {
                "#o": "origin",
                "#d": "destination",
                "#p": "price",
            },
        }
        while True:
            resp = ddb.scan(**kwargs)
            edges.extend(_edge_from_item(item) for item in resp.get("Items", []))

            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

        logger.debug("Loaded %d edges from DynamoDB table %s", len(edges), table)
        return tuple(edges)
