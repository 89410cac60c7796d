from __future__ import annotations

from typing import Any

import pytest

import src.adapters.persistence.dynamodb_edge_repository as ddb_repo
from src.adapters.persistence.dynamodb_edge_repository import DynamoDbEdgeRepository
from src.domain.exceptions import InvalidEdgeError
from src.domain.models import Edge


def _item(origin: str, destination: str, price: str) -> dict[str, Any]:
    return {
        "origin": {"S": origin},
        "destination": {"S": destination},
        "price": {"N": price},
    }


class _FakePagedClient:
    """Serves canned scan pages in order and records each call's kwargs."""

    def __init__(self, pages: list[dict[str, Any]]) -> None:
        self.pages = pages
        self.calls: list[dict[str, Any]] = []

    def scan(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(dict(kwargs))
        return self.pages[len(self.calls) - 1]


def test_list_edges_follows_last_evaluated_key(monkeypatch) -> None:
    client = _FakePagedClient(
        [
            {
                "Items": [_item("GRU", "BRC", "10")],
                "LastEvaluatedKey": {"id": {"S": "r1"}},
            },
            {"Items": [_item("BRC", "CDG", "12.5")]},
        ]
    )
    monkeypatch.setattr(ddb_repo, "dynamodb_client", lambda: client)

    edges = DynamoDbEdgeRepository(table_name="routes").list_edges()

    assert edges == (
        Edge(origin="GRU", destination="BRC", price=10.0),
        Edge(origin="BRC", destination="CDG", price=12.5),
    )
    assert len(client.calls) == 2
    assert "ExclusiveStartKey" not in client.calls[0]
    assert client.calls[1]["ExclusiveStartKey"] == {"id": {"S": "r1"}}
    assert all(call["TableName"] == "routes" for call in client.calls)


def test_list_edges_empty_table(monkeypatch) -> None:
    client = _FakePagedClient([{"Items": []}])
    monkeypatch.setattr(ddb_repo, "dynamodb_client", lambda: client)

    assert DynamoDbEdgeRepository(table_name="routes").list_edges() == ()
    assert len(client.calls) == 1


def test_list_edges_rejects_item_without_price(monkeypatch) -> None:
    item = _item("GRU", "BRC", "10")
    del item["price"]
    client = _FakePagedClient([{"Items": [item]}])
    monkeypatch.setattr(ddb_repo, "dynamodb_client", lambda: client)

    with pytest.raises(InvalidEdgeError):
        DynamoDbEdgeRepository(table_name="routes").list_edges()
