from .dynamodb_edge_repository import DynamoDbEdgeRepository
from .local_edge_repository import LocalEdgeRepository

__all__ = [
    "DynamoDbEdgeRepository",
    "LocalEdgeRepository",
]
