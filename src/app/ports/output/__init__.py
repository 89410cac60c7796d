from .edge_source import IEdgeSource

__all__ = [
    "IEdgeSource",
]
