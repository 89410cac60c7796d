from __future__ import annotations

import heapq
from itertools import count
from typing import Iterable

import networkx as nx

from src.domain.models import Edge, LocationId, RouteLeg, RoutePath


def build_graph(edges: Iterable[Edge]) -> nx.DiGraph:
    """Fold edges into a directed graph with the price on each edge.

    When several edges share the same (origin, destination) pair, the one
    seen last wins; prices are not merged by minimum. Neighbours keep the
    order in which they were first inserted.
    """

    graph = nx.DiGraph()
    for edge in edges:
        graph.add_edge(edge.origin, edge.destination, price=edge.price)
    return graph


def cheapest_path(
    graph: nx.DiGraph, start: LocationId, end: LocationId
) -> RoutePath | None:
    """Best-first (Dijkstra) search for the cheapest start -> end path.

    Prices must be non-negative: the first time `end` leaves the frontier its
    cost is final. Entries with equal cost leave the frontier in insertion
    order, so the result is deterministic for a given edge order.

    Returns None when `end` cannot be reached.
    """

    tie = count()
    frontier: list[tuple[float, int, LocationId, tuple[LocationId, ...]]] = [
        (0, next(tie), start, (start,))
    ]
    finalized: set[LocationId] = set()

    while frontier:
        cost, _, vertex, path = heapq.heappop(frontier)

        if vertex == end:
            return RoutePath(path=path, cost=cost, legs=_legs(graph, path))

        # Stale entry: a cheaper one for this vertex was already expanded.
        if vertex in finalized:
            continue
        finalized.add(vertex)

        if vertex not in graph:
            continue

        for nxt, data in graph.adj[vertex].items():
            if nxt not in finalized:
                heapq.heappush(
                    frontier,
                    (cost + data["price"], next(tie), nxt, path + (nxt,)),
                )

    return None


def find_best_route(
    edges: Iterable[Edge], start: LocationId, end: LocationId
) -> RoutePath | None:
    """Cheapest route between two locations over a snapshot of edges.

    A query from a location to itself is answered as `[start]` at cost 0
    without looking at the edges at all.
    """

    if start == end:
        return RoutePath(path=(start,), cost=0)

    return cheapest_path(build_graph(edges), start, end)


def _legs(graph: nx.DiGraph, path: tuple[LocationId, ...]) -> tuple[RouteLeg, ...]:
    return tuple(
        RouteLeg(origin=u, destination=v, price=graph.adj[u][v]["price"])
        for u, v in zip(path, path[1:])
    )
