"""
Single-pair shortest paths: Dijkstra.

Array-based Dijkstra over the dense matrix, which is O(V^2) and needs no
priority queue.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

import numpy as np

from .exceptions import NoPathError
from .logging import get_logger
from .utils import check_index, reconstruct_path

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def dijkstra(graph: "Graph", source: int, target: int) -> List[int]:
    """
    Dijkstra's algorithm for the shortest path from source to target.

    Repeatedly finalizes the closest unfinalized vertex (lowest index on
    ties) and relaxes its unfinalized neighbours, stopping as soon as target
    is finalized.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start vertex.
        target: End vertex.

    Returns:
        Vertex indices of a shortest path, from source to target inclusive.

    Raises:
        ValueError: If the graph contains negative edge weights.
        NoPathError: If target is unreachable from source.

    Complexity: O(V^2).

    Example:
        >>> g = DirectedGraph.from_matrix("ABC", [[0, 1, 4], [0, 0, 2], [0, 0, 0]])
        >>> dijkstra(g, 0, 2)
        [0, 1, 2]
    """
    source = check_index(graph, source, "source")
    target = check_index(graph, target, "target")

    mask = graph.edge_mask
    weights = graph.adjacency_matrix

    negative = np.argwhere(mask & (weights < 0))
    if negative.size:
        u, v = (int(x) for x in negative[0])
        raise ValueError(
            f"Dijkstra requires non-negative weights. "
            f"Found negative weight {weights[u, v]} on edge ({u}, {v})"
        )

    n = graph.vertices_count
    dist = np.full(n, np.inf)
    prev = np.full(n, -1, dtype=np.int64)
    finalized = np.zeros(n, dtype=bool)
    dist[source] = 0.0

    while not finalized[target]:
        candidates = np.where(finalized, np.inf, dist)
        u = int(np.argmin(candidates))
        if candidates[u] == np.inf:
            break
        finalized[u] = True
        if u == target:
            break

        neighbors = np.flatnonzero(mask[u] & ~finalized)
        alt = dist[u] + weights[u, neighbors]
        better = alt < dist[neighbors]
        dist[neighbors[better]] = alt[better]
        prev[neighbors[better]] = u

    if not finalized[target]:
        logger.debug("dijkstra: vertex %d unreachable from %d", target, source)
        raise NoPathError(f"No path from vertex {source} to vertex {target}")

    return reconstruct_path(prev, source, target)


def path_weight(graph: "Graph", path: Sequence[int]) -> float:
    """
    Sum the edge weights along a path.

    Args:
        graph: Graph the path lives in.
        path: Consecutive vertex indices.

    Returns:
        Total weight; 0.0 for paths with fewer than two vertices.

    Raises:
        NoPathError: If two consecutive vertices are not joined by an edge.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        w = graph.weight(u, v)
        if w is None:
            raise NoPathError(f"No edge from vertex {u} to vertex {v}")
        total += w
    return total
