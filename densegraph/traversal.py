"""
Graph traversal algorithms: DFS and BFS.

Both traversals work from the graph's edge mask and keep their visited state
in a call-local array, so the graph is untouched and reusable afterwards.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterator, List

import numpy as np

from .logging import get_logger
from .utils import check_index

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def dfs(graph: "Graph", start_index: int) -> List[int]:
    """
    Depth-first search (iterative, pre-order).

    Neighbours are explored in descending index order, which is the order a
    recursive DFS produces when it collects a vertex's neighbours on a stack
    before descending. A neighbour already visited by the time it is reached
    is skipped.

    Args:
        graph: Graph to traverse.
        start_index: Vertex to start from.

    Returns:
        Vertex indices in the order they were first visited.

    Complexity: O(V^2) over the dense matrix.

    Example:
        >>> g = UndirectedGraph.from_matrix("ABC", [[0, 1, 1], [1, 0, 0], [1, 0, 0]])
        >>> dfs(g, 0)
        [0, 2, 1]
    """
    start_index = check_index(graph, start_index, "start_index")
    mask = graph.edge_mask
    visited = np.zeros(graph.vertices_count, dtype=bool)

    def neighbors_desc(u: int) -> Iterator[int]:
        return iter(np.flatnonzero(mask[u])[::-1].tolist())

    order = [start_index]
    visited[start_index] = True
    stack = [neighbors_desc(start_index)]

    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                order.append(v)
                stack.append(neighbors_desc(v))
                break
        else:
            stack.pop()

    logger.debug("dfs from %d visited %d vertices", start_index, len(order))
    return order


def bfs(graph: "Graph", start_index: int) -> List[int]:
    """
    Breadth-first search.

    Neighbours are enqueued in ascending index order and marked visited at
    enqueue time, so no vertex is queued twice.

    Args:
        graph: Graph to traverse.
        start_index: Vertex to start from.

    Returns:
        Vertex indices in BFS visitation order.

    Complexity: O(V^2) over the dense matrix.

    Example:
        >>> g = UndirectedGraph.from_matrix("ABC", [[0, 1, 1], [1, 0, 0], [1, 0, 0]])
        >>> bfs(g, 0)
        [0, 1, 2]
    """
    start_index = check_index(graph, start_index, "start_index")
    mask = graph.edge_mask
    visited = np.zeros(graph.vertices_count, dtype=bool)

    order = [start_index]
    visited[start_index] = True
    queue = deque([start_index])

    while queue:
        u = queue.popleft()
        for v in np.flatnonzero(mask[u] & ~visited).tolist():
            visited[v] = True
            order.append(v)
            queue.append(v)

    logger.debug("bfs from %d visited %d vertices", start_index, len(order))
    return order
