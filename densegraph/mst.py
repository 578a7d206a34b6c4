"""
Minimum spanning trees over the dense matrix.

minimum_spanning_tree is Prim's algorithm with a key array instead of a
heap, which suits adjacency matrices. minimum_product_spanning_tree reuses it
on log-transformed weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .exceptions import NonPositiveWeightError, NotConnectedError
from .logging import get_logger

if TYPE_CHECKING:
    from .undirected import UndirectedGraph

logger = get_logger(__name__)


def minimum_spanning_tree(graph: "UndirectedGraph") -> "UndirectedGraph":
    """
    Prim's algorithm for a minimum-weight spanning tree.

    Grows the tree from vertex 0. best[v] holds the lightest edge weight
    from the tree to v and parent[v] its tree endpoint; each round adds the
    closest outside vertex (lowest index on ties). Loops never enter the
    tree.

    Args:
        graph: Connected undirected graph.

    Returns:
        New graph with the same capacity and vertices and exactly
        vertices_count - 1 edges.

    Raises:
        NotConnectedError: If some vertex cannot be reached from vertex 0.

    Complexity: O(V^2).

    Example:
        >>> g = UndirectedGraph.from_matrix("ABC", [[0, 1, 5], [1, 0, 2], [5, 2, 0]])
        >>> minimum_spanning_tree(g).total_weight()
        3.0
    """
    tree = graph._blank_copy()
    n = graph.vertices_count
    if n == 0:
        return tree

    mask = graph.edge_mask
    weights = graph.adjacency_matrix
    in_tree = np.zeros(n, dtype=bool)
    best = np.full(n, np.inf)
    parent = np.full(n, -1, dtype=np.int64)
    best[0] = 0.0

    for _ in range(n):
        candidates = np.where(in_tree, np.inf, best)
        u = int(np.argmin(candidates))
        if candidates[u] == np.inf:
            unreached = np.flatnonzero(~in_tree).tolist()
            raise NotConnectedError(
                f"Graph is not connected: vertices {unreached} unreachable from vertex 0"
            )
        in_tree[u] = True
        if parent[u] >= 0:
            p = int(parent[u])
            tree.add_edge(p, u, float(weights[p, u]))

        neighbors = np.flatnonzero(mask[u] & ~in_tree)
        closer = weights[u, neighbors] < best[neighbors]
        best[neighbors[closer]] = weights[u, neighbors[closer]]
        parent[neighbors[closer]] = u

    logger.debug("spanning tree over %d vertices, weight %g", n, tree.total_weight())
    return tree


def minimum_product_spanning_tree(graph: "UndirectedGraph") -> "UndirectedGraph":
    """
    Spanning tree minimising the product of its edge weights.

    log is monotonic and turns products into sums, so the minimum-sum tree
    of the log-weights is the minimum-product tree of the original weights.
    Tree weights are mapped back through exp.

    Args:
        graph: Connected undirected graph with strictly positive weights.

    Returns:
        New graph holding the spanning tree with its original weights.

    Raises:
        NonPositiveWeightError: If any edge weight is <= 0.
        NotConnectedError: If the graph is disconnected.
    """
    for u, v, w in graph.edges():
        if w <= 0:
            raise NonPositiveWeightError(
                f"Minimum product tree needs positive weights; edge ({u}, {v}) has weight {w}"
            )

    log_tree = minimum_spanning_tree(graph.map_weights(np.log))
    return log_tree.map_weights(np.exp)
