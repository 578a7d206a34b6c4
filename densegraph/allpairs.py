"""
All-pairs shortest path algorithms: Floyd-Warshall.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .logging import get_logger

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def floyd_warshall(graph: "Graph") -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest distances.

    Absent edges start at +inf and every diagonal cell at min(loop weight, 0).
    Each pass relaxes w[i][j] = min(w[i][j], w[i][k] + w[k][j]) for one k
    over the whole matrix at once.

    Negative weights are allowed. Negative cycles are not guarded against:
    they show up as negative diagonal entries and are reported with a
    warning, but the distances around them are meaningless.

    Args:
        graph: Graph to analyse.

    Returns:
        (n, n) float array of shortest distances, inf where unreachable.

    Complexity: O(n^3) where n is the number of vertices.

    Example:
        >>> g = DirectedGraph.from_matrix("ABC", [[0, 1, 0], [0, 0, 2], [0, 0, 0]])
        >>> floyd_warshall(g)[0, 2]
        3.0
    """
    mask = graph.edge_mask
    w = np.where(mask, graph.adjacency_matrix, np.inf)
    n = w.shape[0]
    np.fill_diagonal(w, np.minimum(np.diagonal(w), 0.0))

    for k in range(n):
        w = np.minimum(w, w[:, k : k + 1] + w[k : k + 1, :])

    negative = np.flatnonzero(np.diagonal(w) < 0)
    if negative.size:
        logger.warning(
            "Negative cycle through vertices %s; distances are not well defined",
            negative.tolist(),
        )

    return w
