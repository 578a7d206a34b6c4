"""
Hamiltonian paths by backtracking.

The search is iterative: next_candidate[pos] remembers where to resume
scanning at each depth, so backtracking never recurses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import numpy as np

from .exceptions import NoHamiltonianPathError
from .logging import get_logger

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def _is_safe(mask: np.ndarray, path: List[int], pos: int, v: int) -> bool:
    if not mask[path[pos - 1], v]:
        return False
    return v not in path[:pos]


def hamiltonian_path(graph: "Graph") -> List[int]:
    """
    Find a path starting at vertex 0 that visits every vertex exactly once.

    Positions are filled left to right; at each position the candidates
    1..n-1 are tried in ascending order. A candidate is safe if an edge leads
    to it from the previous path vertex and it is not already on the path.
    A dead end resets the slot to -1 and resumes at the previous position.

    Only vertex 0 is tried as the first vertex, and no edge back to vertex 0
    is required.

    Args:
        graph: Graph to search.

    Returns:
        Vertex indices of the path ([] for an empty graph).

    Raises:
        NoHamiltonianPathError: If no Hamiltonian path starts at vertex 0.

    Complexity: O(n!) in the worst case.

    Example:
        >>> g = UndirectedGraph.from_matrix("ABC", [[0, 0, 1], [0, 0, 1], [1, 1, 0]])
        >>> hamiltonian_path(g)
        [0, 2, 1]
    """
    n = graph.vertices_count
    if n == 0:
        return []

    mask = graph.edge_mask
    path = [-1] * n
    path[0] = 0
    next_candidate = [1] * n
    pos = 1

    while 0 < pos < n:
        for v in range(next_candidate[pos], n):
            if _is_safe(mask, path, pos, v):
                path[pos] = v
                next_candidate[pos] = v + 1
                pos += 1
                if pos < n:
                    next_candidate[pos] = 1
                break
        else:
            path[pos] = -1
            next_candidate[pos] = 1
            pos -= 1

    if pos < n:
        logger.debug("hamiltonian search exhausted for %d vertices", n)
        raise NoHamiltonianPathError("Graph has no Hamiltonian path starting at vertex 0")

    return path
