"""
Eulerian paths: Hierholzer's algorithm.

References:
    - Hierholzer, C. "Ueber die Möglichkeit, einen Linienzug ohne Wiederholung
      und ohne Unterbrechung zu umfahren" (1873).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .exceptions import NotSemiEulerianError
from .logging import get_logger

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def eulerian_path(graph: "Graph") -> List[int]:
    """
    Extract a walk that uses every edge exactly once.

    Works on a private adjacency list that is consumed edge by edge: while
    the current vertex still has neighbours, it is pushed on the path stack
    and the walk follows its last neighbour, deleting that edge; a vertex
    with no neighbours left is appended to the circuit and the walk
    backtracks. The circuit comes out in reverse and is flipped before
    returning.

    Args:
        graph: Graph satisfying is_semi_eulerian().

    Returns:
        Vertex indices of the walk, edge_count() + 1 long ([] for an empty
        graph).

    Raises:
        NotSemiEulerianError: If the graph has no Eulerian path.

    Complexity: O(V^2 + E * V) with list-based edge removal.

    Example:
        >>> g = UndirectedGraph.from_matrix("ABC", [[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        >>> eulerian_path(g)
        [0, 1, 2]
    """
    if not graph.is_semi_eulerian():
        raise NotSemiEulerianError("Graph does not contain an Eulerian path")
    if graph.vertices_count == 0:
        return []

    adjacency = graph.build_adjacency_list()
    current = graph._euler_start()
    path = [current]
    circuit: List[int] = []

    while path:
        if adjacency[current]:
            path.append(current)
            next_vertex = adjacency[current][-1]
            graph._unlink(adjacency, current, next_vertex)
            current = next_vertex
        else:
            circuit.append(current)
            current = path.pop()

    circuit.reverse()
    logger.debug("eulerian path of %d vertices starting at %d", len(circuit), circuit[0])
    return circuit
