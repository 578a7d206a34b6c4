"""
Topological sorting of directed graphs by repeated sink removal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .exceptions import CycleError
from .logging import get_logger

if TYPE_CHECKING:
    from .directed import DirectedGraph

logger = get_logger(__name__)


def topological_sort(graph: "DirectedGraph") -> List[int]:
    """
    Order vertices so that every edge points forward.

    Works on a private copy: the first vertex without outgoing edges goes
    into the last free slot of the result and is deleted from the copy, until
    the copy is empty.

    Args:
        graph: Directed graph.

    Returns:
        Original vertex indices in topological order.

    Raises:
        CycleError: If the graph contains a directed cycle (including a loop).

    Complexity: O(V^3) with matrix-shifting deletes.

    Example:
        >>> g = DirectedGraph.from_matrix("ABC", [[0, 0, 0], [1, 0, 0], [0, 1, 0]])
        >>> topological_sort(g)
        [2, 1, 0]
    """
    work = graph.copy()
    remaining = list(range(graph.vertices_count))
    order: List[Optional[int]] = [None] * graph.vertices_count

    while work.vertices_count > 0:
        sink = work.no_successors()
        if sink is None:
            logger.debug("topological sort stuck with %d vertices left", work.vertices_count)
            raise CycleError("Graph has cycles")

        order[work.vertices_count - 1] = remaining.pop(sink)
        work.delete_vertex(sink)

    return order
