"""
Utility functions for graph algorithms.

Provides helpers for index validation, adjacency-list construction, and path
reconstruction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from .core import Graph


def check_index(graph: "Graph", index: int, name: str = "index") -> int:
    """
    Validate a vertex index against the graph's active vertices.

    Args:
        graph: Graph the index refers to.
        index: Vertex index to validate.
        name: Argument name used in the error message.

    Returns:
        The index as a plain int.

    Raises:
        IndexError: If index is outside [0, vertices_count).
    """
    index = int(index)
    if not 0 <= index < graph.vertices_count:
        raise IndexError(
            f"{name} {index} out of range for graph with {graph.vertices_count} vertices"
        )
    return index


def build_adjacency_list(graph: "Graph") -> List[List[int]]:
    """
    Build a fresh adjacency list by feeding every edge to the graph's _link.

    Undirected edges arrive once each and are mirrored by the hook. The list
    is owned by the caller; mutating it never touches the graph.

    Args:
        graph: Graph to read.

    Returns:
        List where entry i holds the neighbours of vertex i in ascending order.

    Example:
        >>> g = UndirectedGraph(3)
        >>> for label in "ABC":
        ...     g.add_vertex(label)
        >>> g.add_edge(0, 2, 1.0)
        >>> build_adjacency_list(g)
        [[2], [], [0]]
    """
    adjacency: List[List[int]] = [[] for _ in range(graph.vertices_count)]
    for start, end, _ in graph.edges():
        graph._link(adjacency, start, end)
    return adjacency


def reconstruct_path(prev: Sequence[int], source: int, target: int) -> List[int]:
    """
    Reconstruct the path from source to target using a predecessor array.

    Args:
        prev: prev[v] is the vertex preceding v on the path, or -1.
        source: First vertex of the path.
        target: Last vertex of the path.

    Returns:
        List of vertices from source to target (inclusive).

    Raises:
        ValueError: If the predecessor chain does not lead back to source.
    """
    path = [target]
    current = target
    while current != source:
        current = int(prev[current])
        if current < 0 or len(path) > len(prev):
            raise ValueError(
                f"Predecessor chain from {target} does not reach {source}"
            )
        path.append(current)

    path.reverse()
    return path
