"""
Undirected dense graphs.

Edges are stored symmetrically in the matrix and mirrored in adjacency
lists. A loop occupies one diagonal cell and counts twice toward the degree
of its vertex.
"""

from __future__ import annotations

from typing import List

import numpy as np

from . import mst
from .core import Graph
from .diagnostics import assert_symmetric
from .utils import check_index


class UndirectedGraph(Graph):
    """
    Undirected weighted graph.

    Example:
        >>> g = UndirectedGraph(3)
        >>> for label in "ABC":
        ...     g.add_vertex(label)
        >>> g.add_edge(0, 1, 1.0)
        >>> g.add_edge(1, 2, 2.0)
        >>> g.add_edge(0, 2, 5.0)
        >>> g.minimum_spanning_tree().total_weight()
        3.0
    """

    directed = False

    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        """
        Add or update the edge between start and end.

        Args:
            start: First endpoint.
            end: Second endpoint.
            weight: Edge weight (default 1.0). Zero is a valid weight.
        """
        start = check_index(self, start, "start")
        end = check_index(self, end, "end")
        self._set_edge(start, end, weight)
        self._set_edge(end, start, weight)
        self._validate()

    def remove_edge(self, start: int, end: int) -> None:
        start = check_index(self, start, "start")
        end = check_index(self, end, "end")
        self._clear_edge(start, end)
        self._clear_edge(end, start)
        self._validate()

    def _link(self, adjacency: List[List[int]], start: int, end: int) -> None:
        adjacency[start].append(end)
        if start != end:
            adjacency[end].append(start)

    def _unlink(self, adjacency: List[List[int]], start: int, end: int) -> None:
        adjacency[start].remove(end)
        if start != end:
            adjacency[end].remove(start)

    def check_invariants(self) -> None:
        super().check_invariants()
        assert_symmetric(self._mask)
        assert_symmetric(self._weights)

    def deg(self, v: int) -> int:
        """Number of edge ends at v; a loop contributes two."""
        v = check_index(self, v, "v")
        degree = super().deg(v)
        if self._mask[v, v]:
            degree += 1
        return degree

    def _degrees(self) -> np.ndarray:
        return np.array([self.deg(v) for v in range(self.vertices_count)], dtype=np.int64)

    def is_connected(self) -> bool:
        """
        Return True if every vertex is reachable from vertex 0.

        The empty graph counts as connected.
        """
        n = self.vertices_count
        if n == 0:
            return True
        return len(self.bfs(0)) == n

    def is_eulerian(self) -> bool:
        if not self.is_connected():
            return False
        return bool(np.all(self._degrees() % 2 == 0))

    def is_semi_eulerian(self) -> bool:
        if not self.is_connected():
            return False
        odd = int(np.count_nonzero(self._degrees() % 2 == 1))
        return odd in (0, 2)

    def _euler_start(self) -> int:
        odd = np.flatnonzero(self._degrees() % 2 == 1)
        return int(odd[0]) if odd.size else 0

    def minimum_spanning_tree(self) -> "UndirectedGraph":
        return mst.minimum_spanning_tree(self)

    def minimum_product_spanning_tree(self) -> "UndirectedGraph":
        return mst.minimum_product_spanning_tree(self)
