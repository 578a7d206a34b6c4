"""
Directed dense graphs.

Row v of the matrix holds the edges leaving v, column v the edges entering
it.
"""

from __future__ import annotations

from typing import List

import numpy as np

from . import topological
from .core import Graph
from .undirected import UndirectedGraph
from .utils import check_index


class DirectedGraph(Graph):
    """
    Directed weighted graph.

    Example:
        >>> g = DirectedGraph(3)
        >>> for label in "ABC":
        ...     g.add_vertex(label)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 2)
        >>> g.topological_sort()
        [0, 1, 2]
    """

    directed = True

    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        """
        Add or update the edge start -> end.

        Args:
            start: Tail vertex.
            end: Head vertex.
            weight: Edge weight (default 1.0). Zero is a valid weight.
        """
        start = check_index(self, start, "start")
        end = check_index(self, end, "end")
        self._set_edge(start, end, weight)
        self._validate()

    def remove_edge(self, start: int, end: int) -> None:
        start = check_index(self, start, "start")
        end = check_index(self, end, "end")
        self._clear_edge(start, end)
        self._validate()

    def _link(self, adjacency: List[List[int]], start: int, end: int) -> None:
        adjacency[start].append(end)

    def _unlink(self, adjacency: List[List[int]], start: int, end: int) -> None:
        adjacency[start].remove(end)

    def indeg(self, v: int) -> int:
        """Number of edges entering v."""
        v = check_index(self, v, "v")
        n = self.vertices_count
        return int(self._mask[:n, v].sum())

    def outdeg(self, v: int) -> int:
        """Number of edges leaving v."""
        return super().deg(v)

    def deg(self, v: int) -> int:
        """Total number of edges incident to v."""
        return self.indeg(v) + self.outdeg(v)

    def _balance(self) -> np.ndarray:
        """outdeg - indeg for every vertex."""
        mask = self.edge_mask
        return mask.sum(axis=1).astype(np.int64) - mask.sum(axis=0).astype(np.int64)

    def is_weakly_connected(self) -> bool:
        """Return True if the graph is connected once edge directions are ignored."""
        mask = self.edge_mask
        symmetric = mask | mask.T
        shadow = UndirectedGraph.from_matrix(
            self.vertices,
            symmetric.astype(np.float64),
            max_vertices_count=self.max_vertices_count,
            edge_mask=symmetric,
        )
        return shadow.is_connected()

    def is_strongly_connected(self) -> bool:
        """Return True if every vertex reaches every other vertex."""
        n = self.vertices_count
        return all(len(self.dfs(v)) == n for v in range(n))

    def is_eulerian(self) -> bool:
        if not self.is_strongly_connected():
            return False
        return bool(np.all(self._balance() == 0))

    def is_semi_eulerian(self) -> bool:
        """
        Return True if some walk uses every edge exactly once.

        Either the graph is Eulerian, or it is weakly connected with exactly
        one vertex of outdeg = indeg + 1 (the start), exactly one of
        indeg = outdeg + 1 (the end), and every other vertex balanced.
        """
        if self.is_eulerian():
            return True
        if not self.is_weakly_connected():
            return False

        balance = self._balance()
        unbalanced = balance[balance != 0]
        return (
            unbalanced.size == 2
            and np.count_nonzero(unbalanced == 1) == 1
            and np.count_nonzero(unbalanced == -1) == 1
        )

    def _euler_start(self) -> int:
        starts = np.flatnonzero(self._balance() == 1)
        return int(starts[0]) if starts.size else 0

    def topological_sort(self) -> List[int]:
        return topological.topological_sort(self)
