"""
Core dense graph data structure.

Graph stores vertices in a fixed-capacity sequence and edges in a
capacity-sized weight matrix with a parallel boolean presence mask, so a
zero-weight edge is distinct from a missing one. Directed and undirected
semantics are supplied by the concrete subclasses in ``directed`` and
``undirected``.

Traversal state is never stored on the graph: every algorithm owns its own
visited array and adjacency list for the duration of the call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

import numpy as np

from . import allpairs, euler, hamilton, shortest, traversal
from .diagnostics import (
    assert_mask_consistent,
    assert_square,
    assert_symmetric,
    is_debug_enabled,
)
from .exceptions import VertexCapacityError
from .utils import build_adjacency_list, check_index

G = TypeVar("G", bound="Graph")


@dataclass(frozen=True)
class Vertex:
    """
    A labelled graph vertex.

    Vertices are identified by position in the graph, not by label, so
    labels may repeat.
    """

    label: str


class Graph(ABC):
    """
    Capacity-bounded weighted graph over an adjacency matrix.

    Attributes:
        directed: True for directed variants.

    Complexity:
        - add_vertex, add_edge, remove_edge: O(1)
        - delete_vertex: O(V^2) (rows and columns shift left)
        - deg, adjacent_vertices: O(V)
    """

    directed: bool = False

    def __init__(self, max_vertices_count: int) -> None:
        """
        Initialize an empty graph.

        Args:
            max_vertices_count: Fixed vertex capacity.

        Raises:
            ValueError: If max_vertices_count is negative.
        """
        if max_vertices_count < 0:
            raise ValueError(
                f"max_vertices_count must be non-negative, got {max_vertices_count}"
            )
        self._capacity = int(max_vertices_count)
        self._vertices: List[Vertex] = []
        self._weights = np.zeros((self._capacity, self._capacity), dtype=np.float64)
        self._mask = np.zeros((self._capacity, self._capacity), dtype=bool)

    @classmethod
    def from_matrix(
        cls: type[G],
        vertices: Sequence[Union[Vertex, str]],
        adjacency_matrix,
        max_vertices_count: Optional[int] = None,
        vertices_count: Optional[int] = None,
        edge_mask=None,
    ) -> G:
        """
        Create a graph pre-populated from caller-owned data.

        Vertices and matrix are copied, so later changes to the inputs do not
        affect the graph.

        Args:
            vertices: Vertex objects or labels, in index order.
            adjacency_matrix: Square weight matrix. Without edge_mask, a
                nonzero cell is an edge and a zero cell is absent.
            max_vertices_count: Capacity; defaults to the matrix size.
            vertices_count: Number of active vertices; defaults to
                len(vertices).
            edge_mask: Optional boolean matrix of the same shape marking which
                cells are edges, for graphs with zero-weight edges.

        Returns:
            New graph of the calling class.

        Raises:
            ValueError: If shapes or counts are inconsistent, or if an
                undirected graph is given an asymmetric matrix or mask.
        """
        weights = np.array(adjacency_matrix, dtype=np.float64)
        if weights.size == 0:
            weights = weights.reshape(0, 0)
        assert_square(weights)
        size = weights.shape[0]

        if edge_mask is None:
            mask = weights != 0
        else:
            mask = np.array(edge_mask, dtype=bool)
            if mask.shape != weights.shape:
                raise ValueError(
                    f"edge_mask shape {mask.shape} does not match matrix shape {weights.shape}"
                )
        weights = np.where(mask, weights, 0.0)
        if not cls.directed:
            assert_symmetric(mask)
            assert_symmetric(weights)

        capacity = size if max_vertices_count is None else int(max_vertices_count)
        count = len(vertices) if vertices_count is None else int(vertices_count)
        if size > capacity:
            raise ValueError(f"Matrix of size {size} exceeds capacity {capacity}")
        if count > len(vertices) or count > size or count < 0:
            raise ValueError(
                f"vertices_count {count} inconsistent with {len(vertices)} vertices "
                f"and a {size}x{size} matrix"
            )

        graph = cls(capacity)
        graph._vertices = [
            v if isinstance(v, Vertex) else Vertex(str(v)) for v in vertices[:count]
        ]
        graph._weights[:count, :count] = weights[:count, :count]
        graph._mask[:count, :count] = mask[:count, :count]
        graph._validate()
        return graph

    # --- Variant hooks --------------------------------------------------------

    @abstractmethod
    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        """Add or update the edge start -> end with the given weight."""
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, start: int, end: int) -> None:
        """Remove the edge start -> end if present."""
        raise NotImplementedError

    @abstractmethod
    def is_eulerian(self) -> bool:
        """Return True if the graph has a closed walk using every edge once."""
        raise NotImplementedError

    @abstractmethod
    def is_semi_eulerian(self) -> bool:
        """Return True if the graph has a walk using every edge once."""
        raise NotImplementedError

    @abstractmethod
    def _link(self, adjacency: List[List[int]], start: int, end: int) -> None:
        """Add edge start -> end to an adjacency list built by this graph."""
        raise NotImplementedError

    @abstractmethod
    def _unlink(self, adjacency: List[List[int]], start: int, end: int) -> None:
        """Remove edge start -> end from an adjacency list built by this graph."""
        raise NotImplementedError

    @abstractmethod
    def _euler_start(self) -> int:
        """Vertex an Eulerian path must start from."""
        raise NotImplementedError

    # --- Storage views --------------------------------------------------------

    @property
    def max_vertices_count(self) -> int:
        return self._capacity

    @property
    def vertices_count(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def adjacency_matrix(self) -> np.ndarray:
        """Active weight block, with 0.0 where there is no edge (copy)."""
        n = self.vertices_count
        return self._weights[:n, :n].copy()

    @property
    def edge_mask(self) -> np.ndarray:
        """Active presence block (copy)."""
        n = self.vertices_count
        return self._mask[:n, :n].copy()

    def labels(self, indices: Sequence[int]) -> List[str]:
        """Return the labels of the given vertex indices."""
        return [self._vertices[check_index(self, i)].label for i in indices]

    def has_edge(self, start: int, end: int) -> bool:
        start = check_index(self, start, "start")
        end = check_index(self, end, "end")
        return bool(self._mask[start, end])

    def weight(self, start: int, end: int) -> Optional[float]:
        """Return the weight of start -> end, or None if there is no edge."""
        if not self.has_edge(start, end):
            return None
        return float(self._weights[start, end])

    def edges(self) -> List[Tuple[int, int, float]]:
        """
        Return all edges as (start, end, weight) in row-major order.

        Undirected graphs report each edge once, with start <= end.
        """
        mask = self.edge_mask
        if not self.directed:
            mask = np.triu(mask)
        return [(int(i), int(j), float(self._weights[i, j])) for i, j in np.argwhere(mask)]

    def edge_count(self) -> int:
        return len(self.edges())

    def total_weight(self) -> float:
        return float(sum(w for _, _, w in self.edges()))

    # --- Mutation -------------------------------------------------------------

    def add_vertex(self, label: str) -> int:
        """
        Append a vertex with the given label.

        Args:
            label: Vertex label.

        Returns:
            Index of the new vertex.

        Raises:
            VertexCapacityError: If the graph is already at capacity.
        """
        if self.vertices_count >= self._capacity:
            raise VertexCapacityError(
                f"Cannot add vertex {label!r}: graph is at capacity {self._capacity}"
            )
        self._vertices.append(Vertex(label))
        return self.vertices_count - 1

    def delete_vertex(self, index: int) -> None:
        """
        Remove a vertex and its incident edges.

        Vertices, rows and columns after index shift left by one; the vacated
        last row and column are cleared.

        Args:
            index: Index of the vertex to delete.
        """
        index = check_index(self, index)
        n = self.vertices_count

        for arr in (self._weights, self._mask):
            arr[index : n - 1, :n] = arr[index + 1 : n, :n]
            arr[:n, index : n - 1] = arr[:n, index + 1 : n]
            arr[n - 1, :n] = 0
            arr[:n, n - 1] = 0

        del self._vertices[index]
        self._validate()

    def _set_edge(self, start: int, end: int, weight: float) -> None:
        self._weights[start, end] = weight
        self._mask[start, end] = True

    def _clear_edge(self, start: int, end: int) -> None:
        self._weights[start, end] = 0.0
        self._mask[start, end] = False

    def copy(self: G) -> G:
        """Return a deep copy of the graph."""
        clone = self._blank_copy()
        clone._weights = self._weights.copy()
        clone._mask = self._mask.copy()
        return clone

    def map_weights(self: G, func: Callable[[np.ndarray], np.ndarray]) -> G:
        """
        Return a copy with func applied to the weights of present edges.

        Args:
            func: Vectorised function over a 1-D float array, e.g. np.log.

        Returns:
            New graph with the same vertices and edge set.
        """
        clone = self.copy()
        clone._weights[clone._mask] = func(clone._weights[clone._mask])
        return clone

    def _blank_copy(self: G) -> G:
        """Same class, capacity and vertices, no edges."""
        clone = type(self)(self._capacity)
        clone._vertices = list(self._vertices)
        return clone

    def check_invariants(self) -> None:
        """
        Validate storage invariants.

        Raises:
            ValueError: If an absent cell carries weight or the inactive
                region of the matrix holds edges.
        """
        assert_mask_consistent(self._weights, self._mask)
        n = self.vertices_count
        if self._mask[n:, :].any() or self._mask[:, n:].any():
            raise ValueError(f"Edges found outside the active {n}x{n} block")

    def _validate(self) -> None:
        if is_debug_enabled():
            self.check_invariants()

    # --- Degree and support queries -------------------------------------------

    def deg(self, v: int) -> int:
        """Number of edges leaving v (present cells in row v)."""
        v = check_index(self, v, "v")
        n = self.vertices_count
        return int(self._mask[v, :n].sum())

    def contains_loop(self) -> bool:
        """Return True if any vertex has an edge to itself."""
        return bool(np.diagonal(self.edge_mask).any())

    def adjacent_vertices(self, index: int) -> List[int]:
        """Return the neighbours of a vertex in ascending order."""
        index = check_index(self, index)
        n = self.vertices_count
        return np.flatnonzero(self._mask[index, :n]).tolist()

    def _first_unvisited_neighbor(self, index: int, visited: np.ndarray) -> Optional[int]:
        for v in self.adjacent_vertices(index):
            if not visited[v]:
                return v
        return None

    def _nearest_unvisited_neighbor(self, index: int, visited: np.ndarray) -> Optional[int]:
        """Unvisited neighbour with the smallest edge weight, lowest index on ties."""
        best: Optional[int] = None
        for v in self.adjacent_vertices(index):
            if visited[v]:
                continue
            if best is None or self._weights[index, v] < self._weights[index, best]:
                best = v
        return best

    def no_successors(self) -> Optional[int]:
        """Return the first vertex without outgoing edges, or None."""
        n = self.vertices_count
        sinks = np.flatnonzero(~self._mask[:n, :n].any(axis=1))
        return int(sinks[0]) if sinks.size else None

    def build_adjacency_list(self) -> List[List[int]]:
        """Return a fresh adjacency list owned by the caller."""
        return build_adjacency_list(self)

    # --- Algorithms -----------------------------------------------------------

    def dfs(self, start_index: int) -> List[int]:
        return traversal.dfs(self, start_index)

    def bfs(self, start_index: int) -> List[int]:
        return traversal.bfs(self, start_index)

    def floyd_warshall(self) -> np.ndarray:
        return allpairs.floyd_warshall(self)

    def dijkstra(self, source: int, target: int) -> List[int]:
        return shortest.dijkstra(self, source, target)

    def path_weight(self, path: Sequence[int]) -> float:
        return shortest.path_weight(self, path)

    def eulerian_path(self) -> List[int]:
        return euler.eulerian_path(self)

    def hamiltonian_path(self) -> List[int]:
        return hamilton.hamiltonian_path(self)

    def __len__(self) -> int:
        return self.vertices_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={[v.label for v in self._vertices]!r}, "
            f"edges={self.edge_count()}, max_vertices_count={self._capacity})"
        )
