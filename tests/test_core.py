"""Tests for the core graph data structure."""

import numpy as np
import pytest

from densegraph import (
    DirectedGraph,
    UndirectedGraph,
    Vertex,
    VertexCapacityError,
    build_adjacency_list,
)
from densegraph.diagnostics import debug_context


def make_graph(cls, labels, edges, capacity=None):
    graph = cls(capacity if capacity is not None else len(labels))
    for label in labels:
        graph.add_vertex(label)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


class TestConstruction:
    """Tests for empty and pre-populated construction."""

    def test_empty_graph(self):
        """Test that a new graph has capacity but no vertices."""
        g = UndirectedGraph(5)
        assert g.max_vertices_count == 5
        assert g.vertices_count == 0
        assert len(g) == 0
        assert g.adjacency_matrix.shape == (0, 0)
        assert g.edges() == []

    def test_negative_capacity(self):
        """Test that a negative capacity is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            UndirectedGraph(-1)

    def test_add_vertex_returns_index(self):
        """Test that add_vertex appends and returns the new index."""
        g = DirectedGraph(3)
        assert g.add_vertex("A") == 0
        assert g.add_vertex("B") == 1
        assert g.vertices == (Vertex("A"), Vertex("B"))

    def test_add_vertex_past_capacity(self):
        """Test that exceeding capacity raises VertexCapacityError."""
        g = UndirectedGraph(2)
        g.add_vertex("A")
        g.add_vertex("B")
        with pytest.raises(VertexCapacityError, match="capacity 2"):
            g.add_vertex("C")
        with pytest.raises(OverflowError):
            g.add_vertex("C")
        assert g.vertices_count == 2

    def test_duplicate_labels_allowed(self):
        """Test that vertices are positional and labels may repeat."""
        g = UndirectedGraph(2)
        g.add_vertex("A")
        g.add_vertex("A")
        g.add_edge(0, 1, 2.0)
        assert g.labels([0, 1]) == ["A", "A"]
        assert g.has_edge(0, 1)

    def test_from_matrix_nonzero_cells_are_edges(self):
        """Test that from_matrix treats nonzero cells as edges by default."""
        matrix = [[0, 1, 0], [1, 0, 2], [0, 2, 0]]
        g = UndirectedGraph.from_matrix("ABC", matrix)
        assert g.vertices_count == 3
        assert g.max_vertices_count == 3
        assert g.edges() == [(0, 1, 1.0), (1, 2, 2.0)]

    def test_from_matrix_deep_copies(self):
        """Test that later changes to the inputs do not leak into the graph."""
        matrix = np.array([[0.0, 1.0], [1.0, 0.0]])
        vertices = [Vertex("A"), Vertex("B")]
        g = UndirectedGraph.from_matrix(vertices, matrix)

        matrix[0, 1] = 9.0
        vertices.append(Vertex("C"))

        assert g.weight(0, 1) == 1.0
        assert g.vertices_count == 2

    def test_from_matrix_capacity_and_count(self):
        """Test explicit capacity and active vertex count."""
        matrix = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
        g = UndirectedGraph.from_matrix("ABC", matrix, max_vertices_count=5, vertices_count=2)
        assert g.max_vertices_count == 5
        assert g.vertices_count == 2
        assert g.edges() == [(0, 1, 1.0)]
        g.add_vertex("X")
        assert g.adjacent_vertices(2) == []

    def test_from_matrix_edge_mask(self):
        """Test that an explicit mask allows zero-weight edges."""
        matrix = [[0.0, 0.0], [0.0, 0.0]]
        mask = [[False, True], [False, False]]
        g = DirectedGraph.from_matrix("AB", matrix, edge_mask=mask)
        assert g.has_edge(0, 1)
        assert g.weight(0, 1) == 0.0
        assert not g.has_edge(1, 0)

    def test_from_matrix_rejects_bad_shapes(self):
        """Test that inconsistent inputs raise ValueError."""
        with pytest.raises(ValueError, match="square"):
            UndirectedGraph.from_matrix("AB", [[0, 1, 0], [1, 0, 0]])
        with pytest.raises(ValueError, match="exceeds capacity"):
            UndirectedGraph.from_matrix("AB", [[0, 1], [1, 0]], max_vertices_count=1)
        with pytest.raises(ValueError, match="inconsistent"):
            UndirectedGraph.from_matrix("ABC", [[0, 1], [1, 0]])
        with pytest.raises(ValueError, match="edge_mask shape"):
            UndirectedGraph.from_matrix("AB", [[0, 1], [1, 0]], edge_mask=[[True]])

    def test_copy_is_independent(self):
        """Test that copy() does not share storage."""
        g = make_graph(UndirectedGraph, "AB", [(0, 1, 3.0)], capacity=3)
        clone = g.copy()
        clone.add_vertex("C")
        clone.add_edge(0, 2, 1.0)
        clone.remove_edge(0, 1)

        assert type(clone) is UndirectedGraph
        assert g.vertices_count == 2
        assert g.edges() == [(0, 1, 3.0)]

    def test_repr(self):
        """Test repr mentions class, labels and edge count."""
        g = make_graph(DirectedGraph, "AB", [(0, 1, 1.0)])
        text = repr(g)
        assert "DirectedGraph" in text
        assert "'A'" in text
        assert "edges=1" in text


class TestEdges:
    """Tests for edge storage and queries."""

    def test_zero_weight_edge_is_an_edge(self):
        """Test that a zero-weight edge is distinct from no edge."""
        g = make_graph(UndirectedGraph, "ABC", [(0, 1, 0.0)])
        assert g.has_edge(0, 1)
        assert g.has_edge(1, 0)
        assert g.weight(0, 1) == 0.0
        assert g.weight(0, 2) is None
        assert g.adjacency_matrix[0, 1] == 0.0
        assert g.edge_mask[0, 1]
        assert g.edge_count() == 1
        assert g.bfs(0) == [0, 1]

    def test_update_weight(self):
        """Test that adding an existing edge updates its weight."""
        g = make_graph(DirectedGraph, "AB", [(0, 1, 1.0)])
        g.add_edge(0, 1, 7.5)
        assert g.weight(0, 1) == 7.5
        assert g.edge_count() == 1

    def test_remove_edge(self):
        """Test edge removal clears weight and mask."""
        g = make_graph(UndirectedGraph, "AB", [(0, 1, 2.0)])
        g.remove_edge(1, 0)
        assert not g.has_edge(0, 1)
        assert g.adjacency_matrix.tolist() == [[0.0, 0.0], [0.0, 0.0]]

    def test_edges_and_total_weight(self):
        """Test edge listing order and total weight."""
        g = make_graph(UndirectedGraph, "ABC", [(2, 0, 5.0), (0, 1, 1.0), (1, 2, 2.0)])
        assert g.edges() == [(0, 1, 1.0), (0, 2, 5.0), (1, 2, 2.0)]
        assert g.total_weight() == 8.0

        d = make_graph(DirectedGraph, "AB", [(1, 0, 2.0), (0, 1, 1.0)])
        assert d.edges() == [(0, 1, 1.0), (1, 0, 2.0)]

    def test_index_errors(self):
        """Test that out-of-range indices raise IndexError."""
        g = make_graph(UndirectedGraph, "AB", [], capacity=4)
        with pytest.raises(IndexError, match="out of range"):
            g.add_edge(0, 2, 1.0)
        with pytest.raises(IndexError):
            g.deg(-1)
        with pytest.raises(IndexError):
            g.dfs(3)
        with pytest.raises(IndexError):
            g.delete_vertex(2)


class TestDeleteVertex:
    """Tests for vertex deletion."""

    def test_delete_middle_vertex_shifts(self):
        """Test that later vertices, rows and columns shift left."""
        g = make_graph(
            UndirectedGraph,
            "ABCD",
            [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0), (0, 3, 4.0)],
        )
        g.delete_vertex(1)

        assert g.labels(range(3)) == ["A", "C", "D"]
        assert g.adjacency_matrix.tolist() == [
            [0.0, 0.0, 4.0],
            [0.0, 0.0, 3.0],
            [4.0, 3.0, 0.0],
        ]
        assert g.max_vertices_count == 4

    def test_delete_then_add_starts_clean(self):
        """Test that the freed slot carries no stale edges."""
        g = make_graph(UndirectedGraph, "ABC", [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 1.0)])
        g.delete_vertex(0)
        new = g.add_vertex("Z")
        assert new == 2
        assert g.adjacent_vertices(new) == []
        assert g.edges() == [(0, 1, 1.0)]

    def test_delete_last_vertex(self):
        """Test deleting the last vertex clears its row and column."""
        g = make_graph(DirectedGraph, "ABC", [(0, 2, 1.0), (2, 1, 2.0), (0, 1, 3.0)])
        g.delete_vertex(2)
        assert g.vertices_count == 2
        assert g.edges() == [(0, 1, 3.0)]

    def test_delete_directed_preserves_direction(self):
        """Test that deletion keeps edge directions intact."""
        g = make_graph(DirectedGraph, "ABCD", [(3, 2, 1.0), (2, 0, 2.0), (1, 3, 3.0)])
        g.delete_vertex(0)
        assert g.labels(range(3)) == ["B", "C", "D"]
        assert g.edges() == [(0, 2, 3.0), (2, 1, 1.0)]

    def test_delete_only_vertex(self):
        """Test deleting down to an empty graph."""
        g = make_graph(UndirectedGraph, "A", [(0, 0, 1.0)])
        g.delete_vertex(0)
        assert g.vertices_count == 0
        assert not g.edge_mask.any()


class TestQueries:
    """Tests for degree and support queries."""

    def test_deg_counts_row(self):
        """Test base degree on an undirected graph."""
        g = make_graph(UndirectedGraph, "ABC", [(0, 1, 1.0), (0, 2, 1.0)])
        assert g.deg(0) == 2
        assert g.deg(1) == 1

    def test_contains_loop(self):
        """Test loop detection on the diagonal."""
        g = make_graph(DirectedGraph, "AB", [(0, 1, 1.0)])
        assert not g.contains_loop()
        g.add_edge(1, 1, 0.0)
        assert g.contains_loop()

    def test_adjacent_vertices_ascending(self):
        """Test that neighbours come back in ascending order."""
        g = make_graph(UndirectedGraph, "ABCD", [(0, 3, 1.0), (0, 1, 1.0), (0, 2, 1.0)])
        assert g.adjacent_vertices(0) == [1, 2, 3]

    def test_first_unvisited_neighbor(self):
        """Test the first-unvisited-neighbour helper."""
        g = make_graph(UndirectedGraph, "ABCD", [(0, 1, 1.0), (0, 3, 1.0)])
        visited = np.zeros(4, dtype=bool)
        assert g._first_unvisited_neighbor(0, visited) == 1
        visited[1] = True
        assert g._first_unvisited_neighbor(0, visited) == 3
        visited[3] = True
        assert g._first_unvisited_neighbor(0, visited) is None

    def test_nearest_unvisited_neighbor(self):
        """Test the nearest-unvisited-neighbour helper, ties to lowest index."""
        g = make_graph(
            UndirectedGraph, "ABCD", [(0, 1, 5.0), (0, 2, 2.0), (0, 3, 2.0)]
        )
        visited = np.zeros(4, dtype=bool)
        assert g._nearest_unvisited_neighbor(0, visited) == 2
        visited[2] = True
        assert g._nearest_unvisited_neighbor(0, visited) == 3
        visited[[1, 3]] = True
        assert g._nearest_unvisited_neighbor(0, visited) is None

    def test_no_successors(self):
        """Test the first-sink helper."""
        g = make_graph(DirectedGraph, "ABC", [(0, 1, 1.0), (1, 2, 1.0), (2, 0, 1.0)])
        assert g.no_successors() is None
        g.remove_edge(1, 2)
        assert g.no_successors() == 1

    def test_map_weights(self):
        """Test that map_weights transforms present edges only."""
        g = make_graph(UndirectedGraph, "ABC", [(0, 1, 1.0), (1, 2, 4.0)])
        mapped = g.map_weights(np.sqrt)
        assert mapped.weight(1, 2) == 2.0
        assert mapped.weight(0, 1) == 1.0
        assert mapped.weight(0, 2) is None
        assert g.weight(1, 2) == 4.0


class TestAdjacencyList:
    """Tests for the on-demand adjacency list."""

    def test_build_adjacency_list(self):
        """Test list contents for both variants."""
        u = make_graph(UndirectedGraph, "ABC", [(0, 2, 1.0), (0, 1, 1.0)])
        assert u.build_adjacency_list() == [[1, 2], [0], [0]]

        d = make_graph(DirectedGraph, "ABC", [(0, 2, 1.0), (2, 1, 1.0)])
        assert build_adjacency_list(d) == [[2], [], [1]]

    def test_adjacency_list_is_owned_by_caller(self):
        """Test that mutating the list does not affect the graph."""
        g = make_graph(UndirectedGraph, "AB", [(0, 1, 1.0)])
        adjacency = g.build_adjacency_list()
        g._unlink(adjacency, 0, 1)
        assert adjacency == [[], []]
        assert g.has_edge(0, 1)
        assert g.build_adjacency_list() == [[1], [0]]

    def test_adjacency_list_built_through_link_hook(self):
        """Test that every edge reaches the variant's _link once."""
        calls = []

        class RecordingGraph(UndirectedGraph):
            def _link(self, adjacency, start, end):
                calls.append((start, end))
                super()._link(adjacency, start, end)

        g = make_graph(RecordingGraph, "ABC", [(0, 1, 1.0), (2, 2, 1.0), (1, 2, 1.0)])
        assert g.build_adjacency_list() == [[1], [0, 2], [1, 2]]
        assert calls == [(0, 1), (1, 2), (2, 2)]

    def test_link_hooks(self):
        """Test the variant list hooks."""
        u = make_graph(UndirectedGraph, "AB", [])
        adjacency = u.build_adjacency_list()
        u._link(adjacency, 0, 1)
        u._link(adjacency, 1, 1)
        assert adjacency == [[1], [0, 1]]

        d = make_graph(DirectedGraph, "AB", [])
        adjacency = d.build_adjacency_list()
        d._link(adjacency, 0, 1)
        assert adjacency == [[1], []]


class TestInvariants:
    """Tests for debug-mode invariant checks."""

    def test_check_invariants_detects_stray_weight(self):
        """Test that an absent cell with weight is reported."""
        g = make_graph(DirectedGraph, "AB", [])
        g._weights[0, 1] = 3.0
        with pytest.raises(ValueError, match="has no edge"):
            g.check_invariants()

    def test_mutation_validates_in_debug_mode(self):
        """Test that mutations validate storage when debug mode is on."""
        g = make_graph(UndirectedGraph, "AB", [])
        g._mask[0, 1] = True
        g._weights[0, 1] = 1.0
        with debug_context(True):
            with pytest.raises(ValueError, match="not symmetric"):
                g.add_edge(0, 0, 1.0)

    def test_mutation_skips_validation_when_debug_off(self):
        """Test that corrupted storage goes unnoticed with debug mode off."""
        g = make_graph(UndirectedGraph, "AB", [])
        g._mask[0, 1] = True
        g._weights[0, 1] = 1.0
        with debug_context(False):
            g.add_edge(0, 0, 1.0)
        assert g.has_edge(0, 0)
