"""
densegraph - dense-graph algorithms over adjacency matrices.

This package provides:
- Graph data structures (UndirectedGraph, DirectedGraph) with a fixed vertex
  capacity and a weight matrix plus edge mask
- Traversal algorithms (DFS, BFS)
- Shortest paths (Dijkstra, Floyd-Warshall)
- Spanning trees (minimum sum, minimum product)
- Eulerian paths (Hierholzer) and Hamiltonian paths (backtracking)
- Topological sort for directed graphs

Algorithms keep their working state local to each call, so a graph can be
reused immediately after any operation.
"""

__version__ = "0.1.0"

from .allpairs import floyd_warshall
from .core import Graph, Vertex
from .directed import DirectedGraph
from .euler import eulerian_path
from .exceptions import (
    CycleError,
    GraphError,
    NoHamiltonianPathError,
    NonPositiveWeightError,
    NoPathError,
    NotConnectedError,
    NotSemiEulerianError,
    VertexCapacityError,
)
from .hamilton import hamiltonian_path
from .logging import configure_logging, get_logger, set_log_level
from .mst import minimum_product_spanning_tree, minimum_spanning_tree
from .shortest import dijkstra, path_weight
from .topological import topological_sort
from .traversal import bfs, dfs
from .undirected import UndirectedGraph
from .utils import build_adjacency_list, reconstruct_path

__all__ = [
    "Graph",
    "Vertex",
    "UndirectedGraph",
    "DirectedGraph",
    "dfs",
    "bfs",
    "dijkstra",
    "path_weight",
    "floyd_warshall",
    "minimum_spanning_tree",
    "minimum_product_spanning_tree",
    "eulerian_path",
    "hamiltonian_path",
    "topological_sort",
    "build_adjacency_list",
    "reconstruct_path",
    "GraphError",
    "VertexCapacityError",
    "NoPathError",
    "NoHamiltonianPathError",
    "CycleError",
    "NotSemiEulerianError",
    "NotConnectedError",
    "NonPositiveWeightError",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# Example usage:
# from densegraph import UndirectedGraph
#
# g = UndirectedGraph(3)
# for label in "ABC":
#     g.add_vertex(label)
# g.add_edge(0, 1, 1.0)
# g.add_edge(1, 2, 2.0)
# g.add_edge(0, 2, 5.0)
# g.dijkstra(0, 2)                        # [0, 1, 2]
# g.minimum_spanning_tree().total_weight()  # 3.0
