"""Graph algorithms example: routing, trees and tours over a small network.

This example builds a weighted road network between six towns, runs the
shortest-path and spanning-tree algorithms on it, then looks for Eulerian and
Hamiltonian walks. A second, directed graph shows a build-order computation.
"""

from __future__ import annotations

import numpy as np

from densegraph import (
    CycleError,
    DirectedGraph,
    NotSemiEulerianError,
    UndirectedGraph,
)


def build_road_network() -> UndirectedGraph:
    """Six towns joined by roads weighted in kilometres."""
    towns = ["Ashby", "Brook", "Carrow", "Dunmore", "Elsted", "Fenwick"]
    roads = [
        (0, 1, 7.0),
        (0, 2, 9.0),
        (0, 5, 14.0),
        (1, 2, 10.0),
        (1, 3, 15.0),
        (2, 3, 11.0),
        (2, 5, 2.0),
        (3, 4, 6.0),
        (4, 5, 9.0),
    ]

    network = UndirectedGraph(len(towns))
    for town in towns:
        network.add_vertex(town)
    for u, v, km in roads:
        network.add_edge(u, v, km)
    return network


def main() -> None:
    """Run the demo and print results."""
    network = build_road_network()
    print(network)

    # Shortest route between two towns
    route = network.dijkstra(0, 4)
    print(f"\nShortest route Ashby -> Elsted: {' -> '.join(network.labels(route))}")
    print(f"Route length: {network.path_weight(route):.1f} km")

    # All-pairs distances
    distances = network.floyd_warshall()
    print("\nAll-pairs distances (km):")
    with np.printoptions(precision=1, suppress=True):
        print(distances)

    # Cheapest set of roads keeping every town reachable
    tree = network.minimum_spanning_tree()
    print(f"\nMinimum spanning tree: {tree.edge_count()} roads, {tree.total_weight():.1f} km")
    for u, v, km in tree.edges():
        print(f"  {network.labels([u, v])[0]} - {network.labels([u, v])[1]}: {km:.1f}")

    # Tours
    print(f"\nEulerian: {network.is_eulerian()}, semi-Eulerian: {network.is_semi_eulerian()}")
    try:
        walk = network.eulerian_path()
        print(f"Eulerian walk: {network.labels(walk)}")
    except NotSemiEulerianError as exc:
        print(f"No Eulerian walk: {exc}")

    tour = network.hamiltonian_path()
    print(f"Hamiltonian path: {' -> '.join(network.labels(tour))}")

    # Build order for a small project
    tasks = DirectedGraph(5)
    for name in ["configure", "compile", "test", "package", "publish"]:
        tasks.add_vertex(name)
    for u, v in [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4)]:
        tasks.add_edge(u, v)

    order = tasks.topological_sort()
    print(f"\nBuild order: {tasks.labels(order)}")

    tasks.add_edge(4, 0)
    try:
        tasks.topological_sort()
    except CycleError as exc:
        print(f"After adding publish -> configure: {exc}")

    print("\nDone.")


if __name__ == "__main__":
    main()
