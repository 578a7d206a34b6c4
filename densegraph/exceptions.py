"""
Exception hierarchy for densegraph.

Each error also derives from the built-in exception a caller would reach for
first, so ``except ValueError`` keeps working around library calls.
"""


class GraphError(Exception):
    """Base class for all densegraph errors."""


class VertexCapacityError(GraphError, OverflowError):
    """Raised when adding a vertex to a graph that is already at capacity."""


class NoPathError(GraphError, ValueError):
    """Raised when no path connects the requested vertices."""


class NoHamiltonianPathError(GraphError, RuntimeError):
    """Raised when backtracking exhausts every candidate Hamiltonian path."""


class CycleError(GraphError, RuntimeError):
    """Raised by topological sort when the graph contains a directed cycle."""


class NotSemiEulerianError(GraphError, ValueError):
    """Raised when an Eulerian path is requested from a graph without one."""


class NotConnectedError(GraphError, ValueError):
    """Raised when an operation needs a connected graph."""


class NonPositiveWeightError(GraphError, ValueError):
    """Raised when an operation needs strictly positive edge weights."""
