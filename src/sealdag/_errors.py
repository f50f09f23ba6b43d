"""Errors raised by graph construction, sealing and traversal."""

from collections.abc import Hashable
from typing import Any


class GraphError(Exception):
    """Base class for all sealdag errors."""


class UnknownVertexError(GraphError, KeyError):
    """A vertex was queried that is not part of the graph."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        msg = f"Vertex {vertex!r} does not exist in this graph"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class CyclicGraphError(GraphError, ValueError):
    """Sealing was requested for a graph that contains a cycle.

    Attributes:
        graph: The offending graph, left untouched for inspection.

    """

    def __init__(self, graph: Any) -> None:
        self.graph = graph
        msg = "Cannot create a DAG from a cyclic graph"
        super().__init__(msg)


class CycleDetectedError(GraphError, RuntimeError):
    """A vertex was reached twice during a topological traversal.

    Never raised for a snapshot that passed validation.
    """

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        msg = f"Cycle detected in acyclic graph at vertex {vertex!r}"
        super().__init__(msg)
