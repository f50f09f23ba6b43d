"""Build directed graphs, seal them into validated DAGs and traverse them in topological order."""

__all__ = [
    "CycleDetectedError",
    "CyclicGraphError",
    "Digraph",
    "GraphAccess",
    "GraphError",
    "SealedDAG",
    "SealedDigraph",
    "TopologicalLevelIterator",
    "TopologicalOrderIterator",
    "UnknownVertexError",
    "has_cycle",
]

from ._errors import CycleDetectedError, CyclicGraphError, GraphError, UnknownVertexError
from ._graph import (
    Digraph,
    GraphAccess,
    SealedDAG,
    SealedDigraph,
    TopologicalLevelIterator,
    TopologicalOrderIterator,
    has_cycle,
)
