"""Graph module providing DAG building, sealing and traversal.

This module contains:
- Digraph[T]: A mutable directed graph used as a builder
- SealedDigraph[T] / SealedDAG[T]: Immutable snapshots, the latter validated acyclic
- has_cycle: Cycle detection run when sealing
- TopologicalOrderIterator / TopologicalLevelIterator: Lazy traversals of a SealedDAG
"""

from ._access import GraphAccess
from ._digraph import Digraph
from ._sealed import SealedDAG, SealedDigraph
from ._traversal import TopologicalLevelIterator, TopologicalOrderIterator
from ._validation import has_cycle

__all__ = [
    "Digraph",
    "GraphAccess",
    "SealedDAG",
    "SealedDigraph",
    "TopologicalLevelIterator",
    "TopologicalOrderIterator",
    "has_cycle",
]
