"""Lazy topological traversals over a sealed DAG."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING

from sealdag._errors import CycleDetectedError

if TYPE_CHECKING:
    from ._sealed import SealedDAG

logger = logging.getLogger(__name__)


class _FrontierWalk[T: Hashable]:
    """Frontier-by-frontier Kahn state for a single traversal.

    ``frontier`` holds the vertices whose predecessors (successors when
    reversed) have all been visited. Visiting a vertex decrements the pending
    counter of each of its successors; counters start at the successor's
    in-degree the first time it is reached, and those that drop to zero form
    the next frontier.
    """

    def __init__(self, dag: SealedDAG[T], *, reverse: bool) -> None:
        self._dag = dag
        self._reverse = reverse
        self._pending: dict[T, int] = {}
        self._visited: set[T] = set()
        self._next: dict[T, None] = {}
        self.frontier: tuple[T, ...] = dag._ordered_sinks() if reverse else dag._ordered_sources()  # noqa: SLF001

    def visit(self, vertex: T) -> None:
        if vertex in self._visited:
            raise CycleDetectedError(vertex)
        self._visited.add(vertex)

        dag = self._dag
        if self._reverse:
            successors = dag._ordered_parents(vertex)  # noqa: SLF001
        else:
            successors = dag._ordered_children(vertex)  # noqa: SLF001
        for successor in successors:
            remaining = self._pending.get(successor)
            if remaining is None:
                remaining = dag.children_count(successor) if self._reverse else dag.parents_count(successor)
            remaining -= 1
            self._pending[successor] = remaining
            if remaining == 0:
                self._next[successor] = None

    def advance(self) -> None:
        self.frontier = tuple(self._next)
        self._next = {}


class TopologicalOrderIterator[T: Hashable]:
    """Every vertex of a DAG exactly once, in topological order.

    Forward order puts the source of every edge before its target; reverse
    order puts the target first. Vertices of the same rank come out in the
    order they were inserted into the graph.

    Each call to ``iter()`` starts a new traversal with its own counters.
    Vertices are produced lazily, one per step.

    Raises:
        CycleDetectedError: While iterating, if a vertex is reached twice.
            Cannot happen for a DAG sealed with validation.

    """

    def __init__(self, dag: SealedDAG[T], *, reverse: bool = False) -> None:
        self._dag = dag
        self._reverse = reverse

    def __iter__(self) -> Iterator[T]:
        logger.debug(f"Starting {'reverse ' if self._reverse else ''}topological order over {len(self._dag)} vertices")
        walk = _FrontierWalk(self._dag, reverse=self._reverse)
        while walk.frontier:
            for vertex in walk.frontier:
                walk.visit(vertex)
                yield vertex
            walk.advance()


class TopologicalLevelIterator[T: Hashable]:
    """Vertices of a DAG grouped by rank, one tuple per level.

    In forward mode the level of a vertex is the length of the longest path
    from any source to it: 0 for vertices without parents, otherwise one more
    than the highest level among its parents. Reverse mode measures the
    longest path to any sink instead.

    Each call to ``iter()`` starts a new traversal; levels are computed
    lazily, one per step.

    Raises:
        CycleDetectedError: While iterating, if a vertex is reached twice.
            Cannot happen for a DAG sealed with validation.

    """

    def __init__(self, dag: SealedDAG[T], *, reverse: bool = False) -> None:
        self._dag = dag
        self._reverse = reverse

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        logger.debug(f"Starting {'reverse ' if self._reverse else ''}topological levels over {len(self._dag)} vertices")
        walk = _FrontierWalk(self._dag, reverse=self._reverse)
        while walk.frontier:
            level = walk.frontier
            for vertex in level:
                walk.visit(vertex)
            yield level
            walk.advance()
