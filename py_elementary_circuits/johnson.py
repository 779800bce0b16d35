#!/usr/bin/env python3

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic

from .graph import DirectedGraph
from .log import logger
from .scc import Decomposer, tarjan
from .type_defs import IllegalStateError, T

NO_MIN_LIMIT = -1
NO_MAX_LIMIT = sys.maxsize


def _induced_subgraph(
    component: Sequence[T] | None,
    graph: DirectedGraph[T] | None,
) -> DirectedGraph[T]:
    if component is None or graph is None:
        raise IllegalStateError("component and graph are required")
    members = frozenset(component)
    return DirectedGraph.from_edges(
        (v, w) for v in component for w in graph.neighbors(v) if w in members
    )


def _has_circuit(component: Sequence[T], graph: DirectedGraph[T]) -> bool:
    # A singleton component is only cyclic by a self-loop
    return len(component) > 1 or graph.has_edge(component[0], component[0])


def min_scc(
    graph: DirectedGraph[T] | None,
    min_circuit: int | None,
    decompose: Decomposer = tarjan,
) -> DirectedGraph[T]:
    """Return the strongly connected component which contains the smallest vertex

    Components with less than 'min_circuit' vertices cannot contain circuits of
    the requested length, and acyclic singletons cannot contain any circuit at
    all; both are skipped. The chosen component is returned as the subgraph
    induced by its vertices. An empty graph means there is nothing left to
    search.
    """
    if graph is None or min_circuit is None:
        raise IllegalStateError("graph and min_circuit are required")

    candidates = [
        component
        for component in decompose(graph)
        if len(component) >= min_circuit and _has_circuit(component, graph)
    ]
    if not candidates:
        return DirectedGraph()

    return _induced_subgraph(min(candidates, key=min), graph)


def subgraph_from(ref: T | None, graph: DirectedGraph[T] | None) -> DirectedGraph[T]:
    """Return the subgraph induced by all vertices greater than 'ref'

    Vertices without edges in the resulting subgraph are not part of it; they
    cannot contribute to any circuit. If 'ref' is None all edges are kept.
    """
    if graph is None:
        raise IllegalStateError("graph is required")
    if ref is None:
        return graph.induced_subgraph(lambda v: True)
    return graph.induced_subgraph(lambda v: ref < v)


@dataclass
class SearchState(Generic[T]):
    blocked: dict[T, bool]
    pending: dict[T, list[T]]
    path: list[T] = field(default_factory=list)

    @classmethod
    def for_graph(cls, graph: DirectedGraph[T]) -> SearchState[T]:
        return cls(
            blocked={v: False for v in graph},
            pending={v: [] for v in graph},
        )

    def enter(self, vertex: T) -> None:
        self.path.append(vertex)
        self.blocked[vertex] = True

    def leave(self, graph: DirectedGraph[T], vertex: T, found: bool) -> None:
        if found:
            self.unblock(vertex)
        else:
            # 'vertex' stays blocked until one of its neighbors gets unblocked
            for w in graph.neighbors(vertex):
                if vertex not in (pending := self.pending[w]):
                    pending.append(vertex)
        self.path.pop()

    def unblock(self, vertex: T) -> None:
        self.blocked[vertex] = False
        vertices = [vertex]
        while vertices:
            pending = self.pending[vertices.pop()]
            for w in pending:
                if self.blocked[w]:
                    self.blocked[w] = False
                    vertices.append(w)
            pending.clear()


@dataclass
class _Frame(Generic[T]):
    vertex: T
    neighbors: Iterator[T]
    found: bool = False


def search_circuits(
    graph: DirectedGraph[T] | None,
    root: T,
    state: SearchState[T],
    min_circuit: int = NO_MIN_LIMIT,
    max_circuit: int = NO_MAX_LIMIT,
) -> Iterator[tuple[T, ...]]:
    """Yield all elementary circuits through 'root' within 'graph'

    This is the blocking depth first search of Johnson's algorithm. A vertex
    from which 'root' could not be reached again remains blocked until a
    vertex it depends on takes part in a circuit. Each yielded circuit starts
    with 'root'; the closing edge back to 'root' is implied.
    """
    if graph is None:
        raise IllegalStateError("graph is required")
    if not graph:
        return

    state.enter(root)
    frames = [_Frame(root, iter(graph.neighbors(root)))]
    while frames:
        frame = frames[-1]
        for w in frame.neighbors:
            if w == root:
                if min_circuit <= len(state.path) <= max_circuit:
                    yield tuple(state.path)
                frame.found = True
            elif not state.blocked[w]:
                state.enter(w)
                frames.append(_Frame(w, iter(graph.neighbors(w))))
                break
        else:
            frames.pop()
            state.leave(graph, frame.vertex, frame.found)
            if frames and frame.found:
                frames[-1].found = True


def iter_circuits(
    graph: DirectedGraph[T] | Mapping[T, Sequence[T]] | None,
    min_circuit: int | None = NO_MIN_LIMIT,
    max_circuit: int | None = NO_MAX_LIMIT,
    decompose: Decomposer | None = None,
) -> Iterator[tuple[T, ...]]:
    """Johnson's algorithm: iterate over all elementary circuits of 'graph'

    Only circuits with 'min_circuit' <= length <= 'max_circuit' are yielded.
    Every circuit is yielded exactly once, starting with its smallest vertex.
    The circuits are computed lazily; stop consuming to stop the search.

    See D. B. Johnson, "Finding all the elementary circuits of a directed graph",
    SIAM J. Comput. 4 (1975).
    """
    if graph is None:
        raise IllegalStateError("graph is required")

    original = graph if isinstance(graph, DirectedGraph) else DirectedGraph.from_mapping(graph)
    lower = NO_MIN_LIMIT if min_circuit is None else min_circuit
    upper = NO_MAX_LIMIT if max_circuit is None else max_circuit

    if lower > upper:
        logger.debug("No circuits of length between %d and %d", lower, upper)
        return iter(())

    return _iter_circuits(original, lower, upper, tarjan if decompose is None else decompose)


def _iter_circuits(
    original: DirectedGraph[T],
    lower: int,
    upper: int,
    decompose: Decomposer,
) -> Iterator[tuple[T, ...]]:
    working = min_scc(original, lower, decompose)
    while working:
        root = min(working)
        logger.debug(
            "Search circuits from %r in component of %d vertices",
            root,
            len(working),
        )
        yield from search_circuits(working, root, SearchState.for_graph(working), lower, upper)
        working = min_scc(subgraph_from(root, original), lower, decompose)


def find_circuits(
    graph: DirectedGraph[T] | Mapping[T, Sequence[T]] | None,
    min_circuit: int | None = NO_MIN_LIMIT,
    max_circuit: int | None = NO_MAX_LIMIT,
    decompose: Decomposer | None = None,
) -> list[tuple[T, ...]]:
    circuits = list(iter_circuits(graph, min_circuit, max_circuit, decompose))
    logger.debug("Found %d circuits", len(circuits))
    return circuits


def count_circuits(
    graph: DirectedGraph[T] | Mapping[T, Sequence[T]] | None,
    min_circuit: int | None = NO_MIN_LIMIT,
    max_circuit: int | None = NO_MAX_LIMIT,
    decompose: Decomposer | None = None,
) -> int:
    return sum(1 for _ in iter_circuits(graph, min_circuit, max_circuit, decompose))
