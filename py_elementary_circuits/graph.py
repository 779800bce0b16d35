#!/usr/bin/env python3

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Final, Generic

from .type_defs import T


class DirectedGraph(Generic[T]):
    """Directed graph without weights, isolated vertices or duplicate edges.

    Vertices are identified by their payloads, ie. two payloads which are equal
    denote the same vertex. Vertices only come into existence via 'add_edge';
    a vertex which is only the target of edges has no neighbors.
    The order of the neighbors of a vertex is the order of insertion.
    """

    def __init__(self) -> None:
        self._adjacency: Final[dict[T, list[T]]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> DirectedGraph[T]:
        graph: DirectedGraph[T] = cls()
        for from_vertex, to_vertex in edges:
            graph.add_edge(from_vertex, to_vertex)
        return graph

    @classmethod
    def from_mapping(cls, mapping: Mapping[T, Sequence[T]]) -> DirectedGraph[T]:
        return cls.from_edges((v, w) for v, ws in mapping.items() for w in ws)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._adjacency!r})"

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[T]:
        return iter(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectedGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def add_edge(self, from_vertex: T, to_vertex: T) -> None:
        neighbors = self._adjacency.setdefault(from_vertex, [])
        self._adjacency.setdefault(to_vertex, [])
        if to_vertex not in neighbors:
            neighbors.append(to_vertex)

    def vertices(self) -> Sequence[T]:
        return list(self._adjacency)

    def neighbors(self, vertex: T) -> Sequence[T]:
        return self._adjacency[vertex]

    def has_edge(self, from_vertex: T, to_vertex: T) -> bool:
        return to_vertex in self._adjacency.get(from_vertex, ())

    def edges(self) -> Iterator[tuple[T, T]]:
        for v, ws in self._adjacency.items():
            for w in ws:
                yield v, w

    def induced_subgraph(self, predicate: Callable[[T], bool]) -> DirectedGraph[T]:
        # Vertices which satisfy the predicate but lose all their edges are dropped
        return DirectedGraph.from_edges(
            (v, w) for v, w in self.edges() if predicate(v) and predicate(w)
        )
