#!/usr/bin/env python3

from collections.abc import Callable, Iterator, Sequence
from typing import Literal

from networkx import DiGraph, strongly_connected_components

from .graph import DirectedGraph
from .type_defs import T

Decomposer = Callable[[DirectedGraph[T]], Sequence[Sequence[T]]]


def tarjan(graph: DirectedGraph[T]) -> Sequence[Sequence[T]]:
    """
    Tarjan's Algorithm (named for its discoverer, Robert Tarjan) is a graph theory algorithm
    for finding the strongly connected components of a graph.

    The depth first search keeps its own stack of (node, successors) frames, thus deep
    graphs do not hit the recursion limit.

    Based on: http://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm
    """

    index_counter: list[int] = [0]
    stack: list[T] = []
    on_stack: set[T] = set()
    lowlinks: dict[T, int] = {}
    index: dict[T, int] = {}
    result: list[Sequence[T]] = []

    def visit(node: T) -> tuple[T, Iterator[T]]:
        # set the depth index for this node to the smallest unused index
        index[node] = index_counter[0]
        lowlinks[node] = index_counter[0]
        index_counter[0] += 1
        stack.append(node)
        on_stack.add(node)
        return node, iter(graph.neighbors(node))

    for start in graph:
        if start in index:
            continue

        frames = [visit(start)]
        while frames:
            node, successors = frames[-1]
            for successor in successors:
                if successor not in index:
                    # Successor has not yet been visited; descend into it
                    frames.append(visit(successor))
                    break
                if successor in on_stack:
                    # the successor is in the stack and hence in the current
                    # strongly connected component (SCC)
                    lowlinks[node] = min(lowlinks[node], index[successor])
            else:
                frames.pop()
                if frames:
                    parent = frames[-1][0]
                    lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

                # If `node` is a root node, pop the stack and generate an SCC
                if lowlinks[node] == index[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    result.append(component)

    return result


def networkx_scc(graph: DirectedGraph[T]) -> Sequence[Sequence[T]]:
    G = DiGraph()
    G.add_nodes_from(graph.vertices())
    G.add_edges_from(graph.edges())
    return [list(component) for component in strongly_connected_components(G)]


def get_decomposer(name: Literal["tarjan", "networkx"]) -> Decomposer:
    if name == "tarjan":
        return tarjan
    if name == "networkx":
        return networkx_scc
    raise NotImplementedError(name)
