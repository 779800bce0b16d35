#!/usr/bin/env python3

import random
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import NamedTuple

from graphviz import Digraph

from .log import logger
from .type_defs import T


class CircuitEdge(NamedTuple):
    title: str
    from_vertex: str
    to_vertex: str
    edge_color: str


def circuit_edges(circuit: Sequence[T]) -> Iterator[tuple[T, T]]:
    # circuit_edges('ABC') --> AB BC CA
    for idx, vertex in enumerate(circuit):
        yield vertex, circuit[(idx + 1) % len(circuit)]


def make_graph(filepath: Path, circuits: Sequence[tuple[T, ...]]) -> Digraph | None:
    """Write graphviz source of the circuits to 'filepath'

    Nodes are named by 'str(vertex)': distinct vertices with the same string
    representation, eg. 1 and "1", are drawn as one node.
    """
    sys.stderr.write(f"Write graph data to {filepath}\n")

    if not (edges := _make_circuits_edges(circuits)):
        logger.debug("No such edges for graph")
        return None

    d = Digraph("circuits", filename=filepath)

    with d.subgraph() as ds:
        for edge in edges:
            ds.node(edge.from_vertex)
            ds.node(edge.to_vertex)
            ds.attr("edge", color=edge.edge_color)
            ds.edge(edge.from_vertex, edge.to_vertex, edge.title)

    d.save()
    return d


def _make_circuits_edges(circuits: Sequence[tuple[T, ...]]) -> Sequence[CircuitEdge]:
    edges: set[CircuitEdge] = set()
    for nr, circuit in enumerate(circuits, start=1):
        color = "#{:02x}{:02x}{:02x}".format(  # pylint: disable=consider-using-f-string
            random.randint(50, 200),
            random.randint(50, 200),
            random.randint(50, 200),
        )
        for from_vertex, to_vertex in circuit_edges(circuit):
            edges.add(
                CircuitEdge(
                    f"{str(nr)} ({len(circuit)})",
                    str(from_vertex),
                    str(to_vertex),
                    color,
                )
            )
    return sorted(edges)
