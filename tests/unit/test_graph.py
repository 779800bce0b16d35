#!/usr/bin/env python3

from py_elementary_circuits.graph import DirectedGraph


def test_empty_graph() -> None:
    graph: DirectedGraph[str] = DirectedGraph()
    assert not graph
    assert not graph.vertices()
    assert not list(graph.edges())


def test_add_edge_creates_vertices() -> None:
    graph: DirectedGraph[str] = DirectedGraph()
    graph.add_edge("a", "b")

    assert len(graph) == 2
    assert "a" in graph
    assert "b" in graph
    assert graph.neighbors("a") == ["b"]
    assert not graph.neighbors("b")


def test_add_edge_is_idempotent() -> None:
    graph: DirectedGraph[str] = DirectedGraph()
    graph.add_edge("a", "b")
    graph.add_edge("a", "b")

    assert graph.neighbors("a") == ["b"]
    assert list(graph.edges()) == [("a", "b")]


def test_neighbors_keep_insertion_order() -> None:
    graph = DirectedGraph.from_edges([("a", "c"), ("a", "b"), ("a", "d"), ("a", "b")])
    assert graph.neighbors("a") == ["c", "b", "d"]


def test_has_edge() -> None:
    graph = DirectedGraph.from_edges([("a", "b"), ("b", "b")])
    assert graph.has_edge("a", "b")
    assert graph.has_edge("b", "b")
    assert not graph.has_edge("b", "a")
    assert not graph.has_edge("x", "a")


def test_from_mapping() -> None:
    graph = DirectedGraph.from_mapping({"a": ["b", "c"], "b": ["a"], "x": []})
    assert graph == DirectedGraph.from_edges([("a", "b"), ("a", "c"), ("b", "a")])
    # Vertices without edges do not exist
    assert "x" not in graph
    assert sorted(graph.vertices()) == ["a", "b", "c"]


def test_equality() -> None:
    assert DirectedGraph.from_edges([("a", "b"), ("b", "c")]) == DirectedGraph.from_edges(
        [("b", "c"), ("a", "b")]
    )
    assert DirectedGraph.from_edges([("a", "b"), ("a", "c")]) != DirectedGraph.from_edges(
        [("a", "c"), ("a", "b")]
    )
    assert DirectedGraph.from_edges([("a", "b")]) != {"a": ["b"]}


def test_induced_subgraph() -> None:
    graph = DirectedGraph.from_edges([(1, 2), (2, 3), (3, 1), (3, 4), (4, 5)])
    subgraph = graph.induced_subgraph(lambda v: v >= 3)

    assert subgraph == DirectedGraph.from_edges([(3, 4), (4, 5)])
    assert 1 not in subgraph
    # The original graph is left untouched
    assert len(graph) == 5
