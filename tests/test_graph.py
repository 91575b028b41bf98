import random
from typing import Any

import pytest

from graph import DiGraph, Graph, UndirectedGraph, graph_from_edges


def test_directed_add_and_degree():
    g = Graph[str](directed=True)
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    assert g.vertices() == ("A", "B", "C")
    assert g.neighbors("A") == ("B", "C")
    assert g.is_edge("A", "B")
    assert not g.is_edge("B", "A")
    assert g.degree_out("A") == 2
    assert g.degree_out("B") == 0
    assert g.degree_in("B") == 1
    assert g.neighbors_in("B") == ("A",)
    assert g.neighbors("B") == ()

def test_add_edge_keeps_existing_weight():
    g = Graph[int]()
    g.add_edge(1, 2, 5)
    g.add_edge(1, 2, 9)
    assert g.weight(1, 2) == 5
    g.add_edge(2, 1, 7)
    assert g.weight(2, 1) == 5

def test_update_edge_overwrites_symmetrically():
    g = Graph[int]()
    g.add_edge(1, 2, 5)
    g.update_edge(1, 2, 9)
    assert g.weight(1, 2) == 9
    assert g.weight(2, 1) == 9
    g.update_edge(3, 4, 2)
    assert g.is_vertex(3) and g.is_vertex(4)
    assert g.weight(4, 3) == 2

def test_directed_update_is_one_way():
    g = DiGraph()
    g.update_edge("x", "y", 3)
    assert g.weight("x", "y") == 3
    assert g.weight("y", "x") == 0
    assert g.is_vertex("y")

def test_undirected_symmetry_after_random_ops():
    rng = random.Random(7)
    g = UndirectedGraph()
    labels = list(range(6))
    for _ in range(500):
        a, b = rng.choice(labels), rng.choice(labels)
        op = rng.randrange(3)
        if op == 0:
            g.add_edge(a, b, rng.randint(1, 9))
        elif op == 1:
            g.update_edge(a, b, rng.randint(1, 9))
        else:
            g.remove_edge(a, b)
        for u in labels:
            for v in labels:
                assert g.is_edge(u, v) == g.is_edge(v, u)
                assert g.weight(u, v) == g.weight(v, u)

def test_remove_vertex_drops_incident_edges():
    g = Graph[str](directed=True)
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("C", "A")
    g.add_edge("C", "D")
    g.remove("C")
    assert not g.is_vertex("C")
    assert not g.is_edge("B", "C")
    for u, v, _ in g.edges():
        assert "C" not in (u, v)
    assert g.neighbors_in("A") == ()
    assert g.edges() == (("A", "B", 1),)

def test_removing_absent_things_is_noop():
    g = Graph[int]()
    g.remove_edge(1, 2)
    g.remove(3)
    assert len(g) == 0
    g.add_edge(1, 2)
    g.remove_edge(1, 5)
    g.remove_edge(5, 1)
    assert g.is_edge(1, 2)
    assert len(g) == 2

def test_absent_vertex_queries_read_as_empty():
    g = Graph[int](directed=True)
    g.add_edge(1, 2)
    assert g.weight(1, 9) == 0
    assert g.weight(9, 1) == 0
    assert not g.is_edge(9, 1)
    assert not g.is_vertex(9)
    assert g.degree(9) == 0
    assert g.degree_in(9) == 0
    assert g.degree_out(9) == 0
    assert g.neighbors(9) == ()
    assert g.neighbors_in(9) == ()

def test_add_vertex_is_idempotent():
    g = Graph[int]()
    g.add_edge(1, 2)
    g.add_vertex(1)
    g.add_vertex(3)
    g.add_vertex(3)
    assert g.is_edge(1, 2)
    assert g.vertices() == (1, 2, 3)
    assert g.degree(3) == 0

def test_vertices_and_neighbors_sorted():
    g = graph_from_edges([(3, 1), (2, 5), (3, 0)])
    assert g.vertices() == (0, 1, 2, 3, 5)
    assert g.neighbors(3) == (0, 1)
    assert list(g) == [0, 1, 2, 3, 5]

def test_undirected_edges_listed_once():
    g = graph_from_edges([(2, 1), (1, 3, 4)])
    assert g.edges() == ((1, 2, 1), (1, 3, 4))
    assert g.edge_count() == 2
    assert g.degree(1) == 2

def test_self_loop_falls_out_of_adjacency():
    g = Graph[int]()
    g.add_edge(1, 1)
    assert g.is_edge(1, 1)
    assert g.degree(1) == 1
    assert g.edges() == ((1, 1, 1),)

def test_copy_is_independent():
    g = graph_from_edges([(1, 2), (2, 3)])
    c = g.copy()
    assert c == g
    c.remove_edge(1, 2)
    c.add_edge(3, 4)
    assert g.is_edge(1, 2)
    assert not g.is_vertex(4)
    assert c != g

def test_directed_flag_part_of_equality():
    assert Graph(directed=True) != Graph(directed=False)
    assert DiGraph() == DiGraph()

def test_len_contains():
    g = Graph[int]()
    g.add_vertex(10)
    g.add_edge(10, 20)
    assert 10 in g
    assert 30 not in g
    assert len(g) == 2

def test_str_lists_vertex_count_and_weights():
    g = graph_from_edges([(1, 2), (1, 3, 4)])
    assert str(g) == "Vertex count: 3\n1: 2(1) 3(4)\n2: 1(1)\n3: 1(4)\n"

def test_str_directed_with_isolated_vertex():
    g = DiGraph()
    g.add_edge("a", "b", 2)
    g.add_vertex("c")
    assert str(g) == "Vertex count: 3\na: b(2)\nb:\nc:\n"
    assert repr(g) == "Graph(directed, vertices=3, edges=1)"

@pytest.mark.parametrize("w", [0, -1, 1.5, True, "2"])
def test_invalid_weight_rejected(w: Any):
    g = Graph[int]()
    with pytest.raises(ValueError):
        g.add_edge(1, 2, w)
    with pytest.raises(ValueError):
        g.update_edge(1, 2, w)
    assert len(g) == 0

def test_unhashable_vertex_rejected():
    g = Graph()
    with pytest.raises(TypeError):
        g.add_vertex(["not-hashable"])
    with pytest.raises(TypeError):
        g.add_edge(1, ["not-hashable"])
