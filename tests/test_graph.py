# tests/test_graph.py
from __future__ import annotations

import pytest

from eventnest.models import AdjacencyList, SetView, VertexNotFoundError


def test_remove_destination_vertex():
    g = AdjacencyList()
    g.add_vertex('A')
    g.add_vertex('B')
    g.add_edge('A', 'B')
    assert g.remove_vertex('B') is True
    assert g.contains_vertex('A') is True
    assert g.contains_vertex('B') is False
    assert g.get_edge_count() == 0


def test_edges_are_directed():
    g = AdjacencyList()
    assert g.add_edge('a', 'b') is True
    assert g.contains_edge('a', 'b')
    assert not g.contains_edge('b', 'a')


def test_add_edge_creates_missing_endpoints():
    g = AdjacencyList()
    g.add_edge('x', 'y')
    assert g.get_vertex_count() == 2
    assert g.get_vertices() == {'x', 'y'}


def test_duplicate_edge_is_a_no_op():
    g = AdjacencyList()
    assert g.add_edge('a', 'b') is True
    assert g.add_edge('a', 'b') is False
    assert g.get_edge_count() == 1
    assert g.get_neighbors('a').to_list() == ['b']


def test_self_loop_is_refused_without_side_effects():
    g = AdjacencyList()
    assert g.add_edge('a', 'a') is False
    assert g.is_empty()
    assert g.get_edge_count() == 0


def test_duplicate_vertex():
    g = AdjacencyList()
    assert g.add_vertex('a') is True
    assert g.add_vertex('a') is False
    assert g.get_vertex_count() == 1


def test_remove_vertex_cascades_both_directions():
    g = AdjacencyList()
    g.add_edge('a', 'b')
    g.add_edge('b', 'a')
    g.add_edge('c', 'a')
    g.add_edge('a', 'c')
    g.add_edge('b', 'c')
    assert g.get_edge_count() == 5

    assert g.remove_vertex('a') is True
    assert g.get_edge_count() == 1
    assert g.contains_edge('b', 'c')
    assert g.get_neighbors('c').is_empty()
    assert 'a' not in g


def test_remove_missing_vertex_and_edge():
    g = AdjacencyList()
    g.add_edge('a', 'b')
    assert g.remove_vertex('zzz') is False
    assert g.remove_edge('b', 'a') is False
    assert g.remove_edge('zzz', 'a') is False
    assert g.remove_edge('a', 'b') is True
    assert g.get_edge_count() == 0
    assert g.get_vertex_count() == 2


def test_get_neighbors_of_missing_vertex():
    g = AdjacencyList()
    with pytest.raises(VertexNotFoundError):
        g.get_neighbors('ghost')
    with pytest.raises(KeyError):
        g.get_neighbors('ghost')


def test_contains_edge_for_missing_source():
    assert AdjacencyList().contains_edge('a', 'b') is False


@pytest.mark.parametrize('call', [
    lambda g: g.add_vertex(None),
    lambda g: g.add_edge('a', None),
    lambda g: g.add_edge(None, 'a'),
    lambda g: g.contains_vertex(None),
    lambda g: g.contains_edge(None, 'a'),
    lambda g: g.remove_vertex(None),
    lambda g: g.remove_edge('a', None),
    lambda g: g.get_neighbors(None),
    lambda g: g.put_if_absent(None),
])
def test_none_vertex_rejected(call):
    g = AdjacencyList()
    with pytest.raises(ValueError):
        call(g)
    assert g.is_empty()


def test_put_if_absent_reports_existence():
    g = AdjacencyList()
    assert g.put_if_absent('a') is False
    assert g.put_if_absent('a') is True
    assert g.get_vertex_count() == 1


def test_clear():
    g = AdjacencyList()
    g.add_edge('a', 'b')
    g.clear()
    assert g.is_empty()
    assert g.get_edge_count() == 0
    assert len(g) == 0


def test_set_view_keeps_first_occurrences():
    view = SetView([3, 1, 3, 2, 1])
    assert view.to_list() == [3, 1, 2]
    assert len(view) == 3
    assert 2 in view
    view.add(1)
    assert len(view) == 3
    view.add(4)
    assert list(view) == [3, 1, 2, 4]
    view.discard(3)
    assert view == {1, 2, 4}
    with pytest.raises(KeyError):
        view.remove(99)
    view.clear()
    assert view.is_empty()
