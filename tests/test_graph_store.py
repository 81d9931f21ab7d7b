"""Tests for the undirected graph store and labelled graphs."""

import numpy as np
import pytest

from graphanon.graph import Graph, LabelledGraph
from graphanon.graph.types import MAX_LABELS
from graphanon.reproducibility import make_rng


def _complete_graph(n: int) -> Graph:
    graph = Graph(n, rng=make_rng(0))
    for u in range(n):
        for v in range(u + 1, n):
            graph.add_edge(u, v)
    return graph


class TestAddEdge:
    """Insertion is idempotent and symmetric."""

    def test_add_edge_then_repeat_is_noop(self) -> None:
        graph = Graph(4, rng=make_rng(0))
        assert graph.add_edge(0, 1) is True
        assert graph.num_edges == 1
        assert graph.add_edge(0, 1) is False
        assert graph.add_edge(1, 0) is False
        assert graph.num_edges == 1

    def test_self_loop_rejected(self) -> None:
        graph = Graph(3, rng=make_rng(0))
        assert graph.add_edge(2, 2) is False
        assert graph.num_edges == 0

    def test_edge_is_undirected(self) -> None:
        graph = Graph(3, rng=make_rng(0))
        graph.add_edge(2, 0)
        assert graph.has_edge(0, 2)
        assert graph.has_edge(2, 0)
        assert graph.edges() == [(0, 2)]
        assert graph.degrees().tolist() == [1, 0, 1]


class TestCompleteness:
    """Edges are counted once per undirected pair."""

    def test_complete_graph(self) -> None:
        graph = _complete_graph(5)
        assert graph.num_edges == 10
        assert graph.is_complete()
        assert graph.get_occupancy() == pytest.approx(1.0)

    def test_occupancy(self) -> None:
        graph = Graph(5, rng=make_rng(0))
        graph.add_edge(0, 1)
        graph.add_edge(1, 2)
        assert graph.get_occupancy() == pytest.approx(0.2)
        assert not graph.is_complete()

    def test_empty_graph_occupancy_is_zero(self) -> None:
        assert Graph(0).get_occupancy() == 0.0
        assert Graph(1).get_occupancy() == 0.0

    def test_add_random_edge_on_complete_graph_is_noop(self) -> None:
        graph = _complete_graph(4)
        assert graph.add_random_edge() is False
        assert graph.num_edges == 6

    def test_add_random_edge_fills_last_gap(self) -> None:
        graph = Graph(4, rng=make_rng(1))
        for u, v in _complete_graph(4).edges():
            if (u, v) != (1, 3):
                graph.add_edge(u, v)
        assert graph.add_random_edge() is True
        assert graph.has_edge(1, 3)
        assert graph.is_complete()


class TestPopulateUniformly:
    """All-or-nothing uniform edge insertion."""

    def test_adds_exact_count(self) -> None:
        graph = Graph(20, rng=make_rng(0))
        graph.add_edge(0, 1)
        assert graph.populate_uniformly(50) is True
        assert graph.num_edges == 51

    def test_fills_to_complete(self) -> None:
        graph = Graph(6, rng=make_rng(0))
        graph.add_edge(2, 3)
        assert graph.populate_uniformly(14) is True
        assert graph.is_complete()

    def test_too_many_edges_is_rejected_atomically(self) -> None:
        graph = Graph(6, rng=make_rng(0))
        graph.add_edge(2, 3)
        assert graph.populate_uniformly(15) is False
        assert graph.num_edges == 1

    def test_same_seed_same_edges(self) -> None:
        g1 = Graph(30, rng=make_rng(7))
        g2 = Graph(30, rng=make_rng(7))
        g1.populate_uniformly(40)
        g2.populate_uniformly(40)
        assert g1.edges() == g2.edges()


class TestVerticesAndCopies:
    """Vertex appends, adjacency matrices and copies."""

    def test_add_vertices_returns_first_new_id(self) -> None:
        graph = Graph(3, rng=make_rng(0))
        assert graph.add_vertices(4) == 3
        assert graph.num_vertices == 7
        assert graph.degree(6) == 0

    def test_negative_sizes_rejected(self) -> None:
        with pytest.raises(ValueError):
            Graph(-1)
        with pytest.raises(ValueError):
            Graph(2).add_vertices(-1)

    def test_adjacency_matrix_symmetric(self) -> None:
        graph = Graph(4, rng=make_rng(0))
        graph.add_edge(0, 1)
        graph.add_edge(1, 3)
        dense = graph.adjacency_matrix().toarray()
        assert np.array_equal(dense, dense.T)
        assert dense.sum() == 2 * graph.num_edges
        assert dense[1, 3] == 1.0

    def test_copy_is_independent(self) -> None:
        graph = Graph(3, rng=make_rng(0))
        graph.add_edge(0, 1)
        clone = graph.copy()
        clone.add_edge(1, 2)
        assert graph.num_edges == 1
        assert clone.num_edges == 2
        assert clone.rng is graph.rng


class TestLabelledGraph:
    """Label assignment and neighbourhood distributions."""

    def test_evenly_distribute_labels_balanced(self) -> None:
        lgraph = LabelledGraph(Graph(11, rng=make_rng(3)), num_labels=3)
        lgraph.evenly_distribute_labels()
        counts = np.bincount(lgraph.labels, minlength=3)
        assert counts.sum() == 11
        assert sorted(counts.tolist()) == [3, 4, 4]

    def test_neighbourhood_includes_vertex(self) -> None:
        graph = Graph(4, rng=make_rng(0))
        graph.add_edge(0, 1)
        graph.add_edge(0, 2)
        lgraph = LabelledGraph(graph, 2, [0, 1, 1, 0])
        assert lgraph.neighbourhood_distribution(0).frequencies.tolist() == [1, 2]
        assert lgraph.neighbourhood_distribution(3).frequencies.tolist() == [1, 0]
        assert lgraph.global_distribution().frequencies.tolist() == [2, 2]

    def test_shares_graph_rng(self) -> None:
        graph = Graph(4, rng=make_rng(0))
        lgraph = LabelledGraph(graph, 2)
        assert lgraph.graph is graph
        assert lgraph.copy().graph.rng is graph.rng

    def test_label_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="Labels must lie"):
            LabelledGraph(Graph(2), 2, [0, 2])

    def test_wrong_label_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="Expected 3 labels"):
            LabelledGraph(Graph(3), 2, [0, 1])

    @pytest.mark.parametrize("num_labels", [0, MAX_LABELS + 1])
    def test_alphabet_bounds(self, num_labels: int) -> None:
        with pytest.raises(ValueError, match="num_labels"):
            LabelledGraph(Graph(2), num_labels)
