"""Tests for graph file reading and writing."""

from pathlib import Path

import pytest

from graphanon.graph import (
    FileFormat,
    Graph,
    GraphFormatError,
    LabelledGraph,
    format_graph,
    generate_random_graph,
    read_graph,
    write_graph,
)
from graphanon.reproducibility import make_rng


class TestReadGraph:
    """Parsing the three text formats."""

    def test_adjacency_list(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("4\n1 2\n0\n0\n\n")
        graph = read_graph(path, FileFormat.ADJACENCY_LIST)
        assert isinstance(graph, Graph)
        assert graph.num_vertices == 4
        assert graph.edges() == [(0, 1), (0, 2)]
        assert graph.degree(3) == 0

    def test_one_directional_entries_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("3\n1 2\n2\n\n")
        graph = read_graph(path)
        assert graph.num_edges == 3

    def test_missing_trailing_lines_are_isolated(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("5\n1\n0\n")
        graph = read_graph(path)
        assert graph.num_vertices == 5
        assert graph.num_edges == 1

    def test_labelled_adjacency_list(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("3 2\n0 1\n1 0 2\n1 1\n")
        lgraph = read_graph(path, "labelled_adjacency_list")
        assert isinstance(lgraph, LabelledGraph)
        assert lgraph.num_labels == 2
        assert lgraph.labels.tolist() == [0, 1, 1]
        assert lgraph.graph.edges() == [(0, 1), (1, 2)]

    def test_edge_list(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("4\n0 1\n1 0\n2 3\n")
        graph = read_graph(path, FileFormat.EDGE_LIST)
        assert graph.edges() == [(0, 1), (2, 3)]

    def test_uses_given_rng(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("2\n1\n0\n")
        rng = make_rng(0)
        assert read_graph(path, rng=rng).rng is rng

    @pytest.mark.parametrize("content", ["", "abc\n", "-3\n", "3\n"])
    def test_bad_header(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "g.txt"
        path.write_text(content)
        fmt = "labelled_adjacency_list" if content == "3\n" else "adjacency_list"
        with pytest.raises(GraphFormatError):
            read_graph(path, fmt)

    def test_unknown_format(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("1\n\n")
        with pytest.raises(ValueError):
            read_graph(path, "graphml")


class TestWriteGraph:
    """Emission and round trips."""

    def test_neighbours_sorted(self) -> None:
        graph = Graph(3, rng=make_rng(0))
        graph.add_edge(0, 2)
        graph.add_edge(0, 1)
        assert format_graph(graph) == "3\n1 2\n0\n0\n"

    def test_edge_list_emits_each_edge_once(self) -> None:
        graph = Graph(3, rng=make_rng(0))
        graph.add_edge(2, 1)
        assert format_graph(graph, FileFormat.EDGE_LIST) == "3\n1 2\n"

    def test_labelled_requires_labels(self) -> None:
        with pytest.raises(ValueError):
            format_graph(Graph(2), FileFormat.LABELLED_ADJACENCY_LIST)

    @pytest.mark.parametrize("fmt", [FileFormat.ADJACENCY_LIST, FileFormat.EDGE_LIST])
    def test_unlabelled_round_trip(self, tmp_path: Path, fmt: FileFormat) -> None:
        graph = generate_random_graph(25, 0.1, 1, make_rng(3)).graph
        path = write_graph(graph, tmp_path / "nested" / "g.txt", fmt)
        loaded = read_graph(path, fmt)
        assert loaded.num_vertices == graph.num_vertices
        assert loaded.edges() == graph.edges()

    def test_labelled_round_trip(self, tmp_path: Path) -> None:
        lgraph = generate_random_graph(20, 0.1, 3, make_rng(3))
        path = write_graph(lgraph, tmp_path / "g.txt", FileFormat.LABELLED_ADJACENCY_LIST)
        loaded = read_graph(path, FileFormat.LABELLED_ADJACENCY_LIST)
        assert loaded.num_labels == 3
        assert loaded.labels.tolist() == lgraph.labels.tolist()
        assert loaded.graph.edges() == lgraph.graph.edges()
