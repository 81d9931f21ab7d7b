"""Graph store, labelled graphs, text I/O and random generation."""

from graphanon.graph.generation import (
    GraphGenerationError,
    generate_random_graph,
    target_edge_count,
)
from graphanon.graph.io import GraphFormatError, format_graph, read_graph, write_graph
from graphanon.graph.labelled import LabelledGraph
from graphanon.graph.store import Graph
from graphanon.graph.types import MAX_LABELS, DegreeSequence, FileFormat, HopPlot

__all__ = [
    "DegreeSequence",
    "FileFormat",
    "Graph",
    "GraphFormatError",
    "GraphGenerationError",
    "HopPlot",
    "LabelledGraph",
    "MAX_LABELS",
    "format_graph",
    "generate_random_graph",
    "read_graph",
    "target_edge_count",
    "write_graph",
]
