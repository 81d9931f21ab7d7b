"""Shared graph type aliases and file-format identifiers."""

from enum import Enum

from graphanon.labels.distribution import MAX_LABELS

__all__ = ["MAX_LABELS", "DegreeSequence", "FileFormat", "HopPlot"]

# Path length d >= 1 -> number of ordered vertex pairs at shortest distance d.
HopPlot = dict[int, int]

# (degree, vertex id) pairs sorted by descending degree.
DegreeSequence = list[tuple[int, int]]


class FileFormat(str, Enum):
    """Plain-text graph representations understood by graphanon.graph.io."""

    ADJACENCY_LIST = "adjacency_list"
    LABELLED_ADJACENCY_LIST = "labelled_adjacency_list"
    EDGE_LIST = "edge_list"
