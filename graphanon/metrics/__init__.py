"""Graph statistics: shortest paths, clustering, subgraph centrality."""

from graphanon.metrics.centrality import subgraph_centrality
from graphanon.metrics.clustering import (
    clustering_coefficient,
    clustering_coefficient_brute_force,
)
from graphanon.metrics.paths import (
    average_path_length,
    average_path_length_brute_force,
    calculate_path_length,
    harmonic_mean,
    hop_plot,
)
from graphanon.metrics.summary import graph_summary

__all__ = [
    "average_path_length",
    "average_path_length_brute_force",
    "calculate_path_length",
    "clustering_coefficient",
    "clustering_coefficient_brute_force",
    "graph_summary",
    "harmonic_mean",
    "hop_plot",
    "subgraph_centrality",
]
