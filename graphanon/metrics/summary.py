"""Reporting accessors gathered into one scalar dict per graph."""

import logging
from typing import Any

from graphanon.config.experiment import MetricsConfig
from graphanon.graph.store import Graph
from graphanon.metrics.centrality import subgraph_centrality
from graphanon.metrics.clustering import clustering_coefficient
from graphanon.metrics.paths import average_path_length, harmonic_mean, hop_plot

log = logging.getLogger(__name__)


def graph_summary(graph: Graph, config: MetricsConfig) -> dict[str, Any]:
    """Compute the enabled graph statistics.

    Always reports num_vertices, num_edges and occupancy. Hop-plot based
    statistics, clustering and subgraph centrality are added when enabled
    in the config. The hop plot itself is included under "hop_plot" with
    string keys so the dict stays JSON-serialisable.
    """
    summary: dict[str, Any] = {
        "num_vertices": graph.num_vertices,
        "num_edges": graph.num_edges,
        "occupancy": graph.get_occupancy(),
    }

    if config.clustering:
        summary["clustering_coefficient"] = clustering_coefficient(graph)

    if config.hop_plot:
        hops = hop_plot(graph, workers=config.workers)
        summary["hop_plot"] = {str(d): count for d, count in hops.items()}
        summary["harmonic_mean"] = harmonic_mean(graph, hops)
        summary["average_path_length"] = average_path_length(
            graph, hops, include_self_paths=config.include_self_paths
        )

    if config.subgraph_centrality_limit > 0:
        summary["subgraph_centrality"] = subgraph_centrality(
            graph, config.subgraph_centrality_limit
        )

    log.debug("Graph summary: %s", {k: v for k, v in summary.items() if k != "hop_plot"})
    return summary
