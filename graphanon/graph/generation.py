"""Random labelled graphs with uniformly placed edges and balanced labels."""

import logging

import numpy as np

from graphanon.graph.labelled import LabelledGraph
from graphanon.graph.store import Graph

log = logging.getLogger(__name__)


class GraphGenerationError(Exception):
    """Raised when the requested number of edges cannot be placed."""


def target_edge_count(n: int, occupancy: float) -> int:
    """Number of undirected edges giving the requested occupancy."""
    return int(occupancy * n * (n - 1) / 2)


def generate_random_graph(
    n: int,
    occupancy: float,
    num_labels: int,
    rng: np.random.Generator,
) -> LabelledGraph:
    """Build an n-vertex graph at the given occupancy with evenly spread labels.

    Args:
        n: Number of vertices.
        occupancy: Fraction of the n(n-1)/2 possible edges to insert.
        num_labels: Label alphabet size.
        rng: Generator owned by the new graph.

    Returns:
        The generated LabelledGraph. Identity-mode callers use `.graph`.

    Raises:
        GraphGenerationError: If populate_uniformly rejects the edge count.
    """
    lgraph = LabelledGraph(Graph(n, rng=rng), num_labels)
    lgraph.evenly_distribute_labels()

    num_edges = target_edge_count(n, occupancy)
    if not lgraph.graph.populate_uniformly(num_edges):
        raise GraphGenerationError(
            f"Cannot place {num_edges} edges on {n} vertices"
        )

    log.info(
        "Random graph generated (n=%d, m=%d, labels=%d, occupancy=%.4f)",
        n, lgraph.graph.num_edges, num_labels, lgraph.graph.get_occupancy(),
    )
    return lgraph
