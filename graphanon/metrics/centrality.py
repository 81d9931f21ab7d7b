"""Subgraph centrality from traces of adjacency-matrix powers.

COST: builds the dense n x n adjacency matrix and multiplies it limit - 1
times, i.e. O(n^2) memory and O(limit * n^3) time. Callers choose n and
limit accordingly; nothing here guards against exhausting memory.
"""

import logging
import math

import numpy as np

from graphanon.graph.store import Graph

log = logging.getLogger(__name__)


def subgraph_centrality(graph: Graph, limit: int) -> float:
    """Average over vertices of the closed-walk sum trace(A^l) / l!, l = 2..limit.

    Args:
        graph: Graph to measure.
        limit: Longest closed walk considered.

    Returns:
        The mean subgraph centrality, or 0.0 for an empty graph.
    """
    n = graph.num_vertices
    if n == 0:
        return 0.0

    log.debug(
        "Subgraph centrality: dense %dx%d matrix (%.1f MiB per buffer), limit=%d",
        n, n, n * n * 8 / 2**20, limit,
    )
    adjacency = graph.adjacency_matrix().toarray()
    power = adjacency.copy()
    summation = 0.0
    for length in range(2, limit + 1):
        power = adjacency @ power
        summation += float(np.trace(power)) / math.factorial(length)

    return summation / n
