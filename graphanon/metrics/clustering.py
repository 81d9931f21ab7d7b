"""Global clustering coefficient.

Ratio of closed ordered triples (u, v, w with edges u-v, u-w and v-w) to
all ordered pairs of distinct neighbours, sum(deg(u) * (deg(u) - 1)).
"""

import logging

from graphanon.graph.store import Graph

log = logging.getLogger(__name__)


def clustering_coefficient(graph: Graph) -> float:
    """Clustering coefficient via sparse matrix products.

    The number of closed ordered triples equals the sum over edges (v, w)
    of the number of common neighbours, i.e. sum((A @ A) * A).

    Returns:
        The coefficient, or 0.0 if no vertex has two neighbours.
    """
    degrees = graph.degrees()
    possible = int((degrees * (degrees - 1)).sum())
    if possible == 0:
        return 0.0

    adj = graph.adjacency_matrix()
    closed = int(round((adj @ adj).multiply(adj).sum()))
    log.debug("Clustering: %d closed of %d possible triples", closed, possible)
    return closed / possible


def clustering_coefficient_brute_force(graph: Graph) -> float:
    """Clustering coefficient from every ordered vertex triple.

    O(n^3); used to cross-check clustering_coefficient().
    """
    n = graph.num_vertices
    closed = 0
    possible = 0
    for u in range(n):
        for v in range(n):
            if u == v or not graph.has_edge(u, v):
                continue
            for w in range(n):
                if w == u or w == v or not graph.has_edge(v, w):
                    continue
                possible += 1
                if graph.has_edge(u, w):
                    closed += 1
    if possible == 0:
        return 0.0
    return closed / possible
