"""Shortest-path statistics: hop plot, harmonic mean, average path length.

The hop plot runs a breadth-first search from every vertex. Sources are
split into chunks that are searched concurrently with
scipy.sparse.csgraph; each chunk produces its own partial histogram and
the partials are summed at the end, so the result does not depend on the
number of workers or on scheduling order.
"""

import logging
from collections import Counter, deque
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import shortest_path

from graphanon.graph.store import Graph
from graphanon.graph.types import HopPlot

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 256


def _hop_counts(adj: scipy.sparse.csr_matrix, sources: np.ndarray) -> Counter:
    """Partial hop plot for a chunk of BFS sources."""
    dist = shortest_path(adj, directed=False, unweighted=True, indices=sources)
    reachable = dist[np.isfinite(dist) & (dist > 0)].astype(np.int64)
    lengths, counts = np.unique(reachable, return_counts=True)
    return Counter(dict(zip(lengths.tolist(), counts.tolist())))


def hop_plot(
    graph: Graph,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> HopPlot:
    """Histogram of shortest-path lengths over all reachable ordered pairs.

    Args:
        graph: Graph to measure.
        workers: Number of threads searching source chunks concurrently.
        chunk_size: Sources per chunk (bounds memory at chunk_size * n).

    Returns:
        Mapping from path length d >= 1 to the number of ordered pairs
        (u, v) whose shortest path has exactly d edges. Unreachable pairs
        are absent.
    """
    n = graph.num_vertices
    if n == 0 or graph.num_edges == 0:
        return {}

    adj = graph.adjacency_matrix()
    chunks = [
        np.arange(start, min(start + chunk_size, n))
        for start in range(0, n, chunk_size)
    ]

    total: Counter = Counter()
    if workers <= 1:
        for chunk in chunks:
            total.update(_hop_counts(adj, chunk))
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for partial in pool.map(lambda c: _hop_counts(adj, c), chunks):
                total.update(partial)

    log.debug(
        "Hop plot over %d sources in %d chunks: %d reachable pairs",
        n, len(chunks), sum(total.values()),
    )
    return dict(sorted(total.items()))


def harmonic_mean(graph: Graph, hops: HopPlot) -> float:
    """n(n-1) divided by the sum of count_d / d; -1.0 if the hop plot is empty."""
    h = sum(count / d for d, count in hops.items())
    if h == 0:
        return -1.0
    n = graph.num_vertices
    return n * (n - 1) / h


def average_path_length(
    graph: Graph, hops: HopPlot, include_self_paths: bool = False
) -> float:
    """Mean shortest-path length over reachable ordered pairs.

    Args:
        graph: Graph the hop plot was computed for.
        hops: Output of hop_plot().
        include_self_paths: Also count the n zero-length (u, u) paths in
            the denominator.

    Returns:
        The weighted mean distance, or -1.0 when there are no pairs at all.
    """
    total_length = sum(d * count for d, count in hops.items())
    num_pairs = sum(hops.values())
    if include_self_paths:
        num_pairs += graph.num_vertices
    if num_pairs == 0:
        return -1.0
    return total_length / num_pairs


def calculate_path_length(graph: Graph, u: int, v: int) -> int:
    """Shortest-path length from u to v by plain BFS; -1 if disconnected."""
    if u == v:
        return 0
    visited = {u}
    queue = deque([(u, 0)])
    while queue:
        x, d = queue.popleft()
        for y in graph.neighbours(x):
            if y == v:
                return d + 1
            if y not in visited:
                visited.add(y)
                queue.append((y, d + 1))
    return -1


def average_path_length_brute_force(
    graph: Graph, include_self_paths: bool = False
) -> float:
    """Average path length from one BFS per ordered pair.

    Slow; used to cross-check hop_plot() and average_path_length().
    """
    n = graph.num_vertices
    total_length = 0
    num_pairs = n if include_self_paths else 0
    for u in range(n):
        for v in range(n):
            if u == v:
                continue
            d = calculate_path_length(graph, u, v)
            if d > 0:
                total_length += d
                num_pairs += 1
    if num_pairs == 0:
        return -1.0
    return total_length / num_pairs
