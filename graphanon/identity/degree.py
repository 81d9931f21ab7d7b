"""Degree sequences and optimal k-anonymisation of a degree sequence.

The dynamic program partitions a descending degree sequence into
contiguous groups of k to 2k-1 vertices and raises every member of a group
to the group's largest degree. The partition minimises the largest
per-group spread (max - min), which is the number of new vertices the
augmentation in graphanon.identity.waldo needs.
"""

import logging
from collections.abc import Iterable

import numpy as np

from graphanon.graph.store import Graph
from graphanon.graph.types import DegreeSequence

log = logging.getLogger(__name__)


def retrieve_degree_sequence(graph: Graph) -> DegreeSequence:
    """(degree, vertex id) pairs for every vertex, sorted by descending degree."""
    degrees = graph.degrees()
    return sorted(
        ((int(d), v) for v, d in enumerate(degrees)),
        reverse=True,
    )


def is_anonymous(graph: Graph, k: int, vertices: Iterable[int] | None = None) -> bool:
    """True if every occurring degree is shared by at least k vertices.

    Args:
        graph: Graph to check.
        k: Privacy threshold.
        vertices: Optional subset of vertex ids to check; defaults to all.
    """
    degrees = graph.degrees()
    if vertices is not None:
        degrees = degrees[np.fromiter(vertices, dtype=np.int64)]
    if degrees.size == 0:
        return True
    _, counts = np.unique(degrees, return_counts=True)
    return bool(counts.min() >= k)


def anonymize_degree_sequence(degrees: list[int], k: int) -> int:
    """Rewrite a descending degree sequence in place so it is k-anonymous.

    Args:
        degrees: Degrees sorted in descending order; overwritten so every
            element equals the largest degree of its group.
        k: Minimum group size.

    Returns:
        The largest (max - min) degree spread over the chosen groups,
        i.e. the largest increase any single degree receives.

    Raises:
        ValueError: If k < 1 or k exceeds the sequence length.
    """
    n = len(degrees)
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    if n == 0:
        return 0
    if k > n:
        raise ValueError(f"k ({k}) must be <= sequence length ({n})")

    if n < 2 * k:
        top = degrees[0]
        cost = top - degrees[-1]
        degrees[:] = [top] * n
        return cost

    # cost[i]: optimal max-spread for the prefix ending at i.
    # split[i]: end of the previous group (-1 if the prefix is one group).
    cost = [0] * n
    split = [-1] * n
    for i in range(k - 1, 2 * k - 1):
        cost[i] = degrees[0] - degrees[i]

    for i in range(2 * k - 1, n):
        best_key = None
        for j in range(max(k - 1, i - 2 * k + 1), i - k + 1):
            left = cost[j]
            right = degrees[j + 1] - degrees[i]
            key = (max(left, right), left + right)
            if best_key is None or key < best_key:
                best_key = key
                split[i] = j
        cost[i] = best_key[0]

    end = n - 1
    while end >= 0:
        start = split[end] + 1
        top = degrees[start]
        for p in range(start, end + 1):
            degrees[p] = top
        end = split[end]

    log.debug("Degree sequence of %d anonymised with k=%d, cost=%d", n, k, cost[-1])
    return cost[-1]
