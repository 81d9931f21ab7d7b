"""k-degree anonymisation by vertex addition.

Implements the augmentation of Chester et al., "Why Waldo befriended the
dummy? k-Anonymization of social networks with pseudo-nodes" (SNAM 2013):
the original vertices keep their edges and are connected to new vertices
until every original degree matches its target in the optimally
anonymised degree sequence.
"""

import logging

from graphanon.graph.store import Graph
from graphanon.identity.degree import (
    anonymize_degree_sequence,
    is_anonymous,
    retrieve_degree_sequence,
)

log = logging.getLogger(__name__)


def num_new_vertices(max_deficiency: int, k: int, hide_new_vertices: bool) -> int:
    """How many vertices hide_waldo appends for a given DP cost.

    Protecting the new vertices needs at least k of them, and an odd count
    so the cyclic pairing in _level_new_vertices can always equalise them.
    """
    if max_deficiency == 0:
        return 0
    if not hide_new_vertices:
        return max_deficiency
    count = max(max_deficiency, k)
    if count % 2 == 0:
        count += 1
    return count


def _level_new_vertices(graph: Graph, k: int, first: int, count: int, cursor: int) -> int:
    """Pair consecutive new vertices, wrapping, until the graph is k-anonymous.

    After the cyclic assignment the new vertices [first, first + cursor)
    have one more edge than the rest. Walking the cycle over the new
    vertices from the cursor and joining consecutive pairs equalises their
    degrees within one lap when the remainder is even and within two when
    it is odd; `count` being odd makes the walk visit each cycle edge once.

    Returns:
        Number of edges inserted.
    """
    added = 0
    pos = cursor
    for _ in range(count):
        if is_anonymous(graph, k):
            break
        u = first + pos % count
        v = first + (pos + 1) % count
        if graph.add_edge(u, v):
            added += 1
        pos += 2
    return added


def hide_waldo(graph: Graph, k: int, hide_new_vertices: bool = False) -> int:
    """Make the graph k-degree-anonymous by adding vertices and edges.

    1. Anonymise a copy of the degree sequence with the optimal DP.
    2. Append new isolated vertices (see num_new_vertices).
    3. In descending-degree order, connect each original vertex to as many
       new vertices as its degree deficiency, taking new vertices
       cyclically.
    4. If hide_new_vertices is set, pair up new vertices until the whole
       graph is k-anonymous.

    Without hide_new_vertices only the original vertices are guaranteed to
    be k-anonymous; the new vertices may have unique degrees.

    Args:
        graph: Graph to anonymise in place.
        k: Privacy threshold, 1 <= k <= n.
        hide_new_vertices: Also anonymise the appended vertices.

    Returns:
        The DP's max deficiency (0 if the graph was already anonymous).

    Raises:
        ValueError: If k is outside [1, n].
    """
    n = graph.num_vertices
    if not 1 <= k <= n:
        raise ValueError(f"k must be in [1, {n}], got {k}")

    sequence = retrieve_degree_sequence(graph)
    targets = [degree for degree, _ in sequence]
    max_deficiency = anonymize_degree_sequence(targets, k)
    if max_deficiency == 0:
        log.info("Graph is already %d-degree-anonymous", k)
        return 0

    count = num_new_vertices(max_deficiency, k, hide_new_vertices)
    first = graph.add_vertices(count)

    cursor = 0
    edges_added = 0
    for (degree, v), target in zip(sequence, targets):
        for _ in range(target - degree):
            if graph.add_edge(v, first + cursor):
                edges_added += 1
            cursor = (cursor + 1) % count

    if hide_new_vertices and edges_added > 0:
        edges_added += _level_new_vertices(graph, k, first, count, cursor)

    log.info(
        "hide_waldo(k=%d) added %d vertices and %d edges (max deficiency %d)",
        k, count, edges_added, max_deficiency,
    )
    return max_deficiency
