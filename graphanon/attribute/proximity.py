"""Alpha-proximity: protection against neighbourhood attribute disclosure.

A labelled graph is alpha-proximal when every vertex's neighbourhood label
distribution (the vertex plus its neighbours) lies within distance alpha of
the global label distribution. Both algorithms here only insert edges and
terminate because the complete graph is always alpha-proximal.

Algorithms (Chester & Srivastava, "Social network privacy for attribute
disclosure attacks", ASONAM 2011):
- hopeful: add uniformly random edges until proximal.
- greedy: Algorithm 1, connect mutually deficient vertices, falling back
  to a random edge whenever an iteration makes no progress.
"""

import logging

from graphanon.graph.labelled import LabelledGraph

log = logging.getLogger(__name__)


def max_neighbourhood_distance(lgraph: LabelledGraph) -> float:
    """Largest distance from any neighbourhood distribution to the global one."""
    global_ld = lgraph.global_distribution()
    max_distance = 0.0
    for v in range(lgraph.graph.num_vertices):
        distance = global_ld.distance(lgraph.neighbourhood_distribution(v))
        if distance > max_distance:
            max_distance = distance
    return max_distance


def is_alpha_proximal(lgraph: LabelledGraph, alpha: float) -> bool:
    """True if every neighbourhood distribution is within alpha of the global one."""
    return max_neighbourhood_distance(lgraph) <= alpha


def hopeful(lgraph: LabelledGraph, alpha: float) -> int:
    """Add random edges until the graph is alpha-proximal.

    Args:
        lgraph: Graph to anonymise in place.
        alpha: Privacy threshold.

    Returns:
        Number of edges inserted.
    """
    graph = lgraph.graph
    start_edges = graph.num_edges
    while not graph.is_complete() and not is_alpha_proximal(lgraph, alpha):
        graph.add_random_edge()

    added = graph.num_edges - start_edges
    log.info("hopeful(alpha=%g) added %d edges", alpha, added)
    return added


def _set_bits(mask: int) -> list[int]:
    """Indices of the set bits of mask, lowest first."""
    bits = []
    while mask:
        low = mask & -mask
        bits.append(low.bit_length() - 1)
        mask ^= low
    return bits


def run_greedy_iteration(lgraph: LabelledGraph, alpha: float) -> int:
    """One pass of the greedy algorithm (lines 2-4 of Algorithm 1).

    Every vertex whose neighbourhood is deficient relative to the global
    distribution is queued with its deficiency bitmask, and the queue is
    shuffled. Each queued vertex v then, for every label l it lacks,
    looks further down the queue for a vertex u labelled l that itself
    lacks v's label, and connects them. A successful connection clears
    v's label from u's mask. Labels for which no mate exists are skipped
    until the next iteration.

    Returns:
        Number of edges inserted during this pass.
    """
    graph = lgraph.graph
    global_ld = lgraph.global_distribution()

    queue: list[list[int]] = []
    for v in range(graph.num_vertices):
        defs = lgraph.neighbourhood_distribution(v).get_deficiencies(global_ld, alpha)
        if defs:
            queue.append([v, defs])

    # Random visiting order spreads new edges evenly over the deficient set.
    order = graph.rng.permutation(len(queue))
    queue = [queue[i] for i in order]

    num_added = 0
    for pos, (v, defs) in enumerate(queue):
        v_label_bit = 1 << lgraph.label(v)
        for wanted in _set_bits(defs):
            for mate in queue[pos + 1:]:
                u = mate[0]
                if not mate[1] & v_label_bit or lgraph.label(u) != wanted:
                    continue
                if graph.add_edge(v, u):
                    mate[1] ^= v_label_bit
                    num_added += 1
                    break

    log.debug(
        "Greedy iteration: %d deficient vertices, %d edges added",
        len(queue), num_added,
    )
    return num_added


def greedy(lgraph: LabelledGraph, alpha: float) -> int:
    """Make the graph alpha-proximal with the greedy algorithm.

    Repeats greedy iterations until the graph is proximal. An iteration
    that adds no edge is followed by one random edge so the loop always
    progresses towards the complete graph.

    Args:
        lgraph: Graph to anonymise in place.
        alpha: Privacy threshold.

    Returns:
        Number of edges inserted.
    """
    graph = lgraph.graph
    start_edges = graph.num_edges
    iterations = 0
    leaks_privacy = not is_alpha_proximal(lgraph, alpha)

    while leaks_privacy and not graph.is_complete():
        num_new_edges = run_greedy_iteration(lgraph, alpha)
        iterations += 1
        if is_alpha_proximal(lgraph, alpha):
            leaks_privacy = False
        elif num_new_edges == 0:
            log.debug("Greedy iteration %d stalled; adding a random edge", iterations)
            graph.add_random_edge()

    added = graph.num_edges - start_edges
    log.info(
        "greedy(alpha=%g) added %d edges in %d iterations",
        alpha, added, iterations,
    )
    return added
