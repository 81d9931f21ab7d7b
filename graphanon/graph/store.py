"""Simple undirected graph store with neighbour-set adjacency.

Vertices are dense integer ids in [0, n). Edges are undirected, without
self-loops or parallel edges, and are counted once per undirected pair.
Vertices are never removed; identity anonymisation only appends them.
"""

import logging

import numpy as np
import scipy.sparse

from graphanon.reproducibility.seed import make_rng

log = logging.getLogger(__name__)


class Graph:
    """Mutable, undirected, unlabelled graph.

    Owns a numpy random Generator used for every randomised mutation
    (random edges, uniform population) so that a fixed seed reproduces
    the same sequence of graph edits.

    Not thread-safe: mutating methods must not run concurrently with each
    other or with any metric computation over the same instance.
    """

    def __init__(
        self,
        num_vertices: int = 0,
        rng: np.random.Generator | None = None,
    ) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be >= 0, got {num_vertices}")
        self._adjacency: list[set[int]] = [set() for _ in range(num_vertices)]
        self._num_edges = 0
        self.rng = rng if rng is not None else make_rng()

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def neighbours(self, v: int) -> set[int]:
        """Neighbour set of v. Callers must treat it as read-only."""
        return self._adjacency[v]

    def degree(self, v: int) -> int:
        return len(self._adjacency[v])

    def degrees(self) -> np.ndarray:
        """Degree of every vertex, indexed by vertex id."""
        return np.fromiter(
            (len(nbrs) for nbrs in self._adjacency),
            dtype=np.int64,
            count=self.num_vertices,
        )

    def has_edge(self, u: int, v: int) -> bool:
        return v in self._adjacency[u]

    def edges(self) -> list[tuple[int, int]]:
        """Every undirected edge once, as (u, v) with u < v, sorted."""
        return [
            (u, v)
            for u, nbrs in enumerate(self._adjacency)
            for v in sorted(nbrs)
            if u < v
        ]

    def add_edge(self, u: int, v: int) -> bool:
        """Insert the undirected edge (u, v) if it is new.

        Returns:
            True if the edge was inserted; False for self-loops and for
            edges already present in either direction (no state change).
        """
        if u == v or v in self._adjacency[u] or u in self._adjacency[v]:
            return False
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)
        self._num_edges += 1
        return True

    def add_vertices(self, count: int) -> int:
        """Append count isolated vertices.

        Returns:
            The id of the first appended vertex.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        first = self.num_vertices
        self._adjacency.extend(set() for _ in range(count))
        return first

    def max_edges(self) -> int:
        """Number of edges in the complete graph on the current vertex set."""
        n = self.num_vertices
        return n * (n - 1) // 2

    def is_complete(self) -> bool:
        return self._num_edges == self.max_edges()

    def get_occupancy(self) -> float:
        """Fraction of the complete graph's edges that are present (0 if n == 0)."""
        max_edges = self.max_edges()
        if max_edges == 0:
            return 0.0
        return self._num_edges / max_edges

    def add_random_edge(self) -> bool:
        """Insert one uniformly random new edge.

        Rejection-samples vertex pairs until an insertable one is found.
        Terminates because at least one non-edge exists whenever the graph
        is not complete; a complete graph is left untouched.

        Returns:
            True if an edge was added, False if the graph was complete.
        """
        if self.is_complete():
            return False
        n = self.num_vertices
        while True:
            u, v = self.rng.integers(0, n, size=2)
            if self.add_edge(int(u), int(v)):
                return True

    def populate_uniformly(self, num_edges: int) -> bool:
        """Add num_edges uniformly random new edges, all or nothing.

        All unordered vertex pairs are shuffled and the first num_edges of
        them that are not yet edges are inserted.

        Returns:
            False (and no edges added) if fewer than num_edges non-edges
            remain; True otherwise.
        """
        if num_edges < 0 or num_edges > self.max_edges() - self._num_edges:
            return False
        if num_edges == 0:
            return True

        rows, cols = np.triu_indices(self.num_vertices, k=1)
        order = self.rng.permutation(rows.size)

        added = 0
        for idx in order:
            if self.add_edge(int(rows[idx]), int(cols[idx])):
                added += 1
                if added == num_edges:
                    return True

        # Unreachable while the edge count bookkeeping is consistent.
        log.warning(
            "populate_uniformly added only %d of %d edges", added, num_edges
        )
        return False

    def adjacency_matrix(self) -> scipy.sparse.csr_matrix:
        """Symmetric sparse 0/1 adjacency matrix (n x n, float64)."""
        n = self.num_vertices
        rows = np.fromiter(
            (u for u, nbrs in enumerate(self._adjacency) for _ in nbrs),
            dtype=np.int64,
            count=2 * self._num_edges,
        )
        cols = np.fromiter(
            (v for nbrs in self._adjacency for v in nbrs),
            dtype=np.int64,
            count=2 * self._num_edges,
        )
        data = np.ones(rows.size, dtype=np.float64)
        return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(n, n))

    def copy(self) -> "Graph":
        """Deep copy of the adjacency; the copy shares this graph's RNG."""
        clone = Graph(0, rng=self.rng)
        clone._adjacency = [set(nbrs) for nbrs in self._adjacency]
        clone._num_edges = self._num_edges
        return clone

    def __repr__(self) -> str:
        return f"Graph(n={self.num_vertices}, m={self.num_edges})"
