"""Vertex-labelled graphs: a Graph plus a label assignment.

The label extension wraps a Graph rather than subclassing it. Adjacency,
occupancy, and metrics all go through `.graph`; the extension only adds
the labels and the label distributions derived from them.
"""

import logging
from collections.abc import Sequence

import numpy as np

from graphanon.graph.store import Graph
from graphanon.graph.types import MAX_LABELS
from graphanon.labels.distribution import LabelDistribution

log = logging.getLogger(__name__)


class LabelledGraph:
    """A Graph whose vertices carry integer labels in [0, num_labels).

    Labels are set at construction or by evenly_distribute_labels(); the
    anonymisation engines add edges but never relabel vertices.
    """

    def __init__(
        self,
        graph: Graph,
        num_labels: int,
        labels: Sequence[int] | np.ndarray | None = None,
    ) -> None:
        if not 1 <= num_labels <= MAX_LABELS:
            raise ValueError(
                f"num_labels must be in [1, {MAX_LABELS}], got {num_labels}"
            )
        self.graph = graph
        self.num_labels = num_labels
        if labels is None:
            self._labels = np.zeros(graph.num_vertices, dtype=np.int64)
        else:
            self._labels = np.asarray(labels, dtype=np.int64).copy()
        self._check_labels()

    def _check_labels(self) -> None:
        if self._labels.size != self.graph.num_vertices:
            raise ValueError(
                f"Expected {self.graph.num_vertices} labels, "
                f"got {self._labels.size}"
            )
        if self._labels.size and (
            self._labels.min() < 0 or self._labels.max() >= self.num_labels
        ):
            raise ValueError(
                f"Labels must lie in [0, {self.num_labels}), got range "
                f"[{self._labels.min()}, {self._labels.max()}]"
            )

    @property
    def labels(self) -> np.ndarray:
        return self._labels.copy()

    def label(self, v: int) -> int:
        return int(self._labels[v])

    def evenly_distribute_labels(self) -> None:
        """Randomly assign labels so every label occurs as equally as possible.

        Each label gets n // num_labels vertices. The remaining
        n % num_labels vertices get distinct labels chosen at random, and
        the whole assignment is shuffled across vertices.
        """
        n = self.graph.num_vertices
        rng = self.graph.rng
        per_label, remainder = divmod(n, self.num_labels)
        assignment = np.repeat(np.arange(self.num_labels), per_label)
        extra = rng.choice(self.num_labels, size=remainder, replace=False)
        assignment = np.concatenate([assignment, extra]).astype(np.int64)
        rng.shuffle(assignment)
        self._labels = assignment
        log.debug(
            "Distributed %d labels over %d vertices (%d per label, %d extra)",
            self.num_labels, n, per_label, remainder,
        )

    def global_distribution(self) -> LabelDistribution:
        """Label frequencies over every vertex in the graph."""
        counts = np.bincount(self._labels, minlength=self.num_labels)
        return LabelDistribution(counts)

    def neighbourhood_distribution(self, v: int) -> LabelDistribution:
        """Label frequencies over v and its neighbours."""
        counts = np.zeros(self.num_labels, dtype=np.int64)
        counts[self._labels[v]] += 1
        for u in self.graph.neighbours(v):
            counts[self._labels[u]] += 1
        return LabelDistribution(counts)

    def copy(self) -> "LabelledGraph":
        return LabelledGraph(self.graph.copy(), self.num_labels, self._labels)

    def __repr__(self) -> str:
        return (
            f"LabelledGraph(n={self.graph.num_vertices}, "
            f"m={self.graph.num_edges}, labels={self.num_labels})"
        )
