"""Label distributions: normalised histograms over a finite label alphabet.

A distribution stores absolute label frequencies and exposes relative
frequencies, the pairwise distance used by alpha-proximity, and the
per-label deficiency bitmask used by the greedy algorithm.
"""

from collections.abc import Sequence

import numpy as np

# Bitmask width used for per-vertex label deficiencies (bit i = label i).
MAX_LABELS = 32

# Returned by LabelDistribution.distance for distributions of unequal length.
LD_INCOMPARABLE = -1.0


class LabelDistribution:
    """Absolute frequencies per label plus their total."""

    def __init__(self, frequencies: Sequence[int] | np.ndarray) -> None:
        self._frequencies = np.asarray(frequencies, dtype=np.int64).copy()
        self._sum = int(self._frequencies.sum())

    @classmethod
    def zeros(cls, length: int) -> "LabelDistribution":
        """All-zero distribution over `length` labels."""
        return cls(np.zeros(length, dtype=np.int64))

    def __len__(self) -> int:
        return self._frequencies.size

    @property
    def total(self) -> int:
        return self._sum

    @property
    def frequencies(self) -> np.ndarray:
        return self._frequencies.copy()

    def relative_frequencies(self) -> np.ndarray:
        """All relative frequencies; all zeros when the total is zero."""
        if self._sum == 0:
            return np.zeros(self._frequencies.size, dtype=np.float64)
        return self._frequencies / self._sum

    def get_frequency(self, pos: int) -> float:
        """Relative frequency of label pos (0.0 if pos is out of range or empty)."""
        if pos < 0 or pos >= self._frequencies.size or self._sum == 0:
            return 0.0
        return float(self._frequencies[pos] / self._sum)

    def distance(self, other: "LabelDistribution") -> float:
        """Sum of absolute relative-frequency differences over all but the last label.

        The last label is linearly determined by the others and is left out.
        Returns LD_INCOMPARABLE when the lengths differ.
        """
        if len(self) != len(other):
            return LD_INCOMPARABLE
        diff = self.relative_frequencies()[:-1] - other.relative_frequencies()[:-1]
        return float(np.abs(diff).sum())

    def get_deficiencies(self, other: "LabelDistribution", alpha: float) -> int:
        """Bitmask of labels this distribution under-represents relative to other.

        Bit i is set when other's relative frequency of label i exceeds
        this one's. The absolute differences are summed over every label;
        if that total is below alpha the distribution counts as proximal
        and 0 is returned.

        Raises:
            ValueError: If the alphabet is wider than the MAX_LABELS-bit
                mask or the lengths differ.
        """
        if len(self) > MAX_LABELS:
            raise ValueError(
                f"Deficiency bitmask supports at most {MAX_LABELS} labels, "
                f"got {len(self)}"
            )
        if len(self) != len(other):
            raise ValueError(
                f"Cannot compare distributions of length {len(self)} "
                f"and {len(other)}"
            )

        diff = other.relative_frequencies() - self.relative_frequencies()
        if float(np.abs(diff).sum()) < alpha:
            return 0

        deficiencies = 0
        for label in np.flatnonzero(diff > 0):
            deficiencies |= 1 << int(label)
        return deficiencies

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelDistribution):
            return NotImplemented
        return np.array_equal(self._frequencies, other._frequencies)

    def __repr__(self) -> str:
        return f"LabelDistribution({self._frequencies.tolist()})"
