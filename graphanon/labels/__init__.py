"""Label distributions over a finite vertex-label alphabet."""

from graphanon.labels.distribution import LD_INCOMPARABLE, MAX_LABELS, LabelDistribution

__all__ = ["LD_INCOMPARABLE", "MAX_LABELS", "LabelDistribution"]
