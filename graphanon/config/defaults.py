"""Anchor configuration: the default anonymisation run."""

from graphanon.config.experiment import AnonymizationConfig

# All-default values: attribute mode, greedy, alpha=0.1, random graph with
# n=100, occupancy=0.05, 2 labels, seed=42.
ANCHOR_CONFIG = AnonymizationConfig()
