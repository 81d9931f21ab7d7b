"""Attribute-disclosure protection via alpha-proximity."""

from graphanon.attribute.proximity import (
    greedy,
    hopeful,
    is_alpha_proximal,
    max_neighbourhood_distance,
    run_greedy_iteration,
)

__all__ = [
    "greedy",
    "hopeful",
    "is_alpha_proximal",
    "max_neighbourhood_distance",
    "run_greedy_iteration",
]
