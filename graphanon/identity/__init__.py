"""Identity-disclosure protection via k-degree anonymity."""

from graphanon.identity.degree import (
    anonymize_degree_sequence,
    is_anonymous,
    retrieve_degree_sequence,
)
from graphanon.identity.waldo import hide_waldo, num_new_vertices

__all__ = [
    "anonymize_degree_sequence",
    "hide_waldo",
    "is_anonymous",
    "num_new_vertices",
    "retrieve_degree_sequence",
]
