"""Run configuration: frozen dataclasses, hashing, JSON round-trip."""

from graphanon.config.defaults import ANCHOR_CONFIG
from graphanon.config.experiment import (
    AnonymizationConfig,
    AttributeConfig,
    GraphConfig,
    IdentityConfig,
    MetricsConfig,
)
from graphanon.config.hashing import config_hash, full_config_hash, graph_config_hash
from graphanon.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_json,
)

__all__ = [
    "ANCHOR_CONFIG",
    "AnonymizationConfig",
    "AttributeConfig",
    "GraphConfig",
    "IdentityConfig",
    "MetricsConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_json",
    "full_config_hash",
    "graph_config_hash",
]
