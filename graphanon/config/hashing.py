"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from graphanon.config.experiment import AnonymizationConfig


def config_hash(config: Any) -> str:
    """First 16 hex characters of the SHA-256 of a dataclass's sorted JSON."""
    serialized = json.dumps(
        asdict(config),
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def graph_config_hash(config: AnonymizationConfig) -> str:
    """Hash of config.graph only; seeds and engine parameters do not affect it.

    Used together with the seed as the random-graph cache key.
    """
    return config_hash(config.graph)


def full_config_hash(config: AnonymizationConfig) -> str:
    """Hash of the whole run configuration, seed included."""
    return config_hash(config)
