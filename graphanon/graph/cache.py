"""Random-graph caching by config hash with gzip-compressed numpy storage.

Generating a random graph enumerates and shuffles all n(n-1)/2 vertex
pairs, so repeated runs over the same graph parameters and seed (e.g.
comparing greedy with hopeful, or sweeping alpha or k) reuse the cached
edges and labels instead.

The generator state after generation is stored as well, so a cache hit
continues the exact random stream a fresh generation would have.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from graphanon.config.experiment import AnonymizationConfig
from graphanon.config.hashing import graph_config_hash
from graphanon.graph.generation import generate_random_graph
from graphanon.graph.labelled import LabelledGraph
from graphanon.graph.store import Graph
from graphanon.reproducibility.seed import make_rng

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/graphs")


def graph_cache_key(config: AnonymizationConfig) -> str:
    """Cache key: graph_config_hash + seed, e.g. "a1b2c3d4e5f6a7b8_s42".

    Engine parameters (mode, alpha, k, metrics) do not affect the key.
    """
    return f"{graph_config_hash(config)}_s{config.seed}"


def _cache_path(
    config: AnonymizationConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> Path:
    return Path(cache_dir) / graph_cache_key(config)


def save_graph(
    lgraph: LabelledGraph,
    config: AnonymizationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Store a generated graph.

    Writes:
    - graph.npz: edge array (m x 2) and labels
    - metadata.json: sizes, config hash, seed, generator state

    Returns:
        Path to the cache directory for this graph.
    """
    cache_path = _cache_path(config, cache_dir)
    cache_path.mkdir(parents=True, exist_ok=True)

    edges = np.array(lgraph.graph.edges(), dtype=np.int64).reshape(-1, 2)
    np.savez_compressed(
        str(cache_path / "graph.npz"), edges=edges, labels=lgraph.labels
    )

    metadata = {
        "n": lgraph.graph.num_vertices,
        "m": lgraph.graph.num_edges,
        "num_labels": lgraph.num_labels,
        "config_hash": graph_config_hash(config),
        "seed": config.seed,
        "rng_state": lgraph.graph.rng.bit_generator.state,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with open(cache_path / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Graph cached at %s", cache_path)
    return cache_path


def load_graph(
    config: AnonymizationConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> LabelledGraph | None:
    """Load a cached graph, or None on a cache miss."""
    cache_path = _cache_path(config, cache_dir)
    for fname in ("graph.npz", "metadata.json"):
        if not (cache_path / fname).exists():
            return None

    with open(cache_path / "metadata.json") as f:
        metadata = json.load(f)

    rng = make_rng(config.seed)
    rng.bit_generator.state = metadata["rng_state"]

    graph = Graph(metadata["n"], rng=rng)
    with np.load(str(cache_path / "graph.npz")) as archive:
        edges = archive["edges"]
        labels = archive["labels"]
    for u, v in edges:
        graph.add_edge(int(u), int(v))

    log.info("Graph loaded from cache: %s", cache_path)
    return LabelledGraph(graph, metadata["num_labels"], labels)


def generate_or_load_graph(
    config: AnonymizationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> LabelledGraph:
    """Generate the configured random graph or load it from the cache."""
    key = graph_cache_key(config)

    cached = load_graph(config, cache_dir)
    if cached is not None:
        log.info("Cache hit for %s", key)
        return cached

    log.info("Cache miss for %s, generating...", key)
    lgraph = generate_random_graph(
        config.graph.n,
        config.graph.occupancy,
        config.graph.num_labels,
        make_rng(config.seed),
    )
    save_graph(lgraph, config, cache_dir)
    return lgraph
