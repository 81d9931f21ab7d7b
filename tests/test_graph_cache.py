"""Tests for random-graph generation and caching by config hash."""

import json
from dataclasses import replace
from pathlib import Path

import numpy as np
import pytest

from graphanon.config import ANCHOR_CONFIG, AttributeConfig, GraphConfig, graph_config_hash
from graphanon.graph import GraphGenerationError, generate_random_graph, target_edge_count
from graphanon.graph.cache import (
    generate_or_load_graph,
    graph_cache_key,
    load_graph,
    save_graph,
)
from graphanon.reproducibility import make_rng

SMALL_CONFIG = replace(ANCHOR_CONFIG, graph=GraphConfig(n=30, occupancy=0.1, num_labels=3))


class TestGeneration:
    """Random labelled graphs with a target occupancy."""

    def test_edge_count_and_labels(self) -> None:
        lgraph = generate_random_graph(30, 0.1, 3, make_rng(0))
        assert lgraph.graph.num_vertices == 30
        assert lgraph.graph.num_edges == target_edge_count(30, 0.1) == 43
        assert sorted(np.bincount(lgraph.labels).tolist()) == [10, 10, 10]

    def test_deterministic_for_seed(self) -> None:
        g1 = generate_random_graph(20, 0.2, 2, make_rng(5))
        g2 = generate_random_graph(20, 0.2, 2, make_rng(5))
        assert g1.graph.edges() == g2.graph.edges()
        assert g1.labels.tolist() == g2.labels.tolist()

    def test_full_occupancy_is_complete(self) -> None:
        assert generate_random_graph(8, 1.0, 2, make_rng(0)).graph.is_complete()

    def test_impossible_edge_count_raises(self) -> None:
        with pytest.raises(GraphGenerationError):
            generate_random_graph(5, 1.5, 1, make_rng(0))


class TestCacheKey:
    """Tests for cache key computation."""

    def test_cache_key_includes_seed_and_graph_hash(self) -> None:
        key = graph_cache_key(SMALL_CONFIG)
        assert key == f"{graph_config_hash(SMALL_CONFIG)}_s{SMALL_CONFIG.seed}"

    def test_cache_key_differs_for_different_seed(self) -> None:
        assert graph_cache_key(SMALL_CONFIG) != graph_cache_key(replace(SMALL_CONFIG, seed=7))

    def test_cache_key_ignores_engine_params(self) -> None:
        """Mode, alpha and description do not affect the cache key."""
        cfg2 = replace(
            SMALL_CONFIG,
            mode="identity",
            attribute=AttributeConfig(alpha=0.5),
            description="sweep",
        )
        assert graph_cache_key(SMALL_CONFIG) == graph_cache_key(cfg2)


class TestSaveLoad:
    """Tests for graph save/load round-trip."""

    def test_miss_returns_none(self, tmp_path: Path) -> None:
        assert load_graph(SMALL_CONFIG, tmp_path) is None

    def test_save_and_load_roundtrip(self, tmp_path: Path) -> None:
        lgraph = generate_random_graph(30, 0.1, 3, make_rng(SMALL_CONFIG.seed))
        cache_path = save_graph(lgraph, SMALL_CONFIG, tmp_path)

        assert (cache_path / "graph.npz").exists()
        metadata = json.loads((cache_path / "metadata.json").read_text())
        assert metadata["n"] == 30
        assert metadata["m"] == lgraph.graph.num_edges

        loaded = load_graph(SMALL_CONFIG, tmp_path)
        assert loaded is not None
        assert loaded.graph.edges() == lgraph.graph.edges()
        assert loaded.labels.tolist() == lgraph.labels.tolist()
        assert loaded.num_labels == 3

    def test_rng_state_restored(self, tmp_path: Path) -> None:
        lgraph = generate_random_graph(30, 0.1, 3, make_rng(SMALL_CONFIG.seed))
        save_graph(lgraph, SMALL_CONFIG, tmp_path)
        loaded = load_graph(SMALL_CONFIG, tmp_path)
        assert loaded.graph.rng.random(5).tolist() == lgraph.graph.rng.random(5).tolist()

    def test_generate_or_load_hit_matches_miss(self, tmp_path: Path) -> None:
        first = generate_or_load_graph(SMALL_CONFIG, tmp_path)
        assert (tmp_path / graph_cache_key(SMALL_CONFIG) / "metadata.json").exists()
        second = generate_or_load_graph(SMALL_CONFIG, tmp_path)
        assert second.graph.edges() == first.graph.edges()
        assert second.labels.tolist() == first.labels.tolist()
