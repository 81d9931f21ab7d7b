"""End-to-end anonymisation run with post-condition checks and result writing.

Builds (or loads) the input graph, reports its statistics, runs exactly one
engine, verifies that the graph reached the target privacy property,
reports again, and writes result.json plus optional graph and figure files.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from graphanon.attribute.proximity import greedy, hopeful, is_alpha_proximal
from graphanon.config.experiment import AnonymizationConfig
from graphanon.graph.cache import DEFAULT_CACHE_DIR, generate_or_load_graph
from graphanon.graph.io import read_graph, write_graph
from graphanon.graph.labelled import LabelledGraph
from graphanon.graph.store import Graph
from graphanon.graph.types import FileFormat
from graphanon.identity.degree import is_anonymous
from graphanon.identity.waldo import hide_waldo
from graphanon.metrics.summary import graph_summary
from graphanon.reproducibility.seed import make_rng, set_seed
from graphanon.results.run_id import generate_run_id
from graphanon.results.schema import write_result

log = logging.getLogger(__name__)


class AnonymizationError(Exception):
    """Raised when an engine returns but the graph lacks the target property."""


@dataclass
class AnonymizationResult:
    """Outcome of run_anonymization.

    Attributes:
        run_id: Identifier of the run (name of its results directory).
        graph: The anonymised graph (labelled in attribute mode).
        scalars: The metrics.scalars block written to result.json.
        result_path: Path to result.json, or None if not written.
        output_path: Path to the anonymised graph file, if requested.
        figures: Paths of written figure files.
    """

    run_id: str
    graph: Graph | LabelledGraph
    scalars: dict[str, Any]
    result_path: Path | None = None
    output_path: Path | None = None
    figures: list[Path] = field(default_factory=list)


def load_input_graph(
    config: AnonymizationConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Graph | LabelledGraph:
    """Read the configured input file or generate/load the random graph.

    Attribute mode returns a LabelledGraph; identity mode returns the bare
    Graph (labels, if any, are dropped).
    """
    if config.graph.input_path is not None:
        loaded = read_graph(
            config.graph.input_path,
            config.graph.input_format,
            rng=make_rng(config.seed),
        )
    else:
        loaded = generate_or_load_graph(config, cache_dir)

    if config.mode == "identity" and isinstance(loaded, LabelledGraph):
        return loaded.graph
    if config.mode == "attribute" and not isinstance(loaded, LabelledGraph):
        raise ValueError("attribute mode requires a vertex-labelled graph")
    return loaded


def _hop_plot_from_summary(summary: dict[str, Any]) -> dict[int, int] | None:
    hops = summary.get("hop_plot")
    if hops is None:
        return None
    return {int(d): count for d, count in hops.items()}


def _output_format(graph: Graph | LabelledGraph, config: AnonymizationConfig) -> FileFormat:
    # Labelled graphs keep their labels; edge-list input stays an edge list.
    if isinstance(graph, LabelledGraph):
        return FileFormat.LABELLED_ADJACENCY_LIST
    if FileFormat(config.graph.input_format) is FileFormat.EDGE_LIST:
        return FileFormat.EDGE_LIST
    return FileFormat.ADJACENCY_LIST


def anonymize_attributes(lgraph: LabelledGraph, config: AnonymizationConfig) -> dict[str, Any]:
    """Run the configured alpha-proximity algorithm and verify the result."""
    alpha = config.attribute.alpha
    if config.attribute.algorithm == "greedy":
        edges_added = greedy(lgraph, alpha)
    else:
        edges_added = hopeful(lgraph, alpha)

    if not is_alpha_proximal(lgraph, alpha):
        raise AnonymizationError(
            f"{config.attribute.algorithm} finished but the graph is not "
            f"{alpha:g}-proximal"
        )
    return {"alpha": alpha, "edges_added": edges_added, "vertices_added": 0}


def anonymize_identity(graph: Graph, config: AnonymizationConfig) -> dict[str, Any]:
    """Run hide_waldo and verify k-degree anonymity.

    Without hide_new_vertices only the original vertices are checked.
    """
    k = config.identity.k
    hide_new = config.identity.hide_new_vertices
    n_before = graph.num_vertices
    m_before = graph.num_edges

    max_deficiency = hide_waldo(graph, k, hide_new_vertices=hide_new)

    checked = None if hide_new else range(n_before)
    if not is_anonymous(graph, k, vertices=checked):
        raise AnonymizationError(
            f"hide_waldo finished but the graph is not {k}-degree-anonymous"
        )
    return {
        "k": k,
        "max_deficiency": max_deficiency,
        "edges_added": graph.num_edges - m_before,
        "vertices_added": graph.num_vertices - n_before,
    }


def run_anonymization(
    config: AnonymizationConfig,
    results_dir: str | Path = "results",
    cache_dir: Path = DEFAULT_CACHE_DIR,
    output_path: str | Path | None = None,
    figures: bool = False,
    write: bool = True,
) -> AnonymizationResult:
    """Execute a full anonymisation run.

    1. Seed global RNGs and load the input graph.
    2. Summarise the original graph.
    3. Run the engine selected by config.mode and verify its post-condition.
    4. Summarise the anonymised graph.
    5. Write result.json, the anonymised graph file and figures.

    Args:
        config: Run configuration.
        results_dir: Base directory for result output.
        cache_dir: Random-graph cache directory.
        output_path: Where to write the anonymised graph (skipped if None).
        figures: Render before/after figures into the run directory.
        write: Write result.json (disable for dry library use).

    Returns:
        AnonymizationResult with the graph and reported scalars.

    Raises:
        AnonymizationError: If the anonymised graph misses the target property.
    """
    start = time.monotonic()
    set_seed(config.seed)
    run_id = generate_run_id(config)

    loaded = load_input_graph(config, cache_dir)
    graph = loaded.graph if isinstance(loaded, LabelledGraph) else loaded

    before = graph_summary(graph, config.metrics)
    degrees_before = graph.degrees()
    log.info(
        "Original graph: n=%d, m=%d, occupancy=%.6f",
        graph.num_vertices, graph.num_edges, before["occupancy"],
    )

    if config.mode == "attribute":
        engine_scalars = anonymize_attributes(loaded, config)
    else:
        engine_scalars = anonymize_identity(graph, config)

    after = graph_summary(graph, config.metrics)
    log.info(
        "Anonymised graph: n=%d, m=%d, occupancy=%.6f",
        graph.num_vertices, graph.num_edges, after["occupancy"],
    )

    occupancy_change = None
    if before["occupancy"] > 0:
        occupancy_change = (after["occupancy"] - before["occupancy"]) / before["occupancy"]

    scalars: dict[str, Any] = {
        **engine_scalars,
        "before": before,
        "after": after,
        "occupancy_change": occupancy_change,
        "elapsed_seconds": time.monotonic() - start,
    }
    result = AnonymizationResult(run_id=run_id, graph=loaded, scalars=scalars)

    if output_path is not None:
        result.output_path = write_graph(loaded, output_path, _output_format(loaded, config))

    if figures:
        from graphanon.visualization.plots import render_run_figures

        result.figures = render_run_figures(
            Path(results_dir) / run_id / "figures",
            degrees_before,
            graph.degrees(),
            _hop_plot_from_summary(before),
            _hop_plot_from_summary(after),
        )

    if write:
        result.result_path = write_result(
            config, {"scalars": scalars}, results_dir=results_dir, run_id=run_id
        )
        log.info("Result written to %s", result.result_path)

    return result
