#!/usr/bin/env python3
"""Entry point for graph anonymisation runs.

Chains the run stages into a single command:
graph loading -> original statistics -> anonymisation -> post-condition
check -> anonymised statistics -> result writing -> figures.

Usage:
    python run_anonymization.py --config config.json
    python run_anonymization.py --mode identity --k 5 --input g.txt --format adjacency_list
    python run_anonymization.py --config config.json --alpha 0.05 --figures
    python run_anonymization.py --config config.json --dry-run
"""

import argparse
import dataclasses
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from graphanon.config import (
    ANCHOR_CONFIG,
    AnonymizationConfig,
    config_from_json,
    full_config_hash,
    graph_config_hash,
)
from graphanon.graph.types import FileFormat
from graphanon.results import generate_run_id

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def apply_overrides(
    config: AnonymizationConfig, args: argparse.Namespace
) -> AnonymizationConfig:
    """Return a copy of config with the command-line flags applied.

    Every replace() re-runs validation, so an invalid combination fails
    here rather than halfway through a run.
    """
    graph = config.graph
    if args.input is not None:
        graph = dataclasses.replace(graph, input_path=args.input)
    if args.format is not None:
        graph = dataclasses.replace(graph, input_format=args.format)

    attribute = config.attribute
    if args.alpha is not None:
        attribute = dataclasses.replace(attribute, alpha=args.alpha)
    if args.algorithm is not None:
        attribute = dataclasses.replace(attribute, algorithm=args.algorithm)

    identity = config.identity
    if args.k is not None:
        identity = dataclasses.replace(identity, k=args.k)
    if args.hide_new_vertices:
        identity = dataclasses.replace(identity, hide_new_vertices=True)

    metrics = config.metrics
    if args.workers is not None:
        metrics = dataclasses.replace(metrics, workers=args.workers)

    return dataclasses.replace(
        config,
        mode=args.mode or config.mode,
        seed=config.seed if args.seed is None else args.seed,
        graph=graph,
        attribute=attribute,
        identity=identity,
        metrics=metrics,
    )


def run(
    config: AnonymizationConfig,
    results_dir: str = "results",
    output_path: str | None = None,
    figures: bool = False,
) -> Path:
    """Execute one anonymisation run and print the occupancy summary.

    Returns:
        Path to the written result.json.
    """
    # Lazy imports to keep --dry-run fast
    from graphanon.pipeline import run_anonymization
    from graphanon.reproducibility import get_git_hash

    log.info("Seed: %d", config.seed)
    log.info("Git hash: %s", get_git_hash())

    with stage_timer("Anonymisation"):
        result = run_anonymization(
            config,
            results_dir=results_dir,
            output_path=output_path,
            figures=figures,
        )

    scalars = result.scalars
    before = scalars["before"]["occupancy"]
    after = scalars["after"]["occupancy"]
    change = scalars["occupancy_change"]
    change_str = "n/a" if change is None else f"{change:.6f}"

    print(f"\n{'=' * 60}")
    print(f"Run complete in {scalars['elapsed_seconds']:.1f}s")
    print(f"  Run:         {result.run_id}")
    print(f"  Result:      {result.result_path}")
    print(f"  Edges added: {scalars['edges_added']}")
    print(f"  Vertices added: {scalars['vertices_added']}")
    if result.output_path is not None:
        print(f"  Graph:       {result.output_path}")
    if result.figures:
        print(f"  Figures:     {len(result.figures)} files")
    print(f"{'=' * 60}")
    print(f"{before:.6f} {after:.6f} {change_str}")

    return result.result_path


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Anonymise a graph against attribute or identity disclosure"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to run config JSON file (defaults are used if omitted)",
    )
    parser.add_argument("--mode", choices=("attribute", "identity"), default=None)
    parser.add_argument("--alpha", type=float, default=None, help="Proximity threshold")
    parser.add_argument(
        "--algorithm", choices=("greedy", "hopeful"), default=None,
        help="Alpha-proximity algorithm",
    )
    parser.add_argument("--k", type=int, default=None, help="Degree anonymity level")
    parser.add_argument(
        "--hide-new-vertices",
        action="store_true",
        help="Also make the vertices added by hide_waldo k-anonymous",
    )
    parser.add_argument("--input", type=str, default=None, help="Graph file to anonymise")
    parser.add_argument(
        "--format",
        choices=[f.value for f in FileFormat],
        default=None,
        help="Format of the --input file",
    )
    parser.add_argument(
        "--output", type=str, default=None, help="Write the anonymised graph here"
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--workers", type=int, default=None, help="Threads for the hop-plot search"
    )
    parser.add_argument(
        "--figures", action="store_true", help="Render before/after figures"
    )
    parser.add_argument("--results-dir", type=str, default="results")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the run plan without anonymising",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ANCHOR_CONFIG
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())

    try:
        config = apply_overrides(config, args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    run_id = generate_run_id(config)
    print(f"Run ID:      {run_id}")
    print(f"Config hash: {full_config_hash(config)}")
    print(f"Graph hash:  {graph_config_hash(config)}")
    print()
    if config.graph.input_path is not None:
        print(f"Graph:  {config.graph.input_path} ({config.graph.input_format})")
    else:
        print(f"Graph:  random n={config.graph.n}, "
              f"occupancy={config.graph.occupancy}, labels={config.graph.num_labels}")
    if config.mode == "attribute":
        print(f"Mode:   attribute, alpha={config.attribute.alpha}, "
              f"algorithm={config.attribute.algorithm}")
    else:
        print(f"Mode:   identity, k={config.identity.k}, "
              f"hide_new_vertices={config.identity.hide_new_vertices}")
    print(f"Seed:   {config.seed}")

    if args.dry_run:
        print(f"\nRun plan for {run_id}:")
        print(f"  1. Set seed: {config.seed}")
        print("  2. Load or generate the input graph")
        print("  3. Original graph statistics")
        if config.mode == "attribute":
            print(f"  4. {config.attribute.algorithm}: alpha={config.attribute.alpha}")
        else:
            print(f"  4. hide_waldo: k={config.identity.k}")
        print("  5. Post-condition check")
        print("  6. Anonymised graph statistics")
        print(f"\nOutput: {args.results_dir}/{run_id}/")
        print("  - result.json")
        if args.figures:
            print("  - figures/ (PNG + SVG)")
        if args.output:
            print(f"  - {args.output}")
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run(
            config,
            results_dir=args.results_dir,
            output_path=args.output,
            figures=args.figures,
        )
    except Exception:
        log.exception("Anonymisation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
