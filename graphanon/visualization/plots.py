"""Before/after comparison plots for an anonymisation run."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from graphanon.graph.types import HopPlot
from graphanon.visualization.style import (
    AFTER_COLOR,
    BEFORE_COLOR,
    apply_style,
    save_figure,
)


def plot_hop_plots(before: HopPlot, after: HopPlot) -> plt.Figure:
    """Reachable ordered pairs per shortest-path length, before vs after."""
    fig, ax = plt.subplots()
    width = 0.4
    for hops, offset, color, label in (
        (before, -width / 2, BEFORE_COLOR, "Original"),
        (after, width / 2, AFTER_COLOR, "Anonymised"),
    ):
        if hops:
            lengths = np.array(sorted(hops), dtype=np.float64)
            counts = [hops[int(d)] for d in lengths]
            ax.bar(lengths + offset, counts, width=width, color=color, label=label)
    ax.set_xlabel("Shortest-path length (hops)")
    ax.set_ylabel("Ordered vertex pairs")
    ax.set_title("Hop plot")
    ax.legend()
    return fig


def plot_degree_distributions(before: np.ndarray, after: np.ndarray) -> plt.Figure:
    """Histogram of vertex degrees, before vs after."""
    fig, ax = plt.subplots()
    top = int(max(before.max(initial=0), after.max(initial=0)))
    bins = np.arange(top + 2) - 0.5
    ax.hist(before, bins=bins, color=BEFORE_COLOR, alpha=0.6, label="Original")
    ax.hist(after, bins=bins, color=AFTER_COLOR, alpha=0.6, label="Anonymised")
    ax.set_xlabel("Degree")
    ax.set_ylabel("Vertices")
    ax.set_title("Degree distribution")
    ax.legend()
    return fig


def render_run_figures(
    output_dir: Path,
    degrees_before: np.ndarray,
    degrees_after: np.ndarray,
    hops_before: HopPlot | None = None,
    hops_after: HopPlot | None = None,
) -> list[Path]:
    """Write the degree (and, if given, hop-plot) comparison figures.

    Returns:
        Paths of every written file.
    """
    apply_style()
    written: list[Path] = []
    fig = plot_degree_distributions(degrees_before, degrees_after)
    written.extend(save_figure(fig, output_dir, "degree_distribution"))
    if hops_before is not None and hops_after is not None:
        fig = plot_hop_plots(hops_before, hops_after)
        written.extend(save_figure(fig, output_dir, "hop_plot"))
    return written
