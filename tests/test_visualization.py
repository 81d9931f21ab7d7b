"""Tests for the visualization module.

Tests cover: style application, dual-format save, palette constants,
hop-plot and degree comparison plots, and the run figure renderer.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np


# ── Style and Save Tests ──────────────────────────────────────────────


def test_apply_style_sets_whitegrid():
    """apply_style() sets seaborn whitegrid and publication rcParams."""
    from graphanon.visualization.style import apply_style

    apply_style()
    assert plt.rcParams["savefig.dpi"] == 300
    assert plt.rcParams["axes.grid"] is True


def test_save_figure_creates_png_and_svg(tmp_path):
    """save_figure creates both PNG and SVG, closes figure."""
    from graphanon.visualization.style import save_figure

    fig, ax = plt.subplots()
    ax.plot([1, 2, 3], [1, 2, 3])
    fig_num = fig.number

    png_path, svg_path = save_figure(fig, tmp_path / "sub", "test_plot")

    assert png_path.exists()
    assert svg_path.exists()
    assert png_path.stat().st_size > 0
    assert fig_num not in plt.get_fignums()


def test_before_after_colors_differ():
    from graphanon.visualization.style import AFTER_COLOR, BEFORE_COLOR, PALETTE

    assert len(PALETTE) == 8
    assert BEFORE_COLOR != AFTER_COLOR


# ── Plot Tests ────────────────────────────────────────────────────────


def test_plot_hop_plots_draws_both_series():
    from graphanon.visualization.plots import plot_hop_plots

    fig = plot_hop_plots({1: 6, 2: 4, 3: 2}, {1: 8, 2: 4})
    ax = fig.axes[0]
    assert len(ax.patches) == 5
    assert ax.get_xlabel() == "Shortest-path length (hops)"
    plt.close(fig)


def test_plot_hop_plots_empty_after():
    from graphanon.visualization.plots import plot_hop_plots

    fig = plot_hop_plots({1: 2}, {})
    assert len(fig.axes[0].patches) == 1
    plt.close(fig)


def test_plot_degree_distributions():
    from graphanon.visualization.plots import plot_degree_distributions

    fig = plot_degree_distributions(np.array([1, 1, 2, 4]), np.array([2, 2, 4, 4, 1]))
    ax = fig.axes[0]
    assert ax.get_title() == "Degree distribution"
    assert len(ax.get_legend().get_texts()) == 2
    plt.close(fig)


def test_render_run_figures_without_hop_plots(tmp_path):
    from graphanon.visualization import render_run_figures

    written = render_run_figures(tmp_path, np.array([0, 1, 1]), np.array([1, 1, 1]))
    assert sorted(p.name for p in written) == [
        "degree_distribution.png",
        "degree_distribution.svg",
    ]


def test_render_run_figures_with_hop_plots(tmp_path):
    from graphanon.visualization import render_run_figures

    written = render_run_figures(
        tmp_path, np.array([1, 2, 1]), np.array([2, 2, 2]), {1: 4, 2: 2}, {1: 6}
    )
    assert len(written) == 4
    assert all(p.exists() for p in written)
