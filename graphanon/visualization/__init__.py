"""Figures comparing a graph before and after anonymisation."""

from graphanon.visualization.plots import (
    plot_degree_distributions,
    plot_hop_plots,
    render_run_figures,
)
from graphanon.visualization.style import apply_style, save_figure

__all__ = [
    "apply_style",
    "plot_degree_distributions",
    "plot_hop_plots",
    "render_run_figures",
    "save_figure",
]
