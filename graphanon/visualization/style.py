"""Shared look for before/after comparison figures.

Original-graph series are drawn in blue, anonymised ones in red, from
seaborn's colorblind palette. Every figure is written twice, as a 300 dpi
PNG and as an SVG with editable text.
"""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for headless rendering

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

PALETTE = sns.color_palette("colorblind", n_colors=8)
BEFORE_COLOR = PALETTE[0]
AFTER_COLOR = PALETTE[3]

FIGURE_FORMATS = ("png", "svg")

_RC = {
    "figure.dpi": 150,
    "savefig.dpi": 300,
    "figure.figsize": (7, 4.5),
    "font.size": 10,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "legend.fontsize": 9,
    "legend.frameon": False,
    "svg.fonttype": "none",
}


def apply_style() -> None:
    """Whitegrid theme with the comparison palette. Safe to call repeatedly."""
    sns.set_theme(style="whitegrid", palette=PALETTE, rc=_RC)


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> tuple[Path, ...]:
    """Write fig as output_dir/name.<fmt> for every FIGURE_FORMATS entry and close it.

    Returns:
        The written paths, PNG first.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for fmt in FIGURE_FORMATS:
        path = output_dir / f"{name}.{fmt}"
        fig.savefig(path, bbox_inches="tight")
        paths.append(path)
    plt.close(fig)
    return tuple(paths)
