"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone
from pathlib import Path

from graphanon.config.experiment import AnonymizationConfig


def generate_run_id(config: AnonymizationConfig) -> str:
    """Generate a scannable run ID from config parameters.

    Format: {mode}_{source}_{a<alpha>|k<k>}_s{seed}_{YYYYMMDD}_{HHMMSS}
    where source is n{n} for random graphs and the file stem otherwise.
    Example: identity_n100_k5_s42_20261018_143012
    """
    ts = datetime.now(timezone.utc)
    if config.graph.input_path is not None:
        source = Path(config.graph.input_path).stem
    else:
        source = f"n{config.graph.n}"
    if config.mode == "attribute":
        threshold = f"a{config.attribute.alpha:g}"
    else:
        threshold = f"k{config.identity.k}"
    return (
        f"{config.mode}_{source}_{threshold}_s{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
