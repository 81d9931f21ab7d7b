"""result.json layout: validation, writing and loading.

A result holds the run config, the before/after graph summaries with the
engine's counters under metrics.scalars, and provenance metadata. The
checks are plain Python rather than a JSON Schema document; they run
before anything is written and after anything is read.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from graphanon.config.experiment import AnonymizationConfig
from graphanon.config.hashing import full_config_hash, graph_config_hash
from graphanon.reproducibility.git_hash import get_git_hash
from graphanon.results.run_id import generate_run_id

SCHEMA_VERSION = "1.0"

# Top-level field -> required JSON type.
TOP_FIELD_TYPES: dict[str, type] = {
    "schema_version": str,
    "run_id": str,
    "timestamp": str,
    "description": str,
    "tags": list,
    "config": dict,
    "metrics": dict,
}
REQUIRED_TOP_FIELDS = set(TOP_FIELD_TYPES)

REQUIRED_SCALARS = {"edges_added", "vertices_added", "before", "after"}

MODE_SCALARS = {
    "attribute": {"alpha"},
    "identity": {"k", "max_deficiency"},
}


def _scalar_errors(scalars: dict[str, Any], mode: str | None) -> list[str]:
    errors = []
    missing = REQUIRED_SCALARS - scalars.keys()
    if missing:
        errors.append(f"metrics.scalars missing fields: {sorted(missing)}")

    for side in ("before", "after"):
        if side in scalars and not isinstance(scalars[side], dict):
            errors.append(f"metrics.scalars.{side} must be a dict")

    if mode is None:
        return errors
    if mode not in MODE_SCALARS:
        errors.append(f"config.mode {mode!r} is not a known mode")
        return errors
    mode_missing = MODE_SCALARS[mode] - scalars.keys()
    if mode_missing:
        errors.append(f"metrics.scalars missing {mode}-mode fields: {sorted(mode_missing)}")
    return errors


def validate_result(result: dict[str, Any]) -> list[str]:
    """Check a result dict; returns error strings, empty when valid.

    Top-level fields must be present with the right JSON types, the
    timestamp must parse as ISO 8601, and metrics.scalars must hold the
    common counters plus those of the run's mode.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - result.keys()
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    for name, expected in TOP_FIELD_TYPES.items():
        if name in result and not isinstance(result[name], expected):
            errors.append(f"{name} must be a {expected.__name__}")

    ts = result.get("timestamp")
    if isinstance(ts, str):
        try:
            datetime.fromisoformat(ts)
        except ValueError:
            errors.append("timestamp must be in ISO 8601 format")

    metrics = result.get("metrics")
    if not isinstance(metrics, dict):
        return errors
    scalars = metrics.get("scalars")
    if not isinstance(scalars, dict):
        errors.append("metrics.scalars is required and must be a dict")
        return errors

    config = result.get("config")
    mode = config.get("mode") if isinstance(config, dict) else None
    errors.extend(_scalar_errors(scalars, mode))
    return errors


def _raise_if_invalid(result: dict[str, Any], where: str) -> None:
    errors = validate_result(result)
    if errors:
        detail = "\n".join(f"  - {e}" for e in errors)
        raise ValueError(f"Result validation failed{where}:\n{detail}")


def write_result(
    config: AnonymizationConfig,
    metrics: dict[str, Any],
    metadata: dict[str, Any] | None = None,
    results_dir: str | Path = "results",
    run_id: str | None = None,
) -> Path:
    """Validate and write results_dir/<run_id>/result.json.

    Args:
        config: The run configuration, stored in full.
        metrics: Must contain 'scalars'.
        metadata: Extra provenance merged over code and config hashes.
        results_dir: Base directory for result output.
        run_id: Directory name to use; generated from the config if None.

    Returns:
        Path to the written result.json.

    Raises:
        ValueError: If the assembled result fails validation.
    """
    run_id = run_id or generate_run_id(config)
    result = {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "metrics": metrics,
        "metadata": {
            "code_hash": get_git_hash(),
            "config_hash": full_config_hash(config),
            "graph_config_hash": graph_config_hash(config),
            **(metadata or {}),
        },
    }
    _raise_if_invalid(result, "")

    result_path = Path(results_dir) / run_id / "result.json"
    result_path.parent.mkdir(parents=True, exist_ok=True)
    result_path.write_text(json.dumps(result, indent=2))
    return result_path


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Read and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If its contents fail validation.
    """
    path = Path(result_path)
    result = json.loads(path.read_text())
    _raise_if_invalid(result, f" for {path}")
    return result
