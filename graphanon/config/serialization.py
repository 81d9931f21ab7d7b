"""JSON serialization and deserialization for run configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from graphanon.config.experiment import AnonymizationConfig

_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_json(config: AnonymizationConfig) -> str:
    """Serialize with sorted keys and 2-space indent."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_dict(d: dict[str, Any]) -> AnonymizationConfig:
    """Rebuild a config from a plain dict.

    dacite runs with strict=True so unknown keys are rejected, and
    cast=[tuple] turns JSON arrays back into the tuple-typed tags field.
    Missing keys fall back to the dataclass defaults.
    """
    return from_dict(data_class=AnonymizationConfig, data=d, config=_DACITE_CONFIG)


def config_from_json(json_str: str) -> AnonymizationConfig:
    return config_from_dict(json.loads(json_str))
