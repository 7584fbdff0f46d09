"""JSON serialization and deserialization for maze configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from mazegraph.config.maze import MazeConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: MazeConfig) -> str:
    """Serialize a MazeConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> MazeConfig:
    """Deserialize a JSON string to a MazeConfig.

    Uses dacite with strict=True to reject unknown keys (catches schema drift)
    and cast=[tuple] to convert JSON arrays back to tuples for tags.
    Dimension checks in GridConfig.__post_init__ still run on load.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: MazeConfig) -> dict[str, Any]:
    """Convert a MazeConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> MazeConfig:
    """Reconstruct a MazeConfig from a plain dictionary."""
    return from_dict(data_class=MazeConfig, data=d, config=_DACITE_CONFIG)
