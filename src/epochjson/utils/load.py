from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML config file whose top level is a mapping; empty files give {}."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"config file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(
            f"config file {path} must hold a mapping of settings, got {type(data).__name__}")
    return data
