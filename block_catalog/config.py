from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

from block_catalog.discovery import DEFAULT_FILENAME, DEFAULT_MAX_DEPTH

DEFAULT_CONFIG_PATH = "config/params.yaml"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "server": {"name": "aem-block-collection", "version": "1.0.0"},
    "catalog": {
        "mode": "auto",
        "filename": DEFAULT_FILENAME,
        "max_depth": DEFAULT_MAX_DEPTH,
        "search_root": None,  # None -> the block_catalog package directory
    },
    "http": {"host": "127.0.0.1", "port": 8000},
    "logging": {"level": None},  # None -> LOG_LEVEL env, then INFO
}


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Dict[str, Any]]:
    """
    Read the YAML parameters file and merge it over DEFAULTS, section by section.
    A missing file yields the defaults.
    """
    cfg = copy.deepcopy(DEFAULTS)
    if not Path(path).exists():
        return cfg
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    for section, values in data.items():
        if values is None:  # section present but empty / fully commented out
            continue
        if isinstance(values, dict) and isinstance(cfg.get(section), dict):
            cfg[section].update(values)
        else:
            cfg[section] = values
    return cfg
