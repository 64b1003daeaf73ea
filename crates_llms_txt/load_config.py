"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from crates_llms_txt.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "docs": {
        "base_url": "https://docs.rs",
        "crate_api_url": "https://docs.rs/crate",
    },
    "sessions": {
        "max_description_length": 200,
        "include_crate_root": False,
    },
    "http": {
        "timeout": 30.0,
    },
    "toolchain": {
        "default": None,
        "all_features": False,
        "no_default_features": False,
        "features": [],
    },
    "output": {
        "index_file": "llms.txt",
        "full_file": "llms-full.txt",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
