"""Locating and reading the project's `ggsale.config.yaml`.

These helpers only find and parse the file. Nothing here reads the
environment or applies defaults; `store.config.load_config` layers those on
top, and only reads a file when one is passed to it:

    config = load_config(find_config_file())

Settings may sit under a `store:` section or at the top level:
```yaml
store:
  storage_path: ./data
  quota_bytes: 5242880
  model: gemini-2.5-flash
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "ggsale.config.yaml"


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Return the nearest ggsale.config.yaml in start_path (default cwd) or a parent."""
    start = Path(start_path) if start_path else Path.cwd()
    return next(
        (d / CONFIG_FILENAME for d in (start, *start.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )


def load_yaml_file(config_file: str | Path) -> dict[str, Any]:
    """Parse a YAML mapping.

    A missing or empty file, or one whose top level is not a mapping, reads
    as an empty dict.
    """
    path = Path(config_file)
    if not path.is_file():
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def get_section(config: dict[str, Any], section: str) -> dict[str, Any]:
    """Return config[section] if it is a mapping, else an empty dict."""
    value = config.get(section)
    return value if isinstance(value, dict) else {}


def store_settings(config_file: str | Path) -> dict[str, Any]:
    """Settings for the store core: the `store:` section, or the whole file without one."""
    raw = load_yaml_file(config_file)
    return get_section(raw, "store") or raw
