"""YAML/dict config loader for word-diff.

Supports loading from a YAML file or a plain dict (for embedding in a
larger editor or host config).

Example YAML:

    word_diff:
      ignore_punctuation: false
      for_completion: true
      unit: byte              # "byte" (UTF-8 offsets) or "char"
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .differ import WordDiffer, WordDifferConfig
from .types import UNITS


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "word_diff" key or flat
    if "word_diff" in data:
        data = data["word_diff"] or {}

    unit = data.get("unit", "byte")
    if unit not in UNITS:
        raise ValueError(f"unknown position unit: {unit!r} (expected one of {', '.join(UNITS)})")

    return {
        "ignore_punctuation": bool(data.get("ignore_punctuation", False)),
        "for_completion": bool(data.get("for_completion", True)),
        "unit": unit,
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(Path(path).expanduser()) as f:
        return load_config(yaml.safe_load(f))


def create_differ(config: dict[str, Any] | None = None) -> WordDiffer:
    """Create a configured differ from a config dict."""
    cfg = load_config(config)
    return WordDiffer(WordDifferConfig(
        ignore_punctuation=cfg["ignore_punctuation"],
        for_completion=cfg["for_completion"],
        unit=cfg["unit"],
    ))
