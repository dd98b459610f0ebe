# src/segplot/io/config.py
"""
segplot.io.config
=================

Plot settings + YAML loading.

A config file is either the bare mapping

    step: 500
    alpha: 0.05
    max_count: 80

or the same keys nested under ``plot:``. Missing keys keep their defaults;
unknown keys are an error.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml


@dataclass(frozen=True)
class PlotConfig:
    step: int = 500            # take every step-th count into the scatter
    alpha: float = 0.05        # scatter point transparency
    max_count: int = 80        # clamp for raw counts
    formats: Tuple[str, ...] = ("png",)
    dpi: int = 160
    backend: Optional[str] = None

    def __post_init__(self) -> None:
        if self.step < 1:
            raise ValueError(f"step must be >= 1, got {self.step}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {self.alpha}")
        if self.max_count < 0:
            raise ValueError(f"max_count must be >= 0, got {self.max_count}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be > 0, got {self.dpi}")
        if not self.formats:
            raise ValueError("formats must not be empty")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PlotConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown plot config keys: {', '.join(unknown)}")

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "formats":
                if isinstance(value, str):
                    value = [value]
                kwargs[key] = tuple(str(v) for v in value)
            elif key in ("step", "max_count", "dpi"):
                kwargs[key] = int(value)
            elif key == "alpha":
                kwargs[key] = float(value)
            else:
                kwargs[key] = value
        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> "PlotConfig":
        """Return a copy with non-None overrides applied (e.g. from command-line flags)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load YAML from path using safe loader.

    Normalization:
      - empty YAML -> {}
      - top-level must be a dict (mapping); otherwise error
    """
    path = Path(path).expanduser().resolve()
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML must be a mapping/dict: {path}")

    return data


def load_plot_config(path: Path) -> PlotConfig:
    data = load_yaml(path)
    section = data.get("plot", data)
    if not isinstance(section, dict):
        raise TypeError(f"'plot' section must be a mapping: {path}")
    return PlotConfig.from_mapping(section)
