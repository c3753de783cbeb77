"""Runtime switches for debug-only diagnostics.

The diagnostics themselves sit behind ``if __debug__:`` blocks, which the
compiler removes under ``python -O``. The settings here only matter in
normal (debug) runs.

YAML format:
    paint_overflow_indicators: true
    log_overflow: true
    stripe_width: 6
    indicator_fraction: 0.1
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

ENV_OVERFLOW = "PROTOHEIGHT_DEBUG_OVERFLOW"


@dataclass
class DebugSettings:
    """Debug diagnostics configuration.

    Attributes:
        paint_overflow_indicators: Paint hatched markers where children overflow
        log_overflow: Log a warning the first time a node overflows
        stripe_width: Width in pixels of each hatch stripe
        indicator_fraction: Marker thickness as a fraction of the container extent
    """

    paint_overflow_indicators: bool = True
    log_overflow: bool = True
    stripe_width: int = 6
    indicator_fraction: float = 0.1

    def __post_init__(self) -> None:
        if self.stripe_width <= 0:
            raise ValueError(f"stripe_width must be positive, got {self.stripe_width}")
        if not 0.0 < self.indicator_fraction <= 1.0:
            raise ValueError(f"indicator_fraction must be in (0, 1], got {self.indicator_fraction}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DebugSettings:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown debug settings: {sorted(unknown)}")
        return cls(**data)

    def update(self, other: DebugSettings) -> None:
        """Copy every field from other into this instance."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))


def load_debug_settings(path: str | Path) -> DebugSettings:
    """Load debug settings from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        DebugSettings instance (missing keys keep their defaults)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML contains unknown or invalid keys
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Debug settings file not found: {path}")
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Debug settings in {path} must be a mapping")
    return DebugSettings.from_dict(data)


def _from_environment() -> DebugSettings:
    settings = DebugSettings()
    if os.environ.get(ENV_OVERFLOW, "1").strip().lower() in ("0", "false", "no", "off"):
        settings.paint_overflow_indicators = False
    return settings


# Shared instance consulted by render nodes
debug_settings = _from_environment()
