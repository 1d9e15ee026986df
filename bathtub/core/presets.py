from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

import yaml

logger = logging.getLogger(__name__)

PRESETS_ENV = "BATHTUB_PRESETS"


@dataclass(frozen=True)
class Preset:
    value: float
    label: str


@dataclass(frozen=True)
class TubPresets:
    max_capacity: int
    default_target: int
    default_delay: float
    targets: List[Preset]
    delays: List[Preset]


def default_presets_path() -> Path:
    override = os.environ.get(PRESETS_ENV)
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent.parent / "data" / "presets.yaml"


class PresetRepository:
    """Loads tub capacity and the selectable target/delay options from YAML."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else default_presets_path()
        self._presets = self._load_presets()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> TubPresets:
        return self._presets

    def _load_presets(self) -> TubPresets:
        if not self._path.exists():
            raise FileNotFoundError(f"Presets file not found: {self._path}")

        name = self._path.name
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{name}: expected a YAML mapping")

        capacity = raw.get("max_capacity")
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError(f"{name}: 'max_capacity' must be a positive integer")

        targets: List[Preset] = []
        for preset in _parse_options(name, "targets", raw.get("targets")):
            if preset.value != int(preset.value):
                raise ValueError(f"{name}: target {preset.value} must be a whole level")
            targets.append(Preset(value=int(preset.value), label=preset.label))
        for preset in targets:
            if not 0 <= preset.value <= capacity:
                raise ValueError(f"{name}: target {preset.value} is outside 0..{capacity}")

        delays = _parse_options(name, "delays", raw.get("delays"))
        for preset in delays:
            if preset.value <= 0:
                raise ValueError(f"{name}: delay {preset.value} must be positive")

        default_target = raw.get("default_target", targets[0].value)
        if not isinstance(default_target, int) or not 0 <= default_target <= capacity:
            raise ValueError(f"{name}: 'default_target' must be an integer in 0..{capacity}")

        default_delay = _as_number(raw.get("default_delay", delays[0].value))
        if default_delay is None or default_delay <= 0:
            raise ValueError(f"{name}: 'default_delay' must be a positive number")

        logger.info("Loaded presets from %s", self._path)
        return TubPresets(
            max_capacity=capacity,
            default_target=default_target,
            default_delay=default_delay,
            targets=targets,
            delays=delays,
        )


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _parse_options(name: str, key: str, items: Any) -> List[Preset]:
    if not isinstance(items, list) or not items:
        raise ValueError(f"{name}: '{key}' must be a non-empty list")
    options: List[Preset] = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"{name}: each '{key}' entry needs 'value' and 'label'")
        value = _as_number(item.get("value"))
        label = item.get("label")
        if value is None:
            raise ValueError(f"{name}: '{key}' entry has a missing or invalid 'value'")
        if not label or not isinstance(label, str):
            raise ValueError(f"{name}: '{key}' entry has a missing or invalid 'label'")
        options.append(Preset(value=value, label=label.strip()))
    return options
