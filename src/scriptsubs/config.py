"""Configuration models and loader utilities."""

from __future__ import annotations

import csv
import dataclasses
import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

ABBREVIATION_ORDERS = ("insertion", "sorted")
HOURS_POLICIES = ("fixed", "roll", "strict")


@dataclass(slots=True)
class ChunkingConfig:
    max_words: int = 10
    min_words: int = 4


@dataclass(slots=True)
class AbbreviationConfig:
    order: str = "insertion"
    strict: bool = False
    table_file: Optional[pathlib.Path] = None


@dataclass(slots=True)
class TimecodeConfig:
    hours: str = "fixed"


@dataclass(slots=True)
class PathsConfig:
    output_dir: Optional[pathlib.Path] = None


@dataclass(slots=True)
class PipelineConfig:
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    abbreviations: AbbreviationConfig = field(default_factory=AbbreviationConfig)
    timecode: TimecodeConfig = field(default_factory=TimecodeConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)


def _resolve_path(value: Any) -> Optional[pathlib.Path]:
    if value is None:
        return None
    path = pathlib.Path(value).expanduser()
    return path


def load_config(path: pathlib.Path) -> PipelineConfig:
    """Load configuration from a YAML file."""
    with path.open("r", encoding="utf-8") as handle:
        data: Dict[str, Any] = yaml.safe_load(handle) or {}
    return apply_overrides(PipelineConfig(), data)


def apply_overrides(config: PipelineConfig, overrides: Dict[str, Any]) -> PipelineConfig:
    """Apply dictionary overrides recursively to a configuration object."""

    def merge(target: Any, src: Dict[str, Any]) -> Any:
        if dataclasses.is_dataclass(target):
            for key, value in src.items():
                if not hasattr(target, key):
                    raise KeyError(f"Unknown configuration key: {key}")
                attr = getattr(target, key)
                if dataclasses.is_dataclass(attr) and isinstance(value, dict):
                    merge(attr, value)
                else:
                    if isinstance(attr, pathlib.Path) or key.endswith("_file") or key.endswith("_dir"):
                        setattr(target, key, _resolve_path(value))
                    else:
                        setattr(target, key, value)
            return target
        raise TypeError("Target must be a dataclass instance")

    merge(config, overrides)
    return config


def validate_config(config: PipelineConfig) -> None:
    """Validate logical invariants of the pipeline configuration."""
    if config.chunking.max_words < 1:
        raise ValueError("Maximum words per subtitle must be positive")
    if config.chunking.min_words < 1:
        raise ValueError("Minimum words per subtitle must be positive")
    if config.chunking.min_words > config.chunking.max_words:
        raise ValueError("Minimum words per subtitle cannot exceed the maximum")
    if config.abbreviations.order not in ABBREVIATION_ORDERS:
        raise ValueError(
            f"Abbreviation order must be one of {', '.join(ABBREVIATION_ORDERS)}"
        )
    if config.timecode.hours not in HOURS_POLICIES:
        raise ValueError(f"Timecode hours policy must be one of {', '.join(HOURS_POLICIES)}")


def load_abbreviations(path: Optional[pathlib.Path]) -> Dict[str, str]:
    """Load a headerless ``abbreviation,full form`` CSV table if provided.

    Row order is preserved so that placeholder numbering stays reproducible.
    """
    if path is None:
        return {}
    table: Dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            reader = csv.reader(handle, skipinitialspace=True)
            for row_number, row in enumerate(reader, start=1):
                if not any(cell.strip() for cell in row):
                    continue
                if len(row) < 2:
                    raise ValueError(f"Abbreviation row {row_number} needs two columns: {row!r}")
                abbreviation, fullform = row[0], row[1]
                if abbreviation in table:
                    raise ValueError(
                        f"Duplicate abbreviation {abbreviation!r} on row {row_number}"
                    )
                table[abbreviation] = fullform
    except FileNotFoundError:
        raise FileNotFoundError(f"Abbreviation file not found: {path}") from None
    return table
