"""Tests for configuration and abbreviation table loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from scriptsubs.config import (
    PipelineConfig,
    apply_overrides,
    load_abbreviations,
    load_config,
    validate_config,
)


def test_load_config_merges_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "chunking:\n  max_words: 8\nabbreviations:\n  order: sorted\n  table_file: abbr.csv\n"
        "timecode:\n  hours: roll\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.chunking.max_words == 8
    assert config.chunking.min_words == 4
    assert config.abbreviations.order == "sorted"
    assert config.abbreviations.table_file == Path("abbr.csv")
    assert config.timecode.hours == "roll"
    validate_config(config)


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == PipelineConfig()


def test_default_config_file_is_valid() -> None:
    path = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    config = load_config(path)
    validate_config(config)
    assert config == PipelineConfig()


def test_unknown_key_is_rejected() -> None:
    with pytest.raises(KeyError):
        apply_overrides(PipelineConfig(), {"chunking": {"max_lines": 2}})


@pytest.mark.parametrize(
    "overrides",
    [
        {"chunking": {"max_words": 0}},
        {"chunking": {"min_words": 0}},
        {"chunking": {"max_words": 3, "min_words": 5}},
        {"abbreviations": {"order": "random"}},
        {"timecode": {"hours": "days"}},
    ],
)
def test_validate_config_rejects_bad_values(overrides: dict) -> None:
    config = apply_overrides(PipelineConfig(), overrides)
    with pytest.raises(ValueError):
        validate_config(config)


def test_load_abbreviations_keeps_row_order(tmp_path: Path) -> None:
    path = tmp_path / "abbr.csv"
    path.write_text("UN, United Nations\n\nEU,European Union\n", encoding="utf-8")
    table = load_abbreviations(path)
    assert list(table.items()) == [("UN", "United Nations"), ("EU", "European Union")]


def test_load_abbreviations_without_file() -> None:
    assert load_abbreviations(None) == {}


def test_load_abbreviations_rejects_bad_rows(tmp_path: Path) -> None:
    short = tmp_path / "short.csv"
    short.write_text("UN\n", encoding="utf-8")
    with pytest.raises(ValueError, match="row 1"):
        load_abbreviations(short)

    duplicate = tmp_path / "duplicate.csv"
    duplicate.write_text("UN,United Nations\nUN,Union\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Duplicate"):
        load_abbreviations(duplicate)


def test_load_abbreviations_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_abbreviations(tmp_path / "missing.csv")
