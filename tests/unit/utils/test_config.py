"""Unit tests for YAML configuration loading."""
from __future__ import annotations

from pathlib import Path

import pytest

from src.infrastructure.demographics.buckets import AgeCategorizer
from src.utils.config import load_config

ROOT = Path(__file__).resolve().parents[3]


def test_shipped_config_matches_default_buckets() -> None:
    config = load_config(ROOT / "configs" / "config.yaml")

    categorizer = AgeCategorizer.from_config(config["demographics"]["age_buckets"])

    assert categorizer.buckets == AgeCategorizer.default().buckets
    assert config["demographics"]["growth_window_days"] == 30


def test_empty_config_yields_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == {}


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)
