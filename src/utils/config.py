"""Typed access to the YAML project configuration."""
from __future__ import annotations

from pathlib import Path
from typing import TypedDict, cast

import yaml


class AgeBucketEntry(TypedDict, total=False):
    label: str
    min: int
    max: int


class DemographicsConfig(TypedDict, total=False):
    age_buckets: list[AgeBucketEntry]
    growth_window_days: int
    recent_signups_limit: int


class PathsConfig(TypedDict, total=False):
    users_data: str
    report_output: str


class AppConfig(TypedDict, total=False):
    demographics: DemographicsConfig
    paths: PathsConfig


def load_config(path: Path) -> AppConfig:
    with Path(path).open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ValueError("The configuration file must contain a mapping at the top level.")

    return cast(AppConfig, data)


__all__ = ["AgeBucketEntry", "AppConfig", "DemographicsConfig", "PathsConfig", "load_config"]
