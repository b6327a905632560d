"""Command-line entry point to summarise the demographics of a user export."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from scripts.bootstrap import bootstrap_project

_PROJECT_ROOT = bootstrap_project()

from src.infrastructure.demographics import (  # noqa: E402
    AgeCategorizer,
    CSVPopulationSource,
    InsightSynthesizer,
)
from src.infrastructure.reports import DemographicsReportRepository  # noqa: E402
from src.use_cases.build_demographics import BuildDemographicsUseCase  # noqa: E402
from src.utils.config import AppConfig, load_config  # noqa: E402
from src.utils.logger import configure_logger, logger  # noqa: E402


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (_PROJECT_ROOT / path).resolve()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an age demographics summary for a user export"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/config.yaml"),
        help="YAML configuration with age buckets and default paths",
    )
    parser.add_argument(
        "--dataset",
        type=Path,
        default=None,
        help="CSV file with id, name, age and optional gender/created_at columns",
    )
    parser.add_argument(
        "--segment",
        default=None,
        help="Only analyse users whose gender matches this value",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination of the JSON summary",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def build_use_case(config: AppConfig, dataset_path: Path) -> BuildDemographicsUseCase:
    demographics = config.get("demographics", {})
    bucket_config = demographics.get("age_buckets")
    categorizer = (
        AgeCategorizer.from_config(bucket_config) if bucket_config else AgeCategorizer.default()
    )
    synthesizer = InsightSynthesizer(
        growth_window_days=demographics.get("growth_window_days", 30),
        unspecified_label=categorizer.unspecified_label,
    )
    return BuildDemographicsUseCase(
        source=CSVPopulationSource(dataset_path),
        categorizer=categorizer,
        synthesizer=synthesizer,
        recent_signups_limit=demographics.get("recent_signups_limit", 5),
    )


def main(argv: Optional[Sequence[str]] = None) -> Path:
    args = parse_args(argv)
    configure_logger(args.log_level)

    config_path = _resolve_path(args.config)
    config: AppConfig = load_config(config_path) if config_path.exists() else AppConfig()
    if not config_path.exists():
        logger.warning("Configuration {} not found, using defaults", config_path)

    paths = config.get("paths", {})
    dataset_path = _resolve_path(args.dataset or Path(paths.get("users_data", "data/users.csv")))
    output_path = _resolve_path(
        args.output or Path(paths.get("report_output", "reports/demographics_summary.json"))
    )

    use_case = build_use_case(config, dataset_path)
    data = use_case.execute(args.segment)

    report_path = DemographicsReportRepository(output_path).save(data)
    logger.info("Demographics summary saved to: {}", report_path)
    logger.info("Insight: {}", data.insights.dominant_range_description)
    logger.info("Insight: {}", data.insights.growth_trend_description)
    return report_path


if __name__ == "__main__":
    main()
