"""Infrastructure helpers for exporting analytical reports."""

from .demographics_report import DemographicsReportRepository, demographics_to_dict

__all__ = [
    "DemographicsReportRepository",
    "demographics_to_dict",
]
