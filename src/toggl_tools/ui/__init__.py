"""UI components for terminal output."""

from .tables import ReportTable, format_duration, sorted_project_names

__all__ = [
    "ReportTable",
    "format_duration",
    "sorted_project_names",
]
