"""Reporting on fleet schedules and truck rankings."""

from .fleet_report import (
    schedules_to_dataframe,
    selection_to_dataframe,
    export_schedules_to_excel,
)

__all__ = [
    "schedules_to_dataframe",
    "selection_to_dataframe",
    "export_schedules_to_excel",
]
