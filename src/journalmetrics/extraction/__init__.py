"""Metric extraction from journal text."""

from .service import (
    NOMINAL_BODYWEIGHT_LOAD,
    aggregate,
    completion_percentage,
    extract_segment,
    total_work_hours,
    total_workload,
)

__all__ = [
    "NOMINAL_BODYWEIGHT_LOAD",
    "aggregate",
    "completion_percentage",
    "extract_segment",
    "total_work_hours",
    "total_workload",
]
