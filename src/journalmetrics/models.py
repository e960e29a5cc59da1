"""Shared domain models used across the journalmetrics pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JournalDocument:
    """One day's journal entry keyed by the date taken from its file name."""

    date: str
    text: str


@dataclass(frozen=True)
class MetricsRecord:
    """Metrics extracted from a single journal document."""

    date: str
    content: str
    diary: str
    task_completion_percentage: float
    work_time: float
    weight_volume: int
