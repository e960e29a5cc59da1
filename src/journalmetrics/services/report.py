"""Report orchestration combining journal loading and metric extraction."""

from __future__ import annotations

from typing import Mapping, Sequence

from journalmetrics.extraction import aggregate
from journalmetrics.ingestion import JournalLoader
from journalmetrics.metrics.observability import PipelineMetrics, TimedSection, get_logger
from journalmetrics.models import JournalDocument, MetricsRecord


class ReportService:
    """Builds the date-ordered metrics report for every journal document."""

    def __init__(self, loader: JournalLoader) -> None:
        self._loader = loader
        self._logger = get_logger("report")

    def build_report(self) -> Sequence[MetricsRecord]:
        documents = self._sorted_documents(self._loader.load())
        durations: list[float] = []
        with TimedSection(durations.append):
            records = [aggregate(document.date, document.text) for document in documents]
        PipelineMetrics.observe_report(durations[0], len(records))
        self._logger.info(
            "report.complete",
            document_count=len(records),
            duration_seconds=durations[0],
        )
        return records

    @staticmethod
    def _sorted_documents(raw: Mapping[str, str]) -> Sequence[JournalDocument]:
        return [JournalDocument(date=key, text=raw[key]) for key in sorted(raw)]
