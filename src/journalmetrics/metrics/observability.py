"""Observability helpers for journalmetrics."""

from __future__ import annotations

import logging
import time

import structlog
from prometheus_client import Counter, Histogram

_logger_configured = False


def configure_logging(level: int | str = logging.INFO) -> None:
    global _logger_configured  # noqa: PLW0603 - module-level guard
    if _logger_configured:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _logger_configured = True


def bind_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str = "journalmetrics") -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)


class PipelineMetrics:
    """Prometheus metrics for loading journals and building reports."""

    load_latency = Histogram(
        "journalmetrics_load_duration_seconds",
        "Time spent reading the journal directory.",
        buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5),
    )
    report_latency = Histogram(
        "journalmetrics_report_duration_seconds",
        "Time spent extracting metrics for a full report.",
        buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.5),
    )
    report_documents = Histogram(
        "journalmetrics_report_document_count",
        "Journal documents included per report.",
        buckets=(0, 1, 7, 30, 90, 365, 1000, 3650),
    )
    skipped_files = Counter(
        "journalmetrics_skipped_files_total",
        "Directory entries ignored while loading journals.",
        ["reason"],
    )

    @classmethod
    def observe_load(cls, duration_seconds: float) -> None:
        cls.load_latency.observe(duration_seconds)

    @classmethod
    def observe_report(cls, duration_seconds: float, document_count: int) -> None:
        cls.report_latency.observe(duration_seconds)
        cls.report_documents.observe(document_count)

    @classmethod
    def record_skip(cls, reason: str) -> None:
        cls.skipped_files.labels(reason=reason).inc()


class TimedSection:
    """Context manager capturing elapsed time for metrics."""

    def __init__(self, callback) -> None:
        self._callback = callback
        self._start = 0.0

    def __enter__(self) -> "TimedSection":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        duration = time.perf_counter() - self._start
        self._callback(duration)


__all__ = [
    "PipelineMetrics",
    "TimedSection",
    "bind_correlation_id",
    "clear_correlation_id",
    "configure_logging",
    "get_logger",
]
