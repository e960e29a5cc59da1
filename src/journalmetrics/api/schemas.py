"""Pydantic models for the journalmetrics API."""

from __future__ import annotations

from typing import Any, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from journalmetrics.models import MetricsRecord


class MetricsRecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: str = Field(..., description="Date key taken from the journal file name")
    content: str = Field(..., description="Raw journal text")
    diary: str = Field(..., description="Body of the Diary section, empty when absent")
    task_completion_percentage: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        alias="taskCompletionPercentage",
        description="Checked task markers as a percentage of all task markers",
    )

    @classmethod
    def from_record(cls, record: MetricsRecord) -> "MetricsRecordModel":
        return cls(
            date=record.date,
            content=record.content,
            diary=record.diary,
            task_completion_percentage=record.task_completion_percentage,
        )


class ExtendedMetricsRecordModel(MetricsRecordModel):
    work_time: float = Field(..., ge=0.0, alias="workTime", description="Logged work time in hours")
    weight_volume: int = Field(
        ...,
        ge=0,
        alias="weightVolume",
        description="Sum of repetitions times load across the Exercise section",
    )

    @classmethod
    def from_record(cls, record: MetricsRecord) -> "ExtendedMetricsRecordModel":
        return cls(
            date=record.date,
            content=record.content,
            diary=record.diary,
            task_completion_percentage=record.task_completion_percentage,
            work_time=record.work_time,
            weight_volume=record.weight_volume,
        )


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str


def serialize_records(records: Sequence[MetricsRecord], *, extended: bool = True) -> List[dict[str, Any]]:
    """Encode metrics records with the camelCase field names clients expect."""

    model = ExtendedMetricsRecordModel if extended else MetricsRecordModel
    return [model.from_record(record).model_dump(by_alias=True) for record in records]
