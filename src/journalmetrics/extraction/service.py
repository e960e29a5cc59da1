"""Metric extraction over the free text of a single journal document.

Every function here is pure: it takes already-read text and returns a value
without touching shared state, so documents can be processed in any order or
in parallel. Malformed numbers never raise; the affected metric drops to zero.
"""

from __future__ import annotations

import re

from journalmetrics.models import MetricsRecord

DIARY_HEADING = "Diary"
EXERCISE_HEADING = "Exercise"

# Load used for exercises logged as "bodyweight" instead of a weight in kg.
NOMINAL_BODYWEIGHT_LOAD = 10

_HEADING_PATTERN = re.compile(r"^##\s+", re.MULTILINE | re.ASCII)
_UNCHECKED_PATTERN = re.compile(r"-\s*\[\s*\]", re.ASCII)
_CHECKED_PATTERN = re.compile(r"-\s*\[x\]", re.ASCII)
_WORK_TIME_PATTERN = re.compile(r"work::\s+([0-9]{2}):([0-9]{2})", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[0-9]+")


def _target_heading_pattern(heading: str) -> re.Pattern[str]:
    return re.compile(rf"^##\s+{re.escape(heading)}\s*$", re.MULTILINE | re.ASCII)


def _to_int(value: str) -> int:
    value = value.strip()
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def extract_segment(text: str, heading: str) -> str:
    """Return the body of the first ``## <heading>`` section, stripped.

    The section runs until the next level-two heading or the end of the text.
    An absent heading yields an empty string.
    """

    match = _target_heading_pattern(heading).search(text)
    if match is None:
        return ""

    start = match.end()
    following = _HEADING_PATTERN.search(text, start)
    end = following.start() if following else len(text)
    return text[start:end].strip()


def completion_percentage(text: str) -> float:
    """Percentage of checked ``- [x]`` markers among all task markers."""

    unchecked = len(_UNCHECKED_PATTERN.findall(text))
    checked = len(_CHECKED_PATTERN.findall(text))
    total = unchecked + checked
    if total == 0:
        return 0.0
    return checked / total * 100


def total_work_hours(text: str) -> float:
    """Sum every ``work:: HH:MM`` entry into fractional hours.

    An entry whose digits fail to parse discards the whole sum.
    """

    hours_total = 0.0
    for match in _WORK_TIME_PATTERN.finditer(text):
        try:
            hours = _to_int(match.group(1))
            minutes = _to_int(match.group(2))
        except ValueError:
            return 0.0
        hours_total += hours + minutes / 60
    return hours_total


def _parse_repetitions(field: str) -> int:
    return _to_int(field.strip().removesuffix(" reps"))


def _parse_load(field: str) -> int:
    field = field.strip()
    if field == "bodyweight":
        return NOMINAL_BODYWEIGHT_LOAD
    return _to_int(field.removesuffix("kg"))


def total_workload(section: str) -> int:
    """Sum repetitions times load over ``- description, N reps, Wkg`` lines."""

    # TODO: decide whether a malformed line should be skipped rather than
    # zeroing the whole section; see the open questions in DESIGN.md.
    total = 0
    for raw_line in section.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("- "):
            line = line[2:]

        fields = line.split(",")
        if len(fields) < 3:
            return 0
        try:
            repetitions = _parse_repetitions(fields[1])
            load = _parse_load(fields[2])
        except ValueError:
            return 0
        total += repetitions * load
    return total


def aggregate(date: str, text: str) -> MetricsRecord:
    """Build the metrics record for one journal document."""

    return MetricsRecord(
        date=date,
        content=text,
        diary=extract_segment(text, DIARY_HEADING),
        task_completion_percentage=completion_percentage(text),
        work_time=total_work_hours(text),
        weight_volume=total_workload(extract_segment(text, EXERCISE_HEADING)),
    )
