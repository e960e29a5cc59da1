"""Tests for metric extraction over journal text."""

from __future__ import annotations

import pytest

from journalmetrics.extraction import (
    NOMINAL_BODYWEIGHT_LOAD,
    aggregate,
    completion_percentage,
    extract_segment,
    total_work_hours,
    total_workload,
)

JOURNAL = """# 2024-01-05

## Tasks
- [x] write report
- [ ] call plumber
- [x] groceries
- [ ] taxes

## Diary
Slow morning, good afternoon.
work:: 02:15

## Exercise
- pushups, 10 reps, bodyweight
- squat, 5 reps, 20kg

## Notes
work:: 01:45
"""


def test_extract_segment_between_headings():
    assert extract_segment("## Diary\nhello\n## Next\nworld", "Diary") == "hello"


def test_extract_segment_runs_to_end_of_document():
    assert extract_segment("## Next\nworld\n## Diary\n  hello\nthere  \n", "Diary") == "hello\nthere"


def test_extract_segment_missing_heading():
    assert extract_segment("## Diary\nhello", "Missing") == ""
    assert extract_segment("", "Missing") == ""


def test_extract_segment_only_first_occurrence():
    text = "## Diary\nfirst\n## Other\nx\n## Diary\nsecond"
    assert extract_segment(text, "Diary") == "first"


def test_extract_segment_matches_heading_literally():
    text = "## Diary (old)\nold\n## D.ary\ndotted\n## Diary\nnew"
    assert extract_segment(text, "D.ary") == "dotted"
    assert extract_segment(text, "Diary") == "new"


def test_extract_segment_ignores_other_heading_levels():
    text = "# Diary\ntop\n### Diary\ndeep\n## Diary\nbody\n### Sub\nnested\n## End"
    assert extract_segment(text, "Diary") == "body\n### Sub\nnested"


def test_extract_segment_empty_body():
    assert extract_segment("## Diary\n## Next\nworld", "Diary") == ""


def test_completion_without_markers_is_zero():
    assert completion_percentage("") == 0.0
    assert completion_percentage("just some text\n- plain item") == 0.0


@pytest.mark.parametrize(
    ("checked", "unchecked"),
    [(1, 0), (0, 3), (1, 2), (3, 1), (2, 5)],
)
def test_completion_ratio(checked: int, unchecked: int):
    lines = ["- [x] done"] * checked + ["- [ ] todo"] * unchecked
    assert completion_percentage("\n".join(lines)) == checked / (checked + unchecked) * 100


def test_completion_is_case_sensitive():
    assert completion_percentage("- [X] shouted\n- [ ] todo\n- [x] done") == 50.0


def test_completion_accepts_inner_whitespace():
    assert completion_percentage("-[]\n-  [   ]\n- [x]\n-[x]") == 50.0


def test_work_hours_sum():
    assert total_work_hours("work:: 01:30\nwork:: 00:45") == 2.25


def test_work_hours_requires_two_digit_fields():
    assert total_work_hours("work:: 1:30") == 0.0
    assert total_work_hours("work:: 01:5") == 0.0


def test_work_hours_skips_non_matching_entries():
    assert total_work_hours("work:: 1:30\nwork:: 02:00\nwork::03:00") == 2.0


def test_work_hours_without_entries():
    assert total_work_hours("nothing logged today") == 0.0


def test_workload_sum_with_bodyweight():
    text = "- pushups, 10 reps, bodyweight\n- squat, 5 reps, 20kg"
    assert total_workload(text) == 10 * NOMINAL_BODYWEIGHT_LOAD + 5 * 20 == 200


def test_workload_skips_blank_lines_and_optional_marker():
    text = "\n  \n- row, 8 reps, 30kg\n\ndeadlift, 3 reps, 100kg\n"
    assert total_workload(text) == 8 * 30 + 3 * 100


def test_workload_missing_load_zeroes_everything():
    assert total_workload("- squat, 5 reps, 20kg\n- lunges, 12 reps") == 0


def test_workload_unparseable_number_zeroes_everything():
    assert total_workload("- squat, 5 reps, 20kg\n- plank, one minute, bodyweight") == 0
    assert total_workload("- squat, 5 reps, 20kg\n- bench, 5 reps, heavy") == 0
    assert total_workload("- squat, -5 reps, 20kg") == 0


def test_workload_ignores_extra_fields():
    assert total_workload("- squat, 5 reps, 20kg, felt great") == 100


def test_workload_bodyweight_is_exact_literal():
    assert total_workload("- pullups, 4 reps, Bodyweight") == 0


def test_workload_empty_section():
    assert total_workload("") == 0


def test_aggregate_composes_extractors():
    record = aggregate("20240105", JOURNAL)

    assert record.date == "20240105"
    assert record.content == JOURNAL
    assert record.diary == "Slow morning, good afternoon.\nwork:: 02:15"
    assert record.task_completion_percentage == 50.0
    assert record.work_time == 4.0
    assert record.weight_volume == 200


def test_aggregate_without_sections():
    record = aggregate("20240106", "nothing here")

    assert record.diary == ""
    assert record.task_completion_percentage == 0.0
    assert record.work_time == 0.0
    assert record.weight_volume == 0


def test_extractors_are_idempotent():
    assert extract_segment(JOURNAL, "Diary") == extract_segment(JOURNAL, "Diary")
    assert completion_percentage(JOURNAL) == completion_percentage(JOURNAL)
    assert total_work_hours(JOURNAL) == total_work_hours(JOURNAL)
    assert total_workload(JOURNAL) == total_workload(JOURNAL)
    assert aggregate("d", JOURNAL) == aggregate("d", JOURNAL)


NBSP = "\N{NO-BREAK SPACE}"
LINE_SEPARATOR = "\N{LINE SEPARATOR}"


def test_extract_segment_heading_needs_ascii_whitespace():
    assert extract_segment(f"##{NBSP}Diary\nhello", "Diary") == ""
    assert extract_segment(f"## Diary\nhello\n##{NBSP}Next\nworld", "Diary") == f"hello\n##{NBSP}Next\nworld"


def test_completion_markers_need_ascii_whitespace():
    assert completion_percentage(f"-{NBSP}[x]\n- [ ]") == 0.0
    assert completion_percentage(f"- [{NBSP}]\n- [x]") == 100.0


def test_work_hours_separator_needs_ascii_whitespace():
    assert total_work_hours(f"work::{NBSP}01:30\nwork:: 00:30") == 0.5


def test_workload_splits_on_newlines_only():
    assert total_workload(f"- row{LINE_SEPARATOR}machine, 5 reps, 20kg") == 100
    assert total_workload("- row\x1cmachine, 2 reps, 10kg\n- squat, 1 reps, 5kg") == 25
