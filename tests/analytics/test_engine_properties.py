from __future__ import annotations

import pytest

from src.college_attendance.college_attendance.analytics import engine
from src.college_attendance.college_attendance.core.constants import WINDOW_CHOICES


@pytest.mark.parametrize("window_days", WINDOW_CHOICES)
def test_rates_bounded_and_outputs_ordered(sample_store, fixed_now, window_days):
    students = sample_store.list_students()
    records = engine.filter_by_window_and_department(
        sample_store.list_attendance_records(), students, window_days=window_days, now=fixed_now
    )

    daily = engine.daily_series(records)
    subjects = engine.subject_rates(records)
    rankings = engine.student_rankings(records, students)
    departments = engine.department_comparison(
        sample_store.list_attendance_records(), students, sample_store.list_departments()
    )

    assert 0 < len(daily) <= 14
    assert [d.work_date for d in daily] == sorted(d.work_date for d in daily)

    rates = [d.rate for d in daily]
    rates += [s.attendance_rate for s in subjects]
    rates += [r.attendance_rate for r in rankings]
    rates += [d.attendance_rate for d in departments]
    assert all(0 <= r <= 100 for r in rates)

    for earlier, later in zip(subjects, subjects[1:]):
        assert earlier.attendance_rate >= later.attendance_rate
    for earlier, later in zip(rankings, rankings[1:]):
        assert earlier.attendance_rate >= later.attendance_rate


def test_today_snapshot_residual_absence(sample_store, fixed_now):
    snap = engine.today_snapshot(
        sample_store.list_attendance_records(), sample_store.list_students(), today=fixed_now.date()
    )

    assert snap.present_today + snap.late_today <= snap.total_students
    assert snap.absent_today == max(0, snap.total_students - snap.present_today - snap.late_today)
    assert 0 <= snap.attendance_rate <= 100


def test_aggregations_are_idempotent_and_leave_inputs_alone(sample_store, fixed_now):
    records = list(sample_store.list_attendance_records())
    students = list(sample_store.list_students())
    before = list(records)

    def run():
        windowed = engine.filter_by_window_and_department(records, students, window_days=30, now=fixed_now)
        return (
            engine.daily_series(windowed),
            engine.subject_rates(windowed),
            engine.student_rankings(windowed, students),
            engine.department_comparison(records, students, sample_store.list_departments()),
            engine.today_snapshot(records, students, today=fixed_now.date()),
            engine.weekly_overview(records, students, today=fixed_now.date()),
        )

    assert run() == run()
    assert records == before
