import math

import pytest

from examcell.services.workload import (
    SATURATED_SCORE,
    faculty_workload,
    supervision_counts,
    workload_score,
)


def _always_suitable(faculty, exam):
    return True


def _never_suitable(faculty, exam):
    return False


def test_supervision_counts_cover_all_exams(make_faculty, make_exam):
    a = make_faculty()
    b = make_faculty()
    exams = [
        make_exam(faculty_ids=[a.id, b.id]),
        make_exam(faculty_ids=[a.id]),
        make_exam(faculty_ids=["retired-faculty"]),
    ]

    assert supervision_counts([a, b], exams) == {a.id: 2, b.id: 1}


def test_supervision_counts_start_at_zero(make_faculty):
    faculty = make_faculty()

    assert supervision_counts([faculty], []) == {faculty.id: 0}


def test_score_combines_capacity_and_seniority(make_faculty, make_exam):
    faculty = make_faculty(max_supervisions=4, seniority=3)

    score = workload_score(faculty, {faculty.id: 1}, make_exam(), _always_suitable)

    assert score == pytest.approx(0.25 * 0.5 + 0.6 * 0.2)


def test_external_exam_penalises_juniors_only(make_faculty, make_exam):
    exam = make_exam(exam_type="external")
    junior = make_faculty(seniority=3)
    senior = make_faculty(seniority=4)
    counts = {junior.id: 0, senior.id: 0}

    assert workload_score(junior, counts, exam, _always_suitable) == pytest.approx(0.12 + 0.5)
    assert workload_score(senior, counts, exam, _always_suitable) == pytest.approx(0.08)


def test_semester_mismatch_adds_penalty(make_faculty, make_exam):
    faculty = make_faculty(seniority=5)

    score = workload_score(faculty, {faculty.id: 0}, make_exam(), _never_suitable)

    assert score == pytest.approx(0.04 + 0.3)


def test_saturated_faculty_sort_last(make_faculty, make_exam):
    faculty = make_faculty(max_supervisions=2, seniority=5)
    exam = make_exam()

    at_cap = workload_score(faculty, {faculty.id: 2}, exam, _always_suitable)
    over_cap = workload_score(faculty, {faculty.id: 3}, exam, _always_suitable)

    assert at_cap == SATURATED_SCORE
    assert over_cap == SATURATED_SCORE
    assert math.isinf(at_cap)
    # Worst possible real score: nearly full, most junior, external, mismatched.
    junior = make_faculty(max_supervisions=100, seniority=1)
    worst = workload_score(
        junior,
        {junior.id: 99},
        make_exam(exam_type="external"),
        _never_suitable,
    )
    assert worst < at_cap


def test_faculty_workload_summary(make_faculty, make_exam):
    busy = make_faculty(max_supervisions=2)
    idle = make_faculty(max_supervisions=3)
    exams = [make_exam(faculty_ids=[busy.id]), make_exam(faculty_ids=[busy.id])]

    summary = {item.faculty_id: item for item in faculty_workload([busy, idle], exams)}

    assert summary[busy.id].supervisions == 2
    assert summary[busy.id].remaining == 0
    assert summary[busy.id].saturated is True
    assert summary[idle.id].remaining == 3
    assert summary[idle.id].saturated is False


def test_senior_threshold_is_configurable(make_faculty, make_exam):
    faculty = make_faculty(seniority=4)
    exam = make_exam(exam_type="external")
    counts = {faculty.id: 0}

    assert workload_score(faculty, counts, exam, _always_suitable) == pytest.approx(0.08)
    assert workload_score(faculty, counts, exam, _always_suitable, senior_seniority=5) == pytest.approx(0.58)
