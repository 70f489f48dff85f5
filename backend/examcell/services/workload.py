from __future__ import annotations

from collections.abc import Callable, Iterable
import math

from examcell.models.exam import ExamType
from examcell.schemas.exam import Exam
from examcell.schemas.faculty import Faculty
from examcell.schemas.planning import FacultyWorkload

# Sorts after every real score.
SATURATED_SCORE = math.inf

CAPACITY_WEIGHT = 0.5
SENIORITY_WEIGHT = 0.2
EXTERNAL_JUNIOR_PENALTY = 0.5
SEMESTER_MISMATCH_PENALTY = 0.3
SENIOR_SENIORITY = 4


def supervision_counts(faculty: Iterable[Faculty], exams: Iterable[Exam]) -> dict[str, int]:
    counts = {member.id: 0 for member in faculty}
    for exam in exams:
        for faculty_id in exam.faculty_ids:
            if faculty_id in counts:
                counts[faculty_id] += 1
    return counts


def workload_score(
    faculty: Faculty,
    counts: dict[str, int],
    exam: Exam,
    suitable: Callable[[Faculty, Exam], bool],
    senior_seniority: int = SENIOR_SENIORITY,
) -> float:
    """Return the eligibility score of ``faculty`` for ``exam``; lower is better.

    Faculty at or over ``max_supervisions`` get ``SATURATED_SCORE`` so they
    stay in the candidate list but sort last. Faculty below
    ``senior_seniority`` are penalised on external exams.
    """
    capacity_used_ratio = counts.get(faculty.id, 0) / faculty.max_supervisions
    if capacity_used_ratio >= 1:
        return SATURATED_SCORE

    seniority_factor = (6 - faculty.seniority) / 5

    exam_type_factor = 0.0
    if exam.exam_type == ExamType.external and faculty.seniority < senior_seniority:
        exam_type_factor = EXTERNAL_JUNIOR_PENALTY

    semester_factor = 0.0
    if not suitable(faculty, exam):
        semester_factor = SEMESTER_MISMATCH_PENALTY

    return (
        capacity_used_ratio * CAPACITY_WEIGHT
        + seniority_factor * SENIORITY_WEIGHT
        + exam_type_factor
        + semester_factor
    )


def faculty_workload(faculty: Iterable[Faculty], exams: Iterable[Exam]) -> list[FacultyWorkload]:
    members = list(faculty)
    counts = supervision_counts(members, exams)
    summary: list[FacultyWorkload] = []
    for member in members:
        used = counts[member.id]
        summary.append(
            FacultyWorkload(
                faculty_id=member.id,
                name=member.name,
                supervisions=used,
                max_supervisions=member.max_supervisions,
                remaining=max(member.max_supervisions - used, 0),
                saturated=used >= member.max_supervisions,
            )
        )
    return summary
