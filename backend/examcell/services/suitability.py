"""Semester suitability of a faculty member for an exam.

The reference semester is taken from the first enrolled student in registry
order, not from a majority of the cohort. Callers that need a different rule
should replace ``is_suitable`` rather than the scorer.
"""
from __future__ import annotations

from collections.abc import Iterable

from examcell.models.faculty import SemesterPreference
from examcell.schemas.exam import Exam
from examcell.schemas.faculty import Faculty
from examcell.schemas.student import Student


def semester_parity(semester: int) -> SemesterPreference:
    return SemesterPreference.odd if semester % 2 != 0 else SemesterPreference.even


def reference_semester(exam: Exam, students: Iterable[Student]) -> int | None:
    enrolled = set(exam.student_ids)
    for student in students:
        if student.id in enrolled:
            return student.semester
    return None


def is_suitable(faculty: Faculty, exam: Exam, students: Iterable[Student]) -> bool:
    if faculty.preferred_semesters == SemesterPreference.both:
        return True
    semester = reference_semester(exam, students)
    if semester is None:
        return True
    return faculty.preferred_semesters == semester_parity(semester)
