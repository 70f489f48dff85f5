from __future__ import annotations

from collections.abc import Iterable
import datetime

from examcell.schemas.common import DAY_NAMES
from examcell.schemas.exam import Exam
from examcell.schemas.faculty import Faculty


def weekday_name(value: datetime.date) -> str:
    return DAY_NAMES[value.isoweekday() % 7]


def is_available(faculty: Faculty, exam_date: datetime.date) -> bool:
    # Days missing from the mapping (Sunday by default) count as unavailable.
    return faculty.is_available_on(weekday_name(exam_date))


def intervals_overlap(start: str, end: str, other_start: str, other_end: str) -> bool:
    return start < other_end and end > other_start


def is_busy_at_time(faculty: Faculty, exam: Exam, all_exams: Iterable[Exam]) -> bool:
    for other in all_exams:
        if other.id == exam.id or other.date != exam.date:
            continue
        if faculty.id not in other.faculty_ids:
            continue
        if intervals_overlap(exam.start_time, exam.end_time, other.start_time, other.end_time):
            return True
    return False


def available_faculty(
    faculty: Iterable[Faculty],
    exam_date: datetime.date,
    department: str | None = None,
) -> list[Faculty]:
    return [
        member
        for member in faculty
        if (department is None or member.department == department) and is_available(member, exam_date)
    ]
