from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from examcell.core.config import Settings, get_settings
from examcell.core.exceptions import ConfigurationError
from examcell.schemas.classroom import Classroom
from examcell.schemas.exam import Exam
from examcell.schemas.faculty import Faculty
from examcell.services.availability import available_faculty, is_busy_at_time
from examcell.services.registry import Registry
from examcell.services.seating import unique_classrooms
from examcell.services.suitability import is_suitable
from examcell.services.workload import supervision_counts, workload_score

logger = logging.getLogger(__name__)

SUBJECT_DEPARTMENTS = ("Computer Science", "Mathematics")


@dataclass(frozen=True)
class SupervisorAssignment:
    faculty_ids: tuple[str, ...]
    required: int
    candidate_count: int

    @property
    def shortfall(self) -> int:
        return max(self.required - len(self.faculty_ids), 0)


def department_for_subject(subject: str | None) -> str | None:
    if not subject:
        return None
    for department in SUBJECT_DEPARTMENTS:
        if department in subject:
            return department
    return None


def required_supervisors(classrooms: Sequence[Classroom], students_per_supervisor: int = 30) -> int:
    rooms = unique_classrooms(classrooms)
    total_capacity = sum(room.usable_capacity for room in rooms)
    return max(len(rooms), total_capacity // students_per_supervisor)


def ensure_senior_supervisor(
    candidates: list[Faculty],
    required: int,
    senior_seniority: int = 4,
) -> list[Faculty]:
    if any(member.seniority >= senior_seniority for member in candidates[:required]):
        return candidates
    senior = next((member for member in candidates if member.seniority >= senior_seniority), None)
    if senior is None:
        return candidates
    return [senior, *(member for member in candidates if member.id != senior.id)]


class FacultyAssigner:
    def __init__(self, registry: Registry, settings: Settings | None = None) -> None:
        self.registry = registry
        self.settings = settings or get_settings()
        if self.settings.students_per_supervisor < 1:
            raise ConfigurationError("students_per_supervisor must be at least 1")

    def assign(
        self,
        exam: Exam,
        classrooms: Sequence[Classroom],
        subject: str | None = None,
    ) -> SupervisorAssignment:
        classrooms = unique_classrooms(classrooms)
        faculty = self.registry.list_faculty()
        exams = self.registry.list_exams()
        students = self.registry.list_students()

        def suitable(member: Faculty, target: Exam) -> bool:
            return is_suitable(member, target, students)

        department = department_for_subject(subject)
        candidates = available_faculty(faculty, exam.date, department)
        candidates = [member for member in candidates if not is_busy_at_time(member, exam, exams)]
        candidates = [member for member in candidates if suitable(member, exam)]
        if exam.is_external:
            candidates = [
                member for member in candidates if member.seniority >= self.settings.external_min_seniority
            ]

        if len(candidates) < len(classrooms):
            present = {member.id for member in candidates}
            additional = [
                member
                for member in available_faculty(faculty, exam.date)
                if member.id not in present and not is_busy_at_time(member, exam, exams)
            ]
            logger.debug(
                "Widening candidate pool for exam %s: %d preferred, %d added",
                exam.id,
                len(candidates),
                len(additional),
            )
            candidates = [*candidates, *additional]

        counts = supervision_counts(faculty, exams)
        scores = {
            member.id: workload_score(
                member, counts, exam, suitable, self.settings.senior_supervisor_seniority
            )
            for member in candidates
        }
        candidates.sort(key=lambda member: scores[member.id])

        required = required_supervisors(classrooms, self.settings.students_per_supervisor)
        if exam.is_external:
            candidates = ensure_senior_supervisor(candidates, required, self.settings.senior_supervisor_seniority)

        selected = tuple(member.id for member in candidates[: min(required, len(candidates))])
        logger.debug(
            "Exam %s: %d candidate(s), %d required, %d selected",
            exam.id,
            len(candidates),
            required,
            len(selected),
        )
        return SupervisorAssignment(faculty_ids=selected, required=required, candidate_count=len(candidates))


def auto_assign_faculty(
    registry: Registry,
    exam: Exam,
    classrooms: Sequence[Classroom],
    subject: str | None = None,
) -> list[str]:
    return list(FacultyAssigner(registry).assign(exam, classrooms, subject).faculty_ids)
