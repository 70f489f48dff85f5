from __future__ import annotations

import logging

from examcell.core.config import Settings, get_settings
from examcell.core.exceptions import AssignmentError
from examcell.schemas.classroom import Classroom
from examcell.schemas.exam import Exam
from examcell.schemas.planning import ExamPlan
from examcell.services.faculty_assignment import FacultyAssigner
from examcell.services.registry import Registry
from examcell.services.seating import auto_generate_seating, find_seating_conflicts, unassigned_students

logger = logging.getLogger(__name__)


class ExamPlanner:
    """Runs supervisor assignment and seating for one exam against a registry snapshot.

    The returned plan carries an updated copy of the exam; persisting it is
    left to the caller.
    """

    def __init__(self, registry: Registry, settings: Settings | None = None) -> None:
        self.registry = registry
        self.settings = settings or get_settings()
        self.assigner = FacultyAssigner(registry, self.settings)

    def load_classrooms(self, exam: Exam) -> list[Classroom]:
        return [self.registry.get_classroom(classroom_id) for classroom_id in dict.fromkeys(exam.classroom_ids)]

    def plan(self, exam_id: str, subject: str | None = None) -> ExamPlan:
        exam = self.registry.get_exam(exam_id)
        if not exam.classroom_ids:
            raise AssignmentError("Assign classrooms to the exam before planning", details={"exam_id": exam.id})
        classrooms = self.load_classrooms(exam)
        warnings: list[str] = []

        conflicts = find_seating_conflicts(exam.seat_arrangements)
        for conflict in conflicts:
            logger.warning("Exam %s has a conflicting saved seat: %s", exam.id, conflict.description)
            warnings.append(conflict.description)

        assignment = self.assigner.assign(
            exam.model_copy(update={"faculty_ids": []}),
            classrooms,
            subject if subject is not None else exam.subject,
        )
        if not assignment.faculty_ids:
            message = "No suitable faculty available for this exam"
            logger.warning("Exam %s: %s", exam.id, message)
            warnings.append(message)
        elif assignment.shortfall:
            message = (
                f"Only {len(assignment.faculty_ids)} of {assignment.required} required supervisors could be assigned"
            )
            logger.warning("Exam %s: %s", exam.id, message)
            warnings.append(message)

        arrangements = auto_generate_seating(exam.student_ids, classrooms, exam.seat_arrangements)
        unseated = unassigned_students(exam.student_ids, arrangements)
        if unseated:
            message = f"{len(unseated)} student(s) could not be seated; add classrooms or capacity"
            logger.warning("Exam %s: %s", exam.id, message)
            warnings.append(message)

        planned = exam.model_copy(
            update={"faculty_ids": list(assignment.faculty_ids), "seat_arrangements": arrangements}
        )
        logger.info(
            "Planned exam %s: %d supervisor(s), %d seated, %d unseated",
            exam.id,
            len(assignment.faculty_ids),
            len(set(exam.student_ids)) - len(unseated),
            len(unseated),
        )
        return ExamPlan(
            exam=planned,
            required_supervisors=assignment.required,
            assigned_supervisors=len(assignment.faculty_ids),
            unassigned_student_ids=unseated,
            seating_conflicts=conflicts,
            warnings=warnings,
        )
