from typing import Literal

from pydantic import BaseModel, Field

from examcell.schemas.exam import Exam


class SeatingConflict(BaseModel):
    id: str
    conflict_type: Literal["duplicate_seat_number", "duplicate_position", "student_seated_twice"]
    description: str
    classroom_id: str
    student_ids: list[str] = Field(default_factory=list)


class FacultyWorkload(BaseModel):
    faculty_id: str
    name: str
    supervisions: int
    max_supervisions: int
    remaining: int
    saturated: bool


class ExamPlan(BaseModel):
    exam: Exam
    required_supervisors: int
    assigned_supervisors: int
    unassigned_student_ids: list[str] = Field(default_factory=list)
    seating_conflicts: list[SeatingConflict] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def supervisor_shortfall(self) -> int:
        return max(self.required_supervisors - self.assigned_supervisors, 0)
