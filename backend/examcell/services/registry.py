from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from examcell.core.exceptions import ResourceNotFoundError
from examcell.db.session import session_scope
from examcell.models.classroom import Classroom as ClassroomRow
from examcell.models.exam import Exam as ExamRow
from examcell.models.exam import ExamSeat
from examcell.models.faculty import Faculty as FacultyRow
from examcell.models.student import Student as StudentRow
from examcell.schemas.classroom import Classroom
from examcell.schemas.exam import Exam, SeatArrangement, StudentSeat
from examcell.schemas.faculty import Faculty
from examcell.schemas.student import Student


class Registry(Protocol):
    """Read access to the faculty, student, classroom and exam collections."""

    def list_faculty(self) -> list[Faculty]: ...

    def list_students(self) -> list[Student]: ...

    def list_classrooms(self) -> list[Classroom]: ...

    def list_exams(self) -> list[Exam]: ...

    def get_faculty(self, faculty_id: str) -> Faculty: ...

    def get_student(self, student_id: str) -> Student: ...

    def get_classroom(self, classroom_id: str) -> Classroom: ...

    def get_exam(self, exam_id: str) -> Exam: ...


class InMemoryRegistry:
    def __init__(
        self,
        *,
        faculty: Iterable[Faculty] = (),
        students: Iterable[Student] = (),
        classrooms: Iterable[Classroom] = (),
        exams: Iterable[Exam] = (),
    ) -> None:
        self._faculty = {item.id: item for item in faculty}
        self._students = {item.id: item for item in students}
        self._classrooms = {item.id: item for item in classrooms}
        self._exams = {item.id: item for item in exams}

    def list_faculty(self) -> list[Faculty]:
        return list(self._faculty.values())

    def list_students(self) -> list[Student]:
        return list(self._students.values())

    def list_classrooms(self) -> list[Classroom]:
        return list(self._classrooms.values())

    def list_exams(self) -> list[Exam]:
        return list(self._exams.values())

    def get_faculty(self, faculty_id: str) -> Faculty:
        return _lookup(self._faculty, "Faculty", faculty_id)

    def get_student(self, student_id: str) -> Student:
        return _lookup(self._students, "Student", student_id)

    def get_classroom(self, classroom_id: str) -> Classroom:
        return _lookup(self._classrooms, "Classroom", classroom_id)

    def get_exam(self, exam_id: str) -> Exam:
        return _lookup(self._exams, "Exam", exam_id)


def _lookup(items: dict, resource_type: str, resource_id: str):
    item = items.get(resource_id)
    if item is None:
        raise ResourceNotFoundError(resource_type, resource_id)
    return item


class SqlRegistry:
    """Read-only registry over the SQLAlchemy tables."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_faculty(self) -> list[Faculty]:
        rows = self.db.execute(select(FacultyRow).order_by(FacultyRow.name, FacultyRow.id)).scalars().all()
        return [Faculty.model_validate(row) for row in rows]

    def list_students(self) -> list[Student]:
        rows = self.db.execute(select(StudentRow).order_by(StudentRow.roll_number)).scalars().all()
        return [Student.model_validate(row) for row in rows]

    def list_classrooms(self) -> list[Classroom]:
        rows = self.db.execute(select(ClassroomRow).order_by(ClassroomRow.name)).scalars().all()
        return [Classroom.model_validate(row) for row in rows]

    def list_exams(self) -> list[Exam]:
        rows = (
            self.db.execute(select(ExamRow).order_by(ExamRow.exam_date, ExamRow.start_time, ExamRow.id))
            .scalars()
            .all()
        )
        seats_by_exam = self._load_seats([row.id for row in rows])
        return [self._to_exam(row, seats_by_exam.get(row.id, [])) for row in rows]

    def get_faculty(self, faculty_id: str) -> Faculty:
        row = self.db.get(FacultyRow, faculty_id)
        if row is None:
            raise ResourceNotFoundError("Faculty", faculty_id)
        return Faculty.model_validate(row)

    def get_student(self, student_id: str) -> Student:
        row = self.db.get(StudentRow, student_id)
        if row is None:
            raise ResourceNotFoundError("Student", student_id)
        return Student.model_validate(row)

    def get_classroom(self, classroom_id: str) -> Classroom:
        row = self.db.get(ClassroomRow, classroom_id)
        if row is None:
            raise ResourceNotFoundError("Classroom", classroom_id)
        return Classroom.model_validate(row)

    def get_exam(self, exam_id: str) -> Exam:
        row = self.db.get(ExamRow, exam_id)
        if row is None:
            raise ResourceNotFoundError("Exam", exam_id)
        return self._to_exam(row, self._load_seats([row.id]).get(row.id, []))

    def _load_seats(self, exam_ids: list[str]) -> dict[str, list[ExamSeat]]:
        if not exam_ids:
            return {}
        rows = (
            self.db.execute(
                select(ExamSeat)
                .where(ExamSeat.exam_id.in_(exam_ids))
                .order_by(ExamSeat.exam_id, ExamSeat.classroom_id, ExamSeat.seat_number)
            )
            .scalars()
            .all()
        )
        grouped: dict[str, list[ExamSeat]] = defaultdict(list)
        for row in rows:
            grouped[row.exam_id].append(row)
        return grouped

    @staticmethod
    def _to_exam(row: ExamRow, seat_rows: list[ExamSeat]) -> Exam:
        seats_by_room: dict[str, list[StudentSeat]] = defaultdict(list)
        for seat in seat_rows:
            seats_by_room[seat.classroom_id].append(StudentSeat.model_validate(seat))

        # Listed classrooms first, in exam order; rooms since dropped from the exam keep their seats.
        room_order = [room_id for room_id in row.classroom_ids if room_id in seats_by_room]
        room_order.extend(room_id for room_id in seats_by_room if room_id not in room_order)
        arrangements = [
            SeatArrangement(classroom_id=room_id, seats=seats_by_room[room_id]) for room_id in room_order
        ]
        return Exam(
            id=row.id,
            name=row.name,
            subject=row.subject,
            date=row.exam_date,
            start_time=row.start_time,
            end_time=row.end_time,
            exam_type=row.exam_type,
            classroom_ids=list(row.classroom_ids or []),
            faculty_ids=list(row.faculty_ids or []),
            student_ids=list(row.student_ids or []),
            seat_arrangements=arrangements,
        )


@contextmanager
def sql_registry() -> Iterator[SqlRegistry]:
    with session_scope() as db:
        yield SqlRegistry(db)
