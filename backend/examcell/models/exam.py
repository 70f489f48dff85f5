import uuid
from datetime import date, datetime
from enum import Enum

from sqlalchemy import Date, DateTime, Enum as SAEnum, Integer, JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from examcell.db.base import Base


class ExamType(str, Enum):
    internal1 = "internal1"
    internal2 = "internal2"
    external = "external"


class Exam(Base):
    __tablename__ = "exams"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    subject: Mapped[str] = mapped_column(String(100), nullable=False)
    exam_date: Mapped[date] = mapped_column("date", Date, nullable=False, index=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    exam_type: Mapped[ExamType] = mapped_column(
        SAEnum(ExamType, name="exam_type"),
        nullable=False,
        default=ExamType.internal1,
    )
    classroom_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    faculty_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    student_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), onupdate=func.now())


class ExamSeat(Base):
    __tablename__ = "exam_seats"
    __table_args__ = (
        UniqueConstraint("exam_id", "classroom_id", "seat_number", name="uq_exam_seats_exam_room_number"),
        UniqueConstraint("exam_id", "classroom_id", "row", "column", name="uq_exam_seats_exam_room_position"),
        UniqueConstraint("exam_id", "student_id", name="uq_exam_seats_exam_student"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    exam_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    classroom_id: Mapped[str] = mapped_column(String(36), nullable=False)
    student_id: Mapped[str] = mapped_column(String(36), nullable=False)
    seat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    row: Mapped[int] = mapped_column(Integer, nullable=False)
    column: Mapped[int] = mapped_column(Integer, nullable=False)
