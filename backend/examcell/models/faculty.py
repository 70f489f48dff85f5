import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SAEnum, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from examcell.db.base import Base


class SemesterPreference(str, Enum):
    odd = "odd"
    even = "even"
    both = "both"


class Faculty(Base):
    __tablename__ = "faculty"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    max_supervisions: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    seniority: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    availability: Mapped[dict[str, bool]] = mapped_column(JSON, nullable=False, default=dict)
    preferred_semesters: Mapped[SemesterPreference] = mapped_column(
        SAEnum(SemesterPreference, name="semester_preference"),
        nullable=False,
        default=SemesterPreference.both,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), onupdate=func.now())
