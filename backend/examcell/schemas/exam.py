import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from examcell.models.exam import ExamType
from examcell.schemas.common import TIME_PATTERN, normalize_unique_strings, parse_time_to_minutes


class StudentSeat(BaseModel):
    student_id: str = Field(min_length=1)
    seat_number: int = Field(ge=1)
    row: int = Field(ge=1)
    column: int = Field(ge=1)

    model_config = {"frozen": True, "from_attributes": True}


class SeatArrangement(BaseModel):
    classroom_id: str = Field(min_length=1)
    seats: list[StudentSeat] = Field(default_factory=list)

    def student_ids(self) -> list[str]:
        return [seat.student_id for seat in self.seats]


class ExamBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    subject: str = Field(min_length=1, max_length=100)
    date: datetime.date
    start_time: str
    end_time: str
    exam_type: ExamType = ExamType.internal1
    classroom_ids: list[str] = Field(default_factory=list)
    faculty_ids: list[str] = Field(default_factory=list)
    student_ids: list[str] = Field(default_factory=list)
    seat_arrangements: list[SeatArrangement] = Field(default_factory=list)

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time_format(cls, value: str) -> str:
        if not TIME_PATTERN.match(value):
            raise ValueError("Time must be in HH:MM 24-hour format")
        return value


class ExamCreate(ExamBase):
    @field_validator("classroom_ids", "faculty_ids", "student_ids")
    @classmethod
    def normalize_id_lists(cls, value: list[str]) -> list[str]:
        return normalize_unique_strings(value)

    @model_validator(mode="after")
    def validate_order(self) -> "ExamCreate":
        if parse_time_to_minutes(self.end_time) <= parse_time_to_minutes(self.start_time):
            raise ValueError("end_time must be after start_time")
        return self


class ExamUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    subject: str | None = Field(default=None, min_length=1, max_length=100)
    date: datetime.date | None = None
    start_time: str | None = None
    end_time: str | None = None
    exam_type: ExamType | None = None
    classroom_ids: list[str] | None = None
    faculty_ids: list[str] | None = None
    student_ids: list[str] | None = None
    seat_arrangements: list[SeatArrangement] | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_optional_time_format(cls, value: str | None) -> str | None:
        if value is not None and not TIME_PATTERN.match(value):
            raise ValueError("Time must be in HH:MM 24-hour format")
        return value

    @model_validator(mode="after")
    def validate_order(self) -> "ExamUpdate":
        if self.start_time is None or self.end_time is None:
            return self
        if parse_time_to_minutes(self.end_time) <= parse_time_to_minutes(self.start_time):
            raise ValueError("end_time must be after start_time")
        return self


class Exam(ExamBase):
    id: str

    model_config = {"from_attributes": True}

    @property
    def is_external(self) -> bool:
        return self.exam_type == ExamType.external
