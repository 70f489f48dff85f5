from pydantic import BaseModel, Field, field_validator

from examcell.schemas.common import normalize_unique_strings


class StudentBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    roll_number: str = Field(min_length=1, max_length=20)
    department: str = Field(min_length=1, max_length=50)
    semester: int = Field(ge=1, le=20)
    section: str = Field(min_length=1, max_length=10)
    elective_subjects: list[str] = Field(default_factory=list, max_length=50)


class StudentCreate(StudentBase):
    @field_validator("roll_number")
    @classmethod
    def normalize_roll_number(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("elective_subjects")
    @classmethod
    def normalize_elective_subjects(cls, value: list[str]) -> list[str]:
        return normalize_unique_strings(value)


class StudentUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    roll_number: str | None = Field(default=None, min_length=1, max_length=20)
    department: str | None = Field(default=None, min_length=1, max_length=50)
    semester: int | None = Field(default=None, ge=1, le=20)
    section: str | None = Field(default=None, min_length=1, max_length=10)
    elective_subjects: list[str] | None = Field(default=None, max_length=50)

    @field_validator("elective_subjects")
    @classmethod
    def normalize_optional_elective_subjects(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return normalize_unique_strings(value)


class Student(StudentBase):
    id: str

    model_config = {"from_attributes": True}
