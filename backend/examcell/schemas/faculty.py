from pydantic import BaseModel, EmailStr, Field, field_validator

from examcell.models.faculty import SemesterPreference
from examcell.schemas.common import DAY_NAMES


def _normalize_availability(value: dict[str, bool]) -> dict[str, bool]:
    normalized: dict[str, bool] = {}
    for key, available in value.items():
        day = str(key).strip().lower()
        if day not in DAY_NAMES:
            raise ValueError(f"Invalid day value: {key}")
        normalized[day] = bool(available)
    return normalized


class FacultyBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    department: str = Field(min_length=1, max_length=50)
    email: EmailStr
    phone: str = Field(default="", max_length=20)
    max_supervisions: int = Field(default=3, ge=1, le=100)
    seniority: int = Field(default=1, ge=1, le=5)
    availability: dict[str, bool] = Field(default_factory=dict)
    preferred_semesters: SemesterPreference = SemesterPreference.both

    @field_validator("availability")
    @classmethod
    def normalize_availability(cls, value: dict[str, bool]) -> dict[str, bool]:
        return _normalize_availability(value)


class FacultyCreate(FacultyBase):
    pass


class FacultyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    department: str | None = Field(default=None, min_length=1, max_length=50)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=20)
    max_supervisions: int | None = Field(default=None, ge=1, le=100)
    seniority: int | None = Field(default=None, ge=1, le=5)
    availability: dict[str, bool] | None = None
    preferred_semesters: SemesterPreference | None = None

    @field_validator("availability")
    @classmethod
    def normalize_optional_availability(cls, value: dict[str, bool] | None) -> dict[str, bool] | None:
        if value is None:
            return None
        return _normalize_availability(value)


class Faculty(FacultyBase):
    id: str

    model_config = {"from_attributes": True}

    def is_available_on(self, day: str) -> bool:
        return self.availability.get(day, False)
