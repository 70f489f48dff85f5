from pydantic import BaseModel, Field


class ClassroomBase(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    building: str = Field(min_length=1, max_length=50)
    floor: int = Field(default=0, ge=-5, le=200)
    capacity: int
    has_projector: bool = False
    is_computer_lab: bool = False
    is_active: bool = True

    @property
    def usable_capacity(self) -> int:
        # Non-positive capacities contribute no seats.
        return max(self.capacity, 0)


class ClassroomCreate(ClassroomBase):
    capacity: int = Field(ge=1, le=1000)


class ClassroomUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    building: str | None = Field(default=None, min_length=1, max_length=50)
    floor: int | None = Field(default=None, ge=-5, le=200)
    capacity: int | None = Field(default=None, ge=1, le=1000)
    has_projector: bool | None = None
    is_computer_lab: bool | None = None
    is_active: bool | None = None


class Classroom(ClassroomBase):
    id: str

    model_config = {"from_attributes": True}
