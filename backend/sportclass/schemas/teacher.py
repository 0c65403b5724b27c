# backend/sportclass/schemas/teacher.py
"""Teacher schemas for SportClass."""

from pydantic import Field

from ..domain.entities import Teacher
from ._strict_base import StrictModel, StrictRequestModel


class TeacherCreate(StrictRequestModel):
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Unique contact email")
    specialization: str = Field(..., description="Sport name the teacher may teach")


class TeacherResponse(StrictModel):
    id: str
    name: str
    short_name: str
    email: str
    specialization: str
    active: bool

    @classmethod
    def from_entity(cls, teacher: Teacher) -> "TeacherResponse":
        return cls(
            id=teacher.id,
            name=teacher.name,
            short_name=teacher.short_name,
            email=teacher.email,
            specialization=teacher.specialization,
            active=teacher.active,
        )
