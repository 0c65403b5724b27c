# backend/sportclass/schemas/sport.py
"""Sport schemas for SportClass."""

from pydantic import Field

from ..domain.entities import Sport
from ._strict_base import StrictModel, StrictRequestModel


class SportCreate(StrictRequestModel):
    name: str = Field(..., description="Unique sport name")
    category: str = Field(..., description="Free-form category, e.g. 'Coletivo'")


class SportUpdate(SportCreate):
    pass


class SportResponse(StrictModel):
    id: str
    name: str
    category: str
    is_team_sport: bool
    is_aquatic: bool

    @classmethod
    def from_entity(cls, sport: Sport) -> "SportResponse":
        return cls(
            id=sport.id,
            name=sport.name,
            category=sport.category,
            is_team_sport=sport.is_team_sport,
            is_aquatic=sport.is_aquatic,
        )
