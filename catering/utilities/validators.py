"""
Response and query schemas using Pydantic.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List


class MealQuery(BaseModel):
    """Query parameters for a single meal lookup."""
    date: str = Field(..., max_length=32)
    period: str = Field(..., min_length=1, max_length=32)

    @field_validator('period')
    @classmethod
    def normalize_period(cls, v):
        """Periods are matched against lowercase index keys."""
        v = v.strip().lower()
        if not v:
            raise ValueError('Period cannot be empty')
        return v


class MealResponse(BaseModel):
    date: str
    period: str
    meal: str


class WeekResponse(BaseModel):
    week_start: str
    exact: bool
    entries: Dict[str, str] = Field(default_factory=dict)


class IndexResponse(BaseModel):
    count: int
    weeks: List[str] = Field(default_factory=list)
    keys: List[str] = Field(default_factory=list)
