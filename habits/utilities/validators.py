"""
Input validation schemas using Pydantic for better data integrity.
"""
from typing import Dict, List

from pydantic import BaseModel, Field, RootModel, StrictBool, field_validator, model_validator

from habits.domain.Habit import Color
from habits.utilities.constants import DAYS, MAX_HABIT_NAME_LENGTH


class HabitInput(BaseModel):
    """Schema for the add-habit dialog."""
    name: str = Field(..., max_length=MAX_HABIT_NAME_LENGTH)
    color: Color = Color.BLUE

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Trim and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError('Habit name cannot be empty')
        return v

    @field_validator('color', mode='before')
    @classmethod
    def parse_color(cls, v):
        return Color.parse(v)


class HabitRecord(BaseModel):
    """One habit as stored in a week file."""
    name: str = Field(..., min_length=1)
    color: Color
    days: Dict[str, StrictBool] = Field(default_factory=dict)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Habit name cannot be blank')
        return v

    @field_validator('color', mode='before')
    @classmethod
    def parse_color(cls, v):
        return Color.parse(v)

    @field_validator('days', mode='before')
    @classmethod
    def null_days(cls, v):
        return {} if v is None else v

    @field_validator('days')
    @classmethod
    def validate_days(cls, v):
        """Only the seven fixed day names are allowed; missing days mean not completed."""
        unknown = [d for d in v if d not in DAYS]
        if unknown:
            raise ValueError(f"Unknown day names: {', '.join(unknown)}")
        return v


class WeekSnapshot(RootModel[List[HabitRecord]]):
    """A whole week file: ordered list of habit records with unique names."""

    @model_validator(mode='after')
    def unique_names(self):
        seen = set()
        for record in self.root:
            if record.name in seen:
                raise ValueError(f"Duplicate habit name '{record.name}'")
            seen.add(record.name)
        return self

    def to_records(self) -> List[dict]:
        return [
            {"name": r.name, "color": r.color.value, "days": dict(r.days)}
            for r in self.root
        ]
