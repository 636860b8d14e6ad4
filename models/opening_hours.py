"""
Opening-hours data models for the Club Slot Planner.

This module defines the 'Supply' side of the planner:
1. Weekly hours (the default schedule of the club, one entry per weekday)
2. Special periods (date ranges with their own weekly schedule)
3. Holidays (single days forced closed)
"""

from datetime import date, date as date_type, time
from typing import Annotated, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


# "HH:MM" on the wire, datetime.time in Python
ClockTime = Annotated[time, PlainSerializer(lambda t: t.strftime("%H:%M"), return_type=str)]


def day_of_week(day: date) -> int:
    """Weekday index with 0=Sunday, 6=Saturday."""
    return (day.weekday() + 1) % 7


class StoreModel(BaseModel):
    """Base model accepting the Store's camelCase keys as well as snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DailyHours(StoreModel):
    """One day's operating window."""
    is_open: bool = Field(description="False means the club is closed all day")
    start: ClockTime = Field(description="Opening time")
    end: ClockTime = Field(description="Closing time")

    @model_validator(mode='after')
    def validate_window(self):
        if self.is_open and self.start >= self.end:
            raise ValueError("Closing time must be strictly after opening time")
        return self


class WeeklyHoursDay(DailyHours):
    """DailyHours tagged with the weekday it applies to."""
    day_of_week: int = Field(ge=0, le=6, description="0=Sunday, 6=Saturday")


def _check_unique_weekdays(hours: List[WeeklyHoursDay]) -> List[WeeklyHoursDay]:
    seen = set()
    for entry in hours:
        if entry.day_of_week in seen:
            raise ValueError(f"Duplicate hours entry for day_of_week={entry.day_of_week}")
        seen.add(entry.day_of_week)
    return hours


def find_weekday_hours(hours: List[WeeklyHoursDay], weekday: int):
    """Return the entry for ``weekday`` (0=Sunday) or None."""
    for entry in hours:
        if entry.day_of_week == weekday:
            return entry
    return None


class SpecialPeriod(StoreModel):
    """
    Date-inclusive range (e.g. school holidays) with its own weekly schedule.
    Overlapping periods are allowed; resolution picks the first match.
    """
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1, description="e.g. 'Vacances d'été'")
    start: date = Field(description="First day of the period")
    end: date = Field(description="Last day of the period (inclusive)")
    hours: List[WeeklyHoursDay] = Field(
        default_factory=list,
        description="Weekly schedule overriding the defaults during the period"
    )

    @field_validator('hours')
    @classmethod
    def validate_unique_weekdays(cls, v):
        return _check_unique_weekdays(v)

    @model_validator(mode='after')
    def validate_dates(self):
        if self.end < self.start:
            raise ValueError("Special period end date cannot be before its start date")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class Holiday(StoreModel):
    """A single calendar day forced fully closed."""
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1, description="e.g. 'Noël'")
    date: date_type = Field(description="The closed day")


class OpeningHoursSettings(StoreModel):
    """
    Organisation-wide opening hours configuration.
    Created once and then only updated by admins.
    """
    default_hours: List[WeeklyHoursDay] = Field(
        default_factory=list,
        description="Standard weekly opening hours"
    )
    special_periods: List[SpecialPeriod] = Field(
        default_factory=list,
        description="Date ranges overriding the defaults, checked in order"
    )
    holidays: List[Holiday] = Field(
        default_factory=list,
        description="Days the club is closed regardless of any schedule"
    )

    @field_validator('default_hours')
    @classmethod
    def validate_unique_weekdays(cls, v):
        return _check_unique_weekdays(v)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "defaultHours": [
                {"dayOfWeek": 1, "isOpen": True, "start": "09:00", "end": "21:00"}
            ],
            "specialPeriods": [
                {
                    "id": "period-1",
                    "name": "Vacances",
                    "start": "2025-07-01",
                    "end": "2025-08-31",
                    "hours": [{"dayOfWeek": 1, "isOpen": False, "start": "00:00", "end": "00:00"}]
                }
            ],
            "holidays": [{"id": "holiday-2", "name": "Noël", "date": "2025-12-25"}]
        }
    })
