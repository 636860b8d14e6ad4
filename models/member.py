"""
Member, Template and Settings data models for the Club Slot Planner.
"""

from enum import Enum
from typing import List

from pydantic import ConfigDict, Field

from .opening_hours import ClockTime, StoreModel


class Role(str, Enum):
    """Access level of a club member."""
    USER = "user"
    ADMIN = "admin"


class TemplateDay(StoreModel):
    """
    One recurring weekly commitment of a member.
    Start/end ordering is checked when the template is applied, so a bad
    entry only skips its own days.
    """
    day_of_week: int = Field(ge=0, le=6, description="0=Sunday, 6=Saturday")
    start_time: ClockTime = Field(description="Booking start on that weekday")
    end_time: ClockTime = Field(description="Booking end on that weekday")


class Member(StoreModel):
    """
    A club member as stored on their profile.
    The weekly template is owned and edited only by the member.
    """
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1, description="Display name stamped on bookings")
    role: Role = Field(default=Role.USER)
    template: List[TemplateDay] = Field(
        default_factory=list,
        description="Recurring weekly pattern used to bulk-generate bookings"
    )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "user-1",
            "name": "Alice",
            "role": "user",
            "template": [
                {"dayOfWeek": 1, "startTime": "16:00", "endTime": "20:00"},
                {"dayOfWeek": 3, "startTime": "16:00", "endTime": "20:00"}
            ]
        }
    })


class Settings(StoreModel):
    """Organisation-wide reminder policy."""
    reminder_start_day: int = Field(
        ge=1,
        le=28,
        description="Day of the month from which the next-month reminder is shown"
    )
    min_slots_required: int = Field(ge=0, description="Bookings a member must hold per month")
