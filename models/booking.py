"""
Booking data models for the Club Slot Planner.

This module defines the 'Output' of the planner:
concrete reservations of the shared calendar, the club events shown
alongside them, and the months they fall in.
"""

import calendar
from datetime import date as date_type, datetime
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .opening_hours import StoreModel


def to_local_naive(value: datetime) -> datetime:
    """
    Normalise a timestamp to naive organisation-local time.

    Aware instants (e.g. the Store's '...Z' UTC strings) are converted with
    ``astimezone()``, i.e. to the zone of the host process. The host must run
    with ``TZ`` set to the club's zone, otherwise a booking can land on the
    wrong hour or even the wrong day. Naive values are taken as already local.
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class SlotDraft(StoreModel):
    """A reservation not yet persisted by the Store."""
    user_id: str = Field(description="Owning member")
    user_name: str = Field(default="", description="Owner's display name")
    start: datetime = Field(description="Start of the booking (local time)")
    end: datetime = Field(description="End of the booking (local time)")

    @field_validator('start', 'end')
    @classmethod
    def normalise_timestamp(cls, v: datetime) -> datetime:
        return to_local_naive(v)

    @property
    def date(self) -> date_type:
        """Calendar date the booking starts on."""
        return self.start.date()

    @property
    def start_hhmm(self) -> str:
        return self.start.strftime("%H:%M")

    @property
    def end_hhmm(self) -> str:
        return self.end.strftime("%H:%M")

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)


class Slot(SlotDraft):
    """
    One member's persisted reservation.
    Only the owning member may change it; that rule is enforced by the caller.
    """
    id: str = Field(description="Unique identifier assigned by the Store")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "slot-1",
            "userId": "user-1",
            "userName": "Alice",
            "start": "2025-12-22T16:00:00",
            "end": "2025-12-22T20:00:00"
        }
    })


class Event(StoreModel):
    """
    A club event shown on the calendar next to the bookings.
    All-day events are shown on their start date.
    """
    id: str = Field(description="Unique identifier")
    title: str = Field(min_length=1)
    start: datetime = Field(description="Start of the event (local time)")
    end: datetime = Field(description="End of the event (local time)")
    all_day: bool = Field(default=False)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "event-1",
            "title": "Tournoi Interne",
            "start": "2025-12-13T14:00:00",
            "end": "2025-12-13T18:00:00",
            "allDay": False
        }
    })

    @field_validator('start', 'end')
    @classmethod
    def normalise_timestamp(cls, v: datetime) -> datetime:
        return to_local_naive(v)

    @property
    def date(self) -> date_type:
        return self.start.date()


class CalendarMonth(BaseModel):
    """A (year, month) pair used as a template target or quota reference."""
    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)

    @classmethod
    def from_date(cls, day: Union[date_type, datetime]) -> "CalendarMonth":
        return cls(year=day.year, month=day.month)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def days(self) -> List[date_type]:
        """Every calendar date of the month, in order."""
        count = calendar.monthrange(self.year, self.month)[1]
        return [date_type(self.year, self.month, d) for d in range(1, count + 1)]

    def contains(self, day: Union[date_type, datetime]) -> bool:
        return day.year == self.year and day.month == self.month

    def next(self) -> "CalendarMonth":
        if self.month == 12:
            return CalendarMonth(year=self.year + 1, month=1)
        return CalendarMonth(year=self.year, month=self.month + 1)

    def previous(self) -> "CalendarMonth":
        if self.month == 1:
            return CalendarMonth(year=self.year - 1, month=12)
        return CalendarMonth(year=self.year, month=self.month - 1)
