"""
Data models package for the Club Slot Planner.

This package exports the three core pillars of the data architecture:
1. Supply (DailyHours, WeeklyHoursDay, SpecialPeriod, Holiday, OpeningHoursSettings)
2. Demand (Member, Role, TemplateDay, Settings)
3. Output (SlotDraft, Slot, Event, CalendarMonth)
"""

from .opening_hours import (
    ClockTime,
    DailyHours,
    WeeklyHoursDay,
    SpecialPeriod,
    Holiday,
    OpeningHoursSettings,
    day_of_week,
    find_weekday_hours
)

from .member import (
    Member,
    Role,
    TemplateDay,
    Settings
)

from .booking import (
    SlotDraft,
    Slot,
    Event,
    CalendarMonth,
    to_local_naive
)

__all__ = [
    # --- Opening Hours Models ---
    "ClockTime",
    "DailyHours",
    "WeeklyHoursDay",
    "SpecialPeriod",
    "Holiday",
    "OpeningHoursSettings",
    "day_of_week",
    "find_weekday_hours",

    # --- Member Models ---
    "Member",
    "Role",
    "TemplateDay",
    "Settings",

    # --- Output Models ---
    "SlotDraft",
    "Slot",
    "Event",
    "CalendarMonth",
    "to_local_naive",
]
