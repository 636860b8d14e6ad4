"""
Planner configuration constants and built-in club defaults.
"""

import os
from datetime import date

from models import Holiday, OpeningHoursSettings, Settings, SpecialPeriod

# --- SLOT GRID ---
SLOT_GRANULARITY_MINUTES = 30
MIN_BOOKING_MINUTES = 30

# --- DRIVER (run_planner.py) ---
DATA_FILE = os.environ.get("PLANNER_DATA_FILE", "club_data.json")
EXPORT_FILE = os.environ.get("PLANNER_EXPORT_FILE", "planning_export.json")
LOG_LEVEL = os.environ.get("PLANNER_LOG_LEVEL", "INFO").upper()

# --- CLUB DEFAULTS ---
_DEFAULT_SETTINGS = {"reminderStartDay": 20, "minSlotsRequired": 1}

_DEFAULT_OPENING_HOURS = {
    "defaultHours": [
        {"dayOfWeek": 0, "isOpen": True, "start": "09:00", "end": "12:30"},  # Sunday
        {"dayOfWeek": 1, "isOpen": True, "start": "09:00", "end": "21:00"},
        {"dayOfWeek": 2, "isOpen": True, "start": "09:00", "end": "21:00"},
        {"dayOfWeek": 3, "isOpen": True, "start": "09:00", "end": "21:00"},
        {"dayOfWeek": 4, "isOpen": True, "start": "09:00", "end": "21:30"},
        {"dayOfWeek": 5, "isOpen": True, "start": "09:00", "end": "22:00"},
        {"dayOfWeek": 6, "isOpen": True, "start": "09:00", "end": "19:00"},
    ],
    "specialPeriods": [],
    "holidays": [
        {"id": "holiday-1", "name": "Jour de l'an", "date": "2025-01-01"},
        {"id": "holiday-2", "name": "Noël", "date": "2025-12-25"},
    ],
}


def default_settings() -> Settings:
    """Fresh copy of the default reminder policy."""
    return Settings.model_validate(_DEFAULT_SETTINGS)


def default_opening_hours() -> OpeningHoursSettings:
    """Fresh copy of the default opening hours."""
    return OpeningHoursSettings.model_validate(_DEFAULT_OPENING_HOURS)


# --- ADMIN EDITS ---

def new_special_period(
    opening_hours: OpeningHoursSettings,
    period_id: str,
    name: str,
    start: date,
    end: date
) -> SpecialPeriod:
    """A special period seeded with a deep copy of the default weekly hours."""
    return SpecialPeriod(
        id=period_id,
        name=name,
        start=start,
        end=end,
        hours=[entry.model_copy(deep=True) for entry in opening_hours.default_hours]
    )


def with_holiday(opening_hours: OpeningHoursSettings, holiday: Holiday) -> OpeningHoursSettings:
    """Copy of ``opening_hours`` with ``holiday`` added, holidays kept sorted by date."""
    holidays = sorted([*opening_hours.holidays, holiday], key=lambda h: h.date)
    return opening_hours.model_copy(update={"holidays": holidays}, deep=True)


def with_special_period(opening_hours: OpeningHoursSettings, period: SpecialPeriod) -> OpeningHoursSettings:
    """Copy of ``opening_hours`` with ``period`` appended (checked after existing periods)."""
    periods = [*opening_hours.special_periods, period]
    return opening_hours.model_copy(update={"special_periods": periods}, deep=True)
