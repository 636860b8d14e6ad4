"""
Opening-Hours Resolution.

This module answers the question: "Is the club open on day X, and when?"
Layers are checked in a fixed order and the first match wins:
holiday > special period > default weekly hours.
"""

import logging
from dataclasses import dataclass
from datetime import date as date_type, time as time_type
from enum import Enum
from typing import Dict, List, Optional, Union

from models import (
    CalendarMonth,
    Holiday,
    OpeningHoursSettings,
    SpecialPeriod,
    day_of_week,
    find_weekday_hours,
)

logger = logging.getLogger(__name__)


class HoursSource(str, Enum):
    """Which configuration layer produced an open day."""
    DEFAULT = "Default"
    SPECIAL = "Special"


class ClosureReason(str, Enum):
    """Why the club is closed on a day."""
    HOLIDAY = "Holiday"
    NO_HOURS = "NoHours"


@dataclass(frozen=True)
class OpenDay:
    """The club is open from ``start`` to ``end``."""
    date: date_type
    start: time_type
    end: time_type
    source: HoursSource
    period_name: Optional[str] = None

    is_open = True


@dataclass(frozen=True)
class ClosedDay:
    """The club is closed all day."""
    date: date_type
    reason: ClosureReason
    holiday_name: Optional[str] = None
    period_name: Optional[str] = None

    is_open = False


ResolvedDay = Union[OpenDay, ClosedDay]


def find_holiday(day: date_type, settings: OpeningHoursSettings) -> Optional[Holiday]:
    for holiday in settings.holidays:
        if holiday.date == day:
            return holiday
    return None


def find_special_period(day: date_type, settings: OpeningHoursSettings) -> Optional[SpecialPeriod]:
    """First special period covering ``day`` (inclusive on both ends)."""
    for period in settings.special_periods:
        if period.contains(day):
            return period
    return None


def resolve_opening_hours(day: date_type, settings: OpeningHoursSettings) -> ResolvedDay:
    """
    Resolve the opening status of a calendar date.

    Missing weekday entries degrade to a closed day instead of failing:
    an incompletely configured club is treated as closed.
    """
    # 1. Holidays close the club whatever the schedule says
    holiday = find_holiday(day, settings)
    if holiday is not None:
        return ClosedDay(day, ClosureReason.HOLIDAY, holiday_name=holiday.name)

    weekday = day_of_week(day)

    # 2. Special periods replace the default schedule entirely
    period = find_special_period(day, settings)
    if period is not None:
        hours = find_weekday_hours(period.hours, weekday)
        if hours is None:
            logger.warning(
                f"Special period '{period.name}' has no hours for day_of_week={weekday}; treating {day} as closed"
            )
        if hours is None or not hours.is_open:
            return ClosedDay(day, ClosureReason.NO_HOURS, period_name=period.name)
        return OpenDay(day, hours.start, hours.end, HoursSource.SPECIAL, period_name=period.name)

    # 3. Default weekly hours
    hours = find_weekday_hours(settings.default_hours, weekday)
    if hours is None:
        logger.warning(f"Default hours missing for day_of_week={weekday}; treating {day} as closed")
    if hours is None or not hours.is_open:
        return ClosedDay(day, ClosureReason.NO_HOURS)
    return OpenDay(day, hours.start, hours.end, HoursSource.DEFAULT)


def resolve_month(month: CalendarMonth, settings: OpeningHoursSettings) -> Dict[date_type, ResolvedDay]:
    """Resolve every day of ``month``, in calendar order."""
    return {day: resolve_opening_hours(day, settings) for day in month.days()}


def open_days(month: CalendarMonth, settings: OpeningHoursSettings) -> List[OpenDay]:
    return [status for status in resolve_month(month, settings).values() if status.is_open]
