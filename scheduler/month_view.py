"""
Month Calendar View.

Combines resolved opening hours with the bookings and club events of each
day, ready for a month grid.
"""

from dataclasses import dataclass, field
from datetime import date as date_type
from typing import List, Optional

from models import CalendarMonth, Event, OpeningHoursSettings, SlotDraft
from .resolver import ClosureReason, ResolvedDay, resolve_month


@dataclass
class DayView:
    date: date_type
    status: ResolvedDay
    slots: List[SlotDraft] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.status.is_open

    @property
    def label(self) -> str:
        """Short French caption shown under the day number."""
        status = self.status
        if not status.is_open and status.reason == ClosureReason.HOLIDAY:
            return "Jour férié"
        if status.period_name:
            return f"Vacances ({status.period_name})"
        if not status.is_open:
            return "Fermé"
        return ""


def build_month_view(
    month: CalendarMonth,
    opening_hours: OpeningHoursSettings,
    slots: List[SlotDraft],
    events: Optional[List[Event]] = None
) -> List[DayView]:
    """
    One DayView per day of ``month``, each with its bookings and events
    sorted by start. Events sit on their start date, all-day ones included.
    """
    by_day = {day: DayView(day, status) for day, status in resolve_month(month, opening_hours).items()}

    for slot in slots:
        view = by_day.get(slot.date)
        if view is not None:
            view.slots.append(slot)

    for event in events or []:
        view = by_day.get(event.date)
        if view is not None:
            view.events.append(event)

    for view in by_day.values():
        view.slots.sort(key=lambda s: s.start)
        view.events.sort(key=lambda e: e.start)
    return list(by_day.values())
