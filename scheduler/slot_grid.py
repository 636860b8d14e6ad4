"""
Slot-Grid Generation.

Builds the start/end choices a booking form offers for one day.
Options are recomputed on every call from the resolved day; nothing is cached.
"""

from datetime import time as time_type
from typing import List, Optional, Tuple, Union

from models import SlotDraft
from .config import MIN_BOOKING_MINUTES, SLOT_GRANULARITY_MINUTES
from .resolver import ResolvedDay

Clock = Union[str, time_type]


def parse_clock(value: Clock) -> time_type:
    """Accept 'HH:MM' strings or time objects."""
    if isinstance(value, time_type):
        return value
    return time_type.fromisoformat(value)


def to_minutes(value: Clock) -> int:
    t = parse_clock(value)
    return t.hour * 60 + t.minute


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def generate_start_options(resolved: ResolvedDay, existing: Optional[SlotDraft] = None) -> List[str]:
    """
    Every half-hour step from opening time, strictly before closing time.
    When editing ``existing``, its own start stays selectable if it lies
    inside the opening window.
    """
    if not resolved.is_open:
        return []

    open_min = to_minutes(resolved.start)
    close_min = to_minutes(resolved.end)
    options = [format_minutes(m) for m in range(open_min, close_min, SLOT_GRANULARITY_MINUTES)]

    if existing is not None and existing.date == resolved.date:
        current = existing.start_hhmm
        if open_min <= to_minutes(current) < close_min and current not in options:
            options.append(current)
            options.sort()
    return options


def generate_end_options(resolved: ResolvedDay, chosen_start: Clock) -> List[str]:
    """
    Every half-hour step from ``chosen_start`` + 30min up to closing time
    (inclusive), so a booking lasts at least 30 minutes and never runs past
    closing.
    """
    if not resolved.is_open:
        return []

    close_min = to_minutes(resolved.end)
    first = to_minutes(chosen_start) + MIN_BOOKING_MINUTES
    return [format_minutes(m) for m in range(first, close_min + 1, SLOT_GRANULARITY_MINUTES)]


def default_selection(resolved: ResolvedDay, existing: Optional[SlotDraft] = None) -> Optional[Tuple[str, str]]:
    """
    The (start, end) pair a booking form preselects.
    Editing keeps the booking's own times when it falls on the same day;
    otherwise the first start option and its first end option.
    """
    if not resolved.is_open:
        return None

    if existing is not None and existing.date == resolved.date:
        return existing.start_hhmm, existing.end_hhmm

    for start in generate_start_options(resolved):
        ends = generate_end_options(resolved, start)
        if ends:
            return start, ends[0]
    return None
