"""
Monthly Booking Quota.

Decides whether a member holds enough bookings in a month, which drives the
"fill in next month" reminder. The day-of-month and next-month gates are
policy applied by should_show_reminder, not by is_quota_met itself.
"""

import logging
from datetime import date as date_type
from typing import List, Optional

from models import CalendarMonth, Member, Role, Settings, SlotDraft

logger = logging.getLogger(__name__)


def count_member_slots(member_id: str, slots: List[SlotDraft], month: CalendarMonth) -> int:
    return sum(1 for slot in slots if slot.user_id == member_id and month.contains(slot.start))


def is_quota_met(
    member_id: str,
    role: Role,
    slots: List[SlotDraft],
    settings: Settings,
    reference_month: CalendarMonth
) -> bool:
    """True when no reminder is needed for ``reference_month``. Admins always pass."""
    if role == Role.ADMIN:
        return True
    return count_member_slots(member_id, slots, reference_month) >= settings.min_slots_required


def should_show_reminder(
    member: Optional[Member],
    slots: List[SlotDraft],
    settings: Settings,
    today: date_type
) -> bool:
    """
    Reminder banner for the signed-in member: shown from
    ``settings.reminder_start_day`` onwards when next month is under quota.
    """
    if member is None or member.is_admin:
        return False
    if today.day < settings.reminder_start_day:
        return False

    next_month = CalendarMonth.from_date(today).next()
    return not is_quota_met(member.id, member.role, slots, settings, next_month)


def members_needing_reminder(
    members: List[Member],
    slots: List[SlotDraft],
    settings: Settings,
    reference_month: CalendarMonth
) -> List[Member]:
    """Non-admin members under quota for ``reference_month`` (the admin reminder list)."""
    pending = [
        m for m in members
        if not m.is_admin and not is_quota_met(m.id, m.role, slots, settings, reference_month)
    ]
    logger.info(f"{len(pending)} member(s) under quota for {reference_month.label}")
    return pending
