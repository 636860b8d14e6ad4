"""
The Template Application Engine.

Turns a member's recurring weekly template into concrete booking drafts for
one month. The run is pure: it reads the existing bookings, never writes them,
and is safe to repeat because already-booked starts are skipped.

Repeat safety assumes the Store runs at most one application per member at a
time against an up-to-date snapshot of that member's bookings.
"""

import logging
from datetime import date as date_type, datetime
from typing import Dict, FrozenSet, List, Tuple

from models import (
    CalendarMonth,
    OpeningHoursSettings,
    SlotDraft,
    TemplateDay,
    day_of_week,
    to_local_naive,
)
from .constraints import BookingChecker, ViolationReason
from .state import TemplateApplication, TemplateSkip

logger = logging.getLogger(__name__)


class TemplateApplier:
    """
    Main template engine.
    Ingests a weekly template (Demand) and opening hours (Supply), outputs drafts.
    """

    def __init__(
        self,
        template: List[TemplateDay],
        month: CalendarMonth,
        existing_slots: List[SlotDraft],
        opening_hours: OpeningHoursSettings,
        owner_id: str,
        owner_name: str = ""
    ):
        self.template = template
        self.month = month
        self.owner_id = owner_id
        self.owner_name = owner_name

        self.checker = BookingChecker(opening_hours)

        # Starts the owner already holds; exact (date, start) match only
        self._existing_starts: FrozenSet[datetime] = frozenset(
            to_local_naive(slot.start) for slot in existing_slots if slot.user_id == owner_id
        )

    def run(self) -> TemplateApplication:
        """
        Execute the application pipeline.
        """
        result = TemplateApplication(owner_id=self.owner_id, month=self.month)
        if not self.template:
            logger.info(f"No template entries for {self.owner_id}; nothing to apply")
            return result

        entries_by_weekday = self._index_template()
        booked = set(self._existing_starts)

        # 1. Walk every day of the month
        for day in self.month.days():
            # 2. All entries for that weekday are candidates
            for entry in entries_by_weekday.get(day_of_week(day), []):
                start, end = self._build_window(day, entry)

                # 3. Opening hours & ordering; one bad day never aborts the batch
                violation = self.checker.check(start, end)
                if violation:
                    logger.debug(f"Skipping {day} {entry.start_time:%H:%M}: {violation.message}")
                    result.record_skip(TemplateSkip.from_violation(entry, violation))
                    continue

                # 4. Duplicate guard (also covers repeated entries in the same template)
                if start in booked:
                    result.record_skip(TemplateSkip(
                        day, entry, ViolationReason.ALREADY_BOOKED,
                        f"{self.owner_id} already holds a booking starting at {start:%H:%M}"
                    ))
                    continue

                booked.add(start)
                result.add_draft(SlotDraft(
                    user_id=self.owner_id,
                    user_name=self.owner_name,
                    start=start,
                    end=end
                ))

        logger.info(
            f"Template applied for {self.owner_id} on {self.month.label}: "
            f"{len(result.to_create)} to create, {len(result.skipped)} skipped"
        )
        return result

    def _index_template(self) -> Dict[int, List[TemplateDay]]:
        """Group entries by weekday, keeping template order."""
        index: Dict[int, List[TemplateDay]] = {}
        for entry in self.template:
            index.setdefault(entry.day_of_week, []).append(entry)
        return index

    @staticmethod
    def _build_window(day: date_type, entry: TemplateDay) -> Tuple[datetime, datetime]:
        return datetime.combine(day, entry.start_time), datetime.combine(day, entry.end_time)


def apply_template(
    template: List[TemplateDay],
    month: CalendarMonth,
    existing_slots: List[SlotDraft],
    opening_hours: OpeningHoursSettings,
    owner_id: str,
    owner_name: str = ""
) -> TemplateApplication:
    """Functional entry point around TemplateApplier."""
    return TemplateApplier(template, month, existing_slots, opening_hours, owner_id, owner_name).run()
