"""
Template Application Result.

This module acts as the 'Memory' of one template run. It tracks:
1. Drafts to create (handed to the Store for persistence).
2. Per-day skips with their reason (holiday, out of hours, already booked).
3. Summary statistics for reporting.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date as date_type
from typing import Any, Dict, List, Optional, Set, Tuple

from models import CalendarMonth, SlotDraft, TemplateDay
from .constraints import BookingViolation, ViolationReason


@dataclass
class TemplateSkip:
    """Record of one template entry that produced no draft on a given day."""
    date: date_type
    entry: TemplateDay
    reason: ViolationReason
    message: str

    @classmethod
    def from_violation(cls, entry: TemplateDay, violation: BookingViolation) -> "TemplateSkip":
        return cls(violation.date, entry, violation.reason, violation.message)


@dataclass
class TemplateApplication:
    """
    Outcome of applying one member's weekly template to a month.
    The applier performs no I/O; persisting ``to_create`` is the Store's job.
    """
    owner_id: str
    month: CalendarMonth
    to_create: List[SlotDraft] = field(default_factory=list)
    skipped: List[TemplateSkip] = field(default_factory=list)

    def add_draft(self, draft: SlotDraft) -> None:
        self.to_create.append(draft)

    def record_skip(self, skip: TemplateSkip) -> None:
        self.skipped.append(skip)

    # --- Query Methods ---

    def skipped_dates(self) -> Set[date_type]:
        return {skip.date for skip in self.skipped}

    def created_dates(self) -> Set[date_type]:
        return {draft.date for draft in self.to_create}

    def get_date_range(self) -> Optional[Tuple[date_type, date_type]]:
        if not self.to_create:
            return None
        dates = [draft.date for draft in self.to_create]
        return min(dates), max(dates)

    # --- Reporting Methods ---

    def get_statistics(self) -> Dict[str, Any]:
        """Summary for the run report."""
        reasons = defaultdict(int)
        for skip in self.skipped:
            reasons[skip.reason.value] += 1

        booked_minutes = sum(draft.duration_minutes for draft in self.to_create)

        return {
            "owner_id": self.owner_id,
            "month": self.month.label,
            "created_count": len(self.to_create),
            "skipped_count": len(self.skipped),
            "skip_breakdown": dict(reasons),
            "booked_hours": round(booked_minutes / 60, 1),
            "date_range": self.get_date_range(),
        }

    def get_skip_report(self) -> List[Dict[str, Any]]:
        """Human-readable list of skipped days, in date order."""
        report = [
            {
                "date": skip.date.isoformat(),
                "day_of_week": skip.entry.day_of_week,
                "window": f"{skip.entry.start_time:%H:%M}-{skip.entry.end_time:%H:%M}",
                "reason": skip.reason.value,
                "message": skip.message,
            }
            for skip in self.skipped
        ]
        report.sort(key=lambda x: (x["date"], x["window"]))
        return report
