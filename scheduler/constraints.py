"""
Hard Constraint Validation Logic.

This module answers the binary question: "Can a booking run from X to Y?"
Domain failures come back as values (a violation or a list of issues) so that
batch callers can inspect them and carry on. Only a booking without a member
raises.
"""

import logging
from dataclasses import dataclass
from datetime import date as date_type, datetime, time as time_type
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from models import Member, OpeningHoursSettings, Settings, SlotDraft, to_local_naive
from .resolver import resolve_opening_hours

logger = logging.getLogger(__name__)

FULL_WEEK = frozenset(range(7))


class ViolationReason(str, Enum):
    OUTSIDE_OPENING_HOURS = "OutsideOpeningHours"
    INVALID_ORDERING = "InvalidOrdering"
    ALREADY_BOOKED = "AlreadyBooked"


@dataclass
class BookingViolation:
    """Detailed reason for rejection."""
    reason: ViolationReason
    message: str
    date: date_type
    start_time: time_type


class NotAuthenticatedError(Exception):
    """A booking was attempted without a member identity."""


class IssueKind(str, Enum):
    INVALID_VALUE = "InvalidValue"
    CONFIGURATION_INCOMPLETE = "ConfigurationIncomplete"


@dataclass
class ConfigurationIssue:
    kind: IssueKind
    location: str  # e.g. "defaultHours" or "specialPeriods.0.hours"
    message: str


class ConfigurationError(ValueError):
    """Raised by ensure_valid_configuration when issues were found."""

    def __init__(self, issues: List[ConfigurationIssue]):
        self.issues = issues
        details = "; ".join(f"{i.location}: {i.message}" for i in issues)
        super().__init__(f"Invalid configuration ({len(issues)} issue(s)): {details}")


class BookingChecker:
    """
    Validates a candidate booking against the opening hours of its day.
    Overlap with other members' bookings is allowed: the club is a shared
    resource, not an exclusive one.
    """

    def __init__(self, opening_hours: OpeningHoursSettings):
        self.opening_hours = opening_hours

    def check(self, start: datetime, end: datetime) -> Optional[BookingViolation]:
        """
        Master validation function. Returns None if Valid, Violation object if Invalid.
        """
        start = to_local_naive(start)
        end = to_local_naive(end)

        violation = self._check_opening_hours(start, end)
        if violation: return violation

        violation = self._check_ordering(start, end)
        if violation: return violation

        return None

    def _check_opening_hours(self, start: datetime, end: datetime) -> Optional[BookingViolation]:
        day = start.date()
        status = resolve_opening_hours(day, self.opening_hours)

        if not status.is_open:
            return BookingViolation(
                ViolationReason.OUTSIDE_OPENING_HOURS,
                f"Club is closed on {day} ({status.reason.value})",
                day, start.time()
            )

        # Bookings never cross midnight; the end must sit on the same day
        if end.date() != day:
            return BookingViolation(
                ViolationReason.OUTSIDE_OPENING_HOURS,
                "Booking crosses midnight",
                day, start.time()
            )

        if start.time() < status.start:
            return BookingViolation(
                ViolationReason.OUTSIDE_OPENING_HOURS,
                f"Starts before opening ({status.start:%H:%M})",
                day, start.time()
            )

        if end.time() > status.end:
            return BookingViolation(
                ViolationReason.OUTSIDE_OPENING_HOURS,
                f"Ends after closing ({status.end:%H:%M})",
                day, start.time()
            )
        return None

    def _check_ordering(self, start: datetime, end: datetime) -> Optional[BookingViolation]:
        if start >= end:
            return BookingViolation(
                ViolationReason.INVALID_ORDERING,
                "End time must be after start time",
                start.date(), start.time()
            )
        return None


def validate_booking(start: datetime, end: datetime, opening_hours: OpeningHoursSettings) -> Optional[BookingViolation]:
    """None when the booking fits the opening hours of its day."""
    return BookingChecker(opening_hours).check(start, end)


def book_slot(
    member: Optional[Member],
    start: datetime,
    end: datetime,
    opening_hours: OpeningHoursSettings
) -> Tuple[Optional[SlotDraft], Optional[BookingViolation]]:
    """
    Build a draft for a single booking made by ``member`` for themselves.
    Returns (draft, None) on success and (None, violation) on rejection.
    """
    if member is None:
        raise NotAuthenticatedError("A member must be signed in to book a slot")

    violation = validate_booking(start, end, opening_hours)
    if violation:
        logger.info(f"Booking rejected for {member.id}: {violation.message}")
        return None, violation

    draft = SlotDraft(user_id=member.id, user_name=member.name, start=start, end=end)
    return draft, None


# --- Configuration checks (called by the Store before persisting) ---

def _pydantic_issues(model_cls: Type[BaseModel], payload: Mapping[str, Any]) -> Tuple[Optional[BaseModel], List[ConfigurationIssue]]:
    try:
        return model_cls.model_validate(payload), []
    except ValidationError as e:
        issues = [
            ConfigurationIssue(
                IssueKind.INVALID_VALUE,
                ".".join(str(part) for part in err["loc"]) or model_cls.__name__,
                err["msg"]
            )
            for err in e.errors()
        ]
        return None, issues


def _week_issues(hours, location: str) -> List[ConfigurationIssue]:
    days = [entry.day_of_week for entry in hours]
    missing = sorted(FULL_WEEK - set(days))
    if not missing and len(days) == 7:
        return []
    return [ConfigurationIssue(
        IssueKind.CONFIGURATION_INCOMPLETE,
        location,
        f"Expected exactly 7 weekday entries, missing day_of_week {missing}"
    )]


def validate_configuration(config: Union[OpeningHoursSettings, Mapping[str, Any]]) -> List[ConfigurationIssue]:
    """
    Check an edited opening-hours configuration. An empty list means valid.
    Raw payloads (Store dicts) are parsed first; parse errors are reported
    as issues instead of being raised.
    """
    if not isinstance(config, OpeningHoursSettings):
        config, issues = _pydantic_issues(OpeningHoursSettings, config)
        if issues:
            return issues

    issues = _week_issues(config.default_hours, "defaultHours")
    for index, period in enumerate(config.special_periods):
        issues.extend(_week_issues(period.hours, f"specialPeriods.{index}.hours"))
    return issues


def validate_settings(settings: Union[Settings, Mapping[str, Any]]) -> List[ConfigurationIssue]:
    if isinstance(settings, Settings):
        return []
    _, issues = _pydantic_issues(Settings, settings)
    return issues


def ensure_valid_configuration(config: Union[OpeningHoursSettings, Mapping[str, Any]]) -> OpeningHoursSettings:
    """Parse and check ``config``, raising ConfigurationError on any issue."""
    issues = validate_configuration(config)
    if issues:
        raise ConfigurationError(issues)
    if isinstance(config, OpeningHoursSettings):
        return config
    return OpeningHoursSettings.model_validate(config)
