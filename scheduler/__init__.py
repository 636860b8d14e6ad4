"""
Availability & slot-scheduling engine for the Club Slot Planner.

Every entry point is a pure function (or a run-once object) over the models
package; configuration is always passed in explicitly.
"""

from .resolver import (
    ClosedDay,
    ClosureReason,
    HoursSource,
    OpenDay,
    ResolvedDay,
    resolve_month,
    resolve_opening_hours
)

from .slot_grid import (
    default_selection,
    generate_end_options,
    generate_start_options
)

from .constraints import (
    BookingChecker,
    BookingViolation,
    ConfigurationError,
    ConfigurationIssue,
    IssueKind,
    NotAuthenticatedError,
    ViolationReason,
    book_slot,
    ensure_valid_configuration,
    validate_booking,
    validate_configuration,
    validate_settings
)

from .engine import TemplateApplier, apply_template
from .state import TemplateApplication, TemplateSkip
from .quota import is_quota_met, members_needing_reminder, should_show_reminder
from .month_view import DayView, build_month_view

__all__ = [
    # --- Opening-Hours Resolver ---
    "ClosedDay",
    "ClosureReason",
    "HoursSource",
    "OpenDay",
    "ResolvedDay",
    "resolve_month",
    "resolve_opening_hours",

    # --- Slot Grid ---
    "default_selection",
    "generate_end_options",
    "generate_start_options",

    # --- Validation ---
    "BookingChecker",
    "BookingViolation",
    "ConfigurationError",
    "ConfigurationIssue",
    "IssueKind",
    "NotAuthenticatedError",
    "ViolationReason",
    "book_slot",
    "ensure_valid_configuration",
    "validate_booking",
    "validate_configuration",
    "validate_settings",

    # --- Template Application ---
    "TemplateApplier",
    "TemplateApplication",
    "TemplateSkip",
    "apply_template",

    # --- Quota & Views ---
    "is_quota_met",
    "members_needing_reminder",
    "should_show_reminder",
    "DayView",
    "build_month_view",
]
