from datetime import date, datetime

import pytest

from models import CalendarMonth, Holiday, TemplateDay
from scheduler import TemplateApplier, ViolationReason, apply_template
from scheduler.config import with_holiday

DECEMBER = CalendarMonth(year=2025, month=12)
DECEMBER_MONDAYS = [date(2025, 12, d) for d in (1, 8, 15, 22, 29)]


@pytest.fixture
def monday_template():
    return [TemplateDay.model_validate({"dayOfWeek": 1, "startTime": "16:00", "endTime": "20:00"})]


@pytest.fixture
def hours_with_monday_holiday(opening_hours):
    return with_holiday(opening_hours, Holiday(id="h-x", name="Fermeture", date=date(2025, 12, 22)))


def test_holiday_monday_is_skipped_others_created(monday_template, hours_with_monday_holiday):
    result = apply_template(monday_template, DECEMBER, [], hours_with_monday_holiday, "user-1", "Alice")

    assert result.skipped_dates() == {date(2025, 12, 22)}
    assert result.skipped[0].reason == ViolationReason.OUTSIDE_OPENING_HOURS
    assert sorted(result.created_dates()) == [d for d in DECEMBER_MONDAYS if d != date(2025, 12, 22)]

    draft = result.to_create[0]
    assert draft.start == datetime(2025, 12, 1, 16, 0)
    assert draft.end == datetime(2025, 12, 1, 20, 0)
    assert (draft.user_id, draft.user_name) == ("user-1", "Alice")


def test_second_run_creates_nothing(monday_template, opening_hours):
    first = apply_template(monday_template, DECEMBER, [], opening_hours, "user-1")
    second = apply_template(monday_template, DECEMBER, first.to_create, opening_hours, "user-1")

    assert len(first.to_create) == 5
    assert second.to_create == []
    assert {s.reason for s in second.skipped} == {ViolationReason.ALREADY_BOOKED}


def test_same_applier_can_run_twice(monday_template, opening_hours):
    applier = TemplateApplier(monday_template, DECEMBER, [], opening_hours, "user-1")

    first = applier.run()
    second = applier.run()

    assert len(first.to_create) == 5
    assert len(second.to_create) == 5
    assert second.skipped == []


def test_existing_slot_with_same_start_is_not_duplicated(monday_template, opening_hours, make_slot):
    existing = [make_slot("user-1", "2025-12-08 16:00", "2025-12-08 18:00")]

    result = apply_template(monday_template, DECEMBER, existing, opening_hours, "user-1")
    assert date(2025, 12, 8) not in result.created_dates()
    assert len(result.to_create) == 4


def test_other_members_slots_do_not_block(monday_template, opening_hours, make_slot):
    existing = [make_slot("user-2", "2025-12-08 16:00", "2025-12-08 20:00")]

    result = apply_template(monday_template, DECEMBER, existing, opening_hours, "user-1")
    assert len(result.to_create) == 5


def test_different_start_time_creates_a_second_slot(monday_template, opening_hours, make_slot):
    existing = [make_slot("user-1", "2025-12-08 17:00", "2025-12-08 20:00")]

    result = apply_template(monday_template, DECEMBER, existing, opening_hours, "user-1")
    assert date(2025, 12, 8) in result.created_dates()


def test_multiple_entries_for_the_same_weekday(opening_hours):
    template = [
        TemplateDay(day_of_week=3, start_time="09:00", end_time="10:00"),
        TemplateDay(day_of_week=3, start_time="18:00", end_time="20:00"),
    ]

    result = apply_template(template, DECEMBER, [], opening_hours, "user-1")
    wednesdays = [d for d in DECEMBER.days() if d.weekday() == 2]
    assert len(result.to_create) == 2 * len(wednesdays)


def test_repeated_entry_in_template_is_created_once(opening_hours):
    entry = TemplateDay(day_of_week=1, start_time="16:00", end_time="20:00")

    result = apply_template([entry, entry], DECEMBER, [], opening_hours, "user-1")
    assert len(result.to_create) == 5
    assert len(result.skipped) == 5


def test_entry_outside_hours_is_skipped_every_week(opening_hours):
    # Sunday closes at 12:30
    template = [TemplateDay(day_of_week=0, start_time="11:00", end_time="13:00")]

    result = apply_template(template, DECEMBER, [], opening_hours, "user-1")
    assert result.to_create == []
    assert len(result.skipped) == 4


def test_reversed_entry_is_skipped_as_invalid_ordering(opening_hours):
    template = [TemplateDay(day_of_week=2, start_time="18:00", end_time="16:00")]

    result = apply_template(template, DECEMBER, [], opening_hours, "user-1")
    assert result.to_create == []
    assert {s.reason for s in result.skipped} == {ViolationReason.INVALID_ORDERING}


def test_special_period_closure_skips_days(summer_hours):
    template = [TemplateDay(day_of_week=1, start_time="10:00", end_time="12:00")]

    result = apply_template(template, CalendarMonth(year=2025, month=7), [], summer_hours, "user-1")
    assert result.to_create == []
    assert len(result.skipped) == 4


def test_empty_template(opening_hours):
    result = TemplateApplier([], DECEMBER, [], opening_hours, "user-1").run()
    assert result.to_create == []
    assert result.skipped == []
    assert result.get_date_range() is None


def test_statistics_and_skip_report(monday_template, hours_with_monday_holiday):
    result = apply_template(monday_template, DECEMBER, [], hours_with_monday_holiday, "user-1")

    stats = result.get_statistics()
    assert stats["created_count"] == 4
    assert stats["skipped_count"] == 1
    assert stats["skip_breakdown"] == {"OutsideOpeningHours": 1}
    assert stats["booked_hours"] == 16.0
    assert stats["month"] == "2025-12"

    report = result.get_skip_report()
    assert report == [{
        "date": "2025-12-22",
        "day_of_week": 1,
        "window": "16:00-20:00",
        "reason": "OutsideOpeningHours",
        "message": "Club is closed on 2025-12-22 (Holiday)",
    }]
