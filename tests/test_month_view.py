from datetime import date, datetime

from models import CalendarMonth, Event
from scheduler import build_month_view


def test_month_view_labels(summer_hours):
    views = {v.date: v for v in build_month_view(CalendarMonth(year=2025, month=7), summer_hours, [])}

    assert len(views) == 31
    assert views[date(2025, 7, 14)].label == "Jour férié"
    assert views[date(2025, 7, 7)].label == "Vacances (Vacances)"
    assert not views[date(2025, 7, 7)].is_open
    assert views[date(2025, 7, 8)].label == "Vacances (Vacances)"
    assert views[date(2025, 7, 8)].is_open


def test_month_view_plain_days(opening_hours):
    views = {v.date: v for v in build_month_view(CalendarMonth(year=2025, month=12), opening_hours, [])}

    assert views[date(2025, 12, 22)].label == ""
    assert views[date(2025, 12, 25)].label == "Jour férié"


def test_closed_weekday_label(opening_hours):
    opening_hours.default_hours[0].is_open = False  # Sunday

    views = {v.date: v for v in build_month_view(CalendarMonth(year=2025, month=12), opening_hours, [])}
    assert views[date(2025, 12, 21)].label == "Fermé"


def test_month_view_groups_and_sorts_slots(opening_hours, make_slot):
    late = make_slot("user-2", "2025-12-22 18:00", "2025-12-22 20:00")
    early = make_slot("user-1", "2025-12-22 09:00", "2025-12-22 10:00")
    other_month = make_slot("user-1", "2026-01-05 09:00", "2026-01-05 10:00")

    views = {v.date: v for v in build_month_view(CalendarMonth(year=2025, month=12), opening_hours, [late, early, other_month])}

    assert views[date(2025, 12, 22)].slots == [early, late]
    assert sum(len(v.slots) for v in views.values()) == 2


def test_month_view_places_events_on_their_start_day(opening_hours):
    tournament = Event(id="event-1", title="Tournoi Interne",
                       start=datetime(2025, 12, 13, 14, 0), end=datetime(2025, 12, 13, 18, 0))
    closure = Event(id="event-2", title="Fermeture exceptionnelle",
                    start=datetime(2025, 12, 13, 0, 0), end=datetime(2025, 12, 14, 0, 0), all_day=True)
    next_year = Event(id="event-3", title="Galette des rois",
                      start=datetime(2026, 1, 10, 17, 0), end=datetime(2026, 1, 10, 19, 0))

    views = {v.date: v for v in build_month_view(
        CalendarMonth(year=2025, month=12), opening_hours, [], [tournament, next_year, closure]
    )}

    assert views[date(2025, 12, 13)].events == [closure, tournament]
    assert views[date(2025, 12, 14)].events == []
    assert sum(len(v.events) for v in views.values()) == 2


def test_event_accepts_store_keys():
    event = Event.model_validate({
        "id": "event-2", "title": "Fermeture exceptionnelle",
        "start": "2025-12-24T00:00:00", "end": "2025-12-25T00:00:00", "allDay": True,
    })

    assert event.all_day
    assert event.date == date(2025, 12, 24)
    assert event.model_dump(mode="json", by_alias=True)["allDay"] is True


def test_month_view_without_events(opening_hours):
    views = build_month_view(CalendarMonth(year=2025, month=12), opening_hours, [])
    assert all(v.events == [] for v in views)
