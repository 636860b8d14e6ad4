"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Member, OpeningHoursSettings, Settings, Slot  # noqa: E402
from scheduler.config import default_opening_hours  # noqa: E402


def week(start="09:00", end="21:00", closed=()):
    """Seven weekday entries with the same window, except ``closed`` days."""
    return [
        {"dayOfWeek": d, "isOpen": d not in closed, "start": start, "end": end}
        for d in range(7)
    ]


@pytest.fixture
def opening_hours() -> OpeningHoursSettings:
    """Club defaults: Monday 09:00-21:00, holidays on 2025-01-01 and 2025-12-25."""
    return default_opening_hours()


@pytest.fixture
def summer_hours() -> OpeningHoursSettings:
    """Defaults plus a 'Vacances' period closing Mondays in July/August 2025."""
    return OpeningHoursSettings.model_validate({
        "defaultHours": week(),
        "specialPeriods": [{
            "id": "period-1",
            "name": "Vacances",
            "start": "2025-07-01",
            "end": "2025-08-31",
            "hours": week(start="10:00", end="18:00", closed=(1,)),
        }],
        "holidays": [{"id": "holiday-1", "name": "Fête nationale", "date": "2025-07-14"}],
    })


@pytest.fixture
def settings() -> Settings:
    return Settings(reminder_start_day=20, min_slots_required=2)


@pytest.fixture
def alice() -> Member:
    return Member.model_validate({
        "id": "user-1",
        "name": "Alice",
        "role": "user",
        "template": [{"dayOfWeek": 1, "startTime": "16:00", "endTime": "20:00"}],
    })


@pytest.fixture
def admin() -> Member:
    return Member(id="admin-1", name="Admin", role="admin")


@pytest.fixture
def make_slot():
    """Factory for persisted slots: make_slot("user-1", "2025-12-22 16:00", "2025-12-22 20:00")."""
    counter = {"n": 0}

    def _make(user_id: str, start: str, end: str, user_name: str = "") -> Slot:
        counter["n"] += 1
        return Slot(
            id=f"slot-{counter['n']}",
            user_id=user_id,
            user_name=user_name or user_id,
            start=datetime.fromisoformat(start),
            end=datetime.fromisoformat(end),
        )

    return _make
