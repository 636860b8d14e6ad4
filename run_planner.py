"""
Main Execution Script for the Club Slot Planner.
Applies every member's weekly template to next month and reports the result.
"""

import os
import sys
import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from models import CalendarMonth, Event, Member, OpeningHoursSettings, Settings, Slot, SlotDraft
from scheduler import (
    TemplateApplication,
    apply_template,
    build_month_view,
    members_needing_reminder,
    validate_configuration,
)
from scheduler.config import (
    DATA_FILE,
    EXPORT_FILE,
    LOG_LEVEL,
    default_opening_hours,
    default_settings,
)

logger = logging.getLogger("Main")

DEMO_MEMBERS = [
    {"id": "user-1", "name": "Alice", "role": "user", "template": [
        {"dayOfWeek": 1, "startTime": "16:00", "endTime": "20:00"},
        {"dayOfWeek": 3, "startTime": "16:00", "endTime": "20:00"},
    ]},
    {"id": "user-2", "name": "Bob", "role": "user"},
    {"id": "user-3", "name": "Charlie", "role": "user"},
    {"id": "admin-1", "name": "Admin", "role": "admin"},
]


def load_club_data(filename: str) -> Optional[Dict[str, Any]]:
    """
    Load the Store snapshot (opening hours, settings, users, slots, events) from JSON
    and re-hydrate the models. Returns None when the file is unusable.
    """
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning(f"⚠️ Club data {filename} not found or invalid ({e}). Falling back to defaults.")
        return None

    try:
        opening_hours = (
            OpeningHoursSettings.model_validate(data["openingHours"])
            if "openingHours" in data else default_opening_hours()
        )
        settings = Settings.model_validate(data["settings"]) if "settings" in data else default_settings()
        members = [Member.model_validate(item) for item in data.get("users", [])]
        slots = [Slot.model_validate(item) for item in data.get("slots", [])]
        events = [Event.model_validate(item) for item in data.get("events", [])]
    except ValidationError as e:
        logger.error(f"❌ Club data {filename} failed validation: {e}")
        return None

    logger.info(f"📂 Loaded {len(members)} members and {len(slots)} slots from {filename}")
    return {
        "opening_hours": opening_hours,
        "settings": settings,
        "members": members,
        "slots": slots,
        "events": events,
    }


def default_club_data() -> Dict[str, Any]:
    return {
        "opening_hours": default_opening_hours(),
        "settings": default_settings(),
        "members": [Member.model_validate(item) for item in DEMO_MEMBERS],
        "slots": [],
        "events": [],
    }


def apply_all_templates(
    members: List[Member],
    slots: List[SlotDraft],
    opening_hours: OpeningHoursSettings,
    month: CalendarMonth
) -> List[TemplateApplication]:
    """
    Apply templates one member at a time; each run sees the drafts of the
    previous ones so a re-run never duplicates bookings.
    """
    results = []
    known: List[SlotDraft] = list(slots)
    for member in members:
        if not member.template:
            continue
        result = apply_template(member.template, month, known, opening_hours, member.id, member.name)
        known.extend(result.to_create)
        results.append(result)
    return results


def build_planning_export(
    month: CalendarMonth,
    opening_hours: OpeningHoursSettings,
    slots: List[SlotDraft],
    results: List[TemplateApplication],
    reminders: List[Member],
    events: Optional[List[Event]] = None
) -> Dict[str, Any]:
    """Serialise the run into a JSON-ready dict for the frontend."""
    drafts = [draft for result in results for draft in result.to_create]

    days = {}
    for view in build_month_view(month, opening_hours, [*slots, *drafts], events):
        days[view.date.isoformat()] = {
            "is_open": view.is_open,
            "label": view.label,
            "hours": f"{view.status.start:%H:%M}-{view.status.end:%H:%M}" if view.is_open else None,
            "slots": [s.model_dump(mode='json', by_alias=True) for s in view.slots],
            "events": [e.model_dump(mode='json', by_alias=True) for e in view.events],
        }

    return {
        "month": month.label,
        "days": days,
        "to_create": [d.model_dump(mode='json', by_alias=True) for d in drafts],
        "skipped": {r.owner_id: r.get_skip_report() for r in results},
        "reminders": [m.id for m in reminders],
    }


def main(today: Optional[date] = None):
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
    today = today or date.today()
    target = CalendarMonth.from_date(today).next()

    logger.info(f"🚀 Planning bookings for {target.label}...")

    # --- PHASE 1: DATA ACQUISITION (File vs. Defaults) ---
    data = load_club_data(DATA_FILE) or default_club_data()

    issues = validate_configuration(data["opening_hours"])
    for issue in issues:
        logger.warning(f"⚠️ {issue.kind.value} at {issue.location}: {issue.message}")

    # --- PHASE 2: TEMPLATE APPLICATION ---
    results = apply_all_templates(data["members"], data["slots"], data["opening_hours"], target)

    # --- PHASE 3: REPORTING ---
    all_slots = [*data["slots"], *(d for r in results for d in r.to_create)]
    reminders = members_needing_reminder(data["members"], all_slots, data["settings"], target)

    print("\n" + "=" * 50)
    print(f"📊 TEMPLATE REPORT {target.label}")
    print("=" * 50)
    for result in results:
        print(result.get_statistics())
        for skip in result.get_skip_report():
            print(f"   ⏭️  {skip['date']} {skip['window']}: {skip['message']}")

    if reminders:
        print("\n🔔 MEMBERS UNDER QUOTA")
        for member in reminders:
            print(f"   - {member.name} ({member.id})")

    # --- PHASE 4: EXPORT FOR FRONTEND ---
    export = build_planning_export(
        target, data["opening_hours"], data["slots"], results, reminders, data["events"]
    )
    with open(EXPORT_FILE, 'w', encoding='utf-8') as f:
        json.dump(export, f, indent=2, ensure_ascii=False)
    logger.info(f"💾 Planning exported to {EXPORT_FILE}")


if __name__ == "__main__":
    main()
