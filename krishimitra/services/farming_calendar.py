"""
farming_calendar.py — Crop stage timeline and dated field events.

Events are anchored to the first day of the month the season starts in;
offsets come from the crop's stage boundaries.
"""

import copy
from datetime import date, timedelta

from krishimitra.services.calculation import resolve


def _stage(name, start_day, end_day, activities):
    return {
        "name": name,
        "duration": f"{end_day - start_day} days",
        "activities": activities,
        "start_day": start_day,
        "end_day": end_day,
    }


CROP_TIMELINES = {
    "rice": {
        "crop": "Rice",
        "total_duration": 120,
        "stages": [
            _stage("Land Preparation", 0, 15, ["Plowing", "Harrowing", "Leveling"]),
            _stage("Sowing/Transplanting", 15, 25, ["Seed soaking", "Nursery preparation", "Transplanting"]),
            _stage("Vegetative Stage", 25, 70, ["Irrigation", "Weed management", "Fertilizer application"]),
            _stage("Reproductive Stage", 70, 100, ["Irrigation", "Pest monitoring", "Disease control"]),
            _stage("Ripening Stage", 100, 120, ["Water management", "Bird control"]),
        ],
    },
    "wheat": {
        "crop": "Wheat",
        "total_duration": 140,
        "stages": [
            _stage("Land Preparation", 0, 10, ["Plowing", "Harrowing", "Seed bed preparation"]),
            _stage("Sowing", 10, 15, ["Seed treatment", "Sowing", "Initial irrigation"]),
            _stage("Vegetative Stage", 15, 75, ["Irrigation", "Weed management", "Fertilizer application"]),
            _stage("Reproductive Stage", 75, 115, ["Irrigation", "Disease monitoring", "Pest control"]),
            _stage("Ripening Stage", 115, 140, ["Water management", "Harvest preparation"]),
        ],
    },
    "maize": {
        "crop": "Maize",
        "total_duration": 100,
        "stages": [
            _stage("Land Preparation", 0, 10, ["Plowing", "Harrowing", "Seed bed preparation"]),
            _stage("Sowing", 10, 15, ["Seed treatment", "Sowing", "Initial irrigation"]),
            _stage("Vegetative Stage", 15, 55, ["Irrigation", "Weed management", "Fertilizer application"]),
            _stage("Tasseling & Silking", 55, 75, ["Irrigation", "Disease monitoring", "Pest control"]),
            _stage("Grain Filling & Maturity", 75, 100, ["Water management", "Harvest preparation"]),
        ],
    },
}

DEFAULT_STAGES = [
    _stage("Land Preparation", 0, 15, ["Plowing", "Harrowing", "Seed bed preparation"]),
    _stage("Planting", 15, 25, ["Seed treatment", "Sowing/Planting", "Initial irrigation"]),
    _stage("Early Growth", 25, 55, ["Irrigation", "Weed management", "Fertilizer application"]),
    _stage("Mid Season", 55, 95, ["Irrigation", "Pest monitoring", "Disease control"]),
    _stage("Maturity & Harvest", 95, 120, ["Water management", "Harvest preparation", "Harvesting"]),
]
DEFAULT_TOTAL_DURATION = 120

IRRIGATION_ROUNDS = 4
IRRIGATION_INTERVAL_DAYS = 20


def crop_timeline(crop_type: str) -> dict:
    default = {"crop": crop_type, "total_duration": DEFAULT_TOTAL_DURATION, "stages": DEFAULT_STAGES}
    return copy.deepcopy(resolve(crop_type, CROP_TIMELINES, default))


def _event(event_id, title, day, event_type, description, priority):
    return {
        "id": event_id,
        "title": title,
        "date": day,
        "type": event_type,
        "description": description,
        "priority": priority,
    }


def calendar_events(crop_type: str, start: date, timeline: dict | None = None) -> list[dict]:
    """All season events for a crop, sorted by date."""
    timeline = timeline or crop_timeline(crop_type)
    stages = timeline["stages"]

    def on(offset):
        return start + timedelta(days=offset)

    events = [
        _event("event1", "Land Preparation", on(0), "other",
               "Begin land preparation activities including plowing and harrowing.", "high"),
        _event("event2", "Planting/Sowing", on(stages[1]["start_day"]), "planting",
               f"Start {crop_type} planting or sowing. Ensure proper seed treatment and spacing.", "high"),
        _event("event3", "First Fertilization", on(stages[2]["start_day"] + 5), "fertilization",
               "Apply first dose of fertilizer according to soil test recommendations.", "medium"),
    ]
    for i in range(1, IRRIGATION_ROUNDS + 1):
        events.append(_event(
            f"irrigation{i}", f"Irrigation {i}", on(i * IRRIGATION_INTERVAL_DAYS), "irrigation",
            "Scheduled irrigation based on crop water requirements.",
            "high" if i == 2 else "medium",
        ))
    events += [
        _event("pest1", "Pest Monitoring", on(stages[3]["start_day"] + 10), "pest_control",
               "Check for pest infestation and apply control measures if needed.", "medium"),
        _event("event6", "Second Fertilization", on(stages[3]["start_day"]), "fertilization",
               "Apply second dose of fertilizer to support reproductive growth.", "medium"),
        _event("event7", "Harvest Preparation", on(stages[4]["start_day"]), "other",
               "Prepare equipment and resources for upcoming harvest.", "medium"),
        _event("event8", "Harvest", on(timeline["total_duration"] - 5), "harvesting",
               f"Harvest {crop_type} at optimal maturity for best quality and yield.", "high"),
    ]
    events.sort(key=lambda e: e["date"])
    return events


def farming_calendar(crop_type: str, today: date | None = None, on_date: date | None = None) -> dict:
    """
    Timeline plus events for a season starting on the first of this month.
    on_date limits the events to that single day.
    """
    today = today or date.today()
    start = today.replace(day=1)
    timeline = crop_timeline(crop_type)
    events = calendar_events(crop_type, start, timeline)
    if on_date is not None:
        events = [e for e in events if e["date"] == on_date]

    return {
        "crop_type": crop_type,
        "season_start": start,
        "timeline": timeline,
        "events": events,
    }
