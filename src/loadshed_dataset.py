# -*- coding: utf-8 -*-
"""
Dataset loader
Turns the area JSON (info / events / schedule.days) into model objects
"""

import json
from dataclasses import dataclass
from datetime import date
from typing import List, Tuple

from log_utils import log
from loadshed_schedule import (
    DatasetError,
    DaySchedule,
    LoadSheddingError,
    MalformedEvent,
    OutageEvent,
    parse_instant,
)


@dataclass(frozen=True)
class Dataset:
    name: str
    events: Tuple[OutageEvent, ...]
    days: Tuple[DaySchedule, ...]


def parse_event(record: dict) -> OutageEvent:
    try:
        start = parse_instant(record["start"])
        end = parse_instant(record["end"])
        note = record["note"]
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedEvent(f"Bad event record {record!r}: {e}") from e
    if not isinstance(note, str):
        raise MalformedEvent(f"Event note must be text: {record!r}")
    return OutageEvent(start, end, note)


def parse_day(record: dict) -> DaySchedule:
    try:
        day_date = date.fromisoformat(record["date"])
        raw_stages = record["stages"]
    except (KeyError, TypeError, ValueError) as e:
        raise DatasetError(f"Bad schedule day {record!r}: {e}") from e

    # single slots are checked when matched, so one bad slot only drops its events
    if not isinstance(raw_stages, list) or not all(isinstance(slots, list) for slots in raw_stages):
        raise DatasetError(f"Schedule day {record['date']} stages must be lists of slots")
    stages = tuple(tuple(slots) for slots in raw_stages)
    return DaySchedule(day_date, stages, record.get("name", ""))


def load_dataset(data: dict) -> Dataset:
    """Build a Dataset from the parsed JSON

    Args:
        data: {"info": {"name": ...}, "events": [...], "schedule": {"days": [...]}}

    Returns:
        Dataset with events sorted by start. Bad event records are logged and skipped.
    """
    if not isinstance(data, dict):
        raise DatasetError("Dataset must be a JSON object")
    for section in ("info", "events", "schedule"):
        if section not in data:
            raise DatasetError(f"Dataset has no '{section}' section")
    if not isinstance(data["info"], dict) or not isinstance(data["schedule"], dict):
        raise DatasetError("Dataset 'info' and 'schedule' must be JSON objects")
    if "days" not in data["schedule"]:
        raise DatasetError("Dataset has no 'schedule.days' section")
    if not isinstance(data["events"], list) or not isinstance(data["schedule"]["days"], list):
        raise DatasetError("Dataset 'events' and 'schedule.days' must be JSON lists")

    name = data["info"].get("name", "")

    events: List[OutageEvent] = []
    for record in data["events"]:
        try:
            events.append(parse_event(record))
        except LoadSheddingError as e:
            log(f"⚠️ {e}")

    days = [parse_day(record) for record in data["schedule"]["days"]]

    events.sort(key=lambda event: event.start)
    return Dataset(name, tuple(events), tuple(days))


def read_dataset_file(path: str) -> Dataset:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    log(f"✔️ Loaded dataset from {path}")
    return load_dataset(data)
