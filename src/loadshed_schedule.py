#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load-shedding schedule reconciliation
Matches announced stage events against the recurring per-day stage slots
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from log_utils import log

SLOT_TIME_RE = re.compile(r'^(\d{2}):(\d{2})$')
STAGE_RE = re.compile(r'\d+')
LABEL_RE = re.compile(r'^(\S+) - (\S+) \((.*)\)$')


# ================== ERRORS ==================

class LoadSheddingError(ValueError):
    """Base class for everything the reconciliation pass can reject"""


class MalformedSlot(LoadSheddingError):
    pass


class MissingStage(LoadSheddingError):
    pass


class StageOutOfRange(LoadSheddingError):
    pass


class MalformedKey(LoadSheddingError):
    pass


class MalformedEvent(LoadSheddingError):
    pass


class DatasetError(LoadSheddingError):
    pass


# ================== MODEL ==================

def parse_instant(text: str) -> datetime:
    """Parse an ISO-8601 instant as naive local wall-clock time.

    Any UTC offset is dropped without converting, the wall-clock value is kept.
    """
    value = datetime.fromisoformat(text)
    return value.replace(tzinfo=None)


@dataclass(frozen=True)
class OutageEvent:
    start: datetime
    end: datetime
    note: str

    def __post_init__(self):
        if not self.start < self.end:
            raise MalformedEvent(f"Event must start before it ends: {self.start} - {self.end} ({self.note})")

    @property
    def key(self) -> "EventKey":
        return EventKey(self.start, self.end, self.note)


@dataclass(frozen=True)
class DaySchedule:
    date: date
    stages: Tuple[Tuple[str, ...], ...]
    name: str = ""


@dataclass(frozen=True)
class ResolvedSlot:
    start: datetime
    end: datetime
    start_text: str
    end_text: str

    @property
    def text(self) -> str:
        return f"{self.start_text}-{self.end_text}"


@dataclass(frozen=True)
class EventKey:
    """Grouping identity of one event, carried next to its display label"""
    start: datetime
    end: datetime
    note: str

    @property
    def label(self) -> str:
        return f"{self.start.isoformat(timespec='seconds')} - {self.end.isoformat(timespec='seconds')} ({self.note})"

    @classmethod
    def from_label(cls, text: str) -> "EventKey":
        """Read a key back out of a raw "{start} - {end} ({note})" label"""
        m = LABEL_RE.match(text.strip())
        if not m:
            raise MalformedKey(f"Not an event label: {text!r}")
        try:
            start = parse_instant(m.group(1))
            end = parse_instant(m.group(2))
        except ValueError as e:
            raise MalformedKey(f"Bad instant in label {text!r}: {e}") from e
        return cls(start, end, m.group(3))


MatchResult = Dict[EventKey, List[str]]


# ================== SLOTS ==================

def _slot_time(text: str, slot_text: str) -> time:
    m = SLOT_TIME_RE.match(text)
    if not m:
        raise MalformedSlot(f"Bad time {text!r} in slot {slot_text!r}")
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise MalformedSlot(f"Time out of range {text!r} in slot {slot_text!r}")
    return time(hour, minute)


def parse_slot(day_date: date, slot_text: str) -> ResolvedSlot:
    """Resolve a "HH:MM-HH:MM" slot on a given day

    A slot whose end text sorts before its start text rolls over to the next day.
    """
    if not isinstance(slot_text, str):
        raise MalformedSlot(f"Slot must be text, got {slot_text!r}")
    parts = slot_text.strip().split('-')
    if len(parts) != 2:
        raise MalformedSlot(f"Expected HH:MM-HH:MM, got {slot_text!r}")
    start_text, end_text = parts[0].strip(), parts[1].strip()

    start = datetime.combine(day_date, _slot_time(start_text, slot_text))
    end = datetime.combine(day_date, _slot_time(end_text, slot_text))

    # rollover is decided on the texts, not on the instants
    if end_text < start_text:
        end += timedelta(days=1)

    return ResolvedSlot(start, end, start_text, end_text)


# ================== MATCHING ==================

def extract_stage(note: str) -> int:
    m = STAGE_RE.search(note or "")
    if not m:
        raise MissingStage(f"No stage number in note {note!r}")
    return int(m.group(0))


def find_day(days: Sequence[DaySchedule], day_date: date) -> Optional[DaySchedule]:
    for day in days:
        if day.date == day_date:
            return day
    return None


def match_event(event: OutageEvent, days: Sequence[DaySchedule]) -> List[str]:
    """Return the display windows of one event, in slot order

    Args:
        event: The announced outage
        days: The recurring schedule, one entry per calendar day

    Returns:
        Windows like ["09:15-11:00", "18:00-20:30"], empty if the event's
        day is not in the schedule or no slot overlaps it
    """
    stage = extract_stage(event.note)

    day = find_day(days, event.start.date())
    if day is None:
        return []

    index = stage - 1
    if index < 0 or index >= len(day.stages):
        raise StageOutOfRange(
            f"Stage {stage} not in schedule for {day.date} ({len(day.stages)} stages)"
        )

    windows = []
    for slot_text in day.stages[index]:
        slot = parse_slot(day.date, slot_text)

        if event.start >= slot.start and event.end <= slot.end:
            # event started late inside the slot; it is still announced to end at the slot boundary
            windows.append(f"{event.start.strftime('%H:%M')}-{slot.end_text}")
        elif event.start < slot.end and event.end > slot.start:
            windows.append(slot.text)

    return windows


# ================== GROUPING ==================

def group_events(events: Sequence[OutageEvent], days: Sequence[DaySchedule]) -> MatchResult:
    """Map every event key to its matched windows, in the order events are given

    Duplicate keys: last write wins, the key keeps its first position.
    An event that fails to match is logged and left out.
    """
    result: MatchResult = {}

    for event in events:
        key = event.key
        try:
            windows = match_event(event, days)
        except LoadSheddingError as e:
            log(f"⚠️ Skipping event {key.label}: {e}")
            continue

        if key in result:
            log(f"🔄 Duplicate event {key.label}, replacing {result[key]} with {windows}")
        result[key] = windows

    return result
