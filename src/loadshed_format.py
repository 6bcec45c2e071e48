# -*- coding: utf-8 -*-
# Human-readable event periods

from datetime import datetime

from loadshed_schedule import EventKey

WEEKDAYS = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]

MONTHS = {
    1: "January", 2: "February", 3: "March", 4: "April",
    5: "May", 6: "June", 7: "July", 8: "August",
    9: "September", 10: "October", 11: "November", 12: "December"
}


def format_day(value: datetime) -> str:
    """e.g. "Wednesday, May 10" (day of month is not padded)"""
    return f"{WEEKDAYS[value.weekday()]}, {MONTHS[value.month]} {value.day}"


def format_date_range(start: datetime, end: datetime, note: str) -> str:
    """Render an event period, collapsing ranges that stay within one day

    "Wednesday, May 10 14:00 - 16:30 (Stage 2)"
    "Wednesday, May 10 22:00 - Thursday, May 11 00:30 (Stage 4)"
    """
    start_hour = start.strftime("%H:%M")
    end_hour = end.strftime("%H:%M")

    if start.date() == end.date():
        formatted = f"{format_day(start)} {start_hour} - {end_hour}"
    else:
        formatted = f"{format_day(start)} {start_hour} - {format_day(end)} {end_hour}"

    return f"{formatted} ({note})"


def format_key(key: EventKey) -> str:
    return format_date_range(key.start, key.end, key.note)


def format_label(text: str) -> str:
    """Humanize a raw "{start} - {end} ({note})" label; raises MalformedKey"""
    return format_key(EventKey.from_label(text))
