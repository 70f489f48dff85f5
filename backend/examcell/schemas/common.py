from __future__ import annotations

import re

# Indexed Sunday=0 ... Saturday=6.
DAY_NAMES = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

TIME_PATTERN: re.Pattern[str] = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def parse_time_to_minutes(value: str) -> int:
    if not TIME_PATTERN.match(value):
        raise ValueError("Time must be in HH:MM 24-hour format")
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def normalize_unique_strings(values: list[str], *, upper: bool = False) -> list[str]:
    seen: set[str] = set()
    normalized: list[str] = []
    for item in values:
        value = item.strip()
        if upper:
            value = value.upper()
        if not value or value in seen:
            continue
        seen.add(value)
        normalized.append(value)
    return normalized
