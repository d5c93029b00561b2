"""
Central data model definitions used across the project.

This module defines the canonical structure of the schedule records so that:
- the dataset loader, the view and the terminal UI share the same field names
- records stay immutable once loaded (the dataset never changes at runtime)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Lecture:
    """
    One scheduled teaching session on a given day.

    Only `time_slot` matters for grouping; the other fields are display data.
    """

    id: str
    time_slot: str
    title: str
    instructor: str
    location: str


@dataclass(frozen=True)
class DaySchedule:
    """
    All lectures of one department on one named day (e.g. "Sunday").
    """

    day_name: str
    lectures: Tuple[Lecture, ...]


@dataclass(frozen=True)
class Department:
    """
    Represents one academic department as stored in schedule.json.

    `color` is a presentation hint only (a rich colour name).
    """

    code: str
    name: str
    color: str
    schedule: Tuple[DaySchedule, ...]


@dataclass(frozen=True)
class TimeGroup:
    """
    Lectures of one day sharing the exact same time slot.
    """

    time: str
    lectures: Tuple[Lecture, ...]
