"""
Static schedule dataset.

The faculty schedule ships inside the package as:

    data/schedule.json

It is loaded once at startup and turned into immutable records
(see deptschedule/model.py).

Format contract (not enforced here):
- department codes are unique
- day names are unique within one department
- time slots are zero-padded 24h "HH:MM" strings, so that plain string
  sorting gives chronological order
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from deptschedule.model import DaySchedule, Department, Lecture


logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_PATH = PACKAGE_DIR / "data" / "schedule.json"


@dataclass(frozen=True)
class Dataset:
    faculty: str = ""
    campus: str = ""
    departments: List[Department] = field(default_factory=list)


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x).strip()


def _load_json(path: Path) -> Any:
    """
    Load JSON from a file.

    Never crash if data is missing or broken.
    Instead, return None so callers fall back to an empty dataset.
    """
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("Schedule file not found: %s", path)
        return None
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Could not read schedule file %s: %s", path, e)
        return None


def _build_lecture(raw: Any) -> Optional[Lecture]:
    if not isinstance(raw, dict):
        return None

    lecture_id = _safe_str(raw.get("id"))
    time_slot = _safe_str(raw.get("time_slot"))
    if not lecture_id or not time_slot:
        return None

    return Lecture(
        id=lecture_id,
        time_slot=time_slot,
        title=_safe_str(raw.get("title")),
        instructor=_safe_str(raw.get("instructor")),
        location=_safe_str(raw.get("location")),
    )


def _build_day(raw: Any, dept_code: str) -> Optional[DaySchedule]:
    if not isinstance(raw, dict):
        return None

    day_name = _safe_str(raw.get("day_name"))
    if not day_name:
        return None

    lectures: List[Lecture] = []
    raw_lectures = raw.get("lectures", [])
    for item in raw_lectures if isinstance(raw_lectures, list) else []:
        lecture = _build_lecture(item)
        if lecture is None:
            logger.warning("Skipping invalid lecture in %s/%s: %r", dept_code, day_name, item)
            continue
        lectures.append(lecture)

    return DaySchedule(day_name=day_name, lectures=tuple(lectures))


def _build_department(raw: Any) -> Optional[Department]:
    if not isinstance(raw, dict):
        return None

    code = _safe_str(raw.get("code"))
    if not code:
        return None

    days: List[DaySchedule] = []
    raw_schedule = raw.get("schedule", [])
    for item in raw_schedule if isinstance(raw_schedule, list) else []:
        day = _build_day(item, code)
        if day is None:
            logger.warning("Skipping invalid day in %s: %r", code, item)
            continue
        days.append(day)

    return Department(
        code=code,
        name=_safe_str(raw.get("name")) or code,
        color=_safe_str(raw.get("color")),
        schedule=tuple(days),
    )


def load_dataset(path: str | Path | None = None) -> Dataset:
    """
    Load the schedule dataset from schedule.json.

    Uses the bundled file unless a custom path is given (mainly for tests
    and the --data CLI option). Returns an empty Dataset if the file is
    missing or invalid.
    """
    data_path = Path(path) if path is not None else DEFAULT_DATA_PATH
    raw = _load_json(data_path)

    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Unexpected top-level JSON in %s (expected an object)", data_path)
        return Dataset()

    departments: List[Department] = []
    raw_departments = raw.get("departments", [])
    for item in raw_departments if isinstance(raw_departments, list) else []:
        dept = _build_department(item)
        if dept is None:
            logger.warning("Skipping invalid department: %r", item)
            continue
        departments.append(dept)

    logger.debug("Loaded %d departments from %s", len(departments), data_path)

    return Dataset(
        faculty=_safe_str(raw.get("faculty")),
        campus=_safe_str(raw.get("campus")),
        departments=departments,
    )


def load_departments(path: str | Path | None = None) -> List[Department]:
    return load_dataset(path).departments
