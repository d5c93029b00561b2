"""
Schedule view state.

ScheduleView holds the transient UI state of the schedule browser:

    selected department  ->  selected day  ->  lectures grouped by time slot

plus a free-text department search. Everything shown on screen is derived
from that state and the static dataset; nothing derived is stored.

Navigation is two levels deep (department, then day), so "back" is
reconstructed from the current state instead of keeping a history list.
If more levels are ever added, switch to an explicit stack of prior states.

No method here raises: lookups that find nothing resolve to None or an
empty list, and the UI shows its "nothing selected" / "no results" states.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from deptschedule.model import DaySchedule, Department, Lecture, TimeGroup


logger = logging.getLogger(__name__)


class ScheduleView:
    def __init__(self, departments: Sequence[Department]) -> None:
        self._departments: List[Department] = list(departments)

        self.selected_dept_code: Optional[str] = None
        self.selected_day: Optional[str] = None
        self.search_query: str = ""

    @property
    def departments(self) -> List[Department]:
        return list(self._departments)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def select_department(self, code: str) -> None:
        """
        Select a department. If it has at least one day, the first day is
        selected as well (saves the user one step).
        """
        self.selected_dept_code = code

        dept = self.selected_dept
        if dept is not None and dept.schedule:
            self.selected_day = dept.schedule[0].day_name

        logger.debug("select_department(%r) -> day=%r", code, self.selected_day)

    def select_day(self, day_name: str) -> None:
        # not validated: an unknown day simply yields no active schedule
        self.selected_day = day_name
        logger.debug("select_day(%r)", day_name)

    def go_back(self) -> None:
        if self.selected_day is not None:
            self.selected_day = None
        elif self.selected_dept_code is not None:
            self.selected_dept_code = None

    def reset_to_top(self) -> None:
        self.selected_dept_code = None
        self.selected_day = None

    def set_search_query(self, text: str) -> None:
        self.search_query = text

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def selected_dept(self) -> Optional[Department]:
        if self.selected_dept_code is None:
            return None
        for dept in self._departments:
            if dept.code == self.selected_dept_code:
                return dept
        return None

    @property
    def active_schedule(self) -> Optional[DaySchedule]:
        dept = self.selected_dept
        if dept is None or self.selected_day is None:
            return None
        for day in dept.schedule:
            if day.day_name == self.selected_day:
                return day
        return None

    @property
    def grouped_lectures(self) -> List[TimeGroup]:
        """
        Lectures of the active day, bucketed by exact time slot.

        Buckets are ordered by plain string comparison of the slot, so slots
        must be zero-padded "HH:MM" to come out in chronological order.
        Order within a bucket follows the dataset.
        """
        schedule = self.active_schedule
        if schedule is None:
            return []

        groups: Dict[str, List[Lecture]] = defaultdict(list)
        for lecture in schedule.lectures:
            groups[lecture.time_slot].append(lecture)

        return [TimeGroup(time=t, lectures=tuple(groups[t])) for t in sorted(groups)]

    @property
    def filtered_departments(self) -> List[Department]:
        """
        Departments whose name or code contains the search text (case-insensitive),
        in dataset order. An empty search returns everything.
        """
        if not self.search_query:
            return list(self._departments)

        query = self.search_query.lower()
        return [d for d in self._departments if query in d.name.lower() or query in d.code.lower()]
