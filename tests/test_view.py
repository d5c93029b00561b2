"""
Unit tests for ScheduleView state and derived values.

Navigation contract:
- selecting a department auto-selects its first day (if any)
- back clears the day first, then the department, then does nothing
- failed lookups resolve to None / [] (no exceptions)
"""

import unittest

from deptschedule.model import DaySchedule, Department, Lecture
from deptschedule.view import ScheduleView


def _lecture(lecture_id: str, slot: str) -> Lecture:
    return Lecture(id=lecture_id, time_slot=slot, title=f"Lecture {lecture_id}", instructor="", location="")


def _dept(code: str, name: str, days: tuple = ()) -> Department:
    return Department(code=code, name=name, color="blue", schedule=days)


DERM = _dept(
    "DERM",
    "Dermatology",
    (
        DaySchedule("Sunday", (_lecture("A", "10:30"), _lecture("B", "08:30"), _lecture("C", "08:30"))),
        DaySchedule("Monday", ()),
    ),
)
CARD = _dept("CARD", "Cardiology", (DaySchedule("Tuesday", (_lecture("D", "12:30"),)),))
PEDS = _dept("PEDS", "Pediatrics")

DATASET = [DERM, CARD, PEDS]


class TestInitialState(unittest.TestCase):
    def test_starts_at_top_level(self) -> None:
        view = ScheduleView(DATASET)
        self.assertIsNone(view.selected_dept_code)
        self.assertIsNone(view.selected_day)
        self.assertEqual(view.search_query, "")
        self.assertIsNone(view.selected_dept)
        self.assertIsNone(view.active_schedule)
        self.assertEqual(view.grouped_lectures, [])


class TestSearch(unittest.TestCase):
    def test_empty_query_returns_full_dataset_in_order(self) -> None:
        view = ScheduleView(DATASET)
        self.assertEqual(view.filtered_departments, DATASET)

    def test_search_matches_name_case_insensitive(self) -> None:
        view = ScheduleView(DATASET)
        view.set_search_query("derm")
        self.assertEqual(view.filtered_departments, [DERM])

    def test_search_matches_code(self) -> None:
        view = ScheduleView(DATASET)
        view.set_search_query("Ca")
        self.assertEqual(view.filtered_departments, [CARD])

    def test_search_keeps_dataset_order(self) -> None:
        # "olog" is in Dermatology and Cardiology
        view = ScheduleView([CARD, PEDS, DERM])
        view.set_search_query("OLOG")
        self.assertEqual(view.filtered_departments, [CARD, DERM])

    def test_every_match_and_only_matches(self) -> None:
        view = ScheduleView(DATASET)
        for q in ["a", "d", "s", "IC", "x", "pEd"]:
            view.set_search_query(q)
            expected = [d for d in DATASET if q.lower() in d.name.lower() or q.lower() in d.code.lower()]
            self.assertEqual(view.filtered_departments, expected, q)

    def test_no_match_returns_empty(self) -> None:
        view = ScheduleView(DATASET)
        view.set_search_query("neuro")
        self.assertEqual(view.filtered_departments, [])

    def test_query_stored_verbatim(self) -> None:
        view = ScheduleView(DATASET)
        view.set_search_query("  Derm ")
        self.assertEqual(view.search_query, "  Derm ")
        # whitespace is part of the substring, so nothing matches
        self.assertEqual(view.filtered_departments, [])


class TestNavigation(unittest.TestCase):
    def test_select_department_auto_selects_first_day(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("DERM")
        self.assertEqual(view.selected_dept, DERM)
        self.assertEqual(view.selected_day, "Sunday")
        self.assertEqual(view.active_schedule, DERM.schedule[0])

    def test_select_department_without_days(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("PEDS")
        self.assertEqual(view.selected_dept, PEDS)
        self.assertIsNone(view.selected_day)
        self.assertIsNone(view.active_schedule)
        self.assertEqual(view.grouped_lectures, [])

    def test_select_unknown_department(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("NEUR")
        self.assertEqual(view.selected_dept_code, "NEUR")
        self.assertIsNone(view.selected_dept)
        self.assertIsNone(view.selected_day)
        self.assertIsNone(view.active_schedule)

    def test_select_day(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("DERM")
        view.select_day("Monday")
        self.assertEqual(view.active_schedule, DERM.schedule[1])
        self.assertEqual(view.grouped_lectures, [])

    def test_select_unknown_day_has_no_active_schedule(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("DERM")
        view.select_day("Friday")
        self.assertEqual(view.selected_day, "Friday")
        self.assertIsNone(view.active_schedule)
        self.assertEqual(view.grouped_lectures, [])

    def test_go_back_clears_day_then_department(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("DERM")

        view.go_back()
        self.assertIsNone(view.selected_day)
        self.assertEqual(view.selected_dept_code, "DERM")

        view.go_back()
        self.assertIsNone(view.selected_day)
        self.assertIsNone(view.selected_dept_code)

    def test_go_back_at_top_level_is_noop(self) -> None:
        view = ScheduleView(DATASET)
        view.set_search_query("card")
        view.go_back()
        self.assertIsNone(view.selected_dept_code)
        self.assertIsNone(view.selected_day)
        self.assertEqual(view.search_query, "card")

    def test_reset_to_top(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("CARD")
        view.reset_to_top()
        self.assertIsNone(view.selected_dept_code)
        self.assertIsNone(view.selected_day)


class TestGroupedLectures(unittest.TestCase):
    def test_groups_sorted_by_slot_with_stable_buckets(self) -> None:
        view = ScheduleView(DATASET)
        view.select_department("DERM")

        groups = view.grouped_lectures
        self.assertEqual([g.time for g in groups], ["08:30", "10:30"])
        self.assertEqual([lec.id for lec in groups[0].lectures], ["B", "C"])
        self.assertEqual([lec.id for lec in groups[1].lectures], ["A"])

    def test_every_lecture_kept_exactly_once(self) -> None:
        lectures = tuple(
            _lecture(str(i), slot)
            for i, slot in enumerate(["14:30", "08:30", "12:30", "08:30", "14:30", "10:30", "08:30"])
        )
        dept = _dept("X", "X", (DaySchedule("Sunday", lectures),))
        view = ScheduleView([dept])
        view.select_department("X")

        groups = view.grouped_lectures
        flat = [lec for g in groups for lec in g.lectures]
        self.assertEqual(sorted(lec.id for lec in flat), sorted(lec.id for lec in lectures))
        self.assertEqual([g.time for g in groups], sorted({lec.time_slot for lec in lectures}))
        for g in groups:
            self.assertTrue(all(lec.time_slot == g.time for lec in g.lectures))
            expected = [lec for lec in lectures if lec.time_slot == g.time]
            self.assertEqual(list(g.lectures), expected)

    def test_slots_sort_as_plain_strings(self) -> None:
        # no time parsing: "9:30" sorts after "10:30"
        lectures = (_lecture("A", "9:30"), _lecture("B", "10:30"))
        dept = _dept("X", "X", (DaySchedule("Sunday", lectures),))
        view = ScheduleView([dept])
        view.select_department("X")
        self.assertEqual([g.time for g in view.grouped_lectures], ["10:30", "9:30"])


if __name__ == "__main__":
    unittest.main()
