"""
CLI (Command Line Interface).

This module provides quick terminal commands, e.g.:

    deptschedule departments [--search derm]
    deptschedule days MLAB
    deptschedule show MLAB [Sunday]
    deptschedule interactive

Note:
- The interactive UI lives in deptschedule/interactive.py
- This CLI prints plain text (no rich formatting); diagnostics go to the logger
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from deptschedule.dataset import DEFAULT_DATA_PATH, Dataset, load_dataset
from deptschedule.model import Lecture
from deptschedule.view import ScheduleView


logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve(value: str, options: Sequence[str]) -> Optional[str]:
    """
    Case-insensitive lookup of a code/day name typed by the user.
    Returns the spelling used in the dataset, or None.
    """
    wanted = value.strip().lower()
    for opt in options:
        if opt.lower() == wanted:
            return opt
    return None


def _lecture_line(lecture: Lecture) -> str:
    bits = [lecture.title or "(no title)"]
    if lecture.instructor:
        bits.append(lecture.instructor)
    if lecture.location:
        bits.append(f"@ {lecture.location}")
    return " | ".join(bits)


def _cmd_departments(args: argparse.Namespace, view: ScheduleView) -> int:
    """
    List departments, optionally filtered by a search text (name or code).
    """
    view.set_search_query(args.search or "")
    matches = view.filtered_departments

    if not matches:
        print(f'No departments found matching "{view.search_query}"')
        return 0

    for dept in matches:
        n_days = len(dept.schedule)
        print(f"{dept.code} | {dept.name} | {n_days} day{'s' if n_days != 1 else ''} scheduled")
    return 0


def _select_department(view: ScheduleView, code_arg: str) -> bool:
    code = _resolve(code_arg, [d.code for d in view.departments])
    if code is None:
        print(f"Department not found: {code_arg.strip()}")
        return False
    view.select_department(code)
    return True


def _cmd_days(args: argparse.Namespace, view: ScheduleView) -> int:
    """
    Print the scheduled days of one department with their lecture counts.
    """
    if not _select_department(view, args.code):
        return 1

    dept = view.selected_dept
    assert dept is not None

    print(f"{dept.code} | {dept.name}")
    if not dept.schedule:
        print("No days scheduled.")
        return 0

    for day in dept.schedule:
        n = len(day.lectures)
        print(f"- {day.day_name} ({n} lecture{'s' if n != 1 else ''})")
    return 0


def _cmd_show(args: argparse.Namespace, view: ScheduleView) -> int:
    """
    Print one day of a department's schedule, grouped by time slot.
    Without a day argument the first scheduled day is shown.
    """
    if not _select_department(view, args.code):
        return 1

    dept = view.selected_dept
    assert dept is not None

    if args.day:
        day = _resolve(args.day, [d.day_name for d in dept.schedule])
        if day is None:
            print(f"Day not found for {dept.code}: {args.day.strip()}")
            return 1
        view.select_day(day)

    print(f"{dept.code} | {dept.name}")

    schedule = view.active_schedule
    if schedule is None:
        print("No days scheduled.")
        return 0

    n = len(schedule.lectures)
    print(f"{schedule.day_name} ({n} lecture{'s' if n != 1 else ''})")

    groups = view.grouped_lectures
    if not groups:
        print(f"No lectures scheduled for {schedule.day_name}.")
        return 0

    for group in groups:
        print(group.time)
        for lecture in group.lectures:
            print(f"  - {_lecture_line(lecture)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="deptschedule", description="Department schedule browser")
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help=f"Schedule JSON file (default: {DEFAULT_DATA_PATH.name} bundled with the package)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_deps = sub.add_parser("departments", help="List departments")
    p_deps.add_argument("--search", "-s", type=str, default="", help="Filter by name or code")

    p_days = sub.add_parser("days", help="List the scheduled days of a department")
    p_days.add_argument("code", type=str, help="Department code (e.g. MLAB)")

    p_show = sub.add_parser("show", help="Show a day's lectures grouped by time slot")
    p_show.add_argument("code", type=str, help="Department code (e.g. MLAB)")
    p_show.add_argument("day", type=str, nargs="?", default=None, help="Day name (default: first day)")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads the dataset, dispatches to command
    handlers, and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    dataset: Dataset = load_dataset(args.data)
    view = ScheduleView(dataset.departments)

    if args.command == "departments":
        raise SystemExit(_cmd_departments(args, view))
    if args.command == "days":
        raise SystemExit(_cmd_days(args, view))
    if args.command == "show":
        raise SystemExit(_cmd_show(args, view))

    if args.command == "interactive":
        from deptschedule.interactive import run_interactive

        run_interactive(view, faculty=dataset.faculty, campus=dataset.campus)
        raise SystemExit(0)

    raise SystemExit(2)
