from __future__ import annotations

import logging
from typing import Callable, List, Optional

from rich import box
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from deptschedule.model import Department, TimeGroup
from deptschedule.styles import department_style, time_slot_style
from deptschedule.view import ScheduleView


logger = logging.getLogger(__name__)

console = Console()

PromptFn = Callable[[str], str]


def _println(msg: object = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    return console.input(msg)


def run_interactive(
    view: ScheduleView,
    faculty: str = "",
    campus: str = "",
    prompt_fn: Optional[PromptFn] = None,
) -> None:
    """
    Interactive menu loop: department list -> department (days) -> day schedule.

    Which screen is shown is decided from the view state only, so "back" and
    "home" are just view intents.
    """
    prompt = prompt_fn or _prompt
    logger.debug("Interactive session started (%d departments)", len(view.departments))

    while True:
        if view.selected_dept_code is None:
            if not _screen_departments(view, faculty, campus, prompt):
                _println("Bye.")
                return
            continue

        dept = view.selected_dept
        if dept is None:
            _println(f"Department not found: {escape(view.selected_dept_code)}")
            view.reset_to_top()
            continue

        if not _screen_department(view, dept, prompt):
            _println("Bye.")
            return


def _print_header(faculty: str, campus: str) -> None:
    title = faculty or "Academic Schedule"
    body = Text(title.upper(), style="bold")
    if campus:
        body.append(f"\n{campus}", style="bold blue")
    _println(Panel(body, box=box.HEAVY, expand=False))


# ---------------------------------------------------------------------------
# Screen 1: department list
# ---------------------------------------------------------------------------


def _department_row(dept: Department) -> tuple[str, str, str]:
    style = department_style(dept.color)
    n_days = len(dept.schedule)
    return (
        f"[bold {style}]{escape(dept.code)}[/]",
        escape(dept.name),
        f"{n_days} day{'s' if n_days != 1 else ''} scheduled",
    )


def _screen_departments(view: ScheduleView, faculty: str, campus: str, prompt: PromptFn) -> bool:
    """
    Show the (filtered) department list and handle one input.
    Returns False when the user wants to quit.
    """
    _println()
    _print_header(faculty, campus)

    shown: List[Department] = view.filtered_departments

    if view.search_query:
        _println(f"Search: [bold]{escape(view.search_query)}[/]")

    if shown:
        table = Table(title="Select Department", box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Code")
        table.add_column("Department")
        table.add_column("Schedule")
        for i, dept in enumerate(shown, start=1):
            table.add_row(str(i), *_department_row(dept))
        console.print(table)
    else:
        _println(f'No departments found matching "{escape(view.search_query)}"')

    choice = prompt(
        "\nNumber = open department | /text = search | / = clear search | q = quit\nSelect: "
    ).strip()

    if choice.lower() == "q":
        return False
    if not choice:
        return True
    if choice.startswith("/"):
        view.set_search_query(choice[1:])
        return True
    if not choice.isdigit():
        _println("Not a number.")
        return True

    i = int(choice)
    if not (1 <= i <= len(shown)):
        _println("Out of range.")
        return True

    view.select_department(shown[i - 1].code)
    return True


# ---------------------------------------------------------------------------
# Screen 2/3: department days + day schedule
# ---------------------------------------------------------------------------


def _time_group_panel(group: TimeGroup) -> Panel:
    lines = []
    for lecture in group.lectures:
        text = Text(lecture.title or "(no title)", style="bold")
        details = [x for x in (lecture.instructor, lecture.location and f"@ {lecture.location}") if x]
        if details:
            text.append("\n  " + " ".join(details))
        lines.append(text)

    style = time_slot_style(group.time)
    return Panel(Group(*lines), title=f"[bold]{escape(group.time)}[/]", title_align="left", border_style=style)


def _print_day_selector(view: ScheduleView, dept: Department) -> None:
    if not dept.schedule:
        _println("No days scheduled.")
        return

    parts = []
    for i, day in enumerate(dept.schedule, start=1):
        label = f"{i}) {escape(day.day_name)}"
        if day.day_name == view.selected_day:
            label = f"[reverse]{label}[/]"
        parts.append(label)
    _println("  ".join(parts))


def _print_schedule(view: ScheduleView) -> None:
    schedule = view.active_schedule
    if schedule is None:
        _println("Please select a day to view the schedule.")
        return

    n = len(schedule.lectures)
    _println(f"\n[bold]{escape(schedule.day_name)}[/] - {n} lecture{'s' if n != 1 else ''}")

    groups = view.grouped_lectures
    if not groups:
        _println(f"No lectures scheduled for {escape(schedule.day_name)}.")
        return

    for group in groups:
        console.print(_time_group_panel(group))


def _screen_department(view: ScheduleView, dept: Department, prompt: PromptFn) -> bool:
    """
    Show one department with its day selector and the active day's lectures.
    Returns False when the user wants to quit.
    """
    style = department_style(dept.color)
    _println()
    _println(
        Panel(
            f"[bold]{escape(dept.name)}[/]\nWeekly Academic Plan",
            title=f"[bold]{escape(dept.code)}[/]",
            title_align="left",
            border_style=style,
            expand=False,
        )
    )

    _print_day_selector(view, dept)
    _print_schedule(view)

    choice = prompt("\nNumber = choose day | b = back | h = home | q = quit\nSelect: ").strip().lower()

    if choice == "q":
        return False
    if choice == "b":
        view.go_back()
        return True
    if choice == "h":
        view.reset_to_top()
        return True
    if not choice:
        return True
    if not choice.isdigit():
        _println("Not a number.")
        return True

    i = int(choice)
    if not (1 <= i <= len(dept.schedule)):
        _println("Out of range.")
        return True

    view.select_day(dept.schedule[i - 1].day_name)
    return True
