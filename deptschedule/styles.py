"""
Terminal styling helpers.

Time slots are put into a handful of categories by substring match against
known slot starts, so "08:30-09:30" lands in the same category as "08:30".
Every slot gets a category; unknown ones fall into "default".
"""

from __future__ import annotations

from typing import Tuple

from rich.color import Color, ColorParseError


DEFAULT_CATEGORY = "default"

# checked in order, first match wins
TIME_SLOT_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("08:30", "early"),
    ("10:30", "morning"),
    ("12:30", "midday"),
    ("14:30", "afternoon"),
)

CATEGORY_STYLES = {
    "early": "green",
    "morning": "deep_sky_blue1",
    "midday": "slate_blue1",
    "afternoon": "dark_orange",
    DEFAULT_CATEGORY: "grey70",
}

DEFAULT_DEPARTMENT_STYLE = "white"


def time_slot_category(time: str) -> str:
    for needle, category in TIME_SLOT_CATEGORIES:
        if needle in time:
            return category
    return DEFAULT_CATEGORY


def time_slot_style(time: str) -> str:
    """
    Rich style used to frame the lectures of one time slot.
    """
    return CATEGORY_STYLES[time_slot_category(time)]


def department_style(color: str) -> str:
    """
    Turn a department's colour hint into a rich style.

    The hint comes straight from the dataset; anything rich cannot parse
    is shown in the neutral default style.
    """
    color = (color or "").strip()
    if not color:
        return DEFAULT_DEPARTMENT_STYLE
    try:
        Color.parse(color)
    except ColorParseError:
        return DEFAULT_DEPARTMENT_STYLE
    return color
