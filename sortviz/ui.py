"""Frame layout and drawing for the terminal display."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sortviz.model import AppState, SortingState

if TYPE_CHECKING:
    from blessed import Terminal

MARGIN = 1
TITLE_HEIGHT = 3
CONTROLS_HEIGHT = 5
LABEL_MIN_WIDTH = 3

RED = "red"
GREEN = "green"
BLUE = "blue"

_SPACE_ACTION = {
    SortingState.READY: "Start",
    SortingState.SORTING: "Pause",
    SortingState.PAUSED: "Resume",
    SortingState.DONE: "Start",
}


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width


@dataclass(frozen=True)
class Bar:
    """Where and how one array value is drawn."""

    index: int
    value: int
    area: Rect
    color: str
    label_area: Rect | None


def split_screen(width: int, height: int) -> tuple[Rect, Rect, Rect]:
    """Split the screen into title, bars and controls areas, top to bottom."""
    inner_width = max(width - 2 * MARGIN, 0)
    inner_height = max(height - 2 * MARGIN, 0)
    title_height = min(TITLE_HEIGHT, inner_height)
    controls_height = min(CONTROLS_HEIGHT, inner_height - title_height)
    bars_height = inner_height - title_height - controls_height

    title = Rect(MARGIN, MARGIN, inner_width, title_height)
    bars = Rect(MARGIN, title.bottom, inner_width, bars_height)
    controls = Rect(MARGIN, bars.bottom, inner_width, controls_height)
    return title, bars, controls


def title_text(app_state: AppState) -> str:
    """The heading line: algorithm and step count."""
    return (
        f"Sorting Visualizer - {app_state.algorithm.title()}"
        f" - Steps: {app_state.step_count}"
    )


def controls_text(app_state: AppState) -> str:
    """The key help line, naming what space does in the current state."""
    action = _SPACE_ACTION[app_state.state]
    return f"Controls: Space = {action}, r = Randomize, a = Change Algorithm"


def bar_layout(area: Rect, app_state: AppState) -> list[Bar]:
    """Place one bar per array value inside area, scaled to the largest value."""
    values = app_state.array or []
    if not values or area.width <= 0 or area.height <= 0:
        return []

    max_value = max(values) or 1
    bar_width = max(area.width // len(values), 1)
    scale = max(area.height - 2, 0)
    baseline = area.y + area.height - 1

    bars = []
    for index, value in enumerate(values):
        height = max(int(value / max_value * scale), 0)
        left = area.x + index * bar_width
        bar_area = Rect(
            left,
            baseline - height,
            max(0, min(bar_width, area.width - index * bar_width)),
            height,
        )
        if index in app_state.highlighted:
            color = RED
        elif app_state.state is SortingState.DONE:
            color = GREEN
        else:
            color = BLUE
        label_area = (
            Rect(left, baseline, bar_width, 1) if bar_width >= LABEL_MIN_WIDTH else None
        )
        bars.append(Bar(index, value, bar_area, color, label_area))
    return bars


def _panel(
    term: Terminal,
    rect: Rect,
    text: str,
    style: Callable[[str], str],
    title: str = "",
) -> str:
    if rect.width < 2 or rect.height < 2:
        return ""
    inner = rect.width - 2
    rows = [
        "┌" + title[:inner].ljust(inner, "─") + "┐",
        *["│" + " " * inner + "│"] * (rect.height - 2),
        "└" + "─" * inner + "┘",
    ]
    parts = [
        term.move_xy(rect.x, rect.y + offset) + style(row)
        for offset, row in enumerate(rows)
    ]
    if rect.height > 2 and inner:
        parts.append(term.move_xy(rect.x + 1, rect.y + 1) + style(text[:inner]))
    return "".join(parts)


def _bar_cells(term: Terminal, bar: Bar) -> str:
    paint = getattr(term, f"on_{bar.color}")
    parts = []
    if bar.area.width > 0:
        fill = " " * bar.area.width
        parts.extend(
            term.move_xy(bar.area.x, bar.area.y + row) + paint(fill)
            for row in range(bar.area.height)
        )
    if bar.label_area is not None:
        label = str(bar.value)[: bar.label_area.width]
        parts.append(
            term.move_xy(bar.label_area.x, bar.label_area.y) + term.white(label)
        )
    return "".join(parts)


def draw(term: Terminal, app_state: AppState) -> str:
    """Render one full frame as a string of terminal output."""
    title_area, bars_area, controls_area = split_screen(term.width, term.height)
    parts = [term.home, term.clear]
    parts.append(_panel(term, title_area, title_text(app_state), term.cyan))
    parts.extend(_bar_cells(term, bar) for bar in bar_layout(bars_area, app_state))
    parts.append(
        _panel(
            term, controls_area, controls_text(app_state), term.yellow, "Controls"
        )
    )
    return "".join(parts)