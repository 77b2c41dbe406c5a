"""Renderer — turns a Timer into the ruler, labels, pointer and controls."""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.panel import Panel
from rich.text import Text

from notch.core.timer import Timer

WIDTH = 50
LABEL_WIDTH = 5

POINTER = "▲"
STRONG_MARK = "|"
WEAK_MARK = "'"
LEFT_ARROW = "←"
RIGHT_ARROW = "→"
CONTROL_GAP = " " * 5


@dataclass(frozen=True)
class Theme:
    """Styles used by the renderer, as rich style strings."""

    selected: str = "#FFFFFF"
    normal: str = "#666666"
    light: str = "#999999"
    medium: str = "#777777"
    dark: str = "#555555"
    accent: str = "#FF0000"


DEFAULT_THEME = Theme()


def format_time(seconds: int) -> str:
    """Format *seconds* as ``MM:SS``; minutes may run past 59."""
    total = max(int(seconds), 0)
    return f"{total // 60:02d}:{total % 60:02d}"


def _weight(column: int, theme: Theme) -> str:
    distance = abs(column - WIDTH // 2)
    if distance == 0:
        return theme.selected
    if distance <= 10:
        return theme.light
    if distance <= 20:
        return theme.medium
    return theme.dark


def _minute_at(timer: Timer, column: int) -> int:
    return timer.get_duration_minutes() - WIDTH // 2 + column


def render_ruler(timer: Timer, theme: Theme = DEFAULT_THEME) -> Text:
    ruler = Text()
    for column in range(WIDTH):
        mark = STRONG_MARK if _minute_at(timer, column) % 5 == 0 else WEAK_MARK
        ruler.append(mark, style=_weight(column, theme))
    return ruler


def render_labels(timer: Timer, theme: Theme = DEFAULT_THEME) -> Text:
    """Minute labels under every strong mark that is not negative.

    A label may run past the last ruler column.
    """
    labels = Text()
    column = 0
    while column < WIDTH:
        minute = _minute_at(timer, column)
        if minute % 5 == 0 and minute >= 0:
            label = f"{minute:<{LABEL_WIDTH}d}"
            labels.append(label, style=_weight(column, theme))
            column += len(label)
        else:
            labels.append(" ")
            column += 1
    return labels


def render_pointer(theme: Theme = DEFAULT_THEME) -> Text:
    pointer = Text(" " * (WIDTH // 2))
    pointer.append(POINTER, style=theme.selected)
    return pointer


def render_controls(timer: Timer, theme: Theme = DEFAULT_THEME) -> Text:
    controls = Text.assemble(
        (LEFT_ARROW, theme.accent),
        (CONTROL_GAP, theme.normal),
        (format_time(timer.get_remaining()), theme.selected),
        (CONTROL_GAP, theme.normal),
        (RIGHT_ARROW, theme.accent),
    )
    controls.align("center", WIDTH)
    return controls


def render_body(timer: Timer, theme: Theme = DEFAULT_THEME) -> Text:
    """All rows of a frame, without the border."""
    return Text("\n").join(
        [
            Text(),
            render_ruler(timer, theme),
            render_labels(timer, theme),
            render_pointer(theme),
            Text(),
            render_controls(timer, theme),
            Text(),
        ]
    )


def render(timer: Timer, theme: Theme = DEFAULT_THEME) -> Panel:
    """A full frame: the body inside a rounded, padded border."""
    return Panel(render_body(timer, theme), box=box.ROUNDED, padding=1, expand=False)
