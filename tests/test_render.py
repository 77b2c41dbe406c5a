"""Tests for the frame renderer."""

import io

import pytest
from rich.console import Console

from notch.core.timer import Timer
from notch.ui.render import (
    DEFAULT_THEME,
    WIDTH,
    Theme,
    format_time,
    render,
    render_body,
    render_controls,
    render_labels,
    render_pointer,
    render_ruler,
)

# ---------------------------------------------------------------------------
# format_time()
# ---------------------------------------------------------------------------


class TestFormatTime:
    """format_time() renders MM:SS with unbounded minutes."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "00:00"),
            (59, "00:59"),
            (25 * 60, "25:00"),
            (29 * 60 + 59, "29:59"),
            (60 * 60, "60:00"),
            (100 * 60 + 7, "100:07"),
        ],
    )
    def test_format(self, seconds: int, expected: str) -> None:
        assert format_time(seconds) == expected

    def test_negative_is_clamped(self) -> None:
        assert format_time(-5) == "00:00"

    @pytest.mark.parametrize("seconds", [0, 1, 61, 599, 1500, 3599, 7322])
    def test_fields_add_back_up_to_the_input(self, seconds: int) -> None:
        minutes, secs = format_time(seconds).split(":")
        assert int(minutes) * 60 + int(secs) == seconds


# ---------------------------------------------------------------------------
# Ruler and labels
# ---------------------------------------------------------------------------


class TestRuler:
    def test_ruler_is_fixed_width(self) -> None:
        assert len(render_ruler(Timer()).plain) == WIDTH

    def test_strong_marks_on_five_minute_values(self) -> None:
        assert render_ruler(Timer()).plain == "|''''" * 10

    @pytest.mark.parametrize("minutes", [0, 5, 30, 125])
    def test_centre_mark_is_strong(self, minutes: int) -> None:
        assert render_ruler(Timer(minutes * 60)).plain[WIDTH // 2] == "|"

    @pytest.mark.parametrize(
        ("column", "weight"),
        [(25, "selected"), (24, "light"), (15, "light"), (14, "medium"), (45, "medium"), (0, "dark"), (49, "dark")],
    )
    def test_weight_by_distance_from_centre(self, column: int, weight: str) -> None:
        ruler = render_ruler(Timer())
        style = next(span.style for span in ruler.spans if span.start == column)
        assert style == getattr(DEFAULT_THEME, weight)


class TestLabels:
    def test_labels_for_default_duration(self) -> None:
        expected = "".join(f"{m:<5}" for m in range(0, 50, 5))
        assert render_labels(Timer()).plain == expected

    def test_negative_minutes_are_blank(self) -> None:
        expected = " " * 25 + "".join(f"{m:<5}" for m in range(0, 25, 5))
        assert render_labels(Timer(0)).plain == expected

    def test_labels_shift_with_duration(self) -> None:
        plain = render_labels(Timer(60 * 60)).plain
        assert plain.startswith("35   40   ")
        assert plain[25:30] == "60   "

    def test_centre_label_uses_selected_style(self) -> None:
        labels = render_labels(Timer())
        style = next(span.style for span in labels.spans if span.start == 25)
        assert style == DEFAULT_THEME.selected


# ---------------------------------------------------------------------------
# Pointer, controls and frame
# ---------------------------------------------------------------------------


class TestPointerAndControls:
    def test_pointer_under_centre_column(self) -> None:
        assert render_pointer().plain == " " * 25 + "▲"

    def test_controls_are_centred(self) -> None:
        plain = render_controls(Timer()).plain
        assert plain == " " * 16 + "←     25:00     →" + " " * 17
        assert len(plain) == WIDTH

    def test_controls_show_remaining(self) -> None:
        timer = Timer()
        timer.tick_down()
        assert "24:59" in render_controls(timer).plain

    def test_custom_theme_is_used(self) -> None:
        theme = Theme(accent="green", normal="blue")
        controls = render_controls(Timer(), theme)
        assert {span.style for span in controls.spans} >= {"green", "blue", theme.selected}

    def test_gaps_use_normal_style(self) -> None:
        controls = render_controls(Timer())
        gaps = [span for span in controls.spans if controls.plain[span.start : span.end].isspace()]
        assert len(gaps) == 2
        assert all(span.style == DEFAULT_THEME.normal for span in gaps)


class TestFrame:
    def test_body_layout(self) -> None:
        lines = render_body(Timer()).plain.split("\n")
        assert lines[0] == ""
        assert lines[1] == "|''''" * 10
        assert lines[2].startswith("0    5    10")
        assert lines[3].endswith("▲")
        assert lines[4] == ""
        assert "25:00" in lines[5]
        assert lines[6] == ""

    def test_frame_has_rounded_border(self) -> None:
        out = io.StringIO()
        console = Console(file=out, width=80, no_color=True, highlight=False)
        console.print(render(Timer()))
        text = out.getvalue()
        assert text.startswith("╭")
        assert "╯" in text
        assert "25:00" in text
        assert "▲" in text
