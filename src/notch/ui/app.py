"""Textual driver — owns the event loop and repaints after every event."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.message import Message
from textual.timer import Timer as TextualTimer
from textual.widgets import Static

from notch.core.controller import Controller, Decrease, Event, Increase, Quit
from notch.core.timer import DEFAULT_DURATION, Timer
from notch.ui.render import DEFAULT_THEME, Theme, render

logger = logging.getLogger(__name__)


class TimerEvent(Message):
    """Carries a controller event through the app's message queue."""

    def __init__(self, event: Event) -> None:
        self.event = event
        super().__init__()


class NotchApp(App):
    """Ruler countdown timer."""

    CSS = """
    Screen { align: center middle; }
    #frame { width: auto; height: auto; }
    """

    BINDINGS = [
        ("left", "decrease", "Shorter"),
        ("right", "increase", "Longer"),
        ("q", "quit_timer", "Quit"),
        ("ctrl+c", "quit_timer", "Quit"),
    ]

    def __init__(self, duration: int = DEFAULT_DURATION, theme: Theme = DEFAULT_THEME):
        super().__init__()
        self.countdown = Timer(duration)
        self.controller = Controller(self.countdown, self)
        self._theme = theme

    def compose(self) -> ComposeResult:
        yield Static(render(self.countdown, self._theme), id="frame")

    # -- EventSink -----------------------------------------------------------

    def send(self, event: Event) -> None:
        self.post_message(TimerEvent(event))

    def send_later(self, delay: float, event: Event) -> TextualTimer:
        return self.set_timer(delay, lambda: self.send(event))

    # App.exit already matches EventSink.exit.

    # -- event delivery ------------------------------------------------------

    def on_timer_event(self, message: TimerEvent) -> None:
        self._deliver(message.event)

    def action_decrease(self) -> None:
        self._deliver(Decrease())

    def action_increase(self) -> None:
        self._deliver(Increase())

    def action_quit_timer(self) -> None:
        self._deliver(Quit())

    def _deliver(self, event: Event) -> None:
        logger.debug("event %r in phase %s", event, self.countdown.get_phase().value)
        self.controller.handle(event)
        self.query_one("#frame", Static).update(render(self.countdown, self._theme))
