"""Controller — applies key, idle-expiry and tick events to a Timer.

Timer-sourced events never mutate state on their own: the driver delivers
every event through :meth:`Controller.handle`, one at a time.  Each
``IdleExpired`` and ``Tick`` carries the generation of the arming or run that
scheduled it, so a firing that outlived a cancel is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from notch.core.timer import STEP, Phase, Timer

logger = logging.getLogger(__name__)

ARM_DELAY = 4.0
TICK_INTERVAL = 1.0


@dataclass(frozen=True)
class Decrease:
    """User asked for a shorter duration."""


@dataclass(frozen=True)
class Increase:
    """User asked for a longer duration."""


@dataclass(frozen=True)
class IdleExpired:
    """The arm delay ran out without another adjustment."""

    generation: int


@dataclass(frozen=True)
class Tick:
    """One second of an active countdown has passed."""

    generation: int


@dataclass(frozen=True)
class Quit:
    """User asked to leave."""


Event = Union[Decrease, Increase, IdleExpired, Tick, Quit]


class Cancellable(Protocol):
    """Handle for a delayed event that has not been delivered yet."""

    def stop(self) -> None:
        """Drop the event if it has not fired."""


class EventSink(Protocol):
    """What the controller needs from the driver that runs it."""

    def send(self, event: Event) -> None:
        """Queue *event* for delivery right after the current one."""

    def send_later(self, delay: float, event: Event) -> Cancellable:
        """Queue *event* for delivery after *delay* seconds."""

    def exit(self) -> None:
        """Terminate the driver."""


class Controller:
    """Runs the idle -> armed -> running cycle of a :class:`Timer`."""

    def __init__(self, timer: Timer, sink: EventSink) -> None:
        self._timer = timer
        self._sink = sink
        self._arm_handle: Optional[Cancellable] = None
        self._tick_handle: Optional[Cancellable] = None
        self._arm_generation = 0
        self._run_generation = 0

    @property
    def timer(self) -> Timer:
        """The timer this controller drives."""
        return self._timer

    # -- public interface ----------------------------------------------------

    def handle(self, event: Event) -> None:
        """Dispatch *event* to the matching handler."""
        if isinstance(event, Decrease):
            self.decrease()
        elif isinstance(event, Increase):
            self.increase()
        elif isinstance(event, IdleExpired):
            self.idle_expired(event)
        elif isinstance(event, Tick):
            self.tick(event)
        elif isinstance(event, Quit):
            self.quit()
        else:
            logger.warning("ignoring unknown event %r", event)

    def decrease(self) -> None:
        """Shorten the duration by one step, or cancel a running countdown."""
        if self._cancel_if_running():
            return
        self._timer.normalize()
        self._timer.set_duration(max(self._timer.get_duration() - STEP, 0))
        self._arm()

    def increase(self) -> None:
        """Lengthen the duration by one step, or cancel a running countdown."""
        if self._cancel_if_running():
            return
        self._timer.normalize()
        self._timer.set_duration(self._timer.get_duration() + STEP)
        self._arm()

    def idle_expired(self, event: IdleExpired) -> None:
        """Start counting down if nothing re-armed the timer in the meantime."""
        if self._timer.get_phase() != Phase.ARMED or event.generation != self._arm_generation:
            logger.debug("discarding stale idle-expiry %d", event.generation)
            return
        self._arm_handle = None
        self._run_generation += 1
        self._timer.set_phase(Phase.RUNNING)
        logger.info("countdown started from %ds", self._timer.get_remaining())
        self._sink.send(Tick(self._run_generation))

    def tick(self, event: Tick) -> None:
        """Advance a running countdown by one second."""
        if self._timer.get_phase() != Phase.RUNNING or event.generation != self._run_generation:
            logger.debug("discarding stale tick %d", event.generation)
            return
        self._tick_handle = None
        if self._timer.tick_down():
            self._stop_ticking()
            self._timer.reset_remaining()
            self._timer.set_phase(Phase.IDLE)
            logger.info("countdown finished")
            return
        self._tick_handle = self._sink.send_later(TICK_INTERVAL, Tick(self._run_generation))

    def quit(self) -> None:
        """Drop pending timers and ask the driver to exit."""
        self._cancel_arm()
        self._stop_ticking()
        self._sink.exit()

    # -- private helpers -----------------------------------------------------

    def _cancel_if_running(self) -> bool:
        if self._timer.get_phase() != Phase.RUNNING:
            return False
        self._stop_ticking()
        self._timer.normalize()
        self._timer.reset_remaining()
        logger.info("countdown cancelled at %ds", self._timer.get_remaining())
        self._arm()
        return True

    def _arm(self) -> None:
        """Enter ARMED and (re)schedule the single pending idle-expiry."""
        self._cancel_arm()
        self._arm_generation += 1
        self._timer.set_phase(Phase.ARMED)
        logger.debug("armed %ds, generation %d", self._timer.get_duration(), self._arm_generation)
        self._arm_handle = self._sink.send_later(ARM_DELAY, IdleExpired(self._arm_generation))

    def _cancel_arm(self) -> None:
        if self._arm_handle is not None:
            self._arm_handle.stop()
            self._arm_handle = None

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.stop()
            self._tick_handle = None
        # Invalidates a Tick already queued by send().
        self._run_generation += 1
