"""Timer core — the mutable state behind a notch countdown."""

from enum import Enum


class Phase(Enum):
    """Possible phases of the timer."""

    IDLE = "idle"
    ARMED = "armed"
    RUNNING = "running"


STEP = 5 * 60
DEFAULT_DURATION = 25 * 60


class Timer:
    """Duration, remaining time and phase of a single countdown.

    Holds whole seconds only.  Contains no I/O, no clocks and no scheduling --
    the :class:`~notch.core.controller.Controller` decides when it changes.
    """

    def __init__(self, duration: int = DEFAULT_DURATION) -> None:
        self._phase: Phase = Phase.IDLE
        self._duration: int = 0
        self._remaining: int = 0
        self.set_duration(duration)

    # -- public interface ----------------------------------------------------

    def get_duration(self) -> int:
        """Return the configured duration in seconds."""
        return self._duration

    def get_remaining(self) -> int:
        """Return the remaining time in seconds."""
        return self._remaining

    def get_phase(self) -> Phase:
        """Return the current phase."""
        return self._phase

    def set_phase(self, phase: Phase) -> None:
        """Move the timer into *phase*."""
        self._phase = phase

    def set_duration(self, seconds: int) -> None:
        """Set the duration, clamped to >= 0 and rounded down to a 5-minute step.

        The remaining time follows the new duration.
        """
        self._duration = _round_down(max(int(seconds), 0))
        self._remaining = self._duration

    def normalize(self) -> None:
        """Round the duration down to a 5-minute step, leaving remaining as is."""
        self._duration = _round_down(max(self._duration, 0))

    def reset_remaining(self) -> None:
        """Refill the remaining time from the duration."""
        self._remaining = self._duration

    def tick_down(self) -> bool:
        """Take one second off the remaining time.

        Returns ``True`` without changing anything when there is nothing
        left to count, ``False`` otherwise.
        """
        if self._remaining <= 0:
            self._remaining = 0
            return True
        self._remaining -= 1
        return False

    def get_duration_minutes(self) -> int:
        """Return the configured duration in whole minutes."""
        return self._duration // 60


def _round_down(seconds: int) -> int:
    return seconds // STEP * STEP
