"""Discrete user commands applied to a SimulationContext."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Union

from .sim_controller import SimulationContext


logger = logging.getLogger(__name__)

FREQUENCY_CHARS = frozenset("0123456789.")


@dataclass(frozen=True, slots=True)
class Ok:
    value: float


@dataclass(frozen=True, slots=True)
class Err:
    text: str
    message: str


ParseResult = Union[Ok, Err]


def parse_frequency(text: str) -> ParseResult:
    """Parse a pending frequency entry without raising."""
    try:
        value = float(text)
    except ValueError:
        return Err(text=text, message=f"not a number: {text!r}")
    if not math.isfinite(value):
        return Err(text=text, message=f"not a finite number: {text!r}")
    return Ok(value)


class CommandProcessor:
    """Apply commands between ticks on the pacer's thread.

    ``notify`` receives short user-facing messages (frequency updates and
    parse errors). ``on_quit`` is called once when the quit command arrives.
    """

    def __init__(
        self,
        context: SimulationContext,
        notify: Callable[[str], None] | None = None,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self.context = context
        self._notify = notify
        self._on_quit = on_quit
        self.quit_requested = False
        self._handlers: dict[str, Callable[..., object]] = {
            "append-digit": self.append_digit,
            "commit-frequency": self.commit_frequency,
            "toggle-pause": self.toggle_pause,
            "increase-history": self.increase_history,
            "decrease-history": self.decrease_history,
            "increase-steps": self.increase_steps,
            "decrease-steps": self.decrease_steps,
            "toggle-rescale": self.toggle_rescale,
            "quit": self.quit,
        }

    @property
    def command_names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, name: str, *args: object) -> object:
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"unknown command: {name}")
        return handler(*args)

    def append_digit(self, char: str) -> bool:
        if len(char) != 1 or char not in FREQUENCY_CHARS:
            return False
        self.context.pending_frequency += char
        return True

    def commit_frequency(self) -> ParseResult:
        text = self.context.pending_frequency
        self.context.pending_frequency = ""
        result = parse_frequency(text)
        if isinstance(result, Ok):
            self.context.chain.external.set_frequency(result.value)
            logger.info("forcing frequency set to %s", result.value)
            self._emit(f"frequency updated: {result.value:g}")
        else:
            logger.warning("frequency entry rejected: %s", result.message)
            self._emit(result.message)
        return result

    def toggle_pause(self) -> bool:
        self.context.paused = not self.context.paused
        logger.info("paused" if self.context.paused else "resumed")
        return self.context.paused

    def increase_history(self) -> int:
        capacity = self.context.increase_history()
        logger.debug("history capacity -> %d", capacity)
        return capacity

    def decrease_history(self) -> int:
        capacity = self.context.decrease_history()
        logger.debug("history capacity -> %d", capacity)
        return capacity

    def increase_steps(self) -> int:
        steps = self.context.clock.increase_steps()
        logger.debug("steps per tick -> %d", steps)
        return steps

    def decrease_steps(self) -> int:
        steps = self.context.clock.decrease_steps()
        logger.debug("steps per tick -> %d", steps)
        return steps

    def toggle_rescale(self) -> bool:
        self.context.pin_scale = not self.context.pin_scale
        return self.context.pin_scale

    def quit(self) -> None:
        if self.quit_requested:
            return
        self.quit_requested = True
        logger.info("quit requested")
        if self._on_quit is not None:
            self._on_quit()

    def _emit(self, message: str) -> None:
        if self._notify is not None:
            self._notify(message)
