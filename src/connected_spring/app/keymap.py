"""Key name to command mapping, independent of the GUI toolkit."""

from __future__ import annotations

from .commands import FREQUENCY_CHARS


KEY_COMMANDS: dict[str, str] = {
    "Return": "commit-frequency",
    "Enter": "commit-frequency",
    "Space": "toggle-pause",
    "Up": "increase-steps",
    "Down": "decrease-steps",
    "Right": "increase-history",
    "Left": "decrease-history",
    "R": "toggle-rescale",
    "Escape": "quit",
}


def command_for_key(key_name: str, text: str = "") -> tuple[str, tuple[str, ...]] | None:
    """Return ``(command, args)`` for a key press, or None if unmapped."""
    if len(text) == 1 and text in FREQUENCY_CHARS:
        return "append-digit", (text,)
    command = KEY_COMMANDS.get(key_name)
    if command is None:
        return None
    return command, ()
