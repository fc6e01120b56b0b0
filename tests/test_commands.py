from __future__ import annotations

import pytest

from connected_spring.app.commands import CommandProcessor, Err, Ok, parse_frequency
from connected_spring.app.sim_controller import SimulationContext


def _make_processor() -> tuple[CommandProcessor, SimulationContext, list[str]]:
    context = SimulationContext.from_scenario()
    notes: list[str] = []
    return CommandProcessor(context, notify=notes.append), context, notes


def test_parse_frequency_results() -> None:
    assert parse_frequency("1.5") == Ok(1.5)
    assert parse_frequency("10") == Ok(10.0)
    for text in ("abc", "", ".", "1.2.3"):
        result = parse_frequency(text)
        assert isinstance(result, Err)
        assert result.text == text


def test_commit_valid_frequency() -> None:
    processor, context, notes = _make_processor()
    for char in "1.5":
        assert processor.append_digit(char)
    assert context.pending_frequency == "1.5"

    result = processor.commit_frequency()

    assert result == Ok(1.5)
    assert context.frequency == 1.5
    assert context.pending_frequency == ""
    assert len(notes) == 1


def test_commit_invalid_frequency_keeps_previous() -> None:
    processor, context, notes = _make_processor()
    before = context.frequency
    context.pending_frequency = "abc"

    result = processor.commit_frequency()

    assert isinstance(result, Err)
    assert context.frequency == before
    assert context.pending_frequency == ""
    assert notes == [result.message]
    assert "not a number" in notes[0]


def test_append_digit_ignores_other_characters() -> None:
    processor, context, _ = _make_processor()
    assert not processor.append_digit("a")
    assert not processor.append_digit("12")
    assert processor.append_digit("7")
    assert context.pending_frequency == "7"


def test_toggles() -> None:
    processor, context, _ = _make_processor()
    assert processor.dispatch("toggle-pause") is True
    assert context.paused
    assert processor.dispatch("toggle-pause") is False

    assert context.pin_scale
    assert processor.dispatch("toggle-rescale") is False
    assert not context.pin_scale


def test_history_window_adjustment() -> None:
    processor, context, _ = _make_processor()
    assert context.history_capacity == 2000

    assert processor.dispatch("increase-history") == 2200
    assert all(h.capacity == 2200 for h in context.histories.all())
    assert processor.dispatch("decrease-history") == 2000

    context.set_history_capacity(2)
    assert processor.decrease_history() == 2
    assert processor.increase_history() == 3


def test_steps_adjustment() -> None:
    processor, context, _ = _make_processor()
    assert context.clock.steps_per_tick == 17
    assert processor.dispatch("increase-steps") == 19
    assert processor.dispatch("decrease-steps") == 17


def test_quit_calls_back_once() -> None:
    context = SimulationContext.from_scenario()
    calls: list[bool] = []
    processor = CommandProcessor(context, on_quit=lambda: calls.append(True))

    processor.dispatch("quit")
    processor.quit()

    assert processor.quit_requested
    assert calls == [True]


def test_dispatch_by_name() -> None:
    processor, context, _ = _make_processor()
    processor.dispatch("append-digit", "2")
    processor.dispatch("commit-frequency")
    assert context.frequency == 2.0

    assert set(processor.command_names) == {
        "append-digit",
        "commit-frequency",
        "toggle-pause",
        "increase-history",
        "decrease-history",
        "increase-steps",
        "decrease-steps",
        "toggle-rescale",
        "quit",
    }
    with pytest.raises(ValueError, match="unknown command"):
        processor.dispatch("explode")
