"""Agility: press the arrow you are shown.

Prompt drawing goes through a ``DirectionSource`` so tests can script the
exact sequence of arrows. The production source is ``secrets``-backed; a
seeded ``random.Random`` stream is available for reproducible sessions.
"""

from __future__ import annotations

import random
import secrets
from dataclasses import replace
from typing import Protocol

from .config import GameConfig
from .game_state import (
    DIRECTIONS,
    Command,
    Direction,
    Event,
    GameState,
    KeyPress,
    Screen,
)


class DirectionSource(Protocol):
    """Uniform draw over the four prompt directions."""

    def draw(self) -> int:
        """Return an index in [0, 3]."""
        ...


class PromptSourceError(RuntimeError):
    """Raised when a direction source produces an unusable draw."""


class SecureDirectionSource:
    def draw(self) -> int:
        return secrets.randbelow(len(DIRECTIONS))


class SeededDirectionSource:
    """Deterministic stream: the same seed yields the same prompts."""

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def draw(self) -> int:
        return self._rng.randrange(len(DIRECTIONS))


def make_direction_source(config: GameConfig) -> DirectionSource:
    if config.seed is None:
        return SecureDirectionSource()
    return SeededDirectionSource(config.seed)


KEY_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    return KEY_DIRECTIONS.get(key)


def draw_prompt(source: DirectionSource) -> Direction:
    idx = source.draw()
    # bool is an int subclass; reject it along with anything out of range.
    if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < len(DIRECTIONS):
        raise PromptSourceError(f"direction source returned {idx!r}, expected 0..{len(DIRECTIONS) - 1}")
    return DIRECTIONS[idx]


def deal_prompt(state: GameState, *, source: DirectionSource, at_s: float) -> GameState:
    return replace(state, prompt=draw_prompt(source), prompt_shown_at_s=at_s)


def update_agility(event: Event, state: GameState, *, frame: Command) -> tuple[GameState, Command | None]:
    """Score one event against the pending prompt.

    A matching arrow clears the prompt (the caller deals the next one) and
    scores a point. Any other arrow ends the round. Everything else is ignored.
    """

    if not isinstance(event, KeyPress):
        return state, frame
    pressed = direction_for_key(event.key)
    if pressed is None:
        return state, frame

    if pressed is not state.prompt:
        return replace(state, screen=Screen.ROUND_OVER), None

    reaction_times = state.reaction_times_s
    if state.prompt_shown_at_s is not None:
        reaction_times = reaction_times + (max(0.0, event.at_s - state.prompt_shown_at_s),)
    return (
        replace(
            state,
            prompt=None,
            prompt_shown_at_s=None,
            score=state.score + 1,
            reaction_times_s=reaction_times,
        ),
        frame,
    )
