from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Screen(StrEnum):
    MENU = "menu"
    PLAYING = "playing"
    ROUND_OVER = "round_over"


class GameMode(StrEnum):
    AGILITY = "Agility"
    MEMORY = "Memory"
    PERCEPTION = "Perception"
    LOGIC = "Logic"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}

# Draw order for DirectionSource indices 0..3.
DIRECTIONS: tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class TimerClass(StrEnum):
    TICK = "tick"
    FRAME = "frame"


@dataclass(frozen=True, slots=True)
class GameState:
    """Everything about the current session.

    Never mutated in place: ``update`` returns a replacement built with
    ``dataclasses.replace``.
    """

    screen: Screen = Screen.MENU
    mode: GameMode | None = None
    score: int = 0
    prompt: Direction | None = None
    quitting: bool = False
    prompt_shown_at_s: float | None = None
    reaction_times_s: tuple[float, ...] = ()


@dataclass(frozen=True, slots=True)
class KeyPress:
    key: str
    at_s: float = 0.0


@dataclass(frozen=True, slots=True)
class TimerFired:
    timer: TimerClass
    at_s: float = 0.0


Event = KeyPress | TimerFired


@dataclass(frozen=True, slots=True)
class ScheduleTimer:
    timer: TimerClass
    delay_s: float


@dataclass(frozen=True, slots=True)
class QuitProgram:
    pass


Command = ScheduleTimer | QuitProgram
