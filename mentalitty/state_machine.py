"""Event-driven state machine for the MentaliTTY menu and games.

``update`` is a pure function of (event, state): it never touches the
runtime, it only returns the next state and, optionally, a command for the
runtime to carry out (arm a timer, quit). The direction source is the only
injected collaborator and is only consulted when a prompt must be dealt.
"""

from __future__ import annotations

from dataclasses import replace
from typing import assert_never

from .agility import DirectionSource, deal_prompt, make_direction_source, update_agility
from .config import QUIT_KEYS, GameConfig
from .game_state import (
    Command,
    Event,
    GameMode,
    GameState,
    KeyPress,
    QuitProgram,
    ScheduleTimer,
    Screen,
    TimerClass,
)
from .render import render

# left/a and right/d are reserved for Perception and Logic and do nothing yet.
MENU_KEYS: dict[str, GameMode] = {
    "up": GameMode.AGILITY,
    "w": GameMode.AGILITY,
    "down": GameMode.MEMORY,
    "s": GameMode.MEMORY,
}

PLACEHOLDER_BACK_KEY = "backspace"


class StateMachine:
    def __init__(self, *, source: DirectionSource, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self._source = source
        self._frame = ScheduleTimer(TimerClass.FRAME, self._config.frame_interval_s)

    @property
    def config(self) -> GameConfig:
        return self._config

    def initial_state(self) -> GameState:
        return GameState()

    def init(self) -> Command:
        return ScheduleTimer(TimerClass.TICK, self._config.tick_interval_s)

    def update(self, event: Event, state: GameState) -> tuple[GameState, Command | None]:
        if state.quitting:
            return state, None

        if isinstance(event, KeyPress) and event.key in QUIT_KEYS and state.screen is not Screen.ROUND_OVER:
            return replace(state, quitting=True), QuitProgram()

        next_state, command = self._dispatch(event, state)

        # A round in progress always has a prompt on screen.
        if next_state.screen is Screen.PLAYING and next_state.prompt is None:
            next_state = deal_prompt(next_state, source=self._source, at_s=event.at_s)
        return next_state, command

    def render(self, state: GameState) -> str:
        return render(state)

    def _dispatch(self, event: Event, state: GameState) -> tuple[GameState, Command | None]:
        screen = state.screen
        if screen is Screen.MENU:
            return self._update_menu(event, state)
        if screen is Screen.ROUND_OVER:
            return self._update_round_over(event, state)
        if screen is Screen.PLAYING:
            mode = state.mode
            if mode is GameMode.AGILITY:
                return update_agility(event, state, frame=self._frame)
            if mode is GameMode.MEMORY or mode is GameMode.PERCEPTION or mode is GameMode.LOGIC:
                return self._update_placeholder(event, state)
            if mode is None:
                raise AssertionError("playing without a selected mode")
            assert_never(mode)
        assert_never(screen)

    def _update_menu(self, event: Event, state: GameState) -> tuple[GameState, Command | None]:
        if isinstance(event, KeyPress):
            mode = MENU_KEYS.get(event.key)
            if mode is not None:
                return self._start_round(state, mode), self._frame
        return state, self._frame

    def _update_round_over(self, event: Event, state: GameState) -> tuple[GameState, Command | None]:
        if not isinstance(event, KeyPress):
            return state, None
        return (
            replace(state, screen=Screen.MENU, mode=None, prompt=None, prompt_shown_at_s=None),
            self._frame,
        )

    def _update_placeholder(self, event: Event, state: GameState) -> tuple[GameState, Command | None]:
        if isinstance(event, KeyPress) and event.key == PLACEHOLDER_BACK_KEY:
            return (
                replace(state, screen=Screen.MENU, mode=None, prompt=None, prompt_shown_at_s=None),
                self._frame,
            )
        return state, self._frame

    @staticmethod
    def _start_round(state: GameState, mode: GameMode) -> GameState:
        return replace(
            state,
            screen=Screen.PLAYING,
            mode=mode,
            score=0,
            prompt=None,
            prompt_shown_at_s=None,
            reaction_times_s=(),
        )


def build_state_machine(
    *,
    config: GameConfig | None = None,
    source: DirectionSource | None = None,
) -> StateMachine:
    cfg = config or GameConfig()
    return StateMachine(source=source or make_direction_source(cfg), config=cfg)
