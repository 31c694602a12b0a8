"""Pygame window host for MentaliTTY.

Turns pygame input into game events, carries out the commands the state
machine returns (timers, quit) and draws the rendered text in a bordered
panel. All game rules live in mentalitty/state_machine.py and friends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pygame

from .clock import Clock, RealClock
from .config import GameConfig
from .game_state import (
    Command,
    Event,
    GameState,
    KeyPress,
    QuitProgram,
    Screen,
    TimerClass,
    TimerFired,
)
from .logging_utils import configure_logging
from .results import summarize_round
from .state_machine import StateMachine, build_state_machine

logger = logging.getLogger(__name__)

WINDOW_SIZE = (960, 540)
TARGET_FPS = 60
PANEL_COLUMNS = 60

TICK_EVENT = pygame.USEREVENT + 1
FRAME_EVENT = pygame.USEREVENT + 2

_TIMER_EVENTS = {
    TimerClass.TICK: TICK_EVENT,
    TimerClass.FRAME: FRAME_EVENT,
}


def key_identifier(event: pygame.event.Event) -> str:
    """Name a KEYDOWN the way the state machine expects ("up", "w", "esc", "ctrl+c")."""

    mod = getattr(event, "mod", 0)
    if event.key == pygame.K_c and mod & pygame.KMOD_CTRL:
        return "ctrl+c"
    name = pygame.key.name(event.key)
    if name == "escape":
        return "esc"
    return name


class App:
    def __init__(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        *,
        machine: StateMachine,
        clock: Clock,
    ) -> None:
        self._surface = surface
        self._font = font
        self._machine = machine
        self._clock = clock
        self._state = machine.initial_state()
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> GameState:
        return self._state

    def start(self) -> None:
        self._apply(self._machine.init())

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if event.type == pygame.KEYDOWN:
            self.dispatch(KeyPress(key_identifier(event), self._clock.now()))
        elif event.type == TICK_EVENT:
            self.dispatch(TimerFired(TimerClass.TICK, self._clock.now()))
        elif event.type == FRAME_EVENT:
            self.dispatch(TimerFired(TimerClass.FRAME, self._clock.now()))

    def dispatch(self, event: Event) -> None:
        if not self._running:
            return
        previous = self._state
        self._state, command = self._machine.update(event, previous)
        self._log_transition(previous, self._state)
        self._apply(command)

    def render(self) -> None:
        if not self._running:
            return
        draw_panel(self._surface, self._font, self._machine.render(self._state))

    def _apply(self, command: Command | None) -> None:
        if command is None:
            return
        if isinstance(command, QuitProgram):
            logger.debug("quit requested")
            self.quit()
            return
        delay_ms = max(1, int(round(command.delay_s * 1000.0)))
        pygame.time.set_timer(_TIMER_EVENTS[command.timer], delay_ms, loops=1)

    @staticmethod
    def _log_transition(previous: GameState, current: GameState) -> None:
        if previous.screen is current.screen:
            return
        logger.debug("screen %s -> %s (mode=%s)", previous.screen.value, current.screen.value, current.mode)
        if current.screen is Screen.ROUND_OVER:
            s = summarize_round(current)
            mean_rt = "n/a" if s.mean_reaction_s is None else f"{s.mean_reaction_s:.3f}s"
            logger.info("round over: mode=%s score=%d mean_rt=%s", s.mode, s.score, mean_rt)


def draw_panel(surface: pygame.Surface, font: pygame.font.Font, text: str) -> None:
    """Draw ``text`` centred line by line inside a thick-bordered panel."""

    bg = (10, 10, 14)
    panel_bg = (18, 18, 28)
    border = (235, 235, 245)
    text_main = (235, 235, 245)

    surface.fill(bg)
    w, h = surface.get_size()

    lines = text.split("\n")
    line_h = font.get_linesize()
    pad = line_h
    panel_w = min(w - 2 * pad, font.size("x" * PANEL_COLUMNS)[0] + 2 * pad)
    panel_h = min(h - 2 * pad, line_h * len(lines) + 2 * pad)
    panel = pygame.Rect(0, 0, max(1, panel_w), max(1, panel_h))
    panel.center = (w // 2, h // 2)

    pygame.draw.rect(surface, panel_bg, panel)
    pygame.draw.rect(surface, border, panel, 4)

    y = panel.y + pad
    for line in lines:
        if line:
            img = font.render(line, True, text_main)
            surface.blit(img, img.get_rect(midtop=(panel.centerx, y)))
        y += line_h


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    config: GameConfig | None = None,
) -> int:
    cfg = config or GameConfig.from_env()
    configure_logging(level=cfg.log_level)

    pygame.init()
    pygame.display.set_caption("MentaliTTY")
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)

    font = pygame.font.Font(None, 36)
    font.set_bold(True)
    clock = pygame.time.Clock()

    app = App(surface, font, machine=build_state_machine(config=cfg), clock=RealClock())

    frame = 0
    try:
        app.start()

        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            if not app.running:
                break

            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
