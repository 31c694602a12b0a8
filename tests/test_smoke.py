"""Smoke tests for the pygame runtime.

These verify that the main loop can initialise and run a handful of frames
with SDL's dummy video driver, and that a scripted quit ends the loop with a
clean exit code. Rendering correctness is covered by the core tests.
"""

from __future__ import annotations

import os

# Use the dummy drivers before importing pygame or the application
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from mentalitty.config import GameConfig


def test_app_runs_headless() -> None:
    from mentalitty.app import run

    exit_code = run(max_frames=3, config=GameConfig(seed=1))
    assert exit_code == 0


def test_scripted_play_then_quit_exits_cleanly() -> None:
    import pygame

    from mentalitty.app import run

    frames: list[int] = []

    def inject(frame: int) -> None:
        frames.append(frame)
        # Main Menu -> Agility -> quit
        if frame == 1:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_UP, "mod": 0, "unicode": ""}))
        elif frame == 3:
            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": pygame.K_q, "mod": 0, "unicode": "q"}))

    assert run(max_frames=50, event_injector=inject, config=GameConfig(seed=3)) == 0
    # The quit key stops the loop well before the frame cap.
    assert frames[-1] == 3
