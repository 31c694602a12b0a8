from __future__ import annotations

from typing import assert_never

from .game_state import Direction, GameMode, GameState, Screen
from .results import summarize_round

QUIT_HINT = "Press q, esc, or ctrl+c to quit"

_MENU_CHOICES = (
    (Direction.UP, GameMode.AGILITY, "Press the arrows keys you see"),
    (Direction.DOWN, GameMode.MEMORY, "Remember the arrow key order"),
    (Direction.LEFT, GameMode.PERCEPTION, "Choose the arrow key that's most numerous"),
    (Direction.RIGHT, GameMode.LOGIC, "Deduce the arrow key next in the pattern"),
)


def render(state: GameState) -> str:
    """Return the display text for ``state``. Framing is left to the caller."""

    screen = state.screen
    if screen is Screen.MENU:
        return render_menu()
    if screen is Screen.PLAYING:
        if state.mode is GameMode.AGILITY:
            return render_agility(state)
        return render_placeholder(state)
    if screen is Screen.ROUND_OVER:
        return render_round_over(state)
    assert_never(screen)


def render_menu() -> str:
    choices = "\n".join(f" {d.glyph} {mode.value}: {blurb}" for d, mode, blurb in _MENU_CHOICES)
    return f"{choices}\n\n{QUIT_HINT}"


def render_agility(state: GameState) -> str:
    g = "" if state.prompt is None else state.prompt.glyph
    return f"  {g}\n {g}{g}{g}\n  {g}\n\n\nScore: {state.score}"


def render_placeholder(state: GameState) -> str:
    name = "" if state.mode is None else state.mode.value
    return f"{name}\n\nNot available yet.\n\nPress backspace to go back\n{QUIT_HINT}"


def render_round_over(state: GameState) -> str:
    s = summarize_round(state)
    lines = [
        "Good job!",
        "",
        f"Game: {'' if s.mode is None else s.mode.value}",
        f"Score: {s.score}",
    ]
    if s.mean_reaction_s is not None and s.best_reaction_s is not None:
        lines.append(f"Mean reaction: {s.mean_reaction_s:.2f}s")
        lines.append(f"Best reaction: {s.best_reaction_s:.2f}s")
    lines += ["", "Press any key to continue"]
    return "\n".join(lines)
