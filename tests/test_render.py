from __future__ import annotations

from mentalitty.game_state import Direction, GameMode, GameState, Screen
from mentalitty.render import QUIT_HINT, render


def test_menu_lists_modes_and_quit_hint() -> None:
    text = render(GameState())
    lines = text.split("\n")

    assert lines[0] == " ↑ Agility: Press the arrows keys you see"
    assert lines[1] == " ↓ Memory: Remember the arrow key order"
    assert lines[2].startswith(" ← Perception:")
    assert lines[3].startswith(" → Logic:")
    assert lines[-1] == QUIT_HINT


def test_agility_draws_cross_of_prompt_glyph_and_score() -> None:
    state = GameState(screen=Screen.PLAYING, mode=GameMode.AGILITY, score=12, prompt=Direction.LEFT)

    assert render(state) == "  ←\n ←←←\n  ←\n\n\nScore: 12"


def test_placeholder_mode_names_itself() -> None:
    state = GameState(screen=Screen.PLAYING, mode=GameMode.MEMORY, prompt=Direction.UP)
    text = render(state)

    assert text.startswith("Memory\n")
    assert "Not available yet." in text
    assert "backspace" in text


def test_round_over_reports_mode_score_and_reaction_times() -> None:
    state = GameState(
        screen=Screen.ROUND_OVER,
        mode=GameMode.AGILITY,
        score=3,
        reaction_times_s=(0.5, 0.25, 0.75),
    )
    text = render(state)

    assert text.split("\n") == [
        "Good job!",
        "",
        "Game: Agility",
        "Score: 3",
        "Mean reaction: 0.50s",
        "Best reaction: 0.25s",
        "",
        "Press any key to continue",
    ]


def test_round_over_without_responses_omits_reaction_lines() -> None:
    state = GameState(screen=Screen.ROUND_OVER, mode=GameMode.AGILITY, score=0)
    text = render(state)

    assert "reaction" not in text
    assert text.endswith("Press any key to continue")


def test_render_does_not_mutate_state() -> None:
    state = GameState(screen=Screen.PLAYING, mode=GameMode.AGILITY, prompt=Direction.UP)
    before = state
    render(state)
    render(state)
    assert state == before
