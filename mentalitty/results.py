from __future__ import annotations

from dataclasses import dataclass

from .game_state import GameMode, GameState


@dataclass(frozen=True, slots=True)
class RoundSummary:
    """What the round-over screen reports for a finished round."""

    mode: GameMode | None
    score: int
    responses: int
    mean_reaction_s: float | None
    best_reaction_s: float | None


def summarize_round(state: GameState) -> RoundSummary:
    rts = state.reaction_times_s
    mean_rt = None if not rts else sum(rts) / len(rts)
    best_rt = None if not rts else min(rts)
    return RoundSummary(
        mode=state.mode,
        score=int(state.score),
        responses=len(rts),
        mean_reaction_s=mean_rt,
        best_reaction_s=best_rt,
    )
