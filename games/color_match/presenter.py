from __future__ import annotations
from dataclasses import dataclass
from typing import List

from .grid import Cell
from .state import GameState, Tone


def format_score(score: int) -> str:
    return f"{score:03d}"


@dataclass(frozen=True)
class Hud:
    score_text: str
    level: int
    lives: int
    time_text: str
    round_text: str

    @classmethod
    def from_state(cls, state: GameState) -> "Hud":
        return cls(
            score_text=format_score(state.score),
            level=state.level,
            lives=state.lives,
            time_text=f"{state.time}s",
            round_text=f"Round {state.round} · {state.streak} correct streak",
        )


class Presenter:
    """
    What the controller needs from a UI surface. The pygame view implements
    it; tests use a recording stand-in.
    """

    def show_hud(self, hud: Hud) -> None:
        ...

    def show_target(self, color: str) -> None:
        """Swap the target preview to color (pulse briefly) and show its code."""
        ...

    def show_status(self, message: str, tone: Tone = Tone.Neutral) -> None:
        ...

    def show_grid(self, size: int, cells: List[Cell]) -> None:
        """Replace the whole grid; earlier cells are gone."""
        ...

    def disable_grid(self) -> None:
        ...

    def highlight_cell(self, index: int, duration_ms: int) -> None:
        ...
