from __future__ import annotations
import logging
import random
from typing import List, Optional

from engine.timing.scheduler import ScheduledTask, Scheduler

from .colors import random_color
from .const import CORRECT_FLASH_MS, HINT_FLASH_MS
from .grid import Cell, build_grid, find_target_cell, grid_size_for_level
from .presenter import Hud, Presenter
from .state import GameOptions, GameState, Phase, Tone

logger = logging.getLogger(__name__)


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


class ColorMatchController:
    """
    Round / level / countdown state machine for one game of Color Match.

    Phases go Idle -> Running -> GameOver; start() is accepted from any phase
    and always begins a fresh game. Picks, hints and ticks outside Running
    are no-ops. All randomness comes from `rng` so a seeded random.Random
    gives a reproducible game.
    """

    def __init__(self, presenter: Presenter, scheduler: Scheduler,
                 rng=None, options: Optional[GameOptions] = None):
        self.presenter = presenter
        self.scheduler = scheduler
        self.rng = rng if rng is not None else random.Random()
        self.options = options or GameOptions()
        self.state = GameState.fresh(self.options)
        self.cells: List[Cell] = []
        self._timer: Optional[ScheduledTask] = None

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.active

    # ------------- helpers -------------
    def _refresh_hud(self):
        self.presenter.show_hud(Hud.from_state(self.state))

    def _stop_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _new_round(self, level_up: bool = False):
        s = self.state
        s.round += 1
        s.target_color = random_color(self.rng)
        self.presenter.show_target(s.target_color)
        if level_up:
            self.presenter.show_status(
                f"Level {s.level}! Grid just got denser.", Tone.Success)
        else:
            self.presenter.show_status("New color locked in. Find it!", Tone.Info)
        self.cells = build_grid(s.level, s.target_color, self.rng)
        self.presenter.show_grid(grid_size_for_level(s.level), self.cells)
        self._refresh_hud()

    def _correct_pick(self, cell: Cell):
        s = self.state
        o = self.options
        points = o.base_points + s.level * o.level_bonus + s.streak
        s.streak += 1
        s.correct_this_level += 1
        s.score += points
        s.time = clamp(s.time + o.time_bonus, 0, o.max_time)
        logger.debug(f"Correct pick on cell {cell.index}: +{points} (score {s.score})")
        self.presenter.highlight_cell(cell.index, CORRECT_FLASH_MS)

        if s.correct_this_level >= o.level_up_threshold:
            s.level += 1
            s.correct_this_level = 0
            logger.info(f"Level up -> {s.level}")
            self._new_round(level_up=True)
        else:
            self._new_round()

    def _incorrect_pick(self, cell: Cell):
        s = self.state
        s.lives = clamp(s.lives - 1, 0, self.options.initial_lives)
        s.streak = 0
        logger.debug(f"Wrong pick on cell {cell.index}: {s.lives} lives left")
        self.presenter.show_status("Oops! Wrong block. Lose a life.", Tone.Warn)
        if s.lives == 0:
            self._end_game("No lives remaining.")
        self._refresh_hud()

    def _end_game(self, reason: str):
        self._stop_timer()
        self.state.phase = Phase.GameOver
        self.presenter.disable_grid()
        self.presenter.show_status(
            f"{reason} Final score: {self.state.score}. Press start to try again.", Tone.Warn)
        logger.info(f"Game over after round {self.state.round}: {reason} "
                    f"score={self.state.score} level={self.state.level}")

    # ------------- actions -------------
    def greet(self):
        """Present the idle screen before the first start."""
        self._refresh_hud()
        self.presenter.show_status("Click start to play.", Tone.Neutral)

    def start(self):
        self._stop_timer()
        self.state = GameState.fresh(self.options)
        self.state.phase = Phase.Running
        logger.info("Game started")
        self.presenter.show_status("Go! Match the exact color.", Tone.Success)
        self._new_round()
        self._timer = self.scheduler.call_every(self.options.tick_ms, self.tick)

    def pick(self, cell: Cell):
        if not self.running:
            return
        if cell.color == self.state.target_color:
            self._correct_pick(cell)
        else:
            self._incorrect_pick(cell)

    def pick_index(self, index: int):
        if 0 <= index < len(self.cells):
            self.pick(self.cells[index])

    def tick(self):
        if not self.running:
            return
        s = self.state
        s.time = max(0, s.time - 1)
        self._refresh_hud()
        if s.time <= 0:
            self._end_game("Time's up!")

    def request_hint(self):
        if not self.running:
            self.presenter.show_status("Hit start before asking for hints.", Tone.Warn)
            return
        cost = self.options.hint_cost
        if self.state.score < cost:
            self.presenter.show_status(
                f"Earn at least {cost} points to use a hint.", Tone.Warn)
            return
        target = find_target_cell(self.cells, self.state.target_color)
        if target is None:
            return
        self.state.score = max(0, self.state.score - cost)
        logger.debug(f"Hint revealed cell {target.index} for {cost} points")
        self.presenter.highlight_cell(target.index, HINT_FLASH_MS)
        self.presenter.show_status(f"Hint used. -{cost} points.", Tone.Info)
        self._refresh_hud()
