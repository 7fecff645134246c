from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum

from .const import *


class Phase(Enum):
    Idle = 1
    Running = 2
    GameOver = 3


class Tone(Enum):
    Neutral = "neutral"
    Info = "info"
    Success = "success"
    Warn = "warn"


@dataclass(frozen=True)
class GameOptions:
    initial_lives: int = INITIAL_LIVES
    initial_time: int = INITIAL_TIME
    max_time: int = MAX_TIME
    level_up_threshold: int = LEVEL_UP_THRESHOLD
    time_bonus: int = TIME_BONUS
    hint_cost: int = HINT_COST
    base_points: int = BASE_POINTS
    level_bonus: int = LEVEL_BONUS
    tick_ms: int = TICK_MS

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")
        for name in ("initial_lives", "initial_time", "max_time", "level_up_threshold", "tick_ms"):
            if getattr(self, name) == 0:
                raise ValueError(f"{name} must be positive")
        if self.initial_time > self.max_time:
            raise ValueError(
                f"initial_time ({self.initial_time}) exceeds max_time ({self.max_time})")

    @classmethod
    def from_manifest(cls, manifest: dict) -> "GameOptions":
        opts = (manifest or {}).get("options") or {}
        known = {f.name for f in fields(cls)}
        unknown = set(opts) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        return cls(**opts)


@dataclass
class GameState:
    level: int = 1
    score: int = 0
    streak: int = 0
    round: int = 0
    lives: int = INITIAL_LIVES
    time: int = INITIAL_TIME
    correct_this_level: int = 0
    target_color: str = INITIAL_TARGET
    phase: Phase = Phase.Idle

    @property
    def running(self) -> bool:
        return self.phase is Phase.Running

    @classmethod
    def fresh(cls, options: GameOptions) -> "GameState":
        return cls(lives=options.initial_lives, time=options.initial_time)
