from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from engine.api.config import EngineConfig
from engine.timing.scheduler import Scheduler


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    # advanced once per frame by the loop; games hang their timers off it
    scheduler: Scheduler
    resources: dict[str, Any]
    screen_size: Tuple[int, int]
