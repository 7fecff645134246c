from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False
    seed: Optional[int] = None
    debug: bool = False
