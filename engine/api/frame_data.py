from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float
    button: str = "left"


@dataclass
class FrameData:
    timestamp: float
    # clicks seen since the previous frame, already in logical (unmirrored) coords
    clicks: List[Point] = field(default_factory=list)
