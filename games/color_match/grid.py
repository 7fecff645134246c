from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional

from .colors import random_color


@dataclass(frozen=True)
class Cell:
    index: int
    color: str
    is_target: bool = False


def grid_size_for_level(level: int) -> int:
    if level < 3:
        return 3
    if level < 5:
        return 4
    if level < 8:
        return 5
    return 6


def build_grid(level: int, target_color: str, rng=random) -> List[Cell]:
    """
    Lay out size*size cells for a round. One index, picked uniformly, carries
    target_color; every other cell gets its own random colour, which may
    happen to equal the target.
    """
    size = grid_size_for_level(level)
    total = size * size
    target_index = rng.randrange(total)
    return [
        Cell(idx, target_color, True) if idx == target_index
        else Cell(idx, random_color(rng))
        for idx in range(total)
    ]


def find_target_cell(cells: List[Cell], target_color: str) -> Optional[Cell]:
    # first match wins when a decoy collides with the target colour
    return next((c for c in cells if c.color == target_color), None)
