from __future__ import annotations
import random
from typing import Tuple

from .const import CHANNEL_MIN, CHANNEL_MAX


def random_channel(rng=random) -> int:
    return rng.randint(CHANNEL_MIN, CHANNEL_MAX)


def random_color(rng=random) -> str:
    """
    Return a '#rrggbb' colour built from three independent channels.
    Nothing stops two calls from returning the same value.
    """
    r = random_channel(rng)
    g = random_channel(rng)
    b = random_channel(rng)
    return "#" + "".join(f"{c:02x}" for c in (r, g, b))


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    digits = color[1:] if color.startswith("#") else ""
    if len(digits) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {color!r}")
    try:
        value = int(digits, 16)
    except ValueError:
        raise ValueError(f"Expected a #rrggbb color, got {color!r}") from None
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
