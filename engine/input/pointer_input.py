from __future__ import annotations
import pygame
from typing import List, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Point

_BTN_NAME = {1: "left", 2: "middle", 3: "right"}


class PointerInput:
    """
    Click collector:
    - Each mouse button press becomes one Point, queued until the next drain().
    - Scroll-wheel "buttons" (4/5) are ignored.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._clicks: List[Point] = []

    def _to_logical(self, x: int, y: int, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            btn_name = _BTN_NAME.get(event.button)
            if btn_name is None:
                return
            lx, ly = self._to_logical(*event.pos, w, h)
            self._clicks.append(Point(lx, ly, btn_name))

        # Drop anything queued while the window was losing focus
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._clicks.clear()

    def drain(self) -> List[Point]:
        """Return the clicks queued since the last call and forget them."""
        out, self._clicks = self._clicks, []
        return out
