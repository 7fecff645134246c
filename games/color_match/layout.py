from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pygame

from .const import *


@dataclass
class Layout:
    grid_rect: pygame.Rect
    preview_rect: pygame.Rect
    start_button: pygame.Rect
    hint_button: pygame.Rect
    hud_pos: Tuple[int, int]
    round_pos: Tuple[int, int]
    status_pos: Tuple[int, int]
    code_pos: Tuple[int, int]


def compute_layout(screen_size: Tuple[int, int]) -> Layout:
    """
    HUD across the top, a square grid on the left, target preview and
    buttons in a sidebar on the right.
    """
    w, h = screen_size
    avail_w = w - SIDEBAR_WIDTH - EDGE_MARGIN * 3
    avail_h = h - HUD_HEIGHT - EDGE_MARGIN * 3
    side = max(GRID_GAP * 7, min(avail_w, avail_h))
    grid_rect = pygame.Rect(EDGE_MARGIN, HUD_HEIGHT + EDGE_MARGIN, side, side)

    sx = grid_rect.right + EDGE_MARGIN
    sidebar_cx = sx + SIDEBAR_WIDTH // 2
    preview_rect = pygame.Rect(0, 0, PREVIEW_SIZE, PREVIEW_SIZE)
    preview_rect.midtop = (sidebar_cx, grid_rect.top + 40)

    start_button = pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
    start_button.midtop = (sidebar_cx, preview_rect.bottom + 70)
    hint_button = pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
    hint_button.midtop = (sidebar_cx, start_button.bottom + 20)

    return Layout(
        grid_rect=grid_rect,
        preview_rect=preview_rect,
        start_button=start_button,
        hint_button=hint_button,
        hud_pos=(EDGE_MARGIN, 16),
        round_pos=(EDGE_MARGIN, 50),
        status_pos=(EDGE_MARGIN, h - EDGE_MARGIN - 14),
        code_pos=(sidebar_cx, preview_rect.bottom + 24),
    )


def cell_rects(grid_rect: pygame.Rect, size: int, gap: int = GRID_GAP) -> List[pygame.Rect]:
    """Row-major rects for a size x size grid, index i at (i // size, i % size)."""
    if size <= 0:
        return []
    cell = (min(grid_rect.w, grid_rect.h) - gap * (size - 1)) // size
    rects = []
    for idx in range(size * size):
        row, col = divmod(idx, size)
        x = grid_rect.x + col * (cell + gap)
        y = grid_rect.y + row * (cell + gap)
        rects.append(pygame.Rect(x, y, cell, cell))
    return rects


def cell_at(rects: Sequence[pygame.Rect], pos: Tuple[float, float]) -> Optional[int]:
    x, y = pos
    for idx, r in enumerate(rects):
        if r.collidepoint(x, y):
            return idx
    return None
