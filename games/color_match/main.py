from __future__ import annotations
import random
from typing import List, Optional

import pygame

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_button, draw_text, draw_text_centered
from engine.timing.scheduler import ScheduledTask

from .colors import hex_to_rgb
from .const import *
from .controller import ColorMatchController
from .grid import Cell
from .layout import cell_at, cell_rects, compute_layout
from .presenter import Hud, Presenter
from .state import GameOptions, Tone


class ColorMatch(Game, Presenter):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.layout = compute_layout(ctx.screen_size)

        # render model, filled in through the Presenter methods
        self.hud: Optional[Hud] = None
        self.target_color: Optional[str] = None
        self.status = ("", Tone.Neutral)
        self.grid_size = 0
        self.cells: List[Cell] = []
        self.rects: List[pygame.Rect] = []
        self.grid_enabled = False
        self.highlight_index: Optional[int] = None
        self.pulsing = False
        self._highlight_task: Optional[ScheduledTask] = None
        self._pulse_task: Optional[ScheduledTask] = None

        self.controller = ColorMatchController(
            presenter=self,
            scheduler=ctx.scheduler,
            rng=random.Random(ctx.cfg.seed),
            options=GameOptions.from_manifest(manifest),
        )
        self.controller.greet()

    # ---------- Presenter ----------
    def show_hud(self, hud: Hud) -> None:
        self.hud = hud

    def show_target(self, color: str) -> None:
        self.target_color = color
        self.pulsing = True
        if self._pulse_task is not None:
            self._pulse_task.cancel()
        self._pulse_task = self.ctx.scheduler.call_later(
            TARGET_PULSE_MS, self._end_pulse)

    def _end_pulse(self):
        self.pulsing = False

    def show_status(self, message: str, tone: Tone = Tone.Neutral) -> None:
        self.status = (message, tone)

    def show_grid(self, size: int, cells: List[Cell]) -> None:
        self.grid_size = size
        self.cells = list(cells)
        self.rects = cell_rects(self.layout.grid_rect, size)
        self.grid_enabled = True
        self._clear_highlight()

    def disable_grid(self) -> None:
        self.grid_enabled = False

    def highlight_cell(self, index: int, duration_ms: int) -> None:
        if self._highlight_task is not None:
            self._highlight_task.cancel()
        self.highlight_index = index
        self._highlight_task = self.ctx.scheduler.call_later(
            duration_ms, self._clear_highlight)

    def _clear_highlight(self):
        if self._highlight_task is not None:
            self._highlight_task.cancel()
            self._highlight_task = None
        self.highlight_index = None

    # ---------- Update ----------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        for p in frame.clicks:
            if p.button != "left":
                continue
            if self.layout.start_button.collidepoint(p.x, p.y):
                self.controller.start()
            elif self.layout.hint_button.collidepoint(p.x, p.y):
                self.controller.request_hint()
            elif self.grid_enabled:
                idx = cell_at(self.rects, (p.x, p.y))
                if idx is not None:
                    self.controller.pick_index(idx)

    # ---------- Draw ----------
    def on_draw(self, surface: pygame.Surface) -> None:
        self._draw_hud(surface)
        self._draw_grid(surface)
        self._draw_sidebar(surface)

        message, tone = self.status
        draw_text(surface, message, self.layout.status_pos,
                  TONE_COLORS[tone.value], size=STATUS_FONT_SIZE)

    def _draw_hud(self, surface):
        h = self.hud
        if h is None:
            return
        draw_text(surface,
                  f"Score {h.score_text}   Level {h.level}   Lives {h.lives}   Time {h.time_text}",
                  self.layout.hud_pos, HUD_COLOR, size=HUD_FONT_SIZE)
        draw_text(surface, h.round_text, self.layout.round_pos,
                  HUD_COLOR, size=STATUS_FONT_SIZE)

    def _draw_grid(self, surface):
        for cell, rect in zip(self.cells, self.rects):
            pygame.draw.rect(surface, hex_to_rgb(cell.color), rect, border_radius=6)
            if cell.index == self.highlight_index:
                pygame.draw.rect(surface, HIGHLIGHT_COLOR,
                                 rect.inflate(6, 6), width=4, border_radius=8)

        if self.cells and not self.grid_enabled:
            shade = pygame.Surface(self.layout.grid_rect.size, pygame.SRCALPHA)
            shade.fill(DISABLED_OVERLAY)
            surface.blit(shade, self.layout.grid_rect.topleft)

    def _draw_sidebar(self, surface):
        lay = self.layout
        draw_text_centered(surface, "Find this color",
                           (lay.preview_rect.centerx, lay.preview_rect.top - 20),
                           HUD_COLOR, size=STATUS_FONT_SIZE)
        if self.target_color is not None:
            rect = lay.preview_rect.inflate(PULSE_GROW, PULSE_GROW) if self.pulsing else lay.preview_rect
            pygame.draw.rect(surface, hex_to_rgb(self.target_color), rect, border_radius=10)
            draw_text_centered(surface, self.target_color.upper(), lay.code_pos,
                               HUD_COLOR, size=HUD_FONT_SIZE)
        else:
            pygame.draw.rect(surface, HUD_COLOR, lay.preview_rect, width=2, border_radius=10)

        draw_button(surface, lay.start_button,
                    "Restart" if self.controller.running else "Start", BUTTON_COLOR)
        draw_button(surface, lay.hint_button, f"Hint (-{self.controller.options.hint_cost})",
                    BUTTON_COLOR, enabled=self.controller.running)

    # ---------- Events ----------
    def on_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.controller.start()
            elif event.key == pygame.K_h:
                self.controller.request_hint()

    def on_unload(self) -> None:
        self._clear_highlight()
        if self._pulse_task is not None:
            self._pulse_task.cancel()


def get_game():
    return ColorMatch()
