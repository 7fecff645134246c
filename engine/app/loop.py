from __future__ import annotations
import logging
import time
from pathlib import Path
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput
from engine.timing.scheduler import Scheduler

logger = logging.getLogger(__name__)

GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    seed: int | None = None,
    debug: bool = False,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        seed=seed,
        debug=debug,
    )

    # load game before opening a window so a bad manifest fails fast
    game_root = GAMES_DIR / game_id
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()
    logger.info(f"Loaded game {game_id} ({manifest.get('title', game_id)})")

    pygame.init()
    pygame.display.set_caption(f"{manifest.get('title', game_id)}")
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    input_layer = PointerInput(cfg)
    scheduler = Scheduler()

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        scheduler=scheduler,
        resources={},
        screen_size=screen_size,
    )

    game.on_load(ctx, manifest)

    running = True
    try:
        while running:
            dt = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                input_layer.handle_pygame_event(event, screen_size)
                game.on_event(event)

            scheduler.advance(dt)
            frame_data = FrameData(timestamp=time.time(),
                                   clicks=input_layer.drain())

            # ---- draw to render_surface ----
            render_surface.fill((12, 14, 18))
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        scheduler.cancel_all()
        game.on_unload()
        pygame.quit()
        logger.info(f"Unloaded game {game_id}")
