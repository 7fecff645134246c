import pygame
import pytest

from engine.api import EngineConfig, FrameData, Point
from engine.app.context import Context
from engine.app.loader import load_game_manifest
from engine.app.loop import GAMES_DIR
from engine.timing.scheduler import Scheduler
from games.color_match.main import get_game
from games.color_match.state import Phase

SCREEN = (1280, 720)


@pytest.fixture
def game():
    pygame.init()
    surface = pygame.Surface(SCREEN)
    ctx = Context(
        screen=surface,
        clock=pygame.time.Clock(),
        cfg=EngineConfig(screen_size=SCREEN, seed=3),
        scheduler=Scheduler(),
        resources={},
        screen_size=SCREEN,
    )
    g = get_game()
    g.on_load(ctx, load_game_manifest(GAMES_DIR / "color_match"))
    yield g
    g.on_unload()
    pygame.quit()


def click_at(game, pos):
    game.on_update(16, FrameData(timestamp=0.0, clicks=[Point(*pos)]))


def target_index(game):
    return next(c.index for c in game.cells if c.is_target)


def test_idle_screen_draws(game):
    assert game.status[0] == "Click start to play."
    assert game.cells == []
    game.on_draw(game.ctx.screen)


def test_start_button_starts_and_renders_grid(game):
    click_at(game, game.layout.start_button.center)
    assert game.controller.running
    assert len(game.cells) == 9
    assert len(game.rects) == 9
    assert game.target_color == game.controller.state.target_color
    assert game.pulsing
    game.on_draw(game.ctx.screen)
    game.ctx.scheduler.advance(500)
    assert not game.pulsing


def test_clicking_target_cell_scores(game):
    click_at(game, game.layout.start_button.center)
    click_at(game, game.rects[target_index(game)].center)
    assert game.controller.state.score == 12
    assert game.hud.score_text == "012"


def test_right_click_is_ignored(game):
    click_at(game, game.layout.start_button.center)
    pos = game.rects[target_index(game)].center
    game.on_update(16, FrameData(timestamp=0.0, clicks=[Point(*pos, button="right")]))
    assert game.controller.state.score == 0


def test_hint_highlights_then_clears(game):
    click_at(game, game.layout.start_button.center)
    click_at(game, game.rects[target_index(game)].center)
    click_at(game, game.layout.hint_button.center)
    assert game.controller.state.score == 7
    assert game.highlight_index == target_index(game)
    game.on_draw(game.ctx.screen)
    game.ctx.scheduler.advance(900)
    assert game.highlight_index is None


def test_keyboard_shortcuts(game):
    game.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h))
    assert game.status[0] == "Hit start before asking for hints."
    game.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert game.controller.running


def test_game_over_disables_grid(game):
    click_at(game, game.layout.start_button.center)
    game.ctx.scheduler.advance(60_000)
    assert game.controller.phase is Phase.GameOver
    assert not game.grid_enabled
    assert "Time's up!" in game.status[0]
    # clicks on the dimmed grid do nothing
    click_at(game, game.rects[target_index(game)].center)
    assert game.controller.state.score == 0
    game.on_draw(game.ctx.screen)
