import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

import pytest

from engine.timing.scheduler import Scheduler
from games.color_match.controller import ColorMatchController
from games.color_match.presenter import Presenter


class RecordingPresenter(Presenter):
    def __init__(self):
        self.hud = None
        self.target = None
        self.status = None
        self.statuses = []
        self.grid = None
        self.grid_size = None
        self.grid_disabled = False
        self.highlights = []

    def show_hud(self, hud):
        self.hud = hud

    def show_target(self, color):
        self.target = color

    def show_status(self, message, tone):
        self.status = (message, tone)
        self.statuses.append((message, tone))

    def show_grid(self, size, cells):
        self.grid_size = size
        self.grid = list(cells)
        self.grid_disabled = False

    def disable_grid(self):
        self.grid_disabled = True

    def highlight_cell(self, index, duration_ms):
        self.highlights.append((index, duration_ms))


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def controller(presenter, scheduler):
    return ColorMatchController(presenter, scheduler, rng=random.Random(1234))


@pytest.fixture
def running(controller):
    controller.start()
    return controller
