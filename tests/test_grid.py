import random

import pytest

from games.color_match.grid import Cell, build_grid, find_target_cell, grid_size_for_level


class ScriptedRng:
    """randrange returns a fixed index; randint walks a list of channel values."""

    def __init__(self, index, channels):
        self.index = index
        self.channels = list(channels)

    def randrange(self, n):
        assert 0 <= self.index < n
        return self.index

    def randint(self, a, b):
        return self.channels.pop(0)


@pytest.mark.parametrize("level,size", [(1, 3), (2, 3), (3, 4), (4, 4), (5, 5), (7, 5), (8, 6), (10, 6), (50, 6)])
def test_grid_size_steps(level, size):
    assert grid_size_for_level(level) == size


def test_grid_size_is_monotonic():
    sizes = [grid_size_for_level(level) for level in range(1, 40)]
    assert sizes == sorted(sizes)
    assert set(sizes) == {3, 4, 5, 6}


def test_build_grid_places_single_target():
    cells = build_grid(1, "#123456", random.Random(5))
    assert len(cells) == 9
    assert [c.index for c in cells] == list(range(9))
    targets = [c for c in cells if c.is_target]
    assert len(targets) == 1
    assert targets[0].color == "#123456"
    # channels never go below 0x50, so no decoy can match this target
    assert sum(c.color == "#123456" for c in cells) == 1


@pytest.mark.parametrize("level,count", [(1, 9), (3, 16), (6, 25), (9, 36)])
def test_build_grid_size_follows_level(level, count):
    assert len(build_grid(level, "#505050", random.Random(level))) == count


def test_build_grid_uses_injected_rng():
    rng = ScriptedRng(index=2, channels=[80] * 24)
    cells = build_grid(1, "#abcdef", rng)
    assert cells[2] == Cell(2, "#abcdef", True)
    assert all(c.color == "#505050" and not c.is_target for i, c in enumerate(cells) if i != 2)


def test_decoy_may_collide_with_target():
    # every decoy channel is 0x50, same as the target
    rng = ScriptedRng(index=4, channels=[80] * 24)
    cells = build_grid(1, "#505050", rng)
    assert all(c.color == "#505050" for c in cells)
    assert sum(c.is_target for c in cells) == 1


def test_find_target_cell_prefers_first_match():
    cells = [Cell(0, "#505050"), Cell(1, "#606060"), Cell(2, "#505050", True)]
    assert find_target_cell(cells, "#505050").index == 0
    assert find_target_cell(cells, "#999999") is None
    assert find_target_cell([], "#505050") is None
