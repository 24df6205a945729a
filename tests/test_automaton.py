import random

import pytest

from markoff.automaton import get_condition, life_rule, step
from markoff.data import BLACK, WHITE, CellCondition, CellResult
from markoff.grid import PixelImage

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def test_get_condition():
    assert get_condition(RED, RED) is CellCondition.OWNED
    assert get_condition(BLACK, RED) is CellCondition.EMPTY
    assert get_condition(WHITE, RED) is CellCondition.ACTIVE
    assert get_condition(BLUE, RED) is CellCondition.ENEMY


def test_team_colour_checked_first():
    assert get_condition(WHITE, WHITE) is CellCondition.OWNED


def _hood(active):
    return [CellCondition.ACTIVE] * active + [CellCondition.EMPTY] * (8 - active)


def test_life_rule_cases():
    assert life_rule(CellCondition.EMPTY, _hood(3)) is CellResult.ACTIVE
    assert life_rule(CellCondition.ACTIVE, _hood(2)) is CellResult.ACTIVE
    assert life_rule(CellCondition.ACTIVE, _hood(1)) is CellResult.EMPTY
    assert life_rule(CellCondition.ACTIVE, _hood(4)) is CellResult.EMPTY
    assert life_rule(CellCondition.OWNED, _hood(0)) is CellResult.UNTOUCHED
    assert life_rule(CellCondition.ENEMY, _hood(2)) is CellResult.ACTIVE
    assert life_rule(CellCondition.EMPTY, _hood(1)) is CellResult.UNTOUCHED


def test_black_board_is_stable():
    image = PixelImage.filled(8, 8, BLACK)
    assert step(image, RED) == image


def test_lonely_cell_dies():
    image = PixelImage.filled(8, 8, BLACK)
    image.put(4, 4, WHITE)
    result = step(image, RED)
    assert result.count(WHITE) == 0
    assert result.count(BLACK) == 64


def test_untouched_keeps_colour():
    image = PixelImage.filled(6, 6, BLACK)
    image.put(3, 3, BLUE)
    image.put(1, 1, RED)
    result = step(image, RED)
    assert result.pixel(3, 3) == BLUE
    assert result.pixel(1, 1) == RED


def test_vertical_line():
    image = PixelImage.filled(6, 6, BLACK)
    for y in (1, 2, 3):
        image.put(2, y, WHITE)
    result = step(image, RED)
    assert result.pixel(1, 2) == WHITE
    assert result.pixel(3, 2) == WHITE
    assert result.pixel(2, 2) == WHITE
    assert result.pixel(5, 5) == BLACK


def test_input_not_modified():
    image = PixelImage.filled(4, 4, BLACK)
    image.put(1, 1, WHITE)
    before = image.copy()
    step(image, RED)
    assert image == before


@pytest.mark.parametrize("workers", [2, 3, 4, 7])
def test_workers_do_not_change_result(workers):
    rng = random.Random(5)
    image = PixelImage.filled(16, 16, BLACK)
    for x, y in image.coords():
        image.put(x, y, rng.choice([BLACK, WHITE, RED, BLUE]))
    assert step(image, RED, workers) == step(image, RED, 1)


def test_invalid_workers():
    with pytest.raises(ValueError):
        step(PixelImage.filled(2, 2, BLACK), RED, 0)