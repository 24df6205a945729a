import pytest

from markoff.data import WHITE, SimGameplayState
from markoff.grid import PixelImage
from markoff.selector import (
    HOVERED_BACKGROUND,
    IDLE_BACKGROUND,
    SELECTED_BACKGROUND,
    StampSelector,
)
from markoff.stamps import STAMP_NAMES, Stamps


@pytest.fixture
def selector():
    stamps = Stamps.from_sheets({32: PixelImage.filled(32 * 5, 32, WHITE)})
    return StampSelector(stamps, SimGameplayState())


def test_lists_large_stamps(selector):
    assert selector.names == list(STAMP_NAMES)
    assert selector.selected is None


def test_select_sets_current_stamp(selector):
    assert selector.select("Star") is True
    assert selector.gameplay.current_stamp == "Star"
    assert selector.selected == "Star"


def test_select_replaces_previous(selector):
    selector.select("Star")
    selector.select("Noise")
    assert selector.selected == "Noise"
    assert selector.background("Star", False) == IDLE_BACKGROUND


def test_select_unknown_clears_selection(selector):
    selector.select("Square")
    assert selector.select("missing") is False
    assert selector.selected is None
    assert selector.gameplay.current_stamp == "Square"


def test_background_states(selector):
    selector.select("Diag 1")
    assert selector.background("Diag 1", False) == SELECTED_BACKGROUND
    assert selector.background("Diag 1", True) == SELECTED_BACKGROUND
    assert selector.background("Diag 2", True) == HOVERED_BACKGROUND
    assert selector.background("Diag 2", False) == IDLE_BACKGROUND


def test_background_unknown_name(selector):
    with pytest.raises(KeyError):
        selector.background("missing", False)