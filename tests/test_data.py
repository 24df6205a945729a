import pytest

from markoff.data import (
    BLACK,
    WHITE,
    SimGameplayState,
    SimLayout,
    SimSettings,
    SliderAxis,
    Slider,
    default_settings,
)


@pytest.mark.parametrize("layout", list(SimLayout))
def test_layout_label_round_trip(layout):
    assert SimLayout.from_label(str(layout)) is layout


def test_layout_labels_from_source():
    assert SimLayout.from_label("50/50 Horizontal") is SimLayout.HORIZ_5050
    assert SimLayout.from_label("Empty") is SimLayout.EMPTY


def test_unknown_layout_raises():
    with pytest.raises(ValueError, match="No such layout"):
        SimLayout.from_label("Diagonal")


def test_settings_defaults():
    settings = SimSettings()
    assert settings.size == 32
    assert settings.timestep == 10
    assert settings.steps_per_turn == 10
    assert settings.layout is SimLayout.RANDOM
    assert settings.use_compute is False
    assert settings.teams == []


def test_default_settings_player_colors():
    settings = default_settings()
    assert settings.player_color(0) == (255, 0, 0, 255)
    assert settings.player_color(1) == (0, 0, 255, 255)
    assert [p.team for p in settings.players] == [0, 1]


def test_player_without_team_raises():
    with pytest.raises(KeyError):
        default_settings().player_color(7)


def test_colours_are_opaque_like_team_colours():
    assert BLACK == (0, 0, 0, 255)
    assert WHITE == (255, 255, 255, 255)
    settings = default_settings()
    assert [team.color[3] for team in settings.teams] == [BLACK[3], WHITE[3]]
    assert {settings.player_color(0), settings.player_color(1)}.isdisjoint({BLACK, WHITE})


@pytest.mark.parametrize(
    "tag, axis",
    [("y", SliderAxis.VERTICAL), ("x", SliderAxis.HORIZONTAL), ("", SliderAxis.HORIZONTAL)],
)
def test_slider_axis_from_tag(tag, axis):
    assert SliderAxis.from_tag(tag) is axis


def test_slider_default_axis():
    assert Slider(value=0.5).axis is SliderAxis.HORIZONTAL


def test_gameplay_state_defaults():
    state = SimGameplayState()
    assert state.current_stamp is None
    assert state.num_steps == 0
    assert state.current_player == 0