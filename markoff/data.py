"""Shared data types for the simulation and its user interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple

Color = Tuple[int, int, int, int]
"""An sRGBA colour as four bytes."""

TeamID = int
PlayerID = int

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)

DISPLAY_FACTOR = 1
IMG_SIZE = 512
SIM_SIZE = IMG_SIZE // DISPLAY_FACTOR

TAG_AXIS = "axis"


@dataclass
class Team:
    """A team: its index, name, member players and colour."""

    id: TeamID
    name: str
    players: list[PlayerID] = field(default_factory=list)
    color: Color = BLACK


@dataclass
class Player:
    """A player and the team it belongs to."""

    team: TeamID
    name: str


class CellCondition(Enum):
    """How a cell looks from the point of view of the current team."""

    EMPTY = auto()
    ACTIVE = auto()
    OWNED = auto()
    ENEMY = auto()


class CellResult(Enum):
    """What a rule decides for a cell."""

    EMPTY = auto()
    ACTIVE = auto()
    UNTOUCHED = auto()


class SimLayout(Enum):
    """Initial layout of the board; the value is the label shown to users."""

    RANDOM = "Random"
    HORIZ_5050 = "50/50 Horizontal"
    VERT_5050 = "50/50 Vertical"
    RAND_5050 = "50/50 Random"
    EMPTY = "Empty"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "SimLayout":
        """Return the layout with the given label."""
        try:
            return cls(label)
        except ValueError:
            raise ValueError("No such layout") from None


class SimState(Enum):
    """Lifecycle state of the simulation."""

    CLOSED = auto()
    INIT = auto()
    PAUSED = auto()
    RUNNING = auto()


@dataclass
class SimGameplayState:
    """Turn bookkeeping: chosen stamp, steps taken this turn, whose turn it is."""

    current_stamp: Optional[str] = None
    num_steps: int = 0
    current_player: PlayerID = 0


@dataclass
class SimSettings:
    """Settings chosen through the user interface."""

    teams: list[Team] = field(default_factory=list)
    players: list[Player] = field(default_factory=list)
    parent_node: Optional[object] = None
    size: int = 32
    timestep: int = 10
    steps_per_turn: int = 10
    layout: SimLayout = SimLayout.RANDOM
    use_compute: bool = False

    def player_color(self, player_id: PlayerID) -> Color:
        """Colour of the team that the given player belongs to."""
        for team in self.teams:
            if player_id in team.players:
                return team.color
        raise KeyError(f"no team has player {player_id}")


class CurrentScreen(Enum):
    """The screen currently shown."""

    INIT = auto()
    MAIN_MENU = auto()
    GAME_SETTINGS = auto()
    MAIN_LOOP = auto()
    RESULTS = auto()
    SANDBOX = auto()


class SliderAxis(Enum):
    """Direction a slider moves in."""

    HORIZONTAL = auto()
    VERTICAL = auto()

    @classmethod
    def from_tag(cls, value: str) -> "SliderAxis":
        """Parse an axis tag: "y" is vertical, anything else horizontal."""
        return cls.VERTICAL if value == "y" else cls.HORIZONTAL


@dataclass
class Slider:
    """A slider's current value, between 0 and 1, and its axis."""

    value: float = 0.0
    axis: SliderAxis = SliderAxis.HORIZONTAL


@dataclass
class SelectInput:
    """A select box and the value currently chosen in it."""

    value: str = ""


@dataclass(frozen=True)
class SelectionChangedEvent:
    """Sent when an option of a select box is chosen."""

    select: object
    option: object
    value: str


@dataclass(frozen=True)
class SliderChangedEvent:
    """Sent when a slider is moved."""

    slider: object
    value: float


def default_settings() -> SimSettings:
    """Settings for two single-player teams, red against blue."""
    return SimSettings(
        teams=[
            Team(id=0, name="A", players=[0], color=(255, 0, 0, 255)),
            Team(id=1, name="B", players=[1], color=(0, 0, 255, 255)),
        ],
        players=[
            Player(team=0, name="Player 1"),
            Player(team=1, name="Player 2"),
        ],
    )