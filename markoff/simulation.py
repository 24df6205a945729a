"""The simulation's lifecycle: setting up the board, turns, stamps and steps."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Optional

from . import automaton
from .data import BLACK, WHITE, Color, SimGameplayState, SimLayout, SimSettings, SimState
from .grid import PixelImage
from .stamps import Stamps

DRAW_TEAM_COLOR: Color = (255, 0, 0, 255)
"""Colour treated as the stepping team's own cells."""

DEFAULT_TIMESTEP_HZ = 10

_EMPTY_PIXEL: Color = (0, 0, 0, 0)


class SimulationError(RuntimeError):
    """Raised when the simulation cannot do what was asked of it."""


class _Buffer(Enum):
    A = auto()
    B = auto()
    PREVIEW = auto()


class Simulation:
    """A board with a double buffer and a preview, driven through its states."""

    def __init__(self, settings: SimSettings, rng: Optional[random.Random] = None) -> None:
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.state = SimState.CLOSED
        self.gameplay = SimGameplayState()
        self.timestep = DEFAULT_TIMESTEP_HZ
        self.clock_running = True
        self.workers = 1
        self._images: dict[_Buffer, PixelImage] = {}
        self._display: Optional[_Buffer] = None

    # -- images ---------------------------------------------------------

    def _image(self, buffer: _Buffer) -> PixelImage:
        try:
            return self._images[buffer]
        except KeyError:
            raise SimulationError("simulation has not been initialised") from None

    def _displayed_image(self) -> PixelImage:
        if self._display is None:
            raise SimulationError("simulation has no image on display")
        return self._image(self._display)

    @property
    def texture_a(self) -> PixelImage:
        return self._image(_Buffer.A)

    @property
    def texture_b(self) -> PixelImage:
        return self._image(_Buffer.B)

    @property
    def preview(self) -> PixelImage:
        return self._image(_Buffer.PREVIEW)

    @property
    def displayed(self) -> Optional[PixelImage]:
        """The image currently shown, or None when nothing is shown."""
        if self._display is None:
            return None
        return self._images.get(self._display)

    # -- state transitions ----------------------------------------------

    def _enter(self, state: SimState) -> None:
        self.state = state
        if state is SimState.INIT:
            self._setup()
        elif state is SimState.RUNNING:
            self.unpause()
        elif state is SimState.PAUSED:
            self.pause()
            self.commit_state()
        elif state is SimState.CLOSED:
            self._display = None

    def _setup(self) -> None:
        size = self.settings.size
        blank = PixelImage.filled(size, size, _EMPTY_PIXEL)
        self._images = {
            _Buffer.PREVIEW: blank.copy(),
            _Buffer.A: blank.copy(),
            _Buffer.B: blank,
        }
        self._display = _Buffer.A
        self.populate()
        self.timestep = self.settings.timestep
        self._enter(SimState.PAUSED)

    def init(self) -> None:
        """Create the images, lay out the board and pause for the first turn."""
        self._enter(SimState.INIT)

    def stamp(self) -> None:
        """Commit the previewed stamp and start running."""
        if not self._images:
            raise SimulationError("simulation has not been initialised")
        self._enter(SimState.RUNNING)

    def close(self) -> None:
        """Close the simulation and stop showing its image."""
        self._enter(SimState.CLOSED)

    # -- lifecycle steps --------------------------------------------------

    def populate(self) -> None:
        """Fill the displayed image according to the chosen layout."""
        image = self._displayed_image()
        teams = self.settings.teams
        layout = self.settings.layout
        if layout in (SimLayout.HORIZ_5050, SimLayout.VERT_5050, SimLayout.RAND_5050) and len(teams) < 2:
            raise SimulationError(f"layout {layout} needs two teams")
        for x, y in image.coords():
            if layout is SimLayout.RANDOM:
                choice = self.rng.randrange(len(teams) + 2)
                if choice == 0:
                    color = WHITE
                elif choice == 1:
                    color = BLACK
                else:
                    color = teams[choice - 2].color
            elif layout is SimLayout.HORIZ_5050:
                color = teams[0].color if y < image.height // 2 else teams[1].color
            elif layout is SimLayout.VERT_5050:
                color = teams[0].color if x < image.width // 2 else teams[1].color
            elif layout is SimLayout.RAND_5050:
                color = teams[0].color if self.rng.random() < 0.5 else teams[1].color
            else:
                color = BLACK
            image.put(x, y, (color[0], color[1], color[2], 255))

    def commit_state(self) -> None:
        """Give live cells to the current player and pass the turn on."""
        if not self.settings.players:
            raise SimulationError("there are no players")
        current = self._displayed_image()
        try:
            color = self.settings.player_color(self.gameplay.current_player)
        except KeyError as error:
            raise SimulationError(str(error)) from None
        owned = (color[0], color[1], color[2], 255)
        for x, y in current.coords():
            if current.pixel(x, y) == WHITE:
                current.put(x, y, owned)
        preview = self._image(_Buffer.PREVIEW)
        self._images[_Buffer.A] = preview.copy()
        self._images[_Buffer.B] = preview.copy()
        self.gameplay.current_player = (self.gameplay.current_player + 1) % len(
            self.settings.players
        )

    def pause(self) -> None:
        """Stop the clock and copy the shown image into every buffer, showing the preview."""
        self.clock_running = False
        if self._display is None:
            current = self._image(_Buffer.PREVIEW)
        else:
            current = self._displayed_image()
        snapshot = current.copy()
        self._images[_Buffer.A] = snapshot.copy()
        self._images[_Buffer.B] = snapshot.copy()
        self._images[_Buffer.PREVIEW] = snapshot
        self._display = _Buffer.PREVIEW

    def unpause(self) -> None:
        """Start the clock and run from the preview, showing the first buffer."""
        self.clock_running = True
        preview = self._image(_Buffer.PREVIEW)
        self._display = _Buffer.A
        self._images[_Buffer.A] = preview.copy()
        self._images[_Buffer.B] = preview.copy()

    def step(self) -> None:
        """Advance the automaton one generation into the other buffer and show it."""
        current = self._displayed_image()
        target = _Buffer.B if self._display is _Buffer.A else _Buffer.A
        self._images[target] = automaton.step(current, DRAW_TEAM_COLOR, self.workers)
        self._display = target

    def tick(self) -> None:
        """One fixed-rate update: step while running and end the turn when it is over."""
        if self.state is not SimState.RUNNING:
            return
        self.step()
        self.gameplay.num_steps += 1
        if self.gameplay.num_steps > self.settings.steps_per_turn:
            self.gameplay.num_steps = 0
            self._enter(SimState.PAUSED)

    def hover_preview(
        self, stamps: Stamps, pos: Optional[tuple[float, float]]
    ) -> Optional[PixelImage]:
        """Preview the chosen stamp at a normalised position; None when nothing to show."""
        if self.state is not SimState.PAUSED:
            return None
        name = self.gameplay.current_stamp
        if name is None or pos is None:
            return None
        stamp = stamps.for_sim_size(self.settings.size).get(name)
        if stamp is None:
            raise SimulationError(f"no stamp named {name!r}")
        preview = self._image(_Buffer.A).copy()
        size = self.settings.size
        stamp.add_to_texture(preview, (pos[0] * size, pos[1] * size))
        self._images[_Buffer.PREVIEW] = preview
        return preview