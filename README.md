# markoff

A turn-based game played on a cellular automaton. Teams take turns placing
stamps (small pixel patterns) on a square board; the board then runs a
Life-like rule for a number of steps, after which the live cells are given
to the current player's team and play passes to the next player.

White cells are active, black cells are empty, and cells in a team's colour
belong to that team.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The command

`markoff` runs the simulation without a window, turn after turn, and after
each turn prints how many cells are empty, active and in each team's colour.

```
markoff --size 64 --layout "50/50 Vertical" --turns 3 --seed 1 --show
```

Options:

| Option             | Default  | Meaning                                              |
|--------------------|----------|------------------------------------------------------|
| `--size`           | `32`     | board edge length; must be a power of two            |
| `--steps-per-turn` | `10`     | automaton steps in a turn (at least 1)               |
| `--layout`         | `Random` | starting layout, one of the labels below             |
| `--turns`          | `1`      | number of turns to play (at least 1)                 |
| `--workers`        | `1`      | threads used for each automaton step (at least 1)    |
| `--seed`           | none     | seed for the random layouts                          |
| `--show`           | off      | also print the board: `.` empty, `#` active, and the first letter of a team's name for its cells |

The command uses two single-player teams, `A` (red) and `B` (blue).

## Using it as a library

- `markoff.data` — settings and state: `SimSettings` (with
  `player_color`), `Team`, `Player`, `SimLayout` (with `from_label`),
  `SimState`, `SimGameplayState`, `CellCondition`, `CellResult`,
  `CurrentScreen`, `Slider`, `SliderAxis`, `SelectInput`, the event records
  `SelectionChangedEvent` and `SliderChangedEvent`, and `default_settings()`,
  which returns two teams (red and blue) with one player each.
- `markoff.grid` — `PixelImage`, an RGBA pixel grid (`filled`, `pixel`,
  `put`, `copy`, `count`, `coords`).
- `markoff.automaton` — `get_condition`, `life_rule` and `step`, which
  returns the next generation of an image, optionally split over threads.
- `markoff.stamps` — `Stamp` (with `add_to_texture`) and `Stamps`
  (`from_sheets`, `for_stamp_size`, `for_sim_size`); `stamps_from_sheet` cuts
  a sheet of five tiles (`Square`, `Noise`, `Star`, `Diag 1`, `Diag 2`) into
  stamps, and `stamp_size_from_sim_size` picks 8, 16 or 32 pixels from the
  board size.
- `markoff.simulation` — `Simulation`, which drives the game: `init`,
  `populate`, `stamp`, `tick`, `step`, `pause`, `unpause`, `commit_state`,
  `close` and `hover_preview`; failures raise `SimulationError`.
- `markoff.controls` — turns slider and select values into settings
  (`sim_size_from_slider`, `timestep_from_slider`, `steps_from_slider`,
  `apply_slider_change`, `apply_select_change`), moves a slider's nob
  (`drag_slider`) and converts mouse-wheel motion (`scroll_delta`,
  `ScrollUnit`).
- `markoff.selector` — `StampSelector`, the list of 32-pixel stamps of which
  one can be chosen (`select`, `background`).
- `markoff.screens` — screen flow (`Screens` with `goto` and `restart`),
  the splash `SplashTimer` and the `FadeInOut` opacity curve.
- `markoff.cli` — `main`, the command above.

A short session:

```python
from markoff.data import SimLayout, SimState, default_settings
from markoff.simulation import Simulation

settings = default_settings()
settings.layout = SimLayout.HORIZ_5050
sim = Simulation(settings)
sim.init()          # builds and fills the board, then pauses for the first turn
sim.stamp()         # commits the preview and starts running
while sim.state is SimState.RUNNING:
    sim.tick()      # one step; the turn ends after steps_per_turn + 1 ticks
print(sim.gameplay.current_player)   # 1: the turn has passed on
sim.close()
```

To place a stamp, set `sim.gameplay.current_stamp` to a stamp name and, while
paused, call `sim.hover_preview(stamps, (x, y))` with a position between 0
and 1; the next `sim.stamp()` starts the turn from that preview.

### Layouts

| Label              | Meaning                                   |
|--------------------|-------------------------------------------|
| `Random`           | each cell white, black or a team colour   |
| `50/50 Horizontal` | top half team A, bottom half team B       |
| `50/50 Vertical`   | left half team A, right half team B       |
| `50/50 Random`     | each cell team A or team B at random      |
| `Empty`            | all black                                 |

The board-size slider gives powers of two from 32 to 512.

## What it does not do

- There is no graphical window: screens, menus, sliders and the stamp list
  exist as state and rules only, and nothing is drawn.
- Stamp sheets are not read from image files; `Stamps.from_sheets` takes
  `PixelImage` sheets that the caller supplies.
- The `markoff` command does not place stamps; it only runs turns from the
  starting layout.