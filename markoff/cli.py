"""Run the simulation without a window and report the board after each turn."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .data import BLACK, WHITE, SimLayout, SimSettings, SimState, default_settings
from .grid import PixelImage
from .simulation import Simulation


def _power_of_two(text: str) -> int:
    value = int(text)
    if value <= 0 or value & (value - 1):
        raise argparse.ArgumentTypeError("size must be a power of two")
    return value


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("value must be at least 1")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markoff", description=__doc__)
    parser.add_argument("--size", type=_power_of_two, default=32)
    parser.add_argument("--steps-per-turn", type=_positive, default=10)
    parser.add_argument("--layout", choices=[layout.value for layout in SimLayout],
                        default=SimLayout.RANDOM.value)
    parser.add_argument("--turns", type=_positive, default=1)
    parser.add_argument("--workers", type=_positive, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--show", action="store_true", help="print the board")
    return parser


def _counts(image: PixelImage, settings: SimSettings) -> list[tuple[str, int]]:
    counts = [("empty", image.count(BLACK)), ("active", image.count(WHITE))]
    counts.extend((team.name, image.count(team.color)) for team in settings.teams)
    return counts


def _render(image: PixelImage, settings: SimSettings) -> list[str]:
    symbols = {BLACK: ".", WHITE: "#"}
    for team in settings.teams:
        symbols.setdefault(tuple(team.color), team.name[:1] or "?")
    return [
        "".join(symbols.get(image.pixel(x, y), "?") for x in range(image.width))
        for y in range(image.height)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    settings = default_settings()
    settings.size = args.size
    settings.steps_per_turn = args.steps_per_turn
    settings.layout = SimLayout.from_label(args.layout)

    simulation = Simulation(settings, random.Random(args.seed))
    simulation.workers = args.workers
    simulation.init()
    for turn in range(1, args.turns + 1):
        simulation.stamp()
        while simulation.state is SimState.RUNNING:
            simulation.tick()
        image = simulation.displayed
        if image is None:
            image = simulation.preview
        print(f"turn {turn}")
        for label, count in _counts(image, settings):
            print(f"  {label}: {count}")
        if args.show:
            for row in _render(image, settings):
                print(row)
    return 0