"""One step of the cellular automaton on a pixel image."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .data import BLACK, WHITE, CellCondition, CellResult, Color
from .grid import PixelImage


def get_condition(pixel: Color, team_color: Color) -> CellCondition:
    """Classify a pixel relative to the given team's colour."""
    pixel = tuple(pixel)
    if pixel == tuple(team_color):
        return CellCondition.OWNED
    if pixel == BLACK:
        return CellCondition.EMPTY
    if pixel == WHITE:
        return CellCondition.ACTIVE
    return CellCondition.ENEMY


def life_rule(current: CellCondition, neighborhood: Sequence[CellCondition]) -> CellResult:
    """The team's rule: decide a cell's fate from its eight neighbours."""
    num_active = sum(1 for cell in neighborhood if cell is CellCondition.ACTIVE)
    spawn = current is CellCondition.EMPTY and num_active == 3
    stay_alive = num_active in (2, 3)
    die = current is CellCondition.ACTIVE and num_active not in (2, 3)
    if spawn or stay_alive:
        return CellResult.ACTIVE
    if die:
        return CellResult.EMPTY
    return CellResult.UNTOUCHED


def step(image: PixelImage, team_color: Color, workers: int = 1) -> PixelImage:
    """Compute the next generation of the image, split over `workers` threads."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    width = image.width
    area = width * image.height
    source = bytes(image.data)
    result = bytearray(source)
    offsets = (-1 - width, -width, 1 - width, -1, 1, -1 + width, width, 1 + width)

    def color_at(index: int) -> Color:
        if 0 <= index < area:
            return tuple(source[index * 4:index * 4 + 4])  # type: ignore[return-value]
        return BLACK

    def run(start: int, stop: int) -> None:
        for index in range(start, stop):
            cell = color_at(index)
            neighborhood = [
                get_condition(color_at(index + offset), team_color) for offset in offsets
            ]
            outcome = life_rule(get_condition(cell, team_color), neighborhood)
            if outcome is CellResult.EMPTY:
                color = BLACK
            elif outcome is CellResult.ACTIVE:
                color = WHITE
            else:
                color = cell
            result[index * 4:index * 4 + 4] = bytes(color)

    chunk = area // workers
    bounds = [(n * chunk, (n + 1) * chunk) for n in range(workers)]
    bounds[-1] = (bounds[-1][0], area)

    if workers == 1:
        run(0, area)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for future in [pool.submit(run, start, stop) for start, stop in bounds]:
                future.result()

    return PixelImage(image.width, image.height, result)