"""Stamps: small square patterns that a player places on the board."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from .grid import PixelImage

STAMP_NAMES = ("Square", "Noise", "Star", "Diag 1", "Diag 2")
"""Names of the stamps, in the order their tiles appear on a sheet."""

STAMP_SIZES = (8, 16, 32)
"""Edge lengths, in pixels, for which stamp sheets exist."""

_U32_MAX = 2**32 - 1


def _to_u32(value: float) -> int:
    """Convert a float to an unsigned 32-bit integer, saturating at both ends."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


@dataclass
class Stamp:
    """A named square pattern of a given edge length."""

    name: str
    size: int
    pixels: PixelImage

    def __post_init__(self) -> None:
        if self.pixels.size != (self.size, self.size):
            raise ValueError("stamp pixels do not match the stamp size")

    def add_to_texture(self, texture: PixelImage, pos: tuple[float, float]) -> PixelImage:
        """Draw the stamp centred on `pos`; transparent and off-image pixels are skipped."""
        mid = self.size / 2
        x, y = pos
        columns = range(_to_u32(x - mid), _to_u32(x + mid))
        rows = range(_to_u32(y - mid), _to_u32(y + mid))
        for stamp_x, sim_x in enumerate(columns):
            for stamp_y, sim_y in enumerate(rows):
                red, green, blue, alpha = self.pixels.pixel(stamp_x, stamp_y)
                if alpha == 0:
                    continue
                if sim_x < texture.width and sim_y < texture.height:
                    texture.put(sim_x, sim_y, (red, green, blue, 255))
        return texture


def stamp_size_from_sim_size(size: int) -> int:
    """Edge length of the stamps used on a board of the given size."""
    if size <= 32:
        return 8
    if size <= 64:
        return 16
    return 32


def stamps_from_sheet(sheet: PixelImage, size: int) -> dict[str, Stamp]:
    """Cut a sheet of five tiles in one row into stamps, keyed by stamp name."""
    if size <= 0:
        raise ValueError("stamp size must be positive")
    if sheet.width < size * len(STAMP_NAMES) or sheet.height < size:
        raise ValueError("stamp sheet is too small for its tiles")
    stamps: dict[str, Stamp] = {}
    for index, name in enumerate(STAMP_NAMES):
        tile = bytearray()
        for y in range(size):
            start = (y * sheet.width + index * size) * 4
            tile += sheet.data[start:start + size * 4]
        stamps[name] = Stamp(
            name=f"{name} ({size}px)",
            size=size,
            pixels=PixelImage(size, size, tile),
        )
    return stamps


@dataclass
class Stamps:
    """The stamps available at each stamp size."""

    px8: dict[str, Stamp] = field(default_factory=dict)
    px16: dict[str, Stamp] = field(default_factory=dict)
    px32: dict[str, Stamp] = field(default_factory=dict)

    @classmethod
    def from_sheets(cls, sheets: Mapping[int, PixelImage]) -> "Stamps":
        """Build the collection from one sheet per stamp size."""
        stamps = cls()
        for size, sheet in sheets.items():
            if size not in STAMP_SIZES:
                raise ValueError(f"unsupported stamp size {size}")
            stamps.for_stamp_size(size).update(stamps_from_sheet(sheet, size))
        return stamps

    def for_stamp_size(self, size: int) -> dict[str, Stamp]:
        """Stamps of the given edge length; unknown sizes give the smallest."""
        if size == 32:
            return self.px32
        if size == 16:
            return self.px16
        return self.px8

    def for_sim_size(self, size: int) -> dict[str, Stamp]:
        """Stamps suited to a board of the given size."""
        return self.for_stamp_size(stamp_size_from_sim_size(size))