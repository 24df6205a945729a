"""An RGBA pixel image stored row by row."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .data import Color


@dataclass
class PixelImage:
    """A width by height image with four bytes per pixel."""

    width: int
    height: int
    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        self.data = bytearray(self.data)
        if len(self.data) != self.width * self.height * 4:
            raise ValueError("pixel data does not match image size")

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> "PixelImage":
        """An image with every pixel set to one colour."""
        return cls(width, height, bytearray(bytes(color) * (width * height)))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return (y * self.width + x) * 4

    def pixel(self, x: int, y: int) -> Color:
        """The colour at (x, y)."""
        offset = self._offset(x, y)
        return tuple(self.data[offset:offset + 4])  # type: ignore[return-value]

    def put(self, x: int, y: int, color: Color) -> None:
        """Set the colour at (x, y)."""
        if len(color) != 4:
            raise ValueError("a colour has four components")
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = bytes(color)

    def copy(self) -> "PixelImage":
        """An independent copy of this image."""
        return PixelImage(self.width, self.height, bytearray(self.data))

    def coords(self) -> Iterator[tuple[int, int]]:
        """Every (x, y) position, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def count(self, color: Color) -> int:
        """How many pixels have the given colour."""
        wanted = bytes(color)
        return sum(
            1
            for offset in range(0, len(self.data), 4)
            if self.data[offset:offset + 4] == wanted
        )