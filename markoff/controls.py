"""Sandbox controls: sliders, select boxes and scrolling, mapped onto settings."""

from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import Optional

from .data import SimLayout, SimSettings, Slider, SliderAxis

log = logging.getLogger(__name__)

LINE_SCROLL_PIXELS = 12.0
"""Pixels scrolled for one line of a mouse wheel."""

_U32_MAX = 2**32 - 1


def _to_u32(value: float) -> int:
    """Truncate a float to an unsigned 32-bit integer, saturating at both ends."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if math.isnan(value) or math.isinf(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def sim_size_from_slider(value: float) -> int:
    """Board size for a slider position: a power of two from 32 up to 512."""
    exponent = _to_u32(_round_half_away(5.0 + value * 4.0))
    if exponent >= 32:
        raise OverflowError("board size does not fit in 32 bits")
    return 2**exponent


def timestep_from_slider(value: float) -> int:
    """Updates per second for a slider position, in steps of five."""
    return _to_u32(value * 11.0) * 5 + 5


def steps_from_slider(value: float) -> int:
    """Steps per turn for a slider position, in steps of ten."""
    return _to_u32(value * 99.0) * 10 + 10


def apply_slider_change(settings: SimSettings, name: str, value: float) -> Optional[str]:
    """Apply a moved slider to the settings and return the text to show beside it.

    Sliders with an unknown name are ignored and give None.
    """
    if name == "sim_size_slider":
        settings.size = sim_size_from_slider(value)
        return str(settings.size)
    if name == "sim_speed_slider":
        settings.timestep = timestep_from_slider(value)
        return str(settings.timestep)
    if name == "sim_steps_slider":
        settings.steps_per_turn = steps_from_slider(value)
        return str(settings.steps_per_turn)
    log.warning("Unknown name %s", name)
    return None


def apply_select_change(settings: SimSettings, name: str, value: str) -> Optional[SimLayout]:
    """Apply a chosen option of a select box to the settings.

    Returns the new layout, or None for a select box with an unknown name.
    Raises ValueError for an option that names no layout.
    """
    if name == "layout_select":
        settings.layout = SimLayout.from_label(value)
        log.info("settings.layout = %s", settings.layout)
        return settings.layout
    log.warning("Unknown select: %s", name)
    return None


def drag_slider(
    slider: Slider,
    current_pos: float,
    delta: tuple[float, float],
    slider_length: float,
    nob_length: float,
    scale: float,
) -> tuple[float, float]:
    """Move a slider's nob by a mouse motion and update the slider's value.

    `current_pos` is the nob's offset from the left (horizontal) or bottom
    (vertical) edge, the lengths are measured along the slider's axis in
    physical pixels, and `scale` is the inverse of the display scale factor.
    Returns the nob's new offset and the slider's new value.
    """
    if scale <= 0:
        raise ValueError("scale must be positive")
    max_pos = slider_length * scale - nob_length * scale
    if max_pos <= 0:
        raise ValueError("the nob has no room to move along the slider")
    dx, dy = delta
    if slider.axis is SliderAxis.HORIZONTAL:
        moved = current_pos + dx / scale
    else:
        moved = current_pos - dy / scale
    next_pos = max(min(moved, max_pos), 0.0)
    slider.value = next_pos / max_pos
    return next_pos, slider.value


class ScrollUnit(Enum):
    """Unit in which a mouse wheel reports its motion."""

    LINE = auto()
    PIXEL = auto()


def scroll_delta(unit: ScrollUnit, x: float, y: float) -> tuple[float, float]:
    """Wheel motion in pixels; subtract it from a scroll offset to scroll."""
    if unit is ScrollUnit.LINE:
        return x * LINE_SCROLL_PIXELS, y * LINE_SCROLL_PIXELS
    return x, y