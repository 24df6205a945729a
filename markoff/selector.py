"""The stamp selector: a list of stamps of which at most one is chosen."""

from __future__ import annotations

from .data import SimGameplayState
from .stamps import Stamps

LinearColor = tuple[float, float, float]

SELECTED_BACKGROUND: LinearColor = (0.3, 0.3, 0.3)
HOVERED_BACKGROUND: LinearColor = (0.2, 0.2, 0.2)
IDLE_BACKGROUND: LinearColor = (0.1, 0.1, 0.1)
BORDER_COLOR: LinearColor = (3 / 16, 3 / 16, 3 / 16)


class StampSelector:
    """One entry per large stamp; choosing one sets the gameplay's current stamp."""

    def __init__(self, stamps: Stamps, gameplay: SimGameplayState) -> None:
        self.gameplay = gameplay
        self._selected: dict[str, bool] = {name: False for name in stamps.px32}

    @property
    def names(self) -> list[str]:
        """Names of the stamps listed, in display order."""
        return list(self._selected)

    @property
    def selected(self) -> str | None:
        """Name of the chosen stamp, or None."""
        return next((name for name, chosen in self._selected.items() if chosen), None)

    def select(self, name: str) -> bool:
        """Choose a stamp by name; every other entry is deselected.

        Returns False, leaving nothing chosen, when no entry has that name.
        """
        for entry in self._selected:
            self._selected[entry] = False
        if name not in self._selected:
            return False
        self.gameplay.current_stamp = name
        self._selected[name] = True
        return True

    def background(self, name: str, hovered: bool) -> LinearColor:
        """Background colour of an entry, given whether the cursor is over it."""
        if name not in self._selected:
            raise KeyError(f"no stamp named {name!r}")
        if self._selected[name]:
            return SELECTED_BACKGROUND
        if hovered:
            return HOVERED_BACKGROUND
        return IDLE_BACKGROUND