"""A turn-based team cellular automaton game with stamps, played headless."""

__version__ = "0.1.0"
__all__ = [
    "automaton",
    "cli",
    "controls",
    "data",
    "grid",
    "screens",
    "selector",
    "simulation",
    "stamps",
]