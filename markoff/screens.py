"""Screens of the user interface: splash, main menu and sandbox."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .data import CurrentScreen, SimState
from .simulation import Simulation

SPLASH_SECS = 2.0
FADE_SECS = 0.5

SCREEN_TEMPLATES: dict[CurrentScreen, str] = {
    CurrentScreen.MAIN_MENU: "hui/screens/main_menu.xml",
    CurrentScreen.SANDBOX: "hui/screens/sandbox.xml",
}


@dataclass
class FadeInOut:
    """An image that fades in, holds, and fades out over its duration."""

    total_duration: float = SPLASH_SECS
    fade_duration: float = FADE_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity at the current time: a trapezoid peaking at 1."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, dt: float) -> float:
        """Advance by dt seconds and return the new opacity."""
        self.t += dt
        return self.alpha()


@dataclass
class SplashTimer:
    """One-shot timer that holds the splash screen until assets have loaded."""

    duration: float = SPLASH_SECS
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def tick(self, dt: float, loaded: bool) -> bool:
        """Advance by dt seconds; True once time is up and the menu has loaded."""
        if dt < 0:
            raise ValueError("time cannot run backwards")
        self.elapsed = min(self.elapsed + dt, self.duration)
        return self.finished and loaded


@dataclass
class Screens:
    """Which screen is shown, with the switches the menus and key bindings make."""

    current: CurrentScreen = CurrentScreen.INIT

    @property
    def template(self) -> Optional[str]:
        """Template the current screen is drawn from, if it has one."""
        return SCREEN_TEMPLATES.get(self.current)

    def goto(self, screen: CurrentScreen) -> CurrentScreen:
        """Switch to a screen and return the one left."""
        previous = self.current
        self.current = screen
        return previous

    def restart(self, simulation: Simulation) -> None:
        """Go back to the main menu and close the simulation."""
        self.goto(CurrentScreen.MAIN_MENU)
        if simulation.state is not SimState.CLOSED:
            simulation.close()