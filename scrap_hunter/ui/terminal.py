"""Terminal front end: draws the board and reads one command per turn."""

from __future__ import annotations

import sys
import time
from typing import Callable, TextIO

from scrap_hunter.core.enums import StepOutcome
from scrap_hunter.engine.session import GameSession

_CLEAR = "\033[2J\033[H"

# Notice categories that get a full-screen message and a pause
_BANNERS = {
    "day_start": ("Loading...", "load_pause_seconds"),
    "day_end": ("Day Ended. Scraps saved.", "day_end_pause_seconds"),
    "quota_met": ("QUOTA MET!", "quota_pause_seconds"),
    "fired": ("FIRED.", "quota_pause_seconds"),
    "death": ("YOU DIED.", "death_pause_seconds"),
}


class TerminalUI:
    """Renders snapshots as text and turns key presses into commands."""

    def __init__(
        self,
        out: TextIO | None = None,
        read: Callable[[str], str] = input,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._out = out or sys.stdout
        self._read = read
        self._sleep = sleep

    def clear(self) -> None:
        self._out.write(_CLEAR)
        self._out.flush()

    def intro(self) -> None:
        self.clear()
        self._out.write("Welcome to 'Scrap Hunter'\n")
        self._out.write("Controls: W, A, S, D\n")
        self._out.write("          'e': return, 'q': quit\n")
        self._read("\nPress Enter to continue...")

    def render(self, session: GameSession) -> None:
        snap = session.snapshot()
        self.clear()
        self._out.write(f"Day: {snap.day} | Quota: {snap.total_banked}/{snap.quota}\n")
        self._out.write(f"HP: {snap.player.hp} | Scrap: {snap.player.carried}\n")
        for row in snap.rows:
            self._out.write(row + "\n")
        self._out.flush()

    def read_command(self) -> str:
        try:
            return self._read("Command (w/a/s/d/e/q) > ").lower()
        except EOFError:
            return "q"

    def show_notices(self, session: GameSession) -> None:
        for event in session.notices:
            banner = _BANNERS.get(event.category)
            if banner is None:
                continue
            text, pause_attr = banner
            self.clear()
            self._out.write(f"{text}\n{event.message}\n")
            self._out.flush()
            self._sleep(getattr(session.config, pause_attr))

    def play(self, session: GameSession) -> None:
        """Run *session* interactively until it ends."""
        cfg = session.config
        self.intro()
        session.begin()
        self.show_notices(session)
        while not session.over:
            self.render(session)
            outcome = session.handle(self.read_command())
            self.show_notices(session)
            if outcome == StepOutcome.CONTINUE:
                self._sleep(cfg.tick_delay_seconds)
        self._out.write(f"Game Over. ({session.end_reason})\n")
        self._out.flush()
