"""Terminal front end."""

from scrap_hunter.ui.terminal import TerminalUI

__all__ = ["TerminalUI"]
