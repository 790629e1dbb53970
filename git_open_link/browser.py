"""Ways of handing the finished link to the user."""

from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)


class BrowserLauncher(Protocol):
    def open(self, url: str) -> None:
        """Best-effort request to show ``url``; must not raise."""
        ...


class SystemBrowser:
    """Open links with the platform's default browser."""

    def open(self, url: str) -> None:
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as exc:
            logger.warning("Could not open %s in browser: %s", url, exc)
            return
        if not opened:
            logger.warning("No browser available to open %s", url)


class PrintOnly:
    """Print links instead of opening them."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def open(self, url: str) -> None:
        self.console.print(url, markup=False, highlight=False, soft_wrap=True)


__all__ = ["BrowserLauncher", "PrintOnly", "SystemBrowser"]
