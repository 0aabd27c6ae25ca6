"""Discover external controller binaries by probing install locations.

The candidate lists are ordered from most to least specific; the first
path that exists wins. Nothing is executed and nothing is cached, so a
binary installed between two calls is picked up by the second.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

ZELLIJ_PATHS: tuple[str, ...] = (
    "/opt/homebrew/bin/zellij",
    "/usr/local/bin/zellij",
    "~/.cargo/bin/zellij",
    "/usr/bin/zellij",
)

WEZTERM_PATHS: tuple[str, ...] = (
    "/opt/homebrew/bin/wezterm",
    "/usr/local/bin/wezterm",
    "/Applications/WezTerm.app/Contents/MacOS/wezterm",
)


def locate(candidates: Iterable[str | Path]) -> Path | None:
    """Return the first candidate that exists on disk, or None."""
    for candidate in candidates:
        path = Path(candidate).expanduser()
        if path.exists():
            return path
    logger.debug("No binary found among candidates")
    return None


def find_zellij() -> Path | None:
    return locate(ZELLIJ_PATHS)


def find_wezterm() -> Path | None:
    return locate(WEZTERM_PATHS)
