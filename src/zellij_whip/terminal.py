"""Terminal emulator kinds and the focus request they are addressed by.

TerminalKind is the closed set of supported emulators, each carrying its
macOS bundle identifier and which focusing capabilities it offers.
FocusRequest bundles everything one `focus` call needs.

Key classes: TerminalKind (enum), FocusRequest (dataclass).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_BUNDLE_IDS: dict[str, str] = {
    "ghostty": "com.mitchellh.ghostty",
    "wezterm": "com.github.wez.wezterm",
    "iterm2": "com.googlecode.iterm2",
    "kitty": "net.kovidgoyal.kitty",
}

# Accepted spellings (lowercase) -> canonical value
_ALIASES: dict[str, str] = {
    "ghostty": "ghostty",
    "wezterm": "wezterm",
    "iterm2": "iterm2",
    "iterm": "iterm2",
    "kitty": "kitty",
}


class TerminalKind(Enum):
    """A supported terminal emulator."""

    GHOSTTY = "ghostty"
    WEZTERM = "wezterm"
    ITERM2 = "iterm2"
    KITTY = "kitty"

    @property
    def bundle_id(self) -> str:
        return _BUNDLE_IDS[self.value]

    @property
    def hosts_multiplexer(self) -> bool:
        """Whether a zellij session runs inside this emulator."""
        return True

    @property
    def supports_pane_addressing(self) -> bool:
        """Whether the emulator can focus its own panes through a CLI."""
        return self is TerminalKind.WEZTERM

    @classmethod
    def parse(cls, value: str) -> TerminalKind | None:
        """Parse a user-supplied name, case-insensitively.

        Returns None for unrecognized names; the caller decides whether
        that is a usage error.
        """
        canonical = _ALIASES.get(value.strip().lower())
        if canonical is None:
            return None
        return cls(canonical)


@dataclass(frozen=True)
class FocusRequest:
    """Where to put the user's attention."""

    terminal: TerminalKind
    session: str                         # zellij session name
    tab: str                             # zellij tab name
    pane_id: str | None = None           # zellij pane id
    terminal_pane_id: str | None = None  # emulator's own pane id (WEZTERM_PANE)
