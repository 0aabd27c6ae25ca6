"""Top-level focus dispatch.

Raises the terminal window, then lands zellij on the requested tab and
pane. Window activation and in-window focusing are independent: each is
attempted regardless of how the other went, and nothing is reported back
to the caller. A focus attempt that fails is a missed convenience, never
an error for the workflow that triggered it.

Key function: focus().
"""

from __future__ import annotations

import logging

from .activator import activate
from .backends import WezTermBackend, ZellijBackend
from .config import config
from .locator import find_wezterm, find_zellij
from .terminal import FocusRequest

logger = logging.getLogger(__name__)


def focus_terminal_pane(pane_id: str) -> bool:
    """Focus a pane through the emulator's own CLI (WezTerm)."""
    wezterm = find_wezterm()
    if wezterm is None:
        logger.debug("wezterm binary not found")
        return False
    return WezTermBackend(wezterm, timeout=config.command_timeout).focus_pane(pane_id)


def focus_zellij(session: str, tab: str, pane_id: str | None) -> bool:
    """Switch zellij to `tab` and, if it worked, to `pane_id`.

    Returns True if the tab switch succeeded.
    """
    zellij = find_zellij()
    if zellij is None:
        logger.debug("zellij binary not found")
        return False

    backend = ZellijBackend(
        zellij,
        session,
        plugin_path=config.plugin_path,
        timeout=config.command_timeout,
    )
    if not backend.focus_tab(tab):
        return False
    if pane_id:
        backend.focus_pane(pane_id)
    return True


def focus(request: FocusRequest) -> None:
    """Bring the requested terminal, tab and pane to the user's attention."""
    terminal = request.terminal
    logger.debug("Focusing %s", request)

    activate(terminal.bundle_id)
    if terminal.supports_pane_addressing and request.terminal_pane_id:
        focus_terminal_pane(request.terminal_pane_id)

    if terminal.hosts_multiplexer:
        focus_zellij(request.session, request.tab, request.pane_id)
