"""Zellij backend — switch tabs and panes of a running session.

Tabs are addressed by name through `zellij action go-to-tab-name`. Zellij
has no CLI flag for focusing a pane by id, so panes are focused by piping
a `focus-pane` message to the companion plugin, which does the lookup
inside the session.

Key class: ZellijBackend(FocusBackend).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import default_plugin_path
from .base import FocusBackend

logger = logging.getLogger(__name__)

FOCUS_PANE_MESSAGE = "focus-pane"


class ZellijBackend(FocusBackend):
    """Drives one zellij session through the zellij CLI."""

    def __init__(
        self,
        binary: Path,
        session_name: str,
        plugin_path: Path | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(binary, timeout)
        self.session_name = session_name
        self.plugin_path = plugin_path or default_plugin_path()

    @property
    def plugin_url(self) -> str:
        return f"file:{self.plugin_path}"

    def _session_cmd(self, *args: str) -> tuple[int, str] | None:
        """Run `zellij --session <name> <args>`."""
        return self._run("--session", self.session_name, *args)

    def focus_tab(self, tab_name: str) -> bool:
        """Switch the session to the named tab.

        Returns True only if zellij ran and exited 0.
        """
        result = self._session_cmd("action", "go-to-tab-name", tab_name)
        if result is None or result[0] != 0:
            logger.debug(
                "Could not switch session %s to tab %s", self.session_name, tab_name,
            )
            return False
        return True

    def focus_pane(self, pane_id: str) -> bool:
        """Ask the plugin to focus `pane_id`.

        The plugin file is not checked; if it is missing the pipe fails and
        False is returned.
        """
        result = self._session_cmd(
            "pipe",
            "--plugin", self.plugin_url,
            "--name", FOCUS_PANE_MESSAGE,
            "--", pane_id,
        )
        if result is None or result[0] != 0:
            logger.debug("Could not focus zellij pane %s", pane_id)
            return False
        return True
