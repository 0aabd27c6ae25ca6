"""Application configuration — reads env vars and exposes a singleton.

Loads the optional subprocess timeout and the zellij focus plugin path
from environment variables (with .env support). Backend binaries are
discovered by the locator, never configured here.

Key class: Config (singleton instantiated as `config`).
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def default_plugin_path() -> Path:
    """Location of the zellij plugin that handles `focus-pane` messages."""
    return Path.home() / ".config" / "zellij" / "plugins" / "room.wasm"


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        load_dotenv()

        # Bounded wait for every external command (unset = wait forever)
        timeout_str = os.getenv("ZELLIJ_WHIP_TIMEOUT", "").strip()
        self.command_timeout: float | None = None
        if timeout_str:
            try:
                self.command_timeout = float(timeout_str)
            except ValueError as e:
                raise ValueError(
                    f"ZELLIJ_WHIP_TIMEOUT must be a number of seconds: {e}"
                ) from e
            if self.command_timeout <= 0:
                raise ValueError(
                    f"ZELLIJ_WHIP_TIMEOUT must be positive, got {timeout_str!r}"
                )

        plugin_str = os.getenv("ZELLIJ_WHIP_PLUGIN_PATH", "").strip()
        self.plugin_path: Path = (
            Path(plugin_str).expanduser() if plugin_str else default_plugin_path()
        )

        logger.debug(
            "Config initialized: timeout=%s, plugin=%s",
            self.command_timeout,
            self.plugin_path,
        )


config = Config()
