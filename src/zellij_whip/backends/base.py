"""Base class for CLI-driven focus backends.

Defines the FocusBackend ABC shared by the zellij and WezTerm backends.
It owns the path to the controller binary and the single helper that runs
it: blocking, argument-vector only, output discarded unless captured.

Launch failures and timeouts are turned into a None result here, so no
backend operation ever raises into the caller.

Key class: FocusBackend (ABC).
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class FocusBackend(ABC):
    """Abstract base for backends that focus a pane through a CLI."""

    def __init__(self, binary: Path, timeout: float | None = None) -> None:
        self.binary = binary
        self.timeout = timeout

    def _run(self, *args: str, capture: bool = False) -> tuple[int, str] | None:
        """Run `<binary> <args>` and return (returncode, stdout).

        stdout is only collected when `capture` is set, otherwise it is ""
        and the stream goes to /dev/null. stderr is always discarded.
        Returns None if the process could not be started or timed out.
        """
        cmd = [str(self.binary), *args]
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("Command %s timed out after %ss", cmd, self.timeout)
            return None
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte in an argument
            logger.debug("Failed to start %s: %s", cmd, e)
            return None

        stdout = ""
        if capture and result.stdout:
            stdout = result.stdout.decode("utf-8", errors="replace")
        if result.returncode != 0:
            logger.debug("Command %s failed (rc=%d)", cmd, result.returncode)
        return result.returncode, stdout

    @abstractmethod
    def focus_pane(self, pane_id: str) -> bool:
        """Activate the pane with the given backend-specific id.

        Returns True if the activation command(s) were issued.
        """
