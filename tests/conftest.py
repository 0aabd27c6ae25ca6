"""Shared test fixtures and helpers for zellij-whip test suite.

Clears config env vars before any zellij_whip import and provides a
recording fake for subprocess.run that stands in for the zellij and
wezterm CLIs.
"""

import os

# Config isolation: config.py creates a singleton at import time.
for _var in ("ZELLIJ_WHIP_TIMEOUT", "ZELLIJ_WHIP_PLUGIN_PATH"):
    os.environ.pop(_var, None)

import subprocess
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock, patch

import pytest


@dataclass
class _Rule:
    tokens: tuple[str, ...]
    returncode: int = 0
    stdout: str = ""
    raises: BaseException | None = None


def _contains(args: list[str], tokens: tuple[str, ...]) -> bool:
    n = len(tokens)
    return any(tuple(args[i:i + n]) == tokens for i in range(len(args) - n + 1))


@dataclass
class FakeRun:
    """Records every subprocess.run call and answers from configured rules.

    `calls` holds the argument vectors without the binary, in call order.
    Unmatched commands succeed with empty output.
    """

    calls: list[list[str]] = field(default_factory=list)
    binaries: list[str] = field(default_factory=list)
    kwargs: list[dict[str, Any]] = field(default_factory=list)
    rules: list[_Rule] = field(default_factory=list)

    def on(
        self,
        *tokens: str,
        returncode: int = 0,
        stdout: str = "",
        raises: BaseException | None = None,
    ) -> None:
        self.rules.append(_Rule(tokens, returncode, stdout, raises))

    def __call__(self, cmd: list[str], **kwargs: Any) -> MagicMock:
        self.binaries.append(cmd[0])
        self.calls.append(list(cmd[1:]))
        self.kwargs.append(kwargs)
        rule = next((r for r in self.rules if _contains(cmd[1:], r.tokens)), None)
        if rule is None:
            rule = _Rule(())
        if rule.raises is not None:
            raise rule.raises
        stdout = None
        if kwargs.get("stdout") is subprocess.PIPE:
            stdout = rule.stdout.encode()
        return MagicMock(returncode=rule.returncode, stdout=stdout)


@pytest.fixture
def fake_run():
    """Patch subprocess.run with a FakeRun for the duration of a test."""
    fake = FakeRun()
    with patch("subprocess.run", side_effect=fake):
        yield fake


def make_app(bundle_id: str) -> MagicMock:
    """Build a stand-in for an NSRunningApplication."""
    app = MagicMock()
    app.bundleIdentifier.return_value = bundle_id
    return app


# ── Realistic `wezterm cli list --format json` output ────────────────────

WEZTERM_PANE_LIST = """\
[
  {
    "window_id": 0,
    "tab_id": 7,
    "pane_id": 3,
    "workspace": "default",
    "size": {"rows": 48, "cols": 160, "pixel_width": 1600, "pixel_height": 960, "dpi": 144},
    "title": "zsh",
    "cwd": "file:///Users/me/src/app",
    "is_active": true,
    "is_zoomed": false
  },
  {
    "window_id": 0,
    "tab_id": 2,
    "pane_id": 9,
    "workspace": "default",
    "size": {"rows": 48, "cols": 80, "pixel_width": 800, "pixel_height": 960, "dpi": 144},
    "title": "zellij",
    "cwd": "file:///Users/me",
    "is_active": false,
    "is_zoomed": false
  }
]
"""
