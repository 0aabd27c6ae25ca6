"""Focus backends — CLI drivers for zellij and WezTerm.

Re-exports the backend classes:
  - FocusBackend: ABC owning the binary path and the subprocess helper.
  - ZellijBackend: tab by name, pane through the focus plugin.
  - WezTermBackend: pane by id, with tab lookup via `wezterm cli list`.
"""

from .base import FocusBackend
from .wezterm_backend import PaneRecord, WezTermBackend
from .zellij_backend import ZellijBackend

__all__ = ["FocusBackend", "PaneRecord", "WezTermBackend", "ZellijBackend"]
