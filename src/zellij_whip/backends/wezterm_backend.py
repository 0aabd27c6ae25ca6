"""WezTerm backend — focus a pane through `wezterm cli`.

`wezterm cli activate-pane` only works reliably when the pane's tab is
already active, so focusing is a two-phase lookup: list all panes as
JSON, find the tab that owns the pane, activate the tab, then the pane.
A pane that no longer exists shows up as a missing record and stops the
flow before any activation command is sent.

Key classes: WezTermBackend(FocusBackend), PaneRecord (dataclass).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from .base import FocusBackend

logger = logging.getLogger(__name__)

# Plain decimal only: int() would also take "1_0", " 9" and non-ASCII digits
_PANE_ID_RE = re.compile(r"[+-]?[0-9]+")


def _as_int(value: Any) -> int | None:
    # bool is an int subclass; JSON true/false is not an id
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


@dataclass(frozen=True)
class PaneRecord:
    """One entry of `wezterm cli list --format json` (extra keys ignored).

    tab_id is None when the entry carries no usable tab id; that only
    matters if this is the pane being focused.
    """

    pane_id: int
    tab_id: int | None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaneRecord | None:
        """Build a record, or None if the entry has no integer pane_id."""
        pane_id = _as_int(data.get("pane_id"))
        if pane_id is None:
            return None
        return cls(pane_id=pane_id, tab_id=_as_int(data.get("tab_id")))


def parse_pane_list(output: str) -> list[PaneRecord] | None:
    """Parse the JSON pane listing, or return None if it is unusable.

    The listing must be an array of objects. Entries without an integer
    pane_id are skipped.
    """
    try:
        data = json.loads(output)
    except (json.JSONDecodeError, ValueError) as e:
        logger.debug("Pane list is not valid JSON: %s", e)
        return None
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        logger.debug("Pane list is not a JSON array of objects")
        return None

    records: list[PaneRecord] = []
    for entry in data:
        record = PaneRecord.from_dict(entry)
        if record is None:
            logger.debug("Skipping pane entry without pane_id: %r", entry)
            continue
        records.append(record)
    return records


class WezTermBackend(FocusBackend):
    """Drives the running WezTerm GUI through its CLI."""

    def list_panes(self) -> list[PaneRecord] | None:
        result = self._run("cli", "list", "--format", "json", capture=True)
        if result is None:
            return None
        return parse_pane_list(result[1])

    def find_tab_id(self, pane_id: int) -> int | None:
        """Return the id of the tab that owns `pane_id`."""
        panes = self.list_panes()
        if panes is None:
            return None
        record = next((r for r in panes if r.pane_id == pane_id), None)
        if record is None:
            logger.debug("WezTerm pane %d not found", pane_id)
            return None
        if record.tab_id is None:
            logger.debug("WezTerm pane %d has no tab_id", pane_id)
        return record.tab_id

    def focus_pane(self, pane_id: str) -> bool:
        if not _PANE_ID_RE.fullmatch(pane_id):
            logger.debug("Ignoring malformed WezTerm pane id %r", pane_id)
            return False
        target = int(pane_id)

        tab_id = self.find_tab_id(target)
        if tab_id is None:
            return False

        # Exit statuses ignored: the tab may already be active
        self._run("cli", "activate-tab", "--tab-id", str(tab_id))
        self._run("cli", "activate-pane", "--pane-id", pane_id)
        return True
