"""Bring a running macOS application to the foreground.

Uses AppKit (pyobjc) to find the running application with a given bundle
identifier and activate all of its windows, ignoring whichever app is
currently frontmost. An application that is not running is left alone:
it is never launched.

Key function: activate().
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _running_applications() -> tuple[list[Any], int]:
    """Return the running applications and the activation option mask.

    Raises ImportError when AppKit is not available (non-macOS hosts).
    """
    from AppKit import (
        NSApplicationActivateAllWindows,
        NSApplicationActivateIgnoringOtherApps,
        NSWorkspace,
    )

    apps = list(NSWorkspace.sharedWorkspace().runningApplications())
    options = NSApplicationActivateAllWindows | NSApplicationActivateIgnoringOtherApps
    return apps, options


def activate(bundle_id: str) -> bool:
    """Activate the running application identified by `bundle_id`.

    Returns True if an activation request was issued. Never raises.
    """
    try:
        apps, options = _running_applications()
    except ImportError as e:
        logger.debug("AppKit unavailable, cannot activate %s: %s", bundle_id, e)
        return False

    app = next((a for a in apps if a.bundleIdentifier() == bundle_id), None)
    if app is None:
        logger.debug("Application %s is not running", bundle_id)
        return False

    app.activateWithOptions_(options)
    logger.debug("Activated %s", bundle_id)
    return True
