"""Application entry point — parse arguments and dispatch one focus request.

Invoked by a notification click handler, e.g.:

    zellij-whip --terminal ghostty --session main --tab build --pane 12

--session defaults to $ZELLIJ_SESSION_NAME and --terminal-pane to
$WEZTERM_PANE, so the values captured inside the pane can be passed
through the environment. An unknown terminal name is a usage error; every
focus failure after that is silent and the exit status is 0.
"""

import argparse
import logging
import os
import sys

from . import __version__
from .terminal import FocusRequest, TerminalKind


def _terminal_arg(value: str) -> TerminalKind:
    terminal = TerminalKind.parse(value)
    if terminal is None:
        choices = ", ".join(k.value for k in TerminalKind)
        raise argparse.ArgumentTypeError(
            f"unknown terminal {value!r} (choose from {choices}, or 'iterm')"
        )
    return terminal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zellij-whip",
        description="Focus a terminal window and the zellij tab/pane inside it",
    )
    parser.add_argument(
        "-t", "--terminal",
        required=True,
        type=_terminal_arg,
        help="Terminal emulator: ghostty, wezterm, iterm2 (iterm), kitty",
    )
    parser.add_argument(
        "-s", "--session",
        default=os.environ.get("ZELLIJ_SESSION_NAME") or None,
        help="Zellij session name (default: $ZELLIJ_SESSION_NAME)",
    )
    parser.add_argument("--tab", required=True, help="Zellij tab name")
    parser.add_argument("-p", "--pane", help="Zellij pane id")
    parser.add_argument(
        "--terminal-pane",
        default=os.environ.get("WEZTERM_PANE") or None,
        help="Terminal's own pane id, WezTerm only (default: $WEZTERM_PANE)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every command and abort point to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not args.session:
        parser.error("--session is required when ZELLIJ_SESSION_NAME is not set")

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
        stream=sys.stderr,
    )
    if args.verbose:
        logging.getLogger("zellij_whip").setLevel(logging.DEBUG)

    # Import after logging is configured — Config() validates env vars
    try:
        from .focus import focus
    except ValueError as e:
        parser.error(str(e))

    request = FocusRequest(
        terminal=args.terminal,
        session=args.session,
        tab=args.tab,
        pane_id=args.pane,
        terminal_pane_id=args.terminal_pane,
    )
    focus(request)
    return 0


if __name__ == "__main__":
    sys.exit(main())
