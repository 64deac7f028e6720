"""Argument parsing for the ``release-notifier`` command.

Commands
- ``check``: run the throttled update check and print the advisory
- ``latest``: print the current and the latest published version
- ``config``: view and change the notifier settings
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .defaults import DEFAULT_TIMEOUT, SETTING_DESCRIPTIONS, TOOL_NAME, VERSION_PREFIX


def _add_feed_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--url", required=True, help="Release feed URL (JSON array)")
    p.add_argument("--name", default=TOOL_NAME, help="Name of the tool being checked")
    p.add_argument(
        "--current-version",
        help="Version to compare against (defaults to this tool's version)",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Network timeout in seconds",
    )
    p.add_argument(
        "--version-prefix",
        default=VERSION_PREFIX,
        help="Literal prefix stripped from release names",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (defaults to ``sys.argv[1:]``)."""
    keys_help = "; ".join(f"{k}: {v}" for k, v in SETTING_DESCRIPTIONS.items())
    p = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Throttled notifications about newer releases of a tool",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("-V", "--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-level", help="Explicit log level (debug, info, warning, error)")
    p.add_argument("--log-file", help="Also write logs to this file")
    p.add_argument("--log-json", action="store_true", help="Emit JSON logs to stdout")

    sub = p.add_subparsers(dest="command")

    check = sub.add_parser(
        "check",
        help="Check for a newer release when due",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_feed_args(check)
    check.add_argument(
        "--release-url-base",
        required=True,
        help="Prefix of the release page URL; the version is appended",
    )
    check.add_argument("--state-file", help="Override the last-check timestamp file")
    check.add_argument(
        "--force", action="store_true", help="Check now regardless of the reminder period"
    )
    check.add_argument(
        "--trust-feed-order",
        action="store_true",
        help="Treat the first feed entry as the latest instead of the highest version",
    )

    latest = sub.add_parser(
        "latest",
        help="Print the current and latest published versions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_feed_args(latest)
    latest.add_argument("--all", action="store_true", help="List every published version")

    config = sub.add_parser("config", help="View or change settings", epilog=keys_help)
    config_sub = config.add_subparsers(dest="config_command")
    config_sub.add_parser("view", help="Show effective settings")
    get = config_sub.add_parser("get", help="Print one setting")
    get.add_argument("key")
    set_ = config_sub.add_parser("set", help="Change one setting")
    set_.add_argument("key")
    set_.add_argument("value")
    unset = config_sub.add_parser("unset", help="Restore one setting to its default")
    unset.add_argument("key")

    if argv is None:
        argv = sys.argv[1:]
    ns = p.parse_args(argv)
    if ns.command == "config" and not ns.config_command:
        ns.config_command = "view"
    return ns


__all__ = ["parse_args"]
