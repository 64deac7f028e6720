"""Entry point for the ``release-notifier`` command."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional

from .args import parse_args
from .config_utils import env_name, load_settings
from .errors import ConfigError, FetchError
from .io_safe import config_path, last_update_check_path
from .logging_utils import configure_logging
from .notify import ToolInfo, get_all_versions, maybe_print_update_text
from .state import NotifySettings, unset_value
from .ui import err, info, ok
from .utils import get_version, user_agent


def _fmt(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def run_check(args) -> int:
    """Throttled check; always exits 0 so wrappers never fail on it."""
    tool = ToolInfo(
        name=args.name,
        version=args.current_version or get_version(),
        releases_url=args.url,
        release_url_base=args.release_url_base,
        version_prefix=args.version_prefix,
    )
    path = Path(args.state_file) if args.state_file else last_update_check_path()
    responded = maybe_print_update_text(
        tool,
        path,
        load_settings(),
        timeout=args.timeout,
        trust_feed_order=args.trust_feed_order,
        force=args.force,
    )
    if args.force and not responded:
        ok(f"{tool.name} {tool.version} is up to date.")
    return 0


def run_latest(args) -> int:
    current = args.current_version or get_version()
    try:
        versions = get_all_versions(
            args.url,
            timeout=args.timeout,
            agent=user_agent(args.name, current),
            prefix=args.version_prefix,
        )
    except FetchError as e:
        err(str(e))
        return 1
    if not versions:
        err(f"No release at {args.url} carries a valid version")
        return 1
    print(f"CurrentVersion: {current}")
    print(f"LatestVersion: {versions[0]}")
    if args.all:
        for v in versions:
            print(f"  {v}")
    return 0


def run_config(args) -> int:
    path = config_path()
    try:
        if args.config_command == "view":
            settings = load_settings(path)
            for key, value in settings.to_dict().items():
                print(f"{key}: {_fmt(value)}")
            return 0
        if args.config_command == "get":
            print(_fmt(load_settings(path).get_value(args.key)))
            return 0
        if args.config_command == "set":
            settings = NotifySettings.load(path).with_value(args.key, args.value)
            settings.save(path)
            ok(f"Set {args.key} to {_fmt(settings.get_value(args.key))}")
            if os.environ.get(env_name(args.key)):
                info(f"{env_name(args.key)} is set and takes precedence")
            return 0
        if args.config_command == "unset":
            unset_value(path, args.key)
            ok(f"Unset {args.key}")
            return 0
    except ConfigError as e:
        err(str(e))
        return 2
    except OSError as e:
        err(f"Could not write {path}: {e}")
        return 1
    return 2


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file, args.log_json, args.log_level)
    if args.version:
        print(get_version())
        return 0
    if args.command == "check":
        return run_check(args)
    if args.command == "latest":
        return run_latest(args)
    if args.command == "config":
        return run_config(args)
    err("No command given; run with --help for usage.")
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
