from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ..logging_utils import log_event
from ..ui import celebrate, tip
from .types import CheckOutcome, ToolInfo


def print_advisory(
    tool: ToolInfo, outcome: CheckOutcome, file: Optional[TextIO] = None
) -> None:
    """Tell the user a newer release exists and how to silence the notice."""
    stream = file if file is not None else sys.stderr
    celebrate(
        f"{tool.name} {outcome.latest} is available! Download it: {outcome.release_url}",
        file=stream,
    )
    tip(
        f"To disable this notice, run: '{tool.name} config set WantUpdateNotification false'\n",
        file=stream,
    )


def log_outcome(tool: ToolInfo, outcome: CheckOutcome) -> None:
    """Emit one structured event summarizing ``outcome``."""
    if outcome.error is not None:
        log_event(
            "update_check_failed",
            logging.WARNING,
            msg=str(outcome.error),
            url=tool.releases_url,
            version=tool.version,
            error=str(outcome.error),
            error_type=type(outcome.error).__name__,
            status=outcome.status.value,
        )
        return
    log_event(
        "update_check_completed",
        logging.DEBUG,
        url=tool.releases_url,
        version=tool.version,
        latest=outcome.latest,
        status=outcome.status.value,
    )


__all__ = ["print_advisory", "log_outcome"]
