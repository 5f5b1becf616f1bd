"""
Logging setup and the optional diagnostic hook.

The store and the persistence adapter log through the standard ``logging``
module. Callers that want to observe anomalies or mutations programmatically
(tests, an embedding UI) pass a hook ``hook(event, details)``; it is invoked
after the log line is emitted and is not part of the functional contract.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .config import Settings

DiagnosticHook = Callable[[str, dict], None]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def report(
    logger: logging.Logger,
    hook: Optional[DiagnosticHook],
    level: int,
    event: str,
    message: str,
    *args: Any,
    exc_info: bool = False,
    **details: Any,
) -> None:
    """Log ``message`` and forward ``event`` with its details to the hook, if any."""
    logger.log(level, message, *args, exc_info=exc_info)
    if hook is not None:
        hook(event, details)
