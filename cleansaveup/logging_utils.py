"""Mini README: Logging setup shared by the planner core and dashboard.

Structure:
    * configure_root_logger - install the shared stream handler once.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

What gets logged: the ledger reports added and deleted expenses at INFO, the
setters and session report normalised or ignored input (a rejected savings
rate, for example) at DEBUG, and the dashboard logs rejected expense forms.
``main_planner.run`` passes ``CLEANSAVEUP_LOG_LEVEL`` (a level name such as
``"DEBUG"``) so rejected input can be traced without code changes. Only the
first call configures the root logger, so importing modules repeatedly never
stacks duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a readable, timestamped formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
