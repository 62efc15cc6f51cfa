"""Logging setup for scripts built on ssh_scp_manager.

Library modules only create loggers; handlers are installed here, on demand.
"""

from __future__ import annotations

import logging
import os

from .config import ENV_LOG_LEVEL

FORMAT = "[%(asctime)s %(levelname)s %(name)s] %(message)s"


def configure(level: str | int | None = None) -> None:
    """Install a stream handler on the root logger.

    ``level`` defaults to ``$SSH_SCP_MANAGER_LOG`` and then ``INFO``.
    """

    if level is None:
        level = os.getenv(ENV_LOG_LEVEL, "INFO")
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=FORMAT)
