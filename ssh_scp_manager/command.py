"""Run shell commands and capture their output."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass

from .errors import CommandError

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "bash"
ENV_SHELL = "SSH_SCP_MANAGER_SHELL"


@dataclass(frozen=True, slots=True)
class Output:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


def run(cmd: str, *, shell: str | None = None, timeout: float | None = None) -> Output:
    """Run ``cmd`` with ``<shell> -c`` and return its output.

    ``shell`` defaults to ``$SSH_SCP_MANAGER_SHELL`` and then ``bash``.

    Raises:
        CommandError: If the shell cannot be started, the command times out
            or it exits with a non-zero status.
    """

    shell = shell or os.getenv(ENV_SHELL, DEFAULT_SHELL)
    logger.info("running command '%s'", cmd)
    try:
        proc = subprocess.run(
            [shell, "-c", cmd],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise CommandError(f"command timed out after {timeout}s: {cmd}") from e
    except OSError as e:
        raise CommandError(f"failed to spawn {shell}: {e}") from e

    if proc.returncode != 0:
        raise CommandError(
            f"command exited with status {proc.returncode}: {cmd}",
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
    return Output(stdout=proc.stdout, stderr=proc.stderr)
