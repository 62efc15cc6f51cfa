"""Shared exceptions for :mod:`ssh_scp_manager`.

The package raises a small set of domain-specific exceptions so that callers
never have to catch backend-specific errors from the OS, :pypi:`cryptography`
or :mod:`subprocess`.
"""

from __future__ import annotations


class SshScpManagerError(Exception):
    """Base error for all package operations."""


class RandomSourceError(SshScpManagerError):
    """Raised when the OS randomness source cannot fill a buffer."""


class KeyGenerationError(SshScpManagerError):
    """Raised when RSA key generation or encoding fails."""


class CommandError(SshScpManagerError):
    """Raised when an external command cannot be run or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class RemoteAccessError(SshScpManagerError):
    """Raised when a file transfer precondition or postcondition fails."""
