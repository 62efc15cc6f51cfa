"""Configuration management for ssh_scp_manager."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List
import logging
import os

from .command import ENV_SHELL
from .rsa import DEFAULT_BITS

ENV_RSA_BITS = "SSH_SCP_MANAGER_RSA_BITS"
ENV_LOG_LEVEL = "SSH_SCP_MANAGER_LOG"


@dataclass
class RsaConfig:
    """RSA key generation settings."""

    bits: int = DEFAULT_BITS


@dataclass
class SshConfig:
    """Settings for commands run against remote instances.

    ``shell=None`` leaves the choice to :func:`ssh_scp_manager.command.run`.
    """

    shell: Optional[str] = None
    command_timeout: Optional[float] = None


@dataclass
class Config:
    """
    Main configuration for ssh_scp_manager.

    Holds typed sections, with support for environment-variable overrides.
    """

    rsa: RsaConfig = field(default_factory=RsaConfig)
    ssh: SshConfig = field(default_factory=SshConfig)
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Config:
        """Build a configuration with environment overrides applied."""

        config = cls()
        bits = os.getenv(ENV_RSA_BITS)
        if bits is not None:
            try:
                config.rsa.bits = int(bits)
            except ValueError as e:
                raise ValueError(f"{ENV_RSA_BITS} must be an integer, got {bits!r}") from e
        config.ssh.shell = os.getenv(ENV_SHELL, config.ssh.shell)
        config.log_level = os.getenv(ENV_LOG_LEVEL, config.log_level).upper()
        return config

    def validate(self) -> List[str]:
        """
        Validate current configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = []

        if self.rsa.bits < 1024:
            errors.append("rsa.bits must be at least 1024")

        if self.ssh.shell is not None and not self.ssh.shell:
            errors.append("ssh.shell must not be empty")

        if self.ssh.command_timeout is not None and self.ssh.command_timeout <= 0:
            errors.append("ssh.command_timeout must be positive")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"unknown log level {self.log_level!r}")

        return errors
