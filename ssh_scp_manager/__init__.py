"""ssh_scp_manager: secure random values, RSA keys and remote access commands."""

__version__ = "0.1.0"

from .command import Output, run
from .config import Config, RsaConfig, SshConfig
from .errors import (
    CommandError,
    KeyGenerationError,
    RandomSourceError,
    RemoteAccessError,
    SshScpManagerError,
)
from .random import secure_bytes, secure_string, tmp_path
from .rsa import new_key
from .ssh import Command, Commands

__all__ = [
    "Command",
    "CommandError",
    "Commands",
    "Config",
    "KeyGenerationError",
    "Output",
    "RandomSourceError",
    "RemoteAccessError",
    "RsaConfig",
    "SshConfig",
    "SshScpManagerError",
    "new_key",
    "run",
    "secure_bytes",
    "secure_string",
    "tmp_path",
]
