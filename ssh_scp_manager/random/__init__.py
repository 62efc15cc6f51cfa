"""Random value generation.

Two namespaces with distinct strength:

* ``secure_*`` (:mod:`.secure`): OS CSPRNG, suitable for key material and
  unguessable identifiers; may raise
  :class:`~ssh_scp_manager.errors.RandomSourceError`.
* ``random_*`` (:mod:`.fast`): per-thread numpy generator, infallible, for
  non-security-sensitive values only.
"""

from __future__ import annotations

from .fast import random_u8, random_u16, random_u32, random_u64, random_usize
from .secure import (
    H160,
    H256,
    secure_bytes,
    secure_h160,
    secure_h256,
    secure_string,
    secure_u8,
    secure_u256,
    tmp_path,
    u256_from_big_endian,
)
from .source import SystemRandomSource, get_secure_random

__all__ = [
    "H160",
    "H256",
    "SystemRandomSource",
    "get_secure_random",
    "random_u8",
    "random_u16",
    "random_u32",
    "random_u64",
    "random_usize",
    "secure_bytes",
    "secure_h160",
    "secure_h256",
    "secure_string",
    "secure_u8",
    "secure_u256",
    "tmp_path",
    "u256_from_big_endian",
]
