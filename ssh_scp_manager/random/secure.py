"""Cryptographically secure random values.

Every function here draws from the shared OS-backed source returned by
:func:`~ssh_scp_manager.random.source.get_secure_random` and propagates
:class:`~ssh_scp_manager.errors.RandomSourceError` to the caller without
retrying. Non-secure helpers live in :mod:`ssh_scp_manager.random.fast` and
are never used here.
"""

from __future__ import annotations

import math
import os
import tempfile
from dataclasses import dataclass
from typing import ClassVar

import base58

from .source import get_secure_random

_BASE58_BYTES_PER_CHAR = math.log(58) / math.log(256)


def secure_bytes(n: int) -> bytes:
    """Return ``n`` cryptographically random bytes."""

    return get_secure_random().fill(n)


def _raw_length(n: int) -> int:
    # enough bytes for n base58 digits, plus margin for a small leading value
    return math.ceil(n * _BASE58_BYTES_PER_CHAR) + 2


def secure_string(n: int) -> str:
    """Return a random base58 string of exactly ``n`` characters.

    The encoded buffer is truncated, so the result is an opaque identifier
    and does not decode back to the original bytes.
    """

    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return ""
    encoded = ""
    while len(encoded) < n:
        encoded += base58.b58encode(secure_bytes(_raw_length(n))).decode("ascii")
    return encoded[:n]


def secure_u8() -> int:
    """Return one secure random byte as an integer in ``[0, 255]``."""

    return secure_bytes(1)[0]


@dataclass(frozen=True, slots=True)
class _FixedBytes:
    WIDTH: ClassVar[int] = 0

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError(f"{type(self).__name__} requires bytes")
        if len(self.data) != self.WIDTH:
            raise ValueError(
                f"{type(self).__name__} requires {self.WIDTH} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_bytes(cls, data: bytes):
        return cls(data)

    def to_bytes(self) -> bytes:
        return self.data

    def hex(self) -> str:
        """Return the ``0x``-prefixed lowercase hex form."""

        return "0x" + self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return self.WIDTH

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True, slots=True)
class H160(_FixedBytes):
    """A 20-byte value shaped like a 160-bit address."""

    WIDTH: ClassVar[int] = 20


@dataclass(frozen=True, slots=True)
class H256(_FixedBytes):
    """A 32-byte value shaped like a 256-bit hash."""

    WIDTH: ClassVar[int] = 32


def secure_h160() -> H160:
    """Return a random :class:`H160`."""

    return H160(secure_bytes(H160.WIDTH))


def secure_h256() -> H256:
    """Return a random :class:`H256`."""

    return H256(secure_bytes(H256.WIDTH))


def u256_from_big_endian(data: bytes) -> int:
    """Decode exactly 32 bytes as a big-endian unsigned integer."""

    if len(data) != 32:
        raise ValueError(f"u256 requires 32 bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def secure_u256() -> int:
    """Return a random 256-bit unsigned integer (big-endian decoded)."""

    return u256_from_big_endian(secure_bytes(32))


def tmp_path(n: int, suffix: str | None = None) -> str:
    """Return a random path in the system temp directory.

    The file is not created. The name is collision-resistant, but callers
    that need exclusivity must still create the file with ``O_EXCL``.
    """

    return os.path.join(tempfile.gettempdir(), f"{secure_string(n)}{suffix or ''}")
