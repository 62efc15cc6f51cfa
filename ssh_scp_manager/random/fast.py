"""Fast, non-secure random integers.

For utility values only (file suffixes, jitter, sampling). Anything used as
key material or as an unguessable identifier must come from
:mod:`ssh_scp_manager.random.secure` instead.
"""

from __future__ import annotations

import struct
import threading

import numpy as np

USIZE_BITS = struct.calcsize("P") * 8

_local = threading.local()


def _generator() -> np.random.Generator:
    rng = getattr(_local, "rng", None)
    if rng is None:
        # PCG64, seeded from fresh OS entropy once per thread
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def _uint(bits: int) -> int:
    dtype = {8: np.uint8, 16: np.uint16, 32: np.uint32, 64: np.uint64}[bits]
    return int(_generator().integers(0, np.iinfo(dtype).max, dtype=dtype, endpoint=True))


def random_usize() -> int:
    return _uint(USIZE_BITS)


def random_u8() -> int:
    return _uint(8)


def random_u16() -> int:
    return _uint(16)


def random_u32() -> int:
    return _uint(32)


def random_u64() -> int:
    return _uint(64)
