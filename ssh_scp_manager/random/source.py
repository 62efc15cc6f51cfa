"""Process-wide handle to the OS cryptographic randomness source."""

from __future__ import annotations

import logging
import os
import threading

from ..errors import RandomSourceError

logger = logging.getLogger(__name__)


class SystemRandomSource:
    """Fills buffers from the operating system CSPRNG."""

    def fill(self, length: int) -> bytes:
        """Return ``length`` bytes from the OS entropy interface.

        Raises:
            RandomSourceError: If the OS source is unavailable or fails.
        """

        if length < 0:
            raise ValueError("length must be non-negative")
        try:
            return os.urandom(length)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"failed secure_random.fill {e}") from e


_lock = threading.Lock()
_source: SystemRandomSource | None = None
initializations = 0


def get_secure_random() -> SystemRandomSource:
    """Return the shared source, creating it on first use.

    Exactly one source is created even when several threads race on first
    use; later calls skip the lock.
    """

    global _source, initializations
    source = _source
    if source is not None:
        return source
    with _lock:
        if _source is None:
            _source = SystemRandomSource()
            initializations += 1
            logger.debug("secure random source initialized")
        return _source
