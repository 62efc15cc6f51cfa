"""Remote access helpers (ssh, scp, aws ssm).

The helpers shell out to the system ``ssh``, ``scp`` and ``aws`` binaries.
"""

from __future__ import annotations

from .aws import Command, Commands

__all__ = ["Command", "Commands"]
