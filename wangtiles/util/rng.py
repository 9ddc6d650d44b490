"""Deterministic random number generation with isolated streams.

Every grid owns exactly one RNGProvider derived from the seed it was built
with, and each generator draws from its own named stream inside that
provider. This ensures that:

1. A grid is fully deterministic from its seed
2. Blob and maze generation never share a sequence, even for equal seeds
3. Two grids never interleave draws from a shared Random instance

Usage:
    from wangtiles.util.rng import RNGProvider

    provider = RNGProvider(42)
    _rng = provider.get("wang.maze")

    def pick(count: int) -> int:
        return _rng.randrange(count)

Domain naming convention (hierarchical):
    - "wang.blob", "wang.maze"
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wangtiles.types import RandomSeed


def derive_seed(master_seed: RandomSeed, domain: str) -> int:
    """Derive the integer seed used for one domain's stream."""
    # Use crc32 instead of hash() - hash() is randomized per Python
    # session via PYTHONHASHSEED, which would break cross-session
    # determinism
    return zlib.crc32(f"{master_seed}:{domain}".encode())


class RNGProvider:
    """Provides isolated RNG streams for the generators of one grid.

    Each domain gets its own Random instance derived deterministically
    from the master seed. Domains are identified by string names.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}

    def get(self, domain: str) -> Random:
        """Get the Random instance for the named domain.

        Args:
            domain: Hierarchical name like "wang.blob" or "wang.maze"

        Returns:
            The domain's Random, created on first request and reused after
        """
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: use system entropy for non-deterministic behavior
                self._streams[domain] = Random()
            else:
                self._streams[domain] = Random(derive_seed(self._master_seed, domain))
        return self._streams[domain]
