from __future__ import annotations

from typing import NamedTuple

# =============================================================================
# GRID COORDINATES (Always integers)
# =============================================================================


TileCoord = int  # Always integer cell position

# Seeds accepted by the RNG layer. None means system entropy.
RandomSeed = int | str | None


class Coordinate(NamedTuple):
    """A cell position on a Wang grid. (0, 0) is the north-west corner."""

    x: TileCoord
    y: TileCoord


class Size(NamedTuple):
    """Grid dimensions in cells."""

    width: TileCoord
    height: TileCoord

    def __str__(self) -> str:
        return f"Width: {self.width} Height: {self.height}"
