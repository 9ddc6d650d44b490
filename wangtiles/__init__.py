"""Seeded Wang-tile grid generation.

Produces edge-consistent blob autotile layouts and connected maze/room
layouts whose tiles come from the same 47-mask blob catalog.
"""

from .generators import (
    BlobGenerator,
    GeneratedWangData,
    MazeGenerator,
    UnresolvedTileError,
    WangGrid,
)
from .tiles import (
    TileCatalog,
    TileMutationError,
    UnknownTileMaskError,
    WangDirection,
    WangTile,
    build_catalog,
)
from .types import Coordinate, Size

__all__ = [
    "BlobGenerator",
    "Coordinate",
    "GeneratedWangData",
    "MazeGenerator",
    "Size",
    "TileCatalog",
    "TileMutationError",
    "UnknownTileMaskError",
    "UnresolvedTileError",
    "WangDirection",
    "WangGrid",
    "WangTile",
    "build_catalog",
]
