"""Grid generation algorithms for Wang tiles.

This package provides:
- BlobGenerator: Raster fill producing fully edge-consistent blob autotiles
- MazeGenerator: Growing-tree corridors with optional corner-smoothed rooms

Both fill a lazily populated WangGrid in place and return a
GeneratedWangData snapshot.
"""

from .base import BaseWangGenerator, GeneratedWangData
from .blob import BlobGenerator, UnresolvedTileError
from .grid import Neighbor, TileFactory, WangGrid
from .maze import MazeGenerator, corners_touching

__all__ = [
    "BaseWangGenerator",
    "BlobGenerator",
    "GeneratedWangData",
    "MazeGenerator",
    "Neighbor",
    "TileFactory",
    "UnresolvedTileError",
    "WangGrid",
    "corners_touching",
]
