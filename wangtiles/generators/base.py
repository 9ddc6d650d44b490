"""Base classes for Wang grid generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from wangtiles.tiles import WangTile, is_legal_mask, reverse_lookup

from .grid import WangGrid

if TYPE_CHECKING:
    from random import Random

    from wangtiles.types import Coordinate, RandomSeed, Size


@dataclass
class GeneratedWangData:
    """A snapshot of a finished grid.

    Attributes:
        indices: (width, height) int16 array of tile masks, -1 for null cells.
        roots: Canonical root mask per cell, -1 where the mask is null or
            outside the catalog.
        rotations: Quarter turns from root per cell, -1 where roots is -1.
        unresolved: Cells the generator could not fill.
    """

    indices: np.ndarray
    roots: np.ndarray
    rotations: np.ndarray
    unresolved: list[Coordinate] = field(default_factory=list)

    @classmethod
    def from_indices(
        cls, indices: np.ndarray, unresolved: list[Coordinate] | None = None
    ) -> GeneratedWangData:
        roots = np.full(indices.shape, -1, dtype=np.int16, order="F")
        rotations = np.full(indices.shape, -1, dtype=np.int8, order="F")
        for mask in np.unique(indices):
            if not is_legal_mask(int(mask)):
                continue
            root, rotation = reverse_lookup(int(mask))
            selected = indices == mask
            roots[selected] = root
            rotations[selected] = rotation
        return cls(
            indices=indices,
            roots=roots,
            rotations=rotations,
            unresolved=list(unresolved or []),
        )


class BaseWangGenerator(abc.ABC):
    """Abstract base class for generators that fill a WangGrid in place.

    Subclasses supply the grid's TileFactory hooks and the fill algorithm.
    """

    rng_domain = "wang.grid"

    def __init__(
        self,
        width: int,
        height: int,
        seed: RandomSeed,
        *,
        rng: Random | None = None,
    ) -> None:
        self.grid: WangGrid[WangTile] = WangGrid(
            width, height, seed, self, rng=rng, rng_domain=self.rng_domain
        )

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def size(self) -> Size:
        return self.grid.size

    def tile_at(self, x: int, y: int) -> WangTile:
        return self.grid.tile_at(x, y)

    @abc.abstractmethod
    def invalid_tile(self) -> WangTile:
        """Tile returned for out-of-bounds reads."""
        raise NotImplementedError

    @abc.abstractmethod
    def create_tile(self, position: Coordinate) -> WangTile:
        """Tile placed in a cell on first access."""
        raise NotImplementedError

    @abc.abstractmethod
    def generate(self) -> GeneratedWangData:
        """Fill the grid in place and return a snapshot of the result.

        Calling this again continues from the current grid state; build a
        new generator for a fresh grid.
        """
        raise NotImplementedError

    def snapshot(self) -> GeneratedWangData:
        return GeneratedWangData.from_indices(self.grid.to_index_array())
