"""Raster blob autotile fill.

Cells are visited column by column. Each cell takes a uniformly random
catalog tile among those that agree with every already-placed orthogonal
neighbor and keep their flags on the grid. Unvisited neighbors read as the
null tile and impose no constraint.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wangtiles import config
from wangtiles.tiles import TileCatalog, WangDirection, WangTile, build_catalog
from wangtiles.types import Coordinate

from .base import BaseWangGenerator, GeneratedWangData

if TYPE_CHECKING:
    from random import Random

    from wangtiles.types import RandomSeed

logger = logging.getLogger(__name__)


class UnresolvedTileError(RuntimeError):
    """Raised in strict mode when no catalog tile fits a cell."""

    def __init__(self, position: Coordinate) -> None:
        super().__init__(f"No catalog tile fits cell ({position.x}, {position.y})")
        self.position = position


class BlobGenerator(BaseWangGenerator):
    """Fills every cell with an edge-consistent catalog tile."""

    rng_domain = config.BLOB_RNG_DOMAIN

    def __init__(
        self,
        width: int,
        height: int,
        seed: RandomSeed = config.DEFAULT_SEED,
        *,
        strict: bool = config.DEFAULT_STRICT_BLOB_FILL,
        catalog: TileCatalog | None = None,
        rng: Random | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            seed: Seed for the grid's random stream.
            strict: Raise UnresolvedTileError at the first cell no tile fits,
                instead of leaving it null.
            catalog: Tile universe to search; defaults to the shared catalog.
            rng: Explicit random source overriding the seed.
        """
        super().__init__(width, height, seed, rng=rng)
        self.strict = strict
        self.catalog = catalog if catalog is not None else build_catalog()
        self.unresolved: list[Coordinate] = []

    def invalid_tile(self) -> WangTile:
        return WangTile.NULL

    def create_tile(self, position: Coordinate) -> WangTile:
        return WangTile.NULL

    def generate(self) -> GeneratedWangData:
        self.unresolved.clear()
        logger.debug(f"Blob fill starting: {self.size}")
        for position in self.grid.positions():
            self._place_tile(position)

        if self.unresolved:
            logger.warning(
                f"Blob fill left {len(self.unresolved)} cell(s) without a "
                f"matching tile"
            )
        logger.debug("Blob fill finished")
        return self.snapshot()

    def snapshot(self) -> GeneratedWangData:
        return GeneratedWangData.from_indices(
            self.grid.to_index_array(), self.unresolved
        )

    def _place_tile(self, position: Coordinate) -> None:
        west = self.grid.neighbor(position, WangDirection.WEST).tile
        east = self.grid.neighbor(position, WangDirection.EAST).tile
        north = self.grid.neighbor(position, WangDirection.NORTH).tile
        south = self.grid.neighbor(position, WangDirection.SOUTH).tile

        candidates = self.catalog.possible_matches(
            north, south, east, west, position, self.size
        )

        if not candidates:
            if self.strict:
                raise UnresolvedTileError(position)
            logger.warning(f"No catalog tile fits cell {tuple(position)}")
            self.grid.replace_tile_at(position, self.invalid_tile())
            self.unresolved.append(position)
            return

        index = self.grid.random_next(len(candidates))
        self.grid.replace_tile_at(position, candidates[index])
