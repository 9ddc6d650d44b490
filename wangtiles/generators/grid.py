"""Lazily populated tile grid.

The grid stores one tile reference per cell in a flat row-major list
(offset = x + y * width). Cells are created on first access by the
TileFactory the grid was built with, so each generator decides what an
untouched cell and an off-grid read look like.
"""

from __future__ import annotations

from collections.abc import Iterator
from random import Random
from typing import Generic, NamedTuple, Protocol, TypeVar

import numpy as np

from wangtiles.tiles import WangDirection, WangTile
from wangtiles.types import Coordinate, RandomSeed, Size
from wangtiles.util.rng import RNGProvider

T = TypeVar("T", bound=WangTile)


class TileFactory(Protocol[T]):
    """Capability a generator supplies to the grid it fills."""

    def invalid_tile(self) -> T:
        """Tile returned for out-of-bounds reads."""
        ...

    def create_tile(self, position: Coordinate) -> T:
        """Tile stored in a cell the first time it is read."""
        ...


class Neighbor(NamedTuple):
    tile: WangTile
    position: Coordinate
    direction: WangDirection


class WangGrid(Generic[T]):
    """A width x height array of tiles with a seeded random source.

    Single-owner: the backing list and the RNG stream are mutated without
    synchronization.
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: RandomSeed,
        factory: TileFactory[T],
        *,
        rng: Random | None = None,
        rng_domain: str = "wang.grid",
    ) -> None:
        """Initialize the grid.

        Args:
            width: Grid width in cells. Must be positive.
            height: Grid height in cells. Must be positive.
            seed: Seed for this grid's own random stream.
            factory: Supplies invalid and freshly created tiles.
            rng: Explicit random source; overrides the seed-derived stream.
            rng_domain: Stream name used when deriving from `seed`.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._size = Size(width, height)
        self._factory = factory
        self._tiles: list[T | None] = [None] * (width * height)
        self._rng = rng if rng is not None else RNGProvider(seed).get(rng_domain)

    @property
    def width(self) -> int:
        return self._size.width

    @property
    def height(self) -> int:
        return self._size.height

    @property
    def size(self) -> Size:
        return self._size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return x + y * self.width

    def tile_at(self, x: int, y: int) -> T:
        """Return the tile at (x, y), creating and caching it on first access.

        Out-of-bounds coordinates return the factory's invalid tile and never
        touch the backing store.
        """
        if not self.in_bounds(x, y):
            return self._factory.invalid_tile()

        offset = self._offset(x, y)
        tile = self._tiles[offset]
        if tile is None:
            tile = self._factory.create_tile(Coordinate(x, y))
            self._tiles[offset] = tile
        return tile

    def is_materialized(self, x: int, y: int) -> bool:
        """Whether the cell has been read or written yet."""
        return self.in_bounds(x, y) and self._tiles[self._offset(x, y)] is not None

    def replace_tile_at(self, position: Coordinate, tile: T) -> None:
        """Overwrite the cell at `position`. No-op out of bounds."""
        x, y = position
        if not self.in_bounds(x, y):
            return
        self._tiles[self._offset(x, y)] = tile

    def set_flags(self, position: Coordinate, *directions: WangDirection) -> T:
        """Set direction flags on the tile stored at `position`.

        Raises:
            TileMutationError: If that tile is null or read-only.
        """
        tile = self.tile_at(position.x, position.y)
        for direction in directions:
            tile.set_flag(direction)
        return tile

    def connect(self, position: Coordinate, direction: WangDirection) -> Coordinate:
        """Link a cell and its neighbor by setting the facing pair of flags.

        Returns:
            The neighbor's coordinate.
        """
        other = self.neighbor_coordinate(position, direction)
        self.set_flags(position, direction)
        self.set_flags(other, direction.opposite)
        return other

    def neighbor_coordinate(
        self, position: Coordinate, direction: WangDirection
    ) -> Coordinate:
        dx, dy = direction.offset
        return Coordinate(position.x + dx, position.y + dy)

    def neighbor(self, position: Coordinate, direction: WangDirection) -> Neighbor:
        """Return the adjacent tile with its coordinate and direction."""
        coord = self.neighbor_coordinate(position, direction)
        return Neighbor(self.tile_at(coord.x, coord.y), coord, direction)

    def random_next(self, max_exclusive: int) -> int:
        """Draw an integer in [0, max_exclusive) from this grid's stream."""
        return self._rng.randrange(max_exclusive)

    def positions(self) -> Iterator[Coordinate]:
        """All coordinates, column by column (x outer, y inner)."""
        for x in range(self.width):
            for y in range(self.height):
                yield Coordinate(x, y)

    def to_index_array(self) -> np.ndarray:
        """Tile masks as a (width, height) array; -1 marks null cells."""
        indices = np.full(
            (self.width, self.height), -1, dtype=np.int16, order="F"
        )
        for x, y in self.positions():
            indices[x, y] = self.tile_at(x, y).index
        return indices
