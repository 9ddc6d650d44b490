"""The blob tile catalog and its matching predicate.

Two tiles may sit side by side only if the three flags each shows along the
shared border agree: the facing edge plus the two corners at its ends. The
catalog is the universe of read-only tiles searched when a blob cell is
filled.

Usage:
    catalog = build_catalog()
    candidates = catalog.possible_matches(north, south, east, west, pos, size)
"""

from __future__ import annotations

import functools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from wangtiles.types import Coordinate, Size

from .direction import WangDirection
from .masks import LEGAL_MASKS, ROTATION_GROUPS, reverse_lookup
from .tile import WangTile

_D = WangDirection

# Flags that would point off the grid when a cell touches that side.
_SIDE_FLAGS: dict[WangDirection, tuple[WangDirection, ...]] = {
    _D.NORTH: (_D.NORTH_WEST, _D.NORTH, _D.NORTH_EAST),
    _D.EAST: (_D.NORTH_EAST, _D.EAST, _D.SOUTH_EAST),
    _D.SOUTH: (_D.SOUTH_WEST, _D.SOUTH, _D.SOUTH_EAST),
    _D.WEST: (_D.NORTH_WEST, _D.WEST, _D.SOUTH_WEST),
}

FlagPair: TypeAlias = tuple[WangDirection, WangDirection]

# For a neighbor on a given side: (candidate flag, neighbor flag) pairs that
# must agree across the shared border.
FACING_FLAGS: dict[WangDirection, tuple[FlagPair, ...]] = {
    _D.NORTH: (
        (_D.NORTH_WEST, _D.SOUTH_WEST),
        (_D.NORTH, _D.SOUTH),
        (_D.NORTH_EAST, _D.SOUTH_EAST),
    ),
    _D.EAST: (
        (_D.NORTH_EAST, _D.NORTH_WEST),
        (_D.EAST, _D.WEST),
        (_D.SOUTH_EAST, _D.SOUTH_WEST),
    ),
    _D.SOUTH: (
        (_D.SOUTH_WEST, _D.NORTH_WEST),
        (_D.SOUTH, _D.NORTH),
        (_D.SOUTH_EAST, _D.NORTH_EAST),
    ),
    _D.WEST: (
        (_D.NORTH_WEST, _D.NORTH_EAST),
        (_D.WEST, _D.EAST),
        (_D.SOUTH_WEST, _D.SOUTH_EAST),
    ),
}


def matches_neighbor(
    candidate: WangTile, neighbor: WangTile, side: WangDirection
) -> bool:
    """Check the border between `candidate` and the tile on its `side`.

    A null neighbor imposes no constraint.
    """
    if neighbor.is_null:
        return True
    return all(
        candidate.has_flag(own) == neighbor.has_flag(facing)
        for own, facing in FACING_FLAGS[side]
    )


@dataclass(frozen=True)
class TileCatalog:
    """Immutable set of legal read-only tiles keyed by mask.

    Attributes:
        tiles: Mask -> read-only tile, in table order (each root followed
            by its rotations). Iteration order is stable so that index
            selection downstream is deterministic.
    """

    tiles: Mapping[int, WangTile]

    def __contains__(self, mask: object) -> bool:
        return mask in self.tiles

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[WangTile]:
        return iter(self.tiles.values())

    @property
    def roots(self) -> tuple[int, ...]:
        return tuple(ROTATION_GROUPS)

    def reverse_lookup(self, mask: int) -> tuple[int, int]:
        return reverse_lookup(mask)

    def matches_boundary(
        self, tile: WangTile, position: Coordinate, size: Size
    ) -> bool:
        """True if no flag of `tile` would point off the grid at `position`."""
        x, y = position
        touching: list[WangDirection] = []
        if x == 0:
            touching.append(_D.WEST)
        if x == size.width - 1:
            touching.append(_D.EAST)
        if y == 0:
            touching.append(_D.NORTH)
        if y == size.height - 1:
            touching.append(_D.SOUTH)

        return not any(
            tile.has_flag(flag) for side in touching for flag in _SIDE_FLAGS[side]
        )

    def possible_matches(
        self,
        north: WangTile,
        south: WangTile,
        east: WangTile,
        west: WangTile,
        position: Coordinate,
        size: Size,
    ) -> list[WangTile]:
        """Every catalog tile legal at `position` given its four neighbors."""
        neighbors = (
            (north, _D.NORTH),
            (east, _D.EAST),
            (south, _D.SOUTH),
            (west, _D.WEST),
        )
        return [
            tile
            for tile in self
            if self.matches_boundary(tile, position, size)
            and all(matches_neighbor(tile, n, side) for n, side in neighbors)
        ]


@functools.cache
def build_catalog() -> TileCatalog:
    """Build the shared catalog once per process."""
    tiles = {mask: WangTile(mask, read_only=True) for mask in LEGAL_MASKS}
    return TileCatalog(tiles=MappingProxyType(tiles))
