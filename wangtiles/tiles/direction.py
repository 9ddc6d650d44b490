"""Compass directions and edge-mask bit helpers.

Each of the eight directions is a single bit, so a tile's set of active
edges and corners fits in one byte. Bits run clockwise from North, which
makes a quarter turn of a mask a two-bit rotation of that byte.
"""

from __future__ import annotations

from enum import IntEnum


class WangDirection(IntEnum):
    """Edge (cardinal) and corner (diagonal) flags of a Wang tile."""

    NORTH = 1
    NORTH_EAST = 2
    EAST = 4
    SOUTH_EAST = 8
    SOUTH = 16
    SOUTH_WEST = 32
    WEST = 64
    NORTH_WEST = 128

    @property
    def opposite(self) -> WangDirection:
        return WangDirection(rotate_mask(self.value, 2))

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) step to the neighboring cell; y grows southward."""
        return DIR_OFFSETS[self]


# Neighbor enumeration order used by the generators.
CARDINALS = (
    WangDirection.NORTH,
    WangDirection.SOUTH,
    WangDirection.EAST,
    WangDirection.WEST,
)

DIR_OFFSETS: dict[WangDirection, tuple[int, int]] = {
    WangDirection.NORTH: (0, -1),
    WangDirection.NORTH_EAST: (1, -1),
    WangDirection.EAST: (1, 0),
    WangDirection.SOUTH_EAST: (1, 1),
    WangDirection.SOUTH: (0, 1),
    WangDirection.SOUTH_WEST: (-1, 1),
    WangDirection.WEST: (-1, 0),
    WangDirection.NORTH_WEST: (-1, -1),
}

_DIAGONALS: dict[tuple[WangDirection, WangDirection], WangDirection] = {
    (WangDirection.NORTH, WangDirection.EAST): WangDirection.NORTH_EAST,
    (WangDirection.NORTH, WangDirection.WEST): WangDirection.NORTH_WEST,
    (WangDirection.SOUTH, WangDirection.EAST): WangDirection.SOUTH_EAST,
    (WangDirection.SOUTH, WangDirection.WEST): WangDirection.SOUTH_WEST,
}


def diagonal_between(
    vertical: WangDirection, horizontal: WangDirection
) -> WangDirection:
    """Return the corner direction between a north/south and an east/west edge.

    Raises:
        ValueError: If the pair does not name a corner.
    """
    try:
        return _DIAGONALS[(vertical, horizontal)]
    except KeyError:
        raise ValueError(
            f"{vertical.name} and {horizontal.name} do not share a corner"
        ) from None


def perpendiculars(direction: WangDirection) -> tuple[WangDirection, WangDirection]:
    """The two cardinal directions at right angles to a cardinal direction."""
    if direction in (WangDirection.NORTH, WangDirection.SOUTH):
        return (WangDirection.EAST, WangDirection.WEST)
    if direction in (WangDirection.EAST, WangDirection.WEST):
        return (WangDirection.NORTH, WangDirection.SOUTH)
    raise ValueError(f"{direction.name} is not a cardinal direction")


def rotate_mask(mask: int, turns: int = 1) -> int:
    """Rotate an 8-bit edge mask clockwise by `turns` quarter turns."""
    shift = (turns % 4) * 2
    return ((mask << shift) | (mask >> (8 - shift))) & 0xFF
