"""Edge-mask tiles.

A WangTile is an 8-bit mask of WangDirection flags. Grid cells hold
writable tiles that generators mutate in place; catalog tiles and the NULL
sentinel are read-only and shared.
"""

from __future__ import annotations

from typing import ClassVar

from .direction import WangDirection
from .masks import NULL_INDEX, reverse_lookup


class TileMutationError(RuntimeError):
    """Raised when a null or read-only tile is modified."""


def _flag(direction: WangDirection) -> property:
    def getter(self: WangTile) -> bool:
        return self.has_flag(direction)

    def setter(self: WangTile, value: bool) -> None:
        self.set_flag(direction, value)

    return property(getter, setter, doc=f"Whether the {direction.name} flag is set.")


class WangTile:
    """A tile whose active edges and corners are stored as a bitmask.

    Attributes:
        index: The edge mask (0..255), or -1 for the null sentinel.
        read_only: Catalog tiles and the null sentinel cannot be mutated.
    """

    __slots__ = ("_index", "_read_only")

    NULL: ClassVar[WangTile]

    def __init__(self, index: int = 0, read_only: bool = False) -> None:
        index = int(index)
        if not NULL_INDEX <= index <= 0xFF:
            raise ValueError(f"Tile index must be within -1..255, got {index}")
        self._index = index
        self._read_only = read_only

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_null(self) -> bool:
        return self._index == NULL_INDEX

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def root_index(self) -> int:
        """Canonical mask of this tile's rotation group."""
        return reverse_lookup(self._index)[0]

    @property
    def rotation(self) -> int:
        """Clockwise quarter turns from root_index to this mask (0-3)."""
        return reverse_lookup(self._index)[1]

    @property
    def directions(self) -> tuple[WangDirection, ...]:
        return tuple(d for d in WangDirection if self.has_flag(d))

    def has_flag(self, direction: WangDirection) -> bool:
        if self.is_null:
            return False
        return (self._index & direction) == direction

    def set_flag(self, direction: WangDirection, value: bool = True) -> None:
        """Set or clear a single direction bit.

        Raises:
            TileMutationError: If the tile is null or read-only.
        """
        if self.is_null or self._read_only:
            raise TileMutationError("Attempt to modify a null or readonly tile")

        if value:
            self._index |= direction
        else:
            self._index &= ~direction & 0xFF

    def mutable_copy(self) -> WangTile:
        """Return a writable tile with the same mask (null becomes empty)."""
        return WangTile(max(self._index, 0), read_only=False)

    north = _flag(WangDirection.NORTH)
    north_east = _flag(WangDirection.NORTH_EAST)
    east = _flag(WangDirection.EAST)
    south_east = _flag(WangDirection.SOUTH_EAST)
    south = _flag(WangDirection.SOUTH)
    south_west = _flag(WangDirection.SOUTH_WEST)
    west = _flag(WangDirection.WEST)
    north_west = _flag(WangDirection.NORTH_WEST)

    def __str__(self) -> str:
        return (
            f"Index: {self._index} IsNull: {self.is_null} ReadOnly: {self._read_only}"
        )

    def __repr__(self) -> str:
        return f"WangTile(index={self._index}, read_only={self._read_only})"


WangTile.NULL = WangTile(NULL_INDEX, read_only=True)
