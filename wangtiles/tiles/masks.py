"""The closed set of legal blob edge masks and their rotation groups.

A mask is legal when every active corner sits between two active edges.
The table below lists each rotation-equivalence class as its canonical root
followed by the masks produced by one, two and three clockwise quarter
turns (symmetric roots list fewer members).
"""

from __future__ import annotations

from types import MappingProxyType

# root mask -> rotated variants, in quarter-turn order
ROTATION_GROUPS: MappingProxyType[int, tuple[int, ...]] = MappingProxyType(
    {
        0: (),
        1: (4, 16, 64),
        5: (20, 80, 65),
        7: (28, 112, 193),
        17: (68,),
        21: (84, 81, 69),
        23: (92, 113, 197),
        29: (116, 209, 71),
        31: (124, 241, 199),
        85: (),
        87: (93, 117, 213),
        95: (125, 245, 215),
        119: (221,),
        127: (253, 247, 223),
        255: (),
    }
)

NULL_INDEX = -1


class UnknownTileMaskError(KeyError):
    """Raised when a mask is not one of the legal catalog masks."""

    def __init__(self, mask: int) -> None:
        super().__init__(mask)
        self.mask = mask

    def __str__(self) -> str:
        return f"Mask {self.mask} is not a legal blob tile mask"


def _build_reverse_index() -> dict[int, tuple[int, int]]:
    reverse: dict[int, tuple[int, int]] = {}
    for root, rotations in ROTATION_GROUPS.items():
        reverse[root] = (root, 0)
        for rotation, mask in enumerate(rotations, start=1):
            reverse[mask] = (root, rotation)
    return reverse


_REVERSE_INDEX = MappingProxyType(_build_reverse_index())

# Every legal mask in table order: each root followed by its rotations.
LEGAL_MASKS: tuple[int, ...] = tuple(_REVERSE_INDEX)


def is_legal_mask(mask: int) -> bool:
    return mask in _REVERSE_INDEX


def reverse_lookup(mask: int) -> tuple[int, int]:
    """Return (root_mask, rotation) for a legal mask.

    Raises:
        UnknownTileMaskError: If the mask is outside the catalog.
    """
    try:
        return _REVERSE_INDEX[mask]
    except KeyError:
        raise UnknownTileMaskError(mask) from None
