"""Wang tile representation: directions, edge masks, tiles and the catalog."""

from .catalog import TileCatalog, build_catalog, matches_neighbor
from .direction import (
    CARDINALS,
    DIR_OFFSETS,
    WangDirection,
    diagonal_between,
    perpendiculars,
    rotate_mask,
)
from .masks import (
    LEGAL_MASKS,
    ROTATION_GROUPS,
    UnknownTileMaskError,
    is_legal_mask,
    reverse_lookup,
)
from .tile import TileMutationError, WangTile

__all__ = [
    "CARDINALS",
    "DIR_OFFSETS",
    "LEGAL_MASKS",
    "ROTATION_GROUPS",
    "TileCatalog",
    "TileMutationError",
    "UnknownTileMaskError",
    "WangDirection",
    "WangTile",
    "build_catalog",
    "diagonal_between",
    "is_legal_mask",
    "matches_neighbor",
    "perpendiculars",
    "reverse_lookup",
    "rotate_mask",
]
