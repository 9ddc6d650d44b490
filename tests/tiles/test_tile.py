from __future__ import annotations

import pytest

from wangtiles.tiles import (
    TileMutationError,
    UnknownTileMaskError,
    WangDirection,
    WangTile,
)


class TestNullTile:
    def test_reports_no_flags(self) -> None:
        null = WangTile.NULL
        assert null.is_null
        assert null.read_only
        assert null.index == -1
        assert not any(null.has_flag(d) for d in WangDirection)
        assert null.directions == ()

    def test_cannot_be_mutated(self) -> None:
        with pytest.raises(TileMutationError):
            WangTile.NULL.north = True
        assert WangTile.NULL.index == -1

    def test_has_no_root(self) -> None:
        with pytest.raises(UnknownTileMaskError):
            _ = WangTile.NULL.root_index


class TestFlags:
    def test_default_tile_is_empty_and_writable(self) -> None:
        tile = WangTile()
        assert tile.index == 0
        assert not tile.is_null
        assert not tile.read_only

    @pytest.mark.parametrize("index", [-2, 256, 300])
    def test_rejects_masks_outside_eight_bits(self, index: int) -> None:
        with pytest.raises(ValueError):
            WangTile(index)

    def test_setting_a_flag_sets_exactly_that_bit(self) -> None:
        tile = WangTile(WangDirection.SOUTH)
        tile.east = True
        assert tile.index == WangDirection.SOUTH | WangDirection.EAST
        assert tile.east and tile.south
        assert not tile.north

    def test_setting_twice_is_stable(self) -> None:
        tile = WangTile()
        tile.west = True
        tile.west = True
        assert tile.index == WangDirection.WEST

    def test_clearing_only_removes_that_bit(self) -> None:
        tile = WangTile(WangDirection.NORTH | WangDirection.EAST)
        tile.north = False
        assert tile.index == WangDirection.EAST
        # Clearing an unset flag leaves the mask alone.
        tile.south = False
        assert tile.index == WangDirection.EAST

    def test_property_names_map_to_bits(self) -> None:
        tile = WangTile(255)
        assert tile.north_west and tile.north and tile.north_east
        assert tile.west and tile.east
        assert tile.south_west and tile.south and tile.south_east

    def test_set_flag_method(self) -> None:
        tile = WangTile()
        tile.set_flag(WangDirection.SOUTH_EAST)
        assert tile.has_flag(WangDirection.SOUTH_EAST)
        tile.set_flag(WangDirection.SOUTH_EAST, False)
        assert tile.index == 0

    def test_read_only_tile_rejects_writes(self) -> None:
        tile = WangTile(5, read_only=True)
        with pytest.raises(TileMutationError):
            tile.set_flag(WangDirection.SOUTH)
        assert tile.index == 5


class TestRootAndRotation:
    def test_root_has_rotation_zero(self) -> None:
        tile = WangTile(7)
        assert tile.root_index == 7
        assert tile.rotation == 0

    def test_rotated_variant(self) -> None:
        # N|NE|E turned three times: W|NW|N
        tile = WangTile(193)
        assert tile.root_index == 7
        assert tile.rotation == 3

    def test_non_catalog_mask_fails_loudly(self) -> None:
        # A corner without both of its edges is not a blob tile.
        with pytest.raises(UnknownTileMaskError):
            _ = WangTile(WangDirection.NORTH_EAST).rotation


def test_mutable_copy() -> None:
    source = WangTile(21, read_only=True)
    copy = source.mutable_copy()
    assert copy is not source
    assert copy.index == 21
    assert not copy.read_only
    assert WangTile.NULL.mutable_copy().index == 0


def test_string_forms() -> None:
    assert str(WangTile(5)) == "Index: 5 IsNull: False ReadOnly: False"
    assert str(WangTile.NULL) == "Index: -1 IsNull: True ReadOnly: True"
    assert repr(WangTile(5)) == "WangTile(index=5, read_only=False)"
