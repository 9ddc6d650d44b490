"""Tests for the raster blob autotile fill."""

from __future__ import annotations

import logging
import random
from types import MappingProxyType

import numpy as np
import pytest

from tests.wang_helpers import boundary_violations
from wangtiles.generators import BlobGenerator, UnresolvedTileError
from wangtiles.tiles import (
    LEGAL_MASKS,
    TileCatalog,
    WangDirection,
    WangTile,
    matches_neighbor,
    reverse_lookup,
)
from wangtiles.types import Coordinate

SEEDS = [0, 1, 7, 42, 1234]


def east_only_catalog() -> TileCatalog:
    """A catalog whose single tile can never sit on the east border."""
    tile = WangTile(WangDirection.EAST, read_only=True)
    return TileCatalog(tiles=MappingProxyType({tile.index: tile}))


class TestDeterminism:
    def test_same_seed_same_grid(self) -> None:
        first = BlobGenerator(12, 9, seed=3).generate()
        second = BlobGenerator(12, 9, seed=3).generate()
        assert np.array_equal(first.indices, second.indices)
        assert first.unresolved == second.unresolved

    def test_different_seed_different_grid(self) -> None:
        first = BlobGenerator(20, 20, seed=1).generate()
        second = BlobGenerator(20, 20, seed=2).generate()
        assert not np.array_equal(first.indices, second.indices)

    def test_explicit_rng(self) -> None:
        first = BlobGenerator(8, 8, rng=random.Random(11)).generate()
        second = BlobGenerator(8, 8, rng=random.Random(11)).generate()
        assert np.array_equal(first.indices, second.indices)


class TestLegality:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_no_flag_points_off_the_grid(self, seed: int) -> None:
        gen = BlobGenerator(10, 7, seed=seed)
        gen.generate()
        assert boundary_violations(gen.grid) == []

    @pytest.mark.parametrize("seed", SEEDS)
    def test_adjacent_tiles_agree_on_shared_borders(self, seed: int) -> None:
        gen = BlobGenerator(10, 7, seed=seed)
        gen.generate()
        for x, y in gen.grid.positions():
            tile = gen.tile_at(x, y)
            if tile.is_null:
                continue
            for side in (WangDirection.EAST, WangDirection.SOUTH):
                other = gen.grid.neighbor(Coordinate(x, y), side).tile
                if other.is_null:
                    continue
                assert matches_neighbor(tile, other, side), (x, y, side.name)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_every_tile_comes_from_the_catalog(self, seed: int) -> None:
        data = BlobGenerator(10, 7, seed=seed).generate()
        placed = data.indices[data.indices != -1]
        assert set(placed.tolist()) <= set(LEGAL_MASKS)

    def test_example_five_by_five(self) -> None:
        gen = BlobGenerator(5, 5, seed=42)
        gen.generate()
        top_left = gen.tile_at(0, 0)
        bottom_right = gen.tile_at(4, 4)
        assert not (top_left.north_west or top_left.north or top_left.west)
        assert not (
            bottom_right.south_east or bottom_right.south or bottom_right.east
        )

    def test_single_cell(self) -> None:
        gen = BlobGenerator(1, 1, seed=5)
        data = gen.generate()
        assert data.indices.tolist() == [[0]]
        assert gen.tile_at(0, 0).read_only

    def test_out_of_bounds_reads_null(self) -> None:
        gen = BlobGenerator(3, 3)
        gen.generate()
        assert gen.tile_at(3, 0) is WangTile.NULL
        assert gen.tile_at(-1, -1).is_null


class TestSnapshot:
    def test_array_shapes(self) -> None:
        data = BlobGenerator(6, 4, seed=9).generate()
        assert data.indices.shape == (6, 4)
        assert data.roots.shape == (6, 4)
        assert data.rotations.shape == (6, 4)

    def test_roots_and_rotations_match_lookup(self) -> None:
        data = BlobGenerator(6, 4, seed=9).generate()
        for (x, y), mask in np.ndenumerate(data.indices):
            if mask == -1:
                assert data.roots[x, y] == -1
                assert data.rotations[x, y] == -1
                continue
            assert (data.roots[x, y], data.rotations[x, y]) == reverse_lookup(
                int(mask)
            )

    def test_indices_match_grid(self) -> None:
        gen = BlobGenerator(6, 4, seed=9)
        data = gen.generate()
        for x, y in gen.grid.positions():
            assert data.indices[x, y] == gen.tile_at(x, y).index


class TestUnresolvedCells:
    def test_dead_end_is_recorded_not_raised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        gen = BlobGenerator(2, 1, catalog=east_only_catalog())
        with caplog.at_level(logging.WARNING):
            data = gen.generate()

        assert gen.unresolved == [Coordinate(1, 0)]
        assert data.unresolved == [Coordinate(1, 0)]
        assert gen.tile_at(1, 0).is_null
        assert data.indices.tolist() == [[WangDirection.EAST], [-1]]
        assert "No catalog tile fits cell (1, 0)" in caplog.text

    def test_strict_mode_raises(self) -> None:
        gen = BlobGenerator(2, 1, strict=True, catalog=east_only_catalog())
        with pytest.raises(UnresolvedTileError) as exc_info:
            gen.generate()
        assert exc_info.value.position == Coordinate(1, 0)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_null_cells_are_exactly_the_unresolved_ones(self, seed: int) -> None:
        data = BlobGenerator(10, 7, seed=seed).generate()
        null_cells = {
            Coordinate(int(x), int(y)) for x, y in np.argwhere(data.indices == -1)
        }
        assert null_cells == set(data.unresolved)

    def test_regenerating_resets_unresolved_cells(self) -> None:
        gen = BlobGenerator(2, 1, catalog=east_only_catalog())
        gen.generate()
        data = gen.generate()

        assert gen.unresolved == [Coordinate(1, 0)]
        assert data.unresolved == [Coordinate(1, 0)]
        assert data.indices.tolist() == [[WangDirection.EAST], [-1]]

    def test_dead_end_on_a_later_pass_drops_the_old_tile(self) -> None:
        gen = BlobGenerator(2, 1, catalog=east_only_catalog())
        # A stale tile with no west edge leaves nothing for (0, 0) to match.
        gen.grid.replace_tile_at(Coordinate(1, 0), WangTile(0, read_only=True))
        data = gen.generate()

        assert gen.unresolved == [Coordinate(0, 0), Coordinate(1, 0)]
        assert data.indices.tolist() == [[-1], [-1]]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_second_fill_keeps_null_cells_and_unresolved_in_step(
        self, seed: int
    ) -> None:
        gen = BlobGenerator(10, 7, seed=seed)
        gen.generate()
        data = gen.generate()
        assert boundary_violations(gen.grid) == []
        null_cells = {
            Coordinate(int(x), int(y)) for x, y in np.argwhere(data.indices == -1)
        }
        assert null_cells == set(data.unresolved) == set(gen.unresolved)
