"""Growing-tree maze generation with corner-smoothing rooms.

The maze grows from one random cell. Each step extends from either the most
recently added active cell or, with `randomness_percent` probability, a
random active cell, linking it to an unvisited orthogonal neighbor. Cells
with no unvisited neighbors are dropped from the active list and generation
ends when it is empty. A randomness of 0 is a recursive backtracker; 100
behaves like Prim's algorithm.

Rooms:
    With `generate_rooms` enabled, every new link checks the two 2x2 blocks
    that contain it. A block whose loop of four links is missing only one is
    closed: the missing link is added and every cell also gets the corner
    flag pointing into the block, forming an open room. Links added this way
    check their other block in turn, so no block is left three-quarters
    closed.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, TypeAlias

from wangtiles import config
from wangtiles.tiles import (
    CARDINALS,
    WangDirection,
    WangTile,
    diagonal_between,
    perpendiculars,
)
from wangtiles.types import Coordinate

from .base import BaseWangGenerator, GeneratedWangData

if TYPE_CHECKING:
    from random import Random

    from wangtiles.types import RandomSeed

logger = logging.getLogger(__name__)

# (pivot cell, vertical side, horizontal side) naming one 2x2 block
Corner: TypeAlias = tuple[Coordinate, WangDirection, WangDirection]
# (cell, direction) naming the link from a cell to its neighbor
Link: TypeAlias = tuple[Coordinate, WangDirection]


def corners_touching(position: Coordinate, direction: WangDirection) -> list[Corner]:
    """The two 2x2 blocks that contain the link leaving `position`."""
    if direction in (WangDirection.NORTH, WangDirection.SOUTH):
        return [(position, direction, h) for h in perpendiculars(direction)]
    return [(position, v, direction) for v in perpendiculars(direction)]


class MazeGenerator(BaseWangGenerator):
    """Carves a connected corridor graph, optionally with small rooms."""

    rng_domain = config.MAZE_RNG_DOMAIN

    def __init__(
        self,
        width: int,
        height: int,
        seed: RandomSeed = config.DEFAULT_SEED,
        randomness_percent: int = config.DEFAULT_MAZE_RANDOMNESS_PERCENT,
        generate_rooms: bool = config.DEFAULT_GENERATE_ROOMS,
        *,
        rng: Random | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            seed: Seed for the grid's random stream.
            randomness_percent: 0-100 chance of extending from a random active
                cell instead of the newest one.
            generate_rooms: Close near-complete 2x2 loops into rooms.
            rng: Explicit random source overriding the seed.
        """
        if not 0 <= randomness_percent <= 100:
            raise ValueError(
                f"randomness_percent must be within 0..100, got {randomness_percent}"
            )

        super().__init__(width, height, seed, rng=rng)
        self.randomness_percent = randomness_percent
        self.generate_rooms = generate_rooms
        self.start: Coordinate | None = None
        self.visited: list[Coordinate] = []
        self.rooms_formed = 0

    def invalid_tile(self) -> WangTile:
        return WangTile.NULL

    def create_tile(self, position: Coordinate) -> WangTile:
        return WangTile(0)

    def generate(self) -> GeneratedWangData:
        start = Coordinate(
            self.grid.random_next(self.width), self.grid.random_next(self.height)
        )
        self.start = start
        self.visited.append(start)
        logger.debug(
            f"Maze growth starting at {tuple(start)} on {self.size} "
            f"(randomness={self.randomness_percent}%, rooms={self.generate_rooms})"
        )

        self._grow([start])

        logger.debug(
            f"Maze growth finished: {len(self.visited)} cells visited, "
            f"{self.rooms_formed} room corners closed"
        )
        return self.snapshot()

    def _select_next_index(self, active: list[Coordinate]) -> int:
        if self.grid.random_next(100) < self.randomness_percent:
            return self.grid.random_next(len(active))
        return len(active) - 1

    def _grow(self, active: list[Coordinate]) -> None:
        while active:
            index = self._select_next_index(active)
            current = active[index]

            unvisited = [
                n
                for n in (self.grid.neighbor(current, d) for d in CARDINALS)
                if not n.tile.is_null and n.tile.index == 0
            ]

            if not unvisited:
                # Backtrack
                del active[index]
                continue

            chosen = unvisited[self.grid.random_next(len(unvisited))]
            self.grid.connect(current, chosen.direction)
            if self.generate_rooms:
                self._close_rooms(chosen.position, chosen.direction.opposite)

            active.append(chosen.position)
            self.visited.append(chosen.position)

    # -------------------------------------------------------------------------
    # Corner smoothing
    # -------------------------------------------------------------------------

    def _close_rooms(self, position: Coordinate, direction: WangDirection) -> None:
        """Apply the corner rule to both blocks containing a new link."""
        pending: deque[Corner] = deque(corners_touching(position, direction))
        while pending:
            added = self._apply_corner_rule(*pending.popleft())
            for cell, link_direction in added:
                pending.extend(corners_touching(cell, link_direction))

    def _is_linked(self, position: Coordinate, direction: WangDirection) -> bool:
        # A link counts when registered from either side.
        tile = self.grid.tile_at(position.x, position.y)
        other = self.grid.neighbor(position, direction).tile
        return tile.has_flag(direction) or other.has_flag(direction.opposite)

    def _ensure_mutable(self, position: Coordinate) -> None:
        tile = self.grid.tile_at(position.x, position.y)
        if tile.is_null or tile.read_only:
            self.grid.replace_tile_at(position, tile.mutable_copy())

    def _apply_corner_rule(
        self, pivot: Coordinate, vertical: WangDirection, horizontal: WangDirection
    ) -> list[Link]:
        """Close the 2x2 block on the `vertical`/`horizontal` side of `pivot`.

        Returns:
            The links that were missing and have now been added.
        """
        grid = self.grid
        side = grid.neighbor_coordinate(pivot, horizontal)
        diagonal = grid.neighbor_coordinate(
            pivot, diagonal_between(vertical, horizontal)
        )
        across = grid.neighbor_coordinate(pivot, vertical)
        if not all(grid.in_bounds(*cell) for cell in (side, diagonal, across)):
            return []

        # Walk the loop pivot -> side -> diagonal -> across -> pivot.
        loop: tuple[Link, ...] = (
            (pivot, horizontal),
            (side, vertical),
            (diagonal, horizontal.opposite),
            (across, vertical.opposite),
        )
        missing = [link for link in loop if not self._is_linked(*link)]
        if len(missing) > 1:
            return []

        for cell in (side, diagonal, across):
            self._ensure_mutable(cell)

        # Every cell gets its two inward links and the inward corner.
        inward = (
            (pivot, vertical, horizontal),
            (side, vertical, horizontal.opposite),
            (diagonal, vertical.opposite, horizontal.opposite),
            (across, vertical.opposite, horizontal),
        )
        before = [grid.tile_at(*cell).index for cell, _, _ in inward]
        for cell, v, h in inward:
            grid.set_flags(cell, v, h, diagonal_between(v, h))
        if before != [grid.tile_at(*cell).index for cell, _, _ in inward]:
            self.rooms_formed += 1

        return missing
