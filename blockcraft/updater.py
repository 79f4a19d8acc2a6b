"""Scheduling of block updates: timed updates and random-chance updates."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Mapping, Optional

NO_CHANCE = 99999
SOIL_CHANCE_UPDATE = 1000
SAPLING_CHANCE_UPDATE = 2000
LEAF_CHANCE_UPDATE = 800
LEAF_SQUARE_RADIUS = 2
CACTUS_CHANCE_UPDATE = 1000

_AROUND = (
    (1, 0), (0, -1), (-1, 0), (0, 1),
    (1, 1), (-1, -1), (-1, 1), (1, -1),
    (2, 0), (0, -2), (-2, 0), (0, 2),
    (0, 0),
)


class BlockUpdater:
    """Behaviour attached to one kind of block.

    ``chance`` bounds the random delay before a chance update; ``NO_CHANCE``
    means the block never receives one.
    """

    chance: int = NO_CHANCE

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        """React to a change nearby; return True to update the surroundings."""
        return False

    def chance_update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> None:
        """Perform a random, slow change such as growth or decay."""
        return None


@dataclass
class UpdateInfo:
    """A pending update of one cell on one layer."""

    x: int
    y: int
    bg: bool
    time_to_live: int
    chance: bool


class UpdateEngine:
    """Queue of pending block updates for a world."""

    def __init__(self, world, updaters: Optional[Mapping[int, BlockUpdater]] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.world = world
        self.updaters: dict[int, BlockUpdater] = {
            int(block): updater for block, updater in (updaters or {}).items()}
        self.rng = rng if rng is not None else random.Random()
        self.pending: list[UpdateInfo] = []
        self.particles: list[object] = []

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.world.width and 0 <= y < self.world.height

    def _updater_at(self, x: int, y: int, bg: bool) -> Optional[BlockUpdater]:
        layer = self.world.bgblocks if bg else self.world.blocks
        return self.updaters.get(layer[x][y])

    def _has_pending(self, x: int, y: int, bg: bool, chance: bool) -> bool:
        return any(info.x == x and info.y == y and info.bg == bg
                   and info.chance == chance for info in self.pending)

    def _schedule(self, x: int, y: int, bg: bool) -> None:
        if not self._in_bounds(x, y):
            return
        updater = self._updater_at(x, y, bg)
        if updater is None:
            return
        if not self._has_pending(x, y, bg, False):
            self.pending.append(UpdateInfo(x, y, bg, 1, False))
        if updater.chance != NO_CHANCE and not self._has_pending(x, y, bg, True):
            delay = self.rng.randrange(updater.chance)
            self.pending.append(UpdateInfo(x, y, bg, delay, True))

    def update_around(self, x: int, y: int) -> None:
        """Schedule updates for the cells near (x, y) on both layers."""
        for bg in (False, True):
            for dx, dy in _AROUND:
                self._schedule(x + dx, y + dy, bg)

    def update_single(self, x: int, y: int, bg: bool = False,
                      time_to_update: int = 1) -> None:
        """Schedule one cell to update after ``time_to_update`` frames."""
        block = self.world.block(x, y, bg)
        if block not in self.updaters:
            return
        if not self._has_pending(x, y, bg, False):
            self.pending.append(UpdateInfo(x, y, bg, time_to_update, False))

    def process_ttl(self) -> int:
        """Count down every pending update; return how many are ready."""
        ready = 0
        for info in self.pending:
            info.time_to_live -= 1
            if info.time_to_live < 2:
                ready += 1
        return ready

    def process_one(self) -> bool:
        """Run the first ready update; return False if none was ready."""
        for index, info in enumerate(self.pending):
            if info.time_to_live < 2:
                del self.pending[index]
                break
        else:
            return False
        x, y, bg = info.x, info.y, info.bg
        if self._in_bounds(x, y):
            updater = self._updater_at(x, y, bg)
            if updater is not None:
                if info.chance:
                    updater.chance_update(self, x, y, bg)
                elif updater.update(self, x, y, bg):
                    self.update_around(x, y)
        return True

    def step(self) -> int:
        """Advance one frame and run a bounded number of ready updates.

        Returns the number of updates run.
        """
        if not self.pending:
            return 0
        amount = self.process_ttl()
        if 0 < amount < 5:
            budget = amount
        elif 4 < amount < 20:
            budget = amount // 2
        else:
            budget = 10
        done = 0
        for _ in range(budget):
            if self.process_one():
                done += 1
        return done