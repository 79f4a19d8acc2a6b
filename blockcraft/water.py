"""Flowing water: levels, flowing down, levelling out sideways and buckets."""

from __future__ import annotations

from typing import Optional

from .blocks import Block, is_walk_through
from .updater import BlockUpdater, UpdateEngine

MAX_WATER_LEVEL = 12
TILE_SIZE = 16


def _in_bounds(world, x: int, y: int) -> bool:
    return 0 <= x < world.width and 0 <= y < world.height


def is_water_at(world, px: int, py: int) -> bool:
    """True if the pixel (px, py) lies inside the water of its block."""
    x, y = px // TILE_SIZE, py // TILE_SIZE
    if world.blocks[x][y] != Block.WATER:
        return False
    surface = TILE_SIZE - (world.water_level(x, y) * TILE_SIZE) // MAX_WATER_LEVEL
    return py % TILE_SIZE >= surface


def _attempt_put(world, amount: int, x: int, y: int,
                 engine: Optional[UpdateEngine] = None) -> bool:
    if not _in_bounds(world, x, y):
        return False
    block = world.blocks[x][y]
    if block == Block.AIR:
        world.blocks[x][y] = int(Block.WATER)
        world.set_water_level(x, y, amount)
        return True
    if block != Block.WATER:
        return False
    i = y
    while (i >= 0 and world.blocks[x][i] == Block.WATER
           and world.water_level(x, i) >= MAX_WATER_LEVEL):
        i -= 1
    if i < 1 or world.blocks[x][i] != Block.WATER:
        return False
    if world.water_level(x, i) + amount > MAX_WATER_LEVEL:
        if world.blocks[x][i - 1] != Block.AIR:
            return False
        world.set_water_level(x, i, MAX_WATER_LEVEL)
        world.blocks[x][i - 1] = int(Block.WATER)
        world.set_water_level(x, i - 1, world.water_level(x, i) + amount)
    else:
        world.blocks[x][i - 1] = int(Block.WATER)
        world.set_water_level(x, i - 1, amount)
    if engine is not None:
        engine.update_around(x, i - 1)
    return True


def push_water_from(world, x: int, y: int) -> int:
    """Push the water at (x, y) into its neighbours; return what could not move."""
    level = world.water_level(x, y)
    left = level // 2 + level % 2
    right = level // 2
    put_left = _attempt_put(world, left, x - 1, y)
    put_right = _attempt_put(world, left, x + 1, y)
    if put_left and put_right:
        return 0
    if not put_left and not put_right:
        return 0 if _attempt_put(world, level, x, y - 1) else level

    if not put_left and not _attempt_put(world, left, x + 1, y):
        level -= left if _attempt_put(world, left, x, y - 1) else 0
    else:
        level -= left

    if not put_right and not _attempt_put(world, right, x - 1, y + 1):
        level -= right if _attempt_put(world, right, x, y - 1) else 0
    else:
        level -= right
    return level


def _set_water(world, x: int, y: int, amount: int) -> None:
    if world.blocks[x][y] != Block.WATER:
        world.blocks[x][y] = int(Block.WATER)
    world.set_water_level(x, y, amount)


def _flow_down(world, x: int, y: int) -> bool:
    if y + 1 >= world.height or not is_walk_through(world.blocks[x][y + 1]):
        return False
    level = world.water_level(x, y)
    below = world.blocks[x][y + 1]
    if below == Block.WATER:
        below_level = world.water_level(x, y + 1)
        if below_level == MAX_WATER_LEVEL:
            return False
        new_level = below_level + level
        if new_level > MAX_WATER_LEVEL:
            world.set_water_level(x, y, new_level - MAX_WATER_LEVEL)
            world.set_water_level(x, y + 1, MAX_WATER_LEVEL)
        else:
            world.blocks[x][y] = int(Block.AIR)
            world.set_water_level(x, y + 1, new_level)
        return True
    world.blocks[x][y + 1] = int(Block.WATER)
    world.blocks[x][y] = int(Block.AIR)
    world.set_water_level(x, y + 1, level)
    return True


class WaterUpdater(BlockUpdater):
    """Makes water fall and spread evenly over its neighbours."""

    chance = 1000

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        world = engine.world
        if bg:
            if world.blocks[x][y] == Block.AIR:
                world.blocks[x][y] = int(Block.WATER)
                world.bgblocks[x][y] = int(Block.AIR)
            return False

        orig_level = world.water_level(x, y)
        if _flow_down(world, x, y):
            return True

        left_bound = x - 1 >= 0
        right_bound = x + 1 < world.width
        can_mix_left = left_bound and is_walk_through(world.blocks[x - 1][y])
        can_mix_right = right_bound and is_walk_through(world.blocks[x + 1][y])

        left_water = (world.water_level(x - 1, y)
                      if left_bound and world.blocks[x - 1][y] == Block.WATER else 0)
        right_water = (world.water_level(x + 1, y)
                       if right_bound and world.blocks[x + 1][y] == Block.WATER else 0)
        total = world.water_level(x, y) + left_water + right_water
        shifted = world.water_level(x, y) + (left_water << 4) + (right_water << 8)

        div = 1 + can_mix_left + can_mix_right
        if (total < div or div < 2
                or abs(left_water - orig_level) + abs(right_water - orig_level) < 2):
            return False
        add_amount = total // div
        new_level = add_amount + total % div
        if total % div == 2:
            add_amount += 1
            new_level -= 2
        if can_mix_left:
            _set_water(world, x - 1, y, add_amount)
        if can_mix_right:
            _set_water(world, x + 1, y, add_amount)
        world.set_water_level(x, y, new_level)
        new_shifted = (world.water_level(x, y)
                       + ((world.water_level(x - 1, y) if can_mix_left else 0) << 4)
                       + ((world.water_level(x + 1, y) if can_mix_right else 0) << 8))
        if world.water_level(x, y) == 0:
            world.blocks[x][y] = int(Block.AIR)
            return True
        return shifted != new_shifted


def fill_bucket(engine: UpdateEngine, x: int, y: int) -> bool:
    """Scoop the water at (x, y) into a bucket.

    Partial water tops up from, or is added to, the world's reserve. Returns
    True when a full bucket of water was obtained.
    """
    world = engine.world
    level = world.water_level(x, y)
    if level < MAX_WATER_LEVEL:
        if level + world.reserved_water >= MAX_WATER_LEVEL:
            world.reserved_water -= MAX_WATER_LEVEL - level
        else:
            world.reserved_water += level
            world.blocks[x][y] = int(Block.AIR)
            engine.update_around(x, y)
            return False
    world.blocks[x][y] = int(Block.AIR)
    engine.update_around(x, y)
    return True