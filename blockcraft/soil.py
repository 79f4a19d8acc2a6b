"""Updaters for air and the soil blocks: dirt, grass, mycelium and snow."""

from __future__ import annotations

from typing import Optional

from .blocks import Block, is_grass_block, is_walk_through
from .daynight import is_day
from .updater import NO_CHANCE, SOIL_CHANCE_UPDATE, BlockUpdater, UpdateEngine
from .world import Biome

# Each entry is (offset of a candidate grass block, offset of the cell that
# must be open for grass to spread from it), relative to the dirt block.
_SPREAD_SCAN = (
    ((-1, 1), (-1, -1)),
    ((-1, 0), (-1, -1)),
    ((-1, -1), (0, -2)),
    ((1, 1), (1, -1)),
    ((1, 0), (1, -1)),
    ((1, -1), (0, -2)),
)


def _layer(world, bg: bool):
    return world.bgblocks if bg else world.blocks


def _cell(world, bg: bool, x: int, y: int) -> Optional[int]:
    if 0 <= x < world.width and 0 <= y < world.height:
        return _layer(world, bg)[x][y]
    return None


def grass_spread_id(world, x: int, y: int, bg: bool = False) -> Optional[int]:
    """Grass block that can spread onto (x, y), or None if there is none."""
    for (ax, ay), (cx, cy) in _SPREAD_SCAN:
        candidate = _cell(world, bg, x + ax, y + ay)
        if (candidate is not None and is_grass_block(candidate)
                and is_walk_through(_cell(world, bg, x + ax, y + ay - 1))
                and is_walk_through(_cell(world, bg, x + cx, y + cy))):
            return candidate
    return None


class AirUpdater(BlockUpdater):
    """Clears the data left behind in a cell once it holds air."""

    chance = NO_CHANCE

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        world = engine.world
        if bg:
            world.data[x][y] &= 0x0000FFFF
        else:
            world.data[x][y] &= 0xFFFF0000
        return False


class DirtUpdater(BlockUpdater):
    """Lets grass from neighbouring blocks grow over uncovered dirt."""

    chance = SOIL_CHANCE_UPDATE

    def chance_update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> None:
        world = engine.world
        if not bg:
            if not is_walk_through(world.blocks[x][y - 1]):
                return
            grass = grass_spread_id(world, x, y, bg)
            if grass is None:
                return
            world.blocks[x][y] = grass
            if grass == Block.SNOW_GRASS:
                world.blocks[x][y - 1] = int(Block.SNOW_TOP)
        else:
            if is_grass_block(world.blocks[x][y]):
                world.bgblocks[x][y] = world.blocks[x][y]
            if not is_walk_through(world.bgblocks[x][y - 1]):
                return
            grass = grass_spread_id(world, x, y, bg)
            if grass is None:
                return
            world.bgblocks[x][y] = grass
            if grass == Block.SNOW_GRASS and is_walk_through(world.blocks[x][y]):
                world.bgblocks[x][y - 1] = int(Block.SNOW_TOP)
        engine.update_around(x, y)


class GrassUpdater(BlockUpdater):
    """Withers covered grass, snows over it in snow biomes and grows flowers."""

    chance = SOIL_CHANCE_UPDATE

    def chance_update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> None:
        world = engine.world
        rng = engine.rng
        layer = _layer(world, bg)
        above = layer[x][y - 1]
        snowy = world.biome[x] == Biome.SNOW
        if not is_walk_through(above) or (world.brightness[x][y] <= 13 and is_day(world)):
            layer[x][y] = int(Block.DIRT)
        elif snowy and not bg and rng.randrange(10) == 0 and above == Block.AIR:
            layer[x][y] = int(Block.SNOW_GRASS)
            layer[x][y - 1] = int(Block.SNOW_TOP)
        elif (snowy and bg and rng.randrange(10) == 0
              and world.blocks[x][y - 1] == Block.SNOW_TOP):
            layer[x][y] = int(Block.SNOW_GRASS)
        above = layer[x][y - 1]
        if (not bg and rng.randrange(2) == 0 and (x ^ y) % 7 == 0
                and above in (Block.AIR, Block.TALL_GRASS)):
            flower = Block.FLOWER_RED if rng.randrange(2) else Block.FLOWER_YELLOW
            world.blocks[x][y - 1] = int(flower)


def _wither_if_covered(world, x: int, y: int, bg: bool) -> None:
    if not bg:
        if not is_walk_through(world.blocks[x][y - 1]):
            world.blocks[x][y] = int(Block.DIRT)
    elif (not is_walk_through(world.blocks[x][y - 1])
          or not is_walk_through(world.bgblocks[x][y - 1])):
        world.bgblocks[x][y] = int(Block.DIRT)


class JungleGrassUpdater(BlockUpdater):
    """Turns covered jungle grass back into dirt."""

    chance = SOIL_CHANCE_UPDATE

    def chance_update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> None:
        _wither_if_covered(engine.world, x, y, bg)


class MyceliumUpdater(BlockUpdater):
    """Grows mushrooms on mycelium and turns it to dirt when covered."""

    chance = SOIL_CHANCE_UPDATE

    def chance_update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> None:
        world = engine.world
        rng = engine.rng
        if (not bg and (x ^ y) % 7 == 2 and rng.randrange(2) == 0
                and world.blocks[x][y - 1] in (Block.AIR, Block.TALL_GRASS)):
            mushroom = Block.MUSHROOM_RED if rng.randrange(2) else Block.MUSHROOM_BROWN
            world.blocks[x][y - 1] = int(mushroom)
        _wither_if_covered(world, x, y, bg)


class SnowGrassUpdater(BlockUpdater):
    """Thaws snow grass without snow on top and grows pumpkins beside it."""

    chance = SOIL_CHANCE_UPDATE

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        world = engine.world
        if world.blocks[x][y - 1] != Block.SNOW_TOP:
            snowed = bg and world.bgblocks[x][y - 1] == Block.SNOW_TOP
            _layer(world, bg)[x][y] = int(Block.SNOW_GRASS if snowed else Block.GRASS)
        if (not bg and engine.rng.randrange(2) == 0 and (x ^ y) % 7 == 0
                and is_walk_through(world.blocks[x][y - 1])
                and world.bgblocks[x][y - 1] in (Block.AIR, Block.SNOW_TOP)):
            world.bgblocks[x][y - 1] = int(Block.PUMPKIN)
        return False


class SnowTopUpdater(BlockUpdater):
    """Removes snow that has nothing to rest on."""

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        world = engine.world
        if not bg and is_walk_through(world.blocks[x][y + 1]):
            world.blocks[x][y] = int(Block.AIR)
            if (world.bgblocks[x][y + 1] in (Block.SNOW_GRASS, Block.GRASS)
                    and world.bgblocks[x][y] == Block.AIR):
                world.bgblocks[x][y] = int(Block.SNOW_TOP)
        elif bg and (not is_walk_through(world.blocks[x][y + 1])
                     or is_walk_through(world.bgblocks[x][y + 1])):
            world.bgblocks[x][y] = int(Block.AIR)
        return False