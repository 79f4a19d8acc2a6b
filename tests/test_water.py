import random

from blockcraft.blocks import Block
from blockcraft.updater import UpdateEngine
from blockcraft.water import (
    MAX_WATER_LEVEL,
    WaterUpdater,
    fill_bucket,
    is_water_at,
    push_water_from,
)
from blockcraft.world import World


def make_world():
    return World(width=8, height=8, max_chests=1, chest_slots=1, max_furnaces=1)


def make_engine(world):
    return UpdateEngine(world, {Block.WATER: WaterUpdater()}, rng=random.Random(1))


def put_water(world, x, y, level):
    world.set_block(x, y, False, Block.WATER)
    world.set_water_level(x, y, level)


def test_full_water_block_is_water_everywhere():
    world = make_world()
    put_water(world, 1, 1, MAX_WATER_LEVEL)
    assert all(is_water_at(world, px, py)
               for px in range(16, 32) for py in range(16, 32))
    assert not is_water_at(world, 0, 0)


def test_partial_water_only_fills_lower_part():
    world = make_world()
    put_water(world, 1, 1, MAX_WATER_LEVEL // 2)
    assert not is_water_at(world, 16, 16)
    assert is_water_at(world, 16, 31)
    assert not is_water_at(world, 16, 16 + 7)
    assert is_water_at(world, 16, 16 + 8)


def test_water_falls_into_air():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 2, 2, 5)
    assert WaterUpdater().update(engine, 2, 2, False) is True
    assert world.blocks[2][2] == Block.AIR
    assert world.blocks[2][3] == Block.WATER
    assert world.water_level(2, 3) == 5


def test_water_falls_through_plants():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 2, 2, 5)
    world.set_block(2, 3, False, Block.FLOWER_RED)
    assert WaterUpdater().update(engine, 2, 2, False) is True
    assert world.blocks[2][3] == Block.WATER
    assert world.water_level(2, 3) == 5


def test_water_tops_up_water_below_and_conserves_volume():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 2, 2, 8)
    put_water(world, 2, 3, 8)
    assert WaterUpdater().update(engine, 2, 2, False) is True
    assert world.water_level(2, 3) == MAX_WATER_LEVEL
    assert world.water_level(2, 2) + world.water_level(2, 3) == 16
    assert world.blocks[2][2] == Block.WATER


def test_water_spreads_sideways_conserving_volume():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 3, 2, MAX_WATER_LEVEL)
    world.set_block(3, 3, False, Block.STONE)
    assert WaterUpdater().update(engine, 3, 2, False) is True
    cells = [(2, 2), (3, 2), (4, 2)]
    assert all(world.blocks[x][y] == Block.WATER for x, y in cells)
    assert sum(world.water_level(x, y) for x, y in cells) == MAX_WATER_LEVEL


def test_too_little_water_stays_put():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 3, 2, 1)
    world.set_block(3, 3, False, Block.STONE)
    assert WaterUpdater().update(engine, 3, 2, False) is False
    assert world.water_level(3, 2) == 1
    assert world.blocks[2][2] == Block.AIR


def test_background_water_moves_to_foreground():
    world = make_world()
    engine = make_engine(world)
    world.set_block(2, 2, True, Block.WATER)
    assert WaterUpdater().update(engine, 2, 2, True) is False
    assert world.blocks[2][2] == Block.WATER
    assert world.bgblocks[2][2] == Block.AIR


def test_fill_bucket_from_full_water():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 2, 2, MAX_WATER_LEVEL)
    assert fill_bucket(engine, 2, 2) is True
    assert world.blocks[2][2] == Block.AIR
    assert world.reserved_water == 0


def test_fill_bucket_from_partial_water_goes_to_reserve():
    world = make_world()
    engine = make_engine(world)
    put_water(world, 2, 2, 4)
    assert fill_bucket(engine, 2, 2) is False
    assert world.reserved_water == 4
    assert world.blocks[2][2] == Block.AIR


def test_fill_bucket_uses_reserve():
    world = make_world()
    engine = make_engine(world)
    world.reserved_water = 10
    put_water(world, 2, 2, 4)
    assert fill_bucket(engine, 2, 2) is True
    assert world.reserved_water == 2


def test_push_water_into_open_sides():
    world = make_world()
    put_water(world, 3, 3, MAX_WATER_LEVEL)
    assert push_water_from(world, 3, 3) == 0
    assert world.blocks[2][3] == Block.WATER
    assert world.blocks[4][3] == Block.WATER
    assert world.water_level(2, 3) == world.water_level(4, 3)


def test_push_water_when_enclosed_keeps_everything():
    world = make_world()
    put_water(world, 3, 3, MAX_WATER_LEVEL)
    for x, y in ((2, 3), (4, 3), (3, 2)):
        world.set_block(x, y, False, Block.STONE)
    assert push_water_from(world, 3, 3) == MAX_WATER_LEVEL