import pytest

from blockcraft.blocks import Block
from blockcraft.items import InvBlock
from blockcraft.world import StorageFullError, World


def small_world():
    return World(8, 8, max_chests=2, chest_slots=3, max_furnaces=2)


def test_set_and_get_block_layers():
    world = small_world()
    world.set_block(2, 3, False, Block.DIRT)
    world.set_block(2, 3, True, Block.STONE)
    assert world.block(2, 3) == Block.DIRT
    assert world.block(2, 3, True) == Block.STONE


def test_block_out_of_bounds_raises():
    world = small_world()
    with pytest.raises(IndexError):
        world.block(-1, 0)
    with pytest.raises(IndexError):
        world.set_block(0, 8, False, Block.DIRT)


def test_water_level_keeps_background_bits():
    world = small_world()
    world.data[1][1] = 0x00050000
    world.set_water_level(1, 1, 7)
    assert world.water_level(1, 1) == 7
    assert world.data[1][1] >> 16 == 5


def test_create_chest_assigns_ids_and_fills_up():
    world = small_world()
    first = world.create_chest(1, 1)
    second = world.create_chest(2, 2, bg=True)
    assert world.block(1, 1) == Block.CHEST
    assert world.block(2, 2, True) == Block.CHEST
    assert world.chest_id(1, 1) == first
    assert world.chest_id(2, 2, True) == second
    assert first != second
    with pytest.raises(StorageFullError):
        world.create_chest(3, 3)


def test_chests_on_both_layers_share_a_cell():
    world = small_world()
    fg = world.create_chest(4, 4)
    bg = world.create_chest(4, 4, bg=True)
    assert world.chest_id(4, 4) == fg
    assert world.chest_id(4, 4, True) == bg


def test_destroy_chest_in_survival_drops_contents():
    world = small_world()
    index = world.create_chest(1, 1)
    world.chests[index][0] = InvBlock(Block.DIRT, 10)
    world.destroy_chest(1, 1, survival=True)
    dirt = sum(d.amount for d in world.drops if d.block == Block.DIRT)
    chests = [d for d in world.drops if d.block == Block.CHEST]
    assert dirt == 10
    assert len(chests) == 1
    assert world.block(1, 1) == Block.AIR
    assert world.chest_in_use[index] is False
    assert world.chests[index][0] == InvBlock(0, 0)


def test_destroy_chest_in_creative_drops_nothing():
    world = small_world()
    index = world.create_chest(1, 1)
    world.chests[index][1] = InvBlock(Block.SAND, 4)
    world.destroy_chest(1, 1)
    assert world.drops == []
    assert world.chests[index][1] == InvBlock(0, 0)


def test_destroy_chest_ignores_other_blocks():
    world = small_world()
    world.set_block(1, 1, False, Block.DIRT)
    world.destroy_chest(1, 1, survival=True)
    assert world.block(1, 1) == Block.DIRT


def test_furnace_lifecycle():
    world = small_world()
    index = world.create_furnace(3, 3, bg=True)
    assert world.block(3, 3, True) == Block.FURNACE
    furnace = world.furnace_at(3, 3, True)
    assert furnace is world.furnaces[index]
    assert furnace.in_use
    furnace.source = InvBlock(Block.SAND, 5)
    world.destroy_furnace(3, 3, True)
    assert not furnace.in_use
    assert world.block(3, 3, True) == Block.AIR
    assert sum(d.amount for d in world.drops if d.block == Block.SAND) == 5
    assert sum(d.amount for d in world.drops if d.block == Block.FURNACE) == 1


def test_furnaces_fill_up():
    world = small_world()
    world.create_furnace(0, 0)
    world.create_furnace(1, 0)
    with pytest.raises(StorageFullError):
        world.create_furnace(2, 0)


def test_storage_round_trip():
    world = small_world()
    world.chests[1][2] = InvBlock(Block.COAL, 7)
    world.create_furnace(0, 0)
    world.furnaces[0].fuel = InvBlock(Block.STICK, 3)
    world.furnaces[0].fuel_amount = 4
    copy = small_world()
    copy.load_storage(world.dump_storage().split())
    assert copy.chests == world.chests
    assert copy.furnaces == world.furnaces


def test_load_storage_truncated_raises():
    world = small_world()
    with pytest.raises(ValueError):
        world.load_storage(["1", "2"])