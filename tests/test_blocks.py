import random

import pytest

from blockcraft.blocks import (
    Block,
    BlockType,
    Sound,
    always_render_bright,
    block_sound,
    block_type,
    can_break,
    can_drop_item,
    casts_shadow,
    display_block,
    food_value,
    fuel_amount,
    generic_block,
    hardness,
    is_food,
    is_grass_block,
    is_item,
    is_light_source,
    is_placeable_item,
    is_sapling,
    is_sprite_block,
    is_walk_through,
    leaf,
    light_amount,
    perpetual_updates,
    sapling,
    should_render,
    survival_item,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


LEAVES = [Block.LEAVES_OAK, Block.LEAVES_JUNGLE, Block.LEAVES_SPRUCE]


@pytest.mark.parametrize("leaves", LEAVES)
def test_sapling_leaf_round_trip(leaves):
    assert leaf(sapling(leaves)) == leaves
    assert is_sapling(sapling(leaves))
    assert display_block(sapling(leaves)) == leaves


def test_non_sapling_maps_to_debug():
    assert sapling(Block.STONE) == Block.BLOCK_DEBUG
    assert leaf(Block.DIRT) == Block.BLOCK_DEBUG
    assert not is_sapling(Block.LEAVES_OAK)
    assert display_block(Block.DIRT) == Block.DIRT


def test_walk_through_and_shadow():
    assert is_walk_through(Block.AIR)
    assert is_walk_through(Block.WATER)
    assert not is_walk_through(Block.STONE)
    assert casts_shadow(Block.STONE)
    assert not casts_shadow(Block.GLASS)
    assert not casts_shadow(Block.TORCH)


def test_sprite_blocks():
    assert is_sprite_block(Block.CHEST)
    assert not is_sprite_block(Block.DOOR_OPEN_TOP)


def test_light_sources():
    assert light_amount(Block.TORCH) == 15
    assert light_amount(Block.TORCH) == light_amount(Block.GLOWSTONE)
    assert light_amount(Block.GLOWSTONE) > light_amount(Block.PUMPKIN_LIGHT) > light_amount(Block.FURNACE_LIT)
    assert light_amount(Block.STONE) == -1
    for block in Block:
        assert is_light_source(block) == (light_amount(block) > 0)


def test_block_types():
    assert block_type(Block.LADDER) is BlockType.WOOD
    assert block_type(Block.GRAVEL) is BlockType.SOIL
    assert block_type(Block.BEDROCK) is BlockType.STONE
    assert block_type(Block.SWORD_GOLD) is BlockType.SWORD
    assert block_type(Block.GLASS) is BlockType.NONE


def test_unknown_block_raises():
    with pytest.raises(ValueError):
        hardness(10_000)
    with pytest.raises(ValueError):
        block_type(-5)


def test_hardness_values():
    assert hardness(Block.STONE) == 30
    assert hardness(Block.AIR) == 0
    assert hardness(Block.DIAMOND_ORE) > hardness(Block.IRON_ORE) == hardness(Block.GOLD_ORE)
    assert hardness(Block.GOLD_ORE) > hardness(Block.COAL_ORE) > hardness(Block.STONE)
    assert hardness(Block.STONE) > hardness(Block.COBBLESTONE) > hardness(Block.SANDSTONE)
    assert hardness(Block.LOG_OAK) == hardness(Block.CHEST) == hardness(Block.SANDSTONE)
    assert hardness(Block.DIRT) == hardness(Block.GRASS) > hardness(Block.SAND)


def test_tool_speeds():
    order = [Block.PICKAXE_GOLD, Block.PICKAXE_DIAMOND, Block.PICKAXE_IRON,
             Block.PICKAXE_STONE, Block.PICKAXE_WOOD]
    speeds = [hardness(tool) for tool in order]
    assert speeds == sorted(speeds)
    assert all(speed < 0 for speed in speeds)
    assert hardness(Block.AXE_IRON) == hardness(Block.SHOVEL_IRON) == hardness(Block.PICKAXE_IRON)
    assert hardness(Block.SWORD_DIAMOND) == hardness(Block.COAL) < 0


def test_sounds():
    assert block_sound(Block.SAND) is Sound.SAND
    assert block_sound(Block.SNOW_GRASS) is Sound.SNOW
    assert block_sound(Block.GRAVEL) is Sound.GRAVEL
    assert block_sound(Block.PINK_WOOL) is Sound.CLOTH
    assert block_sound(Block.SAPLING_OAK) is Sound.GRASS
    assert block_sound(Block.DIRT) is Sound.GRASS
    assert block_sound(Block.PLANKS_WOOD) is Sound.WOOD
    assert block_sound(Block.GLASS) is Sound.STONE


def test_items_and_placeables():
    assert is_item(Block.BUCKET_EMPTY)
    assert is_placeable_item(Block.BUCKET_EMPTY)
    assert not is_item(Block.DOOR_ITEM)
    assert is_placeable_item(Block.DOOR_ITEM)
    assert not is_item(Block.STONE)


def test_render_flags():
    assert always_render_bright(Block.AIR)
    assert not always_render_bright(Block.STONE)
    assert not should_render(Block.WATER)
    assert should_render(Block.STONE)
    assert perpetual_updates(Block.FURNACE_LIT)
    assert not perpetual_updates(Block.CHEST)
    assert is_grass_block(Block.MYCELIUM)
    assert not is_grass_block(Block.DIRT)


def test_can_break():
    assert can_break(Block.BEDROCK, survival=False)
    assert not can_break(Block.BEDROCK, survival=True)
    assert not can_break(Block.AIR, survival=True)
    assert can_break(Block.STONE, survival=True)


def test_can_drop_item_requires_survival():
    assert not can_drop_item(Block.DIRT, Block.AIR, survival=False)
    assert can_drop_item(Block.DIRT, Block.AIR, survival=True)


def test_can_drop_item_stone_needs_pickaxe():
    assert not can_drop_item(Block.STONE, Block.AXE_DIAMOND, True)
    assert can_drop_item(Block.STONE, Block.PICKAXE_WOOD, True)
    assert can_drop_item(Block.COAL_ORE, Block.PICKAXE_WOOD, True)
    assert not can_drop_item(Block.IRON_ORE, Block.PICKAXE_WOOD, True)
    assert can_drop_item(Block.IRON_ORE, Block.PICKAXE_STONE, True)
    assert not can_drop_item(Block.GOLD_ORE, Block.PICKAXE_STONE, True)
    assert can_drop_item(Block.GOLD_ORE, Block.PICKAXE_IRON, True)
    assert not can_drop_item(Block.DIAMOND_ORE, Block.PICKAXE_GOLD, True)
    assert can_drop_item(Block.DIAMOND_ORE, Block.PICKAXE_IRON, True)


def test_can_drop_item_never_for_snow_and_mushroom_parts():
    for block in (Block.SNOW_TOP, Block.AIR, Block.MUSHROOM_STEM, Block.MUSHROOM_TOP):
        assert not can_drop_item(block, Block.PICKAXE_DIAMOND, True)


def test_generic_block():
    for part in (Block.DOOR_OPEN_TOP, Block.DOOR_CLOSED_BOTTOM):
        assert generic_block(part) == Block.DOOR_ITEM
    assert generic_block(Block.STONE) == Block.STONE


def test_survival_item_creative_returns_same():
    assert survival_item(Block.STONE, False, _FixedRng(0)) == Block.STONE


def test_survival_item_fixed_mappings():
    rng = _FixedRng(0)
    assert survival_item(Block.GRASS, True, rng) == Block.DIRT
    assert survival_item(Block.STONE, True, rng) == Block.COBBLESTONE
    assert survival_item(Block.COAL_ORE, True, rng) == Block.COAL
    assert survival_item(Block.BEDROCK, True, rng) == Block.AIR
    assert survival_item(Block.SNOW_TOP, True, rng) == Block.AIR
    assert survival_item(Block.DOOR_CLOSED_TOP, True, rng) == Block.DOOR_ITEM


def test_survival_item_random_drops():
    assert survival_item(Block.LEAVES_OAK, True, _FixedRng(0)) == Block.SAPLING_OAK
    assert survival_item(Block.LEAVES_OAK, True, _FixedRng(1)) == Block.AIR
    assert survival_item(Block.TALL_GRASS, True, _FixedRng(1)) == Block.SEEDS_WHEAT
    assert survival_item(Block.TALL_GRASS, True, _FixedRng(0)) == Block.AIR
    rng = random.Random(3)
    for _ in range(50):
        assert survival_item(Block.LEAVES_JUNGLE, True, rng) in (Block.AIR, Block.SAPLING_JUNGLE)


def test_food():
    assert food_value(Block.STONE) == 0
    assert food_value(Block.BEEF_COOKED) == food_value(Block.PORKCHOP_COOKED)
    assert food_value(Block.BEEF_COOKED) > food_value(Block.BEEF_RAW)
    for block in Block:
        assert is_food(block) == (food_value(block) > 0)


def test_fuel():
    assert fuel_amount(Block.COAL) == 24
    assert fuel_amount(Block.PICKAXE_WOOD) == fuel_amount(Block.AXE_WOOD)
    assert fuel_amount(Block.LOG_OAK) == fuel_amount(Block.LOG_JUNGLE)
    assert fuel_amount(Block.STONE) == 0