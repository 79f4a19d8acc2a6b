"""Block identifiers and the static properties of every block and item."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Protocol


class Block(IntEnum):
    """Identifiers of every block and item in the game."""

    AIR = 0
    STONE = 1
    DIRT = 2
    GRASS = 3
    TORCH = 4
    PUMPKIN_LIGHT = 5
    GLOWSTONE = 6
    LOG_OAK = 7
    LOG_SPRUCE = 8
    LOG_BIRCH = 9
    LOG_JUNGLE = 10
    PLANKS_WOOD = 11
    LEAVES_OAK = 12
    LEAVES_SPRUCE = 13
    LEAVES_JUNGLE = 14
    GLASS = 15
    CACTUS = 16
    SAND = 17
    BEDROCK = 18
    SNOW_TOP = 19
    SNOW_GRASS = 20
    COAL_ORE = 21
    IRON_ORE = 22
    GOLD_ORE = 23
    DIAMOND_ORE = 24
    REDSTONE_ORE = 25
    TNT = 26
    SANDSTONE = 27
    FLOWER_RED = 28
    FLOWER_YELLOW = 29
    IRON_BLOCK = 30
    GOLD_BLOCK = 31
    DIAMOND_BLOCK = 32
    BLACK_WOOL = 33
    RED_WOOL = 34
    DARK_GREEN_WOOL = 35
    BROWN_WOOL = 36
    BLUE_WOOL = 37
    PURPLE_WOOL = 38
    CYAN_WOOL = 39
    GRAY_WOOL = 40
    WHITE_WOOL = 41
    DARK_GRAY_WOOL = 42
    PINK_WOOL = 43
    LIGHT_GREEN_WOOL = 44
    YELLOW_WOOL = 45
    LIGHT_BLUE_WOOL = 46
    MAGENTA_WOOL = 47
    ORANGE_WOOL = 48
    LADDER = 49
    GRASS_JUNGLE = 50
    TALL_GRASS = 51
    SHRUB = 52
    PORKCHOP_RAW = 53
    BEEF_RAW = 54
    LEATHER = 55
    PICKAXE_WOOD = 56
    PICKAXE_STONE = 57
    PICKAXE_IRON = 58
    PICKAXE_GOLD = 59
    PICKAXE_DIAMOND = 60
    COAL = 61
    INGOT_IRON = 62
    INGOT_GOLD = 63
    DIAMOND = 64
    STICK = 65
    FLESH = 66
    BEEF_COOKED = 67
    PORKCHOP_COOKED = 68
    CHICKEN_RAW = 69
    CHICKEN_COOKED = 70
    COBBLESTONE = 71
    FURNACE = 72
    FURNACE_LIT = 73
    CRAFTING_TABLE = 74
    CHEST = 75
    SHOVEL_WOOD = 76
    SHOVEL_STONE = 77
    SHOVEL_IRON = 78
    SHOVEL_GOLD = 79
    SHOVEL_DIAMOND = 80
    AXE_WOOD = 81
    AXE_STONE = 82
    AXE_IRON = 83
    AXE_GOLD = 84
    AXE_DIAMOND = 85
    SWORD_WOOD = 86
    SWORD_STONE = 87
    SWORD_IRON = 88
    SWORD_GOLD = 89
    SWORD_DIAMOND = 90
    GRAVEL = 91
    MUSHROOM_BROWN = 92
    MUSHROOM_RED = 93
    MUSHROOM_STEM = 94
    MUSHROOM_TOP = 95
    PUMPKIN = 96
    SEEDS_PUMPKIN = 97
    SEEDS_WHEAT = 98
    MYCELIUM = 99
    SAPLING_OAK = 100
    SAPLING_SPRUCE = 101
    SAPLING_JUNGLE = 102
    DOOR_ITEM = 103
    DOOR_OPEN_TOP = 104
    DOOR_OPEN_BOTTOM = 105
    DOOR_CLOSED_TOP = 106
    DOOR_CLOSED_BOTTOM = 107
    BUCKET_WATER = 108
    BUCKET_EMPTY = 109
    WATER = 110
    BLOCK_DEBUG = 111


class BlockType(IntEnum):
    """Category of a block or tool; tools are negative, blocks positive."""

    SWORD = -4
    AXE = -3
    SHOVEL = -2
    PICKAXE = -1
    NONE = 0
    WOOD = 1
    SOIL = 2
    STONE = 3


class Sound(Enum):
    """Sound played when a block is placed or broken."""

    STONE = "stone"
    SAND = "sand"
    SNOW = "snow"
    GRAVEL = "gravel"
    CLOTH = "cloth"
    GRASS = "grass"
    WOOD = "wood"


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


B = Block

_WALK_THROUGH = frozenset({
    B.AIR, B.FLOWER_YELLOW, B.FLOWER_RED, B.SNOW_TOP, B.TORCH, B.LADDER,
    B.SHRUB, B.TALL_GRASS, B.MUSHROOM_BROWN, B.MUSHROOM_RED, B.SAPLING_JUNGLE,
    B.SAPLING_OAK, B.SAPLING_SPRUCE, B.DOOR_OPEN_TOP, B.DOOR_OPEN_BOTTOM,
    B.WATER,
})

_SPRITE_BLOCKS = frozenset({
    B.TORCH, B.GLASS, B.SNOW_TOP, B.LADDER, B.MUSHROOM_BROWN, B.MUSHROOM_RED,
    B.SHRUB, B.TALL_GRASS, B.FLOWER_RED, B.FLOWER_YELLOW, B.SAPLING_JUNGLE,
    B.SAPLING_OAK, B.SAPLING_SPRUCE, B.CHEST, B.DOOR_CLOSED_BOTTOM,
    B.DOOR_CLOSED_TOP,
})

_LEAF_TO_SAPLING = {
    B.LEAVES_OAK: B.SAPLING_OAK,
    B.LEAVES_JUNGLE: B.SAPLING_JUNGLE,
    B.LEAVES_SPRUCE: B.SAPLING_SPRUCE,
}
_SAPLING_TO_LEAF = {s: l for l, s in _LEAF_TO_SAPLING.items()}

_WOOLS = frozenset({
    B.BLACK_WOOL, B.RED_WOOL, B.DARK_GREEN_WOOL, B.BROWN_WOOL, B.BLUE_WOOL,
    B.PURPLE_WOOL, B.CYAN_WOOL, B.GRAY_WOOL, B.WHITE_WOOL, B.DARK_GRAY_WOOL,
    B.PINK_WOOL, B.LIGHT_GREEN_WOOL, B.YELLOW_WOOL, B.LIGHT_BLUE_WOOL,
    B.MAGENTA_WOOL, B.ORANGE_WOOL,
})

_GRASS_SOUND = frozenset({
    B.LEAVES_JUNGLE, B.LEAVES_OAK, B.LEAVES_SPRUCE,
    B.SAPLING_JUNGLE, B.SAPLING_OAK, B.SAPLING_SPRUCE,
})

_ITEMS = frozenset({
    B.PORKCHOP_RAW, B.BEEF_RAW, B.LEATHER, B.PICKAXE_WOOD, B.PICKAXE_STONE,
    B.PICKAXE_IRON, B.PICKAXE_GOLD, B.PICKAXE_DIAMOND, B.COAL, B.INGOT_IRON,
    B.INGOT_GOLD, B.DIAMOND, B.STICK, B.FLESH, B.BEEF_COOKED,
    B.PORKCHOP_COOKED, B.CHICKEN_RAW, B.CHICKEN_COOKED, B.SHOVEL_DIAMOND,
    B.SHOVEL_WOOD, B.SHOVEL_STONE, B.SHOVEL_IRON, B.SHOVEL_GOLD,
    B.AXE_DIAMOND, B.AXE_WOOD, B.AXE_STONE, B.AXE_IRON, B.AXE_GOLD,
    B.SWORD_DIAMOND, B.SWORD_WOOD, B.SWORD_STONE, B.SWORD_IRON, B.SWORD_GOLD,
    B.SEEDS_PUMPKIN, B.SEEDS_WHEAT, B.BUCKET_EMPTY,
})

_PLACEABLE_ITEMS = frozenset({B.DOOR_ITEM, B.BUCKET_EMPTY, B.BUCKET_WATER})

_ALWAYS_BRIGHT = frozenset({
    B.AIR, B.LOG_OAK, B.LOG_SPRUCE, B.LOG_BIRCH, B.LEAVES_OAK,
    B.FLOWER_YELLOW, B.FLOWER_RED, B.CACTUS, B.TORCH, B.LEAVES_SPRUCE,
    B.GLASS, B.SHRUB, B.TALL_GRASS, B.MUSHROOM_RED, B.MUSHROOM_BROWN,
    B.PUMPKIN, B.SAPLING_JUNGLE, B.SAPLING_OAK, B.SAPLING_SPRUCE,
})

_GRASS_BLOCKS = frozenset({B.SNOW_GRASS, B.GRASS, B.MYCELIUM, B.GRASS_JUNGLE})

_LIGHT = {B.TORCH: 15, B.PUMPKIN_LIGHT: 13, B.GLOWSTONE: 15, B.FURNACE_LIT: 12}

_FOOD = {
    B.PORKCHOP_RAW: 3, B.BEEF_RAW: 3, B.FLESH: 4, B.BEEF_COOKED: 8,
    B.PORKCHOP_COOKED: 8, B.CHICKEN_RAW: 2, B.CHICKEN_COOKED: 6,
}

_FUEL = {
    B.COAL: 24, B.STICK: 1, B.PLANKS_WOOD: 4,
    B.LOG_BIRCH: 16, B.LOG_OAK: 16, B.LOG_SPRUCE: 16, B.LOG_JUNGLE: 16,
    B.PICKAXE_WOOD: 4 * 3 + 2, B.AXE_WOOD: 4 * 3 + 2,
    B.SWORD_WOOD: 2 * 3 + 1, B.DOOR_ITEM: 4 * 6, B.LADDER: 8,
}

_PERPETUAL = frozenset({B.FURNACE, B.FURNACE_LIT})

_DOOR_PARTS = frozenset({
    B.DOOR_OPEN_TOP, B.DOOR_OPEN_BOTTOM, B.DOOR_CLOSED_TOP, B.DOOR_CLOSED_BOTTOM,
})


def _build_types() -> dict[Block, BlockType]:
    groups = {
        BlockType.PICKAXE: (B.PICKAXE_STONE, B.PICKAXE_IRON, B.PICKAXE_GOLD,
                            B.PICKAXE_WOOD, B.PICKAXE_DIAMOND),
        BlockType.SHOVEL: (B.SHOVEL_STONE, B.SHOVEL_IRON, B.SHOVEL_GOLD,
                           B.SHOVEL_WOOD, B.SHOVEL_DIAMOND),
        BlockType.AXE: (B.AXE_STONE, B.AXE_IRON, B.AXE_GOLD, B.AXE_WOOD,
                        B.AXE_DIAMOND),
        BlockType.SWORD: (B.SWORD_STONE, B.SWORD_IRON, B.SWORD_GOLD,
                          B.SWORD_WOOD, B.SWORD_DIAMOND),
        BlockType.WOOD: (B.LOG_OAK, B.LOG_JUNGLE, B.LOG_BIRCH, B.LOG_SPRUCE,
                         B.PLANKS_WOOD, B.CHEST, B.LADDER),
        BlockType.SOIL: (B.GRASS_JUNGLE, B.GRASS, B.DIRT, B.SAND, B.GRAVEL,
                         B.SNOW_GRASS, B.MYCELIUM),
        BlockType.STONE: (B.STONE, B.SANDSTONE, B.COBBLESTONE, B.COAL_ORE,
                          B.IRON_ORE, B.GOLD_ORE, B.DIAMOND_ORE, B.BEDROCK),
    }
    types = {block: BlockType.NONE for block in Block}
    for kind, members in groups.items():
        for block in members:
            types[block] = kind
    return types


_TYPES = _build_types()


def _build_hardness() -> dict[Block, int]:
    table = {B.AIR: 0}
    for block in Block:
        if block is B.AIR:
            continue
        table[block] = 20 if _TYPES[block] is BlockType.WOOD else 1
        if block in _ITEMS:
            table[block] = -1
    tool_speeds = {
        -20: (B.PICKAXE_GOLD, B.AXE_GOLD, B.SHOVEL_GOLD),
        -17: (B.PICKAXE_DIAMOND, B.AXE_DIAMOND, B.SHOVEL_DIAMOND),
        -12: (B.PICKAXE_IRON, B.AXE_IRON, B.SHOVEL_IRON),
        -8: (B.PICKAXE_STONE, B.AXE_STONE, B.SHOVEL_STONE),
        -4: (B.PICKAXE_WOOD, B.AXE_WOOD, B.SHOVEL_WOOD),
    }
    for value, tools in tool_speeds.items():
        for tool in tools:
            table[tool] = value
    for block in (B.GRASS_JUNGLE, B.GRASS, B.DIRT, B.SNOW_GRASS, B.MYCELIUM):
        table[block] = 2
    table.update({
        B.STONE: 30, B.COBBLESTONE: 25, B.SANDSTONE: 20, B.COAL_ORE: 35,
        B.IRON_ORE: 40, B.GOLD_ORE: 40, B.DIAMOND_ORE: 45, B.CHEST: 20,
    })
    return table


_HARDNESS = _build_hardness()


def _as_block(block: int) -> Block:
    return Block(block)


def is_walk_through(block: int) -> bool:
    """True if entities can pass through the block."""
    return block in _WALK_THROUGH


def is_sprite_block(block: int) -> bool:
    """True if the block is drawn as a partly transparent sprite."""
    return block in _SPRITE_BLOCKS


def sapling(leaf_id: int) -> Block:
    """Sapling dropped by a kind of leaves, or BLOCK_DEBUG if none."""
    return _LEAF_TO_SAPLING.get(leaf_id, B.BLOCK_DEBUG)


def leaf(sapling_id: int) -> Block:
    """Leaves grown from a kind of sapling, or BLOCK_DEBUG if none."""
    return _SAPLING_TO_LEAF.get(sapling_id, B.BLOCK_DEBUG)


def is_sapling(block: int) -> bool:
    """True if the block is a sapling."""
    return leaf(block) is not B.BLOCK_DEBUG


def block_type(block: int) -> BlockType:
    """Category of a block or tool."""
    return _TYPES[_as_block(block)]


def hardness(block: int) -> int:
    """Mining hardness of a block; negative values are tool speeds."""
    return _HARDNESS[_as_block(block)]


def block_sound(block: int) -> Sound:
    """Sound associated with a block."""
    if block == B.SAND:
        return Sound.SAND
    if block == B.SNOW_GRASS:
        return Sound.SNOW
    if block == B.GRAVEL:
        return Sound.GRAVEL
    if block in _WOOLS:
        return Sound.CLOTH
    if block in _GRASS_SOUND:
        return Sound.GRASS
    kind = block_type(block)
    if kind is BlockType.SOIL:
        return Sound.GRASS
    if kind is BlockType.WOOD:
        return Sound.WOOD
    return Sound.STONE


def is_item(block: int) -> bool:
    """True if the identifier names an item rather than a placeable block."""
    return block in _ITEMS


def is_placeable_item(block: int) -> bool:
    """True for items that place something in the world when used."""
    return block in _PLACEABLE_ITEMS


def always_render_bright(block: int) -> bool:
    """True if the block is drawn at full brightness regardless of light."""
    return block in _ALWAYS_BRIGHT


def casts_shadow(block: int) -> bool:
    """True if the block blocks light."""
    return not is_walk_through(block) and not is_sprite_block(block)


def is_grass_block(block: int) -> bool:
    """True for the grass-covered soil blocks."""
    return block in _GRASS_BLOCKS


def is_light_source(block: int) -> bool:
    """True if the block emits light."""
    return block in _LIGHT


def light_amount(block: int) -> int:
    """Light emitted by the block, or -1 if it emits none."""
    return _LIGHT.get(block, -1)


def can_break(block: int, survival: bool) -> bool:
    """True if the block can be broken in the given game mode."""
    if not survival:
        return True
    return block not in (B.BEDROCK, B.AIR)


def can_drop_item(block: int, hand: int, survival: bool) -> bool:
    """True if mining ``block`` while holding ``hand`` yields an item."""
    if not survival:
        return False
    if block_type(block) is BlockType.STONE:
        if block_type(hand) is not BlockType.PICKAXE:
            return False
        if block == B.IRON_ORE and hand == B.PICKAXE_WOOD:
            return False
        if block == B.GOLD_ORE and hand in (B.PICKAXE_WOOD, B.PICKAXE_STONE):
            return False
        if block == B.DIAMOND_ORE and hand not in (B.PICKAXE_DIAMOND, B.PICKAXE_IRON):
            return False
    return block not in (B.SNOW_TOP, B.AIR, B.MUSHROOM_STEM, B.MUSHROOM_TOP)


def generic_block(block: int) -> Block:
    """Inventory form of a block; door parts become the door item."""
    if block in _DOOR_PARTS:
        return B.DOOR_ITEM
    return _as_block(block)


def survival_item(block: int, survival: bool, rng: _Rng) -> Block:
    """Item obtained from breaking ``block``; AIR means nothing is obtained."""
    if not survival:
        return _as_block(block)
    if block in (B.GRASS, B.GRASS_JUNGLE, B.SNOW_GRASS, B.MYCELIUM):
        return B.DIRT
    if block == B.TALL_GRASS:
        return B.SEEDS_WHEAT if rng.randrange(3) == 1 else B.AIR
    if block in (B.LEAVES_OAK, B.LEAVES_SPRUCE):
        return B.AIR if rng.randrange(3) != 0 else sapling(block)
    if block == B.LEAVES_JUNGLE:
        return B.AIR if rng.randrange(5) != 0 else sapling(block)
    if block in (B.BEDROCK, B.SNOW_TOP, B.MUSHROOM_STEM, B.MUSHROOM_TOP):
        return B.AIR
    if block == B.COAL_ORE:
        return B.COAL
    if block == B.STONE:
        return B.COBBLESTONE
    return generic_block(block)


def display_block(block: int) -> Block:
    """Block whose graphic represents ``block``; saplings show their leaves."""
    if is_sapling(block):
        return leaf(block)
    return _as_block(block)


def should_render(block: int) -> bool:
    """False for blocks drawn by a separate renderer, such as water."""
    return block != B.WATER


def food_value(block: int) -> int:
    """Hunger restored by eating the item, 0 if it is not food."""
    return _FOOD.get(block, 0)


def is_food(block: int) -> bool:
    """True if the item can be eaten."""
    return block in _FOOD


def fuel_amount(block: int) -> int:
    """Fuel units the item provides in a furnace, 0 if it does not burn."""
    return _FUEL.get(block, 0)


def perpetual_updates(block: int) -> bool:
    """True for blocks that keep scheduling their own updates."""
    return block in _PERPETUAL