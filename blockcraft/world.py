"""The block grid of a world, with its chests and furnaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .blocks import Block
from .furnaces import furnace_id, pack_furnace_id
from .items import Furnace, InvBlock


class Biome(IntEnum):
    """Surface biome of a world column."""

    PLAINS = 0
    JUNGLE = 1
    SNOW = 2
    DESERT = 3
    MUSHROOM = 4
    OCEAN = 5


class StorageFullError(RuntimeError):
    """Raised when no chest or furnace slot is free."""


@dataclass(frozen=True)
class Drop:
    """An item stack dropped into the world at a block position."""

    x: int
    y: int
    block: int
    amount: int


class World:
    """Foreground and background block grids plus per-cell data words."""

    def __init__(self, width: int = 512, height: int = 128, *, max_chests: int = 64,
                 chest_slots: int = 16, max_furnaces: int = 64) -> None:
        self.width = width
        self.height = height
        self.blocks = [[int(Block.AIR)] * height for _ in range(width)]
        self.bgblocks = [[int(Block.AIR)] * height for _ in range(width)]
        self.data = [[0] * height for _ in range(width)]
        self.brightness = [[15] * height for _ in range(width)]
        self.biome = [Biome.PLAINS] * width
        self.time_in_world = 0
        self.sun_brightness = 15
        self.reserved_water = 0
        self.chest_slots = chest_slots
        self.chests = [[InvBlock() for _ in range(chest_slots)] for _ in range(max_chests)]
        self.chest_in_use = [False] * max_chests
        self.furnaces = [Furnace() for _ in range(max_furnaces)]
        self.drops: list[Drop] = []

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the world")

    def block(self, x: int, y: int, bg: bool = False) -> int:
        """Block at a position on the given layer."""
        self._check(x, y)
        return (self.bgblocks if bg else self.blocks)[x][y]

    def set_block(self, x: int, y: int, bg: bool, value: int) -> None:
        """Place a block at a position on the given layer."""
        self._check(x, y)
        (self.bgblocks if bg else self.blocks)[x][y] = int(value)

    def water_level(self, x: int, y: int) -> int:
        """Water level stored in a cell's data word."""
        return self.data[x][y] & 0xF

    def set_water_level(self, x: int, y: int, level: int) -> None:
        """Store a water level in a cell's data word."""
        self.data[x][y] = (self.data[x][y] & 0xFFFF0000) | level

    def drop_item(self, x: int, y: int, block: int, amount: int = 1) -> None:
        """Drop a stack at a position; empty stacks are not dropped."""
        if block == Block.AIR or amount <= 0:
            return
        self.drops.append(Drop(x, y, int(block), amount))

    def _disperse(self, x: int, y: int, block: int, amount: int) -> None:
        quarter = amount // 4
        for _ in range(3):
            self.drop_item(x, y, block, quarter)
        self.drop_item(x, y, block, amount - 3 * quarter)

    def create_chest(self, x: int, y: int, bg: bool = False) -> int:
        """Place a chest and return its index."""
        index = next((i for i, used in enumerate(self.chest_in_use) if not used), None)
        if index is None:
            raise StorageFullError("No more chests available")
        self.set_block(x, y, bg, Block.CHEST)
        if bg:
            self.data[x][y] = (self.data[x][y] & 0x0000FFFF) | (index << 16)
        else:
            self.data[x][y] = (self.data[x][y] & 0xFFFF0000) | index
        self.chest_in_use[index] = True
        return index

    def chest_id(self, x: int, y: int, bg: bool = False) -> int:
        """Index of the chest stored at a position on the given layer."""
        word = self.data[x][y]
        if bg:
            return (word & 0xFFFF0000) >> 16
        return word & 0x0000FFFF

    def destroy_chest(self, x: int, y: int, bg: bool = False,
                      survival: bool = False) -> None:
        """Remove a chest; in survival its contents and the chest are dropped."""
        if self.block(x, y, bg) != Block.CHEST:
            return
        index = self.chest_id(x, y, bg)
        self.set_block(x, y, bg, Block.AIR)
        for slot in self.chests[index]:
            if survival:
                self._disperse(x, y, slot.id, slot.amount)
            slot.id = slot.amount = 0
        if survival:
            self.drop_item(x, y, Block.CHEST)
        self.chest_in_use[index] = False

    def create_furnace(self, x: int, y: int, bg: bool = False) -> int:
        """Place a fresh furnace and return its index."""
        index = next((i for i, f in enumerate(self.furnaces) if not f.in_use), None)
        if index is None:
            raise StorageFullError("No more furnaces available")
        self.furnaces[index] = Furnace(in_use=True)
        self.set_block(x, y, bg, Block.FURNACE)
        self.data[x][y] = pack_furnace_id(self.data[x][y], index, bg)
        return index

    def furnace_at(self, x: int, y: int, bg: bool = False) -> Furnace:
        """Furnace whose index is stored at a position on the given layer."""
        index = furnace_id(self.data[x][y], bg)
        if index >= len(self.furnaces):
            raise LookupError(f"no furnace with index {index}")
        return self.furnaces[index]

    def destroy_furnace(self, x: int, y: int, bg: bool = False) -> None:
        """Remove a furnace, dropping its slots and the furnace itself."""
        furnace = self.furnace_at(x, y, bg)
        for stack in (furnace.source, furnace.fuel, furnace.result):
            self._disperse(x, y, stack.id, stack.amount)
        furnace.in_use = False
        self.set_block(x, y, bg, Block.AIR)
        self._disperse(x, y, Block.FURNACE, 1)

    def dump_storage(self) -> str:
        """Serialise every chest slot and every furnace in save order."""
        parts = [slot.dumps() for chest in self.chests for slot in chest]
        parts += [furnace.dumps() for furnace in self.furnaces]
        return "".join(parts)

    def load_storage(self, tokens: Iterable[str]) -> None:
        """Read chests and furnaces from a token stream written by dump_storage."""
        it = iter(tokens)
        for chest in self.chests:
            for i in range(len(chest)):
                chest[i] = InvBlock.parse(it)
        for i in range(len(self.furnaces)):
            self.furnaces[i] = Furnace.parse(it)