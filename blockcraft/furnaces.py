"""Furnace recipes, smelting steps and the packing of furnace ids into block data."""

from __future__ import annotations

from dataclasses import dataclass

from .blocks import Block, fuel_amount
from .items import Furnace, InvBlock


@dataclass(frozen=True)
class FurnaceRecipe:
    """Smelting ``needed`` into ``result`` costs ``fuel`` units of fuel."""

    fuel: int
    result: Block
    needed: Block


RECIPES: tuple[FurnaceRecipe, ...] = (
    FurnaceRecipe(1, Block.GLASS, Block.SAND),
    FurnaceRecipe(2, Block.BEEF_COOKED, Block.BEEF_RAW),
    FurnaceRecipe(2, Block.CHICKEN_COOKED, Block.CHICKEN_RAW),
    FurnaceRecipe(2, Block.PORKCHOP_COOKED, Block.PORKCHOP_RAW),
    FurnaceRecipe(3, Block.DIAMOND, Block.DIAMOND_ORE),
    FurnaceRecipe(2, Block.INGOT_GOLD, Block.GOLD_ORE),
    FurnaceRecipe(2, Block.INGOT_IRON, Block.IRON_ORE),
    FurnaceRecipe(4, Block.COAL, Block.LOG_BIRCH),
    FurnaceRecipe(4, Block.COAL, Block.LOG_JUNGLE),
    FurnaceRecipe(4, Block.COAL, Block.LOG_OAK),
    FurnaceRecipe(4, Block.COAL, Block.LOG_SPRUCE),
    FurnaceRecipe(1, Block.STONE, Block.COBBLESTONE),
)

_FG_MASK = 0x000000FF
_BG_MASK = 0x00FF0000
_BG_SHIFT = 16


def fuel_needed(furnace: Furnace) -> int:
    """Fuel needed to smelt the current source into the current result, or 0."""
    for recipe in RECIPES:
        if recipe.needed == furnace.source.id and (
                recipe.result == furnace.result.id or furnace.result.id == Block.AIR):
            return recipe.fuel
    return 0


def create_result(furnace: Furnace) -> None:
    """Smelt one source item into the result slot, if the recipe allows it."""
    recipe = next((r for r in RECIPES if r.needed == furnace.source.id), None)
    if recipe is None:
        return
    if furnace.result.id != Block.AIR and recipe.result != furnace.result.id:
        return
    if furnace.result.id == Block.AIR:
        furnace.result = InvBlock(int(recipe.result), 1)
    else:
        furnace.result.amount += 1
    furnace.source.amount -= 1
    if furnace.source.amount < 1:
        furnace.source.id = Block.AIR


def convert_item_to_fuel(furnace: Furnace) -> None:
    """Burn one item from the fuel slot when the furnace has run out of fuel."""
    new_fuel = fuel_amount(furnace.fuel.id)
    if new_fuel > 0 and furnace.fuel_amount < 1:
        furnace.fuel_amount = new_fuel
        furnace.fuel.amount -= 1
        if furnace.fuel.amount < 1:
            furnace.fuel.id = Block.AIR


def furnace_id(data: int, bg: bool) -> int:
    """Furnace index stored in a cell's data word for the given layer."""
    if bg:
        return (data & _BG_MASK) >> _BG_SHIFT
    return data & _FG_MASK


def pack_furnace_id(data: int, furnace_id: int, bg: bool) -> int:
    """Data word with ``furnace_id`` stored for the given layer."""
    if bg:
        return (data & 0x0000FFFF) | (furnace_id << _BG_SHIFT)
    return (data & 0xFFFF0000) | furnace_id