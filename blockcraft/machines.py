"""Updaters that run furnaces, lighting them and burning their fuel."""

from __future__ import annotations

from dataclasses import dataclass

from .blocks import Block
from .furnaces import convert_item_to_fuel, create_result, fuel_needed
from .messages import FPS, sec_to_fps
from .updater import BlockUpdater, UpdateEngine

FIRE_PERIOD = 120
BURN_INTERVAL = sec_to_fps(4)


@dataclass
class FireParticle:
    """A flame rising from a lit furnace."""

    x: float
    y: float
    vx: float
    vy: float
    ax: float
    ay: float
    lifetime: int


class FurnaceUpdater(BlockUpdater):
    """Lights an idle furnace once it has fuel."""

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        world = engine.world
        if world.furnace_at(x, y, bg).fuel_amount > 0:
            world.set_block(x, y, bg, Block.FURNACE_LIT)
        engine.update_single(x, y, bg, FPS)
        return False


class LitFurnaceUpdater(BlockUpdater):
    """Burns fuel, smelts items and emits flames from a lit furnace."""

    def update(self, engine: UpdateEngine, x: int, y: int, bg: bool) -> bool:
        world = engine.world
        furnace = world.furnace_at(x, y, bg)
        if not bg:
            data = world.data[x][y]
            timer = (((data & 0xFF00) >> 8) + 1) & 0xFF
            if timer == FIRE_PERIOD:
                furnace.particle_x = engine.rng.randrange(12)
                timer = 0
                engine.particles.append(FireParticle(
                    float(x * 16 + furnace.particle_x), float(y * 16 + 10),
                    (engine.rng.randrange(3) - 1) / 32, -0.05, 0.0, -0.008,
                    FIRE_PERIOD))
            world.data[x][y] = (data & 0xFFFF00FF) | (timer << 8)

        furnace.time_till_fuel_burn -= 1
        if furnace.time_till_fuel_burn < 0:
            furnace.time_till_fuel_burn = BURN_INTERVAL
            furnace.fuel_till_complete -= 1
            if furnace.fuel_till_complete < 0:
                create_result(furnace)
                furnace.fuel_till_complete = fuel_needed(furnace)
            furnace.fuel_amount -= 1
            if furnace.fuel_amount < 0:
                if fuel_needed(furnace) > 0:
                    convert_item_to_fuel(furnace)
                if furnace.fuel_amount < 0:
                    world.set_block(x, y, bg, Block.FURNACE)
        engine.update_single(x, y, bg)
        return False