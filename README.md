# blockcraft

The simulation core of a 2D block-building game, as a plain Python library. It uses only
the standard library and does no drawing, sound output or input handling.

## Modules

- `blockcraft.blocks`: the `Block` identifiers, `BlockType` categories and `Sound` kinds,
  with the rules for each block: `hardness`, `light_amount`, `is_walk_through`,
  `food_value`, `fuel_amount`, `can_break`, `can_drop_item`, `survival_item` (what a
  broken block yields in survival mode) and `block_sound`, among others.
- `blockcraft.world`: `World`, a grid with foreground and background layers, a packed
  data word per cell, a `Biome` per column, chests and furnaces. `create_chest` and
  `create_furnace` raise `StorageFullError` when every slot is taken. Items that are
  dropped are recorded in `World.drops`. `World.dump_storage` and `World.load_storage`
  save and restore the contents of chests and furnaces.
- `blockcraft.updater`: `UpdateEngine`, a queue of pending block updates, and the
  `BlockUpdater` base class. You give the engine a mapping from block id to updater.
  Call `UpdateEngine.step()` once per frame. Call `UpdateEngine.update_around(x, y)`
  after you change a block.
- `blockcraft.soil`: updaters for air, dirt (grass spreads onto it), grass, jungle grass,
  mycelium, snow grass and snow tops.
- `blockcraft.water`: `WaterUpdater` makes water fall and level out sideways.
  `is_water_at` tests a pixel, `push_water_from` moves water into the neighbouring
  cells, and `fill_bucket` scoops water, using `World.reserved_water` for partial levels.
- `blockcraft.machines`: `FurnaceUpdater` and `LitFurnaceUpdater` light furnaces, burn
  fuel, smelt items and add `FireParticle`s to `UpdateEngine.particles`.
- `blockcraft.furnaces`: the smelting `RECIPES`, `fuel_needed`, `create_result`,
  `convert_item_to_fuel`, and packing a furnace index into a data word.
- `blockcraft.items`: inventory stacks (`InvBlock`) and `Furnace` state, each with
  `dumps`/`parse` in a whitespace-separated text format.
- `blockcraft.config`: `Config` holds key bindings (`Action` to `Key`), option switches
  (`Property`), volumes, language and texture pack. `Config.dumps` and `Config.loads`
  write and read the text settings file.
- `blockcraft.daynight`: `DayCycle` steps a world through a 120-step day.
  `sun_brightness`, `sky_colors` and `is_day` give the state at a point in the day.
- `blockcraft.messages`: `MessageLog`, a three-line log whose oldest line clears on a
  timer, plus `sec_to_fps` and `max_string_length`.
- `blockcraft.collision`: `sprites_collide` tests whether two axis-aligned boxes overlap.
- `blockcraft.wav` and `blockcraft.adpcm`: `parse_wave` reads the header of a mono IMA
  ADPCM wave file into a `WaveInfo`, or raises `WaveFormatError`. `AdpcmDecoder` and
  `decode` turn the sample data into 16-bit samples.

## Install

```
pip install .
pip install ".[test]"   # with pytest, for running the tests
```

## Examples

Running water in a world:

```python
import random

from blockcraft.blocks import Block
from blockcraft.soil import AirUpdater
from blockcraft.updater import UpdateEngine
from blockcraft.water import MAX_WATER_LEVEL, WaterUpdater
from blockcraft.world import World

world = World(width=32, height=32)
engine = UpdateEngine(
    world,
    {Block.WATER: WaterUpdater(), Block.AIR: AirUpdater()},
    random.Random(1),
)

world.set_block(10, 5, False, Block.WATER)
world.set_water_level(10, 5, MAX_WATER_LEVEL)
engine.update_around(10, 5)
for _ in range(600):
    engine.step()
```

Settings:

```python
from blockcraft.config import Action, Config, Key

config = Config()
config.set_key(Action.JUMP, Key.B)
text = config.dumps()
assert Config.loads(text).get_key(Action.JUMP) is Key.B
```

Audio:

```python
from blockcraft.adpcm import AdpcmDecoder
from blockcraft.wav import parse_wave

with open("sound.wav", "rb") as stream:
    info = parse_wave(stream)
    samples = list(AdpcmDecoder(stream, info.block_align))
```

## What it does not do

- It has no command-line program, no rendering and no player, mob or inventory handling.
- It does not generate terrain and does not save or load whole worlds. Only chest and
  furnace contents (`World.dump_storage`) and settings (`Config.dumps`) have a text form.
- There is no ready-made table of updaters. Build the mapping you pass to `UpdateEngine`
  from the updater classes in `soil`, `water` and `machines`. Cacti, doors, ladders,
  flowers, leaves and saplings have no updaters.
- It has no fixed-point number type and no creative-mode block pages.

## Tests

```
pytest
```