"""Simulation core of a 2D block-building game: blocks, world, block updaters, water, furnaces, settings and ADPCM audio."""

__version__ = "0.4.1"