"""Catfish Dash: an arcade chase with a combo multiplier and persistent upgrades."""

__version__ = "0.1.0"
