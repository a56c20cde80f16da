"""Seed-deterministic hex world generator for a grand-strategy map prototype."""

from hexworld.domain.countries import generate_countries
from hexworld.domain.hex_map import HexMapOptions, generate_circular_hex_map, generate_hex_map

__all__ = [
    "HexMapOptions",
    "generate_circular_hex_map",
    "generate_countries",
    "generate_hex_map",
]
