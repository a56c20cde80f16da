"""Utility functions for the hexworld generator."""

from hexworld.utils.hex_math import (
    HexCoord,
    hex_distance,
    hex_neighbors,
    hex_to_id,
    hex_to_pixel,
    id_to_hex,
    pixel_to_hex,
)
from hexworld.utils.rng import WorldRandom, derive_seed, resolve_seed, seed_key

__all__ = [
    "HexCoord",
    "WorldRandom",
    "derive_seed",
    "hex_distance",
    "hex_neighbors",
    "hex_to_id",
    "hex_to_pixel",
    "id_to_hex",
    "pixel_to_hex",
    "resolve_seed",
    "seed_key",
]
