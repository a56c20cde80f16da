"""Grid terrain generator.

Builds a complete hex map in two passes over a precomputed coordinate set:

1. Per tile: sample elevation, moisture and temperature noise, shape the
   elevation with a radial falloff so land gathers towards the centre,
   classify the terrain and derive its base statistics.
2. Per tile: link neighbors that exist in the generated set.

Also exposes two read-only queries over a finished map: coastal land tiles
and connected land masses.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from hexworld.utils.hex_math import (
    HexCoord,
    circular_grid,
    hex_neighbors,
    hex_to_id,
    rectangular_grid,
)
from hexworld.utils.rng import Seed, resolve_seed

from . import noise
from .enums import TerrainType
from .models import Tile, TileID
from .rules_config import DEFAULT_RULES, GenerationRules
from .terrain import classify_terrain, terrain_stats

logger = logging.getLogger(__name__)

NEUTRAL_TAG = "neutral"


@dataclass(frozen=True, slots=True)
class HexMapOptions:
    """Parameters of the rectangular generator."""

    width: int
    height: int
    seed: Seed | None = None
    ocean_level: float = DEFAULT_RULES.terrain.thresholds.ocean_level
    mountain_level: float = DEFAULT_RULES.terrain.thresholds.mountain_level


def _numeric_seed(seed: Seed | None) -> float:
    resolved = resolve_seed(seed)
    if isinstance(resolved, str):
        # Noise needs a number; fold text seeds into the default seed range.
        return float(sum(ord(ch) * (i + 1) for i, ch in enumerate(resolved)) % 10_000)
    return float(resolved)


def _build_tiles(
    coords: Iterable[HexCoord],
    seed: float,
    center: tuple[float, float],
    max_distance: float,
    rules: GenerationRules,
) -> dict[TileID, Tile]:
    noise_rules = rules.noise
    thresholds = rules.terrain.thresholds
    cq, cr = center
    tiles: dict[TileID, Tile] = {}

    # First pass: elevation, terrain and stats
    for coord in coords:
        q, r = coord.q, coord.r
        elevation = noise.fractal(q, r, seed, noise_rules.elevation_octaves)
        moisture = noise.fractal(
            q, r, seed + noise_rules.moisture_seed_offset, noise_rules.moisture_octaves
        )
        temperature = noise.fractal(
            q, r, seed + noise_rules.temperature_seed_offset, noise_rules.temperature_octaves
        )

        distance = math.hypot(q - cq, r - cr)
        falloff = noise.radial_falloff(distance, max_distance, noise_rules.falloff_exponent)
        adjusted = noise.clamp01(
            elevation * noise_rules.noise_weight + falloff * noise_rules.falloff_weight
        )

        terrain = classify_terrain(adjusted, moisture, temperature, thresholds)
        stats = terrain_stats(terrain, adjusted, rules.terrain)
        tag = None if terrain is TerrainType.OCEAN else NEUTRAL_TAG

        tile_id = TileID(hex_to_id(coord))
        tiles[tile_id] = Tile(
            coord=coord,
            id=tile_id,
            terrain=terrain,
            elevation=math.floor(adjusted * 100),
            development=stats.development,
            supply_limit=stats.supply_limit,
            population=stats.population,
            owner_tag=tag,
            controller_tag=tag,
        )

    # Second pass: neighbor relationships
    for tile_id, tile in list(tiles.items()):
        neighbors = tuple(
            TileID(neighbor_id)
            for neighbor_id in map(hex_to_id, hex_neighbors(tile.coord))
            if neighbor_id in tiles
        )
        tiles[tile_id] = replace(tile, neighbors=neighbors)

    return tiles


def _rules_with_levels(
    rules: GenerationRules, ocean_level: float, mountain_level: float
) -> GenerationRules:
    thresholds = replace(
        rules.terrain.thresholds, ocean_level=ocean_level, mountain_level=mountain_level
    )
    return replace(rules, terrain=replace(rules.terrain, thresholds=thresholds))


def generate_hex_map(
    options: HexMapOptions, rules: GenerationRules = DEFAULT_RULES
) -> dict[TileID, Tile]:
    """Generate a rectangular hex map with procedural terrain.

    Args:
        options: Map size, optional seed and terrain levels
        rules: Generation constants

    Returns:
        Tiles keyed by id, in row-major generation order. Empty when either
        dimension is not positive.
    """
    if options.width <= 0 or options.height <= 0:
        return {}

    seed = _numeric_seed(options.seed)
    rules = _rules_with_levels(rules, options.ocean_level, options.mountain_level)
    center = (options.width / 2, options.height / 2)
    max_distance = math.hypot(options.width / 2, options.height / 2)

    tiles = _build_tiles(
        rectangular_grid(options.width, options.height), seed, center, max_distance, rules
    )
    logger.debug(
        "Generated %dx%d hex map (%d tiles) with seed %s",
        options.width,
        options.height,
        len(tiles),
        seed,
    )
    return tiles


def generate_circular_hex_map(
    radius: int,
    seed: Seed | None = None,
    ocean_level: float = DEFAULT_RULES.terrain.thresholds.ocean_level,
    mountain_level: float = DEFAULT_RULES.terrain.thresholds.mountain_level,
    rules: GenerationRules = DEFAULT_RULES,
) -> dict[TileID, Tile]:
    """Generate a hex disk of ``radius`` centred on the origin.

    Empty when the radius is negative.
    """
    if radius < 0:
        return {}

    numeric_seed = _numeric_seed(seed)
    rules = _rules_with_levels(rules, ocean_level, mountain_level)
    tiles = _build_tiles(
        circular_grid(radius), numeric_seed, (0.0, 0.0), radius * math.sqrt(2), rules
    )
    logger.debug(
        "Generated circular hex map radius=%d (%d tiles) with seed %s",
        radius,
        len(tiles),
        numeric_seed,
    )
    return tiles


def coast_tiles(tiles: Mapping[TileID, Tile]) -> list[Tile]:
    """Land tiles adjacent to at least one ocean tile."""
    coast: list[Tile] = []
    for tile in tiles.values():
        if not tile.is_land:
            continue
        if any(
            (neighbor := tiles.get(neighbor_id)) is not None and not neighbor.is_land
            for neighbor_id in tile.neighbors
        ):
            coast.append(tile)
    return coast


def land_masses(tiles: Mapping[TileID, Tile]) -> list[list[Tile]]:
    """Connected components of non-ocean tiles (continents and islands).

    Breadth-first flood fill; every tile is visited at most once across all
    components.
    """
    visited: set[TileID] = set()
    masses: list[list[Tile]] = []

    for start in tiles.values():
        if not start.is_land or start.id in visited:
            continue

        mass: list[Tile] = []
        queue = deque([start])
        visited.add(start.id)
        while queue:
            current = queue.popleft()
            mass.append(current)
            for neighbor_id in current.neighbors:
                if neighbor_id in visited:
                    continue
                neighbor = tiles.get(neighbor_id)
                if neighbor is None or not neighbor.is_land:
                    continue
                visited.add(neighbor_id)
                queue.append(neighbor)
        masses.append(mass)

    return masses
