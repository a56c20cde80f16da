"""Country and province generation over a circular hex disk.

Countries are grown one at a time by randomized breadth-first flood fill from
a random start hex. Each claimed hex becomes a province with its own terrain
and statistics, and the country's figures are rolled up from its provinces.

All randomness flows through a single :class:`WorldRandom` owned by the call,
so the same ``(grid_radius, num_countries, seed)`` always yields the same
countries, hex partition and statistics.
"""

from __future__ import annotations

import logging
import math
from collections import Counter, deque
from operator import attrgetter

from hexworld.utils.hex_math import HexCoord, circular_grid, hex_neighbors, hex_to_id
from hexworld.utils.rng import DEFAULT_SEED_RANGE, Seed, WorldRandom

from . import noise
from .enums import Government, TerrainType
from .models import Country, CountryID, Province, ProvinceID, SeedPoint, TileID
from .names import country_name, province_name
from .rules_config import DEFAULT_RULES, GenerationRules
from .terrain import classify_terrain, gdp_per_capita, terrain_stats

logger = logging.getLogger(__name__)

DEFAULT_NUM_COUNTRIES = 15


def available_hexes(grid_radius: int, land_radius_ratio: float) -> dict[TileID, HexCoord]:
    """Hexes of the disk close enough to the centre to be claimed.

    Returned as an insertion-ordered mapping so iteration, and therefore
    seeded sampling, never depends on string hashing.
    """
    land_limit = grid_radius * land_radius_ratio
    return {
        TileID(hex_to_id(coord)): coord
        for coord in circular_grid(grid_radius)
        if math.hypot(coord.q, coord.r) < land_limit
    }


def grow_country(
    start: HexCoord,
    available: dict[TileID, HexCoord],
    target_size: int,
    rng: WorldRandom,
) -> list[HexCoord]:
    """Claim up to ``target_size`` connected hexes starting from ``start``.

    Claimed hexes are removed from ``available`` immediately, so no hex can
    be claimed twice within a run.
    """
    claimed: list[HexCoord] = []
    visited: set[str] = set()
    queue = deque([start])

    while queue and len(claimed) < target_size:
        coord = queue.popleft()
        hex_id = hex_to_id(coord)
        if hex_id in visited or hex_id not in available:
            continue

        visited.add(hex_id)
        del available[TileID(hex_id)]
        claimed.append(coord)

        for neighbor in rng.shuffled(hex_neighbors(coord)):
            neighbor_id = hex_to_id(neighbor)
            if neighbor_id not in visited and neighbor_id in available:
                queue.append(neighbor)

    return claimed


def synthesize_province(
    coord: HexCoord,
    grid_radius: int,
    noise_seed: float,
    rng: WorldRandom,
    rules: GenerationRules = DEFAULT_RULES,
) -> Province:
    """Build the province for one claimed hex."""
    noise_rules = rules.noise
    country_rules = rules.countries
    q, r = coord.q, coord.r

    raw_elevation = noise.fractal(q, r, noise_seed, noise_rules.elevation_octaves)
    moisture = noise.fractal(
        q, r, noise_seed + noise_rules.moisture_seed_offset, noise_rules.moisture_octaves
    )
    temperature = noise.fractal(
        q, r, noise_seed + noise_rules.temperature_seed_offset, noise_rules.temperature_octaves
    )
    falloff = noise.radial_falloff(
        math.hypot(q, r), grid_radius, noise_rules.falloff_exponent
    )
    jitter = rng.uniform(-country_rules.elevation_jitter, country_rules.elevation_jitter)
    elevation = noise.clamp01(
        raw_elevation * noise_rules.noise_weight + falloff * noise_rules.falloff_weight + jitter
    )

    terrain = classify_terrain(elevation, moisture, temperature, rules.terrain.thresholds)
    stats = terrain_stats(terrain, elevation, rules.terrain)
    gdp_factor = rng.uniform(country_rules.gdp_factor_min, country_rules.gdp_factor_max)
    gdp = math.floor(stats.population * gdp_per_capita(terrain, rules.terrain) * gdp_factor)

    hex_id = TileID(hex_to_id(coord))
    return Province(
        id=ProvinceID(f"province-{hex_id}"),
        hex_id=hex_id,
        name=province_name(rng, terrain),
        coord=coord,
        terrain=terrain,
        elevation=math.floor(elevation * 100),
        population=stats.population,
        development=stats.development,
        supply_limit=stats.supply_limit,
        gdp=gdp,
    )


def country_color(color_seed: float) -> str:
    """HSL colour; the golden-angle hue keeps consecutive countries apart."""
    hue = (color_seed * DEFAULT_RULES.countries.golden_angle) % 360
    saturation = 65 + (color_seed * 20) % 25
    lightness = 60 + (color_seed * 15) % 20
    return f"hsl({hue:.1f}, {saturation:.1f}%, {lightness:.1f}%)"


def sphere_point(u: float, v: float) -> SeedPoint:
    """Map two uniform draws to a uniformly distributed point on a sphere."""
    lat = math.degrees(math.asin(2 * u - 1))
    lng = v * 360 - 180
    return SeedPoint(lat=lat, lng=lng)


def assemble_country(
    country_id: CountryID,
    name: str,
    color: str,
    provinces: list[Province],
    government: Government,
    seed_point: SeedPoint,
) -> Country:
    """Roll provinces up into a country.

    Aggregates use land provinces only, unless the country owns nothing but
    ocean. The terrain breakdown always counts every owned hex.
    """
    land = [p for p in provinces if p.terrain is not TerrainType.OCEAN]
    territories = land or provinces
    capital = max(territories, key=attrgetter("population"))

    return Country(
        id=country_id,
        name=name,
        color=color,
        hex_ids=tuple(p.hex_id for p in provinces),
        territories=tuple(territories),
        capital=capital.hex_id,
        capital_province_id=capital.id,
        population=sum(p.population for p in territories),
        gdp=sum(p.gdp for p in territories),
        supply_capacity=sum(p.supply_limit for p in territories),
        average_development=math.floor(
            sum(p.development for p in territories) / len(territories) + 0.5
        ),
        government=government,
        seed_point=seed_point,
        terrain_breakdown=tuple(Counter(p.terrain for p in provinces).items()),
    )


def generate_countries(
    grid_radius: int,
    num_countries: int = DEFAULT_NUM_COUNTRIES,
    seed: Seed | None = None,
    rules: GenerationRules = DEFAULT_RULES,
) -> list[Country]:
    """Partition a hex disk into countries.

    Args:
        grid_radius: Radius of the circular hex grid
        num_countries: Maximum number of countries to grow
        seed: Seed for reproducible output; None picks one from entropy
        rules: Generation constants

    Returns:
        The generated countries. Empty for a non-positive radius or count;
        shorter than ``num_countries`` when land runs out first.
    """
    if grid_radius <= 0 or num_countries <= 0:
        return []

    country_rules = rules.countries
    rng = WorldRandom(seed)
    if seed is None:
        logger.info("Generating countries with random seed %s", rng.seed)
    available = available_hexes(grid_radius, country_rules.land_radius_ratio)
    if not available:
        return []

    avg_country_size = len(available) / num_countries
    noise_seed = rng.uniform(0, DEFAULT_SEED_RANGE)
    color_base = rng.random()
    taken_names: set[str] = set()
    countries: list[Country] = []

    for index in range(num_countries):
        if not available:
            break

        start_id = rng.choice(list(available))
        variation = rng.uniform(country_rules.size_variation_min, country_rules.size_variation_max)
        soft_cap = country_rules.soft_cap_factor * len(available) / (num_countries - index)
        target_size = max(
            country_rules.min_country_size,
            math.floor(min(avg_country_size * variation, soft_cap)),
        )

        claimed = grow_country(available[start_id], available, target_size, rng)
        if not claimed:  # pragma: no cover - the start hex is always available
            continue

        provinces = [
            synthesize_province(coord, grid_radius, noise_seed, rng, rules) for coord in claimed
        ]
        name = country_name(rng, taken_names, country_rules.name_attempts)
        taken_names.add(name)
        government = rng.choice(list(Government))
        seed_point = sphere_point(rng.random(), rng.random())

        countries.append(
            assemble_country(
                CountryID(f"country-{index}"),
                name,
                country_color(color_base + index),
                provinces,
                government,
                seed_point,
            )
        )

    logger.debug(
        "Generated %d/%d countries on radius %d (seed %s, %d hexes unclaimed)",
        len(countries),
        num_countries,
        grid_radius,
        rng.seed,
        len(available),
    )
    return countries
