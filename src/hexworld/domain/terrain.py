"""Terrain classification and derived base statistics.

Pure functions mapping continuous environmental fields to a discrete biome,
and a biome plus elevation to population, development and supply baselines.
"""

from __future__ import annotations

import math

from .enums import TerrainType
from .models import TerrainStats
from .rules_config import DEFAULT_RULES, TerrainRules, TerrainThresholds


def classify_terrain(
    elevation: float,
    moisture: float,
    temperature: float,
    thresholds: TerrainThresholds = DEFAULT_RULES.terrain.thresholds,
) -> TerrainType:
    """Classify a cell; the first matching rule wins.

    Order: ocean, coast, mountain, desert, forest, plains. Elevation rules
    come first so very low or very high cells ignore moisture and temperature.
    """
    if elevation < thresholds.ocean_level:
        return TerrainType.OCEAN
    if elevation < thresholds.coast_level:
        return TerrainType.COAST
    if elevation > thresholds.mountain_level:
        return TerrainType.MOUNTAIN
    if (
        moisture < thresholds.desert_max_moisture
        and temperature > thresholds.desert_min_temperature
    ):
        return TerrainType.DESERT
    if moisture > thresholds.forest_min_moisture:
        return TerrainType.FOREST
    return TerrainType.PLAINS


def terrain_stats(
    terrain: TerrainType,
    elevation: float,
    rules: TerrainRules = DEFAULT_RULES.terrain,
) -> TerrainStats:
    """Base statistics for ``terrain`` at ``elevation`` in [0, 1].

    Each value is ``base + floor(elevation * bonus)``. Ocean rules are all
    zero, so ocean never carries population, development or supply.
    """
    rule = rules.stats[terrain]
    return TerrainStats(
        development=rule.development_base + math.floor(elevation * rule.development_bonus),
        supply_limit=rule.supply_base + math.floor(elevation * rule.supply_bonus),
        population=rule.population_base + math.floor(elevation * rule.population_bonus),
    )


def gdp_per_capita(terrain: TerrainType, rules: TerrainRules = DEFAULT_RULES.terrain) -> int:
    return rules.stats[terrain].gdp_per_capita
