"""Declarative generation constants for the hexworld domain layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import TerrainType


@dataclass(frozen=True, slots=True)
class TerrainThresholds:
    """Elevation/moisture/temperature cut-offs used by the classifier."""

    ocean_level: float = 0.35
    coast_level: float = 0.42
    mountain_level: float = 0.75
    desert_max_moisture: float = 0.3
    desert_min_temperature: float = 0.6
    forest_min_moisture: float = 0.55


@dataclass(frozen=True, slots=True)
class TerrainStatRule:
    """Base value plus elevation-scaled bonus for each derived statistic."""

    development_base: int
    development_bonus: int
    supply_base: int
    supply_bonus: int
    population_base: int
    population_bonus: int
    gdp_per_capita: int


def _default_stat_rules() -> dict[TerrainType, TerrainStatRule]:
    return {
        TerrainType.OCEAN: TerrainStatRule(0, 0, 0, 0, 0, 0, 0),
        TerrainType.COAST: TerrainStatRule(45, 20, 15, 10, 500_000, 300_000, 15_000),
        TerrainType.PLAINS: TerrainStatRule(50, 30, 20, 15, 600_000, 400_000, 12_000),
        TerrainType.FOREST: TerrainStatRule(40, 20, 12, 8, 300_000, 200_000, 8_000),
        TerrainType.MOUNTAIN: TerrainStatRule(25, 15, 8, 5, 100_000, 150_000, 6_000),
        TerrainType.DESERT: TerrainStatRule(20, 10, 6, 4, 50_000, 100_000, 5_000),
    }


@dataclass(frozen=True, slots=True)
class TerrainRules:
    """Classifier thresholds and the per-terrain statistics table."""

    thresholds: TerrainThresholds = field(default_factory=TerrainThresholds)
    stats: dict[TerrainType, TerrainStatRule] = field(default_factory=_default_stat_rules)


@dataclass(frozen=True, slots=True)
class NoiseRules:
    """Fractal noise shaping shared by both generators."""

    base_frequency: float = 0.05
    elevation_octaves: int = 5
    moisture_octaves: int = 4
    temperature_octaves: int = 3
    moisture_seed_offset: int = 1000
    temperature_seed_offset: int = 2000
    falloff_exponent: float = 1.5
    noise_weight: float = 0.7
    falloff_weight: float = 0.3


@dataclass(frozen=True, slots=True)
class CountryRules:
    """Country growth and province synthesis parameters."""

    land_radius_ratio: float = 0.85
    size_variation_min: float = 0.75
    size_variation_max: float = 2.2
    soft_cap_factor: float = 1.1
    min_country_size: int = 3
    elevation_jitter: float = 0.05
    gdp_factor_min: float = 0.9
    gdp_factor_max: float = 1.15
    golden_angle: float = 137.508
    name_attempts: int = 8


@dataclass(frozen=True, slots=True)
class GenerationRules:
    """Aggregate of every rule group."""

    terrain: TerrainRules = field(default_factory=TerrainRules)
    noise: NoiseRules = field(default_factory=NoiseRules)
    countries: CountryRules = field(default_factory=CountryRules)


DEFAULT_RULES = GenerationRules()
