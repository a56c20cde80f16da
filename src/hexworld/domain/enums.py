"""Enumerations used across the generator."""

from __future__ import annotations

from enum import StrEnum


class TerrainType(StrEnum):
    """Biomes produced by the terrain classifier."""

    OCEAN = "ocean"
    COAST = "coast"
    PLAINS = "plains"
    FOREST = "forest"
    MOUNTAIN = "mountain"
    DESERT = "desert"


class Government(StrEnum):
    """Government labels assigned to generated countries."""

    CONSTITUTIONAL_MONARCHY = "Constitutional Monarchy"
    REPUBLIC = "Republic"
    EMPIRE = "Empire"
    FEDERATION = "Federation"
    PRINCIPALITY = "Principality"
    KINGDOM = "Kingdom"
    THEOCRACY = "Theocracy"
    DEMOCRACY = "Democracy"


class DevelopmentTier(StrEnum):
    """Coarse development buckets shown in province summaries."""

    NASCENT = "nascent"
    GROWING = "growing"
    ESTABLISHED = "established"
    METROPOLIS = "metropolis"
