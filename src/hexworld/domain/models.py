"""Dataclasses describing the generator's output.

Presentation layers receive these as plain read-only data: every model is a
frozen snapshot and its collections are tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

from hexworld.utils.hex_math import HexCoord

from .enums import Government, TerrainType

# --- Strongly typed identifiers -------------------------------------------------

TileID = NewType("TileID", str)
ProvinceID = NewType("ProvinceID", str)
CountryID = NewType("CountryID", str)


@dataclass(frozen=True, slots=True)
class TerrainStats:
    """Derived base statistics for a terrain class at a given elevation."""

    development: int
    supply_limit: int
    population: int


@dataclass(frozen=True, slots=True)
class Tile:
    """One cell of a generated hex map."""

    coord: HexCoord
    id: TileID
    terrain: TerrainType
    elevation: int
    development: int
    supply_limit: int
    population: int
    neighbors: tuple[TileID, ...] = ()
    owner_tag: str | None = None
    controller_tag: str | None = None

    @property
    def is_land(self) -> bool:
        return self.terrain is not TerrainType.OCEAN


@dataclass(frozen=True, slots=True)
class Province:
    """Settlement unit synthesised from a single claimed hex."""

    id: ProvinceID
    hex_id: TileID
    name: str
    coord: HexCoord
    terrain: TerrainType
    elevation: int
    population: int
    development: int
    supply_limit: int
    gdp: int


@dataclass(frozen=True, slots=True)
class SeedPoint:
    """Point on the unit sphere used for globe placement."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class Country:
    """Aggregate over a contiguous set of provinces."""

    id: CountryID
    name: str
    color: str
    hex_ids: tuple[TileID, ...]
    territories: tuple[Province, ...]
    capital: TileID
    capital_province_id: ProvinceID
    population: int
    gdp: int
    supply_capacity: int
    average_development: int
    government: Government
    seed_point: SeedPoint
    terrain_breakdown: tuple[tuple[TerrainType, int], ...]
