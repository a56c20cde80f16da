"""Read-only lookups over generated worlds."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .enums import DevelopmentTier
from .models import Country, Province, Tile

# Highest threshold first
DEVELOPMENT_THRESHOLDS: tuple[tuple[int, DevelopmentTier], ...] = (
    (75, DevelopmentTier.METROPOLIS),
    (50, DevelopmentTier.ESTABLISHED),
    (30, DevelopmentTier.GROWING),
)


@dataclass(frozen=True, slots=True)
class ResolvedProvince:
    """A province together with the id of the country owning it."""

    province: Province
    country_id: str | None


@dataclass(frozen=True, slots=True)
class TileSummary:
    tile: Tile
    owner: Country | None
    controller: Country | None


def development_tier(development: int) -> DevelopmentTier:
    for threshold, tier in DEVELOPMENT_THRESHOLDS:
        if development >= threshold:
            return tier
    return DevelopmentTier.NASCENT


def build_province_index(countries: Iterable[Country]) -> dict[str, ResolvedProvince]:
    """Index every territory of every country by province id."""
    index: dict[str, ResolvedProvince] = {}
    for country in countries:
        for province in country.territories:
            index[province.id] = ResolvedProvince(province=province, country_id=country.id)
    return index


def get_country_by_id(countries: Iterable[Country], country_id: str | None) -> Country | None:
    if not country_id:
        return None
    return next((country for country in countries if country.id == country_id), None)


def get_province_by_id(
    index: Mapping[str, ResolvedProvince], province_id: str | None
) -> ResolvedProvince | None:
    if not province_id:
        return None
    return index.get(province_id)


def tile_summary(
    tiles: Mapping[str, Tile],
    tile_id: str | None,
    countries: Iterable[Country] = (),
) -> TileSummary | None:
    """Tile plus its owner and controller, resolved by tag against ``countries``.

    Tags that match no country (such as the initial ``"neutral"``) resolve to
    ``None``.
    """
    if not tile_id:
        return None
    tile = tiles.get(tile_id)
    if tile is None:
        return None
    countries = list(countries)
    return TileSummary(
        tile=tile,
        owner=get_country_by_id(countries, tile.owner_tag),
        controller=get_country_by_id(countries, tile.controller_tag),
    )
