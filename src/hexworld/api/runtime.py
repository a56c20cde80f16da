"""Runtime primitives backing the hexworld HTTP API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from hexworld.config import Settings, get_settings
from hexworld.domain.cache import WorldCache
from hexworld.domain.hex_map import HexMapOptions, coast_tiles, land_masses
from hexworld.domain.lookup import ResolvedProvince, build_province_index, get_country_by_id
from hexworld.domain.models import Country, Tile, TileID
from hexworld.utils.rng import Seed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HexMapView:
    """A generated hex map plus its derived coastline and land masses."""

    options: HexMapOptions
    tiles: list[Tile]
    coast_tile_ids: list[TileID]
    land_masses: list[list[TileID]]


class WorldService:
    """Serves generated worlds from a caller-owned cache."""

    def __init__(self, settings: Settings, cache: WorldCache | None = None) -> None:
        self._settings = settings
        if cache is None:
            cache = WorldCache(max_entries=settings.cache_max_entries)
        self._cache = cache

    @property
    def cache(self) -> WorldCache:
        return self._cache

    def hex_map(
        self,
        width: int | None = None,
        height: int | None = None,
        seed: Seed | None = None,
        ocean_level: float | None = None,
        mountain_level: float | None = None,
    ) -> HexMapView:
        """Generate (or reuse) a rectangular map, falling back to settings."""

        options = HexMapOptions(
            width=width if width is not None else self._settings.default_map_width,
            height=height if height is not None else self._settings.default_map_height,
            seed=seed if seed is not None else self._settings.default_map_seed,
        )
        if ocean_level is not None:
            options = replace(options, ocean_level=ocean_level)
        if mountain_level is not None:
            options = replace(options, mountain_level=mountain_level)

        tiles = self._cache.hex_map(options)
        return HexMapView(
            options=options,
            tiles=list(tiles.values()),
            coast_tile_ids=[tile.id for tile in coast_tiles(tiles)],
            land_masses=[[tile.id for tile in mass] for mass in land_masses(tiles)],
        )

    def countries(
        self,
        grid_radius: int | None = None,
        num_countries: int | None = None,
        seed: Seed | None = None,
    ) -> tuple[Country, ...]:
        radius, count = self._world_params(grid_radius, num_countries)
        return self._cache.countries(radius, count, seed)

    def world_seed(
        self,
        grid_radius: int | None = None,
        num_countries: int | None = None,
        seed: Seed | None = None,
    ) -> Seed:
        """Seed that reproduces the world served for these parameters."""

        radius, count = self._world_params(grid_radius, num_countries)
        return self._cache.world_seed(radius, count, seed)

    def _world_params(
        self, grid_radius: int | None, num_countries: int | None
    ) -> tuple[int, int]:
        radius = grid_radius if grid_radius is not None else self._settings.default_grid_radius
        count = num_countries if num_countries is not None else self._settings.default_num_countries
        return radius, count

    def country(
        self,
        country_id: str,
        grid_radius: int | None = None,
        num_countries: int | None = None,
        seed: Seed | None = None,
    ) -> Country:
        """Return a single country or raise ``KeyError``."""

        country = get_country_by_id(self.countries(grid_radius, num_countries, seed), country_id)
        if country is None:
            raise KeyError(country_id)
        return country

    def province(
        self,
        province_id: str,
        grid_radius: int | None = None,
        num_countries: int | None = None,
        seed: Seed | None = None,
    ) -> ResolvedProvince:
        """Return a province with its owner or raise ``KeyError``."""

        index = build_province_index(self.countries(grid_radius, num_countries, seed))
        resolved = index.get(province_id)
        if resolved is None:
            raise KeyError(province_id)
        return resolved


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.worlds = WorldService(self.settings)

    async def shutdown(self) -> None:
        logger.info("Dropping %d cached worlds", len(self.worlds.cache))
        self.worlds.cache.clear()


def build_state() -> ApiState:
    """Factory used by the application lifespan."""

    return ApiState()
