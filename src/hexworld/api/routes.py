"""HTTP routes for the hexworld API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel

from hexworld.api.runtime import ApiState
from hexworld.domain.enums import DevelopmentTier, Government, TerrainType
from hexworld.domain.lookup import development_tier
from hexworld.domain.models import Country, Province, Tile

router = APIRouter()

WORLD_SEED_HEADER = "X-World-Seed"


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]

GridRadiusQuery = Annotated[int | None, Query(ge=0)]
NumCountriesQuery = Annotated[int | None, Query(ge=0)]
SeedQuery = Annotated[int | None, Query()]


class TileSummary(BaseModel):
    id: str
    q: int
    r: int
    terrain: TerrainType
    elevation: int
    development: int
    supply_limit: int
    population: int
    neighbors: list[str]
    owner_tag: str | None
    controller_tag: str | None


class HexMapResponse(BaseModel):
    width: int
    height: int
    seed: float | int | str | None
    ocean_level: float
    mountain_level: float
    tile_count: int
    tiles: list[TileSummary]
    coast_tile_ids: list[str]
    land_masses: list[list[str]]


class ProvinceSummary(BaseModel):
    id: str
    hex_id: str
    name: str
    q: int
    r: int
    terrain: TerrainType
    elevation: int
    population: int
    development: int
    development_tier: DevelopmentTier
    supply_limit: int
    gdp: int


class ProvinceDetail(ProvinceSummary):
    country_id: str | None


class SeedPointModel(BaseModel):
    lat: float
    lng: float


class CountrySummary(BaseModel):
    id: str
    name: str
    color: str
    government: Government
    capital: str
    capital_province_id: str
    population: int
    gdp: int
    supply_capacity: int
    average_development: int
    hex_count: int
    seed_point: SeedPointModel
    terrain_breakdown: dict[TerrainType, int]


class CountryDetail(CountrySummary):
    hex_ids: list[str]
    territories: list[ProvinceSummary]


def _tile_dict(tile: Tile) -> dict[str, object]:
    return {
        "id": tile.id,
        "q": tile.coord.q,
        "r": tile.coord.r,
        "terrain": tile.terrain,
        "elevation": tile.elevation,
        "development": tile.development,
        "supply_limit": tile.supply_limit,
        "population": tile.population,
        "neighbors": list(tile.neighbors),
        "owner_tag": tile.owner_tag,
        "controller_tag": tile.controller_tag,
    }


def _province_dict(province: Province) -> dict[str, object]:
    return {
        "id": province.id,
        "hex_id": province.hex_id,
        "name": province.name,
        "q": province.coord.q,
        "r": province.coord.r,
        "terrain": province.terrain,
        "elevation": province.elevation,
        "population": province.population,
        "development": province.development,
        "development_tier": development_tier(province.development),
        "supply_limit": province.supply_limit,
        "gdp": province.gdp,
    }


def _country_summary_dict(country: Country) -> dict[str, object]:
    return {
        "id": country.id,
        "name": country.name,
        "color": country.color,
        "government": country.government,
        "capital": country.capital,
        "capital_province_id": country.capital_province_id,
        "population": country.population,
        "gdp": country.gdp,
        "supply_capacity": country.supply_capacity,
        "average_development": country.average_development,
        "hex_count": len(country.hex_ids),
        "seed_point": {"lat": country.seed_point.lat, "lng": country.seed_point.lng},
        "terrain_breakdown": dict(country.terrain_breakdown),
    }


def _country_detail_dict(country: Country) -> dict[str, object]:
    payload = _country_summary_dict(country)
    payload["hex_ids"] = list(country.hex_ids)
    payload["territories"] = [_province_dict(p) for p in country.territories]
    return payload


def _check_limit(name: str, value: int | None, limit: int) -> None:
    if value is not None and value > limit:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{name} must be at most {limit}",
        )


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "cached_worlds": len(state.worlds.cache),
        "default_grid_radius": state.settings.default_grid_radius,
    }


@router.get("/hexmap", response_model=HexMapResponse)
async def get_hex_map(
    state: ApiStateDep,
    width: Annotated[int | None, Query(ge=0)] = None,
    height: Annotated[int | None, Query(ge=0)] = None,
    seed: SeedQuery = None,
    ocean_level: Annotated[float | None, Query(ge=0.0, le=1.0)] = None,
    mountain_level: Annotated[float | None, Query(ge=0.0, le=1.0)] = None,
) -> HexMapResponse:
    _check_limit("width", width, state.settings.max_map_dimension)
    _check_limit("height", height, state.settings.max_map_dimension)

    view = state.worlds.hex_map(width, height, seed, ocean_level, mountain_level)
    return HexMapResponse.model_validate(
        {
            "width": view.options.width,
            "height": view.options.height,
            "seed": view.options.seed,
            "ocean_level": view.options.ocean_level,
            "mountain_level": view.options.mountain_level,
            "tile_count": len(view.tiles),
            "tiles": [_tile_dict(tile) for tile in view.tiles],
            "coast_tile_ids": view.coast_tile_ids,
            "land_masses": view.land_masses,
        }
    )


@router.get("/countries", response_model=list[CountrySummary])
async def list_countries(
    state: ApiStateDep,
    response: Response,
    grid_radius: GridRadiusQuery = None,
    num_countries: NumCountriesQuery = None,
    seed: SeedQuery = None,
) -> list[CountrySummary]:
    _check_limit("grid_radius", grid_radius, state.settings.max_grid_radius)
    countries = state.worlds.countries(grid_radius, num_countries, seed)
    world_seed = state.worlds.world_seed(grid_radius, num_countries, seed)
    response.headers[WORLD_SEED_HEADER] = str(world_seed)
    return [CountrySummary.model_validate(_country_summary_dict(c)) for c in countries]


@router.get("/countries/{country_id}", response_model=CountryDetail)
async def get_country(
    country_id: str,
    state: ApiStateDep,
    grid_radius: GridRadiusQuery = None,
    num_countries: NumCountriesQuery = None,
    seed: SeedQuery = None,
) -> CountryDetail:
    _check_limit("grid_radius", grid_radius, state.settings.max_grid_radius)
    try:
        country = state.worlds.country(country_id, grid_radius, num_countries, seed)
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="country not found"
        ) from exc
    return CountryDetail.model_validate(_country_detail_dict(country))


@router.get("/provinces/{province_id}", response_model=ProvinceDetail)
async def get_province(
    province_id: str,
    state: ApiStateDep,
    grid_radius: GridRadiusQuery = None,
    num_countries: NumCountriesQuery = None,
    seed: SeedQuery = None,
) -> ProvinceDetail:
    _check_limit("grid_radius", grid_radius, state.settings.max_grid_radius)
    try:
        resolved = state.worlds.province(province_id, grid_radius, num_countries, seed)
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="province not found"
        ) from exc
    payload = _province_dict(resolved.province)
    payload["country_id"] = resolved.country_id
    return ProvinceDetail.model_validate(payload)
