"""Caller-owned memoisation of generated worlds.

A :class:`WorldCache` replaces module-level caches: whoever creates it owns
its lifecycle, and entries are keyed strictly by generation parameters so
runs with different parameters never share results. Seeds are keyed by
:func:`~hexworld.utils.rng.seed_key`, so ``1`` and ``1.0`` stay apart.
Cached values are tuples of frozen country snapshots; hex maps are returned
as read-only mappings of frozen tiles.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from hexworld.utils.rng import Seed, resolve_seed, seed_key

from .countries import DEFAULT_NUM_COUNTRIES, generate_countries
from .hex_map import HexMapOptions, generate_hex_map
from .models import Country, Tile, TileID

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

CountryKey = tuple[int, int, str | None]
HexMapKey = tuple[HexMapOptions, str | None]


class _BoundedStore(Generic[K, V]):
    """Insertion-ordered store that drops its oldest entry when full."""

    def __init__(self, max_entries: int | None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[K, V] = OrderedDict()

    def get(self, key: K) -> V | None:
        return self._entries.get(key)

    def put(self, key: K, value: V) -> None:
        self._entries[key] = value
        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cached world %s", evicted)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class WorldCache:
    """Memoises generated countries and hex maps by their parameters.

    A ``None`` seed is resolved to a concrete random seed once per radius and
    country count. Later calls with the same parameters get that same world
    back, and :meth:`world_seed` reports the seed so the world can be
    regenerated elsewhere. Invalidating the countries forgets those seeds.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self._countries: _BoundedStore[CountryKey, tuple[Country, ...]] = _BoundedStore(
            max_entries
        )
        self._hex_maps: _BoundedStore[HexMapKey, Mapping[TileID, Tile]] = _BoundedStore(
            max_entries
        )
        self._random_seeds: dict[tuple[int, int], Seed] = {}

    def countries(
        self,
        grid_radius: int,
        num_countries: int = DEFAULT_NUM_COUNTRIES,
        seed: Seed | None = None,
    ) -> tuple[Country, ...]:
        seed = self.world_seed(grid_radius, num_countries, seed)
        key: CountryKey = (grid_radius, num_countries, seed_key(seed))
        cached = self._countries.get(key)
        if cached is None:
            cached = tuple(generate_countries(grid_radius, num_countries, seed))
            self._countries.put(key, cached)
            logger.debug("Cached %d countries for %s", len(cached), key)
        return cached

    def world_seed(
        self,
        grid_radius: int,
        num_countries: int = DEFAULT_NUM_COUNTRIES,
        seed: Seed | None = None,
    ) -> Seed:
        """Concrete seed behind a countries request, resolving ``None`` once."""
        if seed is not None:
            return seed
        params = (grid_radius, num_countries)
        if params not in self._random_seeds:
            self._random_seeds[params] = resolve_seed(None)
            logger.info(
                "Drew random seed %s for radius %d with %d countries",
                self._random_seeds[params],
                grid_radius,
                num_countries,
            )
        return self._random_seeds[params]

    def hex_map(self, options: HexMapOptions) -> Mapping[TileID, Tile]:
        key: HexMapKey = (options, seed_key(options.seed))
        cached = self._hex_maps.get(key)
        if cached is None:
            cached = MappingProxyType(generate_hex_map(options))
            self._hex_maps.put(key, cached)
            logger.debug("Cached hex map for %s", options)
        return cached

    def invalidate_countries(self) -> None:
        self._countries.clear()
        self._random_seeds.clear()

    def invalidate_hex_maps(self) -> None:
        self._hex_maps.clear()

    def clear(self) -> None:
        self.invalidate_countries()
        self.invalidate_hex_maps()

    def __len__(self) -> int:
        return len(self._countries) + len(self._hex_maps)
