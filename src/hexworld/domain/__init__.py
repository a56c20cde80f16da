"""Domain layer of the hexworld generator.

This package hosts the seed-deterministic world generator. It exposes:

* Dataclasses describing tiles, provinces and countries (see :mod:`models`).
* Enumerations used across the generator (see :mod:`enums`).
* Tunable generation constants (see :mod:`rules_config`).
* Pure generation functions: noise, terrain classification, the hex map
  generator and the country generator.
* A caller-owned :class:`~hexworld.domain.cache.WorldCache` and read-only
  lookups for presentation layers.
"""

from . import (
    cache,
    countries,
    enums,
    hex_map,
    lookup,
    models,
    names,
    noise,
    rules_config,
    terrain,
)

__all__ = [
    "cache",
    "countries",
    "enums",
    "hex_map",
    "lookup",
    "models",
    "names",
    "noise",
    "rules_config",
    "terrain",
]
