"""Procedural naming for countries and provinces."""

from __future__ import annotations

from collections.abc import Container

from hexworld.utils.rng import WorldRandom

from .enums import TerrainType

COUNTRY_PREFIXES = (
    "Nor", "Ald", "Val", "Kor", "Bel", "Mor", "Thal", "Dor", "Kal", "Ven",
    "Ash", "Lor", "Var", "Zar", "Fel", "Gal", "Hal", "Jor", "Kyr", "Mel",
    "Nex", "Pol", "Ras", "Sil", "Tel", "Uth", "Wyr", "Xan", "Yor", "Zul",
)  # fmt: skip

COUNTRY_SUFFIXES = (
    "aria", "heim", "land", "onia", "ovia", "mark", "stan", "dor", "varia", "tania",
    "donia", "burg", "moor", "vale", "reach", "garde", "ros", "thia", "wyn", "ara",
)  # fmt: skip

PROVINCE_ROOTS = (
    "Ash", "Bram", "Cal", "Dun", "Eld", "Fen", "Glen", "Har", "Ing", "Kel",
    "Lan", "Mar", "Ner", "Oak", "Pen", "Quar", "Ros", "Stan", "Tor", "Wen",
)  # fmt: skip

PROVINCE_SUFFIXES: dict[TerrainType, tuple[str, ...]] = {
    TerrainType.OCEAN: ("deep", "sound", "shoal"),
    TerrainType.COAST: ("haven", "port", "bay", "strand"),
    TerrainType.PLAINS: ("field", "ford", "ton", "mead"),
    TerrainType.FOREST: ("wood", "holt", "grove", "shaw"),
    TerrainType.MOUNTAIN: ("peak", "crag", "fell", "tor"),
    TerrainType.DESERT: ("sand", "dune", "waste"),
}


def country_name(rng: WorldRandom, taken: Container[str] = (), attempts: int = 8) -> str:
    """Prefix + suffix name, avoiding ``taken`` for up to ``attempts`` draws.

    Once the attempts run out the last draw is accepted even if it repeats.
    """
    name = ""
    for _ in range(max(1, attempts)):
        name = f"{rng.choice(COUNTRY_PREFIXES)}{rng.choice(COUNTRY_SUFFIXES)}"
        if name not in taken:
            break
    return name


def province_name(rng: WorldRandom, terrain: TerrainType) -> str:
    return f"{rng.choice(PROVINCE_ROOTS)}{rng.choice(PROVINCE_SUFFIXES[terrain])}"
