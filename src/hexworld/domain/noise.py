"""Deterministic sine/cosine noise field.

Not a Perlin or simplex implementation: a cheap smooth field that is a pure
function of its inputs, which is all the terrain generator needs.
"""

from __future__ import annotations

import math

from .rules_config import DEFAULT_RULES


def sample(x: float, y: float, seed: float, frequency: float = 1.0) -> float:
    """Single noise sample normalised to [0, 1].

    The raw combination spans [-2, 2]: one product term in [-1, 1] plus two
    half-amplitude terms.
    """
    value = (
        math.sin(x * frequency + seed) * math.cos(y * frequency + seed)
        + math.sin(x * frequency * 2 + seed * 1.5) * 0.5
        + math.cos(y * frequency * 2 + seed * 2) * 0.5
    )
    return (value + 2) / 4


def fractal(
    x: float,
    y: float,
    seed: float,
    octaves: int = 4,
    base_frequency: float = DEFAULT_RULES.noise.base_frequency,
) -> float:
    """Multi-octave noise in [0, 1].

    Octave ``i`` uses seed ``seed + i``, doubles the frequency and halves the
    amplitude of the previous one. The sum is divided by the total amplitude.
    """
    value = 0.0
    amplitude = 1.0
    frequency = base_frequency
    max_value = 0.0

    for i in range(octaves):
        value += sample(x, y, seed + i, frequency) * amplitude
        max_value += amplitude
        amplitude *= 0.5
        frequency *= 2

    if max_value == 0.0:
        return 0.0
    return value / max_value


def radial_falloff(distance: float, max_distance: float, exponent: float = 1.5) -> float:
    """Island-shaping term: 1 at the centre, 0 at ``max_distance``.

    Negative beyond ``max_distance``; callers clamp the final elevation.
    """
    if max_distance <= 0:
        return 1.0
    return 1 - (distance / max_distance) ** exponent


def clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))
