"""Unit tests for the sine/cosine noise field."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexworld.domain.noise import clamp01, fractal, radial_falloff, sample

coords = st.floats(min_value=-1000, max_value=1000, allow_nan=False)
seeds = st.floats(min_value=0, max_value=10_000, allow_nan=False)


@given(x=coords, y=coords, seed=seeds, frequency=st.floats(0.001, 10))
def test_sample_is_normalised(x, y, seed, frequency):
    assert 0.0 <= sample(x, y, seed, frequency) <= 1.0


@given(x=coords, y=coords, seed=seeds, octaves=st.integers(1, 8))
def test_fractal_is_normalised(x, y, seed, octaves):
    assert 0.0 <= fractal(x, y, seed, octaves) <= 1.0


def test_sample_is_deterministic():
    assert sample(3, 4, 42.0, 0.05) == sample(3, 4, 42.0, 0.05)


def test_fractal_is_deterministic():
    assert fractal(10, -3, 1234, 5) == fractal(10, -3, 1234, 5)


def test_fractal_depends_on_seed():
    assert fractal(10, -3, 1, 4) != fractal(10, -3, 2, 4)


def test_fractal_is_continuous():
    """Small input steps produce small output steps, including across integers."""
    previous = fractal(0.0, 0.0, 7, 4)
    for step in range(1, 400):
        current = fractal(step * 0.005, 0.0, 7, 4)
        assert abs(current - previous) < 0.01
        previous = current


def test_single_octave_fractal_matches_sample():
    assert fractal(5, 6, 9, octaves=1) == pytest.approx(sample(5, 6, 9, 0.05))


def test_fractal_without_octaves_is_zero():
    assert fractal(1, 1, 1, octaves=0) == 0.0


def test_radial_falloff():
    assert radial_falloff(0, 10) == 1.0
    assert radial_falloff(10, 10) == pytest.approx(0.0)
    assert radial_falloff(5, 10) == pytest.approx(1 - 0.5**1.5)
    assert radial_falloff(20, 10) < 0
    assert radial_falloff(3, 0) == 1.0


def test_clamp01():
    assert clamp01(-0.2) == 0.0
    assert clamp01(0.4) == 0.4
    assert clamp01(1.7) == 1.0
