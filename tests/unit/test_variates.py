"""
Tests for Box-Muller variates and generator handling.

Tests correctness of:
- Box-Muller transform on known uniforms
- Re-drawing of zero uniforms
- Reproducibility and independent streams
"""

import numpy as np
import pytest

from path_synthesis.simulation.variates import (
    box_muller_normal,
    make_generator,
    spawn_generators,
)


class _ScriptedUniforms:
    """Stand-in generator returning a fixed sequence of uniforms."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self._values.pop(0)


class TestBoxMuller:
    """Tests for box_muller_normal."""

    def test_known_uniforms(self):
        """[T1] u=0.5, v=0.5 gives -sqrt(2 ln 2)."""
        z = box_muller_normal(_ScriptedUniforms([0.5, 0.5]))
        assert z == pytest.approx(-np.sqrt(2 * np.log(2)))

    def test_zero_uniforms_are_redrawn(self):
        """Zero draws are rejected so log(u) stays finite."""
        rng = _ScriptedUniforms([0.0, 0.5, 0.0, 0.0, 0.5])
        z = box_muller_normal(rng)

        assert rng.calls == 5
        assert np.isfinite(z)
        assert z == pytest.approx(-np.sqrt(2 * np.log(2)))

    def test_returns_python_float(self, reproducible_rng):
        """Draws are plain floats."""
        assert isinstance(box_muller_normal(reproducible_rng), float)

    def test_reproducibility(self):
        """Same seed should give same draws."""
        rng1 = np.random.default_rng(7)
        rng2 = np.random.default_rng(7)

        draws1 = [box_muller_normal(rng1) for _ in range(50)]
        draws2 = [box_muller_normal(rng2) for _ in range(50)]

        assert draws1 == draws2


class TestGenerators:
    """Tests for make_generator and spawn_generators."""

    def test_explicit_generator_wins(self, reproducible_rng):
        """A caller-owned generator is returned as-is."""
        assert make_generator(seed=1, rng=reproducible_rng) is reproducible_rng

    def test_seeded_generator_reproducible(self):
        """Seeded generators produce identical streams."""
        a = make_generator(seed=11)
        b = make_generator(seed=11)
        assert a.random() == b.random()

    def test_spawn_count(self):
        """One generator per requested stream."""
        streams = spawn_generators(42, 4)
        assert len(streams) == 4

    def test_spawned_streams_differ(self):
        """Spawned streams are not copies of each other."""
        first_draws = {g.random() for g in spawn_generators(42, 4)}
        assert len(first_draws) == 4

    def test_spawn_reproducible(self):
        """Same root seed spawns the same streams."""
        a = [g.random() for g in spawn_generators(3, 3)]
        b = [g.random() for g in spawn_generators(3, 3)]
        assert a == b

    def test_spawn_invalid_count(self):
        """At least one stream is required."""
        with pytest.raises(ValueError, match="n_streams must be > 0"):
            spawn_generators(42, 0)
