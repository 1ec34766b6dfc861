"""
Standard normal variates via the Box-Muller transform.

[T1] Z = sqrt(-2 ln U) * cos(2π V), U, V ~ Uniform(0, 1) independent

The generator handle is always passed in explicitly so a run is
reproducible from its seed and parallel runs can use independent streams.

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering" §2.3
"""

import numpy as np


def _open_uniform(rng: np.random.Generator) -> float:
    """Uniform draw in (0, 1); Generator.random() can return exactly 0."""
    u = 0.0
    while u == 0.0:
        u = rng.random()
    return u


def box_muller_normal(rng: np.random.Generator) -> float:
    """
    Draw one standard normal variate.

    Parameters
    ----------
    rng : np.random.Generator
        Source of uniform randomness

    Returns
    -------
    float
        Sample from N(0, 1)

    Examples
    --------
    >>> rng = np.random.default_rng(42)
    >>> z = box_muller_normal(rng)
    """
    u = _open_uniform(rng)
    v = _open_uniform(rng)
    return float(np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v))


def make_generator(
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> np.random.Generator:
    """
    Resolve the generator for a run.

    An explicit generator wins over a seed; with neither, fresh OS entropy
    is used.

    Parameters
    ----------
    seed : int, optional
        Seed for numpy.random.default_rng
    rng : np.random.Generator, optional
        Caller-owned generator, used as-is

    Returns
    -------
    np.random.Generator
    """
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def spawn_generators(seed: int | None, n_streams: int) -> list[np.random.Generator]:
    """
    Create independent generators for parallel runs.

    Streams are derived with SeedSequence.spawn so they do not overlap.

    Parameters
    ----------
    seed : int, optional
        Root seed
    n_streams : int
        Number of generators

    Returns
    -------
    list[np.random.Generator]
    """
    if n_streams <= 0:
        raise ValueError(f"CRITICAL: n_streams must be > 0, got {n_streams}")
    children = np.random.SeedSequence(seed).spawn(n_streams)
    return [np.random.default_rng(child) for child in children]
