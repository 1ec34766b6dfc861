"""
Path assembler: one synthesis run from parameters to result.

Per step, in order:
1. Derive the date, seasonal shift and remaining time-to-expiry
2. Apply the asset-class display transform (pricing derivatives)
3. Record the PathPoint
4. Draw market and idiosyncratic shocks and couple them
5. Advance the benchmark proxy (fixed-parameter GBM on the market shock)
6. Advance the underlying state under the selected process

A run is single-threaded and a pure function of its parameters and its
generator. Parallel runs must use independent generators
(see simulation.variates.spawn_generators).
"""

import logging
from datetime import timedelta

import numpy as np

from path_synthesis.config.settings import SETTINGS, Settings
from path_synthesis.data.schemas import PathPoint, SimulationParameters, SimulationResult
from path_synthesis.simulation.correlation import aggregate_correlation, couple_shocks
from path_synthesis.simulation.processes import ProcessCoefficients, evolve, gbm_step
from path_synthesis.simulation.variates import box_muller_normal, make_generator
from path_synthesis.synthesis.summary import calculate_summary
from path_synthesis.synthesis.transforms import (
    StepContext,
    display_fields,
    seasonal_shift,
    time_to_expiry_at,
)

logger = logging.getLogger(__name__)


class SynthesisEngine:
    """
    Single-path synthesis engine.

    Parameters
    ----------
    settings : Settings, optional
        Engine conventions (floors, benchmark factor, instrument quoting).
        Defaults to the SETTINGS singleton.

    Examples
    --------
    >>> from path_synthesis.config.defaults import build_parameters
    >>> from path_synthesis.data.schemas import AssetClass, ModelType
    >>> params = build_parameters(ModelType.EQUITY_GBM, AssetClass.EQUITY, 100.0, n_steps=10)
    >>> result = SynthesisEngine().run(params, seed=42)
    >>> len(result.points)
    11
    """

    def __init__(self, settings: Settings = SETTINGS):
        self.settings = settings

    def run(
        self,
        params: SimulationParameters,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> SimulationResult:
        """
        Synthesize one path.

        Parameters
        ----------
        params : SimulationParameters
            Fully-populated run inputs
        seed : int, optional
            Seed for a fresh generator; falls back to settings.run.default_seed
        rng : np.random.Generator, optional
            Caller-owned generator, used as-is (takes precedence over seed)

        Returns
        -------
        SimulationResult
            Echoed parameters, n_steps + 1 points and summary statistics
        """
        if rng is None and seed is None:
            seed = self.settings.run.default_seed
        generator = make_generator(seed, rng)

        numerical = self.settings.numerical
        benchmark_cfg = self.settings.benchmark
        coeffs = ProcessCoefficients.from_parameters(params, numerical)
        rho = aggregate_correlation(params.correlations)

        logger.debug(
            f"Synthesizing {params.model_type.value}/{params.asset_class.value}: "
            f"{params.n_steps} steps, dt={params.dt:.6f}, rho={rho:+.3f}, "
            f"drift_eff={coeffs.drift:.4f}"
        )

        level = params.initial_value
        benchmark = params.initial_value
        points: list[PathPoint] = []

        for i in range(params.n_steps + 1):
            ctx = StepContext(
                index=i,
                level=level,
                seasonal=seasonal_shift(i, params, numerical.trading_days_per_year),
                time_to_expiry=time_to_expiry_at(i, params, numerical),
                params=params,
                instrument=self.settings.instrument,
                numerical=numerical,
            )
            shown = display_fields(ctx)
            points.append(
                PathPoint(
                    index=i,
                    date=params.start_date + timedelta(days=i),
                    value=float(shown.value),
                    underlying=float(level),
                    benchmark=float(benchmark),
                    secondary=shown.secondary,
                    pe_ratio=shown.pe_ratio,
                    expected_earnings=shown.expected_earnings,
                    greeks=shown.greeks,
                )
            )

            market_shock = box_muller_normal(generator)
            idiosyncratic_shock = box_muller_normal(generator)
            asset_shock = couple_shocks(rho, market_shock, idiosyncratic_shock)

            benchmark = gbm_step(
                benchmark, market_shock, params.dt, benchmark_cfg.drift, benchmark_cfg.volatility
            )
            level = evolve(params.model_type, level, asset_shock, params.dt, coeffs, generator)

        summary = calculate_summary([p.value for p in points])

        logger.debug(
            f"Synthesized {len(points)} points: min={summary.min:.4f}, "
            f"max={summary.max:.4f}, mean={summary.mean:.4f}, vol={summary.volatility:.4f}"
        )

        return SimulationResult(
            parameters=params,
            points=tuple(points),
            summary=summary,
            seed=seed if rng is None else None,
        )


def synthesize_path(
    params: SimulationParameters,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    settings: Settings = SETTINGS,
) -> SimulationResult:
    """
    Synthesize one path with the given settings.

    Convenience wrapper around SynthesisEngine(settings).run(...).

    Parameters
    ----------
    params : SimulationParameters
        Fully-populated run inputs
    seed : int, optional
        Seed for reproducibility
    rng : np.random.Generator, optional
        Caller-owned generator (takes precedence over seed)
    settings : Settings, optional
        Engine conventions

    Returns
    -------
    SimulationResult
    """
    return SynthesisEngine(settings).run(params, seed=seed, rng=rng)
