"""
Tests for the path assembler.

Covers path shape, dating, reproducibility, generator handling, draw order,
benchmark coupling and per-class integration of the display transforms.
"""

import logging
from datetime import date, timedelta

import numpy as np
import pytest

from path_synthesis.config.settings import RunConfig, Settings
from path_synthesis.data.schemas import AssetClass, CorrelationFactors, ModelType
from path_synthesis.simulation.processes import gbm_step
from path_synthesis.simulation.variates import box_muller_normal
from path_synthesis.synthesis.engine import SynthesisEngine, synthesize_path
from path_synthesis.synthesis.summary import calculate_summary

START_DATE = date(2024, 1, 2)


class TestPathShape:
    def test_point_count(self, make_params):
        result = synthesize_path(make_params(n_steps=30), seed=1)
        assert len(result.points) == 31
        assert result.n_steps == 30

    def test_indices_and_dates(self, make_params):
        result = synthesize_path(make_params(n_steps=5), seed=1)
        for i, point in enumerate(result.points):
            assert point.index == i
            assert point.date == START_DATE + timedelta(days=i)

    def test_first_point_is_initial_state(self, make_params):
        result = synthesize_path(make_params(initial_value=123.0, n_steps=5), seed=1)
        first = result.points[0]
        assert first.underlying == 123.0
        assert first.benchmark == 123.0
        assert first.value == 123.0

    def test_single_step(self, make_params):
        result = synthesize_path(make_params(n_steps=1), seed=3)
        assert len(result.points) == 2

    def test_parameters_echoed(self, make_params):
        params = make_params(n_steps=3)
        assert synthesize_path(params, seed=1).parameters is params


class TestFlatPath:
    def test_zero_drift_zero_vol_is_flat(self, flat_gbm_params, tolerances):
        result = synthesize_path(flat_gbm_params, seed=99)
        assert np.allclose(result.underlying, 100.0, atol=tolerances.anti_pattern, rtol=0)
        assert result.summary.min == pytest.approx(100.0, abs=tolerances.anti_pattern)
        assert result.summary.max == pytest.approx(100.0, abs=tolerances.anti_pattern)
        assert result.summary.volatility == pytest.approx(0.0, abs=tolerances.anti_pattern)

    def test_summary_matches_values(self, make_params):
        result = synthesize_path(make_params(n_steps=50), seed=4)
        assert result.summary == calculate_summary(result.values)


class TestReproducibility:
    def test_same_seed_same_path(self, make_params):
        params = make_params(n_steps=40)
        a = synthesize_path(params, seed=42)
        b = synthesize_path(params, seed=42)
        assert a.points == b.points
        assert a.seed == 42

    def test_different_seed_different_path(self, make_params):
        params = make_params(n_steps=40)
        a = synthesize_path(params, seed=1)
        b = synthesize_path(params, seed=2)
        assert not np.array_equal(a.underlying, b.underlying)

    def test_generator_takes_precedence(self, make_params):
        params = make_params(n_steps=20)
        a = synthesize_path(params, seed=7, rng=np.random.default_rng(11))
        b = synthesize_path(params, rng=np.random.default_rng(11))
        assert a.points == b.points
        assert a.seed is None

    def test_default_seed_from_settings(self, make_params):
        params = make_params(n_steps=20)
        settings = Settings(run=RunConfig(default_seed=5))
        a = SynthesisEngine(settings).run(params)
        b = synthesize_path(params, seed=5)
        assert a.points == b.points
        assert a.seed == 5


class TestDrawOrder:
    def test_market_then_idiosyncratic(self, make_params):
        """With zero correlation the asset follows the second normal of each pair."""
        params = make_params(n_steps=15, drift=0.05, volatility=0.2)
        result = synthesize_path(params, rng=np.random.default_rng(8))

        rng = np.random.default_rng(8)
        level = benchmark = 100.0
        expected_level, expected_benchmark = [level], [benchmark]
        for _ in range(params.n_steps):
            market = box_muller_normal(rng)
            idiosyncratic = box_muller_normal(rng)
            benchmark = gbm_step(benchmark, market, params.dt, 0.06, 0.15)
            level = gbm_step(level, idiosyncratic, params.dt, 0.05, 0.2)
            expected_level.append(level)
            expected_benchmark.append(benchmark)

        np.testing.assert_allclose(result.underlying, expected_level, rtol=1e-12)
        np.testing.assert_allclose(result.benchmark, expected_benchmark, rtol=1e-12)

    def test_full_correlation_tracks_benchmark(self, make_params):
        """rho = 1 with the benchmark's own drift and vol reproduces the benchmark."""
        params = make_params(
            n_steps=60,
            drift=0.06,
            volatility=0.15,
            correlations=CorrelationFactors(equity=1.0),
        )
        result = synthesize_path(params, seed=21)
        np.testing.assert_allclose(result.underlying, result.benchmark, rtol=1e-12)


class TestAssetClassIntegration:
    def test_equity_fundamentals_present(self, make_params):
        result = synthesize_path(make_params(n_steps=10), seed=1)
        assert all(p.pe_ratio is not None for p in result.points)
        assert all(p.greeks is None for p in result.points)

    def test_option_path_has_greeks(self, make_params):
        params = make_params(asset_class=AssetClass.OPTION, n_steps=30, expiry_time=0.5)
        result = synthesize_path(params, seed=12)
        assert all(p.greeks is not None for p in result.points)
        assert all(p.value >= 0 for p in result.points)
        assert all(0.0 <= p.greeks.delta <= 1.0 for p in result.points)
        assert result.points[0].secondary == params.strike

    def test_option_past_expiry_shows_intrinsic(self, make_params):
        params = make_params(asset_class=AssetClass.OPTION, n_steps=10, expiry_time=0.001)
        result = synthesize_path(params, seed=2)
        last = result.points[-1]
        assert last.value == pytest.approx(max(last.underlying - params.strike, 0.0))
        assert last.greeks.gamma == 0.0

    def test_swaption_path(self, make_params):
        params = make_params(
            model_type=ModelType.INTEREST_RATE_CIR,
            asset_class=AssetClass.SWAPTION,
            initial_value=0.03,
            mean_reversion_speed=2.0,
            long_term_mean=0.05,
            volatility=0.1,
            strike=30.0,
            n_steps=40,
        )
        result = synthesize_path(params, seed=3)
        assert all(p.value >= 0 for p in result.points)
        assert all(p.greeks is not None for p in result.points)

    def test_swaption_path_through_negative_rates(self, make_params):
        """Vasicek forwards that cross zero still give finite prices and summaries."""
        params = make_params(
            model_type=ModelType.INTEREST_RATE_VASICEK,
            asset_class=AssetClass.SWAPTION,
            initial_value=0.01,
            long_term_mean=0.0,
            volatility=0.02,
            strike=30.0,
        )
        crossed = 0
        for seed in range(50):
            result = synthesize_path(params, seed=seed)
            crossed += bool(np.any(result.underlying <= 0))
            assert np.all(np.isfinite(result.values)), seed
            assert np.isfinite(result.summary.mean), seed
            assert np.isfinite(result.summary.volatility), seed
            for point in result.points:
                if point.underlying <= 0:
                    assert point.value == 0.0
                    assert point.greeks.gamma == 0.0
        assert crossed > 0

    def test_put_path_through_negative_levels(self, make_params):
        params = make_params(
            model_type=ModelType.OU_PROCESS,
            asset_class=AssetClass.OPTION,
            initial_value=1.0,
            drift=0.0,
            long_term_mean=-5.0,
            mean_reversion_speed=5.0,
            volatility=1.0,
            is_call=False,
            n_steps=100,
        )
        result = synthesize_path(params, seed=4)
        assert np.any(result.underlying < 0)
        assert np.all(np.isfinite(result.values))
        assert all(np.isfinite(p.greeks.delta) for p in result.points)

    def test_unemployment_floor_applied(self, make_params):
        params = make_params(
            model_type=ModelType.OU_PROCESS,
            asset_class=AssetClass.UNEMPLOYMENT_RATE,
            initial_value=0.5,
            long_term_mean=0.5,
            volatility=0.0,
            n_steps=5,
        )
        result = synthesize_path(params, seed=1)
        assert np.all(result.values == 2.0)

    def test_seasonal_commodity_flat_underlying(self, make_params):
        params = make_params(
            asset_class=AssetClass.COMMODITY,
            drift=0.0,
            volatility=0.0,
            seasonal_amplitude=5.0,
            n_steps=63,
        )
        result = synthesize_path(params, seed=1)
        assert result.points[63].value == pytest.approx(105.0)
        assert result.points[63].underlying == pytest.approx(100.0)


class TestLogging:
    def test_debug_messages(self, make_params, caplog):
        with caplog.at_level(logging.DEBUG, logger="path_synthesis.synthesis.engine"):
            synthesize_path(make_params(n_steps=3), seed=1)
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Synthesizing EQUITY_GBM/EQUITY") for m in messages)
        assert any(m.startswith("Synthesized 4 points") for m in messages)
