"""
Tests for the input and output data types.
"""

import dataclasses

import numpy as np
import pytest

from path_synthesis.data.schemas import (
    AssetClass,
    CorrelationFactors,
    ModelType,
    PathPoint,
    PathSummary,
    SimulationResult,
)


class TestEnums:
    def test_model_types(self):
        assert len(ModelType) == 6

    def test_asset_classes(self):
        assert len(AssetClass) == 14

    def test_derivative_classes(self):
        derivatives = {a for a in AssetClass if a.is_derivative}
        assert derivatives == {AssetClass.OPTION, AssetClass.SWAPTION}

    def test_seasonal_classes(self):
        seasonal = {a for a in AssetClass if a.is_seasonal}
        assert seasonal == {AssetClass.COMMODITY, AssetClass.INFLATION_RATE, AssetClass.GDP_GROWTH}


class TestCorrelationFactors:
    def test_defaults_zero(self):
        assert CorrelationFactors().as_dict() == {
            "equity": 0.0,
            "rates": 0.0,
            "volatility": 0.0,
            "commodity": 0.0,
        }

    @pytest.mark.parametrize("name", ["equity", "rates", "volatility", "commodity"])
    def test_out_of_range_rejected(self, name):
        with pytest.raises(ValueError, match=f"correlation '{name}'"):
            CorrelationFactors(**{name: 1.5})

    def test_bounds_accepted(self):
        factors = CorrelationFactors(equity=1.0, rates=-1.0)
        assert factors.equity == 1.0


class TestSimulationParameters:
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"n_steps": 0}, "n_steps"),
            ({"dt": 0.0}, "dt must be > 0"),
            ({"volatility": -0.1}, "volatility must be >= 0"),
            ({"jump_intensity": -1.0}, "jump_intensity"),
            ({"jump_volatility": -0.2}, "jump_volatility"),
            ({"implied_volatility": -0.2}, "implied_volatility"),
        ],
    )
    def test_invariants(self, make_params, overrides, message):
        with pytest.raises(ValueError, match=message):
            make_params(**overrides)

    def test_derivative_needs_pricing_volatility(self, make_params):
        with pytest.raises(ValueError, match="pricing volatility"):
            make_params(asset_class=AssetClass.OPTION, implied_volatility=0.0, volatility=0.0)

    def test_derivative_needs_positive_strike(self, make_params):
        with pytest.raises(ValueError, match="strike must be > 0"):
            make_params(asset_class=AssetClass.SWAPTION, strike=0.0)

    def test_non_derivative_allows_zero_volatility(self, make_params):
        assert make_params(volatility=0.0, implied_volatility=0.0).volatility == 0.0

    def test_pricing_volatility_fallback(self, make_params):
        assert make_params(implied_volatility=0.3).pricing_volatility == 0.3
        assert make_params(implied_volatility=0.0, volatility=0.25).pricing_volatility == 0.25

    def test_frozen(self, make_params):
        params = make_params()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.volatility = 0.5


class TestSimulationResult:
    def test_array_views(self, make_params):
        points = tuple(
            PathPoint(index=i, date=make_params().start_date, value=float(i), underlying=2.0 * i, benchmark=1.0)
            for i in range(3)
        )
        result = SimulationResult(
            parameters=make_params(n_steps=2),
            points=points,
            summary=PathSummary(min=0.0, max=2.0, mean=1.0, volatility=0.8),
        )
        assert result.n_steps == 2
        np.testing.assert_array_equal(result.values, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(result.underlying, [0.0, 2.0, 4.0])
        np.testing.assert_array_equal(result.benchmark, [1.0, 1.0, 1.0])
        assert result.seed is None
