"""
Configuration-construction step for SimulationParameters.

The engine requires a fully-populated parameter value. This module owns
every per-field default and the boundary clamping applied to externally
produced inputs (e.g. a natural-language scenario translator that returns
a flat camelCase mapping).

Clamps are logged at WARNING; unknown model or asset-class tags raise.
"""

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any

from path_synthesis.data.schemas import (
    AssetClass,
    CorrelationFactors,
    ModelType,
    SimulationParameters,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterDefaults:
    """
    Per-field defaults for unset simulation inputs. [T3: Assumptions]

    start_date is not a field here: it defaults to today at build time.
    """

    n_steps: int = 252
    dt: float = 1.0 / 252.0

    # Process
    drift: float = 0.05
    volatility: float = 0.2
    mean_reversion_speed: float = 2.0
    long_term_mean: float = 0.05
    jump_intensity: float = 0.0
    jump_mean: float = 0.0
    jump_volatility: float = 0.0

    # Asset-class adjustments
    dividend_yield: float = 0.0
    foreign_rate: float = 0.0
    domestic_rate: float = 0.0
    storage_cost: float = 0.0
    convenience_yield: float = 0.0
    seasonal_amplitude: float = 0.0
    credit_spread: float = 0.01
    cds_spread: float = 0.0
    pe_ratio: float = 15.0
    expected_earnings: float = 5.0

    # Derivative terms
    strike: float = 100.0
    is_call: bool = True
    implied_volatility: float = 0.2
    expiry_time: float = 1.0
    risk_free_rate: float = 0.03


DEFAULTS = ParameterDefaults()

#: External camelCase keys -> SimulationParameters field names
FIELD_ALIASES: dict[str, str] = {
    "modelType": "model_type",
    "assetClass": "asset_class",
    "initialValue": "initial_value",
    "timeHorizon": "n_steps",
    "startDate": "start_date",
    "mu": "drift",
    "sigma": "volatility",
    "kappa": "mean_reversion_speed",
    "theta": "long_term_mean",
    "lambda": "jump_intensity",
    "jumpMu": "jump_mean",
    "jumpSigma": "jump_volatility",
    "dividendYield": "dividend_yield",
    "foreignRate": "foreign_rate",
    "domesticRate": "domestic_rate",
    "storageCost": "storage_cost",
    "convenienceYield": "convenience_yield",
    "seasonalAmplitude": "seasonal_amplitude",
    "creditSpread": "credit_spread",
    "cdsSpread": "cds_spread",
    "peRatio": "pe_ratio",
    "expectedEarnings": "expected_earnings",
    "strikePrice": "strike",
    "isCall": "is_call",
    "impliedVol": "implied_volatility",
    "expiryTime": "expiry_time",
    "riskFreeRate": "risk_free_rate",
}

_PARAMETER_FIELDS = frozenset(f.name for f in fields(SimulationParameters))
_OVERRIDABLE_FIELDS = _PARAMETER_FIELDS - {"model_type", "asset_class", "initial_value"}


def build_parameters(
    model_type: ModelType,
    asset_class: AssetClass,
    initial_value: float,
    defaults: ParameterDefaults = DEFAULTS,
    **overrides: Any,
) -> SimulationParameters:
    """
    Build fully-populated SimulationParameters.

    Parameters
    ----------
    model_type : ModelType
        Process selector
    asset_class : AssetClass
        Asset-class selector
    initial_value : float
        Starting level
    defaults : ParameterDefaults, optional
        Source of values for fields not overridden
    **overrides : Any
        Any SimulationParameters field; correlations may be a
        CorrelationFactors or a mapping of factor name to coefficient

    Returns
    -------
    SimulationParameters

    Raises
    ------
    TypeError
        If an override is not a SimulationParameters field
    ValueError
        If the resulting parameters violate a run invariant

    Examples
    --------
    >>> params = build_parameters(ModelType.EQUITY_GBM, AssetClass.EQUITY, 100.0, volatility=0.0)
    >>> params.volatility
    0.0
    """
    unknown = set(overrides) - _OVERRIDABLE_FIELDS
    if unknown:
        raise TypeError(f"Unknown parameter field(s): {', '.join(sorted(unknown))}")

    values: dict[str, Any] = asdict(defaults)
    values["start_date"] = date.today()
    values.update(overrides)

    correlations = values.get("correlations", CorrelationFactors())
    if isinstance(correlations, Mapping):
        correlations = CorrelationFactors(**correlations)
    values["correlations"] = correlations

    return SimulationParameters(
        model_type=model_type,
        asset_class=asset_class,
        initial_value=initial_value,
        **values,
    )


def _parse_enum(enum_cls: type, raw: Any, field_name: str) -> Any:
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).upper())
    except ValueError:
        valid = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"CRITICAL: unknown {field_name} '{raw}'. Valid: {valid}") from None


_TRUE_STRINGS = frozenset({"true", "t", "yes", "y", "1", "call", "payer"})
_FALSE_STRINGS = frozenset({"false", "f", "no", "n", "0", "put", "receiver"})


def _parse_bool(raw: Any, field_name: str) -> bool:
    if isinstance(raw, str):
        token = raw.strip().lower()
        if token in _TRUE_STRINGS:
            return True
        if token in _FALSE_STRINGS:
            return False
        raise ValueError(f"CRITICAL: cannot interpret {field_name} '{raw}' as a boolean")
    return bool(raw)


def _clamp_correlations(raw: Mapping[str, Any] | CorrelationFactors | None) -> dict[str, float]:
    if isinstance(raw, CorrelationFactors):
        return raw.as_dict()
    if not raw:
        return {}
    valid = {f.name for f in fields(CorrelationFactors)}
    clamped = {}
    for name, coefficient in raw.items():
        if name not in valid:
            logger.warning(f"Ignoring unknown correlation factor '{name}'")
            continue
        if coefficient is None:
            continue
        value = float(coefficient)
        bounded = min(1.0, max(-1.0, value))
        if bounded != value:
            logger.warning(f"Clamped correlation '{name}' from {value} to {bounded}")
        clamped[name] = bounded
    return clamped


def parameters_from_mapping(
    mapping: Mapping[str, Any],
    defaults: ParameterDefaults = DEFAULTS,
) -> SimulationParameters:
    """
    Build parameters from an external flat mapping, clamping out-of-range values.

    Accepts camelCase keys (see FIELD_ALIASES) or snake_case field names.
    Missing or None values take the defaults. Clamps:
    - correlation coefficients to [-1, 1]
    - volatility, jump volatility, jump intensity, implied volatility to >= 0
    - step count to >= 1
    - non-positive dt to the default dt

    Parameters
    ----------
    mapping : Mapping[str, Any]
        External parameter structure (e.g. translator output)
    defaults : ParameterDefaults, optional
        Defaults for missing fields

    Returns
    -------
    SimulationParameters

    Raises
    ------
    ValueError
        If modelType, assetClass or initialValue is missing or invalid, or
        isCall is a string that is not a recognised boolean
    """
    values: dict[str, Any] = {}
    for key, raw in mapping.items():
        if raw is None:
            continue
        name = FIELD_ALIASES.get(key, key)
        if name not in _PARAMETER_FIELDS:
            logger.warning(f"Ignoring unknown parameter '{key}'")
            continue
        values[name] = raw

    for required in ("model_type", "asset_class", "initial_value"):
        if required not in values:
            raise ValueError(f"CRITICAL: missing required parameter '{required}'")

    model_type = _parse_enum(ModelType, values.pop("model_type"), "model_type")
    asset_class = _parse_enum(AssetClass, values.pop("asset_class"), "asset_class")
    initial_value = float(values.pop("initial_value"))

    for name in ("volatility", "jump_volatility", "jump_intensity", "implied_volatility"):
        if name in values and float(values[name]) < 0:
            logger.warning(f"Clamped {name} from {values[name]} to 0.0")
            values[name] = 0.0

    if "n_steps" in values:
        n_steps = int(values["n_steps"])
        if n_steps < 1:
            logger.warning(f"Clamped n_steps from {n_steps} to 1")
            n_steps = 1
        values["n_steps"] = n_steps

    if "dt" in values and float(values["dt"]) <= 0:
        logger.warning(f"Replaced non-positive dt {values['dt']} with default {defaults.dt}")
        values["dt"] = defaults.dt

    if "start_date" in values and isinstance(values["start_date"], str):
        values["start_date"] = date.fromisoformat(values["start_date"])

    if "is_call" in values:
        values["is_call"] = _parse_bool(values["is_call"], "is_call")

    values["correlations"] = CorrelationFactors(
        **_clamp_correlations(values.get("correlations"))
    )

    return build_parameters(model_type, asset_class, initial_value, defaults=defaults, **values)
