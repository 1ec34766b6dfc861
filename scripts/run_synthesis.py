#!/usr/bin/env python3
"""
Synthesize one path from the command line.

Prints the summary statistics, or the full path as CSV with --csv.

Usage:
    python scripts/run_synthesis.py --model EQUITY_GBM --asset-class EQUITY --seed 42
    python scripts/run_synthesis.py --model INTEREST_RATE_CIR --asset-class SWAPTION \
        --initial-value 0.03 --volatility 0.1 --strike 30 --csv
"""

import argparse
import logging
import sys

from path_synthesis.config.defaults import parameters_from_mapping
from path_synthesis.data.schemas import AssetClass, ModelType
from path_synthesis.synthesis.engine import synthesize_path
from path_synthesis.synthesis.export import to_csv_text


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synthesize one financial path")
    parser.add_argument(
        "--model",
        default=ModelType.EQUITY_GBM.value,
        choices=[m.value for m in ModelType],
        help="Stochastic process",
    )
    parser.add_argument(
        "--asset-class",
        default=AssetClass.EQUITY.value,
        choices=[a.value for a in AssetClass],
        help="Asset class",
    )
    parser.add_argument("--initial-value", type=float, default=100.0, help="Starting level")
    parser.add_argument("--steps", type=int, default=252, help="Number of steps")
    parser.add_argument("--dt", type=float, default=None, help="Step size in years")
    parser.add_argument("--drift", type=float, default=None, help="Annual drift (mu)")
    parser.add_argument("--volatility", type=float, default=None, help="Annual volatility (sigma)")
    parser.add_argument("--strike", type=float, default=None, help="Derivative strike")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--csv", action="store_true", help="Print the full path as CSV")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    params = parameters_from_mapping(
        {
            "model_type": args.model,
            "asset_class": args.asset_class,
            "initial_value": args.initial_value,
            "n_steps": args.steps,
            "dt": args.dt,
            "drift": args.drift,
            "volatility": args.volatility,
            "strike": args.strike,
        }
    )
    result = synthesize_path(params, seed=args.seed)

    if args.csv:
        sys.stdout.write(to_csv_text(result))
        return 0

    summary = result.summary
    print(f"Model:       {params.model_type.value}")
    print(f"Asset class: {params.asset_class.value}")
    print(f"Points:      {len(result.points)}")
    print(f"Min:         {summary.min:.6f}")
    print(f"Max:         {summary.max:.6f}")
    print(f"Mean:        {summary.mean:.6f}")
    print(f"Volatility:  {summary.volatility:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
