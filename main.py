#!/usr/bin/env python3
"""
CrossVision CLI: analyze
Usage:
  python main.py analyze [SYMBOL] [--csv bars.csv] [--interval 1d] [--project] [--json]
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
import warnings
from pathlib import Path

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from crossvision.core.config import load_config
from crossvision.core.logger import setup_logging
from crossvision.core.errors import CrossVisionError, InsufficientHistoryWarning
from crossvision.indicators.pipeline import IndicatorPipeline, to_records
from crossvision.analysis.cross_scanner import find_death_cross
from crossvision.simulation.path_projector import project_path, make_rng
from crossvision.data.yahoo import YahooFinanceClient
from crossvision.data.loader import load_csv
from crossvision.data.enrich import add_fundamentals, add_volume_flow


def _print_scenario(title: str, scenario) -> None:
    if not scenario.found:
        print(f"{title}: entry rule never triggered")
        return
    print(
        f"{title}: entry {scenario.entry_date:%Y-%m-%d} @ {scenario.entry_price:.2f} -> "
        f"{scenario.latest_price:.2f} ({scenario.profit_percent:+.2f}%, {scenario.days_held} days)"
    )


def run_analyze(args: argparse.Namespace) -> int:
    """Fetch or load bars, compute indicators, print the what-if summary."""
    config = load_config(args.config, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file, config.log_levels)
    logger = logging.getLogger("crossvision")
    symbol = (args.symbol or config.symbol).upper()
    interval = args.interval or config.interval

    if args.csv:
        df = load_csv(args.csv)
    else:
        client = YahooFinanceClient(timeout=config.request_timeout)
        df = client.get_chart(symbol, interval, config.start_date)
        fundamentals = client.get_fundamentals(symbol)
        df = add_fundamentals(df, fundamentals["eps"], fundamentals["book_value"])
    df = add_volume_flow(df)

    pipeline = IndicatorPipeline(
        ema_fast=config.ema_fast,
        ema_slow=config.ema_slow,
        obv_ema_period=config.obv_ema_period,
        mfi_period=config.mfi_period,
    )
    projection = None
    if args.project:
        seed = args.seed if args.seed is not None else config.projection_seed
        rng = make_rng(seed)
        drift = args.drift if args.drift is not None else config.target_drift_pct
        projection = lambda frame: project_path(frame, rng, config.projection_days, drift, interval)

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", InsufficientHistoryWarning)
            enriched = pipeline.compute_indicators(df, projection=projection)
        for w in caught:
            logger.warning("%s", w.message)
    except CrossVisionError as e:
        logger.error("Indicator pipeline failed: %s", e)
        return 1

    real = enriched[~enriched["is_synthetic"]]
    result = pipeline.what_if(enriched, interval)
    death = find_death_cross(enriched, f"ema{config.ema_fast}", f"ema{config.ema_slow}") if args.project else None

    if args.json:
        payload = {
            "symbol": symbol,
            "interval": interval,
            "data": to_records(enriched),
            "what_if": result.to_dict(),
            "projected_death_cross": death.to_dict() if death else None,
        }
        print(json.dumps(payload, default=str))
        return 0

    last = real.iloc[-1]
    print(f"\n--- {symbol} ({interval}) ---")
    print(f"Bars: {len(real)}  Last close: {last['close']:.2f}  VWAP: {last['vwap']:.2f}")
    print(f"EMA{config.ema_fast}: {last[f'ema{config.ema_fast}']:.2f}  EMA{config.ema_slow}: {last[f'ema{config.ema_slow}']:.2f}")
    print(f"OBV: {last['obv']:.0f}  Money flow: {last['money_flow_score']:.1f} ({last['money_flow_color']})")
    if not result.applicable:
        print("What-if: only available for daily and weekly intervals")
    elif not result.found:
        print("What-if: no recent golden cross in range")
    else:
        print(f"Golden cross: {result.cross.time:%Y-%m-%d}")
        _print_scenario("Scenario A (price above EMAs)", result.scenario_a)
        _print_scenario("Scenario B (slow EMA above VWAP)", result.scenario_b)
    if args.project:
        if death:
            print(f"Projected death cross: {death.time:%Y-%m-%d}")
        else:
            print(f"No death cross in the {config.projection_days}-bar projection")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="CrossVision CLI")
    sub = parser.add_subparsers(dest="mode", required=True)
    analyze = sub.add_parser("analyze", help="Compute indicators and the golden-cross what-if")
    analyze.add_argument("symbol", nargs="?", default=None, help="Ticker, e.g. AAPL")
    analyze.add_argument("--csv", type=Path, default=None, help="Load bars from CSV instead of Yahoo")
    analyze.add_argument("--interval", default=None, help="1h, 1d or 1wk")
    analyze.add_argument("--project", action="store_true", help="Append a Monte Carlo projection")
    analyze.add_argument("--drift", type=float, default=None, help="Target daily drift in percent")
    analyze.add_argument("--seed", type=int, default=None, help="Projection RNG seed")
    analyze.add_argument("--json", action="store_true", help="Print JSON records")
    analyze.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    args = parser.parse_args()
    return run_analyze(args)


if __name__ == "__main__":
    exit(main())
