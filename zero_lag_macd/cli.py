# -*- coding: utf-8 -*-
"""zero-lag-macd command line: fetch closes, compute, print the panel.

    zero-lag-macd --symbol EURUSD --algorithm legacy --tail 15
    zero-lag-macd --csv closes.csv --signal-type sma
"""
from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import List, Optional

import pandas as pd

from ._base import SettingsError, ZeroLagMacdSettings
from ._momentum import summarize, zero_lag_macd
from .maps import ALGORITHMS, DEFAULT_SETTINGS, DEFAULT_SYMBOL, SIGNAL_TYPES
from .quotes import QuoteError, fetch_fx_daily, read_close_csv

logger = logging.getLogger(__name__)

PANEL = (
    ("Close", "close"),
    ("MACD", "macd"),
    ("Signal", "signal"),
    ("Histogram", "histogram"),
    ("Fast ZeroLag", "fast"),
    ("Slow ZeroLag", "slow"),
)


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def format_number(value: Optional[float]) -> str:
    if value is None:
        return "--"
    return f"{value:.5f}" if math.isfinite(value) else "N/A"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="zero-lag-macd", description="Zero Lag MACD Enhanced")
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--symbol", type=str, default=DEFAULT_SYMBOL, help="FX pair, e.g. EURUSD")
    source.add_argument("--csv", type=str, default=None, help="CSV with a date column and a close column")
    ap.add_argument("--fast", type=int, default=DEFAULT_SETTINGS["fast_length"])
    ap.add_argument("--slow", type=int, default=DEFAULT_SETTINGS["slow_length"])
    ap.add_argument("--signal", type=int, default=DEFAULT_SETTINGS["signal_length"])
    ap.add_argument("--macd-ema", type=int, default=DEFAULT_SETTINGS["macd_ema_length"])
    ap.add_argument("--signal-type", choices=SIGNAL_TYPES, default=DEFAULT_SETTINGS["signal_type"])
    ap.add_argument("--algorithm", choices=ALGORITHMS, default=DEFAULT_SETTINGS["algorithm"])
    ap.add_argument("--tail", type=int, default=10, help="print last N rows")
    ap.add_argument("--no-dots", action="store_true", help="omit the positive dots column")
    ap.add_argument("--log-level", type=str, default="WARNING")
    return ap


def render(closes: pd.Series, settings: ZeroLagMacdSettings, tail: int, dots: bool) -> str:
    result = zero_lag_macd(closes, settings)
    stats = summarize(result)

    lines = [f"[i] bars: {stats['bars']}  warmup: {stats['warmup']}"]
    lines.append("  ".join(f"{label}: {format_number(stats.get(key))}" for label, key in PANEL))

    df = result.to_frame(index=closes.index, masked=True)
    df = df.drop(columns=df.columns[-1])  # auxiliary MACD EMA is not charted
    if dots:
        df["dot"] = pd.Series(result.positive_dots(), index=df.index, dtype=float)
    if tail > 0:
        lines.append(df.tail(tail).to_string(float_format=lambda v: f"{v:.5f}"))
    if not stats["ready"]:
        lines.append(f"[!] fewer than {stats['warmup'] + 1} bars; every display value is masked")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper())

    try:
        settings = ZeroLagMacdSettings(
            fast_length=args.fast,
            slow_length=args.slow,
            signal_length=args.signal,
            macd_ema_length=args.macd_ema,
            signal_type=args.signal_type,
            algorithm=args.algorithm,
        )
        closes = read_close_csv(args.csv) if args.csv else fetch_fx_daily(args.symbol)
    except (QuoteError, SettingsError) as e:
        print(f"[X] {e}")
        return 1

    logger.info(f"Computing {settings} over {len(closes)} closes")
    print(render(closes, settings, args.tail, not args.no_dots))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
