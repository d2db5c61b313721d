#!/usr/bin/env python3
"""Compare the glaz and legacy zero-lag algorithms on synthetic closes.

Both runs share every setting except ``algorithm``.  The summary shows
how far the two MACD families drift apart and how often their
histograms disagree in sign after warmup.
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import zero_lag_macd as zlm


def make_closes(rows: int, seed: int) -> pd.Series:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1D")
    base = 1.10 + 0.005 * rng.standard_normal(rows).cumsum()
    return pd.Series(base + rng.normal(0, 0.001, rows), index=idx, name="close")


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, eps: float) -> pd.DataFrame:
    test = test.set_axis(ref.columns, axis=1)
    diff = (test - ref).abs()
    rel = diff / (ref.abs() + eps)
    return pd.DataFrame(
        {
            "nan_ref": ref.isna().sum(),
            "nan_test": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_rel": rel.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=500)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--fast", type=int, default=12)
    ap.add_argument("--slow", type=int, default=26)
    ap.add_argument("--signal", type=int, default=9)
    ap.add_argument("--signal-type", choices=zlm.SIGNAL_TYPES, default="ema")
    ap.add_argument("--eps", type=float, default=1e-12)
    args = ap.parse_args()

    settings = zlm.ZeroLagMacdSettings(
        fast_length=args.fast,
        slow_length=args.slow,
        signal_length=args.signal,
        signal_type=args.signal_type,
    )
    closes = make_closes(args.rows, args.seed)

    # legacy is the reference
    legacy = zlm.zero_lag_macd(closes, settings.replace(algorithm="legacy"))
    glaz = zlm.zero_lag_macd(closes, settings.replace(algorithm="glaz"))
    ref = legacy.to_frame(index=closes.index, masked=True)
    test = glaz.to_frame(index=closes.index, masked=True)
    summary = compare_frames(ref, test, args.eps)

    w = settings.warmup
    flips = int((np.sign(legacy.histogram[w:]) != np.sign(glaz.histogram[w:])).sum())

    print("[i] rows:", args.rows)
    print("[i] warmup:", w)
    print("\nglaz vs legacy:")
    print(summary)
    print(f"\n[i] histogram sign disagreements: {flips} / {max(args.rows - w, 0)}")


if __name__ == "__main__":
    main()
