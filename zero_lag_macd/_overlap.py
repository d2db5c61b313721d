# -*- coding: utf-8 -*-
"""zero-lag-macd -- overlap indicators (moving averages).

Each section follows the pattern:
  1. numba kernel  ``nb_<kind>(np_close, length)`` over float64 arrays
  2. validated public wrapper ``<kind>(prices, length)``

Every kernel returns an array as long as its input.  Seeding legend:
  first_value -- output[0] = input[0]; no SMA warmup, no NaN prefix.
  shortened   -- windowed stats use whatever history exists, so the
                 first ``length - 1`` outputs average fewer samples.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

from numba import njit
from numpy import empty, float64, ndarray

from ._base import v_choice, v_length, v_prices
from .maps import ALGORITHMS


# ===========================================================================
# EMA  (first_value)
# ===========================================================================
# alpha = 2 / (length + 1)
# ema[0] = x[0]
# ema[i] = alpha * x[i] + (1 - alpha) * ema[i-1]

@njit(cache=True)
def nb_ema(np_close, length):
    m = np_close.size
    result = empty(m, dtype=float64)
    if m == 0:
        return result

    alpha = 2.0 / (length + 1.0)
    result[0] = np_close[0]
    for i in range(1, m):
        result[i] = alpha * np_close[i] + (1.0 - alpha) * result[i - 1]
    return result


def ema(prices: Any, length: int = 10) -> ndarray:
    """Exponential Moving Average seeded with the first observation."""
    length = v_length(length)
    return nb_ema(v_prices(prices), length)


# ===========================================================================
# SMA  (shortened)
# ===========================================================================
# sma[i] = mean(x[max(0, i-length+1) .. i])
# Window sums are recomputed per index so a NaN only affects the windows
# that contain it.

@njit(cache=True)
def nb_sma(np_close, length):
    m = np_close.size
    result = empty(m, dtype=float64)
    for i in range(m):
        start = max(0, i - length + 1)
        total = 0.0
        for j in range(start, i + 1):
            total += np_close[j]
        result[i] = total / (i + 1 - start)
    return result


def sma(prices: Any, length: int = 10) -> ndarray:
    """Trailing Simple Moving Average; the window shortens near the start."""
    length = v_length(length)
    return nb_sma(v_prices(prices), length)


# ===========================================================================
# ZLEMA legacy  (first_value)  -- Zero-Lag EMA, lag shift
# ===========================================================================
# lag = (length-1) // 2
# adjusted[i] = 2 * x[i] - x[i-lag]   for i >= lag
# adjusted[i] = x[i]                  for i <  lag  (no correction yet)
# zlema = EMA(adjusted, length)

@njit(cache=True)
def nb_zlema_legacy(np_close, length):
    lag = (length - 1) // 2
    adjusted = np_close.copy()
    for i in range(lag, np_close.size):
        adjusted[i] = 2.0 * np_close[i] - np_close[i - lag]
    return nb_ema(adjusted, length)


# ===========================================================================
# ZLEMA glaz  (first_value)  -- Zero-Lag EMA, error correction
# ===========================================================================
# ema1 = EMA(x, length)
# ema2 = EMA(ema1, length)
# zlema = ema1 + (ema1 - ema2)
# Both EMAs seed to x[0], so zlema[0] == x[0].

@njit(cache=True)
def nb_zlema_glaz(np_close, length):
    ema1 = nb_ema(np_close, length)
    ema2 = nb_ema(ema1, length)
    return ema1 + (ema1 - ema2)


ZLEMA_REGISTRY: Dict[str, Callable[[ndarray, int], ndarray]] = {
    "glaz": nb_zlema_glaz,
    "legacy": nb_zlema_legacy,
}


def zlema(prices: Any, length: int = 10, algorithm: str = "glaz") -> ndarray:
    """Zero-Lag Exponential Moving Average

    Sources:
        * legacy: Ehlers & Way, "Zero Lag (well, almost)"
        * glaz: error-correcting form of Zero Lag MACD Enhanced v1.2

    Parameters:
        prices (sequence): closing prices, oldest first
        length (int): period. Default: ```10```
        algorithm (str): ```"glaz"``` or ```"legacy"```. Default: ```"glaz"```

    Returns:
        (ndarray): same length as *prices*
    """
    length = v_length(length)
    kernel = ZLEMA_REGISTRY[v_choice(algorithm, ALGORITHMS, "algorithm")]
    return kernel(v_prices(prices), length)
