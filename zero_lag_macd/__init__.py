# -*- coding: utf-8 -*-
"""zero-lag-macd – Zero Lag MACD Enhanced indicator engine.

Flat structure: ``zlm.zlema()``, ``zlm.zero_lag_macd()``.  Category
modules are private; everything public is re-exported here.
"""
from __future__ import annotations

__version__ = "0.1.0"

from .maps import ALGORITHMS, DEFAULT_SETTINGS, SIGNAL_TYPES

# Base API
from ._base import (
    NAN,
    SettingsError,
    ZeroLagMacdSettings,
    resolve_output_names,
    to_nullable_series,
    v_length,
    v_prices,
)

# Moving averages
from ._overlap import (
    ZLEMA_REGISTRY,
    ema,
    nb_ema,
    nb_sma,
    nb_zlema_glaz,
    nb_zlema_legacy,
    sma,
    zlema,
)

# MACD family
from ._momentum import (
    SIGNAL_REGISTRY,
    ZeroLagMacdResult,
    summarize,
    zero_lag_macd,
    zlmacd,
)

# Price source
from .quotes import QuoteError, fetch_fx_daily, parse_fx_daily, read_close_csv

__all__ = [
    "__version__",
    "ALGORITHMS",
    "DEFAULT_SETTINGS",
    "SIGNAL_TYPES",
    # base
    "NAN",
    "SettingsError",
    "ZeroLagMacdSettings",
    "resolve_output_names",
    "to_nullable_series",
    "v_length",
    "v_prices",
    # overlap
    "ZLEMA_REGISTRY",
    "ema",
    "nb_ema",
    "nb_sma",
    "nb_zlema_glaz",
    "nb_zlema_legacy",
    "sma",
    "zlema",
    # momentum
    "SIGNAL_REGISTRY",
    "ZeroLagMacdResult",
    "summarize",
    "zero_lag_macd",
    "zlmacd",
    # quotes
    "QuoteError",
    "fetch_fx_daily",
    "parse_fx_daily",
    "read_close_csv",
]
