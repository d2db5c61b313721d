# -*- coding: utf-8 -*-
from typing import Dict, Tuple


# Indicator defaults (Zero Lag MACD Enhanced v1.2)
DEFAULT_SETTINGS = {
    "fast_length": 12,
    "slow_length": 26,
    "signal_length": 9,
    "macd_ema_length": 9,
    "signal_type": "ema",
    "algorithm": "glaz",
}

SIGNAL_TYPES: Tuple[str, ...] = ("ema", "sma")
ALGORITHMS: Tuple[str, ...] = ("glaz", "legacy")
LENGTH_FIELDS: Tuple[str, ...] = (
    "fast_length", "slow_length", "signal_length", "macd_ema_length",
)

# UI / JSON payloads use camelCase keys
CAMEL_CASE: Dict[str, str] = {
    "fast_length": "fastLength",
    "slow_length": "slowLength",
    "signal_length": "signalLength",
    "macd_ema_length": "macdEmaLength",
    "signal_type": "signalType",
    "algorithm": "algorithm",
}

PARAM_ALIASES: Dict[str, str] = {
    **{camel: snake for snake, camel in CAMEL_CASE.items()},
    # pandas-ta style short names
    "fast": "fast_length",
    "slow": "slow_length",
    "signal": "signal_length",
    "macd_ema": "macd_ema_length",
}


# Quote source
DEFAULT_SYMBOL = "EURUSD"
OUTPUTSIZE = "compact"
ALPHAVANTAGE_BASE_URL = "https://www.alphavantage.co/query"
# Looked up in os.environ at call time
ALPHAVANTAGE_API_KEY_ENV = "ALPHAVANTAGE_API_KEY"
DEFAULT_API_KEY = "demo"
REQUEST_TIMEOUT = 30
