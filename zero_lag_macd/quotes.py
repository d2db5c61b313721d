# -*- coding: utf-8 -*-
"""Daily FX closes from AlphaVantage, plus an offline CSV reader.

Only the close projection is returned; the indicator never sees
timestamps.  All failures surface as ``QuoteError``.
"""
import logging
import os
from typing import Any, Mapping, Optional, Tuple

import pandas as pd
import requests

from .maps import (
    ALPHAVANTAGE_API_KEY_ENV,
    ALPHAVANTAGE_BASE_URL,
    DEFAULT_API_KEY,
    OUTPUTSIZE,
    REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)

CLOSE_FIELD = "4. close"


class QuoteError(RuntimeError):
    """Price data could not be obtained or parsed."""


def split_symbol(symbol: str) -> Tuple[str, str]:
    """``"eurusd "`` -> ``("EUR", "USD")``."""
    normalized = (symbol or "").strip().upper()
    if len(normalized) < 6:
        raise QuoteError("Symbol must contain at least 6 characters, e.g. EURUSD")
    return normalized[:3], normalized[3:]


def parse_fx_daily(payload: Mapping[str, Any]) -> pd.Series:
    """Chronological close Series from an FX_DAILY JSON payload.

    Unparsable closes are dropped and duplicate timestamps keep the last
    value seen.
    """
    series_key = next((k for k in payload if k.startswith("Time Series")), None)
    if series_key is None:
        message = payload.get("Note") or payload.get("Error Message") or "Unexpected response"
        raise QuoteError(message)

    rows = payload[series_key] or {}
    closes = pd.Series(
        {time: (values or {}).get(CLOSE_FIELD) for time, values in rows.items()},
        dtype=object,
    )
    closes = pd.to_numeric(closes, errors="coerce").dropna()
    closes.index = pd.to_datetime(closes.index, format="ISO8601", errors="coerce")
    closes = closes[closes.index.notna()]
    closes = closes[~closes.index.duplicated(keep="last")].sort_index()

    if closes.empty:
        raise QuoteError("No price data available for symbol")

    closes = closes.astype(float)
    closes.name = "close"
    closes.index.name = "time"
    return closes


def fetch_fx_daily(
    symbol: str,
    api_key: Optional[str] = None,
    outputsize: str = OUTPUTSIZE,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> pd.Series:
    """Fetch daily closes for a six-letter currency pair such as EURUSD."""
    base, quote = split_symbol(symbol)
    params = {
        "function": "FX_DAILY",
        "from_symbol": base,
        "to_symbol": quote,
        "apikey": api_key or os.getenv(ALPHAVANTAGE_API_KEY_ENV, DEFAULT_API_KEY),
        "outputsize": outputsize,
    }

    http = session or requests
    logger.debug(f"Fetching {base}{quote} daily closes from AlphaVantage ({outputsize})")
    try:
        response = http.get(ALPHAVANTAGE_BASE_URL, params=params, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise QuoteError(f"Failed to fetch data ({e.__class__.__name__})") from e

    if not response.ok:
        raise QuoteError(f"Failed to fetch data (HTTP {response.status_code})")

    try:
        payload = response.json()
    except ValueError as e:
        raise QuoteError("Unexpected response") from e

    if "Note" in payload:
        logger.warning(f"AlphaVantage rate limit: {payload['Note']}")

    closes = parse_fx_daily(payload)
    logger.debug(f"Fetched {len(closes)} daily closes for {base}{quote}")
    return closes


def read_close_csv(path: str, column: str = "close") -> pd.Series:
    """Closes from a CSV whose first column holds dates."""
    try:
        df = pd.read_csv(path, index_col=0, parse_dates=True)
    except (OSError, ValueError) as e:
        raise QuoteError(f"Cannot read {path}: {e}") from e

    matches = [c for c in df.columns if str(c).strip().lower() == column.lower()]
    if not matches:
        raise QuoteError(f"No '{column}' column in {path}")

    closes = pd.to_numeric(df[matches[0]], errors="coerce").dropna().sort_index()
    if closes.empty:
        raise QuoteError(f"No price data in {path}")
    closes.name = "close"
    return closes.astype(float)
