# -*- coding: utf-8 -*-
"""zero-lag-macd -- momentum: Zero Lag MACD assembly.

fast = ZLEMA(close, fast_length)      slow = ZLEMA(close, slow_length)
MACD = fast - slow
Signal = EMA | SMA (MACD, signal_length)
Hist = MACD - Signal
MACDe = EMA(MACD, macd_ema_length)    (alternate crossover line)

Everything is recomputed over the full series on every call; there is
no incremental state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from numpy import ndarray
from pandas import DataFrame, Series

from ._base import (
    NAN,
    ZeroLagMacdSettings,
    v_bool,
    resolve_output_names,
    to_nullable_series,
    v_prices,
)
from ._overlap import ZLEMA_REGISTRY, nb_ema, nb_sma


SIGNAL_REGISTRY: Dict[str, Callable[[ndarray, int], ndarray]] = {
    "ema": nb_ema,
    "sma": nb_sma,
}

# (attribute, column prefix) in output order
_OUTPUTS = (
    ("fast_zlema", "ZLEMAf"),
    ("slow_zlema", "ZLEMAs"),
    ("macd", "ZLMACD"),
    ("signal", "ZLMACDs"),
    ("histogram", "ZLMACDh"),
    ("macd_ema", "ZLMACDe"),
)
DISPLAY_SERIES = ("fast_zlema", "slow_zlema", "macd", "signal", "histogram")


@dataclass(frozen=True, eq=False)
class ZeroLagMacdResult:
    """Five aligned output arrays plus the auxiliary MACD EMA.

    All arrays have ``len(close)`` elements.
    """
    fast_zlema: ndarray
    slow_zlema: ndarray
    macd:       ndarray
    signal:     ndarray
    histogram:  ndarray
    macd_ema:   ndarray
    close:      ndarray = field(repr=False)
    settings:   ZeroLagMacdSettings = field(default_factory=ZeroLagMacdSettings)

    def __len__(self) -> int:
        return int(self.close.size)

    @property
    def warmup(self) -> int:
        return self.settings.warmup

    def masked(self) -> Dict[str, List[Optional[float]]]:
        """Display variants: None before warmup, floats after."""
        w = self.warmup
        return {name: to_nullable_series(getattr(self, name), w) for name in DISPLAY_SERIES}

    def positive_dots(self) -> List[Optional[float]]:
        """Histogram value where the displayed histogram is > 0, else None."""
        hist = to_nullable_series(self.histogram, self.warmup)
        return [v if v is not None and v > 0 else None for v in hist]

    def latest(self) -> Optional[Dict[str, float]]:
        """Values at the last index, or None for an empty result."""
        if not len(self):
            return None
        return {
            "close": float(self.close[-1]),
            "macd": float(self.macd[-1]),
            "signal": float(self.signal[-1]),
            "histogram": float(self.histogram[-1]),
            "fast": float(self.fast_zlema[-1]),
            "slow": float(self.slow_zlema[-1]),
        }

    def output_names(self) -> List[str]:
        s = self.settings
        lengths = {
            "fast_zlema": f"_{s.fast_length}",
            "slow_zlema": f"_{s.slow_length}",
            "macd_ema": f"_{s.macd_ema_length}",
        }
        p = f"_{s.fast_length}_{s.slow_length}_{s.signal_length}"
        return [f"{prefix}{lengths.get(attr, p)}" for attr, prefix in _OUTPUTS]

    def to_frame(self, index: Any = None, masked: bool = False, **kwargs: Any) -> DataFrame:
        """Columns in output order, pandas-ta style names.

        Masked cells become NaN.  ``prefix``, ``suffix``, ``delimiter``,
        ``col_names`` and ``fillna`` are honoured.
        """
        names, err = resolve_output_names(self.output_names(), kwargs)
        if err:
            raise ValueError(err)

        w = self.warmup if masked else 0
        data = {}
        for (attr, _), name in zip(_OUTPUTS, names):
            values = getattr(self, attr).copy()
            values[:w] = NAN
            data[name] = values
        df = DataFrame(data, index=index)

        if "fillna" in kwargs:
            df = df.fillna(kwargs["fillna"])

        s = self.settings
        df.name = f"ZLMACD_{s.fast_length}_{s.slow_length}_{s.signal_length}"
        df.category = "momentum"
        return df


def zero_lag_macd(
    prices: Any,
    settings: Union[ZeroLagMacdSettings, Mapping[str, Any], None] = None,
    **params: Any,
) -> ZeroLagMacdResult:
    """Zero Lag MACD Enhanced

    Parameters:
        prices (sequence): closing prices, oldest first. May be empty.
        settings (ZeroLagMacdSettings | dict): Default: ```ZeroLagMacdSettings()```
        **params: field overrides (snake_case or camelCase) applied on top
            of *settings*

    Returns:
        (ZeroLagMacdResult): every array ```len(prices)``` long
    """
    if isinstance(settings, Mapping):
        settings = ZeroLagMacdSettings.from_params(settings)
    if params or settings is None:
        settings = ZeroLagMacdSettings.from_params(params, base=settings)

    close = v_prices(prices)
    zl = ZLEMA_REGISTRY[settings.algorithm]

    fast_zlema = zl(close, settings.fast_length)
    slow_zlema = zl(close, settings.slow_length)
    macd = fast_zlema - slow_zlema
    signal = SIGNAL_REGISTRY[settings.signal_type](macd, settings.signal_length)
    histogram = macd - signal
    # independent of the signal line even when the lengths match
    macd_ema = nb_ema(macd, settings.macd_ema_length)

    return ZeroLagMacdResult(
        fast_zlema=fast_zlema,
        slow_zlema=slow_zlema,
        macd=macd,
        signal=signal,
        histogram=histogram,
        macd_ema=macd_ema,
        close=close,
        settings=settings,
    )


def zlmacd(
    close: Any,
    fast: int = None, slow: int = None, signal: int = None,
    macd_ema: int = None, signal_type: str = None, algorithm: str = None,
    masked: bool = None, **kwargs: Any,
) -> DataFrame:
    """Zero Lag MACD as a DataFrame

    Parameters:
        close (Series): ```close``` Series
        fast (int): Fast period. Default: ```12```
        slow (int): Slow period. Default: ```26```
        signal (int): Signal period. Default: ```9```
        macd_ema (int): MACD EMA period. Default: ```9```
        signal_type (str): ```"ema"``` or ```"sma"```. Default: ```"ema"```
        algorithm (str): ```"glaz"``` or ```"legacy"```. Default: ```"glaz"```
        masked (bool): NaN the warmup rows. Default: ```False```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```
        prefix, suffix, delimiter, col_names: column naming

    Returns:
        (DataFrame): 6 columns
    """
    settings = ZeroLagMacdSettings.from_params({
        "fast_length": fast,
        "slow_length": slow,
        "signal_length": signal,
        "macd_ema_length": macd_ema,
        "signal_type": signal_type,
        "algorithm": algorithm,
    })
    result = zero_lag_macd(close, settings)
    index = close.index if isinstance(close, Series) else None
    return result.to_frame(index=index, masked=v_bool(masked, False), **kwargs)


def summarize(result: ZeroLagMacdResult) -> Mapping[str, Any]:
    """Latest values plus the display flags a chart legend needs."""
    latest = result.latest()
    if latest is None:
        return {"bars": 0, "warmup": result.warmup, "ready": False}
    return {
        "bars": len(result),
        "warmup": result.warmup,
        "ready": len(result) > result.warmup,
        "positive": latest["histogram"] > 0,
        **latest,
    }
