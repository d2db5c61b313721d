# -*- coding: utf-8 -*-
"""zero-lag-macd – shared base: settings, validation, display helpers.

The overlap and momentum modules import from here.  Nothing in this
module does numerical work beyond input coercion.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace as _dc_replace
from numbers import Integral
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import math
import warnings

import numpy as np

from .maps import (
    ALGORITHMS,
    CAMEL_CASE,
    DEFAULT_SETTINGS,
    LENGTH_FIELDS,
    PARAM_ALIASES,
    SIGNAL_TYPES,
)

NAN = float("nan")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class SettingsError(ValueError):
    """Invalid indicator setting.  ``field`` names the offending setting."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def v_bool(value: Any, default: bool) -> bool:
    """None → *default*, anything else by truthiness."""
    return default if value is None else bool(value)


def v_length(value: Any, field: str = "length") -> int:
    """Strict period validation: positive integer or SettingsError.

    Integral floats (``12.0``) are accepted, bools and non-finite or
    fractional floats are not.
    """
    if isinstance(value, bool):
        raise SettingsError(field, f"expected a positive integer, got {value!r}")
    if isinstance(value, Integral):
        length = int(value)
    elif isinstance(value, (float, np.floating)):
        if not math.isfinite(value):
            raise SettingsError(field, f"length must be finite, got {value!r}")
        if not float(value).is_integer():
            raise SettingsError(field, f"length must be a whole number, got {value!r}")
        length = int(value)
    else:
        raise SettingsError(field, f"expected a positive integer, got {value!r}")
    if length <= 0:
        raise SettingsError(field, f"length must be > 0, got {length}")
    return length


def v_choice(value: Any, choices: Tuple[str, ...], field: str) -> str:
    if not isinstance(value, str) or value not in choices:
        raise SettingsError(field, f"expected one of {', '.join(choices)}; got {value!r}")
    return value


def v_prices(prices: Any) -> np.ndarray:
    """Fresh float64 copy of *prices*.  The caller's object is never touched.

    Accepts lists, tuples, numpy arrays and ``pd.Series``.  Non-finite
    values are kept (they propagate through every recursion downstream)
    but trigger a single UserWarning.
    """
    values = getattr(prices, "to_numpy", None)
    arr = np.array(values() if callable(values) else prices, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"prices must be one-dimensional, got shape {arr.shape}")
    if arr.size and not np.isfinite(arr).all():
        warnings.warn(
            f"{int((~np.isfinite(arr)).sum())} non-finite price(s); "
            "every later value of the affected series will be non-finite.",
            UserWarning,
            stacklevel=3,
        )
    return np.ascontiguousarray(arr)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ZeroLagMacdSettings:
    """Immutable indicator parameter set.

    No ordering between lengths is enforced: ``fast_length >= slow_length``
    is valid input and simply yields an inverted oscillator.
    """
    fast_length:     int = DEFAULT_SETTINGS["fast_length"]
    slow_length:     int = DEFAULT_SETTINGS["slow_length"]
    signal_length:   int = DEFAULT_SETTINGS["signal_length"]
    macd_ema_length: int = DEFAULT_SETTINGS["macd_ema_length"]
    signal_type:     str = DEFAULT_SETTINGS["signal_type"]
    algorithm:       str = DEFAULT_SETTINGS["algorithm"]

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        for name in LENGTH_FIELDS:
            object.__setattr__(self, name, v_length(getattr(self, name), name))
        v_choice(self.signal_type, SIGNAL_TYPES, "signal_type")
        v_choice(self.algorithm, ALGORITHMS, "algorithm")

    @classmethod
    def from_params(cls, params: Optional[Mapping[str, Any]] = None,
                    base: Optional["ZeroLagMacdSettings"] = None) -> "ZeroLagMacdSettings":
        """Build settings from a mapping of snake_case or camelCase keys.

        Missing keys and None values fall back to *base* (or the defaults).
        """
        base = base if base is not None else cls()
        known = {f.name for f in fields(cls)}
        changes: Dict[str, Any] = {}
        for key, value in (params or {}).items():
            name = PARAM_ALIASES.get(key, key)
            if name not in known:
                raise SettingsError(key, "unknown setting")
            if value is not None:
                changes[name] = value
        return base.replace(**changes) if changes else base

    def replace(self, **changes: Any) -> "ZeroLagMacdSettings":
        return _dc_replace(self, **changes)

    @property
    def warmup(self) -> int:
        """Leading samples masked for display."""
        return max(self.fast_length, self.slow_length,
                   self.signal_length, self.macd_ema_length)

    def as_params(self) -> Dict[str, Any]:
        """camelCase dict for UI / JSON payloads."""
        return {CAMEL_CASE[f.name]: getattr(self, f.name) for f in fields(self)}


# ---------------------------------------------------------------------------
# Display windowing
# ---------------------------------------------------------------------------

def to_nullable_series(values: Sequence[float], warmup: int) -> List[Optional[float]]:
    """Replace indices ``[0, warmup)`` with None; keep the rest as floats.

    Pure: *values* is read, never modified.  A warmup longer than the
    series masks everything.
    """
    warmup = max(int(warmup), 0)
    return [None if i < warmup else float(v) for i, v in enumerate(values)]


# ---------------------------------------------------------------------------
# Output-name helpers
# ---------------------------------------------------------------------------

def resolve_output_names(
        base_names: List[str], options: Mapping[str, Any]
) -> Tuple[Optional[List[str]], Optional[str]]:
    """Apply prefix / suffix / col_names overrides from *options*."""
    names = list(base_names)
    delimiter = options.get("delimiter", "_")
    prefix = options.get("prefix") or ""
    suffix = options.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = options.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            return None, f"[!] col_names too short: {len(col_names)} < {len(names)}"
        names = list(col_names[: len(names)])
    return names, None
