import numpy as np
import pandas as pd
import pytest

from zero_lag_macd import ZeroLagMacdSettings


@pytest.fixture
def ramp():
    return [float(v) for v in range(1, 11)]


@pytest.fixture
def scenario_b():
    return ZeroLagMacdSettings(
        fast_length=2,
        slow_length=4,
        signal_length=3,
        macd_ema_length=3,
        signal_type="ema",
        algorithm="legacy",
    )


@pytest.fixture
def closes():
    rng = np.random.default_rng(11)
    idx = pd.date_range("2025-01-01", periods=120, freq="1D")
    base = 1.10 + 0.004 * rng.standard_normal(120).cumsum()
    return pd.Series(base, index=idx, name="close")
