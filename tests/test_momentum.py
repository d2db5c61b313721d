"""Zero Lag MACD assembly: identities, scenarios and the pinned baseline."""

import numpy as np
import pandas as pd
import pytest

from zero_lag_macd import ZeroLagMacdSettings, zero_lag_macd, zlmacd

OUTPUTS = ("fast_zlema", "slow_zlema", "macd", "signal", "histogram", "macd_ema")

# prices 1..10, fast=2 slow=4 signal=3 macd_ema=3, ema, legacy
GOLDEN_FAST = [
    1.0, 1.66666666667, 2.55555555556, 3.51851851852, 4.50617283951,
    5.50205761317, 6.50068587106, 7.50022862369, 8.50007620790, 9.50002540263,
]
GOLDEN_SLOW = [
    1.0, 1.8, 2.68, 3.608, 4.5648,
    5.53888, 6.523328, 7.5139968, 8.50839808, 9.505038848,
]
GOLDEN_MACD = [
    0.0, -0.13333333333, -0.12444444444, -0.08948148148, -0.05862716049,
    -0.03682238683, -0.02264212894, -0.01376817631, -0.00832187210, -0.00501344537,
]
GOLDEN_SIGNAL = [
    0.0, -0.06666666667, -0.09555555556, -0.09251851852, -0.07557283951,
    -0.05619761317, -0.03941987106, -0.02659402368, -0.01745794789, -0.01123569663,
]
GOLDEN_HIST = [
    0.0, -0.06666666667, -0.02888888889, 0.00303703704, 0.01694567901,
    0.01937522634, 0.01677774211, 0.01282584737, 0.00913607579, 0.00622225126,
]


def test_scenario_b_pinned_baseline(ramp, scenario_b):
    r = zero_lag_macd(ramp, scenario_b)

    assert r.fast_zlema.tolist() == pytest.approx(GOLDEN_FAST, abs=1e-9)
    assert r.slow_zlema.tolist() == pytest.approx(GOLDEN_SLOW, abs=1e-9)
    assert r.macd.tolist() == pytest.approx(GOLDEN_MACD, abs=1e-9)
    assert r.signal.tolist() == pytest.approx(GOLDEN_SIGNAL, abs=1e-9)
    assert r.histogram.tolist() == pytest.approx(GOLDEN_HIST, abs=1e-9)


def test_macd_ema_is_computed_separately_from_signal(ramp, scenario_b):
    r = zero_lag_macd(ramp, scenario_b)

    # same length and smoothing here, so same numbers, different arrays
    np.testing.assert_allclose(r.macd_ema, r.signal)
    assert r.macd_ema is not r.signal

    r_sma = zero_lag_macd(ramp, scenario_b.replace(signal_type="sma"))
    np.testing.assert_array_equal(r_sma.macd_ema, r.macd_ema)
    assert not np.allclose(r_sma.signal, r_sma.macd_ema)


@pytest.mark.parametrize("algorithm", ["glaz", "legacy"])
@pytest.mark.parametrize("signal_type", ["ema", "sma"])
def test_length_and_identities(closes, algorithm, signal_type):
    r = zero_lag_macd(closes, algorithm=algorithm, signal_type=signal_type)

    for name in OUTPUTS:
        assert getattr(r, name).shape == (len(closes),)
    np.testing.assert_array_equal(r.macd, r.fast_zlema - r.slow_zlema)
    np.testing.assert_array_equal(r.histogram, r.macd - r.signal)
    assert r.fast_zlema[0] == closes.iloc[0]
    assert r.slow_zlema[0] == closes.iloc[0]


def test_sma_signal_boundary(closes):
    L = 6
    r = zero_lag_macd(closes, signal_type="sma", signal_length=L)

    for i in range(len(closes)):
        window = r.macd[max(0, i - L + 1): i + 1]
        assert r.signal[i] == pytest.approx(window.mean(), abs=1e-12)


@pytest.mark.parametrize("algorithm", ["glaz", "legacy"])
@pytest.mark.parametrize("signal_type", ["ema", "sma"])
def test_scenario_a_constant_prices(algorithm, signal_type):
    r = zero_lag_macd([1.0] * 20, fast=3, slow=7, signal=4, algorithm=algorithm,
                      signal_type=signal_type)

    assert r.fast_zlema.tolist() == pytest.approx([1.0] * 20, abs=1e-12)
    assert r.slow_zlema.tolist() == pytest.approx([1.0] * 20, abs=1e-12)
    assert r.macd.tolist() == pytest.approx([0.0] * 20, abs=1e-12)
    assert r.histogram.tolist() == pytest.approx([0.0] * 20, abs=1e-12)


def test_scenario_c_algorithm_switch_changes_values(ramp, scenario_b):
    legacy = zero_lag_macd(ramp, scenario_b)
    glaz = zero_lag_macd(ramp, scenario_b.replace(algorithm="glaz"))

    assert not np.allclose(legacy.fast_zlema, glaz.fast_zlema)
    assert not np.allclose(legacy.slow_zlema, glaz.slow_zlema)
    assert not np.allclose(legacy.macd, glaz.macd)
    assert len(glaz) == len(legacy) == len(ramp)
    assert glaz.fast_zlema[0] == glaz.slow_zlema[0] == ramp[0]
    # ema1[1] = 5/3, ema2[1] = 13/9 -> 5/3 + 2/9
    assert glaz.fast_zlema[1] == pytest.approx(17.0 / 9.0)


def test_scenario_d_signal_length_leaves_macd_alone(closes):
    a = zero_lag_macd(closes, signal_length=5)
    b = zero_lag_macd(closes, signal_length=15)

    np.testing.assert_array_equal(a.macd, b.macd)
    assert not np.allclose(a.signal, b.signal)
    assert not np.allclose(a.histogram, b.histogram)


def test_deterministic(closes):
    a = zero_lag_macd(closes)
    b = zero_lag_macd(closes)

    for name in OUTPUTS:
        np.testing.assert_array_equal(getattr(a, name), getattr(b, name))


def test_swapped_lengths_negate_macd(closes):
    normal = zero_lag_macd(closes, fast=5, slow=20)
    swapped = zero_lag_macd(closes, fast=20, slow=5)

    np.testing.assert_array_equal(swapped.macd, -normal.macd)


def test_equal_lengths_give_flat_macd(closes):
    r = zero_lag_macd(closes, fast=10, slow=10)

    assert not r.macd.any()
    assert not r.histogram.any()


def test_empty_prices_give_empty_outputs():
    r = zero_lag_macd([])

    assert len(r) == 0
    for name in OUTPUTS:
        assert getattr(r, name).size == 0
    assert r.latest() is None
    assert r.masked() == {k: [] for k in ("fast_zlema", "slow_zlema", "macd", "signal", "histogram")}


def test_single_price():
    r = zero_lag_macd([1.2345])

    assert r.fast_zlema.tolist() == [1.2345]
    assert r.macd.tolist() == [0.0]
    assert r.histogram.tolist() == [0.0]


def test_input_list_is_not_mutated(ramp):
    before = list(ramp)

    zero_lag_macd(ramp)

    assert ramp == before


def test_keyword_overrides_apply_on_top_of_settings(ramp, scenario_b):
    r = zero_lag_macd(ramp, scenario_b, signalLength=5)

    assert r.settings.signal_length == 5
    assert r.settings.algorithm == "legacy"


def test_latest_reports_the_last_index(ramp, scenario_b):
    latest = zero_lag_macd(ramp, scenario_b).latest()

    assert latest["close"] == 10.0
    assert latest["macd"] == pytest.approx(GOLDEN_MACD[-1], abs=1e-9)
    assert latest["histogram"] == pytest.approx(GOLDEN_HIST[-1], abs=1e-9)
    assert latest["fast"] == pytest.approx(GOLDEN_FAST[-1], abs=1e-9)
    assert latest["slow"] == pytest.approx(GOLDEN_SLOW[-1], abs=1e-9)


def test_zlmacd_frame_keeps_the_series_index(closes):
    df = zlmacd(closes, fast=5, slow=10, signal=4, macd_ema=3)

    assert list(df.columns) == [
        "ZLEMAf_5", "ZLEMAs_10", "ZLMACD_5_10_4", "ZLMACDs_5_10_4", "ZLMACDh_5_10_4", "ZLMACDe_3",
    ]
    assert df.index.equals(closes.index)
    assert df.name == "ZLMACD_5_10_4"
    assert df.category == "momentum"
    assert not df.isna().any().any()


def test_zlmacd_masked_and_fillna(closes):
    df = zlmacd(closes, fast=5, slow=10, signal=4, masked=True)
    assert df.iloc[:10].isna().all().all()
    assert df.iloc[10:].notna().all().all()

    filled = zlmacd(closes, fast=5, slow=10, signal=4, masked=True, fillna=0.0)
    assert (filled.iloc[:10] == 0.0).all().all()


def test_to_frame_naming_overrides(ramp, scenario_b):
    r = zero_lag_macd(ramp, scenario_b)

    assert r.to_frame(prefix="EUR").columns[0] == "EUR_ZLEMAf_2"
    assert r.to_frame(suffix="D").columns[-1] == "ZLMACDe_3_D"
    with pytest.raises(ValueError, match="col_names"):
        r.to_frame(col_names=("a", "b"))


def test_zlmacd_accepts_a_plain_list(ramp):
    df = zlmacd(ramp, fast=2, slow=4, signal=3)

    assert isinstance(df.index, pd.RangeIndex)
    assert len(df) == len(ramp)


def test_settings_may_be_a_camel_case_payload(ramp, scenario_b):
    payload = scenario_b.as_params()

    r = zero_lag_macd(ramp, payload)

    assert r.settings == scenario_b
    assert r.macd.tolist() == pytest.approx(GOLDEN_MACD, abs=1e-9)
