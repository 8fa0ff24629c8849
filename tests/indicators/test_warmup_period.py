import pytest

from tatk.errors import InvalidDataError
from tatk.indicators import (
    ATR,
    DEMA,
    EMA,
    MACD,
    OBV,
    ROC,
    RSI,
    SMA,
    BollingerBands,
    LinearRegression,
    McGinleyDynamic,
    StandardDeviation,
    TrueRange,
    Variance,
)


CLOSE_INDICATORS = [
    (lambda data: SMA(14, data), 14),
    (lambda data: EMA(14, data), 14),
    (lambda data: DEMA(14, data), 27),
    (lambda data: MACD(12, 26, 9, data), 26 + 9 - 1),
    (lambda data: BollingerBands(20, data), 20),
    (lambda data: McGinleyDynamic(14, data), 15),
    (lambda data: LinearRegression(14, data), 14),
    (lambda data: RSI(14, data), 15),
    (lambda data: ROC(14, data), 15),
    (lambda data: Variance(14, data), 14),
    (lambda data: StandardDeviation(14, data), 14),
]

CANDLE_INDICATORS = [
    (lambda data: TrueRange(14, data), 15),
    (lambda data: ATR(14, data), 15),
    (lambda data: OBV(14, data), 14),
]


class TestIndicatorWarmupPeriods:
    @pytest.mark.parametrize("factory, expected", CLOSE_INDICATORS)
    def test_close_indicators_seed_on_warmup_boundary(
        self, factory, expected, make_candles
    ):
        closes = [c.close for c in make_candles(expected)]

        with pytest.raises(InvalidDataError):
            factory(closes[:-1])

        indicator = factory(closes)
        assert indicator.warmup_periods() == expected

    @pytest.mark.parametrize("factory, expected", CANDLE_INDICATORS)
    def test_candle_indicators_seed_on_warmup_boundary(
        self, factory, expected, make_candles
    ):
        candles = make_candles(expected)

        with pytest.raises(InvalidDataError):
            factory(candles[:-1])

        indicator = factory(candles)
        assert indicator.warmup_periods() == expected

    @pytest.mark.parametrize("factory, expected", CLOSE_INDICATORS)
    def test_seeded_from_candles_matches_closes(self, factory, expected, make_candles):
        candles = make_candles(expected + 5)
        closes = [c.close for c in candles]

        assert float(factory(candles).value) == pytest.approx(
            float(factory(closes).value), nan_ok=True
        )
