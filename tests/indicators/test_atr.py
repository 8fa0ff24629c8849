import pytest

from tatk.errors import InvalidDataError, InvalidSizeError
from tatk.indicators.atr import ATR
from tatk.marketdata import Candle


def candle(h: float, l: float, c: float) -> Candle:
    # open is irrelevant for ATR; set it equal to close for simplicity
    return Candle(
        timestamp="2020-01-01T00:00:00Z",
        open=c,
        high=h,
        low=l,
        close=c,
        volume=1.0,
    )


CANDLES = [
    candle(10, 8, 9),
    candle(11, 9, 10),
    candle(12, 10, 11),
    candle(13, 10, 12),
]


class TestATR:
    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(InvalidSizeError):
            ATR(0, CANDLES)
        with pytest.raises(InvalidSizeError):
            ATR(-1, CANDLES)

    def test_requires_period_plus_one_samples(self) -> None:
        with pytest.raises(InvalidDataError):
            ATR(4, CANDLES)

        assert ATR(3, CANDLES).warmup_periods() == 4

    def test_seed_is_mean_true_range(self) -> None:
        # Candle 1 only supplies prev_close=9
        # Candle 2: TR=max(2,|11-9|=2,|9-9|=0)=2
        # Candle 3: TR=max(2,|12-10|=2,|10-10|=0)=2
        # Candle 4: TR=max(3,|13-11|=2,|10-11|=1)=3
        atr = ATR(3, CANDLES)
        assert atr.value == pytest.approx(7.0 / 3.0)
        assert atr.true_range.value == pytest.approx(3.0)

    def test_known_values_wilder_smoothing(self) -> None:
        atr = ATR(2, CANDLES[:3])
        assert atr.value == pytest.approx(2.0)

        # (2 * (2 - 1) + 3) / 2
        assert atr.next(CANDLES[3]) == pytest.approx(2.5)

        # prev_close=12, TR=max(2, |14-12|=2, |12-12|=0)=2 -> (2.5 + 2) / 2
        assert atr.next(candle(14, 12, 13)) == pytest.approx(2.25)

    def test_incremental_matches_seeded(self) -> None:
        atr = ATR(2, CANDLES[:3])
        atr.next(CANDLES[3])

        assert atr.value == pytest.approx(ATR(2, CANDLES).value)

    def test_tuples_match_candles(self) -> None:
        tuples = [(c.high, c.low, c.close) for c in CANDLES]
        assert ATR(2, tuples).value == pytest.approx(ATR(2, CANDLES).value)

    def test_works_on_generated_candles(self, make_candles) -> None:
        candles = make_candles(30)
        atr = ATR(14, candles[:15])
        for c in candles[15:]:
            assert atr.next(c) > 0
