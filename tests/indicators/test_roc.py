import math
import warnings

import pytest

from tatk.errors import InvalidDataError, InvalidSizeError
from tatk.indicators.roc import ROC


class TestROC:
    def test_rejects_invalid_input(self) -> None:
        with pytest.raises(InvalidSizeError):
            ROC(1, [1.0, 2.0, 3.0])
        with pytest.raises(InvalidDataError):
            ROC(3, [1.0, 2.0, 3.0])

    def test_reference_values(self, talib_small) -> None:
        roc = ROC(10, talib_small[:-1])
        assert roc.value == pytest.approx(1.4504788794773873)
        assert roc.next(talib_small[-1]) == pytest.approx(-2.806315561803827)

    def test_compares_against_period_ago(self) -> None:
        roc = ROC(2, [10.0, 11.0, 12.0])
        assert roc.value == pytest.approx(20.0)

        # 11 vs 11 two samples back
        assert roc.next(11.0) == pytest.approx(0.0)
        # 6 vs 12 two samples back
        assert roc.next(6.0) == pytest.approx(-50.0)

    def test_incremental_matches_seeded(self, talib_small) -> None:
        roc = ROC(10, talib_small[:11])
        for close in talib_small[11:]:
            roc.next(close)

        assert roc.value == pytest.approx(ROC(10, talib_small).value)

    def test_zero_base_is_infinite(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            roc = ROC(2, [0.0, 1.0, 2.0])

        assert math.isinf(roc.value)
        assert roc.value > 0
