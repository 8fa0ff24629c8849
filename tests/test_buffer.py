import math

import numpy as np
import pytest

from tatk.buffer import RollingBuffer
from tatk.errors import InvalidDataError, InvalidSizeError, TAError


class TestRollingBuffer:
    def test_rejects_invalid_capacity(self) -> None:
        with pytest.raises(InvalidSizeError):
            RollingBuffer(0, [1.0])
        with pytest.raises(InvalidSizeError):
            RollingBuffer.from_array(-1, [1.0])

    def test_rejects_empty_data(self) -> None:
        with pytest.raises(InvalidDataError):
            RollingBuffer(3, [])

        # Both errors are TAError and ValueError subclasses.
        with pytest.raises(TAError):
            RollingBuffer(3, np.array([]))
        with pytest.raises(ValueError):
            RollingBuffer(3, [])

    def test_keeps_last_capacity_elements(self) -> None:
        buf = RollingBuffer.from_array(3, [1.0, 2.0, 3.0, 4.0, 5.0])

        assert buf.is_ready() is True
        assert buf.queue() == (3.0, 4.0, 5.0)
        assert buf.oldest() == 3.0
        assert buf.newest() == 5.0
        assert buf.sum() == pytest.approx(12.0)
        assert len(buf) == 3

    def test_partial_fill_grows_without_eviction(self) -> None:
        buf = RollingBuffer(3, [1.0])
        assert buf.is_ready() is False
        assert buf.capacity == 3

        assert buf.shift(2.0) == 0.0
        assert buf.is_ready() is False
        assert buf.shift(3.0) == 0.0
        assert buf.is_ready() is True
        assert buf.queue() == (1.0, 2.0, 3.0)

        # Full from here on: every shift evicts the oldest.
        assert buf.shift(4.0) == 1.0
        assert buf.queue() == (2.0, 3.0, 4.0)
        assert len(buf) == 3

    def test_running_sum_matches_contents_after_every_shift(self) -> None:
        buf = RollingBuffer(4, [0.1, 0.2])
        samples = [0.3, -1.7, 2.25, 10.0, 0.001, -3.5, 7.75, 0.0, 1e-3, 42.0]

        for sample in samples:
            buf.shift(sample)
            assert buf.sum() == pytest.approx(sum(buf.queue()))
            assert buf.mean() == pytest.approx(sum(buf.queue()) / len(buf))

    def test_mean_variance_stdev(self) -> None:
        buf = RollingBuffer(4, [2.0, 4.0, 4.0, 6.0])

        assert buf.mean() == pytest.approx(4.0)
        # Squared deviations: 4 + 0 + 0 + 4 = 8
        assert buf.variance(False) == pytest.approx(2.0)
        assert buf.variance(True) == pytest.approx(8.0 / 3.0)
        assert buf.stdev(False) == pytest.approx(math.sqrt(2.0))
        assert buf.stdev() == pytest.approx(math.sqrt(8.0 / 3.0))

    def test_matches_numpy_on_partial_window(self) -> None:
        buf = RollingBuffer(5, [3.0, 1.0, 4.0])
        data = np.array([3.0, 1.0, 4.0])

        assert buf.mean() == pytest.approx(data.mean())
        assert buf.variance(True) == pytest.approx(data.var(ddof=1))
        assert buf.variance(False) == pytest.approx(data.var(ddof=0))

    def test_single_sample_variance_is_nan(self) -> None:
        buf = RollingBuffer(1, [5.0])

        assert buf.variance(False) == 0.0
        assert math.isnan(buf.variance(True))
        assert math.isnan(buf.stdev(True))

    def test_accepts_as_value_samples(self, make_candles) -> None:
        candles = make_candles(3)
        buf = RollingBuffer(3, candles)

        assert buf.queue() == pytest.approx(tuple(c.close for c in candles))
