"""Rolling standard deviation indicator."""

from tatk.numeric import Num
from .variance import Variance


class StandardDeviation(Variance):
    """Standard deviation of the last ``period`` samples, see ``Variance``."""

    def _measure(self) -> Num:
        return self._buffer.stdev(self._is_sample)
