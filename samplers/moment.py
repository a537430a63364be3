# -*- coding: utf-8 -*-

from samplers.common import SUMMARY_FIELDS


class MomentAccumulator(object):
    """\
    An accumulator for tracking statistical moments. Supports
    arithmetic mean, variance, standard deviation, and the
    distribution shape-related moments, skewness and kurtosis, in both
    their sample and population forms, plus count, min, and max.

    It operates using online approaches, and does not store
    observations. Every add() updates the running central moment sums
    from the delta between the new value and the previous mean, so
    there is no catastrophic cancellation of the sort you get from
    summing powers and subtracting at the end.

    Statistics that cannot be computed are None, never NaN and never
    0.0. With no data, everything but count is None. With one value,
    both variances are exactly 0.0, and skewness and kurtosis are None
    (0/0), the same as for any dataset where every value is equal.

    NaN and infinite values are not special-cased; they flow through
    the arithmetic like any other float, so whatever depends on them
    comes out non-finite.

    Kurtosis here is plain, not excess, kurtosis. Normal data comes
    out near 3.
    """
    def __init__(self):
        self._count = 0
        self._min = float('inf')
        self._max = float('-inf')
        self._mean = 0.0
        self._m2 = 0.0
        self._m3 = 0.0
        self._m4 = 0.0

    def add(self, val):
        if val != val:
            # NaN poisons the range, comparisons would just skip it
            self._min = self._max = val
        elif val > self._max:
            self._max = val
            if self._count == 0:
                self._min = val
        elif val < self._min:
            self._min = val

        self._count += 1
        n, m2, m3, m4 = self._count, self._m2, self._m3, self._m4
        delta = val - self._mean
        delta_n = delta / n
        delta_n2 = delta_n ** 2
        term = delta * delta_n * (n - 1)
        self._mean = self._mean + delta_n
        self._m4 = (m4 +
                    term * delta_n2 * (n ** 2 - 3 * n + 3) +
                    6 * delta_n2 * m2 -
                    4 * delta_n * m3)
        self._m3 = (m3 +
                    term * delta_n * (n - 2) -
                    3 * delta_n * m2)
        self._m2 = m2 + term

    def add_many(self, vals):
        for val in vals:
            self.add(val)
        return self

    @property
    def count(self):
        return self._count

    @property
    def min(self):
        if not self._count:
            return None
        return self._min

    @property
    def max(self):
        if not self._count:
            return None
        return self._max

    @property
    def mean(self):
        if not self._count:
            return None
        return self._mean

    @property
    def variance(self):
        if not self._count:
            return None
        elif self._count == 1:
            return self._m2  # 0.0, unless the value was non-finite
        return self._m2 / (self._count - 1)

    @property
    def pop_variance(self):
        if not self._count:
            return None
        return self._m2 / self._count

    @property
    def std_dev(self):
        variance = self.variance
        if variance is None:
            return None
        return variance ** 0.5

    @property
    def pop_std_dev(self):
        variance = self.pop_variance
        if variance is None:
            return None
        return variance ** 0.5

    def _shape_defined(self):
        return self._count and self._m2 != 0

    @property
    def skewness(self):
        if not self._shape_defined():
            return None
        return (self._m3 / self._count) / (self.variance ** 1.5)

    @property
    def pop_skewness(self):
        if not self._shape_defined():
            return None
        return (self._m3 / self._count) / (self.pop_variance ** 1.5)

    @property
    def kurtosis(self):
        if not self._shape_defined():
            return None
        return (self._m4 / self._count) / (self.variance ** 2)

    @property
    def pop_kurtosis(self):
        if not self._shape_defined():
            return None
        return (self._m4 / self._count) / (self.pop_variance ** 2)

    def get_summary(self):
        "Returns (label, value) pairs, in report order."
        return [(label, getattr(self, attr)) for label, attr in SUMMARY_FIELDS]

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s count=%r mean=%r>' % (cn, self._count, self.mean)
