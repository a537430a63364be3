# -*- coding: utf-8 -*-
"""Histograms need the range of the data before the first value can be
put in a bucket. Two ways around that:

  * HistogramBinner keeps every observation until the end of the
    stream, then derives the edges from the observed min and max. This
    is the one place samplers trades constant memory for correctness,
    and it is on purpose: a chart with made-up bounds is worse than
    one that costs a float per value.
  * BoundedHistogramBinner takes the bounds up front and counts in a
    single pass without storing anything. Values outside the bounds go
    to the sentinel buckets.

Both feed a MomentAccumulator along the way, so the histogram report
can carry the full summary.
"""

import math
import array
from bisect import bisect_right
from collections import namedtuple

from boltons.iterutils import pairwise
from boltons.cacheutils import cachedproperty

from samplers.context import note
from samplers.moment import MomentAccumulator
from samplers.common import DEFAULT_MAX_BUCKETS, DEFAULT_BOUNDED_BUCKETS


NEG_INF, POS_INF = float('-inf'), float('inf')

Bucket = namedtuple('Bucket', 'lower upper count')


def _check_num_buckets(num_buckets, name='num_buckets'):
    try:
        ret = int(num_buckets)
    except (TypeError, ValueError):
        raise TypeError('expected integer %s, not %r' % (name, num_buckets))
    if ret < 1 or ret != num_buckets:
        raise ValueError('expected %s to be a whole number >= 1, not %r'
                         % (name, num_buckets))
    return ret


def get_bucket_count(count, max_buckets=DEFAULT_MAX_BUCKETS):
    """Sturges' rule, ceil(log2(count)) + 1, kept within 1 and
    *max_buckets*. No data means no buckets.

    >>> [get_bucket_count(c) for c in (0, 1, 2, 5, 100, 10 ** 9)]
    [0, 1, 2, 4, 8, 31]
    """
    max_buckets = _check_num_buckets(max_buckets, 'max_buckets')
    if count < 1:
        return 0
    ret = int(math.ceil(math.log2(count))) + 1
    return max(1, min(ret, max_buckets))


def get_edges(lower, upper, bucket_count):
    """Returns ``bucket_count + 1`` evenly-spaced, sorted edges from
    *lower* to *upper*. The first and last edges are exactly *lower*
    and *upper*. A zero-width range always gets a single bucket. A
    range only a few floats wide can yield repeated edges, and so
    empty buckets.
    """
    bucket_count = _check_num_buckets(bucket_count, 'bucket_count')
    if lower > upper:
        raise ValueError('expected lower <= upper, not %r > %r'
                         % (lower, upper))
    if lower == upper:
        return [lower, upper]
    width = upper - lower
    ret = [lower]
    for i in range(1, bucket_count):
        t = float(i) / bucket_count
        if math.isfinite(width):
            edge = lower + width * t
        else:
            # range spans more than the largest float
            edge = lower * (1 - t) + upper * t
        # rounding can step backward or past upper on narrow ranges
        ret.append(min(max(edge, ret[-1]), upper))
    ret.append(upper)
    return ret


class BucketCounter(object):
    """Tallies values against fixed, sorted *edges*. Each bucket is
    closed on the left, open on the right, except the last, which is
    closed on both sides so the upper edge itself gets counted.

    Values below the first edge are underflow, values above the last
    edge are overflow. NaN doesn't compare to anything, and is counted
    as overflow, so that every value lands somewhere.
    """
    def __init__(self, edges):
        try:
            edges = [float(e) for e in edges]
        except (TypeError, ValueError):
            raise TypeError('expected iterable of numeric edges, not %r'
                            % (edges,))
        if len(edges) < 2:
            raise ValueError('expected at least two edges, not %r' % (edges,))
        if any([math.isnan(e) for e in edges]):
            raise ValueError('expected non-NaN edges, not %r' % (edges,))
        if edges != sorted(edges):
            raise ValueError('expected sorted edges, not %r' % (edges,))
        self.edges = edges
        self.counts = [0] * (len(edges) - 1)
        self.underflow = 0
        self.overflow = 0

    def add(self, val):
        edges = self.edges
        if val < edges[0]:
            self.underflow += 1
        elif val > edges[-1] or val != val:
            self.overflow += 1
        else:
            idx = min(bisect_right(edges, val) - 1, len(self.counts) - 1)
            self.counts[idx] += 1
        return

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s buckets=%r underflow=%r overflow=%r>'
                % (cn, len(self.counts), self.underflow, self.overflow))


class Histogram(object):
    """The finished product of a binner: edges, per-bucket counts, the
    two sentinel counts, and the MomentAccumulator that saw the same
    values.

    An empty histogram (no data) has no edges and no buckets at all.
    """
    def __init__(self, edges, counts, underflow, overflow, moments):
        if edges and len(edges) != len(counts) + 1:
            raise ValueError('expected one more edge than count, got %r'
                             ' edges and %r counts' % (len(edges), len(counts)))
        self.edges = list(edges)
        self.counts = list(counts)
        self.underflow = underflow
        self.overflow = overflow
        self.moments = moments

    @property
    def bucket_count(self):
        return len(self.counts)

    @property
    def total(self):
        return sum(self.counts) + self.underflow + self.overflow

    @cachedproperty
    def buckets(self):
        "All buckets, led by the -inf sentinel and trailed by the inf one."
        if not self.moments.count:
            return []
        if not self.edges:
            return [Bucket(NEG_INF, POS_INF, self.underflow),
                    Bucket(NEG_INF, POS_INF, self.overflow)]
        ret = [Bucket(NEG_INF, self.edges[0], self.underflow)]
        for (lower, upper), count in zip(pairwise(self.edges), self.counts):
            ret.append(Bucket(lower, upper, count))
        ret.append(Bucket(self.edges[-1], POS_INF, self.overflow))
        return ret

    @cachedproperty
    def max_count(self):
        return max([b.count for b in self.buckets] or [0])

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s buckets=%r total=%r>'
                % (cn, self.bucket_count, self.total))


class HistogramBinner(object):
    """Buffers every value, and bins them when asked for the
    histogram. The bucket count is *num_buckets* if given, otherwise
    get_bucket_count() of the number of values, capped at
    *max_buckets*.

    Edges are derived from the finite values only. -inf counts as
    underflow, inf and NaN as overflow. A dataset where every finite
    value is the same gets a single zero-width bucket.

    Either end of the range can be pinned with *lower* or *upper*,
    values beyond a pinned end go to the sentinel buckets.
    """
    def __init__(self, num_buckets=None, max_buckets=DEFAULT_MAX_BUCKETS,
                 lower=None, upper=None):
        if num_buckets is not None:
            num_buckets = _check_num_buckets(num_buckets)
        self.num_buckets = num_buckets
        self.max_buckets = _check_num_buckets(max_buckets, 'max_buckets')
        for bound in (lower, upper):
            if bound is not None and not math.isfinite(bound):
                raise ValueError('expected finite bounds, not %r' % (bound,))
        self.lower, self.upper = lower, upper
        self.moments = MomentAccumulator()
        self._data = array.array('d')
        self._finite_min = POS_INF
        self._finite_max = NEG_INF

    def add(self, val):
        self._data.append(val)
        self.moments.add(val)
        if NEG_INF < val < POS_INF:
            if val < self._finite_min:
                self._finite_min = val
            if val > self._finite_max:
                self._finite_max = val

    def add_many(self, vals):
        for val in vals:
            self.add(val)
        return self

    @property
    def count(self):
        return len(self._data)

    def get_edges(self):
        lower, upper = self.lower, self.upper
        if lower is None:
            lower = self._finite_min
        if upper is None:
            upper = self._finite_max
        if not self.count or not (NEG_INF < lower < POS_INF
                                  and NEG_INF < upper < POS_INF):
            # nothing, or nothing finite on an unpinned end
            return []
        if lower > upper:
            raise ValueError('expected lower <= upper bound, not %r > %r'
                             % (lower, upper))
        if self.num_buckets:
            bucket_count = self.num_buckets
            note('histogram', 'using %r requested buckets', bucket_count)
        else:
            bucket_count = get_bucket_count(self.count, self.max_buckets)
            note('histogram', 'using %r buckets for %r values',
                 bucket_count, self.count)
        if lower == upper:
            note('histogram', 'zero-width range at %r, using a single bucket',
                 lower)
        return get_edges(lower, upper, bucket_count)

    def get_histogram(self):
        edges = self.get_edges()
        if not edges:
            underflow = len([v for v in self._data if v == NEG_INF])
            return Histogram([], [], underflow, self.count - underflow,
                             self.moments)
        counter = BucketCounter(edges)
        for val in self._data:
            counter.add(val)
        return Histogram(counter.edges, counter.counts,
                         counter.underflow, counter.overflow, self.moments)

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s count=%r num_buckets=%r>' % (cn, self.count,
                                                 self.num_buckets)


class BoundedHistogramBinner(object):
    """Bins values between *lower* and *upper* as they arrive, in
    constant memory. Both bounds are required, must be finite, and
    *lower* can't exceed *upper*.
    """
    def __init__(self, lower, upper, num_buckets=DEFAULT_BOUNDED_BUCKETS):
        lower, upper = float(lower), float(upper)
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise ValueError('expected finite bounds, not %r and %r'
                             % (lower, upper))
        if lower > upper:
            raise ValueError('expected lower <= upper bound, not %r > %r'
                             % (lower, upper))
        self.lower, self.upper = lower, upper
        self.num_buckets = _check_num_buckets(num_buckets)
        if lower == upper and self.num_buckets > 1:
            note('histogram', 'zero-width bounds at %r, using a single bucket',
                 lower)
        self.moments = MomentAccumulator()
        self._counter = BucketCounter(get_edges(lower, upper,
                                                self.num_buckets))

    def add(self, val):
        self._counter.add(val)
        self.moments.add(val)

    def add_many(self, vals):
        for val in vals:
            self.add(val)
        return self

    @property
    def count(self):
        return self.moments.count

    def get_histogram(self):
        counter = self._counter
        return Histogram(counter.edges, counter.counts,
                         counter.underflow, counter.overflow, self.moments)

    def __repr__(self):
        cn = self.__class__.__name__
        return ('<%s lower=%r upper=%r count=%r>'
                % (cn, self.lower, self.upper, self.count))
