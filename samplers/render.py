# -*- coding: utf-8 -*-

from samplers.stream import format_value
from samplers.common import DEFAULT_DISPLAY_SIZE

FULL_BLOCK = u'█'
# eighths, from 1/8 up to 7/8
PARTIAL_BLOCKS = (u'▏', u'▎', u'▍', u'▌', u'▋', u'▊', u'▉')
BAR_SEP = u'│'


def render_summary(moments):
    "The summary block, one '<Label>: <value>' line per statistic."
    return [u'%s: %s' % (label, format_value(value))
            for label, value in moments.get_summary()]


def _render_fraction(frac):
    # 1/8 or less rounds away to nothing
    for i in range(len(PARTIAL_BLOCKS), 0, -1):
        if frac > i / 8.0:
            return PARTIAL_BLOCKS[i - 1]
    return u''


def render_bar(count, max_count, display_size=DEFAULT_DISPLAY_SIZE):
    """A bar *display_size* characters long at *max_count*, scaled
    linearly below that, in whole blocks plus one partial block for
    the remainder.
    """
    if not max_count or not count:
        return u''
    num_chars = display_size * (float(count) / max_count)
    whole = int(num_chars)
    return FULL_BLOCK * whole + _render_fraction(num_chars - whole)


def render_bucket(label, count, max_count, display_size=DEFAULT_DISPLAY_SIZE):
    bar = render_bar(count, max_count, display_size)
    return u'%7.3f %s%s %s' % (label, BAR_SEP, bar, count)


def render_histogram(histogram, display_size=DEFAULT_DISPLAY_SIZE):
    """Renders the summary block of *histogram*, followed by a bar per
    bucket. Buckets are labeled by their lower edge, except for the
    trailing overflow sentinel, which is labeled inf. An empty
    histogram renders only the summary.
    """
    ret = render_summary(histogram.moments)
    buckets, max_count = histogram.buckets, histogram.max_count
    for i, bucket in enumerate(buckets):
        if i == len(buckets) - 1:
            label = bucket.upper
        else:
            label = bucket.lower
        ret.append(render_bucket(label, bucket.count, max_count, display_size))
    return ret
