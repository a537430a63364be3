# -*- coding: utf-8 -*-

from samplers.moment import MomentAccumulator
from samplers.histogram import HistogramBinner, BoundedHistogramBinner
from samplers.render import (render_bar,
                             render_summary,
                             render_histogram,
                             FULL_BLOCK)


def test_render_bar():
    assert render_bar(0, 10) == u''
    assert render_bar(5, 0) == u''
    assert render_bar(10, 10, 80) == FULL_BLOCK * 80
    assert render_bar(5, 10, 80) == FULL_BLOCK * 40
    assert render_bar(1, 3, 4) == FULL_BLOCK + u'▎'
    assert render_bar(1, 16, 1) == u''  # 1/16 is too small to draw
    assert render_bar(15, 16, 1) == u'▉'


def test_render_summary():
    lines = render_summary(MomentAccumulator().add_many([1, 2, 3, 4, 5]))
    assert lines[:5] == [u'Count: 5',
                         u'Minimum: 1',
                         u'Maximum: 5',
                         u'Mean: 3.0',
                         u'Variance: 2.5']
    assert u'Population variance: 2.0' in lines
    assert len(lines) == 12


def test_render_summary_empty():
    lines = render_summary(MomentAccumulator())
    assert lines[0] == u'Count: 0'
    assert len(lines) == 12
    for line in lines[1:]:
        assert line.endswith(u': undefined')


def test_render_summary_single():
    lines = dict([line.split(u': ') for line in
                  render_summary(MomentAccumulator().add_many([2.0]))])
    assert lines[u'Variance'] == u'0.0'
    assert lines[u'Population standard deviation'] == u'0.0'
    assert lines[u'Skewness'] == u'undefined'
    assert lines[u'Population kurtosis'] == u'undefined'


def test_render_histogram():
    hist = HistogramBinner().add_many([1, 2, 3, 4, 5]).get_histogram()
    lines = render_histogram(hist, display_size=10)
    assert len(lines) == 12 + 4 + 2
    bars = lines[12:]
    assert bars[0] == u'   -inf │ 0'
    assert bars[1] == u'  1.000 │' + FULL_BLOCK * 5 + u' 1'
    assert bars[4] == u'  4.000 │' + FULL_BLOCK * 10 + u' 2'
    assert bars[-1] == u'    inf │ 0'


def test_render_histogram_empty():
    lines = render_histogram(HistogramBinner().get_histogram())
    assert len(lines) == 12
    assert lines[0] == u'Count: 0'


def test_render_histogram_sentinels():
    binner = BoundedHistogramBinner(0, 1, num_buckets=2)
    binner.add_many([-1, -2, 0.25, 7])
    lines = render_histogram(binner.get_histogram(), display_size=4)
    bars = lines[12:]
    assert bars == [u'   -inf │' + FULL_BLOCK * 4 + u' 2',
                    u'  0.000 │' + FULL_BLOCK * 2 + u' 1',
                    u'  0.500 │ 0',
                    u'    inf │' + FULL_BLOCK * 2 + u' 1']
