# -*- coding: utf-8 -*-
"""Samplers for the common distributions. Each sampler returns an
infinite iterator drawing from a numpy Generator passed in by the
caller, so that a seed fully determines the output, and nothing
touches numpy's global random state.

Parameters are checked when the sampler is created, not on the first
draw. Values come out as plain Python floats and ints.
"""

import math
from functools import partial
from itertools import islice

import numpy as np

# values drawn per call into the generator
BATCH_SIZE = 1024

MAX_INT = int(np.iinfo(np.int64).max)
MIN_INT = int(np.iinfo(np.int64).min)
# past this numpy can't return the count as an int64
POISSON_MAX_LAM = MAX_INT - 10 * math.sqrt(MAX_INT)


def get_rng(seed=None):
    return np.random.default_rng(seed)


def take(iterable, count):
    if count < 0:
        raise ValueError('expected non-negative count, not %r' % count)
    return islice(iterable, count)


def _draw_forever(draw, *a):
    while True:
        for val in draw(*a, size=BATCH_SIZE).tolist():
            yield val


def _check_whole(val, name, lower=MIN_INT):
    if not math.isfinite(val) or int(val) != val:
        raise ValueError('expected whole number %s, not %r' % (name, val))
    if not lower <= val <= MAX_INT:
        raise ValueError('expected %s between %r and %r, not %r'
                         % (name, lower, MAX_INT, val))
    return int(val)


def gaussian(rng, mean=0.0, variance=1.0):
    "Normal distribution, parameterized by variance, not std_dev."
    if not math.isfinite(mean):
        raise ValueError('expected finite mean, not %r' % mean)
    if not 0 <= variance < float('inf'):
        raise ValueError('expected finite, non-negative variance, not %r'
                         % variance)
    return _draw_forever(rng.normal, mean, math.sqrt(variance))


def exponential(rng, lam=1.0):
    if not 0 < lam < float('inf'):
        raise ValueError('expected finite, positive rate (lambda), not %r'
                         % lam)
    scale = 1.0 / lam
    if not math.isfinite(scale):
        raise ValueError('rate (lambda) too small: %r' % lam)
    return _draw_forever(rng.exponential, scale)


def continuous_uniform(rng, lower=0.0, upper=1.0):
    "Uniform over [lower, upper)."
    if not lower < upper:
        raise ValueError('expected lower < upper, not %r >= %r'
                         % (lower, upper))
    if not math.isfinite(upper - lower):
        raise ValueError('expected a finite range, not %r to %r'
                         % (lower, upper))
    # rounding can land on upper, skip those
    return (val for val in _draw_forever(rng.uniform, lower, upper)
            if val < upper)


def discrete_uniform(rng, lower=0, upper=1):
    "Uniform over the integers lower, lower + 1, ..., upper."
    lower = _check_whole(lower, 'lower bound')
    upper = _check_whole(upper, 'upper bound')
    if not lower <= upper:
        raise ValueError('expected lower <= upper, not %r > %r'
                         % (lower, upper))
    return _draw_forever(partial(rng.integers, endpoint=True), lower, upper)


def poisson(rng, lam=1.0):
    if not 0 < lam <= POISSON_MAX_LAM:
        raise ValueError('expected positive mean (lambda) up to %r, not %r'
                         % (POISSON_MAX_LAM, lam))
    return _draw_forever(rng.poisson, lam)


def binomial(rng, n=1, p=0.5):
    n = _check_whole(n, 'number of trials', lower=0)
    if not 0.0 <= p <= 1.0:
        raise ValueError('expected probability between 0 and 1, not %r' % p)
    return _draw_forever(rng.binomial, n, p)
