# -*- coding: utf-8 -*-

import pytest

from samplers import distributions as dists
from samplers.moment import MomentAccumulator


def _moments(samples, count=20000):
    return MomentAccumulator().add_many(dists.take(samples, count))


def test_seeded_rng_repeats():
    first = list(dists.take(dists.gaussian(dists.get_rng(42)), 10))
    second = list(dists.take(dists.gaussian(dists.get_rng(42)), 10))
    assert first == second
    assert len(first) == 10


def test_take():
    assert list(dists.take(dists.gaussian(dists.get_rng(1)), 0)) == []
    with pytest.raises(ValueError):
        dists.take([], -1)


def test_gaussian():
    ma = _moments(dists.gaussian(dists.get_rng(1), mean=10.0, variance=4.0))
    assert abs(ma.mean - 10.0) < 0.1
    assert abs(ma.variance - 4.0) < 0.2

    const = list(dists.take(dists.gaussian(dists.get_rng(1), 3.0, 0.0), 3))
    assert const == [3.0, 3.0, 3.0]


def test_exponential():
    ma = _moments(dists.exponential(dists.get_rng(2), lam=4.0))
    assert abs(ma.mean - 0.25) < 0.02
    assert ma.min >= 0


def test_poisson():
    for lam in (0.5, 3.0, 25.0, 400.0):
        samples = dists.take(dists.poisson(dists.get_rng(3), lam), 20000)
        samples = list(samples)
        assert all([isinstance(s, int) and s >= 0 for s in samples])
        ma = MomentAccumulator().add_many(samples)
        assert abs(ma.mean - lam) < 0.05 * lam + 0.05
        assert abs(ma.variance - lam) < 0.1 * lam + 0.1


def test_binomial():
    for n, p in ((1, 0.5), (10, 0.2), (50, 0.9), (1000, 0.01)):
        samples = list(dists.take(dists.binomial(dists.get_rng(4), n, p),
                                  20000))
        assert all([0 <= s <= n for s in samples])
        ma = MomentAccumulator().add_many(samples)
        assert abs(ma.mean - n * p) < 0.05 * n * p + 0.05

    assert set(dists.take(dists.binomial(dists.get_rng(4), 7, 0.0), 5)) == {0}
    assert set(dists.take(dists.binomial(dists.get_rng(4), 7, 1.0), 5)) == {7}
    assert set(dists.take(dists.binomial(dists.get_rng(4), 0, 0.5), 5)) == {0}


def test_uniform():
    ma = _moments(dists.continuous_uniform(dists.get_rng(5), -1.0, 3.0))
    assert ma.min >= -1.0
    assert ma.max < 3.0
    assert abs(ma.mean - 1.0) < 0.05

    samples = list(dists.take(dists.discrete_uniform(dists.get_rng(5), 1, 6),
                              5000))
    assert set(samples) == set(range(1, 7))

    assert set(dists.take(dists.discrete_uniform(dists.get_rng(5), 2, 2),
                          5)) == {2}


def test_bad_params():
    rng = dists.get_rng(6)
    with pytest.raises(ValueError):
        dists.gaussian(rng, variance=-1.0)
    with pytest.raises(ValueError):
        dists.exponential(rng, lam=0.0)
    with pytest.raises(ValueError):
        dists.poisson(rng, lam=-2.0)
    with pytest.raises(ValueError):
        dists.binomial(rng, n=-1)
    with pytest.raises(ValueError):
        dists.binomial(rng, n=2.5)
    with pytest.raises(ValueError):
        dists.binomial(rng, p=1.5)
    with pytest.raises(ValueError):
        dists.continuous_uniform(rng, 1.0, 1.0)
    with pytest.raises(ValueError):
        dists.discrete_uniform(rng, 2, 1)
    with pytest.raises(ValueError):
        dists.discrete_uniform(rng, 0.5, 1)


def test_nonfinite_params():
    rng = dists.get_rng(7)
    inf, nan = float('inf'), float('nan')
    for lam in (inf, nan, 1e300):
        with pytest.raises(ValueError):
            dists.poisson(rng, lam)
    for lam in (inf, nan):
        with pytest.raises(ValueError):
            dists.exponential(rng, lam)
    for variance in (inf, nan):
        with pytest.raises(ValueError):
            dists.gaussian(rng, variance=variance)
    with pytest.raises(ValueError):
        dists.gaussian(rng, mean=nan)
    with pytest.raises(ValueError):
        dists.binomial(rng, n=inf)
    with pytest.raises(ValueError):
        dists.binomial(rng, p=nan)
    with pytest.raises(ValueError):
        dists.discrete_uniform(rng, -inf, 1)
    with pytest.raises(ValueError):
        dists.discrete_uniform(rng, 0, 1e300)


def test_uniform_wide_range():
    rng = dists.get_rng(8)
    # the width of this range is not a float
    with pytest.raises(ValueError):
        dists.continuous_uniform(rng, -1e308, 1e308)
    with pytest.raises(ValueError):
        dists.continuous_uniform(rng, -float('inf'), 0.0)

    samples = list(dists.take(dists.continuous_uniform(rng, -8e307, 8e307),
                              100))
    assert len(samples) == 100
    assert all([-8e307 <= s < 8e307 for s in samples])


def test_draw_types():
    rng = dists.get_rng(9)
    floats = list(dists.take(dists.gaussian(rng), 3))
    floats += list(dists.take(dists.exponential(rng), 3))
    floats += list(dists.take(dists.continuous_uniform(rng), 3))
    assert all([type(v) is float for v in floats])
    ints = list(dists.take(dists.poisson(rng, 2.0), 3))
    ints += list(dists.take(dists.binomial(rng, 5, 0.5), 3))
    ints += list(dists.take(dists.discrete_uniform(rng, -3, 3), 3))
    assert all([type(v) is int for v in ints])
