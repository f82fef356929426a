"""Sampler ranges and reproducibility"""
import math
import numpy as np
import pytest
from hotelcast.models import Config, Distributions
from hotelcast.sampling import (
    draw_samples, describe_samples, lognormal_mu, sample_group_sizes, make_rng
)

def test_draws_have_requested_length():
    cfg = Config()
    s = draw_samples(cfg)
    assert len(s) == 1000
    for name, values in s.series().items():
        assert len(values) == 1000, name

def test_triangular_and_uniform_within_declared_bounds():
    cfg = Config()
    d = cfg.distributions
    s = draw_samples(cfg)
    assert s.interarrival.min() >= d.interarrival_tri[0]
    assert s.interarrival.max() <= d.interarrival_tri[2]
    for name, (lo, hi) in [("checkin", d.checkin_uniform),
                           ("escort_in", d.escort_in_uniform),
                           ("escort_out", d.escort_out_uniform)]:
        values = getattr(s, name)
        assert values.min() >= lo and values.max() <= hi, name
    assert s.room_choice.min() >= 0.0 and s.room_choice.max() < 1.0

def test_lognormal_draws_positive():
    s = draw_samples(Config())
    assert (s.room_stay > 0).all()
    assert (s.housekeeping > 0).all()

def test_lognormal_mean_conversion():
    # mean of a log-normal is exp(mu + sigma^2 / 2)
    mu = lognormal_mu(180.0, 0.5)
    assert abs(math.exp(mu + 0.5 * 0.5 ** 2) - 180.0) < 1e-9

def test_sample_means_near_targets():
    s = draw_samples(Config())
    assert abs(s.interarrival.mean() - 3.0) < 0.2     # (1 + 2 + 6) / 3
    assert abs(s.checkin.mean() - 2.0) < 0.1
    assert abs(s.room_stay.mean() - 180.0) < 15.0
    assert abs(s.housekeeping.mean() - 20.0) < 1.5

def test_group_sizes_are_one_to_three():
    s = draw_samples(Config())
    assert s.group_size.dtype.kind == "i"
    assert set(np.unique(s.group_size)) <= {1, 2, 3}
    # floor of Tri(1, 1, 4): P(1) = 5/9, so singles dominate
    assert (s.group_size == 1).mean() > 0.45

def test_group_size_cap_applies():
    d = Distributions(group_size_tri=(1.0, 3.5, 4.0), max_group_size=3)
    sizes = sample_group_sizes(make_rng(7), d, 500)
    assert sizes.max() <= 3

def test_same_seed_reproduces_samples():
    cfg = Config()
    a = draw_samples(cfg, seed=123)
    b = draw_samples(cfg, seed=123)
    for name in a.series():
        assert np.array_equal(getattr(a, name), getattr(b, name)), name

def test_different_seeds_differ():
    cfg = Config()
    a = draw_samples(cfg, seed=1)
    b = draw_samples(cfg, seed=2)
    assert not np.array_equal(a.interarrival, b.interarrival)

def test_describe_samples_table():
    df = describe_samples(draw_samples(Config(), n=200))
    assert list(df["series"]) == ["interarrival", "group_size", "checkin", "escort_in",
                                  "room_stay", "escort_out", "housekeeping", "room_choice"]
    assert (df["count"] == 200).all()
    assert (df["min"] <= df["mean"]).all() and (df["mean"] <= df["max"]).all()
