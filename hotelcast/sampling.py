"""Seeded Monte-Carlo draws for arrivals, group sizes and stage durations"""
import logging
import math
from dataclasses import dataclass, fields
import numpy as np
import pandas as pd
from .models import Config, Distributions

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SampleSet:
    """One array of length N per sampled quantity (minutes unless noted)"""
    interarrival: np.ndarray
    group_size: np.ndarray      # ints in 1..max_group_size
    checkin: np.ndarray
    escort_in: np.ndarray
    room_stay: np.ndarray
    escort_out: np.ndarray
    housekeeping: np.ndarray
    room_choice: np.ndarray     # U[0, 1), premium when below premium_share

    def __len__(self):
        return len(self.interarrival)

    def series(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

def make_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(seed)

def lognormal_mu(mean: float, sigma: float) -> float:
    """Underlying normal mu that gives the requested log-normal mean"""
    return math.log(mean) - 0.5 * sigma * sigma

def sample_triangular(rng: np.random.Generator, tri: tuple, n: int) -> np.ndarray:
    left, mode, right = tri
    return rng.triangular(left, mode, right, size=n)

def sample_uniform(rng: np.random.Generator, bounds: tuple, n: int) -> np.ndarray:
    low, high = bounds
    return rng.uniform(low, high, size=n)

def sample_lognormal(rng: np.random.Generator, mean_sigma: tuple, n: int) -> np.ndarray:
    mean, sigma = mean_sigma
    return rng.lognormal(lognormal_mu(mean, sigma), sigma, size=n)

def sample_group_sizes(rng: np.random.Generator, dist: Distributions, n: int) -> np.ndarray:
    """Triangular draw floored to whole guests, capped at max_group_size"""
    raw = sample_triangular(rng, dist.group_size_tri, n)
    return np.clip(np.floor(raw), 1, dist.max_group_size).astype(int)

def draw_samples(cfg: Config, seed: int = None, n: int = None) -> SampleSet:
    """
    Draw every series from a single generator in a fixed order so that one
    seed reproduces the full sample set.
    """
    seed = cfg.simulation.seed if seed is None else seed
    n = cfg.simulation.sample_size if n is None else n
    d = cfg.distributions
    rng = make_rng(seed)

    samples = SampleSet(
        interarrival=sample_triangular(rng, d.interarrival_tri, n),
        group_size=sample_group_sizes(rng, d, n),
        checkin=sample_uniform(rng, d.checkin_uniform, n),
        escort_in=sample_uniform(rng, d.escort_in_uniform, n),
        room_stay=sample_lognormal(rng, d.stay_lognormal, n),
        escort_out=sample_uniform(rng, d.escort_out_uniform, n),
        housekeeping=sample_lognormal(rng, d.housekeeping_lognormal, n),
        room_choice=rng.uniform(0.0, 1.0, size=n),
    )
    logger.debug("Drew %d samples per series with seed %s", n, seed)
    return samples

def describe_samples(samples: SampleSet) -> pd.DataFrame:
    """count / mean / min / max per sampled series"""
    rows = []
    for name, values in samples.series().items():
        rows.append({
            "series": name,
            "count": len(values),
            "mean": float(np.mean(values)),
            "std": float(np.std(values, ddof=1)) if len(values) > 1 else 0.0,
            "min": float(np.min(values)),
            "max": float(np.max(values)),
        })
    return pd.DataFrame(rows)
