"""Steady-state M/M/c metrics for each hotel stage"""
import logging
import math
from dataclasses import dataclass, asdict
import numpy as np
import pandas as pd
from .errors import ModelConfigError, UnstableQueueError
from .models import Config
from .sampling import SampleSet

logger = logging.getLogger(__name__)

STAGES = ("reception", "porter_in", "standard_rooms", "premium_rooms", "porter_out", "housekeeping")

@dataclass
class QueueSnapshot:
    """M/M/c metrics for one resource. Rates are per minute, times in minutes."""
    stage: str
    lam: float
    mu: float
    c: int
    offered_load: float   # a = lam / mu
    rho: float
    p0: float
    p_wait: float         # Erlang-C probability an arrival queues
    L: float
    Lq: float
    w: float
    wq: float

def erlang_b(a: float, c: int) -> float:
    """Erlang-B blocking probability via B(n) = a*B(n-1) / (n + a*B(n-1)), B(0) = 1"""
    b = 1.0
    for n in range(1, c + 1):
        b = a * b / (n + a * b)
    return b

def erlang_c(a: float, c: int) -> float:
    """
    Probability an arrival has to queue. Equivalent to
    [a^c/(c!(1-rho))] / [sum_{n<c} a^n/n! + a^c/(c!(1-rho))]
    but built from the Erlang-B recurrence so it stays finite for large c.
    """
    b = erlang_b(a, c)
    rho = a / c
    return b / (1.0 - rho * (1.0 - b))

def idle_probability(a: float, c: int, p_wait: float) -> float:
    """P0 = C * (1 - rho) * c! / a^c, evaluated in log space (underflows to 0 for huge a)"""
    if p_wait == 0.0:
        # no queueing at all: the idle probability is the Poisson term e^-a
        return math.exp(-a)
    rho = a / c
    log_p0 = math.log(p_wait) + math.log1p(-rho) + math.lgamma(c + 1) - c * math.log(a)
    return math.exp(log_p0)

def mmc_metrics(lam: float, mu: float, c: int, stage: str = "queue") -> QueueSnapshot:
    """
    Steady-state M/M/c metrics.

    Raises ModelConfigError for non-positive rates or c < 1 and
    UnstableQueueError when rho = lam / (c * mu) >= 1.
    """
    if not (lam > 0 and np.isfinite(lam)):
        raise ModelConfigError(f"{stage}: arrival rate must be positive, got {lam}")
    if not (mu > 0 and np.isfinite(mu)):
        raise ModelConfigError(f"{stage}: service rate must be positive, got {mu}")
    if int(c) != c or c < 1:
        raise ModelConfigError(f"{stage}: channel count must be an integer >= 1, got {c}")
    c = int(c)

    a = lam / mu
    rho = a / c
    if rho >= 1.0:
        raise UnstableQueueError(stage, lam, mu, c)

    p_wait = erlang_c(a, c)
    p0 = idle_probability(a, c, p_wait)
    Lq = p_wait * rho / (1.0 - rho)
    wq = Lq / lam
    w = wq + 1.0 / mu
    L = Lq + a

    return QueueSnapshot(
        stage=stage, lam=lam, mu=mu, c=c,
        offered_load=a, rho=rho, p0=p0, p_wait=p_wait,
        L=L, Lq=Lq, w=w, wq=wq,
    )

def arrival_rate(samples: SampleSet) -> float:
    """Shared guest arrival-rate estimate: mean group size / mean inter-arrival (guests/min)"""
    return float(np.mean(samples.group_size) / np.mean(samples.interarrival))

def service_rate(durations: np.ndarray) -> float:
    """mu = 1 / sampled mean service time"""
    return 1.0 / float(np.mean(durations))

def stage_inputs(cfg: Config, samples: SampleSet) -> dict:
    """(lam, mu, c) per stage; rooms split the arrival stream by the premium share"""
    lam = arrival_rate(samples)
    share = cfg.pricing.premium_share
    st = cfg.staffing
    return {
        "reception":      (lam,                 service_rate(samples.checkin),      st.receptionists),
        "porter_in":      (lam,                 service_rate(samples.escort_in),    st.porters),
        "standard_rooms": (lam * (1.0 - share), service_rate(samples.room_stay),    cfg.rooms.standard_rooms),
        "premium_rooms":  (lam * share,         service_rate(samples.room_stay),    cfg.rooms.premium_rooms),
        "porter_out":     (lam,                 service_rate(samples.escort_out),   st.porters),
        "housekeeping":   (lam,                 service_rate(samples.housekeeping), st.housekeepers),
    }

def stage_snapshots(cfg: Config, samples: SampleSet) -> dict:
    """
    One QueueSnapshot per stage, each computed independently.
    A stage that receives no traffic (e.g. premium_share == 0) is skipped.
    """
    snapshots = {}
    for stage, (lam, mu, c) in stage_inputs(cfg, samples).items():
        if lam == 0:
            logger.info("Stage %s receives no arrivals; skipped", stage)
            continue
        snapshots[stage] = mmc_metrics(lam, mu, c, stage=stage)
        logger.debug("%s: rho=%.3f Lq=%.3f wq=%.3f", stage, snapshots[stage].rho,
                     snapshots[stage].Lq, snapshots[stage].wq)
    return snapshots

def snapshots_frame(snapshots: dict) -> pd.DataFrame:
    return pd.DataFrame([asdict(s) for s in snapshots.values()])
