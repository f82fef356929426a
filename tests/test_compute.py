"""End-to-end pipeline checks with the fixed seed"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from hotelcast import compute, Config, ModelConfigError, UnstableQueueError
from hotelcast.models import Staffing, Simulation
from hotelcast.queueing import STAGES

def test_result_sections_present():
    res = compute()
    for key in ("seed", "bounds", "samples", "sample_summary", "arrival_rate", "queues",
                "queue_table", "ledger", "ledger_summary", "horizon", "profit",
                "realised", "guardrails", "warnings"):
        assert key in res, key
    assert res["seed"] == 42
    assert tuple(res["queues"]) == STAGES

def test_profit_estimate_between_bound_profits():
    """Seed fixed, N = 1000: estimate within [minrev - expenses, maxrev - expenses]"""
    res = compute(Config())
    b = res["bounds"]
    p = res["profit"]
    assert b.min_revenue - b.fixed_expenses <= p.profit <= b.max_revenue - b.fixed_expenses
    assert p.within_bounds
    assert res["realised"].within_bounds

def test_all_guardrails_pass_for_defaults():
    res = compute()
    failed = [g["name"] for g in res["guardrails"] if not g["pass"]]
    assert failed == []
    assert all(g["status"] == "✓" for g in res["guardrails"])

def test_cutoff_reached_before_horizon_is_reported():
    """600 guests arrive well inside the 1440-minute day"""
    res = compute()
    assert res["horizon"].guests_after_horizon == 0
    assert res["horizon"].cutoff_reached_at < 1440
    assert any("not simulated" in w for w in res["warnings"])

def test_compute_is_reproducible():
    a = compute()
    b = compute()
    assert a["ledger"].equals(b["ledger"])
    assert a["arrival_rate"] == b["arrival_rate"]

def test_seed_override():
    res = compute(Config(), seed=7)
    assert res["seed"] == 7
    assert res["arrival_rate"] != compute()["arrival_rate"]

def test_unstable_stage_propagates():
    with pytest.raises(UnstableQueueError):
        compute(Config(staffing=Staffing(housekeepers=5)))

def test_invalid_config_propagates():
    with pytest.raises(ModelConfigError):
        compute(Config(simulation=Simulation(guest_cutoff=0)))

def test_cutoff_too_large_for_sample():
    # 100 arrival events cannot hold 1000 guests
    with pytest.raises(ModelConfigError, match="cutoff"):
        compute(Config(simulation=Simulation(sample_size=100, guest_cutoff=1000)))
