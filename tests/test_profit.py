import pandas as pd
from hotelcast.models import Config, Pricing
from hotelcast.bounds import revenue_bounds
from hotelcast.profit import split_guests, estimate_profit, realised_profit

def test_split_guests_fixed_mix():
    assert split_guests(600, 0.15) == (510, 90)
    assert split_guests(10, 0.0) == (10, 0)
    standard, premium = split_guests(7, 0.15)
    assert standard + premium == 7

def test_profit_estimate_expected():
    """600 guests: 510 x $120 + 90 x $250 - $11,832"""
    est = estimate_profit(Config())
    assert est.guest_count == 600
    assert abs(est.revenue - 83_700.0) < 1e-6
    assert abs(est.fixed_expenses - 11_832.0) < 1e-6
    assert abs(est.profit - 71_868.0) < 1e-6
    assert abs(est.profit_floor - 6_168.0) < 1e-6
    assert abs(est.profit_ceiling - 426_168.0) < 1e-6
    assert est.within_bounds

def test_profit_uses_supplied_bounds_and_count():
    cfg = Config()
    b = revenue_bounds(cfg)
    est = estimate_profit(cfg, guest_count=100, bounds=b)
    assert est.guest_count == 100
    assert est.fixed_expenses == b.fixed_expenses
    # 100 guests is below the 150-guest worst case
    assert not est.within_bounds

def test_higher_premium_share_raises_revenue():
    low = estimate_profit(Config(pricing=Pricing(premium_share=0.10)))
    high = estimate_profit(Config(pricing=Pricing(premium_share=0.30)))
    assert high.revenue > low.revenue

def test_realised_profit_from_ledger_room_types():
    cfg = Config()
    ledger = pd.DataFrame({"room_type": ["standard"] * 8 + ["premium"] * 2})
    est = realised_profit(ledger, cfg)
    assert est.guest_count == 10
    assert est.standard_guests == 8 and est.premium_guests == 2
    assert abs(est.revenue - (8 * 120.0 + 2 * 250.0)) < 1e-6
