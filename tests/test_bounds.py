import pytest
from hotelcast.models import *
from hotelcast.bounds import (
    arrival_events, room_turns, best_case_guests, worst_case_guests,
    max_revenue, min_revenue, staffing_cost, fixed_expenses, max_expenses, revenue_bounds
)

def base_cfg():
    """Configuration matching the report defaults"""
    return Config(
        rooms=Rooms(standard_rooms=120, premium_rooms=30),
        pricing=Pricing(standard_price=120.0, premium_price=250.0, premium_share=0.15),
        staffing=Staffing(receptionists=2, porters=3, housekeepers=16, shifts_per_day=3, shift_hours=8.0),
        wages=Wages(),
        overheads=Overheads(),
        timing=Timing(),
    )

def test_arrival_events_and_room_turns():
    assert arrival_events(1440, 1.0) == 1440
    assert arrival_events(1440, 6.0) == 240
    # 1440 / (60 + 10) = 20.57 -> 20 sales per room
    assert room_turns(1440, 60, 10) == 20
    assert room_turns(1440, 720, 45) == 1

def test_guest_envelope():
    """Best case is capacity-limited, worst case is room-limited"""
    cfg = base_cfg()
    # demand 1440 * 3 = 4320, capacity 150 rooms * 20 turns = 3000
    assert best_case_guests(cfg) == 3000
    # demand 240 single guests, capacity 150 rooms * 1 turn = 150
    assert worst_case_guests(cfg) == 150

def test_revenue_bounds_expected():
    cfg = base_cfg()
    # premium capacity 30 * 20 = 600 at $250, remaining 2400 at $120
    assert abs(max_revenue(cfg) - 438_000.0) < 1e-6
    assert abs(min_revenue(cfg) - 18_000.0) < 1e-6

def test_max_revenue_at_least_min_revenue_for_defaults():
    cfg = Config()
    assert max_revenue(cfg) >= min_revenue(cfg)
    b = revenue_bounds(cfg)
    assert b.max_revenue >= b.min_revenue
    assert b.max_guests >= b.min_guests

def test_staffing_and_expenses():
    cfg = base_cfg()
    # (2*18 + 3*14 + 16*15) = 318 per hour, 8h x 3 shifts
    assert abs(staffing_cost(cfg.staffing, cfg.wages) - 7632.0) < 1e-6
    # overtime: 318 * 1h * 1.5 * 3 shifts = 1431
    assert abs(staffing_cost(cfg.staffing, cfg.wages, overtime=True) - 9063.0) < 1e-6
    assert abs(fixed_expenses(cfg) - 11_832.0) < 1e-6
    assert abs(max_expenses(cfg) - 13_263.0) < 1e-6

def test_bounds_profit_envelope():
    b = revenue_bounds(base_cfg())
    assert b.min_expenses == b.fixed_expenses
    assert b.max_expenses > b.min_expenses
    assert abs(b.min_profit - (18_000.0 - 13_263.0)) < 1e-6
    assert abs(b.max_profit - (438_000.0 - 11_832.0)) < 1e-6

def test_premium_capacity_caps_best_case():
    """With very few guests everyone fits in premium rooms"""
    cfg = base_cfg()
    cfg.rooms = Rooms(standard_rooms=1, premium_rooms=1)
    # 2 rooms * 20 turns = 40 guests; premium capacity 20
    assert best_case_guests(cfg) == 40
    assert abs(max_revenue(cfg) - (20 * 250.0 + 20 * 120.0)) < 1e-6

def test_short_horizon_keeps_best_case_above_worst_case():
    """A horizon shorter than one stay still sells each room once in both cases"""
    cfg = Config(timing=Timing(horizon_minutes=60.0)).validate()
    b = revenue_bounds(cfg)
    # best: min(60 * 3, 150 rooms * 1 turn); worst: min(60 / 6, 150)
    assert b.max_guests == 150
    assert b.min_guests == 10
    assert abs(b.max_revenue - (30 * 250.0 + 120 * 120.0)) < 1e-6
    assert abs(b.min_revenue - 10 * 120.0) < 1e-6
    assert b.max_revenue >= b.min_revenue
    assert b.max_profit >= b.min_profit
