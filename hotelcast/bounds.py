"""Closed-form best-case / worst-case revenue and expense bounds"""
import math
from dataclasses import dataclass
from .models import Config, Staffing, Wages

@dataclass
class Bounds:
    """Analytic envelope for one simulated horizon"""
    min_guests: int
    max_guests: int
    min_revenue: float
    max_revenue: float
    fixed_expenses: float
    min_expenses: float
    max_expenses: float

    @property
    def min_profit(self) -> float:
        return self.min_revenue - self.max_expenses

    @property
    def max_profit(self) -> float:
        return self.max_revenue - self.min_expenses

def arrival_events(horizon_min: float, interarrival_min: float) -> int:
    """Arrival events that fit in the horizon at a fixed inter-arrival gap"""
    return int(math.floor(horizon_min / interarrival_min))

def room_turns(horizon_min: float, stay_min: float, turnaround_min: float) -> int:
    """How many times one room can be sold within the horizon"""
    return int(math.floor(horizon_min / (stay_min + turnaround_min)))

def best_case_turns(cfg: Config) -> int:
    """Turns per room at minimum stay and turnaround; at least one, as in the worst case"""
    tm = cfg.timing
    return max(1, room_turns(tm.horizon_minutes, tm.min_stay_minutes, tm.min_turnaround_minutes))

def best_case_guests(cfg: Config) -> int:
    # fastest arrivals, largest groups, shortest stays
    tm, d = cfg.timing, cfg.distributions
    demand = arrival_events(tm.horizon_minutes, d.interarrival_tri[0]) * d.max_group_size
    capacity = cfg.rooms.total * best_case_turns(cfg)
    return min(demand, capacity)

def worst_case_guests(cfg: Config) -> int:
    # slowest arrivals, single guests, longest stays (every room still sells once)
    tm, d = cfg.timing, cfg.distributions
    demand = arrival_events(tm.horizon_minutes, d.interarrival_tri[2]) * 1
    turns = max(1, room_turns(tm.horizon_minutes, tm.max_stay_minutes, tm.max_turnaround_minutes))
    return min(demand, cfg.rooms.total * turns)

def max_revenue(cfg: Config) -> float:
    """Best case: premium rooms sold first at the premium price, remainder at standard"""
    guests = best_case_guests(cfg)
    premium_capacity = cfg.rooms.premium_rooms * best_case_turns(cfg)
    premium_guests = min(guests, premium_capacity)
    return premium_guests * cfg.pricing.premium_price + (guests - premium_guests) * cfg.pricing.standard_price

def min_revenue(cfg: Config) -> float:
    """Worst case: every guest pays the standard price"""
    return worst_case_guests(cfg) * cfg.pricing.standard_price

def staffing_cost(staffing: Staffing, wages: Wages, overtime: bool = False) -> float:
    """Daily payroll; with overtime every shift overruns by overtime_hours_per_shift"""
    hourly = (
        staffing.receptionists * wages.receptionist +
        staffing.porters       * wages.porter +
        staffing.housekeepers  * wages.housekeeper
    )
    cost = hourly * staffing.shift_hours * staffing.shifts_per_day
    if overtime:
        cost += hourly * wages.overtime_hours_per_shift * wages.overtime_multiplier * staffing.shifts_per_day
    return cost

def fixed_expenses(cfg: Config) -> float:
    """Scheduled payroll plus daily overheads"""
    return staffing_cost(cfg.staffing, cfg.wages) + cfg.overheads.total

def min_expenses(cfg: Config) -> float:
    return fixed_expenses(cfg)

def max_expenses(cfg: Config) -> float:
    return staffing_cost(cfg.staffing, cfg.wages, overtime=True) + cfg.overheads.total

def revenue_bounds(cfg: Config) -> Bounds:
    return Bounds(
        min_guests=worst_case_guests(cfg),
        max_guests=best_case_guests(cfg),
        min_revenue=min_revenue(cfg),
        max_revenue=max_revenue(cfg),
        fixed_expenses=fixed_expenses(cfg),
        min_expenses=min_expenses(cfg),
        max_expenses=max_expenses(cfg),
    )
