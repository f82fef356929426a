"""Profit point estimate compared against the analytic bounds"""
from dataclasses import dataclass
import pandas as pd
from .bounds import Bounds, revenue_bounds
from .models import Config

@dataclass
class ProfitEstimate:
    guest_count: int
    standard_guests: int
    premium_guests: int
    revenue: float
    fixed_expenses: float
    profit: float
    profit_floor: float     # min revenue - fixed expenses
    profit_ceiling: float   # max revenue - fixed expenses

    @property
    def within_bounds(self) -> bool:
        return self.profit_floor <= self.profit <= self.profit_ceiling

def split_guests(guest_count: int, premium_share: float) -> tuple[int, int]:
    """(standard, premium) head counts for a fixed price mix"""
    premium = int(round(guest_count * premium_share))
    return guest_count - premium, premium

def estimate_profit(cfg: Config, guest_count: int = None, bounds: Bounds = None) -> ProfitEstimate:
    """Fixed guest count x fixed 85/15 price mix - fixed expenses"""
    guest_count = cfg.simulation.guest_cutoff if guest_count is None else guest_count
    bounds = revenue_bounds(cfg) if bounds is None else bounds

    standard, premium = split_guests(guest_count, cfg.pricing.premium_share)
    revenue = standard * cfg.pricing.standard_price + premium * cfg.pricing.premium_price
    expenses = bounds.fixed_expenses

    return ProfitEstimate(
        guest_count=guest_count,
        standard_guests=standard,
        premium_guests=premium,
        revenue=revenue,
        fixed_expenses=expenses,
        profit=revenue - expenses,
        profit_floor=bounds.min_revenue - expenses,
        profit_ceiling=bounds.max_revenue - expenses,
    )

def realised_profit(ledger: pd.DataFrame, cfg: Config, bounds: Bounds = None) -> ProfitEstimate:
    """Same estimate, but priced on the room types the ledger actually assigned"""
    bounds = revenue_bounds(cfg) if bounds is None else bounds
    counts = ledger["room_type"].value_counts()
    standard = int(counts.get("standard", 0))
    premium = int(counts.get("premium", 0))
    revenue = standard * cfg.pricing.standard_price + premium * cfg.pricing.premium_price
    expenses = bounds.fixed_expenses
    return ProfitEstimate(
        guest_count=standard + premium,
        standard_guests=standard,
        premium_guests=premium,
        revenue=revenue,
        fixed_expenses=expenses,
        profit=revenue - expenses,
        profit_floor=bounds.min_revenue - expenses,
        profit_ceiling=bounds.max_revenue - expenses,
    )
