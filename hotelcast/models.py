from dataclasses import dataclass
from .errors import ModelConfigError

@dataclass
class Rooms:
    standard_rooms: int = 120
    premium_rooms: int = 30

    @property
    def total(self) -> int:
        return self.standard_rooms + self.premium_rooms

@dataclass
class Pricing:
    standard_price: float = 120.0   # per stay
    premium_price: float = 250.0
    premium_share: float = 0.15     # fixed 85/15 price mix

@dataclass
class Staffing:
    # headcount on duty per shift
    receptionists: int = 2
    porters: int = 3
    housekeepers: int = 16
    shifts_per_day: int = 3
    shift_hours: float = 8.0

@dataclass
class Wages:
    # hourly
    receptionist: float = 18.0
    porter: float = 14.0
    housekeeper: float = 15.0
    overtime_multiplier: float = 1.5
    overtime_hours_per_shift: float = 1.0   # worst-case overrun on every shift

@dataclass
class Overheads:
    # daily
    utilities: float = 1800.0
    maintenance: float = 900.0
    administration: float = 1500.0

    @property
    def total(self) -> float:
        return self.utilities + self.maintenance + self.administration

@dataclass
class Timing:
    horizon_minutes: float = 1440.0       # one simulated day
    min_stay_minutes: float = 60.0        # shortest billable stay
    max_stay_minutes: float = 720.0
    min_turnaround_minutes: float = 10.0  # room cleaned and released
    max_turnaround_minutes: float = 45.0

@dataclass
class Distributions:
    # triangular (min, mode, max) in minutes
    interarrival_tri: tuple = (1.0, 2.0, 6.0)
    # triangular draw floored to an integer group of 1-3 guests
    group_size_tri: tuple = (1.0, 1.0, 4.0)
    max_group_size: int = 3
    # uniform (min, max) in minutes
    checkin_uniform: tuple = (1.0, 3.0)
    escort_in_uniform: tuple = (2.0, 4.0)
    escort_out_uniform: tuple = (2.0, 4.0)
    # log-normal given as (mean minutes, sigma of the underlying normal)
    stay_lognormal: tuple = (180.0, 0.5)
    housekeeping_lognormal: tuple = (20.0, 0.3)

@dataclass
class Simulation:
    sample_size: int = 1000
    seed: int = 42
    guest_cutoff: int = 600

@dataclass
class Config:
    rooms: Rooms = None
    pricing: Pricing = None
    staffing: Staffing = None
    wages: Wages = None
    overheads: Overheads = None
    timing: Timing = None
    distributions: Distributions = None
    simulation: Simulation = None

    def __post_init__(self):
        if self.rooms is None:
            self.rooms = Rooms()
        if self.pricing is None:
            self.pricing = Pricing()
        if self.staffing is None:
            self.staffing = Staffing()
        if self.wages is None:
            self.wages = Wages()
        if self.overheads is None:
            self.overheads = Overheads()
        if self.timing is None:
            self.timing = Timing()
        if self.distributions is None:
            self.distributions = Distributions()
        if self.simulation is None:
            self.simulation = Simulation()

    def validate(self) -> "Config":
        """Raise ModelConfigError on the first invalid input; returns self"""
        counts = {
            "standard_rooms": self.rooms.standard_rooms,
            "premium_rooms": self.rooms.premium_rooms,
            "receptionists": self.staffing.receptionists,
            "porters": self.staffing.porters,
            "housekeepers": self.staffing.housekeepers,
            "shifts_per_day": self.staffing.shifts_per_day,
            "sample_size": self.simulation.sample_size,
            "guest_cutoff": self.simulation.guest_cutoff,
            "max_group_size": self.distributions.max_group_size,
        }
        for name, value in counts.items():
            if int(value) != value or value < 1:
                raise ModelConfigError(f"{name} must be an integer >= 1, got {value}")

        positives = {
            "standard_price": self.pricing.standard_price,
            "premium_price": self.pricing.premium_price,
            "shift_hours": self.staffing.shift_hours,
            "horizon_minutes": self.timing.horizon_minutes,
            "min_stay_minutes": self.timing.min_stay_minutes,
            "max_stay_minutes": self.timing.max_stay_minutes,
        }
        for name, value in positives.items():
            if value <= 0:
                raise ModelConfigError(f"{name} must be positive, got {value}")

        non_negatives = {
            "receptionist wage": self.wages.receptionist,
            "porter wage": self.wages.porter,
            "housekeeper wage": self.wages.housekeeper,
            "overtime_hours_per_shift": self.wages.overtime_hours_per_shift,
            "min_turnaround_minutes": self.timing.min_turnaround_minutes,
            "max_turnaround_minutes": self.timing.max_turnaround_minutes,
            "utilities": self.overheads.utilities,
            "maintenance": self.overheads.maintenance,
            "administration": self.overheads.administration,
        }
        for name, value in non_negatives.items():
            if value < 0:
                raise ModelConfigError(f"{name} must be non-negative, got {value}")

        if not 0.0 <= self.pricing.premium_share <= 1.0:
            raise ModelConfigError(f"premium_share must be in [0, 1], got {self.pricing.premium_share}")
        if self.wages.overtime_multiplier < 1.0:
            raise ModelConfigError("overtime_multiplier must be >= 1")
        if self.timing.min_stay_minutes > self.timing.max_stay_minutes:
            raise ModelConfigError("min_stay_minutes exceeds max_stay_minutes")
        if self.timing.min_turnaround_minutes > self.timing.max_turnaround_minutes:
            raise ModelConfigError("min_turnaround_minutes exceeds max_turnaround_minutes")

        d = self.distributions
        for name in ("interarrival_tri", "group_size_tri"):
            lo, mode, hi = getattr(d, name)
            if not (0 < lo <= mode <= hi) or lo == hi:
                raise ModelConfigError(f"{name} needs 0 < min <= mode <= max with min < max, got {(lo, mode, hi)}")
        if d.group_size_tri[0] < 1 or d.group_size_tri[2] > d.max_group_size + 1:
            raise ModelConfigError(
                f"group_size_tri must lie within [1, {d.max_group_size + 1}], got {d.group_size_tri}"
            )
        for name in ("checkin_uniform", "escort_in_uniform", "escort_out_uniform"):
            lo, hi = getattr(d, name)
            if not 0 <= lo < hi:
                raise ModelConfigError(f"{name} needs 0 <= min < max, got {(lo, hi)}")
        for name in ("stay_lognormal", "housekeeping_lognormal"):
            mean, sigma = getattr(d, name)
            if mean <= 0 or sigma < 0:
                raise ModelConfigError(f"{name} needs mean > 0 and sigma >= 0, got {(mean, sigma)}")
        return self
