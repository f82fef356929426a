"""Default parameters and UI ranges for the hotel verification model."""

HOTEL_DEFAULTS = {
    # Rooms
    'standard_rooms': 120,
    'premium_rooms': 30,
    # Per-stay prices and the fixed price mix
    'standard_price': 120.0,
    'premium_price': 250.0,
    'premium_share': 0.15,
    # Staff on duty per shift
    'receptionists': 2,
    'porters': 3,
    'housekeepers': 16,
    'shifts_per_day': 3,
    'shift_hours': 8.0,
    # Hourly wages
    'receptionist_wage': 18.0,
    'porter_wage': 14.0,
    'housekeeper_wage': 15.0,
    # Daily overheads
    'utilities': 1800.0,
    'maintenance': 900.0,
    'administration': 1500.0,
    # Monte-Carlo
    'sample_size': 1000,
    'seed': 42,
    'guest_cutoff': 600,
}

# (min, max, step) for sidebar widgets
UI_RANGES = {
    'standard_rooms': (10, 400, 10),
    'premium_rooms': (5, 100, 5),
    'standard_price': (50.0, 400.0, 5.0),
    'premium_price': (100.0, 800.0, 10.0),
    'premium_share': (0.0, 0.5, 0.01),
    'receptionists': (1, 10, 1),
    'porters': (1, 10, 1),
    'housekeepers': (1, 40, 1),
    'sample_size': (200, 5000, 100),
    'guest_cutoff': (50, 2000, 50),
}

REPLICATION_SEEDS = list(range(1, 21))
