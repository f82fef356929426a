import pytest
from hotelcast.models import Config, Pricing, Distributions, Rooms, Timing, Simulation, Staffing
from hotelcast.errors import ModelConfigError

def test_defaults_filled_and_valid():
    cfg = Config()
    assert cfg.rooms.total == 150
    assert cfg.overheads.total == 4200.0
    assert cfg.simulation.sample_size == 1000
    assert cfg.validate() is cfg

def test_partial_config_keeps_other_defaults():
    cfg = Config(pricing=Pricing(premium_share=0.2))
    assert cfg.pricing.premium_share == 0.2
    assert cfg.staffing.receptionists == 2

@pytest.mark.parametrize("cfg, message", [
    (Config(pricing=Pricing(premium_share=1.5)), "premium_share"),
    (Config(rooms=Rooms(premium_rooms=0)), "premium_rooms"),
    (Config(staffing=Staffing(porters=0)), "porters"),
    (Config(simulation=Simulation(sample_size=0)), "sample_size"),
    (Config(timing=Timing(min_stay_minutes=800.0)), "min_stay_minutes"),
    (Config(distributions=Distributions(interarrival_tri=(3.0, 2.0, 1.0))), "interarrival_tri"),
    (Config(distributions=Distributions(group_size_tri=(1.0, 1.0, 6.0))), "group_size_tri"),
    (Config(distributions=Distributions(checkin_uniform=(3.0, 1.0))), "checkin_uniform"),
    (Config(distributions=Distributions(stay_lognormal=(0.0, 0.5))), "stay_lognormal"),
])
def test_invalid_inputs_raise_config_error(cfg, message):
    with pytest.raises(ModelConfigError, match=message):
        cfg.validate()

def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        Config(pricing=Pricing(standard_price=-1.0)).validate()

def test_sidebar_minimums_pass_validation():
    """Every count a sidebar slider allows is accepted by validate()"""
    from config.default_params import UI_RANGES
    cfg = Config(
        rooms=Rooms(standard_rooms=UI_RANGES['standard_rooms'][0],
                    premium_rooms=UI_RANGES['premium_rooms'][0]),
        staffing=Staffing(receptionists=UI_RANGES['receptionists'][0],
                          porters=UI_RANGES['porters'][0],
                          housekeepers=UI_RANGES['housekeepers'][0]),
        simulation=Simulation(sample_size=UI_RANGES['sample_size'][0],
                              guest_cutoff=UI_RANGES['guest_cutoff'][0]),
    )
    assert cfg.validate() is cfg
