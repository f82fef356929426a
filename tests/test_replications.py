from hotelcast.models import Config
from hotelcast.replications import run_replications, replication_summary

def test_one_row_per_seed():
    df = run_replications(Config(), seeds=[1, 2, 3])
    assert list(df["seed"]) == [1, 2, 3]
    for col in ("arrival_rate", "rho_reception", "rho_housekeeping", "reception_wq",
                "ledger_reception_wait", "realised_profit", "profit_estimate"):
        assert col in df.columns
    assert df["within_bounds"].all()
    assert (df["rho_reception"] < 1).all()

def test_fixed_mix_estimate_does_not_depend_on_seed():
    df = run_replications(Config(), seeds=[4, 5])
    assert df["profit_estimate"].nunique() == 1
    assert df["arrival_rate"].nunique() == 2

def test_summary_statistics():
    df = run_replications(Config(), seeds=[1, 2, 3, 4])
    summary = replication_summary(df)
    assert "realised_profit" in summary.index
    assert summary.loc["arrival_rate", "count"] == 4
