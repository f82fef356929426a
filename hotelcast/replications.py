"""Re-run the model over several seeds to see Monte-Carlo spread"""
import logging
import pandas as pd
from .models import Config
from .compute import compute

logger = logging.getLogger(__name__)

def run_replications(cfg: Config = None, seeds=range(1, 21)) -> pd.DataFrame:
    """One row per seed with the headline queue and profit figures"""
    cfg = cfg or Config()
    rows = []
    for seed in seeds:
        res = compute(cfg, seed=seed)
        row = {
            "seed": seed,
            "arrival_rate": res["arrival_rate"],
        }
        for stage, q in res["queues"].items():
            row[f"rho_{stage}"] = q.rho
        row["reception_wq"] = res["queues"]["reception"].wq
        row["ledger_reception_wait"] = res["ledger_summary"]["mean_minutes"]["reception_wait"]
        row["realised_revenue"] = res["realised"].revenue
        row["realised_profit"] = res["realised"].profit
        row["profit_estimate"] = res["profit"].profit
        row["within_bounds"] = res["realised"].within_bounds
        rows.append(row)
    logger.info("Completed %d replications", len(rows))
    return pd.DataFrame(rows)

def replication_summary(df: pd.DataFrame) -> pd.DataFrame:
    """describe() over the numeric replication columns"""
    return df.drop(columns=["seed"]).describe().T
