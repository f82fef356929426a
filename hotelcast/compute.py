import logging
from .models import Config
from .bounds import revenue_bounds
from .sampling import draw_samples, describe_samples
from .queueing import arrival_rate, stage_snapshots, snapshots_frame
from .ledger import assemble_ledger, horizon_check, ledger_summary
from .profit import estimate_profit, realised_profit
from .guardrails import build_guardrails

logger = logging.getLogger(__name__)

def compute(cfg: Config = None, seed: int = None):
    """
    Run every stage once, in order: bounds, samples, queue snapshots,
    guest ledger, profit estimate, guardrails.

    Args:
        cfg: model configuration (defaults when omitted)
        seed: overrides cfg.simulation.seed for this run

    Raises ModelConfigError / UnstableQueueError for invalid inputs.
    """
    cfg = (cfg or Config()).validate()
    seed = cfg.simulation.seed if seed is None else seed
    logger.info("Running hotel verification model (seed=%s, N=%d)", seed, cfg.simulation.sample_size)

    bounds = revenue_bounds(cfg)
    samples = draw_samples(cfg, seed=seed)
    queues = stage_snapshots(cfg, samples)
    ledger = assemble_ledger(samples, cfg)
    horizon = horizon_check(ledger, cfg)
    profit = estimate_profit(cfg, bounds=bounds)
    realised = realised_profit(ledger, cfg, bounds=bounds)

    warnings = []
    if horizon.warning:
        warnings.append(horizon.warning)
    if not profit.within_bounds:
        warnings.append(f"⚠️ Profit estimate ${profit.profit:,.0f} falls outside the analytic bounds")
        logger.warning(warnings[-1])

    res = {
        "seed": seed,
        "bounds": bounds,
        "samples": samples,
        "sample_summary": describe_samples(samples),
        "arrival_rate": arrival_rate(samples),
        "queues": queues,
        "queue_table": snapshots_frame(queues),
        "ledger": ledger,
        "ledger_summary": ledger_summary(ledger),
        "horizon": horizon,
        "profit": profit,
        "realised": realised,
        "warnings": warnings,
    }
    res["guardrails"] = build_guardrails(res, cfg)
    failed = [g['name'] for g in res["guardrails"] if not g['pass']]
    if failed:
        logger.warning("Guardrails failed: %s", ", ".join(failed))
    return res
