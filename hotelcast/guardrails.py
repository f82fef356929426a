"""Pass/fail verification checks over a finished run"""
import math
import numpy as np
from .models import Config

def _check(name: str, ok: bool, value: str) -> dict:
    return {
        'name': name,
        'pass': bool(ok),
        'value': value,
        'status': '✓' if ok else '⚠️ FAIL',
    }

def sample_range_checks(samples, cfg: Config) -> list:
    d = cfg.distributions
    declared = {
        'interarrival': (d.interarrival_tri[0], d.interarrival_tri[2]),
        'group_size':   (1, d.max_group_size),
        'checkin':      d.checkin_uniform,
        'escort_in':    d.escort_in_uniform,
        'escort_out':   d.escort_out_uniform,
        'room_choice':  (0.0, 1.0),
    }
    checks = []
    for name, (lo, hi) in declared.items():
        values = getattr(samples, name)
        vmin, vmax = float(np.min(values)), float(np.max(values))
        checks.append(_check(f"{name} draws within [{lo:g}, {hi:g}]",
                             lo <= vmin and vmax <= hi,
                             f"{vmin:.3f} … {vmax:.3f}"))
    for name in ('room_stay', 'housekeeping'):
        vmin = float(np.min(getattr(samples, name)))
        checks.append(_check(f"{name} draws positive", vmin > 0, f"min {vmin:.3f}"))
    return checks

def queue_identity_checks(queues: dict) -> list:
    checks = []
    for stage, q in queues.items():
        rho_ok = math.isclose(q.rho, q.lam / (q.c * q.mu), rel_tol=1e-9)
        diff = q.L - q.Lq
        load_ok = math.isclose(diff, q.lam / q.mu, rel_tol=1e-9, abs_tol=1e-12)
        checks.append(_check(f"{stage}: ρ = λ/(cμ) < 1", rho_ok and q.rho < 1, f"ρ = {q.rho:.3f}"))
        checks.append(_check(f"{stage}: L − Lq = λ/μ", load_ok, f"{diff:.4f} = {q.lam / q.mu:.4f}"))
    return checks

def build_guardrails(res: dict, cfg: Config) -> list:
    """Evaluate the verification properties on the output of compute()"""
    b = res['bounds']
    ledger = res['ledger']
    profit = res['profit']

    guardrails = [
        _check('Max revenue ≥ min revenue', b.max_revenue >= b.min_revenue,
               f"${b.max_revenue:,.0f} ≥ ${b.min_revenue:,.0f}"),
    ]
    guardrails += sample_range_checks(res['samples'], cfg)
    guardrails += queue_identity_checks(res['queues'])

    cutoff = cfg.simulation.guest_cutoff
    guardrails.append(_check('Ledger guests = cutoff', len(ledger) == cutoff,
                             f"{len(ledger)} = {cutoff}"))
    sizes = sorted(int(s) for s in ledger['batch_size'].unique())
    guardrails.append(_check('Batch sizes ⊂ {1, 2, 3}',
                             set(sizes) <= set(range(1, cfg.distributions.max_group_size + 1)),
                             str(sizes)))
    guardrails.append(_check('Profit estimate within bounds', profit.within_bounds,
                             f"${profit.profit_floor:,.0f} ≤ ${profit.profit:,.0f} ≤ ${profit.profit_ceiling:,.0f}"))
    return guardrails
