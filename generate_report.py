#!/usr/bin/env python3
"""Generate the hotel verification report (Markdown + HTML) and its data files"""

import html
import json
import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from hotelcast.models import Config
from hotelcast.compute import compute
from hotelcast.logging_config import configure_from_env, enable_console_logging
from utils.visualizations import (
    create_bounds_chart, create_utilization_chart, create_wait_chart, create_ledger_timeline_chart
)

logger = logging.getLogger("hotelcast.report")

REPORT_FILES = {
    'markdown': 'hotel_report.md',
    'html': 'hotel_report.html',
    'queues_csv': 'queue_metrics.csv',
    'ledger_csv': 'guest_ledger.csv',
    'ledger_xlsx': 'guest_ledger.xlsx',
    'guardrails_json': 'guardrails_report.json',
}


def build_markdown(cfg, res):
    """Report body as a list of Markdown lines"""
    b = res['bounds']
    profit = res['profit']
    realised = res['realised']
    horizon = res['horizon']
    d = cfg.distributions

    report = []
    report.append("# Hotel Operations Verification Report")
    report.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")

    report.append("## 1. Inputs\n")
    report.append(f"- **Rooms**: {cfg.rooms.standard_rooms} standard, {cfg.rooms.premium_rooms} premium")
    report.append(f"- **Prices**: ${cfg.pricing.standard_price:,.0f} standard, "
                  f"${cfg.pricing.premium_price:,.0f} premium "
                  f"(mix {1 - cfg.pricing.premium_share:.0%}/{cfg.pricing.premium_share:.0%})")
    report.append(f"- **Staff per shift**: {cfg.staffing.receptionists} reception, "
                  f"{cfg.staffing.porters} porters, {cfg.staffing.housekeepers} housekeeping "
                  f"× {cfg.staffing.shifts_per_day} shifts of {cfg.staffing.shift_hours:g}h")
    report.append(f"- **Horizon**: {cfg.timing.horizon_minutes:.0f} minutes")
    report.append(f"- **Sample**: N = {cfg.simulation.sample_size}, seed = {res['seed']}, "
                  f"guest cutoff = {cfg.simulation.guest_cutoff}\n")

    report.append("| Quantity | Distribution | Parameters |")
    report.append("|----------|--------------|------------|")
    report.append(f"| Inter-arrival | Triangular | {d.interarrival_tri} min |")
    report.append(f"| Group size | Triangular, floored | {d.group_size_tri} → 1..{d.max_group_size} |")
    report.append(f"| Check-in | Uniform | {d.checkin_uniform} min |")
    report.append(f"| Escort in / out | Uniform | {d.escort_in_uniform} / {d.escort_out_uniform} min |")
    report.append(f"| Room stay | Log-normal | mean {d.stay_lognormal[0]:g} min, σ {d.stay_lognormal[1]:g} |")
    report.append(f"| Housekeeping | Log-normal | mean {d.housekeeping_lognormal[0]:g} min, "
                  f"σ {d.housekeeping_lognormal[1]:g} |\n")

    report.append("## 2. Analytic Bounds\n")
    report.append("| Metric | Worst case | Best case |")
    report.append("|--------|-----------:|----------:|")
    report.append(f"| Guests | {b.min_guests:,} | {b.max_guests:,} |")
    report.append(f"| Revenue | ${b.min_revenue:,.0f} | ${b.max_revenue:,.0f} |")
    report.append(f"| Expenses | ${b.max_expenses:,.0f} | ${b.min_expenses:,.0f} |")
    report.append(f"| Profit | ${b.min_profit:,.0f} | ${b.max_profit:,.0f} |")
    report.append(f"\n**Fixed expenses** (scheduled payroll + overheads): ${b.fixed_expenses:,.0f}\n")

    report.append("## 3. Queue Estimates (M/M/c)\n")
    report.append(f"Shared arrival rate λ = {res['arrival_rate']:.4f} guests/min\n")
    report.append("| Stage | λ | μ | c | ρ | L | Lq | w | wq |")
    report.append("|-------|---|---|---|---|---|----|---|----|")
    for q in res['queues'].values():
        report.append(f"| {q.stage} | {q.lam:.4f} | {q.mu:.4f} | {q.c} | {q.rho:.3f} | "
                      f"{q.L:.2f} | {q.Lq:.3f} | {q.w:.2f} | {q.wq:.3f} |")
    report.append("")

    summary = res['ledger_summary']
    report.append("## 4. Guest Ledger\n")
    report.append(f"- **Guests**: {summary['guests']:,} in {summary['batches']:,} arrival batches")
    report.append(f"- **Cutoff reached at**: minute {horizon.cutoff_reached_at:,.0f} "
                  f"({horizon.guests_after_horizon} guests after the horizon)")
    report.append(f"- **Mean reception wait**: {summary['mean_minutes']['reception_wait']:.2f} min "
                  f"(M/M/c wq: {res['queues']['reception'].wq:.2f} min)")
    report.append(f"- **Realised mix**: {summary['standard_guests']} standard / "
                  f"{summary['premium_guests']} premium ({summary['premium_share']:.1%} premium)")
    for w in res['warnings']:
        report.append(f"- {w}")
    report.append("")

    report.append("## 5. Profit Estimate\n")
    report.append("```")
    report.append("profit = standard_guests × standard_price + premium_guests × premium_price − fixed_expenses")
    report.append("```")
    report.append(f"- **Fixed mix**: {profit.standard_guests} × ${cfg.pricing.standard_price:,.0f} + "
                  f"{profit.premium_guests} × ${cfg.pricing.premium_price:,.0f} − ${profit.fixed_expenses:,.0f} "
                  f"= **${profit.profit:,.0f}**")
    report.append(f"- **Realised mix**: ${realised.revenue:,.0f} − ${realised.fixed_expenses:,.0f} "
                  f"= **${realised.profit:,.0f}**")
    report.append(f"- **Bounds**: ${profit.profit_floor:,.0f} ≤ profit ≤ ${profit.profit_ceiling:,.0f}\n")

    report.append("## 6. Guardrails & Assertions (Pass/Fail)\n")
    for g in res['guardrails']:
        report.append(f"- {g['status']} **{g['name']}**: {g['value']}")
    report.append("")
    return report


def build_html(cfg, res, markdown_lines):
    """Standalone HTML page: summary tables plus plotly charts"""
    charts = [
        create_bounds_chart(res['bounds'], res['profit']),
        create_utilization_chart(res['queue_table']),
        create_wait_chart(res['queue_table']),
        create_ledger_timeline_chart(res['ledger'], cfg.timing.horizon_minutes),
    ]
    chart_html = "\n".join(
        fig.to_html(full_html=False, include_plotlyjs="cdn" if i == 0 else False)
        for i, fig in enumerate(charts)
    )
    guardrails = pd.DataFrame(res['guardrails'])[['status', 'name', 'value']]
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Hotel Operations Verification Report</title>
<style>
body {{ font-family: sans-serif; margin: 2em; }}
table {{ border-collapse: collapse; margin-bottom: 1.5em; }}
th, td {{ border: 1px solid #ccc; padding: 4px 8px; text-align: right; }}
</style>
</head>
<body>
<h1>Hotel Operations Verification Report</h1>
<pre>{html.escape(chr(10).join(markdown_lines[2:]))}</pre>
<h2>Queue Metrics</h2>
{res['queue_table'].to_html(index=False, float_format=lambda x: f"{x:.4f}")}
<h2>Sampled Series</h2>
{res['sample_summary'].to_html(index=False, float_format=lambda x: f"{x:.3f}")}
<h2>Guardrails</h2>
{guardrails.to_html(index=False)}
<h2>Charts</h2>
{chart_html}
<h2>Guest Ledger (first 50 rows)</h2>
{res['ledger'].head(50).to_html(index=False, float_format=lambda x: f"{x:.2f}")}
</body>
</html>
"""


def generate_report(cfg=None, out_dir="."):
    """Run the model and write every report artefact; returns {kind: path}"""
    cfg = cfg or Config()
    res = compute(cfg)

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = {kind: out / name for kind, name in REPORT_FILES.items()}

    markdown_lines = build_markdown(cfg, res)
    paths['markdown'].write_text("\n".join(markdown_lines), encoding="utf-8")
    paths['html'].write_text(build_html(cfg, res, markdown_lines), encoding="utf-8")

    res['queue_table'].to_csv(paths['queues_csv'], index=False)
    res['ledger'].to_csv(paths['ledger_csv'], index=False)
    with pd.ExcelWriter(paths['ledger_xlsx'], engine="openpyxl") as xw:
        res['ledger'].to_excel(xw, index=False, sheet_name="Guest Ledger")
        res['queue_table'].to_excel(xw, index=False, sheet_name="Queue Metrics")
        res['sample_summary'].to_excel(xw, index=False, sheet_name="Samples")

    with open(paths['guardrails_json'], 'w') as f:
        json.dump({
            'timestamp': datetime.now().isoformat(),
            'seed': res['seed'],
            'checks': res['guardrails'],
            'warnings': res['warnings'],
            'summary': {
                'total_checks': len(res['guardrails']),
                'passed': sum(1 for g in res['guardrails'] if g['pass']),
                'failed': sum(1 for g in res['guardrails'] if not g['pass'])
            }
        }, f, indent=2)

    logger.info("Report written to %s", out.resolve())
    return paths


if __name__ == "__main__":
    if not configure_from_env():
        enable_console_logging()
    written = generate_report()
    print("\n✓ Files generated:")
    for p in written.values():
        print(f"  - {p}")
