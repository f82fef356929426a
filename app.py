"""
Hotel Operations Verification Model - Engine UI
A Streamlit interface that uses the hotelcast engine as the single source of truth
"""

import hashlib
import json
from dataclasses import asdict

import pandas as pd
import streamlit as st

from config.default_params import HOTEL_DEFAULTS, UI_RANGES, REPLICATION_SEEDS
from hotelcast.models import Config, Rooms, Pricing, Staffing, Wages, Overheads, Simulation
from hotelcast.compute import compute
from hotelcast.errors import ModelConfigError, UnstableQueueError
from hotelcast.replications import run_replications, replication_summary
from hotelcast.logging_config import configure_from_env
from components.queues_tab import render_queues_tab
from components.ledger_tab import render_ledger_tab
from utils.visualizations import create_bounds_chart, create_replication_chart


st.set_page_config(
    page_title="Hotel Operations Verification Model",
    page_icon="🏨",
    layout="wide"
)


@st.cache_resource
def init_logging():
    """Attach handlers once per server process, not on every rerun"""
    return configure_from_env()


init_logging()


def hash_config(cfg):
    """Create hash of config for caching"""
    cfg_str = json.dumps(asdict(cfg), sort_keys=True, default=str)
    return hashlib.md5(cfg_str.encode()).hexdigest()


def _slider(label, key, fmt=None):
    lo, hi, step = UI_RANGES[key]
    return st.sidebar.slider(label, lo, hi, HOTEL_DEFAULTS[key], step=step, format=fmt)


def get_cfg_from_ui():
    """Build Config from sidebar widgets"""
    st.sidebar.header("⚙️ Configuration")

    st.sidebar.subheader("🛏️ Rooms & Pricing")
    rooms = Rooms(
        standard_rooms=_slider("Standard rooms", 'standard_rooms'),
        premium_rooms=_slider("Premium rooms", 'premium_rooms'),
    )
    pricing = Pricing(
        standard_price=_slider("Standard price ($/stay)", 'standard_price'),
        premium_price=_slider("Premium price ($/stay)", 'premium_price'),
        premium_share=_slider("Premium share of guests", 'premium_share'),
    )

    st.sidebar.subheader("👥 Staff per Shift")
    staffing = Staffing(
        receptionists=_slider("Receptionists", 'receptionists'),
        porters=_slider("Porters", 'porters'),
        housekeepers=_slider("Housekeepers", 'housekeepers'),
        shifts_per_day=HOTEL_DEFAULTS['shifts_per_day'],
        shift_hours=HOTEL_DEFAULTS['shift_hours'],
    )
    wages = Wages(
        receptionist=st.sidebar.number_input("Receptionist wage ($/h)", 0.0, 100.0,
                                             HOTEL_DEFAULTS['receptionist_wage'], 0.5),
        porter=st.sidebar.number_input("Porter wage ($/h)", 0.0, 100.0, HOTEL_DEFAULTS['porter_wage'], 0.5),
        housekeeper=st.sidebar.number_input("Housekeeper wage ($/h)", 0.0, 100.0,
                                            HOTEL_DEFAULTS['housekeeper_wage'], 0.5),
    )

    st.sidebar.subheader("🏢 Daily Overheads")
    overheads = Overheads(
        utilities=st.sidebar.number_input("Utilities", 0.0, 20000.0, HOTEL_DEFAULTS['utilities'], 100.0),
        maintenance=st.sidebar.number_input("Maintenance", 0.0, 20000.0, HOTEL_DEFAULTS['maintenance'], 100.0),
        administration=st.sidebar.number_input("Administration", 0.0, 20000.0,
                                               HOTEL_DEFAULTS['administration'], 100.0),
    )

    st.sidebar.subheader("🎲 Monte-Carlo")
    simulation = Simulation(
        sample_size=_slider("Sample size (N)", 'sample_size'),
        seed=st.sidebar.number_input("Random seed", 0, 10_000, HOTEL_DEFAULTS['seed'], 1),
        guest_cutoff=_slider("Ledger guest cutoff", 'guest_cutoff'),
    )

    return Config(
        rooms=rooms, pricing=pricing, staffing=staffing, wages=wages,
        overheads=overheads, simulation=simulation,
    )


def render_bounds_tab(res):
    b = res['bounds']
    profit = res['profit']
    realised = res['realised']

    st.markdown("### Key Figures")
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Profit Estimate", f"${profit.profit:,.0f}")
        st.caption(f"{profit.guest_count} guests at the fixed price mix")
    with c2:
        st.metric("Realised Profit", f"${realised.profit:,.0f}")
        st.caption(f"{realised.premium_guests} premium guests in the ledger")
    with c3:
        st.metric("Profit Floor", f"${profit.profit_floor:,.0f}")
        st.caption("Min revenue − fixed expenses")
    with c4:
        st.metric("Profit Ceiling", f"${profit.profit_ceiling:,.0f}")
        st.caption("Max revenue − fixed expenses")

    if profit.within_bounds:
        st.success("✓ Profit estimate lies within the analytic bounds")
    else:
        st.error("⚠️ Profit estimate falls outside the analytic bounds")

    st.plotly_chart(create_bounds_chart(b, profit), use_container_width=True)

    bounds_df = pd.DataFrame([
        {"Metric": "Guests", "Worst case": b.min_guests, "Best case": b.max_guests},
        {"Metric": "Revenue", "Worst case": b.min_revenue, "Best case": b.max_revenue},
        {"Metric": "Expenses", "Worst case": b.max_expenses, "Best case": b.min_expenses},
        {"Metric": "Profit", "Worst case": b.min_profit, "Best case": b.max_profit},
    ])
    st.dataframe(bounds_df, use_container_width=True, hide_index=True)


def render_replications_tab(cfg, res):
    st.subheader("Replications Across Seeds")
    st.caption(f"Seeds {REPLICATION_SEEDS[0]}–{REPLICATION_SEEDS[-1]}")
    if st.button("▶️ Run replications"):
        reps = run_replications(cfg, REPLICATION_SEEDS)
        st.plotly_chart(create_replication_chart(reps, res['bounds']), use_container_width=True)
        st.dataframe(replication_summary(reps), use_container_width=True)
        st.download_button(
            "Replications (CSV)",
            data=reps.to_csv(index=False).encode("utf-8"),
            file_name="replications.csv",
            mime="text/csv"
        )


def render_guardrails_tab(res):
    st.subheader("Guardrails & Assertions")
    for g in res['guardrails']:
        st.markdown(f"- {g['status']} **{g['name']}**: {g['value']}")
    for w in res['warnings']:
        st.warning(w)


def main():
    st.title("🏨 Hotel Operations – Verification Model")
    st.caption("Analytic bounds cross-checked against a Monte-Carlo queueing model")

    cfg = get_cfg_from_ui()
    cfg_hash = hash_config(cfg)

    if 'engine' not in st.session_state or st.session_state['engine'].get('hash') != cfg_hash:
        try:
            res = compute(cfg)
        except UnstableQueueError as e:
            st.error(f"⚠️ {e}. Add staff or rooms for this stage.")
            st.stop()
        except ModelConfigError as e:
            st.error(f"⚠️ Configuration error: {e}")
            st.stop()
        st.session_state['engine'] = {'res': res, 'hash': cfg_hash, 'config': cfg}

    res = st.session_state['engine']['res']
    cfg = st.session_state['engine']['config']

    tab1, tab2, tab3, tab4, tab5 = st.tabs([
        "📊 Bounds & Profit", "🛎️ Queues", "📋 Guest Ledger", "🎲 Replications", "✅ Guardrails"
    ])
    with tab1:
        render_bounds_tab(res)
    with tab2:
        render_queues_tab(res)
    with tab3:
        render_ledger_tab(res, cfg)
    with tab4:
        render_replications_tab(cfg, res)
    with tab5:
        render_guardrails_tab(res)


if __name__ == "__main__":
    main()
