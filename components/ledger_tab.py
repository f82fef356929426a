"""Guest ledger tab component."""

from io import BytesIO

import pandas as pd
import streamlit as st
from utils.visualizations import create_ledger_timeline_chart


def ledger_to_excel(ledger: pd.DataFrame, queue_table: pd.DataFrame) -> bytes:
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="openpyxl") as xw:
        ledger.to_excel(xw, index=False, sheet_name="Guest Ledger")
        queue_table.to_excel(xw, index=False, sheet_name="Queue Metrics")
    bio.seek(0)
    return bio.read()


def render_ledger_tab(res, cfg):
    """Render the per-guest timeline table and horizon check."""
    ledger = res['ledger']
    summary = res['ledger_summary']
    horizon = res['horizon']

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Guests", f"{summary['guests']:,}")
    with c2:
        st.metric("Arrival batches", f"{summary['batches']:,}")
    with c3:
        st.metric("Cutoff reached", f"min {horizon.cutoff_reached_at:,.0f}")
    with c4:
        st.metric("Mean reception wait", f"{summary['mean_minutes']['reception_wait']:.2f} min")

    if horizon.warning:
        st.warning(horizon.warning)

    st.plotly_chart(create_ledger_timeline_chart(ledger, cfg.timing.horizon_minutes),
                    use_container_width=True)
    st.dataframe(ledger, use_container_width=True, hide_index=True, height=400)

    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Guest Ledger (CSV)",
            data=ledger.to_csv(index=False).encode("utf-8"),
            file_name="guest_ledger.csv",
            mime="text/csv"
        )
    with col2:
        st.download_button(
            "Ledger + Queues (Excel)",
            data=ledger_to_excel(ledger, res['queue_table']),
            file_name="guest_ledger.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
