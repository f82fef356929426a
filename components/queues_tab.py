"""Queue metrics tab component."""

import streamlit as st
from utils.visualizations import create_utilization_chart, create_wait_chart


def render_queues_tab(res):
    """Render the per-stage M/M/c table and charts."""
    st.subheader("Per-Stage M/M/c Estimates")
    st.caption(f"Shared arrival rate λ = {res['arrival_rate']:.3f} guests/min "
               f"({res['arrival_rate'] * 60:.1f}/hour)")

    table = res['queue_table']
    st.dataframe(
        table.style.format({
            'lam': '{:.4f}', 'mu': '{:.4f}', 'offered_load': '{:.2f}', 'rho': '{:.1%}',
            'p0': '{:.2e}', 'p_wait': '{:.1%}', 'L': '{:.2f}', 'Lq': '{:.3f}',
            'w': '{:.1f}', 'wq': '{:.3f}'
        }),
        use_container_width=True,
        hide_index=True
    )

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_utilization_chart(table), use_container_width=True)
    with col2:
        st.plotly_chart(create_wait_chart(table), use_container_width=True)

    with st.expander("📐 Formulas"):
        st.markdown("""
        - a = λ/μ, ρ = λ/(cμ) (must be < 1)
        - P0 = [Σ_{n<c} aⁿ/n! + a^c/(c!(1−ρ))]⁻¹
        - Lq = P0·a^c·ρ / (c!(1−ρ)²), L = Lq + a
        - wq = Lq/λ, w = wq + 1/μ
        """)

    with st.expander("🎲 Sampled series"):
        st.dataframe(res['sample_summary'], use_container_width=True, hide_index=True)
