"""Plotly charts for the hotel verification report and dashboard."""

import plotly.graph_objects as go
import pandas as pd


def create_bounds_chart(bounds, profit):
    """Revenue envelope with the fixed-mix and realised estimates."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=['Min revenue', 'Estimate', 'Max revenue'],
        y=[bounds.min_revenue, profit.revenue, bounds.max_revenue],
        marker_color=['firebrick', 'steelblue', 'seagreen'],
        name='Revenue'
    ))
    fig.add_hline(y=bounds.fixed_expenses, line_dash="dash", line_color="gray",
                  annotation_text="Fixed expenses")
    fig.update_layout(
        title='Revenue Bounds vs Point Estimate',
        yaxis_title='Revenue ($)',
        height=400
    )
    return fig


def create_utilization_chart(queue_table: pd.DataFrame):
    """Utilization per stage with the stability limit."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=queue_table['stage'],
        y=queue_table['rho'],
        name='ρ',
        marker_color='steelblue'
    ))
    fig.add_hline(y=1.0, line_dash="dash", line_color="red", annotation_text="Unstable")
    fig.update_layout(
        title='Stage Utilization (ρ)',
        yaxis_title='Utilization',
        yaxis_range=[0, 1.1],
        height=400
    )
    return fig


def create_wait_chart(queue_table: pd.DataFrame):
    fig = go.Figure()
    fig.add_trace(go.Bar(x=queue_table['stage'], y=queue_table['wq'], name='Queue wait (wq)'))
    fig.add_trace(go.Bar(x=queue_table['stage'], y=queue_table['w'] - queue_table['wq'], name='Service (1/μ)'))
    fig.update_layout(
        barmode='stack',
        title='Time in System by Stage',
        yaxis_title='Minutes',
        height=400
    )
    return fig


def create_ledger_timeline_chart(ledger: pd.DataFrame, horizon_minutes: float):
    """Cumulative guests by arrival minute against the horizon."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=ledger['arrival'],
        y=ledger['guest_id'] + 1,
        mode='lines',
        name='Guests arrived',
        line=dict(color='blue', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=ledger['room_ready'].sort_values(),
        y=list(range(1, len(ledger) + 1)),
        mode='lines',
        name='Rooms ready again',
        line=dict(color='green', width=2, dash='dash')
    ))
    fig.add_vline(x=horizon_minutes, line_dash="dash", line_color="gray", annotation_text="Horizon")
    fig.update_layout(
        title='Guest Ledger Timeline',
        xaxis_title='Minute',
        yaxis_title='Guests',
        height=400
    )
    return fig


def create_replication_chart(replications: pd.DataFrame, bounds):
    fig = go.Figure()
    fig.add_trace(go.Histogram(x=replications['realised_profit'], name='Realised profit', nbinsx=20))
    fig.add_vline(x=bounds.min_revenue - bounds.fixed_expenses, line_dash="dash", line_color="red",
                  annotation_text="Floor")
    fig.update_layout(
        title='Realised Profit Across Seeds',
        xaxis_title='Profit ($)',
        yaxis_title='Replications',
        height=400
    )
    return fig
