# frontend/components/dashboard_view.py
from datetime import datetime

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# Live figures are re-sampled on this timer
DASHBOARD_REFRESH_SECONDS = 30

TREND_SERIES = [
    ("score", "Score", "deepskyblue"),
    ("attendance", "Attendance", "mediumseagreen"),
    ("participation", "Participation", "orange"),
]

STAT_LABELS = [
    ("total_students", "Total Students", ""),
    ("average_score", "Average Score", "%"),
    ("top_performers", "Top Performers", ""),
    ("attendance_rate", "Attendance Rate", "%"),
    ("improvement_rate", "Improvement Rate", "%"),
    ("at_risk_students", "At-Risk Students", ""),
]


def render_stats(stats: dict):
    cols = st.columns(3)
    for i, (key, label, suffix) in enumerate(STAT_LABELS):
        stat = stats.get(key, {})
        value = stat.get("value", 0)
        cols[i % 3].metric(label, f"{value:,}{suffix}", f"{stat.get('change', 0.0):+.1f}%")


def render_dashboard(snapshot: dict):
    if not snapshot:
        st.info("Dashboard data unavailable. Is the backend running?")
        return

    st.caption(f"Timeframe: {snapshot.get('timeframe', 'week')} • generated {snapshot.get('generated_at', '')}")
    render_stats(snapshot.get("stats", {}))

    col1, col2 = st.columns([3, 2])
    with col1:
        st.subheader("Subject Performance")
        perf = pd.DataFrame(snapshot.get("performance", []))
        st.dataframe(perf, use_container_width=True, hide_index=True)
    with col2:
        st.subheader("Grade Distribution")
        grades = pd.DataFrame(snapshot.get("grade_distribution", []))
        if not grades.empty:
            grades["share"] = (grades["value"] / grades["value"].sum() * 100).round(0).astype(int).astype(str) + "%"
        st.dataframe(grades, use_container_width=True, hide_index=True)

    st.subheader("Performance Trends")
    trend = pd.DataFrame(snapshot.get("trend", []))
    st.plotly_chart(trend_figure(snapshot.get("trend", [])), use_container_width=True)
    with st.expander("Trend data"):
        st.dataframe(trend, use_container_width=True, hide_index=True)

    st.subheader("Recent Activity")
    st.dataframe(pd.DataFrame(snapshot.get("recent_activity", [])), use_container_width=True, hide_index=True)

    # Export
    st.download_button(
        label="Export Trend Data (CSV)",
        data=trend.to_csv(index=False),
        file_name=f"performance_trend_{snapshot.get('timeframe', 'week')}_{datetime.now().strftime('%Y%m%d_%H%M')}.csv",
        mime="text/csv",
        use_container_width=True
    )


def trend_figure(trend: list) -> go.Figure:
    months = [t.get("month") for t in trend]
    fig = go.Figure()
    for key, name, color in TREND_SERIES:
        fig.add_trace(go.Scatter(
            x=months,
            y=[t.get(key, 0) for t in trend],
            name=name,
            mode="lines",
            fill="tozeroy",
            line_color=color
        ))

    fig.update_layout(
        yaxis=dict(range=[0, 100]),
        title="Monthly Trend",
        height=350
    )
    return fig


@st.fragment(run_every=DASHBOARD_REFRESH_SECONDS)
def live_dashboard(fetch, timeframe: str):
    """Fetch and draw one snapshot; Streamlit reruns just this block on the refresh timer."""
    with st.spinner("Loading real-time data..."):
        snapshot = fetch(timeframe)
    render_dashboard(snapshot)
