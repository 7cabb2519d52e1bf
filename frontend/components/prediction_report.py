# frontend/components/prediction_report.py
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

GRADE_ICONS = {"A": "🟢", "B": "🔵", "C": "🟡", "D": "🟠", "F": "🔴"}


def radar_frame(radar_data: list) -> pd.DataFrame:
    rows = [
        {"Area": p.get("subject"), "Value": round(float(p.get("value", 0.0)), 1), "Full Mark": p.get("full_mark", 100)}
        for p in radar_data
    ]
    return pd.DataFrame(rows, columns=["Area", "Value", "Full Mark"])


def radar_figure(radar_data: list) -> go.Figure:
    subjects = [p.get("subject") for p in radar_data]
    values = [float(p.get("value", 0.0)) for p in radar_data]

    fig = go.Figure(data=go.Scatterpolar(
        r=values,
        theta=subjects,
        fill='toself',
        name="Student",
        line_color='deepskyblue',
        fillcolor='rgba(135, 206, 250, 0.3)'
    ))

    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 100])),
        showlegend=False,
        title="Performance Radar",
        height=400
    )
    return fig


def render_insight_list(title: str, items: list, bullet: str = "•", numbered: bool = False):
    st.markdown(f"**{title}**")
    for i, item in enumerate(items, start=1):
        prefix = f"{i}." if numbered else bullet
        st.markdown(f"{prefix} {item}")


def render_prediction(result: dict):
    if not result:
        st.info("Fill in the form and click predict to get a detailed analysis.")
        return

    grade = result.get("grade", {})
    letter = grade.get("letter", "?")

    c1, c2, c3 = st.columns(3)
    c1.metric("Predicted Score", f"{result.get('score', 0)}%")
    c2.metric("Grade", f"{GRADE_ICONS.get(letter, '')} {letter}", grade.get("description", ""), delta_color="off")
    c3.metric("Confidence", f"{result.get('confidence', 0)}%")
    st.progress(min(100, max(0, int(result.get("score", 0)))) / 100)

    radar_data = result.get("radar_data", [])
    st.plotly_chart(radar_figure(radar_data), use_container_width=True)
    with st.expander("Performance Profile"):
        st.dataframe(radar_frame(radar_data), use_container_width=True, hide_index=True)

    left, right = st.columns(2)
    with left:
        render_insight_list("Strengths", result.get("strengths", []), bullet="✓")
    with right:
        render_insight_list("Areas for Improvement", result.get("weaknesses", []))

    render_insight_list("Recommended Study Plan", result.get("study_plan", []), numbered=True)

    st.divider()
    st.markdown("**Detailed Recommendation**")
    st.write(result.get("recommendation", ""))
    st.caption("* Rule-based prediction from the entered habits. Actual results may vary.")
