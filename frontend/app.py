# frontend/app.py
import streamlit as st
from pathlib import Path
import sys

# Add project root to path
CURRENT_DIR = Path(__file__).parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from frontend.utils.api_client import APIClient
from frontend.utils.form_fields import PREDICTOR_FIELDS, build_payload, empty_form
from frontend.components.prediction_report import render_prediction
from frontend.components.dashboard_view import DASHBOARD_REFRESH_SECONDS, live_dashboard
from frontend.components.landing import render_landing

st.set_page_config(page_title="Student Performance Predictor", layout="wide", initial_sidebar_state="expanded")
st.title("Student Performance Predictor")

API = APIClient()

# ========================
# Session State Init
# ========================
if "form_values" not in st.session_state:
    st.session_state.form_values = empty_form()
if "prediction" not in st.session_state:
    st.session_state.prediction = None
if "form_version" not in st.session_state:
    st.session_state.form_version = 0

# ========================
# Sidebar
# ========================
with st.sidebar:
    st.header("Navigation")
    page = st.radio("Go to", ["Home", "Predictor", "Dashboard"], label_visibility="collapsed")
    if API.health():
        st.success("Backend online")
    else:
        st.error("Backend offline")


# ========================
# Pages
# ========================
def predictor_page():
    st.subheader("AI Performance Predictor")
    st.markdown("Enter student details to get personalized insights and predictions")

    col1, col2 = st.columns([1, 1])

    with col1:
        st.markdown("**Student Parameters**")
        version = st.session_state.form_version
        with st.form("predict_form"):
            values = {}
            grid = st.columns(2)
            for i, field in enumerate(PREDICTOR_FIELDS):
                values[field.key] = grid[i % 2].number_input(
                    field.label,
                    min_value=field.min_value,
                    max_value=field.max_value,
                    step=field.step,
                    value=st.session_state.form_values.get(field.key),
                    placeholder=field.placeholder,
                    key=f"{field.key}_{version}",
                )

            submitted = st.form_submit_button("Generate Prediction", type="primary", use_container_width=True)

        if submitted:
            st.session_state.form_values = values
            with st.spinner("Analyzing..."):
                result = API.predict(build_payload(values))
            if result:
                st.session_state.prediction = result
                st.success("Prediction generated successfully!")

        if st.session_state.prediction and st.button("New Prediction", use_container_width=True):
            st.session_state.form_values = empty_form()
            st.session_state.prediction = None
            # fresh widget keys clear the old inputs
            st.session_state.form_version += 1
            st.rerun()

    with col2:
        st.markdown("**Analysis Results**")
        render_prediction(st.session_state.prediction)


def dashboard_page():
    st.subheader("Performance Dashboard")
    c1, c2 = st.columns([3, 1])
    timeframe = c1.selectbox(
        "Timeframe",
        ["week", "month", "quarter", "year"],
        format_func=lambda t: f"This {t.title()}",
    )
    if c2.button("Refresh", use_container_width=True):
        st.rerun()
    st.caption(f"Auto-refreshes every {DASHBOARD_REFRESH_SECONDS} seconds")

    live_dashboard(API.get_dashboard, timeframe)


if page == "Home":
    render_landing(API.get_landing())
elif page == "Predictor":
    predictor_page()
else:
    dashboard_page()
