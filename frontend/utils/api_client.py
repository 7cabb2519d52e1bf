# frontend/utils/api_client.py
import logging
import os
from typing import Any, Dict

import requests
import streamlit as st
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

BASE_URL = os.getenv("PREDICTOR_API_URL", "http://127.0.0.1:5010")  # Make sure backend runs on this port


@retry(
    retry=retry_if_exception_type(requests.ConnectionError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    reraise=True,
)
def _request(method: str, path: str, **kwargs) -> Dict[str, Any]:
    """Single HTTP call; connection errors are retried with backoff, anything else raises at once."""
    resp = requests.request(method, f"{BASE_URL}{path}", **kwargs)
    resp.raise_for_status()
    return resp.json()


class APIClient:
    @staticmethod
    def predict(form: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return _request("POST", "/api/predict", json=form, timeout=60)
        except requests.RequestException as e:
            logger.error(f"Prediction request failed: {e}")
            st.error(f"Prediction failed: {e}")
            return {}

    @staticmethod
    def get_dashboard(timeframe: str = "week") -> Dict[str, Any]:
        try:
            return _request("GET", "/api/dashboard", params={"timeframe": timeframe}, timeout=30)
        except requests.RequestException as e:
            logger.error(f"Dashboard request failed: {e}")
            st.error(f"Could not load dashboard: {e}")
            return {}

    @staticmethod
    def get_landing() -> Dict[str, Any]:
        try:
            return _request("GET", "/api/landing", timeout=30)
        except requests.RequestException:
            return {}

    @staticmethod
    def health() -> bool:
        try:
            return _request("GET", "/api/health", timeout=5).get("status") == "healthy"
        except requests.RequestException:
            return False
