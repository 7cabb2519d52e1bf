from unittest.mock import MagicMock, patch

import pytest
import requests

from frontend.utils import api_client
from frontend.utils.api_client import APIClient


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def mock_st():
    with patch("frontend.utils.api_client.st") as st:
        yield st


@patch("frontend.utils.api_client.requests.request")
def test_predict_posts_form(mock_request, mock_st):
    mock_request.return_value = _response({"score": 72})
    result = APIClient.predict({"studyHours": 10})
    assert result == {"score": 72}
    method, url = mock_request.call_args.args
    assert method == "POST"
    assert url == f"{api_client.BASE_URL}/api/predict"
    assert mock_request.call_args.kwargs["json"] == {"studyHours": 10}
    mock_st.error.assert_not_called()


@patch("frontend.utils.api_client.requests.request")
def test_http_error_is_reported_not_retried(mock_request, mock_st):
    resp = _response({})
    resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    mock_request.return_value = resp
    assert APIClient.predict({}) == {}
    assert mock_request.call_count == 1
    mock_st.error.assert_called_once()


@patch("time.sleep")
@patch("frontend.utils.api_client.requests.request")
def test_connection_error_is_retried(mock_request, _sleep, mock_st):
    mock_request.side_effect = [requests.ConnectionError("refused"), _response({"timeframe": "year"})]
    assert APIClient.get_dashboard("year") == {"timeframe": "year"}
    assert mock_request.call_count == 2
    assert mock_request.call_args.kwargs["params"] == {"timeframe": "year"}


@patch("time.sleep")
@patch("frontend.utils.api_client.requests.request")
def test_gives_up_after_three_attempts(mock_request, _sleep, mock_st):
    mock_request.side_effect = requests.ConnectionError("refused")
    assert APIClient.get_dashboard() == {}
    assert mock_request.call_count == 3
    mock_st.error.assert_called_once()


@patch("frontend.utils.api_client.requests.request")
def test_health(mock_request):
    mock_request.return_value = _response({"status": "healthy"})
    assert APIClient.health() is True
    mock_request.side_effect = requests.Timeout("slow")
    assert APIClient.health() is False
