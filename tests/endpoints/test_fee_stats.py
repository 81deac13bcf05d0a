"""Tests for the fee statistics request."""

from horizon_client.endpoints.fee_stats import FeeStatsRequest

from helpers import BASE_URL


def test_build_url():
    assert FeeStatsRequest().build_url(BASE_URL) == f"{BASE_URL}/fee_stats"


def test_no_query_parameters():
    assert FeeStatsRequest().get_query_parameters() == ""
