"""Tests for the trade aggregation request."""

import pytest

from horizon_client.endpoints.trade_aggregations import TradeAggregationsRequest
from horizon_client.models.assets import NativeAsset, Order
from horizon_client.models.request import Pagination
from horizon_client.runtime.errors import UnsetIdentifierError, ValidationError

from helpers import ACCOUNT_ID, BASE_URL, mk_alphanum4

HOUR = 3_600_000


def complete_request():
    return (
        TradeAggregationsRequest()
        .set_base_asset(NativeAsset())
        .set_counter_asset(mk_alphanum4("USD"))
        .set_resolution(HOUR)
    )


class TestTradeAggregationsRequest:
    """Base, counter and resolution are required."""

    def test_required_only(self):
        assert complete_request().build_url(BASE_URL) == (
            f"{BASE_URL}/trade_aggregations"
            "?base_asset_type=native"
            "&counter_asset_type=credit_alphanum4&counter_asset_code=USD"
            f"&counter_asset_issuer={ACCOUNT_ID}"
            f"&resolution={HOUR}"
        )

    def test_full_query_order(self):
        request = (
            complete_request()
            .set_order(Order.DESC)
            .set_limit(100)
            .set_offset(2 * HOUR)
            .set_end_time(1_700_003_600_000)
            .set_start_time(1_700_000_000_000)
        )
        query = request.get_query_parameters()
        assert query.endswith(
            f"&start_time=1700000000000&end_time=1700003600000&resolution={HOUR}"
            f"&offset={2 * HOUR}&limit=100&order=desc"
        )

    def test_missing_resolution(self):
        request = TradeAggregationsRequest().set_base_asset(NativeAsset()).set_counter_asset(NativeAsset())
        with pytest.raises(UnsetIdentifierError, match="resolution"):
            request.build_url(BASE_URL)

    def test_unsupported_resolution(self):
        with pytest.raises(ValidationError, match="resolution must be one of"):
            TradeAggregationsRequest().set_resolution(1000)

    @pytest.mark.parametrize("offset", [-HOUR, HOUR + 1, 24 * HOUR])
    def test_invalid_offset(self, offset):
        with pytest.raises(ValidationError, match="offset"):
            complete_request().set_offset(offset)

    def test_start_after_end(self):
        request = complete_request().set_end_time(1000)
        with pytest.raises(ValidationError, match="start_time must not be after end_time"):
            request.set_start_time(2000)

    def test_end_before_start(self):
        request = complete_request().set_start_time(2000)
        with pytest.raises(ValidationError, match="end_time must not be before start_time"):
            request.set_end_time(1000)

    def test_equal_times_allowed(self):
        request = complete_request().set_start_time(1000).set_end_time(1000)
        assert "start_time=1000&end_time=1000" in request.get_query_parameters()

    def test_negative_timestamp(self):
        with pytest.raises(ValidationError, match="start_time must not be negative"):
            complete_request().set_start_time(-1)

    def test_limit_and_order_share_pagination(self):
        request = complete_request().set_limit(10).set_order(Order.ASC)
        assert request.pagination == Pagination().with_limit(10).with_order(Order.ASC)
        assert request.limit == 10
        assert request.order is Order.ASC
        assert request.get_query_parameters().endswith("&limit=10&order=asc")

    def test_no_cursor_setter(self):
        assert not hasattr(complete_request(), "set_cursor")

    def test_limit_range(self):
        with pytest.raises(ValidationError):
            complete_request().set_limit(0)
