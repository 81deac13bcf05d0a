"""Tests for trade requests."""

import pytest

from horizon_client.endpoints.trades import (
    AllTradesRequest,
    TradeType,
    TradesForAccountRequest,
    TradesForLiquidityPoolRequest,
    TradesForOfferRequest,
)
from horizon_client.models.assets import NativeAsset, Order
from horizon_client.runtime.errors import UnsetIdentifierError, ValidationError

from helpers import ACCOUNT_ID, BASE_URL, LIQUIDITY_POOL_ID, mk_alphanum4, mk_alphanum12


class TestAllTradesRequest:
    """Asset triples, offer id and trade type come before pagination."""

    def test_no_filter(self):
        assert AllTradesRequest().build_url(BASE_URL) == f"{BASE_URL}/trades"

    def test_native_base_and_issued_counter(self):
        request = AllTradesRequest().set_counter_asset(mk_alphanum4("USD")).set_base_asset(NativeAsset())
        assert request.get_query_parameters() == (
            "?base_asset_type=native"
            "&counter_asset_type=credit_alphanum4&counter_asset_code=USD"
            f"&counter_asset_issuer={ACCOUNT_ID}"
        )

    def test_full_query(self):
        request = (
            AllTradesRequest()
            .set_limit(10)
            .set_trade_type(TradeType.ORDERBOOK)
            .set_offer_id(77)
            .set_base_asset(mk_alphanum12("LONGASSET"))
        )
        assert request.get_query_parameters() == (
            "?base_asset_type=credit_alphanum12&base_asset_code=LONGASSET"
            f"&base_asset_issuer={ACCOUNT_ID}&offer_id=77&trade_type=orderbook&limit=10"
        )

    def test_trade_type_from_string(self):
        request = AllTradesRequest().set_trade_type("liquidity_pool")
        assert request.get_query_parameters() == "?trade_type=liquidity_pool"

    def test_unknown_trade_type(self):
        with pytest.raises(ValueError):
            AllTradesRequest().set_trade_type("swap")

    def test_invalid_offer_id(self):
        with pytest.raises(ValidationError, match="offer id"):
            AllTradesRequest().set_offer_id(0)


class TestScopedTrades:
    """Trades below an account, pool or offer resource."""

    def test_for_account(self):
        request = TradesForAccountRequest().set_account_id(ACCOUNT_ID).set_order(Order.DESC)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/accounts/{ACCOUNT_ID}/trades?order=desc"

    def test_for_liquidity_pool(self):
        request = TradesForLiquidityPoolRequest().set_liquidity_pool_id(LIQUIDITY_POOL_ID)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/liquidity_pools/{LIQUIDITY_POOL_ID}/trades"

    def test_liquidity_pool_id_is_not_a_public_key(self):
        with pytest.raises(ValidationError, match="liquidity pool id"):
            TradesForLiquidityPoolRequest().set_liquidity_pool_id(ACCOUNT_ID)

    def test_for_offer(self):
        request = TradesForOfferRequest().set_offer_id("12").set_limit(4)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/offers/12/trades?limit=4"

    def test_unset_offer(self):
        with pytest.raises(UnsetIdentifierError, match="offer id"):
            TradesForOfferRequest().build_url(BASE_URL)
