"""Tests for liquidity pool requests."""

import pytest

from horizon_client.endpoints.liquidity_pools import AllLiquidityPoolsRequest, SingleLiquidityPoolRequest
from horizon_client.runtime.errors import UnsetIdentifierError, ValidationError

from helpers import ACCOUNT_ID, BASE_URL, LIQUIDITY_POOL_ID, mk_alphanum12


class TestAllLiquidityPoolsRequest:
    """Reserves are joined into one ``reserves`` parameter."""

    def test_no_reserves(self):
        assert AllLiquidityPoolsRequest().build_url(BASE_URL) == f"{BASE_URL}/liquidity_pools"

    def test_single_reserve(self):
        request = AllLiquidityPoolsRequest().add_alphanumeric4_reserve("USD", "issuer")
        assert request.get_query_parameters() == "?reserves=USD%3Aissuer"

    def test_reserves_keep_insertion_order(self):
        request = (
            AllLiquidityPoolsRequest()
            .add_native_reserve()
            .add_alphanumeric12_reserve("LONGASSET", ACCOUNT_ID)
            .add_reserve(mk_alphanum12("OTHERASSET"))
        )
        assert request.get_query_parameters() == (
            f"?reserves=native%2CLONGASSET%3A{ACCOUNT_ID}%2COTHERASSET%3A{ACCOUNT_ID}"
        )

    def test_alphanumeric4_reserve_code_too_long(self):
        with pytest.raises(ValidationError, match="asset_code must be 4 characters or less"):
            AllLiquidityPoolsRequest().add_alphanumeric4_reserve("TOOLONGCODE", "issuer")

    def test_alphanumeric12_reserve_code_too_long(self):
        request = AllLiquidityPoolsRequest().add_native_reserve()
        with pytest.raises(ValidationError, match="asset_code must be 12 characters or less"):
            request.add_alphanumeric12_reserve("X" * 20, "issuer")
        assert request.get_query_parameters() == "?reserves=native"

    def test_reserves_after_pagination(self):
        request = AllLiquidityPoolsRequest().add_native_reserve().set_cursor(7)
        assert request.get_query_parameters() == "?cursor=7&reserves=native"

    def test_adding_reserve_leaves_receiver_unchanged(self):
        request = AllLiquidityPoolsRequest().add_native_reserve()
        request.add_alphanumeric4_reserve("USD", ACCOUNT_ID)
        assert request.get_query_parameters() == "?reserves=native"


class TestSingleLiquidityPoolRequest:
    """Tests for fetching one pool."""

    def test_build_url(self):
        request = SingleLiquidityPoolRequest().set_liquidity_pool_id(LIQUIDITY_POOL_ID)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/liquidity_pools/{LIQUIDITY_POOL_ID}"

    def test_non_hex_id(self):
        with pytest.raises(ValidationError, match="liquidity pool id must be hexadecimal"):
            SingleLiquidityPoolRequest().set_liquidity_pool_id("z" * 64)

    def test_unset_id(self):
        with pytest.raises(UnsetIdentifierError):
            SingleLiquidityPoolRequest().get_query_parameters()
