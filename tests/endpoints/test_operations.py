"""Tests for operation requests."""

import pytest

from horizon_client.endpoints.operations import (
    AllOperationsRequest,
    OperationsForAccountRequest,
    OperationsForLedgerRequest,
    OperationsForLiquidityPoolRequest,
    OperationsForTransactionRequest,
    SingleOperationRequest,
)
from horizon_client.models.assets import Order
from horizon_client.runtime.errors import UnsetIdentifierError, ValidationError

from helpers import ACCOUNT_ID, BASE_URL, LIQUIDITY_POOL_ID, TRANSACTION_HASH


class TestAllOperationsRequest:
    """``include_failed`` follows the pagination parameters."""

    def test_no_parameters(self):
        assert AllOperationsRequest().build_url(BASE_URL) == f"{BASE_URL}/operations"

    def test_include_failed_last(self):
        request = AllOperationsRequest().set_include_failed(True).set_limit(10).set_cursor(5)
        assert request.get_query_parameters() == "?cursor=5&limit=10&include_failed=true"

    def test_include_failed_false_is_sent(self):
        request = AllOperationsRequest().set_include_failed(False)
        assert request.get_query_parameters() == "?include_failed=false"


class TestSingleOperationRequest:
    def test_build_url(self):
        request = SingleOperationRequest().set_operation_id(3697472920621057)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/operations/3697472920621057"

    def test_invalid_id(self):
        with pytest.raises(ValidationError, match="invalid operation id"):
            SingleOperationRequest().set_operation_id("12ab")


class TestScopedOperations:
    """The scoping identifier is a path segment and must be set."""

    def test_for_account(self):
        request = OperationsForAccountRequest().set_account_id(ACCOUNT_ID).set_order(Order.DESC)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/accounts/{ACCOUNT_ID}/operations?order=desc"

    def test_for_ledger(self):
        request = OperationsForLedgerRequest().set_sequence(125).set_include_failed(True)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/ledgers/125/operations?include_failed=true"

    def test_for_liquidity_pool(self):
        request = OperationsForLiquidityPoolRequest().set_liquidity_pool_id(LIQUIDITY_POOL_ID)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/liquidity_pools/{LIQUIDITY_POOL_ID}/operations"

    def test_for_transaction(self):
        request = OperationsForTransactionRequest().set_transaction_hash(TRANSACTION_HASH).set_limit(3)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/transactions/{TRANSACTION_HASH}/operations?limit=3"

    def test_for_transaction_has_no_include_failed(self):
        assert not hasattr(OperationsForTransactionRequest(), "set_include_failed")

    @pytest.mark.parametrize("request_type", [
        OperationsForAccountRequest,
        OperationsForLedgerRequest,
        OperationsForLiquidityPoolRequest,
        OperationsForTransactionRequest,
    ])
    def test_unset_identifier(self, request_type):
        with pytest.raises(UnsetIdentifierError):
            request_type().set_limit(10).build_url(BASE_URL)
