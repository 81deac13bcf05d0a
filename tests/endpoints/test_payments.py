"""Tests for payment requests."""

import pytest

from horizon_client.endpoints.payments import (
    AllPaymentsRequest,
    PaymentsForAccountRequest,
    PaymentsForLedgerRequest,
    PaymentsForTransactionRequest,
)
from horizon_client.models.assets import Order
from horizon_client.runtime.errors import UnsetIdentifierError, ValidationError

from helpers import ACCOUNT_ID, BASE_URL, TRANSACTION_HASH


def test_all_payments():
    request = AllPaymentsRequest().set_order(Order.DESC).set_include_failed(False)
    assert request.build_url(BASE_URL) == f"{BASE_URL}/payments?order=desc&include_failed=false"


def test_payments_for_account():
    request = PaymentsForAccountRequest().set_account_id(ACCOUNT_ID).set_cursor(10).set_limit(2)
    assert request.build_url(BASE_URL) == f"{BASE_URL}/accounts/{ACCOUNT_ID}/payments?cursor=10&limit=2"


def test_payments_for_account_omits_unset_include_failed():
    request = PaymentsForAccountRequest().set_account_id(ACCOUNT_ID)
    assert request.get_query_parameters() == ""


def test_payments_for_ledger():
    request = PaymentsForLedgerRequest().set_include_failed(True).set_limit(200).set_sequence(44)
    assert request.build_url(BASE_URL) == f"{BASE_URL}/ledgers/44/payments?limit=200&include_failed=true"


def test_payments_for_transaction():
    request = PaymentsForTransactionRequest().set_transaction_hash(TRANSACTION_HASH)
    assert request.build_url(BASE_URL) == f"{BASE_URL}/transactions/{TRANSACTION_HASH}/payments"


def test_invalid_transaction_hash():
    with pytest.raises(ValidationError, match="transaction hash must be 64 characters long"):
        PaymentsForTransactionRequest().set_transaction_hash(TRANSACTION_HASH[:-1])


def test_limit_above_maximum():
    with pytest.raises(ValidationError, match="limit must be between 1 and 200"):
        AllPaymentsRequest().set_limit(201)


def test_unset_account():
    with pytest.raises(UnsetIdentifierError, match="account id"):
        PaymentsForAccountRequest().build_url(BASE_URL)
