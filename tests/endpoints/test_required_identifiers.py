"""Every request with a required identifier refuses to build until it is set."""

import pytest

from horizon_client.endpoints import (
    AccountsRequest,
    DetailsRequest,
    EffectsForLedgerRequest,
    FindPaymentPathsRequest,
    ListStrictReceivePaymentPathsRequest,
    ListStrictSendPaymentPathsRequest,
    OffersForAccountRequest,
    OperationsForAccountRequest,
    OperationsForLedgerRequest,
    OperationsForLiquidityPoolRequest,
    OperationsForTransactionRequest,
    PaymentsForAccountRequest,
    PaymentsForLedgerRequest,
    PaymentsForTransactionRequest,
    PostTransactionRequest,
    SingleAccountRequest,
    SingleClaimableBalanceRequest,
    SingleLedgerRequest,
    SingleLiquidityPoolRequest,
    SingleOfferRequest,
    SingleOperationRequest,
    SingleTransactionRequest,
    TradeAggregationsRequest,
    TradesForAccountRequest,
    TradesForLiquidityPoolRequest,
    TradesForOfferRequest,
    TransactionsForAccountRequest,
    TransactionsForLedgerRequest,
    TransactionsForLiquidityPoolRequest,
)
from horizon_client.runtime.errors import ErrorCode, UnsetIdentifierError

from helpers import BASE_URL

UNSET_REQUESTS = [
    AccountsRequest,
    SingleAccountRequest,
    SingleClaimableBalanceRequest,
    EffectsForLedgerRequest,
    SingleLedgerRequest,
    SingleLiquidityPoolRequest,
    OffersForAccountRequest,
    SingleOfferRequest,
    SingleOperationRequest,
    OperationsForAccountRequest,
    OperationsForLedgerRequest,
    OperationsForLiquidityPoolRequest,
    OperationsForTransactionRequest,
    DetailsRequest,
    FindPaymentPathsRequest,
    ListStrictReceivePaymentPathsRequest,
    ListStrictSendPaymentPathsRequest,
    PaymentsForAccountRequest,
    PaymentsForLedgerRequest,
    PaymentsForTransactionRequest,
    TradeAggregationsRequest,
    TradesForAccountRequest,
    TradesForLiquidityPoolRequest,
    TradesForOfferRequest,
    SingleTransactionRequest,
    TransactionsForAccountRequest,
    TransactionsForLedgerRequest,
    TransactionsForLiquidityPoolRequest,
]


class TestUnsetIdentifiers:
    """Building an unset request raises instead of producing a URL."""

    @pytest.mark.parametrize("request_type", UNSET_REQUESTS, ids=lambda cls: cls.__name__)
    def test_build_url_raises(self, request_type):
        with pytest.raises(UnsetIdentifierError) as exc_info:
            request_type().build_url(BASE_URL)
        assert exc_info.value.code == ErrorCode.UNSET_IDENTIFIER

    @pytest.mark.parametrize("request_type", UNSET_REQUESTS, ids=lambda cls: cls.__name__)
    def test_query_parameters_raise(self, request_type):
        with pytest.raises(UnsetIdentifierError):
            request_type().get_query_parameters()

    def test_path_only_identifier(self):
        with pytest.raises(UnsetIdentifierError, match="ledger sequence"):
            SingleLedgerRequest().get_query_parameters()

    def test_post_body_raises(self):
        with pytest.raises(UnsetIdentifierError, match="transaction envelope"):
            PostTransactionRequest().get_body()

    def test_set_request_builds(self):
        assert SingleLedgerRequest().set_sequence(7).get_query_parameters() == ""
