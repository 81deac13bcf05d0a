"""
Request builders, one module per Horizon resource.

Every request is an immutable value: setters validate their argument and
return a new request. ``build_url(base_url)`` renders the final URL.
"""

from .accounts import AccountsRequest, SingleAccountRequest
from .assets import AllAssetsRequest
from .claimable_balances import AllClaimableBalancesRequest, SingleClaimableBalanceRequest
from .effects import (
    AllEffectsRequest,
    EffectsForAccountRequest,
    EffectsForLedgerRequest,
    EffectsForLiquidityPoolRequest,
    EffectsForOperationRequest,
    EffectsForTransactionRequest,
)
from .fee_stats import FeeStatsRequest
from .ledgers import LedgersRequest, SingleLedgerRequest
from .liquidity_pools import AllLiquidityPoolsRequest, SingleLiquidityPoolRequest
from .offers import AllOffersRequest, OffersForAccountRequest, SingleOfferRequest
from .operations import (
    AllOperationsRequest,
    SingleOperationRequest,
    OperationsForAccountRequest,
    OperationsForLedgerRequest,
    OperationsForLiquidityPoolRequest,
    OperationsForTransactionRequest,
)
from .order_book import DetailsRequest
from .paths import (
    FindPaymentPathsRequest,
    ListStrictReceivePaymentPathsRequest,
    ListStrictSendPaymentPathsRequest,
)
from .payments import (
    AllPaymentsRequest,
    PaymentsForAccountRequest,
    PaymentsForLedgerRequest,
    PaymentsForTransactionRequest,
)
from .trade_aggregations import TradeAggregationsRequest
from .trades import (
    TradeType,
    AllTradesRequest,
    TradesForAccountRequest,
    TradesForLiquidityPoolRequest,
    TradesForOfferRequest,
)
from .transactions import (
    AllTransactionsRequest,
    SingleTransactionRequest,
    TransactionsForAccountRequest,
    TransactionsForLedgerRequest,
    TransactionsForLiquidityPoolRequest,
    PostTransactionRequest,
)

__all__ = [
    # accounts
    "AccountsRequest",
    "SingleAccountRequest",
    # assets
    "AllAssetsRequest",
    # claimable balances
    "AllClaimableBalancesRequest",
    "SingleClaimableBalanceRequest",
    # effects
    "AllEffectsRequest",
    "EffectsForAccountRequest",
    "EffectsForLedgerRequest",
    "EffectsForLiquidityPoolRequest",
    "EffectsForOperationRequest",
    "EffectsForTransactionRequest",
    # fee stats
    "FeeStatsRequest",
    # ledgers
    "LedgersRequest",
    "SingleLedgerRequest",
    # liquidity pools
    "AllLiquidityPoolsRequest",
    "SingleLiquidityPoolRequest",
    # offers
    "AllOffersRequest",
    "OffersForAccountRequest",
    "SingleOfferRequest",
    # operations
    "AllOperationsRequest",
    "SingleOperationRequest",
    "OperationsForAccountRequest",
    "OperationsForLedgerRequest",
    "OperationsForLiquidityPoolRequest",
    "OperationsForTransactionRequest",
    # order book
    "DetailsRequest",
    # paths
    "FindPaymentPathsRequest",
    "ListStrictReceivePaymentPathsRequest",
    "ListStrictSendPaymentPathsRequest",
    # payments
    "AllPaymentsRequest",
    "PaymentsForAccountRequest",
    "PaymentsForLedgerRequest",
    "PaymentsForTransactionRequest",
    # trade aggregations
    "TradeAggregationsRequest",
    # trades
    "TradeType",
    "AllTradesRequest",
    "TradesForAccountRequest",
    "TradesForLiquidityPoolRequest",
    "TradesForOfferRequest",
    # transactions
    "AllTransactionsRequest",
    "SingleTransactionRequest",
    "TransactionsForAccountRequest",
    "TransactionsForLedgerRequest",
    "TransactionsForLiquidityPoolRequest",
    "PostTransactionRequest",
]
