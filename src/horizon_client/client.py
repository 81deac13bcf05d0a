"""
Horizon HTTP client.

``HorizonClient`` sends the requests built in ``horizon_client.endpoints``
and parses the response bodies into the records of
``horizon_client.models.records``. It owns one ``requests.Session``; close it
with ``close()`` or use the client as a context manager.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union

import requests

from . import __version__
from .endpoints import (
    AccountsRequest,
    AllAssetsRequest,
    AllClaimableBalancesRequest,
    AllEffectsRequest,
    AllLiquidityPoolsRequest,
    AllOffersRequest,
    AllOperationsRequest,
    AllPaymentsRequest,
    AllTradesRequest,
    AllTransactionsRequest,
    DetailsRequest,
    EffectsForAccountRequest,
    EffectsForLedgerRequest,
    EffectsForLiquidityPoolRequest,
    EffectsForOperationRequest,
    EffectsForTransactionRequest,
    FeeStatsRequest,
    FindPaymentPathsRequest,
    LedgersRequest,
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
from .endpoints.accounts import AccountFilter
from .endpoints.identifiers import (
    AccountId,
    BaseAsset,
    BuyingAsset,
    ClaimableBalanceId,
    CounterAsset,
    DestinationAmount,
    DestinationAsset,
    LedgerSequence,
    LiquidityPoolId,
    OfferId,
    OperationId,
    Resolution,
    SellingAsset,
    SourceAccount,
    SourceAmount,
    SourceAsset,
    TransactionHash,
)
from .endpoints.transactions import TransactionEnvelope
from .models.request import PostRequest, Request
from .models.records import (
    Account,
    AssetStat,
    ClaimableBalance,
    Effect,
    FeeStats,
    Ledger,
    LiquidityPool,
    Offer,
    Operation,
    OrderBook,
    Payment,
    PaymentPath,
    Trade,
    TradeAggregation,
    Transaction,
)
from .models.response import HorizonModel, Page
from .runtime.errors import ErrorCode, HorizonNetworkError, HorizonResponseError
from .runtime.validation import validate_base_url

ModelT = TypeVar("ModelT", bound=HorizonModel)

# Well-known Horizon servers
NETWORKS: Dict[str, str] = {
    "public": "https://horizon.stellar.org",
    "testnet": "https://horizon-testnet.stellar.org",
    "futurenet": "https://horizon-futurenet.stellar.org",
}


@dataclass
class ClientConfig:
    """Configuration for the Horizon client."""

    base_url: str
    timeout: float = 30.0
    debug: bool = False
    user_agent: str = f"stellar-horizon-client-python/{__version__}"


class HorizonClient:
    """
    Client for a Horizon server.

    Example:
        >>> with HorizonClient("testnet") as client:
        ...     page = client.get_all_ledgers(LedgersRequest().set_limit(2))
        ...     [ledger.sequence for ledger in page.records]
    """

    def __init__(self, config: Union[str, ClientConfig], session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: A base URL, a well-known network name (``public``,
                ``testnet``, ``futurenet``) or a ClientConfig
            session: Session to send requests with; the client creates and
                owns one when omitted

        Raises:
            ValidationError: If the base URL is not an http(s) URL
        """
        if isinstance(config, str):
            config = ClientConfig(base_url=config)
        base_url = NETWORKS.get(config.base_url.lower(), config.base_url)
        self.base_url = validate_base_url(base_url).rstrip("/")
        self.config = config

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            self.logger.setLevel(logging.DEBUG)

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        })

    @classmethod
    def for_network(cls, network: str, **kwargs: Any) -> HorizonClient:
        """Create a client for a well-known network."""
        return cls(ClientConfig(base_url=network, **kwargs))

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._session is not None and self._owns_session:
            self._session.close()
        self._session = None

    def __enter__(self) -> HorizonClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def get(self, request: Request, model: Type[ModelT]) -> ModelT:
        """
        Send a GET request and parse the body.

        Args:
            request: A fully built request
            model: Record or page type to parse the body into

        Returns:
            The parsed response

        Raises:
            HorizonNetworkError: On connection failures and timeouts
            HorizonResponseError: If Horizon answers with a non-success status
            ResponseParseError: If the body does not match ``model``
        """
        url = request.build_url(self.base_url)
        self.logger.debug("GET %s", url)
        response = self._send("GET", url)
        return model.from_json(response.text)

    def post(self, request: PostRequest, model: Type[ModelT]) -> ModelT:
        """Send a form-encoded POST request and parse the body."""
        url = request.build_url(self.base_url)
        self.logger.debug("POST %s", url)
        response = self._send("POST", url, data=request.get_body())
        return model.from_json(response.text)

    def _send(self, method: str, url: str, data: Optional[Dict[str, str]] = None) -> requests.Response:
        if self._session is None:
            raise HorizonNetworkError("client is closed", ErrorCode.CONNECTION_FAILED, {"url": url})
        try:
            if method == "POST":
                response = self._session.post(url, data=data, timeout=self.config.timeout)
            else:
                response = self._session.get(url, timeout=self.config.timeout)
        except requests.exceptions.Timeout as e:
            raise HorizonNetworkError(f"Request timed out: {url}", ErrorCode.TIMEOUT, {"url": url}, e)
        except requests.exceptions.ConnectionError as e:
            raise HorizonNetworkError(f"Connection failed: {url}", ErrorCode.CONNECTION_FAILED, {"url": url}, e)
        except requests.exceptions.RequestException as e:
            raise HorizonNetworkError(f"Network error: {e}", ErrorCode.NETWORK_ERROR, {"url": url}, e)

        self.logger.debug("%s %s -> %d", method, url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise HorizonResponseError(response.status_code, response.text, url)
        return response

    # ------------------------------------------------------------------
    # Accounts and assets
    # ------------------------------------------------------------------

    def get_account_list(self, request: AccountsRequest[AccountFilter]) -> Page[Account]:
        return self.get(request, Page[Account])

    def get_single_account(self, request: SingleAccountRequest[AccountId]) -> Account:
        return self.get(request, Account)

    def get_all_assets(self, request: AllAssetsRequest) -> Page[AssetStat]:
        return self.get(request, Page[AssetStat])

    # ------------------------------------------------------------------
    # Claimable balances
    # ------------------------------------------------------------------

    def get_all_claimable_balances(self, request: AllClaimableBalancesRequest) -> Page[ClaimableBalance]:
        return self.get(request, Page[ClaimableBalance])

    def get_single_claimable_balance(
        self, request: SingleClaimableBalanceRequest[ClaimableBalanceId]
    ) -> ClaimableBalance:
        return self.get(request, ClaimableBalance)

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------

    def get_all_effects(self, request: AllEffectsRequest) -> Page[Effect]:
        return self.get(request, Page[Effect])

    def get_effects_for_account(self, request: EffectsForAccountRequest) -> Page[Effect]:
        return self.get(request, Page[Effect])

    def get_effects_for_ledger(self, request: EffectsForLedgerRequest[LedgerSequence]) -> Page[Effect]:
        return self.get(request, Page[Effect])

    def get_effects_for_liquidity_pool(self, request: EffectsForLiquidityPoolRequest) -> Page[Effect]:
        return self.get(request, Page[Effect])

    def get_effects_for_operation(self, request: EffectsForOperationRequest) -> Page[Effect]:
        return self.get(request, Page[Effect])

    def get_effects_for_transaction(self, request: EffectsForTransactionRequest) -> Page[Effect]:
        return self.get(request, Page[Effect])

    # ------------------------------------------------------------------
    # Ledgers and fee stats
    # ------------------------------------------------------------------

    def get_all_ledgers(self, request: LedgersRequest) -> Page[Ledger]:
        return self.get(request, Page[Ledger])

    def get_single_ledger(self, request: SingleLedgerRequest[LedgerSequence]) -> Ledger:
        return self.get(request, Ledger)

    def get_fee_stats(self, request: Optional[FeeStatsRequest] = None) -> FeeStats:
        return self.get(request or FeeStatsRequest(), FeeStats)

    # ------------------------------------------------------------------
    # Liquidity pools
    # ------------------------------------------------------------------

    def get_all_liquidity_pools(self, request: AllLiquidityPoolsRequest) -> Page[LiquidityPool]:
        return self.get(request, Page[LiquidityPool])

    def get_single_liquidity_pool(self, request: SingleLiquidityPoolRequest[LiquidityPoolId]) -> LiquidityPool:
        return self.get(request, LiquidityPool)

    # ------------------------------------------------------------------
    # Offers and order book
    # ------------------------------------------------------------------

    def get_all_offers(self, request: AllOffersRequest) -> Page[Offer]:
        return self.get(request, Page[Offer])

    def get_offers_for_account(self, request: OffersForAccountRequest[AccountId]) -> Page[Offer]:
        return self.get(request, Page[Offer])

    def get_single_offer(self, request: SingleOfferRequest[OfferId]) -> Offer:
        return self.get(request, Offer)

    def get_order_book_details(self, request: DetailsRequest[SellingAsset, BuyingAsset]) -> OrderBook:
        return self.get(request, OrderBook)

    # ------------------------------------------------------------------
    # Operations and payments
    # ------------------------------------------------------------------

    def get_all_operations(self, request: AllOperationsRequest) -> Page[Operation]:
        return self.get(request, Page[Operation])

    def get_single_operation(self, request: SingleOperationRequest[OperationId]) -> Operation:
        return self.get(request, Operation)

    def get_operations_for_account(self, request: OperationsForAccountRequest[AccountId]) -> Page[Operation]:
        return self.get(request, Page[Operation])

    def get_operations_for_ledger(self, request: OperationsForLedgerRequest[LedgerSequence]) -> Page[Operation]:
        return self.get(request, Page[Operation])

    def get_operations_for_liquidity_pool(
        self, request: OperationsForLiquidityPoolRequest[LiquidityPoolId]
    ) -> Page[Operation]:
        return self.get(request, Page[Operation])

    def get_operations_for_transaction(
        self, request: OperationsForTransactionRequest[TransactionHash]
    ) -> Page[Operation]:
        return self.get(request, Page[Operation])

    def get_all_payments(self, request: AllPaymentsRequest) -> Page[Payment]:
        return self.get(request, Page[Payment])

    def get_payments_for_account(self, request: PaymentsForAccountRequest[AccountId]) -> Page[Payment]:
        return self.get(request, Page[Payment])

    def get_payments_for_ledger(self, request: PaymentsForLedgerRequest[LedgerSequence]) -> Page[Payment]:
        return self.get(request, Page[Payment])

    def get_payments_for_transaction(self, request: PaymentsForTransactionRequest[TransactionHash]) -> Page[Payment]:
        return self.get(request, Page[Payment])

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def get_find_payment_paths(
        self, request: FindPaymentPathsRequest[DestinationAsset, DestinationAmount, SourceAccount]
    ) -> Page[PaymentPath]:
        return self.get(request, Page[PaymentPath])

    def get_list_strict_receive_payment_paths(
        self, request: ListStrictReceivePaymentPathsRequest[DestinationAsset, DestinationAmount, SourceAccount]
    ) -> Page[PaymentPath]:
        return self.get(request, Page[PaymentPath])

    def get_list_strict_send_payment_paths(
        self, request: ListStrictSendPaymentPathsRequest[SourceAsset, SourceAmount]
    ) -> Page[PaymentPath]:
        return self.get(request, Page[PaymentPath])

    # ------------------------------------------------------------------
    # Trades
    # ------------------------------------------------------------------

    def get_all_trades(self, request: AllTradesRequest) -> Page[Trade]:
        return self.get(request, Page[Trade])

    def get_trades_for_account(self, request: TradesForAccountRequest[AccountId]) -> Page[Trade]:
        return self.get(request, Page[Trade])

    def get_trades_for_liquidity_pool(self, request: TradesForLiquidityPoolRequest[LiquidityPoolId]) -> Page[Trade]:
        return self.get(request, Page[Trade])

    def get_trades_for_offer(self, request: TradesForOfferRequest[OfferId]) -> Page[Trade]:
        return self.get(request, Page[Trade])

    def get_trade_aggregations(
        self, request: TradeAggregationsRequest[BaseAsset, CounterAsset, Resolution]
    ) -> Page[TradeAggregation]:
        return self.get(request, Page[TradeAggregation])

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def get_all_transactions(self, request: AllTransactionsRequest) -> Page[Transaction]:
        return self.get(request, Page[Transaction])

    def get_single_transaction(self, request: SingleTransactionRequest[TransactionHash]) -> Transaction:
        return self.get(request, Transaction)

    def get_transactions_for_account(self, request: TransactionsForAccountRequest[AccountId]) -> Page[Transaction]:
        return self.get(request, Page[Transaction])

    def get_transactions_for_ledger(
        self, request: TransactionsForLedgerRequest[LedgerSequence]
    ) -> Page[Transaction]:
        return self.get(request, Page[Transaction])

    def get_transactions_for_liquidity_pool(
        self, request: TransactionsForLiquidityPoolRequest[LiquidityPoolId]
    ) -> Page[Transaction]:
        return self.get(request, Page[Transaction])

    def post_transaction(self, request: PostTransactionRequest[TransactionEnvelope]) -> Transaction:
        """
        Submit a signed transaction envelope.

        Returns:
            The transaction as applied to the ledger

        Raises:
            HorizonResponseError: If Horizon rejects the transaction (HTTP 400)
        """
        return self.post(request, Transaction)


def public_client(**kwargs: Any) -> HorizonClient:
    """Create a client for the public network."""
    return HorizonClient.for_network("public", **kwargs)


def testnet_client(**kwargs: Any) -> HorizonClient:
    """Create a client for the test network."""
    return HorizonClient.for_network("testnet", **kwargs)


def futurenet_client(**kwargs: Any) -> HorizonClient:
    """Create a client for futurenet."""
    return HorizonClient.for_network("futurenet", **kwargs)


__all__ = [
    "NETWORKS",
    "ClientConfig",
    "HorizonClient",
    "public_client",
    "testnet_client",
    "futurenet_client",
]
