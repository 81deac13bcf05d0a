"""
Trade requests.

``AllTradesRequest`` filters by trading pair: each side expands into the
``base_asset_*`` / ``counter_asset_*`` parameter triple. The scoped requests
list the trades of one account, liquidity pool or offer.
"""

from __future__ import annotations
from enum import Enum
from typing import Generic, List, Optional, Union

from ..models.assets import Asset
from ..models.request import PaginatedRequest
from ..runtime.query import Fragment, asset_type_fragments, fragment
from ..runtime.validation import validate_offer_id
from .identifiers import (
    AccountId,
    AccountIdT,
    LiquidityPoolId,
    LiquidityPoolIdT,
    NoAccountId,
    NoLiquidityPoolId,
    NoOfferId,
    OfferId,
    OfferIdT,
)
from .resources import ACCOUNTS_PATH, LIQUIDITY_POOLS_PATH, OFFERS_PATH, TRADES_PATH


class TradeType(str, Enum):
    """Which kind of trades to list."""

    ALL = "all"
    ORDERBOOK = "orderbook"
    LIQUIDITY_POOL = "liquidity_pool"

    def __str__(self) -> str:
        return self.value


class AllTradesRequest(PaginatedRequest):
    """
    List trades, ``/trades``.

    Example:
        >>> (AllTradesRequest()
        ...     .set_base_asset(native_asset())
        ...     .set_counter_asset(AlphaNum4Asset(code="USD", issuer=issuer))
        ...     .get_query_parameters())
        '?base_asset_type=native&counter_asset_type=credit_alphanum4&counter_asset_code=USD&counter_asset_issuer=G...'
    """

    base_asset: Optional[Asset] = None
    counter_asset: Optional[Asset] = None
    offer_id: Optional[str] = None
    trade_type: Optional[TradeType] = None

    def set_base_asset(self, base_asset: Asset) -> AllTradesRequest:
        return self._replace(base_asset=base_asset)

    def set_counter_asset(self, counter_asset: Asset) -> AllTradesRequest:
        return self._replace(counter_asset=counter_asset)

    def set_offer_id(self, offer_id: Union[int, str]) -> AllTradesRequest:
        """
        Only list trades originating from one offer.

        Raises:
            ValidationError: If the id is not a positive integer
        """
        return self._replace(offer_id=validate_offer_id(offer_id))

    def set_trade_type(self, trade_type: TradeType) -> AllTradesRequest:
        return self._replace(trade_type=TradeType(trade_type))

    def _resource_path(self) -> str:
        return TRADES_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            *asset_type_fragments("base", self.base_asset),
            *asset_type_fragments("counter", self.counter_asset),
            fragment("offer_id", self.offer_id),
            fragment("trade_type", self.trade_type),
            *self.pagination.fragments(),
        ]


class TradesForAccountRequest(PaginatedRequest, Generic[AccountIdT]):
    """Trades of one account, ``/accounts/{account_id}/trades``."""

    account_id: AccountIdT = NoAccountId()  # type: ignore[assignment]

    def set_account_id(self, account_id: str) -> TradesForAccountRequest[AccountId]:
        return self._advance(account_id=AccountId.validated(account_id))

    def _resource_path(self) -> str:
        return f"{ACCOUNTS_PATH}/{self.account_id.value}/{TRADES_PATH}"

    def get_query_parameters(self: TradesForAccountRequest[AccountId]) -> str:
        return super().get_query_parameters()

    def build_url(self: TradesForAccountRequest[AccountId], base_url: str) -> str:
        return super().build_url(base_url)


class TradesForLiquidityPoolRequest(PaginatedRequest, Generic[LiquidityPoolIdT]):
    """Trades against one liquidity pool, ``/liquidity_pools/{id}/trades``."""

    liquidity_pool_id: LiquidityPoolIdT = NoLiquidityPoolId()  # type: ignore[assignment]

    def set_liquidity_pool_id(self, liquidity_pool_id: str) -> TradesForLiquidityPoolRequest[LiquidityPoolId]:
        """
        Raises:
            ValidationError: If the id is not 64 hexadecimal characters
        """
        return self._advance(liquidity_pool_id=LiquidityPoolId.validated(liquidity_pool_id))

    def _resource_path(self) -> str:
        return f"{LIQUIDITY_POOLS_PATH}/{self.liquidity_pool_id.value}/{TRADES_PATH}"

    def get_query_parameters(self: TradesForLiquidityPoolRequest[LiquidityPoolId]) -> str:
        return super().get_query_parameters()

    def build_url(self: TradesForLiquidityPoolRequest[LiquidityPoolId], base_url: str) -> str:
        return super().build_url(base_url)


class TradesForOfferRequest(PaginatedRequest, Generic[OfferIdT]):
    """Trades filling one offer, ``/offers/{offer_id}/trades``."""

    offer_id: OfferIdT = NoOfferId()  # type: ignore[assignment]

    def set_offer_id(self, offer_id: Union[int, str]) -> TradesForOfferRequest[OfferId]:
        return self._advance(offer_id=OfferId.validated(offer_id))

    def _resource_path(self) -> str:
        return f"{OFFERS_PATH}/{self.offer_id.value}/{TRADES_PATH}"

    def get_query_parameters(self: TradesForOfferRequest[OfferId]) -> str:
        return super().get_query_parameters()

    def build_url(self: TradesForOfferRequest[OfferId], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = [
    "TradeType",
    "AllTradesRequest",
    "TradesForAccountRequest",
    "TradesForLiquidityPoolRequest",
    "TradesForOfferRequest",
]
