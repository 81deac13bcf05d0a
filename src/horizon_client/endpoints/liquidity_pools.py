"""
Liquidity pool requests.

- ``AllLiquidityPoolsRequest``: list pools, optionally by reserve assets
- ``SingleLiquidityPoolRequest``: one pool by id
"""

from __future__ import annotations
from typing import Generic, List, Tuple

from ..models.assets import AlphaNum4Asset, AlphaNum12Asset, Asset, NativeAsset
from ..models.request import PaginatedRequest, Request
from ..runtime.query import Fragment, encode_asset_list
from ..runtime.validation import validate_asset_code
from .identifiers import LiquidityPoolId, LiquidityPoolIdT, NoLiquidityPoolId
from .resources import LIQUIDITY_POOLS_PATH


class AllLiquidityPoolsRequest(PaginatedRequest):
    """
    List liquidity pools, ``/liquidity_pools``.

    Reserves are kept in the order they are added and are sent as one
    ``reserves`` parameter:

        >>> (AllLiquidityPoolsRequest()
        ...     .add_native_reserve()
        ...     .add_alphanumeric4_reserve("USD", "issuer")
        ...     .get_query_parameters())
        '?reserves=native%2CUSD%3Aissuer'
    """

    reserves: Tuple[Asset, ...] = ()

    def add_reserve(self, asset: Asset) -> AllLiquidityPoolsRequest:
        return self._replace(reserves=(*self.reserves, asset))

    def add_native_reserve(self) -> AllLiquidityPoolsRequest:
        return self.add_reserve(NativeAsset())

    def add_alphanumeric4_reserve(self, asset_code: str, asset_issuer: str) -> AllLiquidityPoolsRequest:
        """
        Raises:
            ValidationError: If the code is empty or longer than 4 characters
        """
        validate_asset_code(asset_code, 4)
        return self.add_reserve(AlphaNum4Asset(code=asset_code, issuer=asset_issuer))

    def add_alphanumeric12_reserve(self, asset_code: str, asset_issuer: str) -> AllLiquidityPoolsRequest:
        """
        Raises:
            ValidationError: If the code is empty or longer than 12 characters
        """
        validate_asset_code(asset_code)
        return self.add_reserve(AlphaNum12Asset(code=asset_code, issuer=asset_issuer))

    def _resource_path(self) -> str:
        return LIQUIDITY_POOLS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [*self.pagination.fragments(), encode_asset_list("reserves", self.reserves)]


class SingleLiquidityPoolRequest(Request, Generic[LiquidityPoolIdT]):
    """Details of one liquidity pool, ``/liquidity_pools/{id}``."""

    liquidity_pool_id: LiquidityPoolIdT = NoLiquidityPoolId()  # type: ignore[assignment]

    def set_liquidity_pool_id(self, liquidity_pool_id: str) -> SingleLiquidityPoolRequest[LiquidityPoolId]:
        """
        Raises:
            ValidationError: If the id is not 64 hexadecimal characters
        """
        return self._advance(liquidity_pool_id=LiquidityPoolId.validated(liquidity_pool_id))

    def _resource_path(self) -> str:
        return f"{LIQUIDITY_POOLS_PATH}/{self.liquidity_pool_id.value}"

    def get_query_parameters(self: SingleLiquidityPoolRequest[LiquidityPoolId]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleLiquidityPoolRequest[LiquidityPoolId], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = ["AllLiquidityPoolsRequest", "SingleLiquidityPoolRequest"]
